from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from mempw.core.error_dialect import CatalogError
from mempw.core.models import MAX_MIN_LENGTH
from mempw.core.word_catalog import (
    DEFAULT_CATALOG,
    MAX_CATALOG_FILE_BYTES,
    WordCatalog,
    dedupe_keep_order,
    load_word_catalog,
)


def _words(count: int, prefix: str = "word") -> list[str]:
    out = []
    for i in range(count):
        value, chars = i, []
        for _ in range(4):
            value, rem = divmod(value, 26)
            chars.append(chr(ord("a") + rem))
        out.append(prefix + "".join(chars))
    return out


class WordCatalogTests(unittest.TestCase):
    def test_default_catalog_satisfies_invariants(self) -> None:
        self.assertGreater(len(DEFAULT_CATALOG), 1000)
        self.assertGreaterEqual(DEFAULT_CATALOG.total_length, MAX_MIN_LENGTH)
        self.assertEqual(len(set(DEFAULT_CATALOG)), len(DEFAULT_CATALOG))
        for word in DEFAULT_CATALOG:
            self.assertTrue(word.isalpha() and word.islower() and word.isascii(), word)

    def test_catalog_is_indexed_and_immutable(self) -> None:
        catalog = WordCatalog(_words(125))
        self.assertIsInstance(catalog.words, tuple)
        self.assertEqual(catalog[0], "wordaaaa")
        self.assertEqual(catalog[1], "wordbaaa")
        with self.assertRaises(AttributeError):
            catalog.words = ()  # type: ignore[misc]

    def test_empty_catalog_rejected(self) -> None:
        with self.assertRaisesRegex(CatalogError, "empty"):
            WordCatalog(())

    def test_non_lowercase_word_rejected(self) -> None:
        with self.assertRaisesRegex(CatalogError, "lowercase ASCII"):
            WordCatalog(tuple(_words(125)) + ("Capital",))
        with self.assertRaisesRegex(CatalogError, "lowercase ASCII"):
            WordCatalog(tuple(_words(125)) + ("",))
        with self.assertRaisesRegex(CatalogError, "lowercase ASCII"):
            WordCatalog(tuple(_words(125)) + ("café",))

    def test_duplicate_word_rejected(self) -> None:
        with self.assertRaisesRegex(CatalogError, "unique"):
            WordCatalog(tuple(_words(125)) + ("wordaaaa",))

    def test_catalog_too_short_in_total_rejected(self) -> None:
        # 124 words of 8 characters = 992 characters, below the longest accepted minimum length.
        with self.assertRaisesRegex(CatalogError, "too small"):
            WordCatalog(tuple(_words(124)))
        self.assertEqual(WordCatalog(tuple(_words(125))).total_length, 1000)

    def test_catalog_errors_carry_code(self) -> None:
        with self.assertRaises(CatalogError) as ctx:
            WordCatalog(())
        self.assertEqual(ctx.exception.code, "invalid_catalog")

    def test_dedupe_keep_order(self) -> None:
        self.assertEqual(dedupe_keep_order(["Lemon", "river", " lemon ", "", "tiger"]), ["lemon", "river", "tiger"])


class LoadWordCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="mempw_catalog_"))

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _write(self, name: str, text: str) -> Path:
        path = self._tmp / name
        path.write_text(text, encoding="utf-8", newline="\n")
        return path

    def test_missing_file_raises(self) -> None:
        with self.assertRaisesRegex(CatalogError, "not found"):
            load_word_catalog(str(self._tmp / "missing.txt"))

    def test_directory_raises(self) -> None:
        with self.assertRaisesRegex(CatalogError, "not a file"):
            load_word_catalog(str(self._tmp))

    def test_oversize_file_raises(self) -> None:
        path = self._tmp / "huge.txt"
        with path.open("wb") as handle:
            handle.truncate(MAX_CATALOG_FILE_BYTES + 1)
        with self.assertRaisesRegex(CatalogError, "too large"):
            load_word_catalog(str(path))

    def test_whitespace_word_raises(self) -> None:
        path = self._write("ws.txt", "\n".join(_words(125) + ["hello world"]) + "\n")
        with self.assertRaisesRegex(CatalogError, "whitespace"):
            load_word_catalog(str(path))

    def test_duplicate_word_raises(self) -> None:
        path = self._write("dupes.txt", "\n".join(_words(125) + ["wordaaaa"]) + "\n")
        with self.assertRaisesRegex(CatalogError, "unique"):
            load_word_catalog(str(path))

    def test_valid_file_loads_skipping_blank_lines_and_bom(self) -> None:
        path = self._write("ok.txt", "\ufeff" + "\n\n".join(_words(125)) + "\n\n")
        catalog = load_word_catalog(str(path))
        self.assertEqual(len(catalog), 125)
        self.assertEqual(catalog[0], "wordaaaa")


if __name__ == "__main__":
    unittest.main()
