from __future__ import annotations

import unittest

from mempw.api import build_multiple_passwords_tool, build_password_tool
from mempw.core.password_engine import SUBSTITUTED_CHARACTERS
from mempw.core.randomness import SeededIndexSource


class PasswordToolTests(unittest.TestCase):
    def test_single_password(self) -> None:
        out = build_password_tool({"minLength": 12, "replaceSpecialCharacters": False})
        self.assertFalse(out.startswith("Error:"))
        self.assertGreaterEqual(len(out), 12)
        self.assertTrue(out.isalpha())

    def test_single_password_with_substitution(self) -> None:
        out = build_password_tool({"minLength": 40, "replaceSpecialCharacters": True})
        self.assertGreaterEqual(len(out), 40)
        self.assertFalse(set(out) & SUBSTITUTED_CHARACTERS)

    def test_single_password_out_of_range_becomes_error_text(self) -> None:
        self.assertEqual(
            build_password_tool({"minLength": 3, "replaceSpecialCharacters": False}),
            "Error: min_length must be greater than 5 (got 3)",
        )
        self.assertEqual(
            build_password_tool({"minLength": 1001, "replaceSpecialCharacters": True}),
            "Error: min_length must be less than or equal to 1000 (got 1001)",
        )

    def test_malformed_arguments_become_error_text(self) -> None:
        self.assertEqual(build_password_tool("nope"), "Error: password payload must be a JSON object")
        self.assertTrue(build_password_tool({"minLength": 10}).startswith("Error: password payload is missing"))

    def test_seeded_tool_output_is_reproducible(self) -> None:
        args = {"minLength": 20, "replaceSpecialCharacters": False}
        self.assertEqual(
            build_password_tool(args, rng=SeededIndexSource(11)),
            build_password_tool(args, rng=SeededIndexSource(11)),
        )


class MultiplePasswordsToolTests(unittest.TestCase):
    def test_batch_is_newline_joined(self) -> None:
        out = build_multiple_passwords_tool({"count": 5, "minLength": 10, "replaceSpecialCharacters": True})
        lines = out.split("\n")
        self.assertEqual(len(lines), 5)
        for line in lines:
            self.assertGreaterEqual(len(line), 10)
            self.assertFalse(set(line) & SUBSTITUTED_CHARACTERS)

    def test_batch_count_out_of_range(self) -> None:
        self.assertEqual(
            build_multiple_passwords_tool({"count": 101, "minLength": 10, "replaceSpecialCharacters": False}),
            "Error: count must be less than or equal to 100 (got 101)",
        )
        self.assertEqual(
            build_multiple_passwords_tool({"count": 0, "minLength": 10, "replaceSpecialCharacters": False}),
            "Error: count must be greater than or equal to 1 (got 0)",
        )

    def test_batch_min_length_out_of_range(self) -> None:
        self.assertEqual(
            build_multiple_passwords_tool({"count": 2, "minLength": 5, "replaceSpecialCharacters": False}),
            "Error: min_length must be greater than 5 (got 5)",
        )


if __name__ == "__main__":
    unittest.main()
