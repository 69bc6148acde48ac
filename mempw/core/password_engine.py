r"""
Word-based password construction.

Passwords are built from unique catalog words joined in camel case
("lemonRiverTiger"), optionally passed through a leetspeak substitution
("l3m0nR!v3r7!g3r").
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from mempw.core.randomness import SYSTEM_INDEX_SOURCE, IndexSource
from mempw.core.word_catalog import DEFAULT_CATALOG, WordCatalog


# ---------------- Word selection (rejection sampling) ----------------

def select_random_words(
    min_length: int,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> List[str]:
    """Draw unique catalog words until their combined length reaches `min_length`.

    An index that was already drawn is rejected and redrawn. The last word may
    overshoot `min_length`; nothing is truncated.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    rng = SYSTEM_INDEX_SOURCE if rng is None else rng

    size = len(catalog)
    selected: list[str] = []
    used: set[int] = set()
    current_length = 0
    while current_length < min_length:
        index = rng.randbelow(size)
        while index in used:
            index = rng.randbelow(size)
        used.add(index)
        word = catalog[index]
        selected.append(word)
        current_length += len(word)
    return selected


# ---------------- Camel-case assembly ----------------

def convert_to_camel_case(words: Sequence[str]) -> str:
    if not words:
        return ""
    out = [words[0].lower()]
    for word in words[1:]:
        if word:
            out.append(word[0].upper() + word[1:].lower())
    return "".join(out)


# ---------------- Leetspeak substitution ----------------

_SPECIAL_CHARACTER_MAP = {
    "a": "@",
    "s": "$",
    "o": "0",
    "i": "!",
    "e": "3",
    "t": "7",
}
_SPECIAL_CHARACTER_TABLE = str.maketrans(
    {
        **_SPECIAL_CHARACTER_MAP,
        **{src.upper(): dst for src, dst in _SPECIAL_CHARACTER_MAP.items()},
    }
)
SUBSTITUTED_CHARACTERS = frozenset("aAsSoOiIeEtT")


def replace_special_characters(value: str) -> str:
    return value.translate(_SPECIAL_CHARACTER_TABLE)


def build_password(
    min_length: int,
    replace_special: bool,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> tuple[str, int]:
    """Return the assembled password and the number of words it was built from.

    Callers are expected to have validated `min_length` already.
    """
    words = select_random_words(min_length, catalog, rng)
    password = convert_to_camel_case(words)
    if replace_special:
        # Substitution keeps string length, so length accounting above still holds.
        password = replace_special_characters(password)
    return password, len(words)
