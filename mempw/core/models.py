from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


MIN_MIN_LENGTH_EXCLUSIVE = 5
MAX_MIN_LENGTH = 1000
MIN_COUNT = 1
MAX_COUNT = 100
DEFAULT_MIN_LENGTH = 16
DEFAULT_COUNT = 1


@dataclass(frozen=True)
class PasswordRequest:
    min_length: int = DEFAULT_MIN_LENGTH
    replace_special_characters: bool = False
    count: int = DEFAULT_COUNT


@dataclass(frozen=True)
class PasswordResult:
    outputs: Tuple[str, ...]
    word_counts: Tuple[int, ...]

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        if not show_meta:
            return self.outputs

        return tuple(
            f"{value}\t[words={word_count} length={len(value)}]"
            for value, word_count in zip(self.outputs, self.word_counts)
        )
