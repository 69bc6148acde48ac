from __future__ import annotations

from typing import List, Optional

from mempw.core import password_engine as engine
from mempw.core.error_dialect import MemPwError, OutOfRangeError
from mempw.core.models import (
    MAX_COUNT,
    MAX_MIN_LENGTH,
    MIN_COUNT,
    MIN_MIN_LENGTH_EXCLUSIVE,
    PasswordRequest,
    PasswordResult,
)
from mempw.core.randomness import IndexSource
from mempw.core.word_catalog import WordCatalog


def _require_int(value: object, param: str) -> None:
    # bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MemPwError("invalid_type", f"{param} must be an integer (got {value!r})")


def validate_minimum_length(min_length: int) -> None:
    _require_int(min_length, "min_length")
    if min_length <= MIN_MIN_LENGTH_EXCLUSIVE:
        raise OutOfRangeError("min_length", "greater than", MIN_MIN_LENGTH_EXCLUSIVE, min_length)
    if min_length > MAX_MIN_LENGTH:
        raise OutOfRangeError("min_length", "less than or equal to", MAX_MIN_LENGTH, min_length)


def validate_count(count: int) -> None:
    _require_int(count, "count")
    if count < MIN_COUNT:
        raise OutOfRangeError("count", "greater than or equal to", MIN_COUNT, count)
    if count > MAX_COUNT:
        raise OutOfRangeError("count", "less than or equal to", MAX_COUNT, count)


def generate_password(
    min_length: int,
    replace_special_characters: bool,
    *,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> str:
    validate_minimum_length(min_length)
    password, _ = engine.build_password(min_length, replace_special_characters, catalog, rng)
    return password


def generate_passwords(
    count: int,
    min_length: int,
    replace_special_characters: bool,
    *,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> List[str]:
    validate_count(count)
    validate_minimum_length(min_length)
    return [
        generate_password(min_length, replace_special_characters, catalog=catalog, rng=rng)
        for _ in range(count)
    ]


def generate(
    request: PasswordRequest,
    *,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> PasswordResult:
    validate_count(request.count)
    validate_minimum_length(request.min_length)

    outputs: list[str] = []
    word_counts: list[int] = []
    for _ in range(request.count):
        password, word_count = engine.build_password(
            request.min_length,
            request.replace_special_characters,
            catalog,
            rng,
        )
        outputs.append(password)
        word_counts.append(word_count)
    return PasswordResult(outputs=tuple(outputs), word_counts=tuple(word_counts))
