#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys

from mempw.core.error_dialect import format_error_text
from mempw.core.models import DEFAULT_COUNT, DEFAULT_MIN_LENGTH, PasswordRequest
from mempw.core.password_service import generate
from mempw.core.randomness import SeededIndexSource
from mempw.core.word_catalog import load_word_catalog


def _parse_env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc


def _parse_env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Memorable password generator (camel-cased dictionary words)")

    parser.add_argument(
        "-l",
        "--min-length",
        type=int,
        default=_parse_env_int("MEMPW_MIN_LENGTH", DEFAULT_MIN_LENGTH),
        help="minimum password length, 6-1000 (env: MEMPW_MIN_LENGTH)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=_parse_env_int("MEMPW_COUNT", DEFAULT_COUNT),
        help="number of passwords to print, 1-100 (env: MEMPW_COUNT)",
    )
    parser.add_argument(
        "-r",
        "--replace-special-characters",
        action="store_true",
        default=_parse_env_bool("MEMPW_REPLACE_SPECIAL_CHARACTERS", False),
        help="substitute a/s/o/i/e/t with @/$/0/!/3/7 (env: MEMPW_REPLACE_SPECIAL_CHARACTERS)",
    )
    parser.add_argument(
        "--word-catalog",
        default=os.environ.get("MEMPW_WORD_CATALOG", ""),
        help="path to a custom word list, one lowercase word per line (env: MEMPW_WORD_CATALOG)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output (not for real passwords)")
    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print word count and length per output.",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(argv)
        catalog = load_word_catalog(args.word_catalog) if args.word_catalog.strip() else None
        rng = SeededIndexSource(args.seed) if args.seed is not None else None
        request = PasswordRequest(
            min_length=args.min_length,
            replace_special_characters=args.replace_special_characters,
            count=args.count,
        )
        result = generate(request, catalog=catalog, rng=rng)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
