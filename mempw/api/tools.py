"""String-returning entrypoints for LLM tool calls and protocol servers.

Each function accepts decoded JSON tool arguments and always returns text:
the generated password(s) on success, or ``"Error: <message>"`` when the
arguments are malformed or out of range.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from mempw.api.adapters import build_password_request
from mempw.core.error_dialect import tool_error_text
from mempw.core.password_service import generate, generate_password
from mempw.core.randomness import IndexSource
from mempw.core.word_catalog import WordCatalog


def build_password_tool(
    arguments: Mapping[str, Any] | Any,
    *,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> str:
    try:
        request = build_password_request(arguments)
        return generate_password(
            request.min_length,
            request.replace_special_characters,
            catalog=catalog,
            rng=rng,
        )
    except ValueError as exc:
        return tool_error_text(exc, default_message="invalid password request")


def build_multiple_passwords_tool(
    arguments: Mapping[str, Any] | Any,
    *,
    catalog: Optional[WordCatalog] = None,
    rng: Optional[IndexSource] = None,
) -> str:
    try:
        request = build_password_request(arguments, batch=True)
        result = generate(request, catalog=catalog, rng=rng)
    except ValueError as exc:
        return tool_error_text(exc, default_message="invalid password request")
    return "\n".join(result.outputs)


__all__ = ["build_multiple_passwords_tool", "build_password_tool"]
