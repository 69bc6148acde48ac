from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping

from mempw.core.models import PasswordRequest


def _allowed_field_names(model_type: type[Any]) -> set[str]:
    return {field.name for field in fields(model_type)}


_PASSWORD_FIELDS = _allowed_field_names(PasswordRequest)
# camelCase argument names used by LLM tool-call schemas.
TOOL_FIELD_ALIASES = {
    "minLength": "min_length",
    "minimumPasswordLength": "min_length",
    "replaceSpecialCharacters": "replace_special_characters",
}
TOOL_REQUIRED_FIELDS = ("min_length", "replace_special_characters")


def _ensure_object(payload: Mapping[str, Any] | Any, label: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"{label} payload must be a JSON object")
    return payload


def _canonicalize_fields(payload: Mapping[str, Any], allowed: set[str], label: str) -> dict[str, Any]:
    unknown = sorted(key for key in payload.keys() if TOOL_FIELD_ALIASES.get(key, key) not in allowed)
    if unknown:
        raise ValueError(f"{label} payload has unknown fields: {', '.join(str(key) for key in unknown)}")
    out: dict[str, Any] = {}
    for key, value in payload.items():
        name = TOOL_FIELD_ALIASES.get(key, key)
        if name in out:
            raise ValueError(f"{label} payload sets {name} more than once")
        out[name] = value
    return out


def _parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise ValueError(f"{field} must be a boolean")


def build_password_request(payload: Mapping[str, Any] | Any, *, batch: bool = False) -> PasswordRequest:
    """Map tool-call arguments onto a `PasswordRequest`.

    Only parses and type-checks; range checks stay in the service layer so the
    caller sees the same out-of-range messages as direct core callers.
    """
    data = _ensure_object(payload, "password")
    allowed = set(_PASSWORD_FIELDS) if batch else _PASSWORD_FIELDS - {"count"}
    values = _canonicalize_fields(data, allowed, "password")
    missing = [name for name in TOOL_REQUIRED_FIELDS if name not in values]
    if batch and "count" not in values:
        missing.insert(0, "count")
    if missing:
        raise ValueError(f"password payload is missing required fields: {', '.join(missing)}")

    return PasswordRequest(
        min_length=_parse_int(values["min_length"], "min_length"),
        replace_special_characters=_parse_bool(
            values["replace_special_characters"],
            "replace_special_characters",
        ),
        count=_parse_int(values["count"], "count") if batch else 1,
    )


__all__ = [
    "TOOL_FIELD_ALIASES",
    "build_password_request",
]
