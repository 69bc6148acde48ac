from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    code: str
    message: str


class MemPwError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        normalized = _normalize_code(code)
        clean_message = message.strip() or "unspecified error"
        self.code = normalized
        self.message = clean_message
        super().__init__(clean_message)

    def as_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class OutOfRangeError(MemPwError):
    """A generation parameter fell outside its accepted bounds.

    ``param`` names the offending parameter and ``comparison``/``bound``
    describe the violated limit, so callers can rebuild the
    "<param> must be <comparison> <bound>" sentence on their own.
    """

    def __init__(self, param: str, comparison: str, bound: int, value: object) -> None:
        self.param = param
        self.comparison = comparison
        self.bound = bound
        self.value = value
        super().__init__("out_of_range", f"{param} must be {comparison} {bound} (got {value!r})")


class CatalogError(MemPwError):
    def __init__(self, message: str) -> None:
        super().__init__("invalid_catalog", message)


def _normalize_code(code: str) -> str:
    lowered = code.strip().lower()
    if not lowered:
        return "invalid_request"
    out = []
    for ch in lowered:
        if ch.isalnum() or ch == "_":
            out.append(ch)
        elif ch in ("-", " ", "."):
            out.append("_")
    normalized = "".join(out).strip("_")
    return normalized or "invalid_request"


def error_detail_from_exception(
    exc: BaseException,
    *,
    default_code: str = "invalid_request",
    default_message: str = "invalid request",
) -> ErrorDetail:
    if isinstance(exc, MemPwError):
        return exc.as_detail()
    message = str(exc).strip() or default_message
    return ErrorDetail(code=_normalize_code(default_code), message=message)


def format_error_text(
    exc: BaseException,
    *,
    default_code: str = "invalid_request",
    default_message: str = "invalid request",
) -> str:
    detail = error_detail_from_exception(exc, default_code=default_code, default_message=default_message)
    return f"{detail.code}: {detail.message}"


def tool_error_text(exc: BaseException, *, default_message: str = "invalid request") -> str:
    # Tool callers surface failures as plain strings instead of faults.
    detail = error_detail_from_exception(exc, default_message=default_message)
    return f"Error: {detail.message}"
