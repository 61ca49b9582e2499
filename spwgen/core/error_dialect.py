from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    code: str
    message: str


class SpwError(ValueError):
    default_code = "invalid_request"

    def __init__(self, message: str, code: str | None = None) -> None:
        normalized = _normalize_code(code if code is not None else self.default_code)
        clean_message = message.strip() or "unspecified error"
        self.code = normalized
        self.message = clean_message
        super().__init__(clean_message)

    def as_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class InvalidPolicyError(SpwError):
    default_code = "invalid_policy"


class EmptyPoolError(InvalidPolicyError):
    default_code = "empty_pool"


class InvalidLengthError(SpwError):
    default_code = "invalid_length"


class RandomSourceUnavailableError(SpwError):
    default_code = "random_source_unavailable"


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
    if isinstance(exc, SpwError):
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
