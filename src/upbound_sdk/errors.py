"""Exception classes for the Upbound SDK."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .service.spaces.types import Status


class UpboundError(Exception):
    """Base exception for all Upbound SDK errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EncodingError(UpboundError):
    """A request body could not be serialized to JSON."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class InvalidTargetError(UpboundError):
    """The request target (method or composed URL) is malformed."""


class UnsupportedClientError(UpboundError):
    """An operation needs a capability the configured transport does not offer."""


class MissingParametersError(UpboundError):
    """An operation was called without its required parameters."""

    def __init__(self, message: str = "parameters must be supplied") -> None:
        super().__init__(message)


class DecodingError(UpboundError):
    """A successful response carried a body that could not be decoded.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body.
    """

    def __init__(self, message: str, status_code: int = 0, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class APIError(UpboundError):
    """Non-2xx response returned by the Upbound API.

    Attributes:
        status_code: HTTP status code.
        reason: HTTP reason phrase.
        body: Raw response body.
        title: Error title, when the body is an Upbound error document.
        detail: Error detail, when the body is an Upbound error document.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: str = "",
        title: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.title = title
        self.detail = detail
        summary = title or reason
        if detail:
            summary = f"{summary}: {detail}"
        elif body and not title:
            summary = f"{summary}: {body}"
        super().__init__(f"[{status_code}] {summary}")

    @classmethod
    def from_response_body(cls, status_code: int, reason: str, body: str) -> APIError:
        """Build an error, picking up title/detail from an Upbound error document."""
        title, detail = _parse_error_document(body)
        return cls(status_code, reason, body, title=title, detail=detail)


class UnauthorizedError(APIError):
    """Permission denied (401)."""


class ForbiddenError(APIError):
    """Forbidden (403)."""


class NotFoundError(APIError):
    """Resource not found (404)."""


class StatusError(UpboundError):
    """Failure reported by a kubernetes-shaped endpoint as a meta/v1 Status.

    Attributes:
        status: The decoded Status object.
    """

    def __init__(self, status: Status) -> None:
        self.status = status
        message = status.message or status.reason or "unknown"
        super().__init__(f"[{status.code}] {message}")

    @property
    def reason(self) -> str | None:
        return self.status.reason

    @property
    def code(self) -> int | None:
        return self.status.code


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_for_status(status_code: int, reason: str, body: str) -> APIError:
    """Map an HTTP status code to the matching APIError subclass."""
    error_cls = _STATUS_ERRORS.get(status_code, APIError)
    return error_cls.from_response_body(status_code, reason, body)


def is_not_found(err: BaseException) -> bool:
    """Report whether an error means the requested resource does not exist."""
    if isinstance(err, APIError):
        return err.status_code == 404
    if isinstance(err, StatusError):
        return err.reason == "NotFound" or err.code == 404
    return False


def _parse_error_document(body: str) -> tuple[str | None, str | None]:
    try:
        data: Any = json.loads(body) if body else None
    except ValueError:
        return None, None
    if not isinstance(data, dict):
        return None, None
    title = data.get("title")
    detail = data.get("detail")
    return (
        title if isinstance(title, str) else None,
        detail if isinstance(detail, str) else None,
    )
