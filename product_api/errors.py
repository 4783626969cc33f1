"""
Error taxonomy for the product API.

Every failure that reaches a client is an ``AppError`` whose ``kind``
is one of the closed set of ``ErrorKind`` variants.  ``render_error``
is the only place an error becomes an HTTP response.
"""

import logging
from enum import Enum
from typing import Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    NOT_FOUND = (404, "Not Found")
    VALIDATION = (400, "Validation Error")
    AUTH = (401, "Unauthorized")
    INTERNAL = (500, "Internal Server Error")

    def __init__(self, status: int, default_message: str):
        self.status = status
        self.default_message = default_message


class AppError(Exception):
    """A classified failure carrying its kind and client-facing message."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or kind.default_message
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.kind.status

    def __repr__(self) -> str:
        return f"AppError({self.kind.name}, {self.message!r})"

    @classmethod
    def not_found(cls, message: Optional[str] = None) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: Optional[str] = None) -> "AppError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def auth(cls, message: Optional[str] = None) -> "AppError":
        return cls(ErrorKind.AUTH, message)

    @classmethod
    def internal(cls, message: Optional[str] = None) -> "AppError":
        return cls(ErrorKind.INTERNAL, message)


def classify(exc: BaseException) -> AppError:
    """Map any exception onto the taxonomy.

    Unrecognised faults become ``INTERNAL`` with the generic message so
    their detail never reaches the client; callers are expected to log
    the original exception.
    """
    if isinstance(exc, AppError):
        return exc
    return AppError.internal()


def render_error(err: AppError) -> JSONResponse:
    kind = err.kind
    if kind is ErrorKind.INTERNAL:
        logger.error("responding %s: %s", kind.status, err.message)
    elif kind in (ErrorKind.NOT_FOUND, ErrorKind.VALIDATION, ErrorKind.AUTH):
        logger.warning("responding %s: %s", kind.status, err.message)
    else:  # pragma: no cover - ErrorKind is closed
        raise AssertionError(f"unhandled error kind {kind!r}")
    return JSONResponse(status_code=kind.status, content={"error": err.message})
