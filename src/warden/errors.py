"""Error taxonomy for resource lifecycle failures."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional


class ErrorKind(str, Enum):
    """Categories of failure raised by the resource layer."""

    CLOSED = "closed"
    FAULTY = "faulty"
    CLOSE_FAILED = "close_failed"
    INVALID_ARGUMENT = "invalid_argument"
    WRAPPED = "wrapped"


class ResourceError(RuntimeError):
    """Base exception carrying a message and at most one wrapped cause."""

    default_kind: Optional[ErrorKind] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message
        self._cause: Optional[BaseException] = None

    @classmethod
    def wrap(cls, message: str, cause: BaseException) -> "ResourceError":
        """Build an error that keeps ``cause`` as context."""

        error = cls(message)
        error._cause = cause
        error.__cause__ = cause
        return error

    @property
    def kind(self) -> Optional[ErrorKind]:
        if self._cause is not None:
            return ErrorKind.WRAPPED
        return self.default_kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        """The wrapped error, if any. Never transferred, only looked up."""

        return self._cause

    def __repr__(self) -> str:
        if self._cause is None:
            return f"{type(self).__name__}({self._message!r})"
        return f"{type(self).__name__}({self._message!r}, cause={self._cause!r})"


class ResourceClosedError(ResourceError):
    """Raised when an operation targets a resource that is no longer open."""

    default_kind = ErrorKind.CLOSED


class ResourceFaultyError(ResourceError):
    """Raised when an operation targets a resource marked permanently broken."""

    default_kind = ErrorKind.FAULTY


class ResourceCloseError(ResourceError):
    """Raised after a resource was marked closed but its teardown failed."""

    default_kind = ErrorKind.CLOSE_FAILED


class InvalidArgumentError(ValueError):
    """Raised when an argument violates a precondition. Never wraps a cause."""

    kind = ErrorKind.INVALID_ARGUMENT

    @property
    def message(self) -> str:
        return str(self)

    @property
    def cause(self) -> None:
        return None


def error_kind(error: BaseException) -> Optional[ErrorKind]:
    """Return the taxonomy kind of ``error``, or ``None`` for foreign errors."""

    kind = getattr(error, "kind", None)
    return kind if isinstance(kind, ErrorKind) else None


def iter_chain(error: BaseException) -> Iterator[BaseException]:
    """Yield ``error`` followed by each nested cause, outermost first."""

    seen: set[int] = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, ResourceError):
            current = current.cause if current.cause is not None else current.__cause__
        else:
            current = current.__cause__


__all__ = [
    "ErrorKind",
    "InvalidArgumentError",
    "ResourceCloseError",
    "ResourceClosedError",
    "ResourceError",
    "ResourceFaultyError",
    "error_kind",
    "iter_chain",
]
