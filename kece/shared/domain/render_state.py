"""Render state of the product screen.

RenderState is a closed union of four frozen variants. Exactly one is held by
the screen at any time; the UI matches on it exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar, Union

from .errors import ProductError, UnexpectedError

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorInfo:
    """User-displayable failure detail."""

    message: str
    kind: str = "unexpected"
    status_code: Optional[int] = None
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        """Build an ErrorInfo from any exception.

        ProductError subclasses keep their kind and status code; anything else
        is treated as unexpected. An empty description falls back to the
        exception type name so the message is never blank.
        """
        if isinstance(exc, ProductError):
            return cls(
                message=exc.message or type(exc).__name__,
                kind=exc.kind,
                status_code=getattr(exc, "status_code", None),
                cause=exc,
            )
        wrapped = UnexpectedError(str(exc) or type(exc).__name__, cause=exc)
        return cls(message=wrapped.message, kind=wrapped.kind, cause=wrapped)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed result."""

    error: ErrorInfo


Result = Union[Ok[T], Err]


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Success:
    """The product text was fetched."""

    payload: str


@dataclass(frozen=True)
class Failure:
    """The fetch failed."""

    error: ErrorInfo


RenderState = Union[Idle, Loading, Success, Failure]

IDLE = Idle()
LOADING = Loading()
