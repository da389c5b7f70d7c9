"""Error payloads and the Ok/Err pair returned by save callbacks.

A failed save is data, not an exception: callers turn an ``Err`` into a
``Failure`` status with ``remote_status.from_result``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, TypeVar, Union, Optional
import logging

T = TypeVar("T")
E = TypeVar("E")

LOG_SAVE = logging.getLogger("editable_webdata.save")


class ErrorKind(Enum):
    NETWORK = auto()
    TIMEOUT = auto()
    VALIDATION = auto()
    CONFLICT = auto()
    GENERIC = auto()


_RETRYABLE = frozenset({ErrorKind.NETWORK, ErrorKind.TIMEOUT})


@dataclass(frozen=True)
class AppError:
    """Default error carried by a ``Failure`` status."""
    kind: ErrorKind
    message: str
    source: Optional[str] = None

    @property
    def retryable(self) -> bool:
        return self.kind in _RETRYABLE

    @classmethod
    def from_exception(cls, ex: BaseException, kind: ErrorKind = ErrorKind.GENERIC,
                       source: Optional[str] = None) -> "AppError":
        if isinstance(ex, TimeoutError):
            kind = ErrorKind.TIMEOUT
        elif isinstance(ex, ConnectionError):
            kind = ErrorKind.NETWORK
        elif isinstance(ex, ValueError) and kind is ErrorKind.GENERIC:
            kind = ErrorKind.VALIDATION
        return cls(kind=kind, message=str(ex) or type(ex).__name__, source=source)

    def __str__(self) -> str:
        base = f"{self.kind.name}: {self.message}"
        return f"{base} (source: {self.source})" if self.source else base


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


def capture(fn: Callable[..., T], *args: Any, source: Optional[str] = None) -> "Result[T, AppError]":
    """Run *fn* and wrap its outcome.

    ``Exception`` subclasses become ``Err(AppError)``; anything outside that
    hierarchy (KeyboardInterrupt, SystemExit) propagates.
    """
    try:
        return Ok(fn(*args))
    except Exception as ex:
        LOG_SAVE.debug("save raised%s", f" ({source})" if source else "", exc_info=True)
        return Err(AppError.from_exception(ex, source=source))
