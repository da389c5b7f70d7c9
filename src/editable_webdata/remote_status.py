"""Status of a remote save: not asked, loading, succeeded or failed.

A failed save is an ordinary ``Failure`` value; nothing here raises for it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from editable_webdata.errors import Ok, Err, Result

B = TypeVar("B")
B2 = TypeVar("B2")
E = TypeVar("E")
E2 = TypeVar("E2")


@dataclass(frozen=True)
class NotAsked:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success(Generic[B]):
    value: B


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E


RemoteStatus = Union[NotAsked, Loading, Success[B], Failure[E]]

NOT_ASKED = NotAsked()
LOADING = Loading()

_VARIANTS = (NotAsked, Loading, Success, Failure)


def _check(s: Any) -> None:
    if not isinstance(s, _VARIANTS):
        raise TypeError(f"expected a remote status, got {type(s).__name__}")


def is_not_asked(s: RemoteStatus[Any, Any]) -> bool:
    _check(s)
    return isinstance(s, NotAsked)


def is_loading(s: RemoteStatus[Any, Any]) -> bool:
    _check(s)
    return isinstance(s, Loading)


def is_success(s: RemoteStatus[Any, Any]) -> bool:
    _check(s)
    return isinstance(s, Success)


def is_failure(s: RemoteStatus[Any, Any]) -> bool:
    _check(s)
    return isinstance(s, Failure)


def map(f: Callable[[B], B2], s: RemoteStatus[B, E]) -> RemoteStatus[B2, E]:  # noqa: A001
    _check(s)
    if isinstance(s, Success):
        return Success(f(s.value))
    return s


def map_error(f: Callable[[E], E2], s: RemoteStatus[B, E]) -> RemoteStatus[B, E2]:
    _check(s)
    if isinstance(s, Failure):
        return Failure(f(s.error))
    return s


def with_default(default: B, s: RemoteStatus[B, Any]) -> B:
    _check(s)
    return s.value if isinstance(s, Success) else default


def from_result(result: Result[B, E]) -> RemoteStatus[B, E]:
    """``Ok(v)`` becomes ``Success(v)``, ``Err(e)`` becomes ``Failure(e)``."""
    if isinstance(result, Ok):
        return Success(result.value)
    if isinstance(result, Err):
        return Failure(result.error)
    raise TypeError(f"expected Ok or Err, got {type(result).__name__}")
