"""Editable values: read-only, or under edit with the original kept aside.

Every function takes the ``Editable`` last so it can be partially applied
and handed to ``wrapper.map_editable``::

    w = map_editable(editable.edit, w)
    w = map_editable(functools.partial(editable.update, "new"), w)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

A = TypeVar("A")
A2 = TypeVar("A2")


@dataclass(frozen=True)
class ReadOnly(Generic[A]):
    value: A


@dataclass(frozen=True)
class Editing(Generic[A]):
    original: A
    current: A


Editable = Union[ReadOnly[A], Editing[A]]


def _reject(e: Any) -> TypeError:
    return TypeError(f"expected ReadOnly or Editing, got {type(e).__name__}")


def edit(e: Editable[A]) -> Editable[A]:
    """Enter edit mode. An edit already in progress is left alone."""
    if isinstance(e, ReadOnly):
        return Editing(original=e.value, current=e.value)
    if isinstance(e, Editing):
        return e
    raise _reject(e)


def update(new_value: A, e: Editable[A]) -> Editable[A]:
    """Replace the in-progress value; read-only values are not touched."""
    if isinstance(e, Editing):
        return Editing(original=e.original, current=new_value)
    if isinstance(e, ReadOnly):
        return e
    raise _reject(e)


def cancel(e: Editable[A]) -> Editable[A]:
    if isinstance(e, Editing):
        return ReadOnly(e.original)
    if isinstance(e, ReadOnly):
        return e
    raise _reject(e)


def save(e: Editable[A]) -> Editable[A]:
    """Leave edit mode keeping the current value."""
    if isinstance(e, Editing):
        return ReadOnly(e.current)
    if isinstance(e, ReadOnly):
        return e
    raise _reject(e)


def value(e: Editable[A]) -> A:
    if isinstance(e, ReadOnly):
        return e.value
    if isinstance(e, Editing):
        return e.current
    raise _reject(e)


def is_editing(e: Editable[Any]) -> bool:
    if isinstance(e, Editing):
        return True
    if isinstance(e, ReadOnly):
        return False
    raise _reject(e)


def is_dirty_with(eq: Callable[[A, A], bool], e: Editable[A]) -> bool:
    if isinstance(e, Editing):
        return not eq(e.original, e.current)
    if isinstance(e, ReadOnly):
        return False
    raise _reject(e)


def is_dirty(e: Editable[Any]) -> bool:
    """True when an edit is in progress and differs from the original."""
    return is_dirty_with(lambda a, b: a == b, e)


def map(f: Callable[[A], A2], e: Editable[A]) -> Editable[A2]:  # noqa: A001
    if isinstance(e, ReadOnly):
        return ReadOnly(f(e.value))
    if isinstance(e, Editing):
        return Editing(original=f(e.original), current=f(e.current))
    raise _reject(e)
