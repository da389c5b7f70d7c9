"""An editable value paired with the status of saving it.

The two halves never influence each other: ``map_editable`` leaves the
status object untouched and ``update_status`` leaves the editable object
untouched. Status transitions are not validated; any status may follow any
other, so ordering them sensibly (NotAsked -> Loading -> Success/Failure)
is up to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from editable_webdata import editable as _editable
from editable_webdata.editable import Editable, ReadOnly
from editable_webdata.remote_status import NOT_ASKED, RemoteStatus

A = TypeVar("A")
A2 = TypeVar("A2")
B = TypeVar("B")


@dataclass(frozen=True)
class EditableWebDataWrapper(Generic[A, B]):
    """Immutable pair of (editable value, remote status).

    Build with :func:`create`; every operation returns a new instance.
    """
    editable: Editable[A]
    status: RemoteStatus[B, Any]

    def map_editable(self, f: Callable[[Editable[A]], Editable[A2]]) -> "EditableWebDataWrapper[A2, B]":
        return map_editable(f, self)

    def update_status(self, new_status: RemoteStatus[B, Any]) -> "EditableWebDataWrapper[A, B]":
        return update_status(new_status, self)

    def to_editable(self) -> Editable[A]:
        return self.editable

    def to_status(self) -> RemoteStatus[B, Any]:
        return self.status


# Status payload is the unit type: only completion of the save is tracked.
EditableWebData = EditableWebDataWrapper[A, None]


def create(initial: A) -> EditableWebDataWrapper[A, Any]:
    """Start read-only with nothing requested yet."""
    return EditableWebDataWrapper(editable=ReadOnly(initial), status=NOT_ASKED)


def map_editable(f: Callable[[Editable[A]], Editable[A2]],
                 w: EditableWebDataWrapper[A, B]) -> EditableWebDataWrapper[A2, B]:
    """Apply *f* to the editable half; the status object is carried over as-is."""
    return EditableWebDataWrapper(editable=f(w.editable), status=w.status)


def update_status(new_status: RemoteStatus[B, Any],
                  w: EditableWebDataWrapper[A, B]) -> EditableWebDataWrapper[A, B]:
    """Replace the status unconditionally; the editable half is carried over as-is."""
    return EditableWebDataWrapper(editable=w.editable, status=new_status)


def to_editable(w: EditableWebDataWrapper[A, Any]) -> Editable[A]:
    return w.editable


def to_status(w: EditableWebDataWrapper[Any, B]) -> RemoteStatus[B, Any]:
    return w.status


def value(w: EditableWebDataWrapper[A, Any]) -> A:
    """Current value of the editable half (the in-progress one while editing)."""
    return _editable.value(w.editable)
