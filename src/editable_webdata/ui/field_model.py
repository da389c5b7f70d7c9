"""Qt-side holder for the editable/save state of one form field.

The model owns the current wrapper, swaps it for a new one after every
transformation and tells listeners what changed. It draws nothing; views
connect to its signals.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional
import logging

from PySide6.QtCore import QObject, Signal

from editable_webdata import editable as _editable
from editable_webdata import remote_status as _status
from editable_webdata.errors import AppError, ErrorKind, Result, capture
from editable_webdata.remote_status import Failure, LOADING, NOT_ASKED, RemoteStatus
from editable_webdata.wrapper import (
    EditableWebDataWrapper, create, map_editable, update_status, value,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldConfig:
    name: str = "field"
    reset_status_on_edit: bool = True   # entering edit mode clears a finished save status
    commit_on_success: bool = True      # a Success answering the pending save commits that edit


class EditableWebDataModel(QObject):
    """Holds one ``EditableWebDataWrapper`` and emits on replacement."""

    changed = Signal(object)          # new wrapper
    statusChanged = Signal(object)    # new remote status
    editingChanged = Signal(bool)

    def __init__(self, initial: Any, config: Optional[FieldConfig] = None,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._config = config or FieldConfig()
        self._wrapper: EditableWebDataWrapper[Any, Any] = create(initial)
        # editable state that was current when the pending save started
        self._in_flight: Optional[_editable.Editable[Any]] = None

    # ----------------------- State ---------------------------------------
    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def wrapper(self) -> EditableWebDataWrapper[Any, Any]:
        return self._wrapper

    @property
    def value(self) -> Any:
        return value(self._wrapper)

    @property
    def is_editing(self) -> bool:
        return _editable.is_editing(self._wrapper.editable)

    @property
    def is_dirty(self) -> bool:
        return _editable.is_dirty(self._wrapper.editable)

    def apply(self, fn: Callable[[EditableWebDataWrapper[Any, Any]], EditableWebDataWrapper[Any, Any]]
              ) -> EditableWebDataWrapper[Any, Any]:
        """Replace the wrapper with ``fn(wrapper)`` and emit for what changed."""
        old = self._wrapper
        new = fn(old)
        if not isinstance(new, EditableWebDataWrapper):
            raise TypeError(f"expected EditableWebDataWrapper, got {type(new).__name__}")
        if new == old:
            return old
        self._wrapper = new
        if new.status != old.status:
            self.statusChanged.emit(new.status)
        now_editing = _editable.is_editing(new.editable)
        if now_editing != _editable.is_editing(old.editable):
            self.editingChanged.emit(now_editing)
        self.changed.emit(new)
        return new

    # ----------------------- Editing -------------------------------------
    def begin_edit(self) -> EditableWebDataWrapper[Any, Any]:
        if self.is_editing:
            return self._wrapper

        def _begin(w: EditableWebDataWrapper[Any, Any]) -> EditableWebDataWrapper[Any, Any]:
            w = map_editable(_editable.edit, w)
            if self._config.reset_status_on_edit and not _status.is_loading(w.status):
                w = update_status(NOT_ASKED, w)
            return w

        log.debug("%s: edit started", self._config.name)
        return self.apply(_begin)

    def set_current(self, new_value: Any) -> EditableWebDataWrapper[Any, Any]:
        """Update the in-progress value. Ignored while read-only."""
        return self.apply(partial(map_editable, partial(_editable.update, new_value)))

    def cancel_edit(self) -> EditableWebDataWrapper[Any, Any]:
        log.debug("%s: edit cancelled", self._config.name)
        return self.apply(partial(map_editable, _editable.cancel))

    def commit(self) -> EditableWebDataWrapper[Any, Any]:
        if self.is_editing:
            log.info("%s: committed %r", self._config.name, self.value)
        return self.apply(partial(map_editable, _editable.save))

    # ----------------------- Save status ---------------------------------
    def set_status(self, status: RemoteStatus[Any, Any]) -> EditableWebDataWrapper[Any, Any]:
        """Record a save status.

        With ``commit_on_success`` a ``Success`` saves the edit only when it
        answers a pending ``Loading`` and the edit is still the one that was
        being saved.
        """
        old = self._wrapper
        commit = (self._config.commit_on_success
                  and _status.is_success(status)
                  and _status.is_loading(old.status)
                  and self.is_editing
                  and old.editable == self._in_flight)
        self._in_flight = old.editable if _status.is_loading(status) else None

        def _set(w: EditableWebDataWrapper[Any, Any]) -> EditableWebDataWrapper[Any, Any]:
            w = update_status(status, w)
            if commit:
                w = map_editable(_editable.save, w)
            return w

        log.debug("%s: status %s -> %s", self._config.name,
                  type(old.status).__name__, type(status).__name__)
        if commit:
            log.info("%s: save succeeded, committed %r", self._config.name, self.value)
        return self.apply(_set)

    def mark_loading(self) -> EditableWebDataWrapper[Any, Any]:
        return self.set_status(LOADING)

    def mark_result(self, result: Result[Any, Any]) -> EditableWebDataWrapper[Any, Any]:
        status = _status.from_result(result)
        if isinstance(status, Failure):
            log.warning("%s: save failed: %s", self._config.name, status.error)
        return self.set_status(status)

    def mark_failed(self, message: str, kind: ErrorKind = ErrorKind.NETWORK
                    ) -> EditableWebDataWrapper[Any, Any]:
        error = AppError(kind=kind, message=message, source=self._config.name)
        log.warning("%s: save failed: %s", self._config.name, error)
        return self.set_status(Failure(error))

    def save_with(self, fn: Callable[[Any], Any]) -> Result[Any, AppError]:
        """Run a blocking save of the current value and record its outcome.

        Exceptions raised by *fn* end up as a ``Failure(AppError)`` status and
        an ``Err`` return value.
        """
        self.mark_loading()
        result = capture(fn, self.value, source=self._config.name)
        self.mark_result(result)
        return result
