from functools import partial

import pytest

from editable_webdata import editable
from editable_webdata.editable import Editing, ReadOnly
from editable_webdata.errors import AppError, ErrorKind
from editable_webdata.remote_status import Failure, Loading, NotAsked, Success, LOADING
from editable_webdata.wrapper import (
    EditableWebData, EditableWebDataWrapper, create, map_editable, to_editable,
    to_status, update_status, value,
)

STATUSES = [NotAsked(), Loading(), Success(None), Success(42),
            Failure(AppError(ErrorKind.NETWORK, "offline"))]


def _wrappers():
    w = create("old")
    editing = map_editable(editable.edit, w)
    dirty = map_editable(partial(editable.update, "new"), editing)
    return [w, editing, dirty, update_status(LOADING, dirty), update_status(Success(None), w)]


@pytest.mark.parametrize("initial", ["old", 0, None, ("a", 1)])
def test_create_is_read_only_and_not_asked(initial):
    w = create(initial)
    assert to_editable(w) == ReadOnly(initial)
    assert isinstance(to_status(w), NotAsked)


@pytest.mark.parametrize("status", STATUSES)
@pytest.mark.parametrize("w", _wrappers())
def test_update_status_keeps_editable(w, status):
    assert to_editable(update_status(status, w)) is to_editable(w)


@pytest.mark.parametrize("f", [editable.edit, editable.cancel, editable.save,
                               partial(editable.update, "x"), partial(editable.map, str.upper)])
@pytest.mark.parametrize("w", _wrappers())
def test_map_editable_keeps_status(w, f):
    assert to_status(map_editable(f, w)) is to_status(w)


@pytest.mark.parametrize("w", _wrappers())
def test_projections_rebuild_wrapper(w):
    rebuilt = EditableWebDataWrapper(to_editable(w), to_status(w))
    assert to_editable(rebuilt) == to_editable(w)
    assert to_status(rebuilt) == to_status(w)
    assert rebuilt == w


@pytest.mark.parametrize("s2", STATUSES)
@pytest.mark.parametrize("s1", STATUSES)
@pytest.mark.parametrize("w", _wrappers())
def test_last_status_update_wins(w, s1, s2):
    assert update_status(s2, update_status(s1, w)) == update_status(s2, w)


def test_scenario_fresh_wrapper():
    w = create("old")
    assert to_editable(w) == ReadOnly("old")
    assert to_status(w) == NotAsked()


def test_scenario_edit_to_new_value():
    w = create("old")
    w = map_editable(editable.edit, w)
    w = map_editable(partial(editable.update, "new"), w)
    assert to_editable(w) == Editing(original="old", current="new")
    assert value(w) == "new"


def test_scenario_loading():
    w = update_status(Loading(), create("new"))
    assert to_status(w) == Loading()
    assert to_editable(w) == ReadOnly("new")


def test_scenario_success_with_unit_payload():
    w = update_status(Success(None), create("new"))
    assert to_status(w) == Success(None)


def test_scenario_loading_then_success():
    w = create("new")
    w = update_status(Loading(), w)
    w = update_status(Success(None), w)
    assert to_status(w) == Success(None)


def test_no_transition_validation():
    w = update_status(Success(None), create("v"))
    w = update_status(Loading(), w)
    w = update_status(NotAsked(), w)
    assert to_status(w) == NotAsked()


def test_map_editable_can_change_value_type():
    w = update_status(LOADING, create("42"))
    w2 = map_editable(partial(editable.map, int), w)
    assert to_editable(w2) == ReadOnly(42)
    assert to_status(w2) is LOADING


def test_operations_return_new_instances():
    w = create("old")
    w2 = update_status(Loading(), w)
    assert w2 is not w
    assert to_status(w) == NotAsked()
    with pytest.raises(AttributeError):
        w.status = Loading()  # frozen


def test_method_forms_match_functions():
    w = create("old")
    assert w.map_editable(editable.edit) == map_editable(editable.edit, w)
    assert w.update_status(LOADING) == update_status(LOADING, w)
    assert w.to_editable() is w.editable
    assert w.to_status() is w.status


def test_unit_payload_alias():
    w: EditableWebData[str] = create("x")
    assert EditableWebData.__origin__ is EditableWebDataWrapper
    assert isinstance(w, EditableWebDataWrapper)


def test_status_update_does_not_log(caplog):
    with caplog.at_level("DEBUG"):
        w = update_status(Loading(), create("x"))
        map_editable(editable.edit, w)
    assert caplog.records == []

