"""Tests for the State record: construction checks, accessors, self-removal."""

import gc

import pytest

from tick_machine import InvalidArgumentError, Machine, State


def noop(state):
    pass


# --- Construction ---

def test_state_defaults():
    state = State("Idle", noop)
    assert state.name == "Idle"
    assert state.identifier() == "Idle"
    assert state.is_active() is True
    assert state.entry is noop
    assert state.hooks == {}
    assert state.removed is False


def test_state_copies_hooks():
    hooks = {"on_exit": noop}
    state = State("Idle", noop, hooks)
    hooks["on_exit"] = None
    assert state.hooks["on_exit"] is noop


def test_state_ignores_unknown_hook_keys():
    state = State("Idle", noop, {"on_enter": 42})
    assert state.hooks == {"on_enter": 42}


@pytest.mark.parametrize("name", ["", None, 5, b"Idle"])
def test_state_rejects_bad_name(name):
    with pytest.raises(InvalidArgumentError, match="non-empty string"):
        State(name, noop)


def test_state_rejects_non_callable_entry():
    with pytest.raises(InvalidArgumentError, match="not callable"):
        State("Idle", "not a function")


def test_state_rejects_non_mapping_hooks():
    with pytest.raises(InvalidArgumentError, match="mapping"):
        State("Idle", noop, [noop])


def test_state_rejects_non_callable_on_exit():
    with pytest.raises(InvalidArgumentError, match="on_exit"):
        State("Idle", noop, {"on_exit": 3})


def test_invalid_argument_error_is_value_error():
    with pytest.raises(ValueError):
        State("", noop)


# --- remove() ---

def test_remove_detaches_from_machine():
    machine = Machine()
    state = machine.create_state("Idle", noop)
    state.remove()
    assert "Idle" not in machine
    assert len(machine) == 0


def test_remove_clears_fields():
    machine = Machine()
    state = machine.create_state("Idle", noop, {"on_exit": noop})
    state.remove()
    assert state.removed is True
    assert state.is_active() is False
    assert state.entry is None
    assert state.hooks is None
    assert state.identifier() == "Idle"


def test_remove_is_idempotent():
    machine = Machine()
    state = machine.create_state("Idle", noop)
    state.remove()
    state.remove()
    assert "Idle" not in machine


def test_remove_does_not_touch_new_state_with_same_name():
    machine = Machine()
    old = machine.create_state("Idle", noop)
    old.remove()
    new = machine.create_state("Idle", noop)
    old.remove()
    assert machine.get_state("Idle") is new


def test_remove_without_machine():
    state = State("Idle", noop)
    state.remove()
    assert state.removed is True


def test_state_does_not_keep_machine_alive():
    machine = Machine()
    state = machine.create_state("Idle", noop)
    del machine
    gc.collect()
    state.remove()
    assert state.removed is True


def test_repr():
    state = State("Idle", noop)
    assert repr(state) == "State('Idle', active)"
    state.active = False
    assert repr(state) == "State('Idle', inactive)"
    state.remove()
    assert repr(state) == "State('Idle', removed)"
