"""Shared callback aliases and errors for the state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

if TYPE_CHECKING:
    from tick_machine.machine import Machine
    from tick_machine.state import State


class StateMachineError(Exception):
    """Base class for all state machine errors."""


class DuplicateStateError(StateMachineError, KeyError):
    """Raised when creating a state whose name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"state {name!r} already exists")


class StateNotFoundError(StateMachineError, KeyError):
    """Raised when shifting to or removing a state that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"state {name!r} does not exist")


class InvalidArgumentError(StateMachineError, ValueError):
    """Raised on a malformed state name, entry callback or hooks mapping."""


class InvariantViolation(StateMachineError, RuntimeError):
    """Raised by the driver when the current state has no usable entry callback."""


EntryFn = Callable[["State"], None]
ExitHook = Callable[["State"], None]
ActivateHook = Callable[["Machine"], None]
Hooks = Mapping[str, Any]
