"""tick-machine - A minimal named-state container driven by a tick loop."""

from tick_machine.clock import Clock
from tick_machine.machine import Machine, init
from tick_machine.state import State
from tick_machine.types import (
    DuplicateStateError,
    InvalidArgumentError,
    InvariantViolation,
    StateMachineError,
    StateNotFoundError,
)

__all__ = [
    "init",
    "Machine",
    "State",
    "Clock",
    "StateMachineError",
    "DuplicateStateError",
    "StateNotFoundError",
    "InvalidArgumentError",
    "InvariantViolation",
]
