"""State record owned by a Machine."""
from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Mapping

from tick_machine.types import EntryFn, InvalidArgumentError

if TYPE_CHECKING:
    from tick_machine.machine import Machine


class State:
    """A named behavior unit.

    ``entry`` is called with the state on every driver tick while the state
    is current. ``hooks`` may carry an ``"on_exit"`` callable, which the
    driver calls after each entry invocation. Any other key is ignored.

    The owning Machine is held through a weak reference so ``remove()`` can
    detach the record without the two objects keeping each other alive.
    """

    def __init__(
        self,
        name: str,
        entry: EntryFn,
        hooks: Mapping[str, Any] | None = None,
        machine: Machine | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"state name must be a non-empty string, got {name!r}")
        if not callable(entry):
            raise InvalidArgumentError(f"entry callback for state {name!r} is not callable")
        if hooks is None:
            hooks = {}
        elif not isinstance(hooks, Mapping):
            raise InvalidArgumentError(f"hooks for state {name!r} must be a mapping")
        on_exit = hooks.get("on_exit")
        if on_exit is not None and not callable(on_exit):
            raise InvalidArgumentError(f"on_exit hook for state {name!r} is not callable")

        self._name = name
        self.active = True
        self.entry: EntryFn | None = entry
        self.hooks: dict[str, Any] | None = dict(hooks)
        self._machine = weakref.ref(machine) if machine is not None else None
        self._removed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def removed(self) -> bool:
        return self._removed

    def identifier(self) -> str:
        return self._name

    def is_active(self) -> bool:
        return self.active

    def remove(self) -> None:
        """Detach from the owning machine and clear the record. Safe to call twice."""
        if self._removed:
            return
        machine = self._machine() if self._machine is not None else None
        if machine is not None:
            machine._detach(self)
        self._removed = True
        self._machine = None
        self.active = False
        self.entry = None
        self.hooks = None

    def __repr__(self) -> str:
        status = "removed" if self._removed else "active" if self.active else "inactive"
        return f"State({self._name!r}, {status})"
