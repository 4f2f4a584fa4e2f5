"""Machine - state registry, transitions, and the driver loop."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterator, Mapping

from tick_machine.clock import Clock
from tick_machine.state import State
from tick_machine.types import (
    ActivateHook,
    DuplicateStateError,
    EntryFn,
    InvariantViolation,
    StateNotFoundError,
)

logger = logging.getLogger(__name__)


class Machine:
    def __init__(self, tps: int | None = None) -> None:
        self._clock = Clock(tps)
        self._states: dict[str, State] = {}
        self._current: State | None = None
        self._alive = True
        self._task: asyncio.Task[None] | None = None
        self.on_activate: ActivateHook | None = None

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def current(self) -> State | None:
        return self._current

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def task(self) -> asyncio.Task[None] | None:
        return self._task

    # --- registry ---

    def create_state(
        self,
        name: str,
        entry: EntryFn,
        hooks: Mapping[str, Any] | None = None,
    ) -> State:
        state = State(name, entry, hooks, machine=self)
        if name in self._states:
            raise DuplicateStateError(name)
        self._states[name] = state
        logger.debug("created state %r", name)
        return state

    def get_state(self, name: str) -> State:
        try:
            return self._states[name]
        except (KeyError, TypeError):
            raise StateNotFoundError(name) from None

    def shift_state(self, name: str) -> None:
        """Make ``name`` the current state. Callbacks run on the next tick."""
        state = self.get_state(name)
        if state is self._current:
            return
        previous = self._current
        self._current = state
        logger.debug(
            "shifted %r -> %r",
            previous.name if previous is not None else None,
            name,
        )

    def remove_state(self, name: str) -> None:
        self.get_state(name).remove()

    def names(self) -> list[str]:
        return list(self._states)

    def _detach(self, state: State) -> None:
        if self._states.get(state.name) is state:
            del self._states[state.name]
        if self._current is state:
            self._current = None
            logger.debug("removed current state %r, driver will suspend", state.name)
        logger.debug("removed state %r", state.name)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(list(self._states.values()))

    # --- driver ---

    def _entry_of(self, state: State) -> EntryFn:
        entry = state.entry
        if entry is None or not callable(entry):
            raise InvariantViolation(f"state {state.name!r} has no entry callback")
        return entry

    def _exit(self) -> None:
        state = self._current
        if state is None:
            return
        if state.hooks is None:
            state.hooks = {}
        on_exit = state.hooks.get("on_exit")
        if on_exit is None:
            return
        on_exit(state)

    def step(self) -> bool:
        """Run one tick. Returns False without ticking when no state is current.

        A tick calls ``on_activate(machine)`` if set, then the current
        state's entry callback, then the ``on_exit`` hook of whichever state
        is current once the entry callback returns. The exit hook fires on
        every tick the state stays current, not only when another state
        takes over.
        """
        state = self._current
        if state is None:
            return False
        entry = self._entry_of(state)
        on_activate = self.on_activate
        if on_activate is not None and callable(on_activate):
            on_activate(self)
        entry(state)
        self._exit()
        self._clock.advance()
        return True

    async def run(self) -> None:
        logger.debug("driver started")
        try:
            while self._alive:
                await asyncio.sleep(self._clock.dt)
                if not self._alive:
                    break
                if self._current is None:
                    continue
                self.step()
        except Exception:
            self._alive = False
            logger.exception("driver stopped by a failing callback")
            raise
        logger.debug("driver stopped after %d ticks", self._clock.tick_number)

    def start(self) -> asyncio.Task[None]:
        """Spawn the driver on the running event loop."""
        if self._task is not None:
            raise RuntimeError("driver already started")
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self.run())
        return self._task

    def dispose(self) -> None:
        self._alive = False

    async def join(self) -> None:
        if self._task is not None:
            await self._task


def init(tps: int | None = None) -> Machine:
    """Create a machine and start its driver on the running event loop."""
    machine = Machine(tps=tps)
    machine.start()
    return machine
