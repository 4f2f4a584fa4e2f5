"""Clock - driver tick counter and pacing interval."""


class Clock:
    def __init__(self, tps: int | None = None) -> None:
        if tps is not None and tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 0.0 if tps is None else 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int | None:
        return self._tps

    @property
    def dt(self) -> float:
        """Seconds the driver sleeps between ticks. Zero means one loop pass."""
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
