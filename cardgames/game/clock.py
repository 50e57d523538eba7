"""Logical timers for cadence-driven games.

A ``Cadence`` never reads the wall clock. The owner advances it explicitly,
which keeps round logic testable without real time passing.
"""

from typing import Callable

TimerCallback = Callable[[], object]


class Cadence:
    """
    A repeating or single-shot logical timer.

    Mirrors a UI toolkit timer: ``start`` arms it, ``restart`` re-arms it with
    a full interval, ``stop`` cancels it. Changing ``interval`` never alters
    the time left on an armed timer; it applies from the next arming or
    repeat.
    """

    def __init__(
        self,
        interval: float,
        callback: TimerCallback,
        repeating: bool = True,
        name: str = "cadence",
    ) -> None:
        """
        Initialize a stopped cadence.

        Args:
            interval: Seconds between firings
            callback: Called each time the cadence fires
            repeating: Re-arm after firing (False for a single-shot countdown)
            name: Label used in reprs and logs
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._callback = callback
        self._repeating = repeating
        self.name = name
        self._remaining: float | None = None

    @property
    def interval(self) -> float:
        """Return the interval used for the next arming."""
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        if value <= 0:
            raise ValueError("interval must be positive")
        self._interval = value

    @property
    def active(self) -> bool:
        """Check if the cadence is armed."""
        return self._remaining is not None

    @property
    def remaining(self) -> float | None:
        """Return seconds until the next firing, or None when stopped."""
        return self._remaining

    def start(self) -> None:
        """Arm the cadence if it is not already running."""
        if self._remaining is None:
            self._remaining = self._interval

    def restart(self) -> None:
        """Arm the cadence with a full interval, discarding any time left."""
        self._remaining = self._interval

    def stop(self) -> None:
        """Cancel the cadence."""
        self._remaining = None

    def advance(self, seconds: float) -> int:
        """
        Let ``seconds`` of logical time pass.

        Returns:
            Number of times the callback fired
        """
        if seconds < 0:
            raise ValueError("cannot advance by a negative duration")

        fired = 0
        while self._remaining is not None and seconds >= self._remaining:
            seconds -= self._remaining
            # Re-arm or disarm before the callback so it may stop/restart us
            self._remaining = self._interval if self._repeating else None
            fired += 1
            self._callback()

        if self._remaining is not None:
            self._remaining -= seconds
        return fired

    def __repr__(self) -> str:
        state = f"{self._remaining:.3f}s left" if self.active else "stopped"
        return f"Cadence({self.name!r}, every {self._interval}s, {state})"
