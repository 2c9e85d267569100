"""Fake Time implementation for testing.

FakeTime holds a clock that only moves when a test advances it.
"""

from vega_population.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory clock.

    All state is provided via constructor or changed through advance().
    """

    def __init__(self, now: float) -> None:
        """Create FakeTime frozen at the given epoch seconds."""
        self._now = now

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward.

        Args:
            seconds: Number of seconds to add to the current time
        """
        self._now += seconds
