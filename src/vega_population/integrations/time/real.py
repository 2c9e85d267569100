"""Real clock implementation using time.time()."""

import time

from vega_population.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def now(self) -> float:
        return time.time()
