from vega_population.integrations.time.abc import Time
from vega_population.integrations.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
