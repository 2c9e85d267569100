"""Recording Feedback implementation for testing."""

from vega_population.feedback import Feedback


class RecordingFeedback(Feedback):
    """Captures messages instead of printing them.

    This class has NO public setup methods. All state is captured during execution.
    """

    def __init__(self) -> None:
        self._infos: list[str] = []
        self._warnings: list[str] = []

    @property
    def infos(self) -> list[str]:
        """Info messages in the order they were reported."""
        return self._infos

    @property
    def warnings(self) -> list[str]:
        """Warning messages in the order they were reported."""
        return self._warnings

    def info(self, message: str) -> None:
        self._infos.append(message)

    def warning(self, message: str) -> None:
        self._warnings.append(message)
