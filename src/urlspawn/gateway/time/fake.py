"""Fake Time implementation for testing.

FakeTime records requested sleeps without blocking, enabling fast and
deterministic tests.
"""

from urlspawn.gateway.time.abc import Time


class FakeTime(Time):
    """In-memory fake that captures sleep durations.

    This class has NO public setup methods. All state is captured during
    execution for test assertions.
    """

    def __init__(self) -> None:
        self._sleep_calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        """Record the sleep without blocking."""
        self._sleep_calls.append(seconds)

    @property
    def sleep_calls(self) -> list[float]:
        """Get the list of sleep durations in seconds, in call order.

        This property is for test assertions only.
        """
        return list(self._sleep_calls)
