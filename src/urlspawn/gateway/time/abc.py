"""Time abstraction for testability.

Sleeping goes through this interface so the launch scheduler can be tested
without actually blocking.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time provider for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block the calling thread for the given number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
