"""URL launcher abstraction for testability.

This module provides an ABC for launching URLs in a browser to enable
testing without actually opening browser windows. Launching is non-blocking:
each launch returns a handle that is waited on later.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of a single launch once its handle has been waited on."""

    success: bool
    error: str | None


class LaunchHandle(ABC):
    """An in-flight launch owned by whoever started it."""

    @abstractmethod
    def wait(self) -> LaunchResult:
        """Block until the launch finishes.

        Returns:
            LaunchResult describing success or the failure reason
        """
        ...


class UrlLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str, *, browser: str | None) -> LaunchHandle:
        """Start opening a URL without waiting for it to complete.

        Args:
            url: The URL to open
            browser: Browser command to open the URL with, or None for the
                system default browser

        Returns:
            Handle that can be waited on for the launch outcome
        """
        ...
