"""Application context with dependency injection."""

from dataclasses import dataclass

import structlog
from structlog.typing import FilteringBoundLogger

from urlspawn.gateway.launcher.abc import UrlLauncher
from urlspawn.gateway.launcher.real import RealUrlLauncher
from urlspawn.gateway.time.abc import Time
from urlspawn.gateway.time.real import RealTime

LOGGER_NAME = "urlspawn"


@dataclass(frozen=True)
class UrlSpawnContext:
    """Immutable context holding all dependencies for urlspawn operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    launcher: UrlLauncher
    time: Time
    logger: FilteringBoundLogger

    @staticmethod
    def for_test(
        *,
        launcher: UrlLauncher | None = None,
        time: Time | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> "UrlSpawnContext":
        """Create a context with fake implementations for anything not given.

        Example:
            >>> from urlspawn.gateway.launcher.fake import FakeUrlLauncher
            >>> launcher = FakeUrlLauncher()
            >>> ctx = UrlSpawnContext.for_test(launcher=launcher)
        """
        from urlspawn.gateway.launcher.fake import FakeUrlLauncher
        from urlspawn.gateway.time.fake import FakeTime

        return UrlSpawnContext(
            launcher=launcher if launcher is not None else FakeUrlLauncher(),
            time=time if time is not None else FakeTime(),
            logger=logger if logger is not None else structlog.get_logger(LOGGER_NAME),
        )


def create_context() -> UrlSpawnContext:
    """Create production context with real implementations."""
    return UrlSpawnContext(
        launcher=RealUrlLauncher(),
        time=RealTime(),
        logger=structlog.get_logger(LOGGER_NAME),
    )
