"""Real UrlLauncher implementation.

Each launch runs in its own thread so the caller can keep launching while
earlier browsers are still starting up.
"""

import subprocess
import threading
from collections.abc import Callable

import click

from urlspawn.gateway.launcher.abc import LaunchHandle, LaunchResult, UrlLauncher


def open_with_default_browser(url: str) -> LaunchResult:
    """Hand a URL to the system opener without waiting for the browser to exit.

    click.launch returns a non-zero status when the opener cannot be started.
    """
    returncode = click.launch(url)
    if returncode != 0:
        return LaunchResult(
            success=False, error=f"failed to open {url}: opener exited with status {returncode}"
        )
    return LaunchResult(success=True, error=None)


def open_with_browser(url: str, browser: str) -> LaunchResult:
    """Open a URL by running the named browser command with the URL as argument."""
    try:
        result = subprocess.run([browser, url], check=False)
    except OSError as e:
        return LaunchResult(success=False, error=f"failed to run browser '{browser}': {e}")
    if result.returncode != 0:
        return LaunchResult(
            success=False,
            error=f"browser '{browser}' exited with status {result.returncode} for {url}",
        )
    return LaunchResult(success=True, error=None)


class ThreadLaunchHandle(LaunchHandle):
    """Handle backed by a started thread that produces a LaunchResult."""

    def __init__(self, target: Callable[[], LaunchResult]) -> None:
        self._result: LaunchResult | None = None

        def run() -> None:
            try:
                self._result = target()
            except Exception as e:
                self._result = LaunchResult(success=False, error=str(e))

        self._thread = threading.Thread(target=run)
        self._thread.start()

    def wait(self) -> LaunchResult:
        self._thread.join()
        if self._result is None:
            return LaunchResult(success=False, error="launch thread exited without a result")
        return self._result


class RealUrlLauncher(UrlLauncher):
    """Production implementation that opens URLs in real browsers."""

    def launch(self, url: str, *, browser: str | None) -> LaunchHandle:
        if browser is None:
            return ThreadLaunchHandle(lambda: open_with_default_browser(url))
        return ThreadLaunchHandle(lambda: open_with_browser(url, browser))
