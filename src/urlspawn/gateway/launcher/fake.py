"""Fake UrlLauncher implementation for testing.

FakeUrlLauncher is an in-memory implementation that captures launches
without opening browser windows, enabling fast and predictable tests.
"""

from dataclasses import dataclass

from urlspawn.gateway.launcher.abc import LaunchHandle, LaunchResult, UrlLauncher


@dataclass(frozen=True)
class LaunchCall:
    """Record of a launch call for test assertions.

    Attributes:
        url: URL that was launched
        browser: Browser that was requested, or None for the default browser
    """

    url: str
    browser: str | None


class FakeLaunchHandle(LaunchHandle):
    """Handle that completes immediately and reports waits to its launcher."""

    def __init__(self, *, url: str, result: LaunchResult, waited_urls: list[str]) -> None:
        self._url = url
        self._result = result
        self._waited_urls = waited_urls

    def wait(self) -> LaunchResult:
        self._waited_urls.append(self._url)
        return self._result


class FakeUrlLauncher(UrlLauncher):
    """In-memory fake that tracks launches and waits.

    This class has NO public setup methods. All state is captured during execution.
    """

    def __init__(self, *, failing_urls: dict[str, str] | None = None) -> None:
        """Create FakeUrlLauncher.

        Args:
            failing_urls: Maps URL to the error message its handle reports
                when waited on. Use to simulate browsers that fail to start.
        """
        self._failing_urls = failing_urls if failing_urls is not None else {}
        self._launch_calls: list[LaunchCall] = []
        self._waited_urls: list[str] = []

    def launch(self, url: str, *, browser: str | None) -> LaunchHandle:
        self._launch_calls.append(LaunchCall(url=url, browser=browser))

        if url in self._failing_urls:
            result = LaunchResult(success=False, error=self._failing_urls[url])
        else:
            result = LaunchResult(success=True, error=None)

        return FakeLaunchHandle(url=url, result=result, waited_urls=self._waited_urls)

    @property
    def launch_calls(self) -> list[LaunchCall]:
        """Get the launch calls in launch order.

        Returns a copy of the list to prevent external mutation.

        This property is for test assertions only.
        """
        return list(self._launch_calls)

    @property
    def launched_urls(self) -> list[str]:
        """Get the launched URLs in launch order.

        This property is for test assertions only.
        """
        return [call.url for call in self._launch_calls]

    @property
    def waited_urls(self) -> list[str]:
        """Get the URLs whose handles were waited on, in wait order.

        This property is for test assertions only.
        """
        return list(self._waited_urls)
