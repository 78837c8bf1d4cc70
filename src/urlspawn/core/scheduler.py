"""Launch scheduling for URL entries.

Entries are launched one at a time in source order with an optional delay
after each launch, since browsers can be overwhelmed by a burst of open
requests. Launches run concurrently; once every entry has been launched the
handles are joined in launch order and the first failure is reported.
"""

from urlspawn.core.context import UrlSpawnContext
from urlspawn.core.duration import Duration, format_duration, parse_duration, to_seconds
from urlspawn.core.entries import Entry, read_entries
from urlspawn.gateway.launcher.abc import LaunchHandle, LaunchResult


class LaunchError(RuntimeError):
    """Error raised when at least one launched URL failed."""


def resolve_browser(entry: Entry, browser: str | None) -> str | None:
    """Pick the browser for an entry: run-wide override, then the entry's own."""
    if browser is not None:
        return browser
    return entry.browser


def _join_handles(
    ctx: UrlSpawnContext, handles: list[LaunchHandle], *, count: int
) -> LaunchResult | None:
    """Wait on every handle in launch order, returning the first failure seen."""
    first_failure: LaunchResult | None = None

    ctx.logger.debug("Joining threads", dry_run=False, thread_count=count)

    for num, handle in enumerate(handles, start=1):
        ctx.logger.debug("Joining thread", dry_run=False, thread_num=num, thread_count=count)

        result = handle.wait()
        if not result.success:
            ctx.logger.warning(
                "Launch failed", thread_num=num, thread_count=count, error=result.error
            )
            if first_failure is None:
                first_failure = result

        ctx.logger.debug("Joined thread", dry_run=False, thread_num=num, thread_count=count)

    ctx.logger.info("Joined all threads", thread_count=count)

    return first_failure


def run_entries(
    ctx: UrlSpawnContext,
    entries: list[Entry],
    *,
    delay: Duration | None,
    browser: str | None,
    dry_run: bool,
) -> None:
    """Launch every entry, sleeping after each launch, then join them all.

    Args:
        ctx: Context providing the launcher, time and logger
        entries: Entries to launch, in launch order
        delay: Time to sleep after each launch, or None to not pause
        browser: Browser overriding every entry's own browser
        dry_run: Only report what would be done

    Raises:
        LaunchError: If any launch failed. Raised only after all launches
            have been joined, with the first failure in launch order.
    """
    handles: list[LaunchHandle] = []
    count = len(entries)
    sleep_duration = format_duration(delay)

    for num, entry in enumerate(entries, start=1):
        url = entry.url
        resolved = resolve_browser(entry, browser)

        if dry_run:
            ctx.logger.info(
                "Would spawn URL",
                dry_run=dry_run,
                thread_num=num,
                thread_count=count,
                url=url,
                browser=resolved,
            )
        else:
            if resolved is not None:
                ctx.logger.debug(
                    "Spawning URL with custom browser",
                    thread_num=num,
                    thread_count=count,
                    url=url,
                    browser=resolved,
                )
            else:
                ctx.logger.debug(
                    "Spawning URL with default browser",
                    thread_num=num,
                    thread_count=count,
                    url=url,
                    browser=resolved,
                )

            handles.append(ctx.launcher.launch(url, browser=resolved))

            ctx.logger.info(
                "URL spawned", thread_num=num, thread_count=count, url=url, browser=resolved
            )

        if dry_run:
            ctx.logger.info(
                "Would sleep",
                dry_run=dry_run,
                thread_num=num,
                thread_count=count,
                sleep_duration=sleep_duration,
            )
        elif delay is not None:
            ctx.logger.debug(
                "Sleeping",
                dry_run=dry_run,
                thread_num=num,
                thread_count=count,
                sleep_duration=sleep_duration,
            )
            ctx.time.sleep(to_seconds(delay))
            ctx.logger.debug(
                "Slept",
                dry_run=dry_run,
                thread_num=num,
                thread_count=count,
                sleep_duration=sleep_duration,
            )

    if dry_run:
        ctx.logger.info("Would join threads", dry_run=dry_run, thread_count=count)
        return

    first_failure = _join_handles(ctx, handles, count=count)
    if first_failure is not None:
        raise LaunchError(first_failure.error or "launch failed")


def handle_urls_file(
    ctx: UrlSpawnContext,
    *,
    source: str,
    delay: str | None,
    browser: str | None,
    dry_run: bool,
) -> None:
    """Parse the delay and entry source, then launch the entries.

    Both inputs are validated before anything is launched.

    Raises:
        InvalidDurationError: If the delay cannot be parsed
        EntrySourceError: If the entry source cannot be read
        MissingUrlError: If an entry has no URL
        LaunchError: If any launch failed
    """
    ctx.logger.info("Options", dry_run=dry_run, browser=browser, file=source, sleep_time=delay)

    sleep_duration = parse_duration(delay) if delay is not None else None

    entries = read_entries(source)

    ctx.logger.info("Read entries", entries=len(entries))

    run_entries(ctx, entries, delay=sleep_duration, browser=browser, dry_run=dry_run)
