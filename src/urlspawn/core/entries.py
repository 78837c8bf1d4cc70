"""Reading of URL entry sources.

An entry source is UTF-8 text with one entry per line:

    # comment
    https://example.com
    https://example.org;firefox

Blank lines and lines starting with '#' are ignored. The first ';'-separated
field is the URL and the optional second field names the browser to use.
"""

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

STDIN_SOURCE = "-"
FIELD_SEPARATOR = ";"
COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class Entry:
    """One requested URL launch."""

    url: str
    browser: str | None


class EntrySourceError(OSError):
    """Error raised when an entry source cannot be opened or read."""


class MissingUrlError(ValueError):
    """Error raised when a line has no URL field."""


def parse_entries(lines: Iterable[str], *, source: str) -> list[Entry]:
    """Parse entry lines in order.

    Args:
        lines: Lines of the entry source, with or without line terminators
        source: Source name used in error messages

    Returns:
        Entries in source order

    Raises:
        MissingUrlError: If a line has no URL field
    """
    entries: list[Entry] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if not line:
            continue

        if line.startswith(COMMENT_PREFIX):
            continue

        fields = line.split(FIELD_SEPARATOR)
        if not fields:
            raise MissingUrlError(f"missing URL: file {source}, line {line_number}")

        url = fields[0].strip()
        browser = fields[1].strip() if len(fields) > 1 else None

        entries.append(Entry(url=url, browser=browser))

    return entries


def read_entries(source: str, *, stdin: TextIO | None = None) -> list[Entry]:
    """Read entries from a file, or from standard input when source is '-'.

    Args:
        source: Path of the entry file, or '-' for standard input
        stdin: Stream to read for '-' (defaults to sys.stdin)

    Returns:
        Entries in source order

    Raises:
        EntrySourceError: If the source cannot be opened or read
        MissingUrlError: If a line has no URL field
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        try:
            return parse_entries(stream, source=source)
        except (OSError, UnicodeDecodeError) as e:
            raise EntrySourceError(f"cannot read {source}: {e}") from e

    try:
        with open(source, encoding="utf-8") as f:
            return parse_entries(f, source=source)
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise EntrySourceError(f"cannot open {source}: {reason}") from e
