"""urlspawn CLI entry point.

This package provides a Click-based CLI that opens a list of URLs in a web
browser, pausing between launches. See `urlspawn --help` for details.
"""

from urlspawn.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `urlspawn` console script."""
    cli()
