import click

from urlspawn.core.context import UrlSpawnContext, create_context
from urlspawn.core.duration import InvalidDurationError
from urlspawn.core.entries import EntrySourceError, MissingUrlError
from urlspawn.core.scheduler import LaunchError, handle_urls_file
from urlspawn.logging_config import LOG_LEVELS, configure_logging
from urlspawn.output import user_output

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    auto_envvar_prefix="URLSPAWN",
)

# Without a delay, web browsers can quickly become overwhelmed
# by a large number of URL open requests.
DEFAULT_DELAY = "1s"


@click.command("urlspawn", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="urlspawn")
@click.option(
    "-c",
    "--cfg",
    "source",
    required=True,
    metavar="CONFIG-FILE",
    help="File listing URLs to open, one per line ('-' for stdin)",
)
@click.option("-b", "--browser", help="Open every URL with this browser")
@click.option(
    "-d",
    "--delay",
    default=DEFAULT_DELAY,
    show_default=True,
    help="Delay after each launch, e.g. 500ms, 2s, 1m ('-1' for maximum)",
)
@click.option(
    "-n", "--dry-run", is_flag=True, help="No act mode (just show what would be done)"
)
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="info",
    show_default=True,
    help="Minimum level of log records to show",
)
@click.option("-u", "--use-json", is_flag=True, help="Output log information in JSON format")
@click.pass_context
def cli(
    ctx: click.Context,
    source: str,
    browser: str | None,
    delay: str,
    dry_run: bool,
    log_level: str,
    use_json: bool,
) -> None:
    """Open the URLs listed in CONFIG-FILE in a web browser, one at a time."""
    configure_logging(level=log_level, use_json=use_json)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    spawn_ctx: UrlSpawnContext = ctx.obj

    try:
        handle_urls_file(
            spawn_ctx, source=source, delay=delay, browser=browser, dry_run=dry_run
        )
    except (InvalidDurationError, EntrySourceError, MissingUrlError, LaunchError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
