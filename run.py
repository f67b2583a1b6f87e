import sys

import click

from brainz.config import Settings, configure_logging
from brainz.errors import BrainzError, ConfigError, InvalidFilterError
from brainz.main import run as _run
from brainz.timefilter import parse_time_filter


def _time_filter(ctx, param, value):
    try:
        return parse_time_filter(value or "")
    except InvalidFilterError as e:
        raise click.BadParameter(str(e)) from e


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="This program requires the environment variable LISTENBRAINZ_TOKEN to be defined.",
)
@click.option("-u", "--user", envvar="LISTENBRAINZ_USER", required=True, help="The user name or login ID.")
@click.option("-s", "--search", "pattern", default=".*", show_default=True, help="Search regexp pattern (case-insensitive).")
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Maximum number of listens to fetch.")
@click.option(
    "-t",
    "--time",
    "cut_off",
    default="",
    callback=_time_filter,
    help="Only look at listens newer than this, e.g. 30m, 12h, 7d, 1y.",
)
@click.option("-d", "--delete", is_flag=True, help="Delete matched listens.")
@click.option("-v", "--verbose", is_flag=True, help="Debug/verbose output.")
def run(user, pattern, limit, cut_off, delete, verbose):
    """Search a ListenBrainz user's listens and optionally delete the matches."""
    try:
        settings = Settings.from_env(
            user,
            pattern=pattern,
            max_count=limit if limit is not None else sys.maxsize,
            cut_off=cut_off,
            delete=delete,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Error: {e}.", err=True)
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        _run(settings)
    except BrainzError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
