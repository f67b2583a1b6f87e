import logging
import re
from dataclasses import dataclass

import click
import requests

from .config import Settings
from .context import RuntimeContext
from .listens import Listen, ListenBrainzSource, delete_listen, fetch_listens
from .matcher import compile_pattern, matches

log = logging.getLogger(__name__)

USER_AGENT = "brainz/0.1"


@dataclass
class RunSummary:
    """Counters for one run."""

    fetched: int = 0
    matched: int = 0
    deleted: int = 0
    failed: int = 0

    def log_stats(self) -> None:
        log.info("=== Run Statistics ===")
        log.info("Listens fetched: %d", self.fetched)
        log.info("Listens matched: %d", self.matched)
        if self.deleted or self.failed:
            log.info("Deleted: %d, failed: %d", self.deleted, self.failed)
        log.info("======================")


def _filter_and_act(ctx: RuntimeContext, listens: list[Listen], regex: re.Pattern[str]) -> RunSummary:
    settings = ctx.settings
    summary = RunSummary(fetched=len(listens))

    for listen in listens:
        if not matches(regex, listen):
            continue

        summary.matched += 1
        click.echo(str(listen))

        if not settings.delete:
            continue
        if delete_listen(ctx.session, settings.api_url, settings.token, listen, timeout=settings.request_timeout):
            summary.deleted += 1
        else:
            summary.failed += 1
            log.warning("Failed deleting listen: %s <%s>", listen, listen.recording_msid)

    return summary


def run(settings: Settings) -> RunSummary:
    """Fetch a user's listens, print the matches and optionally delete them."""
    # Compile before touching the network so a bad pattern fails fast
    regex = compile_pattern(settings.pattern)

    with requests.Session() as session:
        session.headers["User-Agent"] = USER_AGENT
        ctx = RuntimeContext(
            settings=settings,
            session=session,
            source=ListenBrainzSource(
                session,
                settings.api_url,
                settings.user,
                page_size=settings.page_size,
                timeout=settings.request_timeout,
            ),
        )

        log.info("Fetching listens for '%s'...", settings.user)
        listens = fetch_listens(ctx.source, max_count=settings.max_count, cut_off=settings.cut_off)
        log.info("Fetched %d listens", len(listens))

        summary = _filter_and_act(ctx, listens, regex)

    summary.log_stats()
    return summary
