from __future__ import annotations

import logging
import sys
from typing import Any, Protocol
from urllib.parse import quote

import requests

from ..errors import DecodeError, NetworkError
from .listen import Listen, Page, Track

log = logging.getLogger(__name__)


class ListenSource(Protocol):
    """Anything that can serve pages of listens older than a cursor."""

    def fetch(self, cursor: int | None) -> Page: ...


def _require(obj: dict[str, Any], key: str, kind: type, where: str) -> Any:
    value = obj.get(key)
    # bool is an int subclass, never a valid timestamp
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DecodeError(f"{where}: expected {kind.__name__} '{key}', got {value!r}")
    return value


def _parse_listens(listens: list[Any]) -> tuple[Listen, ...]:
    """Parse ListenBrainz listen objects into Listen instances."""
    parsed: list[Listen] = []

    for index, item in enumerate(listens):
        where = f"listen #{index}"
        if not isinstance(item, dict):
            raise DecodeError(f"{where}: expected an object, got {item!r}")

        metadata = _require(item, "track_metadata", dict, where)
        track = Track(
            name=_require(metadata, "track_name", str, where),
            artist=_require(metadata, "artist_name", str, where),
        )
        parsed.append(
            Listen(
                recording_msid=_require(item, "recording_msid", str, where),
                track=track,
                listened_at=_require(item, "listened_at", int, where),
            )
        )

    return tuple(parsed)


def parse_page(data: Any) -> Page:
    """Decode the JSON document returned by the listens endpoint."""
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    payload = _require(data, "payload", dict, "response")
    listens = _parse_listens(_require(payload, "listens", list, "payload"))

    count = payload.get("count", len(listens))
    latest = payload.get("latest_listen_ts") or 0
    if not isinstance(count, int) or not isinstance(latest, int):
        raise DecodeError(f"payload: malformed count/latest_listen_ts ({count!r}, {latest!r})")

    return Page(count=count, latest_listen_ts=latest, listens=listens)


class ListenBrainzSource:
    """Fetches pages of a user's listens from the ListenBrainz API."""

    def __init__(
        self,
        session: requests.Session,
        api_url: str,
        user: str,
        page_size: int = 1000,
        timeout: float = 30.0,
    ):
        self.session = session
        self.url = f"{api_url}/user/{quote(user, safe='')}/listens"
        self.page_size = page_size
        self.timeout = timeout

    def fetch(self, cursor: int | None) -> Page:
        """Fetch the newest page of listens strictly older than ``cursor``.

        Args:
            cursor: Exclusive upper bound timestamp, None for the most recent listens

        Returns:
            Decoded page

        Raises:
            NetworkError: The request failed or the server returned an error status
            DecodeError: The body is not JSON or not shaped like a listens payload
        """
        params: dict[str, Any] = {"count": self.page_size}
        if cursor is not None:
            params["max_ts"] = cursor

        try:
            resp = self.session.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"fetching listens failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"listens response is not valid JSON: {e}") from e

        return parse_page(data)


def fetch_listens(
    source: ListenSource,
    max_count: int = sys.maxsize,
    cut_off: int = 0,
) -> list[Listen]:
    """Walk the listen history backwards from now.

    Stops when a page comes back empty, when a listen older than ``cut_off``
    is reached (0 disables the cutoff) or once ``max_count`` listens have
    been collected. Errors from ``source`` propagate and nothing is returned.
    """
    collected: list[Listen] = []
    cursor: int | None = None

    while True:
        page = source.fetch(cursor)
        log.debug("Fetched %d listens (max_ts=%s)", len(page.listens), cursor)

        if not page.listens:
            return collected

        # max_ts is exclusive; a page that doesn't start below it would repeat forever
        if cursor is not None and page.listens[0].listened_at >= cursor:
            log.warning("Pagination did not move past max_ts=%d, stopping", cursor)
            return collected

        for listen in page.listens:
            if cut_off and listen.listened_at < cut_off:
                return collected
            collected.append(listen)
            if len(collected) >= max_count:
                return collected

        cursor = page.listens[-1].listened_at
