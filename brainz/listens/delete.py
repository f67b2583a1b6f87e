from __future__ import annotations

import logging

import requests

from .listen import Listen

log = logging.getLogger(__name__)


def delete_listen(
    session: requests.Session,
    api_url: str,
    token: str,
    listen: Listen,
    timeout: float = 30.0,
) -> bool:
    """Delete a single listen.

    Args:
        session: HTTP session
        api_url: Root of the ListenBrainz API
        token: User token authorizing the deletion
        listen: Listen to delete
        timeout: Request timeout in seconds

    Returns:
        True if the server answered 200, False on any other status or transport error
    """
    payload = {
        "listened_at": str(listen.listened_at),
        "recording_msid": listen.recording_msid,
    }
    headers = {"Authorization": f"Token {token}"}

    try:
        resp = session.post(f"{api_url}/delete-listen", json=payload, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        log.debug("delete_listen(%s, %s): request failed: %s", listen.time, listen.recording_msid, e)
        return False

    log.debug(
        "delete_listen(%s, %s): response status: %d %s",
        listen.time,
        listen.recording_msid,
        resp.status_code,
        resp.reason,
    )
    return resp.status_code == 200
