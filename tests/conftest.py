import pytest

from brainz.config import Settings
from brainz.listens import Listen, Page, Track

API_URL = "https://api.listenbrainz.org/1"
LISTENS_URL = f"{API_URL}/user/alice/listens"
DELETE_URL = f"{API_URL}/delete-listen"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LISTENBRAINZ_TOKEN",
        "LISTENBRAINZ_USER",
        "LISTENBRAINZ_API_URL",
        "LISTENBRAINZ_PAGE_SIZE",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(token="secret-token", user="alice")


def make_listen(ts, artist="Pink Floyd", name="Time", msid=None):
    return Listen(recording_msid=msid or f"msid-{ts}", track=Track(name=name, artist=artist), listened_at=ts)


def make_page(*listens):
    latest = listens[0].listened_at if listens else 0
    return Page(count=len(listens), latest_listen_ts=latest, listens=tuple(listens))


def listens_payload(*listens):
    """Build a JSON body the way the listens endpoint returns it."""
    return {
        "payload": {
            "count": len(listens),
            "latest_listen_ts": listens[0].listened_at if listens else 0,
            "user_id": "alice",
            "listens": [
                {
                    "recording_msid": listen.recording_msid,
                    "listened_at": listen.listened_at,
                    "inserted_at": listen.listened_at + 5,
                    "track_metadata": {
                        "track_name": listen.track.name,
                        "artist_name": listen.track.artist,
                        "additional_info": {},
                    },
                }
                for listen in listens
            ],
        }
    }
