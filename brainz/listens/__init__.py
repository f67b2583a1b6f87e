from .delete import delete_listen
from .fetch import ListenBrainzSource, ListenSource, fetch_listens, parse_page
from .listen import Listen, Page, Track

__all__ = [
    "Listen",
    "Page",
    "Track",
    "ListenSource",
    "ListenBrainzSource",
    "fetch_listens",
    "parse_page",
    "delete_listen",
]
