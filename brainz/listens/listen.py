from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class Track:
    """Track metadata attached to a listen."""

    name: str
    artist: str


@dataclass(frozen=True, slots=True)
class Listen:
    """A single ListenBrainz listen."""

    recording_msid: str
    track: Track
    listened_at: int

    @property
    def time(self) -> datetime:
        """Time the track was listened to, in UTC."""
        return datetime.fromtimestamp(self.listened_at, timezone.utc)

    def __str__(self) -> str:
        return f'[{self.time.isoformat()}] {self.track.artist} - "{self.track.name}"'


@dataclass(frozen=True, slots=True)
class Page:
    """One page of listens, newest first."""

    count: int
    latest_listen_ts: int
    listens: tuple[Listen, ...]
