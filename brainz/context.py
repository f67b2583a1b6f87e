from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests

    from .config import Settings
    from .listens import ListenSource


@dataclass
class RuntimeContext:
    """Runtime context containing all shared dependencies.

    Passed explicitly instead of module-level state, so several
    configurations can run side by side in one process.
    """

    settings: Settings
    session: requests.Session
    source: ListenSource
