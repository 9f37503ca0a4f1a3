from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Settings
    from .lastfm import LastFmClient
    from .prompt import Console


@dataclass
class RuntimeContext:
    """Runtime context containing all shared dependencies.

    Built once per run and handed down explicitly, so tests can swap the
    client, the console or the browser opener.
    """

    settings: Settings
    client: LastFmClient
    console: Console
    open_url: Callable[[str], bool]
