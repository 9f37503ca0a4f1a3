from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import BatchSubmissionError

# Last.fm accepts at most 50 scrobbles per track.scrobble call
MAX_BATCH_SIZE = 50
DEFAULT_SPACING_SECONDS = 300


@dataclass(frozen=True, slots=True)
class ScrobbleEvent:
    """A single play to submit."""

    artist: str
    track: str
    timestamp: int


@dataclass
class SubmissionReport:
    """Outcome of one submit_scrobbles run."""

    total: int
    completed: int = 0
    accepted: int = 0
    ignored: int = 0
    failures: list[BatchSubmissionError] = field(default_factory=list)

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 100
        return self.completed * 100 // self.total

    @property
    def ok(self) -> bool:
        return not self.failures and self.completed == self.total


def event_timestamp(now: float, index: int, spacing: int = DEFAULT_SPACING_SECONDS) -> int:
    """Timestamp for the event at overall position ``index`` (0 is the most recent)."""
    return int(now) - (index + 1) * spacing


def plan_batches(
    artist: str,
    track: str,
    total_count: int,
    now: float,
    batch_size: int = MAX_BATCH_SIZE,
    spacing: int = DEFAULT_SPACING_SECONDS,
) -> Iterator[list[ScrobbleEvent]]:
    """Split ``total_count`` plays of one track into ordered batches.

    Batches are produced lazily, one at a time. Timestamps are assigned
    across the whole run, so batch 1 continues where batch 0 left off.
    Arguments are checked immediately, before the first batch is requested.
    """
    if not 1 <= batch_size <= MAX_BATCH_SIZE:
        raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
    if total_count < 0:
        raise ValueError(f"total_count must not be negative, got {total_count}")

    return _iter_batches(artist, track, total_count, now, batch_size, spacing)


def _iter_batches(
    artist: str, track: str, total_count: int, now: float, batch_size: int, spacing: int
) -> Iterator[list[ScrobbleEvent]]:
    for start in range(0, total_count, batch_size):
        end = min(start + batch_size, total_count)
        yield [ScrobbleEvent(artist=artist, track=track, timestamp=event_timestamp(now, n, spacing)) for n in range(start, end)]


def batch_count(total_count: int, batch_size: int = MAX_BATCH_SIZE) -> int:
    """Number of batches needed for ``total_count`` plays."""
    return max(0, -(-total_count // batch_size))


def batch_params(batch: list[ScrobbleEvent]) -> dict[str, str]:
    """Render a batch as indexed form fields (index local to the batch)."""
    params: dict[str, str] = {}
    for i, ev in enumerate(batch):
        params[f"artist[{i}]"] = ev.artist
        params[f"track[{i}]"] = ev.track
        params[f"timestamp[{i}]"] = str(ev.timestamp)
    return params
