import re
from collections.abc import Callable

RECOMMENDED_DAILY_MAX = 2000

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_song_input(text: str) -> tuple[str, str | None]:
    """Split "track - artist" (or "track-artist") into its parts.

    Returns (track, None) when no artist could be read, so the caller asks
    for it separately. The track is empty when nothing precedes the delimiter.
    """
    text = text.strip()
    if " - " in text:
        parts = text.split(" - ")
    elif "-" in text:
        parts = text.split("-")
    else:
        return text, None

    track, artist = parts[0].strip(), parts[1].strip()
    return track, artist or None


def read_count(text: str) -> tuple[int, bool]:
    """Read a scrobble count as (count, valid).

    Only a leading integer is considered ("12abc" is 12). Junk or
    non-positive input gives (1, False).
    """
    m = _LEADING_INT.match(text or "")
    if not m or int(m.group(1)) <= 0:
        return 1, False
    return int(m.group(1)), True


def parse_count(text: str) -> int:
    return read_count(text)[0]


def is_affirmative(text: str) -> bool:
    return text.strip().lower() in {"y", "yes"}


class Console:
    """Terminal prompts used by the interactive run.

    ``input_fn`` and ``output_fn`` default to the builtins ``input`` and
    ``print``; tests pass scripted ones. EOF on any prompt propagates as
    ``EOFError``.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output_fn

    def ask(self, question: str) -> str:
        return self._input(question)

    def show(self, message: str) -> None:
        self._output(message)

    def show_auth_url(self, url: str) -> None:
        self.show(f"Open this URL in your browser and authorize the app:\n{url}")

    def wait_for_enter(self) -> None:
        self.ask("\nAfter authorizing in the browser, press ENTER to continue: ")

    def ask_song(self) -> tuple[str, str]:
        track, artist = parse_song_input(self.ask("\nEnter the song name: "))
        while not track:
            self.show("The song name cannot be empty.")
            track, artist = parse_song_input(self.ask("Enter the song name: "))
        while not artist:
            artist = self.ask("Enter the artist name: ").strip()
        return track, artist

    def ask_count(self) -> tuple[int, bool]:
        """Return (count, valid); valid is False when the default of 1 was substituted."""
        return read_count(
            self.ask(f"How many scrobbles would you like? (Recommended daily maximum: {RECOMMENDED_DAILY_MAX}): ")
        )

    def ask_continue(self) -> bool:
        return is_affirmative(self.ask("\nWould you like to scrobble more? (y/n): "))
