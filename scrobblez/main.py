import logging
import webbrowser
from collections.abc import Callable

from .config import Settings
from .context import RuntimeContext
from .lastfm import AuthTokenError, LastFmClient, SessionError, SubmissionReport
from .prompt import Console

log = logging.getLogger(__name__)


def _open_in_browser(ctx: RuntimeContext, url: str) -> None:
    if not ctx.settings.open_browser:
        return
    try:
        if not ctx.open_url(url):
            log.warning("Could not open a browser, please open the URL manually")
    except webbrowser.Error as e:
        log.warning("Could not open a browser (%s), please open the URL manually", e)


def authenticate(ctx: RuntimeContext) -> str:
    """Run the token -> browser -> session handshake and return the session key."""
    log.info("Starting the authentication process...")
    token = ctx.client.request_token()

    url = ctx.client.auth_url(token, ctx.settings.auth_url)
    ctx.console.show_auth_url(url)
    _open_in_browser(ctx, url)

    log.info("Waiting for authorization...")
    ctx.console.wait_for_enter()

    log.info("Getting the session key...")
    session_key = ctx.client.exchange_session(token)
    log.info("Authentication successful!")
    return session_key


def scrobble_once(ctx: RuntimeContext, session_key: str) -> SubmissionReport:
    """Ask for one song and a count, then submit it."""
    track, artist = ctx.console.ask_song()
    count, valid = ctx.console.ask_count()
    if not valid:
        log.warning("Invalid number. Using 1 as default.")

    report = ctx.client.submit_scrobbles(
        session_key,
        artist,
        track,
        count,
        batch_size=ctx.settings.batch_size,
        spacing=ctx.settings.timestamp_spacing,
    )

    if report.failures:
        log.warning(
            'Scrobble finished with errors: %d/%d scrobbles of "%s" by "%s" logged, %d batch(es) failed',
            report.completed,
            report.total,
            track,
            artist,
            len(report.failures),
        )
    else:
        log.info(
            'Scrobble completed successfully! %d scrobbles of "%s" by "%s" have been logged.',
            report.completed,
            track,
            artist,
        )
    return report


def run(
    settings: Settings,
    console: Console | None = None,
    client: LastFmClient | None = None,
    open_url: Callable[[str], bool] | None = None,
) -> int:
    """Run the interactive authenticate-and-scrobble session. Returns an exit code."""
    ctx = RuntimeContext(
        settings=settings,
        client=client or LastFmClient.from_settings(settings),
        console=console or Console(),
        open_url=open_url or webbrowser.open,
    )

    try:
        session_key = authenticate(ctx)
        while True:
            scrobble_once(ctx, session_key)
            if not ctx.console.ask_continue():
                break
    except (AuthTokenError, SessionError) as e:
        log.error("An error occurred: %s", e)
        log.info(
            "If the error is related to authentication, run the program again and make sure "
            "to authorize the app in your browser before pressing enter."
        )
        return 1
    except EOFError:
        log.info("No more input.")

    log.info("Thank you for using scrobblez! See you next time!")
    return 0
