CONNECTION_HINT = "Please check your internet connection."
AUTHORIZE_HINT = "Please make sure to authorize the app in the browser before continuing."


class ScrobblezError(Exception):
    """Base class for all errors raised by scrobblez."""


class ConfigError(ScrobblezError):
    """Required configuration is missing."""


class TransportError(ScrobblezError):
    """The HTTP exchange failed or returned something that is not an API payload."""


class ServiceError(ScrobblezError):
    """Last.fm answered with an error payload."""

    def __init__(self, code: int, message: str):
        super().__init__(f"Last.fm API error: {message} (code: {code})")
        self.code = code
        self.message = message


class ValidationError(ScrobblezError):
    """A success payload is missing a field we need."""


class _HintedError(ScrobblezError):
    hint = ""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(f"{message}. {self.hint}")
        self.code = code


class AuthTokenError(_HintedError):
    """Could not obtain a request token."""

    hint = CONNECTION_HINT


class SessionError(_HintedError):
    """Could not exchange the authorized token for a session key."""

    hint = AUTHORIZE_HINT


class BatchSubmissionError(ScrobblezError):
    """One scrobble batch was rejected or never reached the service."""

    def __init__(self, batch_index: int, size: int, cause: Exception):
        super().__init__(f"Batch {batch_index + 1} ({size} scrobbles) failed: {cause}")
        self.batch_index = batch_index
        self.size = size
        self.cause = cause
