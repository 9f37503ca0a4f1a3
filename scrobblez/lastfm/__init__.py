from .client import LASTFM_API_URL, LASTFM_AUTH_URL, LastFmClient
from .errors import (
    AuthTokenError,
    BatchSubmissionError,
    ConfigError,
    ScrobblezError,
    ServiceError,
    SessionError,
    TransportError,
    ValidationError,
)
from .responses import ApiError, ApiResult, ApiSuccess, parse_response
from .scrobble import ScrobbleEvent, SubmissionReport, event_timestamp, plan_batches
from .signing import sign

__all__ = [
    "LASTFM_API_URL",
    "LASTFM_AUTH_URL",
    "LastFmClient",
    "ApiError",
    "ApiResult",
    "ApiSuccess",
    "parse_response",
    "ScrobbleEvent",
    "SubmissionReport",
    "event_timestamp",
    "plan_batches",
    "sign",
    "ScrobblezError",
    "ConfigError",
    "TransportError",
    "ServiceError",
    "ValidationError",
    "AuthTokenError",
    "SessionError",
    "BatchSubmissionError",
]
