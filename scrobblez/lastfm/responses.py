from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from .errors import ServiceError, TransportError


@dataclass(frozen=True, slots=True)
class ApiSuccess:
    """Decoded JSON object of a successful call."""

    payload: dict[str, Any]


@dataclass(frozen=True, slots=True)
class ApiError:
    """Error payload returned by Last.fm (``{"error": 6, "message": ...}``)."""

    code: int
    message: str = "Unknown error"

    def to_exception(self) -> ServiceError:
        return ServiceError(self.code, self.message)


ApiResult = ApiSuccess | ApiError


def _is_error_payload(data: dict[str, Any]) -> bool:
    err = data.get("error")
    return isinstance(err, int) and not isinstance(err, bool)


def parse_response(resp: requests.Response) -> ApiResult:
    """Classify an HTTP response as success or error payload.

    Raises:
        TransportError: body is not a JSON object, or a non-2xx status came
            without an error payload.
    """
    try:
        data = resp.json()
    except ValueError as e:
        raise TransportError(f"HTTP {resp.status_code}: response body is not JSON") from e

    if not isinstance(data, dict):
        raise TransportError(f"HTTP {resp.status_code}: unexpected JSON {type(data).__name__}")

    if _is_error_payload(data):
        return ApiError(code=data["error"], message=str(data.get("message") or "Unknown error"))

    if not resp.ok:
        raise TransportError(f"HTTP {resp.status_code} {resp.reason or ''}".rstrip())

    return ApiSuccess(payload=data)


def unwrap(result: ApiResult) -> dict[str, Any]:
    """Return the success payload or raise ServiceError."""
    if isinstance(result, ApiError):
        raise result.to_exception()
    return result.payload


def _to_int(val: Any) -> int:
    try:
        return int(val)
    except (TypeError, ValueError):
        return 0


def parse_scrobble_counts(payload: dict[str, Any]) -> tuple[int, int]:
    """Return (accepted, ignored) from a track.scrobble payload."""
    scrobbles = payload.get("scrobbles")
    if not isinstance(scrobbles, dict):
        return 0, 0
    attr = scrobbles.get("@attr") or {}
    return _to_int(attr.get("accepted")), _to_int(attr.get("ignored"))
