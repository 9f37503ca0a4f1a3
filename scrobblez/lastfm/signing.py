import hashlib
from collections.abc import Mapping

# Sent on the wire but never part of the signature
SIGNING_SKIP = frozenset({"format"})


def sign(params: Mapping[str, str], secret: str) -> str:
    """Compute the Last.fm ``api_sig`` for a set of call parameters.

    Keys are sorted by code point, each key is concatenated with its value,
    the shared secret is appended and the result is MD5-hashed.
    """
    items = sorted((k, v) for k, v in params.items() if k not in SIGNING_SKIP)
    base = "".join(k + v for k, v in items) + secret
    return hashlib.md5(base.encode("utf-8")).hexdigest()


def signed(params: Mapping[str, str], secret: str) -> dict[str, str]:
    """Return a copy of params with ``api_sig`` added."""
    out = dict(params)
    out["api_sig"] = sign(params, secret)
    return out
