"""Tests for request signing."""

import hashlib
import re

from scrobblez.lastfm.signing import sign, signed


def _md5(s: str) -> str:
    return hashlib.md5(s.encode("utf-8")).hexdigest()


class TestSign:
    def test_known_value(self):
        params = {"method": "auth.getToken", "api_key": "abc"}
        assert sign(params, "s3cret") == _md5("api_keyabcmethodauth.getTokens3cret")

    def test_insertion_order_does_not_matter(self):
        a = {"method": "auth.getSession", "api_key": "k", "token": "t"}
        b = {"token": "t", "api_key": "k", "method": "auth.getSession"}
        assert sign(a, "x") == sign(b, "x")

    def test_format_is_excluded(self):
        base = {"method": "auth.getToken", "api_key": "k"}
        assert sign({**base, "format": "json"}, "x") == sign(base, "x")
        assert sign({**base, "format": "xml"}, "x") == sign(base, "x")

    def test_output_shape_is_stable(self):
        params = {"method": "track.scrobble", "artist[0]": "Björk", "track[0]": "Jóga"}
        first = sign(params, "x")
        assert first == sign(params, "x")
        assert re.fullmatch(r"[0-9a-f]{32}", first)

    def test_code_point_sort(self):
        # "0" (0x30) sorts before "]" (0x5d)
        params = {"artist[1]": "b", "artist[10]": "a"}
        assert sign(params, "") == _md5("artist[10]aartist[1]b")

    def test_secret_changes_signature(self):
        params = {"method": "auth.getToken"}
        assert sign(params, "one") != sign(params, "two")


def test_signed_adds_api_sig_without_touching_input():
    params = {"method": "auth.getToken", "api_key": "k", "format": "json"}
    out = signed(params, "x")
    assert out["api_sig"] == sign(params, "x")
    assert out["format"] == "json"
    assert "api_sig" not in params
