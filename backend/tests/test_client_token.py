"""Tests for client session tokens (T1==...)."""

import base64
import hashlib
import hmac

import pytest

from models import CLIENT_TOKEN_VALIDITY_SECONDS, TokenRole
from opentok.client_token import TOKEN_PREFIX, build_client_session_token, sign_token_data
from opentok.clock import FixedClock

# Computed independently with `openssl dgst -sha1 -hmac s` and `base64`.
EXPECTED_SIG = "8a79a74d53852f43be5231ec7ab38b7a9ba2f243"
EXPECTED_TOKEN = (
    "T1==cGFydG5lcl9pZD1rJnNpZz04YTc5YTc0ZDUzODUyZjQzYmU1MjMxZWM3YWIzOGI3YTliYTJmMjQzOnNlc3Npb25f"
    "aWQ9c2VzczEmY3JlYXRlX3RpbWU9MTYwMDAwMDAwMCZleHBpcmVfdGltZT0xNjAwMDg2NDAwJm5vbmNlPTQyJnJvbGU9"
    "bW9kZXJhdG9y"
)


def _decode(token: str) -> tuple[dict[str, str], str, str]:
    """Split a token into (fields, sig, signed query string)."""
    assert token.startswith(TOKEN_PREFIX)
    inner = base64.b64decode(token[len(TOKEN_PREFIX):], validate=True).decode("utf-8")
    header, query_string = inner.split(":", 1)
    partner, sig = header.split("&")
    fields = dict(part.split("=", 1) for part in query_string.split("&"))
    fields["partner_id"] = partner.removeprefix("partner_id=")
    return fields, sig.removeprefix("sig="), query_string


def test_known_answer() -> None:
    clock = FixedClock(now=1_600_000_000, nonce=42)
    token = build_client_session_token("k", "s", "sess1", TokenRole.MODERATOR, clock)
    assert token == EXPECTED_TOKEN


def test_sign_token_data_is_lowercase_hex_hmac_sha1() -> None:
    query_string = "session_id=sess1&create_time=1600000000&expire_time=1600086400&nonce=42&role=moderator"
    assert sign_token_data("s", query_string) == EXPECTED_SIG
    assert sign_token_data(b"s", query_string) == EXPECTED_SIG


def test_moderator_role_is_embedded_lowercase() -> None:
    token = build_client_session_token("k", "s", "sess1", TokenRole.MODERATOR)
    assert token.startswith("T1==")
    fields, _, _ = _decode(token)
    assert fields["role"] == "moderator"


@pytest.mark.parametrize(
    ("role", "wire"),
    [
        (TokenRole.PUBLISHER, "publisher"),
        (TokenRole.SUBSCRIBER, "subscriber"),
        (TokenRole.MODERATOR, "moderator"),
    ],
)
def test_signature_verifies_and_fields_round_trip(role: TokenRole, wire: str) -> None:
    token = build_client_session_token("46123456", "top-secret", "1_MX4xMjM0NX4", role)
    fields, sig, query_string = _decode(token)

    assert fields["partner_id"] == "46123456"
    assert fields["session_id"] == "1_MX4xMjM0NX4"
    assert fields["role"] == wire
    expected = hmac.new(b"top-secret", query_string.encode("utf-8"), hashlib.sha1).hexdigest()
    assert sig == expected


def test_query_string_field_order_is_fixed() -> None:
    token = build_client_session_token("k", "s", "sess1", TokenRole.PUBLISHER, FixedClock(100, 7))
    _, _, query_string = _decode(token)
    assert [part.split("=", 1)[0] for part in query_string.split("&")] == [
        "session_id",
        "create_time",
        "expire_time",
        "nonce",
        "role",
    ]


def test_validity_window_is_24_hours() -> None:
    token = build_client_session_token("k", "s", "sess1", TokenRole.SUBSCRIBER)
    fields, _, _ = _decode(token)
    assert int(fields["expire_time"]) - int(fields["create_time"]) == CLIENT_TOKEN_VALIDITY_SECONDS == 86400


def test_max_nonce_is_rendered_unsigned() -> None:
    clock = FixedClock(now=1, nonce=2**64 - 1)
    fields, _, _ = _decode(build_client_session_token("k", "s", "sess1", TokenRole.PUBLISHER, clock))
    assert fields["nonce"] == "18446744073709551615"


def test_consecutive_tokens_differ() -> None:
    first = build_client_session_token("k", "s", "sess1", TokenRole.PUBLISHER)
    second = build_client_session_token("k", "s", "sess1", TokenRole.PUBLISHER)
    assert first != second


def test_secret_is_not_embedded() -> None:
    token = build_client_session_token("k", "very-secret-value", "sess1", TokenRole.PUBLISHER)
    inner = base64.b64decode(token[len(TOKEN_PREFIX):]).decode("utf-8")
    assert "very-secret-value" not in inner
