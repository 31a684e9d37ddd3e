"""Client session tokens (``T1==...``) handed to end users joining a session."""

from __future__ import annotations

import base64
import hashlib
import hmac

from models.token import TokenData, TokenRole

from .clock import Clock, system_clock

TOKEN_PREFIX = "T1=="


def sign_token_data(api_secret: str | bytes, query_string: str) -> str:
    """Lowercase hex HMAC-SHA1 of ``query_string`` keyed by the raw secret bytes."""
    key = api_secret.encode("utf-8") if isinstance(api_secret, str) else api_secret
    return hmac.new(key, query_string.encode("utf-8"), hashlib.sha1).hexdigest()


def build_client_session_token(
    api_key: str,
    api_secret: str | bytes,
    session_id: str,
    role: TokenRole,
    clock: Clock | None = None,
) -> str:
    """
    Build the token an end-user client presents when connecting to ``session_id``.

    Layout: ``T1==`` + base64("partner_id=<key>&sig=<hex>:<query string>").
    The token is valid for 24 hours from creation.
    """
    clock = clock or system_clock
    token_data = TokenData.issue(session_id, role, now=clock.now(), nonce=clock.nonce())
    query_string = token_data.to_query_string()
    signature = sign_token_data(api_secret, query_string)
    decoded = f"partner_id={api_key}&sig={signature}:{query_string}"
    encoded = base64.b64encode(decoded.encode("utf-8")).decode("ascii")
    return f"{TOKEN_PREFIX}{encoded}"
