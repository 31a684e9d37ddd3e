"""Build the short-lived JWT sent in the X-OPENTOK-AUTH header of management API calls."""

from __future__ import annotations

import jwt

from models.token import Claims

from .clock import Clock, system_clock
from .errors import EncodingError

ALGORITHM = "HS256"


def build_server_auth_token(
    api_key: str,
    api_secret: str | bytes,
    clock: Clock | None = None,
) -> str:
    """
    Sign a fresh set of project claims with the API secret.

    iat/exp/jti are drawn from ``clock`` on every call, so a token must not be
    reused across requests: it expires after three minutes.

    :raises EncodingError: if the claims or the secret cannot be encoded
    """
    clock = clock or system_clock
    claims = Claims.issue(api_key, now=clock.now(), nonce=clock.nonce())
    try:
        return jwt.encode(claims.as_payload(), api_secret, algorithm=ALGORITHM)
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        # Never echo the key material back in the message.
        raise EncodingError(f"Cannot encode server auth token ({type(exc).__name__})") from None
