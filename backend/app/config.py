"""Environment configuration for the token server."""

import os

from opentok.client import DEFAULT_TIMEOUT_SECONDS, SERVER_URL


def get_credentials() -> tuple[str, str]:
    """
    (api_key, api_secret) from OPENTOK_API_KEY / OPENTOK_API_SECRET; empty strings when unset.

    Only the key is stripped: the secret is raw key material and is used byte for byte.
    """
    api_key = os.environ.get("OPENTOK_API_KEY", "").strip()
    api_secret = os.environ.get("OPENTOK_API_SECRET", "")
    return api_key, api_secret


def get_server_url() -> str:
    return os.environ.get("OPENTOK_SERVER_URL", "").strip() or SERVER_URL


def get_timeout() -> float:
    raw = os.environ.get("OPENTOK_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"OPENTOK_TIMEOUT must be a number of seconds, got {raw!r}") from None
