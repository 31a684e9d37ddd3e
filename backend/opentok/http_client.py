"""Signed requests against the OpenTok management API."""

from __future__ import annotations

import logging

import httpx

from .clock import Clock
from .errors import BadRequestError, RequestError, ServerError, UnknownError
from .server_auth import build_server_auth_token

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-OPENTOK-AUTH"
ACCEPT = "Accept"
JSON = "application/json"


def _headers(api_key: str, api_secret: str | bytes, clock: Clock | None) -> dict[str, str]:
    return {
        AUTH_HEADER: build_server_auth_token(api_key, api_secret, clock),
        ACCEPT: JSON,
    }


def raise_for_status(response: httpx.Response) -> httpx.Response:
    """Map a non-2xx response onto the OpenTokError hierarchy."""
    status = response.status_code
    if 200 <= status <= 299:
        return response
    if 400 <= status <= 499:
        raise BadRequestError(response.text, status_code=status)
    if 500 <= status <= 599:
        raise ServerError(response.text, status_code=status)
    raise UnknownError(status_code=status)


async def _send(client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    try:
        response = await client.send(request)
    except httpx.RequestError as exc:
        logger.warning("[http_client] %s %s failed: %s", request.method, request.url, exc)
        raise RequestError(f"{request.method} {request.url} failed: {exc}") from exc
    logger.info("[http_client] %s %s -> %s", request.method, request.url, response.status_code)
    return raise_for_status(response)


async def post(
    endpoint: str,
    api_key: str,
    api_secret: str | bytes,
    data: dict[str, str],
    *,
    client: httpx.AsyncClient,
    clock: Clock | None = None,
) -> httpx.Response:
    """POST ``data`` form-encoded, authenticated with a freshly signed token."""
    request = client.build_request(
        "POST", endpoint, headers=_headers(api_key, api_secret, clock), data=data
    )
    return await _send(client, request)


async def get(
    endpoint: str,
    api_key: str,
    api_secret: str | bytes,
    *,
    client: httpx.AsyncClient,
    clock: Clock | None = None,
) -> httpx.Response:
    request = client.build_request("GET", endpoint, headers=_headers(api_key, api_secret, clock))
    return await _send(client, request)
