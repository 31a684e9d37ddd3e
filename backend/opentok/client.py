"""Top level entry point: create sessions, generate client tokens, query streams."""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, SecretStr, TypeAdapter, ValidationError

from models.session import SessionOptions
from models.stream import StreamInfo
from models.token import TokenRole

from . import http_client
from .client_token import build_client_session_token
from .clock import Clock
from .errors import UnexpectedResponseError

logger = logging.getLogger(__name__)

SERVER_URL = "https://api.opentok.com"
API_ENDPOINT_PATH_START = "/v2/project/"
DEFAULT_TIMEOUT_SECONDS = 10.0


class _CreatedSession(BaseModel):
    session_id: str


_created_sessions = TypeAdapter(list[_CreatedSession])


class OpenTok:
    """
    Holds the API key and secret of an OpenTok project.

    The secret is only revealed to the signing functions; it is masked in
    ``repr`` and never sent over the wire. Do not share it publicly.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str | SecretStr,
        *,
        server_url: str = SERVER_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Clock | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not isinstance(api_secret, SecretStr):
            api_secret = SecretStr(api_secret)
        if not api_key or not api_secret.get_secret_value():
            raise ValueError("api_key and api_secret must be non-empty")
        self.api_key = api_key
        self._api_secret = api_secret
        self.server_url = server_url.rstrip("/")
        self._clock = clock
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def __repr__(self) -> str:
        return f"OpenTok(api_key={self.api_key!r}, api_secret={self._api_secret!r})"

    async def __aenter__(self) -> OpenTok:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def create_session(self, options: SessionOptions | None = None) -> str:
        """
        Create a new OpenTok session and return its id.

        :raises BadRequestError: on a 4xx answer (e.g. invalid credentials)
        :raises ServerError: on a 5xx answer
        :raises UnexpectedResponseError: if the body is not a one-element list of sessions
        """
        body = (options or SessionOptions()).to_request_body()
        endpoint = f"{self.server_url}/session/create"
        response = await http_client.post(
            endpoint,
            self.api_key,
            self._api_secret.get_secret_value(),
            body,
            client=self._client,
            clock=self._clock,
        )
        try:
            created = _created_sessions.validate_json(response.text)
        except ValidationError:
            raise UnexpectedResponseError(response.text) from None
        if len(created) != 1:
            raise UnexpectedResponseError(response.text)
        session_id = created[0].session_id
        logger.info("[opentok] Session created: session_id=%s", session_id)
        return session_id

    def generate_token(self, session_id: str, role: TokenRole = TokenRole.PUBLISHER) -> str:
        """Client token for ``session_id``; valid for 24 hours."""
        logger.debug("[opentok] Token generated: session_id=%s role=%s", session_id, role.wire_value)
        return build_client_session_token(
            self.api_key,
            self._api_secret.get_secret_value(),
            session_id,
            role,
            self._clock,
        )

    async def get_stream_info(self, session_id: str, stream_id: str) -> StreamInfo:
        endpoint = (
            f"{self.server_url}{API_ENDPOINT_PATH_START}{self.api_key}"
            f"/session/{session_id}/stream/{stream_id}"
        )
        response = await http_client.get(
            endpoint,
            self.api_key,
            self._api_secret.get_secret_value(),
            client=self._client,
            clock=self._clock,
        )
        try:
            return StreamInfo.model_validate_json(response.text)
        except ValidationError:
            raise UnexpectedResponseError(response.text) from None
