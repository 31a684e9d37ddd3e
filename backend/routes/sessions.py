"""Session REST API: lets browser clients obtain a session id and a client token."""

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from app.config import get_credentials, get_server_url, get_timeout
from models.session import ArchiveMode, MediaMode, SessionOptions
from models.stream import StreamInfo
from models.token import TOKEN_ROLE_WIRE_VALUES, TokenRole
from opentok import OpenTok
from opentok.client_token import build_client_session_token
from opentok.errors import BadRequestError, EncodingError, OpenTokError

router = APIRouter(tags=["sessions"])
logger = logging.getLogger(__name__)

VALID_ROLES = tuple(TOKEN_ROLE_WIRE_VALUES.values())
_MEDIA_MODES = {"relayed": MediaMode.RELAYED, "routed": MediaMode.ROUTED}
_ARCHIVE_MODES = {"always": ArchiveMode.ALWAYS, "manual": ArchiveMode.MANUAL}


class SessionCreateRequest(BaseModel):
    location: str | None = None
    media_mode: Literal["relayed", "routed"] | None = None
    archive_mode: Literal["always", "manual"] | None = None

    def to_options(self) -> SessionOptions:
        return SessionOptions(
            location=self.location,
            media_mode=_MEDIA_MODES[self.media_mode] if self.media_mode else None,
            archive_mode=_ARCHIVE_MODES[self.archive_mode] if self.archive_mode else None,
        )


class SessionCreateResponse(BaseModel):
    session_id: str
    api_key: str


class SessionTokenResponse(BaseModel):
    token: str
    session_id: str
    role: str
    api_key: str


def _get_opentok_credentials() -> tuple[str, str]:
    api_key, api_secret = get_credentials()
    if not api_key or not api_secret:
        raise HTTPException(
            status_code=503,
            detail="OpenTok credentials not configured (OPENTOK_API_KEY / OPENTOK_API_SECRET)",
        )
    return api_key, api_secret


def _open_opentok() -> OpenTok:
    api_key, api_secret = _get_opentok_credentials()
    return OpenTok(api_key, api_secret, server_url=get_server_url(), timeout=get_timeout())


def _to_http_exception(exc: OpenTokError) -> HTTPException:
    if isinstance(exc, BadRequestError):
        return HTTPException(status_code=400, detail=exc.detail)
    if isinstance(exc, EncodingError):
        return HTTPException(status_code=500, detail=str(exc))
    return HTTPException(status_code=502, detail=str(exc))


@router.post("/sessions", response_model=SessionCreateResponse, status_code=201)
async def create_session(request: SessionCreateRequest | None = None) -> SessionCreateResponse:
    """Create an OpenTok session and return its id."""
    options = (request or SessionCreateRequest()).to_options()
    logger.info("[sessions] POST /api/sessions called. media_mode=%s", options.media_mode)
    async with _open_opentok() as opentok:
        try:
            session_id = await opentok.create_session(options)
        except OpenTokError as exc:
            logger.warning("[sessions] Session creation failed: %s", exc)
            raise _to_http_exception(exc) from exc
        api_key = opentok.api_key
    logger.info("[sessions] POST /sessions -> 201 session_id=%s", session_id)
    return SessionCreateResponse(session_id=session_id, api_key=api_key)


@router.get(
    "/sessions/{session_id}/token",
    response_model=SessionTokenResponse,
    status_code=200,
)
async def get_session_token(
    session_id: str,
    role: str = Query("publisher", description="Participant role: publisher, subscriber or moderator"),
) -> SessionTokenResponse:
    """Generate a client token for a participant joining the session."""
    logger.info("[sessions] GET /api/sessions/%s/token called. role=%s", session_id, role)
    try:
        token_role = TokenRole.from_wire(role)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"role must be one of {list(VALID_ROLES)}",
        ) from None
    api_key, api_secret = _get_opentok_credentials()
    token = build_client_session_token(api_key, api_secret, session_id, token_role)
    return SessionTokenResponse(
        token=token,
        session_id=session_id,
        role=token_role.wire_value,
        api_key=api_key,
    )


@router.get(
    "/sessions/{session_id}/streams/{stream_id}",
    response_model=StreamInfo,
    response_model_by_alias=False,
    status_code=200,
)
async def get_stream(session_id: str, stream_id: str) -> StreamInfo:
    logger.info("[sessions] GET /api/sessions/%s/streams/%s called", session_id, stream_id)
    async with _open_opentok() as opentok:
        try:
            return await opentok.get_stream_info(session_id, stream_id)
        except OpenTokError as exc:
            logger.warning("[sessions] Stream lookup failed: %s", exc)
            raise _to_http_exception(exc) from exc
