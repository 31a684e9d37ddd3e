from models import ArchiveMode, MediaMode, SessionOptions, StreamInfo, TokenRole, VideoType

from .client import OpenTok
from .client_token import build_client_session_token
from .clock import Clock, FixedClock, SystemClock
from .errors import (
    BadRequestError,
    EncodingError,
    OpenTokError,
    RequestError,
    ServerError,
    UnexpectedResponseError,
    UnknownError,
)
from .server_auth import build_server_auth_token

__all__ = [
    "OpenTok",
    "build_client_session_token",
    "build_server_auth_token",
    "Clock",
    "FixedClock",
    "SystemClock",
    "ArchiveMode",
    "MediaMode",
    "SessionOptions",
    "StreamInfo",
    "TokenRole",
    "VideoType",
    "OpenTokError",
    "EncodingError",
    "BadRequestError",
    "ServerError",
    "UnexpectedResponseError",
    "RequestError",
    "UnknownError",
]
