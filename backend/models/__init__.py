from .session import ArchiveMode, MediaMode, SessionOptions
from .stream import StreamInfo, VideoType
from .token import (
    CLIENT_TOKEN_VALIDITY_SECONDS,
    SERVER_AUTH_ISSUER_TYPE,
    SERVER_AUTH_VALIDITY_SECONDS,
    Claims,
    TokenData,
    TokenRole,
)

__all__ = [
    "ArchiveMode",
    "MediaMode",
    "SessionOptions",
    "StreamInfo",
    "VideoType",
    "Claims",
    "TokenData",
    "TokenRole",
    "CLIENT_TOKEN_VALIDITY_SECONDS",
    "SERVER_AUTH_ISSUER_TYPE",
    "SERVER_AUTH_VALIDITY_SECONDS",
]
