from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MediaMode(Enum):
    """Whether streams go peer to peer (RELAYED) or through the OpenTok Media Router (ROUTED)."""

    RELAYED = "RELAYED"
    ROUTED = "ROUTED"


class ArchiveMode(Enum):
    """Whether a session is archived automatically. Archiving itself is not supported here."""

    ALWAYS = "ALWAYS"
    MANUAL = "MANUAL"


# p2p.preference values
P2P_PREFERENCE: dict[MediaMode, str] = {
    MediaMode.RELAYED: "enabled",
    MediaMode.ROUTED: "disabled",
}
DEFAULT_P2P_PREFERENCE = "disabled"

ARCHIVE_MODE_WIRE_VALUES: dict[ArchiveMode, str] = {
    ArchiveMode.ALWAYS: "always",
    ArchiveMode.MANUAL: "manual",
}
DEFAULT_ARCHIVE_MODE = "manual"


@dataclass
class SessionOptions:
    location: str | None = None             # IP address hint for the OpenTok network
    media_mode: MediaMode | None = None
    archive_mode: ArchiveMode | None = None

    def to_request_body(self) -> dict[str, str]:
        """Form fields for POST /session/create. ``location`` is omitted when unset."""
        body = {
            "archiveMode": (
                ARCHIVE_MODE_WIRE_VALUES[self.archive_mode]
                if self.archive_mode is not None
                else DEFAULT_ARCHIVE_MODE
            ),
        }
        if self.location is not None:
            body["location"] = self.location
        body["p2p.preference"] = (
            P2P_PREFERENCE[self.media_mode] if self.media_mode is not None else DEFAULT_P2P_PREFERENCE
        )
        return body
