from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SERVER_AUTH_ISSUER_TYPE = "project"
SERVER_AUTH_VALIDITY_SECONDS = 3 * 60         # 3 minutes
CLIENT_TOKEN_VALIDITY_SECONDS = 60 * 60 * 24  # 24 hours


class TokenRole(Enum):
    PUBLISHER = "PUBLISHER"
    SUBSCRIBER = "SUBSCRIBER"
    MODERATOR = "MODERATOR"

    @property
    def wire_value(self) -> str:
        return TOKEN_ROLE_WIRE_VALUES[self]

    @classmethod
    def from_wire(cls, value: str) -> TokenRole:
        for role, wire in TOKEN_ROLE_WIRE_VALUES.items():
            if wire == value:
                return role
        raise ValueError(f"unknown token role: {value!r}")


TOKEN_ROLE_WIRE_VALUES: dict[TokenRole, str] = {
    TokenRole.PUBLISHER: "publisher",
    TokenRole.SUBSCRIBER: "subscriber",
    TokenRole.MODERATOR: "moderator",
}


@dataclass(frozen=True)
class Claims:
    """JWT claims for the X-OPENTOK-AUTH header."""

    iss: str                  # api key
    iat: int                  # issued at, epoch seconds
    exp: int                  # iat + SERVER_AUTH_VALIDITY_SECONDS
    jti: int                  # unsigned 64-bit nonce
    ist: str = SERVER_AUTH_ISSUER_TYPE

    @classmethod
    def issue(cls, api_key: str, now: int, nonce: int) -> Claims:
        return cls(iss=api_key, iat=now, exp=now + SERVER_AUTH_VALIDITY_SECONDS, jti=nonce)

    def as_payload(self) -> dict[str, str | int]:
        # Key order is what ends up in the signed JSON.
        return {
            "iss": self.iss,
            "ist": self.ist,
            "iat": self.iat,
            "exp": self.exp,
            "jti": self.jti,
        }


@dataclass(frozen=True)
class TokenData:
    """Signed part of a client session token."""

    session_id: str
    create_time: int
    expire_time: int
    nonce: int
    role: TokenRole

    @classmethod
    def issue(cls, session_id: str, role: TokenRole, now: int, nonce: int) -> TokenData:
        return cls(
            session_id=session_id,
            create_time=now,
            expire_time=now + CLIENT_TOKEN_VALIDITY_SECONDS,
            nonce=nonce,
            role=role,
        )

    def to_query_string(self) -> str:
        return (
            f"session_id={self.session_id}"
            f"&create_time={self.create_time}"
            f"&expire_time={self.expire_time}"
            f"&nonce={self.nonce}"
            f"&role={self.role.wire_value}"
        )

    def __str__(self) -> str:
        return self.to_query_string()
