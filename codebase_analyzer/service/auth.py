"""Bearer-token authentication for the HTTP service.

The token verifier is constructed by whoever builds the app and passed in
explicitly; nothing here holds process-wide credential state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

from ..logging import get_logger

_BEARER_PREFIX = "Bearer "

logger = get_logger("service.auth")


class TokenVerifier(Protocol):
    """Verifies an ID token and returns its decoded claims."""

    def verify(self, token: str) -> Mapping[str, Any]:
        ...


class TokenVerificationError(Exception):
    """Raised by verifiers when a token is rejected."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class AuthenticationError(Exception):
    """Request could not be authenticated; carries the 401 response fields."""

    def __init__(self, error: str, message: str) -> None:
        super().__init__(message)
        self.error = error
        self.message = message


@dataclass(frozen=True)
class Identity:
    """Caller identity attached to the response envelope."""

    uid: str
    email: Optional[str] = None
    email_verified: bool = False
    name: Optional[str] = None
    picture: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "Identity":
        return cls(
            uid=str(claims.get("uid") or claims.get("sub") or ""),
            email=claims.get("email"),
            email_verified=bool(claims.get("email_verified", False)),
            name=claims.get("name"),
            picture=claims.get("picture"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uid": self.uid,
            "email": self.email,
            "emailVerified": self.email_verified,
            "name": self.name,
            "picture": self.picture,
        }


def extract_bearer_token(header: str | None) -> str:
    if not header or not header.startswith(_BEARER_PREFIX):
        raise AuthenticationError(
            "Unauthorized",
            "No token provided. Please include an ID token in the Authorization "
            'header as "Bearer <token>"',
        )
    token = header[len(_BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Unauthorized", "Invalid token format")
    return token


def authenticate(header: str | None, verifier: TokenVerifier) -> Identity:
    """Return the caller identity or raise :class:`AuthenticationError`."""
    token = extract_bearer_token(header)
    try:
        claims = verifier.verify(token)
    except TokenVerificationError as exc:
        logger.warning("Token verification error: %s", exc)
        if exc.code == "auth/id-token-expired":
            raise AuthenticationError(
                "Token expired", "The ID token has expired. Please get a new token."
            ) from exc
        if exc.code == "auth/argument-error":
            raise AuthenticationError("Invalid token", "The ID token is invalid.") from exc
        raise AuthenticationError("Authentication failed", str(exc)) from exc
    return Identity.from_claims(claims)


def authenticate_optional(header: str | None, verifier: TokenVerifier) -> Identity | None:
    """Like :func:`authenticate`, but returns None instead of failing."""
    if not header or not header.startswith(_BEARER_PREFIX):
        return None
    try:
        return authenticate(header, verifier)
    except AuthenticationError as exc:
        logger.info("Optional auth failed: %s", exc.message)
        return None


__all__ = [
    "AuthenticationError",
    "Identity",
    "TokenVerificationError",
    "TokenVerifier",
    "authenticate",
    "authenticate_optional",
    "extract_bearer_token",
]
