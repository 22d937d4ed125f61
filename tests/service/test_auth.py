"""Tests for bearer-token authentication helpers."""

from __future__ import annotations

from typing import Any, Mapping

import pytest

from codebase_analyzer.service.auth import (
    AuthenticationError,
    Identity,
    TokenVerificationError,
    authenticate,
    authenticate_optional,
    extract_bearer_token,
)


class _Verifier:
    def __init__(self, error: TokenVerificationError | None = None) -> None:
        self.error = error

    def verify(self, token: str) -> Mapping[str, Any]:
        if self.error is not None:
            raise self.error
        return {"sub": "abc", "name": "Dev", "picture": "https://example.com/p.png"}


@pytest.mark.parametrize(
    ("header", "message"),
    [
        (None, "No token provided"),
        ("Basic abc", "No token provided"),
        ("Bearer ", "Invalid token format"),
    ],
)
def test_extract_bearer_token_rejects_malformed_headers(header: str | None, message: str) -> None:
    with pytest.raises(AuthenticationError) as excinfo:
        extract_bearer_token(header)
    assert excinfo.value.error == "Unauthorized"
    assert excinfo.value.message.startswith(message)


def test_extract_bearer_token() -> None:
    assert extract_bearer_token("Bearer token-123") == "token-123"


def test_authenticate_builds_identity_from_claims() -> None:
    identity = authenticate("Bearer t", _Verifier())
    assert identity == Identity(
        uid="abc",
        email=None,
        email_verified=False,
        name="Dev",
        picture="https://example.com/p.png",
    )


@pytest.mark.parametrize(
    ("code", "error"),
    [
        ("auth/id-token-expired", "Token expired"),
        ("auth/argument-error", "Invalid token"),
        (None, "Authentication failed"),
    ],
)
def test_authenticate_maps_verifier_errors(code: str | None, error: str) -> None:
    verifier = _Verifier(TokenVerificationError("rejected", code=code))
    with pytest.raises(AuthenticationError) as excinfo:
        authenticate("Bearer t", verifier)
    assert excinfo.value.error == error


def test_authenticate_optional_swallows_failures() -> None:
    verifier = _Verifier(TokenVerificationError("rejected"))
    assert authenticate_optional("Bearer t", verifier) is None
    assert authenticate_optional(None, _Verifier()) is None
    assert authenticate_optional("Bearer t", _Verifier()).uid == "abc"
