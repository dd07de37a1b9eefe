"""Tests for the optional response shape validators."""

import pytest
from pydantic import ValidationError

from authclient import validate_introspection, validate_token_exchange


def test_validate_token_exchange_accepts_complete_body():
    body = {
        "access_token": "abc",
        "issued_token_type": "urn:x",
        "token_type": "Bearer",
        "expires_in": 3600,
    }
    assert validate_token_exchange(body) == body


def test_validate_token_exchange_rejects_missing_fields():
    with pytest.raises(ValidationError):
        validate_token_exchange({"access_token": "abc"})


def test_validate_introspection_allows_only_active():
    assert validate_introspection({"active": False}) == {"active": False}


def test_validate_introspection_requires_active():
    with pytest.raises(ValidationError):
        validate_introspection({"sub": "alice"})


def test_validate_introspection_keeps_unknown_claims():
    body = {"active": True, "scope": "read write", "username": "alice"}
    assert validate_introspection(body) == body


def test_validate_token_exchange_keeps_unknown_keys():
    body = {
        "access_token": "abc",
        "issued_token_type": "urn:x",
        "token_type": "Bearer",
        "expires_in": 3600,
        "refresh_token": "r",
    }
    assert validate_token_exchange(body) == body


def test_validate_token_exchange_does_not_coerce_values():
    body = {
        "access_token": "abc",
        "issued_token_type": "urn:x",
        "token_type": "Bearer",
        "expires_in": "3600",
    }
    with pytest.raises(ValidationError):
        validate_token_exchange(body)


@pytest.mark.parametrize("aud", ["api", ["api", "billing"]])
def test_validate_introspection_accepts_audience_string_or_list(aud):
    body = {"active": True, "aud": aud}
    assert validate_introspection(body) == body
