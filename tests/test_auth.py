"""
Token verification and admin resolution
"""
from datetime import timedelta

import pytest
from bson import ObjectId
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.utils.auth import (
    create_access_token,
    decode_access_token,
    get_current_user,
    hash_password,
    require_admin,
    verify_password,
)
from conftest import run


def bearer(token):
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestTokens:

    def test_round_trip_keeps_claims(self):
        token = create_access_token({"sub": "abc", "role": "admin"})
        payload = decode_access_token(token)
        assert payload["sub"] == "abc"
        assert payload["role"] == "admin"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "abc"}, expires_delta=timedelta(minutes=-5))
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401

    def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            run(get_current_user(None))
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication token required"

    def test_token_without_subject(self):
        token = create_access_token({"role": "admin"})
        with pytest.raises(HTTPException) as exc_info:
            run(get_current_user(bearer(token)))
        assert exc_info.value.status_code == 401


class TestRequireAdmin:

    def test_admin_resolved_from_token_subject(self, admin_user):
        user = run(require_admin({"sub": admin_user["id"]}, None))
        assert str(user["_id"]) == admin_user["id"]
        assert user["role"] == "admin"

    def test_matching_actor_header_accepted(self, admin_user):
        user = run(require_admin({"sub": admin_user["id"]}, admin_user["id"]))
        assert user["username"] == "admin"

    def test_mismatched_actor_header(self, admin_user):
        with pytest.raises(HTTPException) as exc_info:
            run(require_admin({"sub": admin_user["id"]}, str(ObjectId())))
        assert exc_info.value.status_code == 403

    def test_non_admin(self, regular_user):
        with pytest.raises(HTTPException) as exc_info:
            run(require_admin({"sub": regular_user["id"]}, None))
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "You do not have admin access"

    def test_malformed_subject_is_unknown_user(self, mock_db):
        with pytest.raises(HTTPException) as exc_info:
            run(require_admin({"sub": "not-an-object-id"}, None))
        assert exc_info.value.status_code == 404


def test_password_hashing():
    hashed = hash_password("admin123")
    assert hashed != "admin123"
    assert verify_password("admin123", hashed)
    assert not verify_password("wrong", hashed)
