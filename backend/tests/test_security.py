"""
Tests for password hashing and session token helpers.
"""

from datetime import timedelta

import jwt
import pytest

from eventhub.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_password_is_salted():
    first = hash_password("pw123456")
    second = hash_password("pw123456")
    assert first != second
    assert verify_password("pw123456", first)
    assert verify_password("pw123456", second)


def test_verify_password_rejects_wrong_password():
    assert not verify_password("wrong", hash_password("pw123456"))


def test_verify_password_fails_closed_on_malformed_hash():
    assert verify_password("pw123456", "not-a-bcrypt-hash") is False
    assert verify_password("pw123456", "") is False


def test_hash_password_honours_rounds():
    assert hash_password("pw123456", rounds=5).startswith("$2b$05$")


def test_access_token_roundtrip():
    token = create_access_token(data={"userId": "u1", "email": "a@x.com", "avator": "a.png"})
    claims = decode_access_token(token)
    assert claims["userId"] == "u1"
    assert claims["email"] == "a@x.com"
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token_is_rejected():
    token = create_access_token(data={"userId": "u1"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"userId": "u1", "iat": 0, "exp": 4102444800}, "another-secret", algorithm="HS256")
    with pytest.raises(jwt.InvalidSignatureError):
        decode_access_token(token)
