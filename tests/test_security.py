from datetime import timedelta

from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    sign_session_id,
    unsign_session_id,
    verify_password,
)


def test_password_hash_is_salted_and_verifies():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != "secret1"
    assert first != second
    assert verify_password("secret1", first)
    assert not verify_password("wrong", first)


def test_verify_password_rejects_garbage_hash():
    assert verify_password("secret1", "not-a-hash") is False


def test_token_round_trip():
    token = create_access_token("user-123")
    assert decode_access_token(token) == "user-123"


def test_expired_token_is_rejected():
    token = create_access_token("user-123", expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected():
    token = create_access_token("user-123")
    assert decode_access_token(token[:-2] + "xx") is None
    assert decode_access_token("garbage") is None


def test_session_cookie_signing():
    signed = sign_session_id("abc")
    assert signed != "abc"
    assert unsign_session_id(signed) == "abc"
    assert unsign_session_id(signed + "x") is None
