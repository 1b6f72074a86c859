import base64
import json

from bookstore_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip():
    token = create_access_token({"sub": "user1@example.com"})
    payload = decode_access_token(token)
    assert payload["sub"] == "user1@example.com"
    assert "exp" in payload


def test_token_header_names_the_signing_algorithm():
    token = create_access_token({"sub": "user1@example.com"})
    header = json.loads(base64.urlsafe_b64decode(token.split(".")[0] + "=="))
    assert header == {"alg": "HS256", "typ": "JWT"}


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "user1@example.com"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"sub": "user2@example.com"}).split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "user1@example.com"}, expires_delta=-10)
    assert decode_access_token(token) is None


def test_password_hash_is_salted_and_verifies_exactly():
    first = hash_password("password123")
    second = hash_password("password123")
    assert first != second
    assert "password123" not in first
    assert verify_password("password123", first)
    assert verify_password("password123", second)
    assert not verify_password("password124", first)
    assert not verify_password("", first)
    assert not verify_password("password123", "garbage")
