"""Tests for token signing and password hashing."""

import base64
import json

from pan_eventz_api.app.core.config import Settings
from pan_eventz_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestAccessTokens:
    def test_round_trip_keeps_claims(self):
        token = create_access_token({"userId": 1, "role": "admin"}, expires_delta=60, secret="s")
        payload = decode_access_token(token, secret="s")
        assert payload["userId"] == 1
        assert payload["role"] == "admin"
        assert payload["exp"] - payload["iat"] == 60

    def test_header_names_hs256(self):
        header_b64 = create_access_token({"userId": 1}, secret="s").split(".")[0]
        header = json.loads(base64.urlsafe_b64decode(header_b64 + "=" * (-len(header_b64) % 4)))
        assert header == {"alg": "HS256", "typ": "JWT"}
        assert not hasattr(Settings(), "algorithm")

    def test_wrong_secret_is_rejected(self):
        token = create_access_token({"userId": 1}, secret="s")
        assert decode_access_token(token, secret="other") is None

    def test_tampered_payload_is_rejected(self):
        token = create_access_token({"role": "editor"}, secret="s")
        header, _, signature = token.split(".")
        forged = create_access_token({"role": "admin"}, secret="s").split(".")[1]
        assert decode_access_token(f"{header}.{forged}.{signature}", secret="s") is None

    def test_expired_token_is_rejected(self):
        token = create_access_token({"userId": 1}, expires_delta=-10, secret="s")
        assert decode_access_token(token, secret="s") is None

    def test_malformed_token_is_rejected(self):
        assert decode_access_token("not-a-token", secret="s") is None
        assert decode_access_token("a.b.c", secret="s") is None


class TestPasswordHashing:
    def test_verify_matches_original(self):
        stored = hash_password("9323641780")
        assert verify_password("9323641780", stored)
        assert not verify_password("wrong", stored)

    def test_salts_differ(self):
        assert hash_password("pw") != hash_password("pw")

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("pw", "no-separator")
