"""Tests for password hashing and session tokens."""
import asyncio
import time
from datetime import timedelta

import pytest
from jose import jwt

from app.core.config import get_settings
from app.core.exceptions import InvalidToken
from app.core.security import TokenIssuer, hash_password, verify_password


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = asyncio.run(hash_password("correct horse"))
        assert hashed != "correct horse"
        assert asyncio.run(verify_password("correct horse", hashed)) is True
        assert asyncio.run(verify_password("wrong horse", hashed)) is False

    def test_hash_is_salted(self):
        assert asyncio.run(hash_password("same")) != asyncio.run(hash_password("same"))


class TestTokenIssuer:

    def test_round_trip(self):
        issuer = TokenIssuer("secret")
        assert issuer.verify(issuer.issue("user-123")) == "user-123"

    def test_expires_after_a_day(self):
        claims = jwt.get_unverified_claims(TokenIssuer("secret").issue("u1"))
        assert claims["sub"] == "u1"
        assert abs(claims["exp"] - (time.time() + 24 * 60 * 60)) < 5

    def test_expired_token(self):
        issuer = TokenIssuer("secret")
        token = issuer.issue("u1", expires_delta=timedelta(seconds=-10))
        with pytest.raises(InvalidToken):
            issuer.verify(token)

    def test_tampered_payload(self):
        issuer = TokenIssuer("secret")
        header, _, signature = issuer.issue("u1").split(".")
        other_payload = issuer.issue("u2").split(".")[1]
        with pytest.raises(InvalidToken):
            issuer.verify(f"{header}.{other_payload}.{signature}")

    def test_wrong_secret(self):
        token = TokenIssuer("secret").issue("u1")
        with pytest.raises(InvalidToken):
            TokenIssuer("another-secret").verify(token)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed(self, token):
        with pytest.raises(InvalidToken):
            TokenIssuer("secret").verify(token)

    def test_non_access_token_rejected(self):
        token = jwt.encode({"sub": "u1", "type": "refresh"}, "secret", algorithm="HS256")
        with pytest.raises(InvalidToken):
            TokenIssuer("secret").verify(token)

    def test_defaults_come_from_settings(self):
        settings = get_settings()
        issuer = TokenIssuer("secret")
        assert issuer.algorithm == settings.JWT_ALGORITHM
        assert issuer.expire_minutes == settings.ACCESS_TOKEN_EXPIRE_MINUTES
        assert TokenIssuer("secret", expire_minutes=5).expire_minutes == 5
