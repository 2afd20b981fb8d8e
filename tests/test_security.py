from datetime import timedelta

from jose import jwt

from app.config import Settings
from app.security.passwords import hash_password, verify_password
from app.security.tokens import create_access_token, decode_access_token

config = Settings(SECRET_KEY="unit-secret", LOG_FILE="")


class TestPasswords:

    def test_hash_is_not_plaintext(self):
        digest = hash_password("p1")
        assert digest != "p1"
        assert digest.startswith("$argon2")

    def test_verify(self):
        digest = hash_password("p1")
        assert verify_password("p1", digest)
        assert not verify_password("p2", digest)

    def test_verify_garbage_hash(self):
        assert not verify_password("p1", "not-a-hash")
        assert not verify_password("", hash_password("p1"))


class TestTokens:

    def test_round_trip_claims(self):
        token = create_access_token(7, "a@x.com", config)
        claims = decode_access_token(token, config)
        assert claims["uid"] == 7
        assert claims["email"] == "a@x.com"

    def test_expires_after_seven_days(self):
        token = create_access_token(7, "a@x.com", config)
        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token_rejected(self):
        token = create_access_token(7, "a@x.com", config, expires_delta=timedelta(seconds=-10))
        assert decode_access_token(token, config) is None

    def test_foreign_key_rejected(self):
        other = Settings(SECRET_KEY="someone-else", LOG_FILE="")
        token = create_access_token(7, "a@x.com", other)
        assert decode_access_token(token, config) is None

    def test_malformed_token_rejected(self):
        assert decode_access_token("not.a.token", config) is None
        assert decode_access_token("", config) is None
