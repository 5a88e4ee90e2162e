"""Tests for password hashing and JWT tokens."""

from datetime import UTC, datetime

from jose import jwt as _jwt

from chefai.services.auth import AuthService

SECRET = "test-secret-key-for-jwt-signing-only"


class TestPasswordHashing:
    def test_hash_password_returns_string(self, auth):
        hashed = auth.hash_password("my_password")
        assert isinstance(hashed, str)
        assert hashed != "my_password"

    def test_hash_password_different_each_time(self, auth):
        """bcrypt salts should produce different hashes."""
        assert auth.hash_password("same_password") != auth.hash_password("same_password")

    def test_verify_password_correct(self, auth):
        hashed = auth.hash_password("correct_password")
        assert auth.verify_password("correct_password", hashed) is True

    def test_verify_password_wrong(self, auth):
        hashed = auth.hash_password("correct_password")
        assert auth.verify_password("wrong_password", hashed) is False


class TestAccessToken:
    def test_decode_access_token(self, auth):
        payload = auth.decode_token(auth.create_access_token(user_id=42))
        assert payload["user_id"] == 42
        assert payload["type"] == "access"

    def test_expected_type(self, auth):
        token = auth.create_access_token(user_id=1)
        assert auth.decode_token(token, expected_type="access") is not None
        assert auth.decode_token(token, expected_type="refresh") is None

    def test_access_token_expires(self, auth):
        payload = {
            "user_id": 1,
            "type": "access",
            "exp": datetime(2020, 1, 1, tzinfo=UTC),
            "iat": datetime(2020, 1, 1, tzinfo=UTC),
        }
        token = _jwt.encode(payload, SECRET, algorithm="HS256")
        assert auth.decode_token(token) is None

    def test_decode_invalid_token(self, auth):
        assert auth.decode_token("not.a.valid.token") is None

    def test_decode_token_wrong_secret(self, auth):
        token = auth.create_access_token(user_id=1)
        assert AuthService(secret_key="different-secret").decode_token(token) is None


class TestRefreshToken:
    def test_refresh_token_type(self, auth):
        payload = auth.decode_token(auth.create_refresh_token(user_id=3))
        assert payload["type"] == "refresh"
        assert payload["user_id"] == 3
