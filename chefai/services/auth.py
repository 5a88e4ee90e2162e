from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

ALGORITHM = "HS256"


class AuthService:
    def __init__(
        self,
        secret_key: str,
        access_expire_minutes: int = 60,
        refresh_expire_days: int = 7,
    ):
        self._secret_key = secret_key
        self._access_expire_minutes = access_expire_minutes
        self._refresh_expire_days = refresh_expire_days

    # -- Password hashing --

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, plain: str, hashed: str) -> bool:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))

    # -- JWT tokens --

    def create_access_token(self, user_id: int, expires_minutes: int | None = None) -> str:
        now = datetime.now(UTC)
        minutes = expires_minutes if expires_minutes is not None else self._access_expire_minutes
        payload = {
            "user_id": user_id,
            "type": "access",
            "exp": now + timedelta(minutes=minutes),
            "iat": now,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def create_refresh_token(self, user_id: int, expires_days: int | None = None) -> str:
        now = datetime.now(UTC)
        days = expires_days if expires_days is not None else self._refresh_expire_days
        payload = {
            "user_id": user_id,
            "type": "refresh",
            "exp": now + timedelta(days=days),
            "iat": now,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def decode_token(self, token: str, expected_type: str | None = None) -> dict | None:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None
        if expected_type and payload.get("type") != expected_type:
            return None
        return payload
