from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from app.config import Settings


def create_access_token(user_id: int, email: str, config: Settings,
                        expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"uid": user_id, "email": email, "iat": now, "exp": expire}
    return jwt.encode(payload, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: str, config: Settings) -> Optional[dict]:
    """Return the claims of a valid token, None if it is malformed, expired or foreign."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError:
        return None

    if not isinstance(payload.get("uid"), int) or not payload.get("email"):
        return None
    return payload
