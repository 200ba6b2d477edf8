import hmac
import logging
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ADMIN_SUBJECT = "admin"
TOKEN_LIFETIME = timedelta(hours=12)


def check_password(candidate: str, expected: str) -> bool:
    """Constant-time comparison against the configured admin password"""
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def create_access_token(data: dict, secret: str, expires_delta: timedelta = TOKEN_LIFETIME):
    """Create JWT token. Returns (token, expiry)."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    token = jwt.encode(to_encode, secret, algorithm=ALGORITHM)
    logger.debug(f"Access token created. Expires at: {expire}")
    return token, expire


def decode_token(token: str, secret: str):
    """Decode JWT token; None when invalid or expired"""
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Failed to decode token: {e}")
        return None
