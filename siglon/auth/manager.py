import logging
from fastapi import Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordBearer

from .models import AdminLogin, TokenResponse
from .utils import check_password, create_access_token, decode_token, ADMIN_SUBJECT

logger = logging.getLogger("auth.manager")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def login_admin(credentials: AdminLogin, settings) -> TokenResponse:
    """Check the admin password and issue a token. Raises 401 on mismatch."""
    if not check_password(credentials.password, settings.admin_password):
        logger.warning("Admin login failed: wrong password")
        raise HTTPException(status_code=401, detail="Invalid password")
    token, expire = create_access_token({"sub": ADMIN_SUBJECT}, settings.jwt_secret)
    logger.info("Admin authenticated successfully. Token generated.")
    return TokenResponse(token=token, expires_at=expire.isoformat())


def is_admin_token(token: str, settings) -> bool:
    payload = decode_token(token, settings.jwt_secret)
    return bool(payload) and payload.get("sub") == ADMIN_SUBJECT


async def require_admin(request: Request, token: str = Depends(oauth2_scheme)) -> dict:
    """Dependency guarding admin-only routes"""
    if not is_admin_token(token, request.app.state.settings):
        logger.warning("Invalid admin token provided.")
        raise HTTPException(status_code=401, detail="Invalid token")
    return {"role": ADMIN_SUBJECT}
