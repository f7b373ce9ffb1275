"""
Password hashing, access tokens and the admin dependency for write endpoints.

The deployment is stateless: every write request carries its own bearer
token issued by /api/auth/login.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

import bcrypt
from fastapi import Request
from jose import JWTError, jwt

from impact_report.core.config import settings
from impact_report.core.errors import Unauthorized

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


def create_access_token(
    email: str,
    admin: bool,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token for the given user."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {"sub": email, "admin": admin, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decode and verify a token, raising Unauthorized when it is invalid or expired."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise Unauthorized() from e


def _bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_admin(request: Request) -> str:
    """
    FastAPI dependency for write endpoints.

    Returns the admin's email. Missing, invalid, expired and non-admin tokens
    all produce the same 401 so callers learn nothing about stored content.
    """
    token = _bearer_token(request)
    if token is None:
        raise Unauthorized()

    claims = decode_access_token(token)
    if not claims.get("admin") or not claims.get("sub"):
        raise Unauthorized()

    request.state.user_email = claims["sub"]
    return claims["sub"]
