"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, status

from placement_portal.core.config import get_settings

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_EXPIRES_IN = "1h"
BEARER_PREFIX = "Bearer "

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw])\s*$")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400, "w": 604800}


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def parse_expires_in(expires_in: Union[str, int, timedelta]) -> timedelta:
    """
    Turn a token lifetime into a timedelta.

    Accepts a timedelta, a number of seconds, or a short string such as
    "30m", "1h" or "7d".
    """
    if isinstance(expires_in, timedelta):
        return expires_in
    if isinstance(expires_in, bool):
        raise ValueError(f"Invalid token lifetime: {expires_in!r}")
    if isinstance(expires_in, int):
        return timedelta(seconds=expires_in)
    if isinstance(expires_in, str):
        if expires_in.strip().isdigit():
            return timedelta(seconds=int(expires_in))
        match = _DURATION_RE.match(expires_in)
        if match:
            amount, unit = match.groups()
            return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])
    raise ValueError(f"Invalid token lifetime: {expires_in!r}")


def generate_token(payload: dict, expires_in: Union[str, int, timedelta] = DEFAULT_EXPIRES_IN) -> str:
    """
    Create a signed JWT carrying the given claims.

    Example:
        generate_token({"id": admin_id, "email": email, "role": "admin"}, "7d")
    """
    lifetime = parse_expires_in(expires_in)
    now = datetime.now(timezone.utc)
    to_encode = dict(payload)
    to_encode.update({"iat": now, "exp": now + lifetime})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token. Returns None for bad or expired tokens."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def extract_token(authorization: Optional[str]) -> str:
    """Strip a literal "Bearer " prefix; otherwise the raw header is the token."""
    header = authorization or ""
    if header.startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX):]
    return header


async def authenticate_token(request: Request) -> dict:
    """
    FastAPI dependency - gate a route on a valid token.

    Usage:
        @router.put("/protected")
        async def route(claims: dict = Depends(authenticate_token)):
            return claims

    The decoded claims are also available as request.state.user.
    """
    token = extract_token(request.headers.get("Authorization"))
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = decode_token(token)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")

    request.state.user = claims
    return claims


def require_role(*roles: str):
    """
    Dependency factory - require one of the given roles in the token claims.

    Usage:
        @router.get("/admin/reports")
        async def reports(claims: dict = Depends(require_role("admin"))):
            ...
    """
    async def role_checker(claims: dict = Depends(authenticate_token)) -> dict:
        role = claims.get("role")
        if not role:
            raise HTTPException(status_code=403, detail="Role not found")
        if role not in roles:
            raise HTTPException(status_code=403, detail="Access denied")
        return claims

    return role_checker
