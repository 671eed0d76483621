# fieldops/auth/deps.py
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fieldops.auth.jwt import ROLES, decode_token, role_from_payload
from fieldops.core.settings import settings

security = HTTPBearer(auto_error=False)  # <- belangrijk: niet auto-error


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: Optional[str]
    role: Optional[str]


def _extract_token(
    request: Request, creds: HTTPAuthorizationCredentials | None
) -> str | None:
    # 1) cookie
    cookie_token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if cookie_token:
        return cookie_token

    # 2) Authorization header
    if creds and creds.credentials:
        return creds.credentials

    return None


def _user_from_token(token: str) -> AuthUser:
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    return AuthUser(id=str(user_id), email=payload.get("email"), role=role_from_payload(payload))


def get_current_user(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthUser:
    token = _extract_token(request, creds)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return _user_from_token(token)


def verify_bearer(
    creds: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthUser:
    """Mobile clients send the token as a Bearer header only."""
    if not creds or not creds.credentials:
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")
    try:
        return _user_from_token(creds.credentials)
    except HTTPException:
        raise HTTPException(status_code=401, detail="Invalid or expired token")


def require_role(*allowed: str):
    """Dependency factory: 401 without a valid token, 403 when the role is not allowed."""

    def _dependency(user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if not user.role or user.role not in allowed:
            raise HTTPException(status_code=403, detail="Forbidden")
        return user

    return _dependency


ANY_ROLE = ROLES
MANAGERS = ("super_admin", "admin", "manager")
ADMINS = ("super_admin", "admin")
