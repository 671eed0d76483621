# fieldops/auth/jwt.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from fieldops.core.settings import settings

ROLES = ("super_admin", "admin", "manager", "technician")


def create_access_token(*, user_id: str, email: str, role: Optional[str], exp_hours: int = 1) -> str:
    """Mint a token shaped like a Supabase access token (used by scripts and tests)."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "aud": settings.JWT_AUDIENCE,
        "role": "authenticated",
        "user_metadata": {"role": role} if role else {},
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=exp_hours)).timestamp()),
    }
    return jwt.encode(payload, settings.SUPABASE_JWT_SECRET, algorithm="HS256")


def decode_token(token: str) -> dict:
    return jwt.decode(
        token,
        settings.SUPABASE_JWT_SECRET,
        algorithms=["HS256"],
        audience=settings.JWT_AUDIENCE,
    )


def role_from_payload(payload: dict) -> Optional[str]:
    metadata = payload.get("user_metadata") or {}
    role = metadata.get("role")
    return role if role in ROLES else None
