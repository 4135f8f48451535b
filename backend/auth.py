"""
Authentication module for JWT and API key validation.
Provides FastAPI dependencies for securing endpoints.

Callers are identified by user ID, user type and gym:
- JWTs: HS256 signed with JWT_SECRET; claims ``sub``, ``user_type``, ``gym_id``
- API keys: ``key`` (admin), ``key:user_id`` (admin) or
  ``key:user_id:gym_id`` (gym owner)
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import jwt
from fastapi import HTTPException

from backend.settings import Settings

logger = logging.getLogger(__name__)


class UserType(str, Enum):
    """Kinds of platform user."""

    ADMIN = "admin"
    OWNER = "owner"
    COACH = "coach"
    CLIENT = "client"


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity of the caller, as established by authentication."""

    user_id: str
    user_type: UserType
    gym_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.user_type == UserType.ADMIN


def authenticate(
    authorization: Optional[str],
    x_api_key: Optional[str],
    settings: Settings,
) -> AuthenticatedUser:
    """
    Authenticate via API key OR JWT.
    Returns the AuthenticatedUser.

    Wrapped by api.deps.get_current_user for use as a FastAPI dependency.
    """
    # Option 1: API Key authentication
    if x_api_key:
        return validate_api_key(x_api_key, settings)

    # Option 2: JWT authentication
    if authorization:
        return validate_jwt(authorization, settings)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str, settings: Settings) -> AuthenticatedUser:
    """
    Validate API key and return the caller.

    API key format options:
    - Simple: "sk_test_abc123" -> admin
    - With user: "sk_test_abc123:user_12345" -> admin with that user ID
    - With gym: "sk_test_abc123:user_12345:gym_1" -> owner of gym_1
    """
    valid_keys = settings.api_keys_list

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    parts = api_key.split(":", 2)

    if parts[0] not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    if len(parts) == 3:
        return AuthenticatedUser(user_id=parts[1], user_type=UserType.OWNER, gym_id=parts[2])
    if len(parts) == 2:
        return AuthenticatedUser(user_id=parts[1], user_type=UserType.ADMIN)

    return AuthenticatedUser(user_id="admin", user_type=UserType.ADMIN)


def validate_jwt(authorization: str, settings: Settings) -> AuthenticatedUser:
    """Validate a bearer JWT and return the caller."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")

    try:
        user_type = UserType(payload.get("user_type", UserType.CLIENT.value))
    except ValueError:
        raise HTTPException(status_code=401, detail="Token has unknown user type")

    logger.debug(f"JWT validated for user: {user_id} ({user_type.value})")
    return AuthenticatedUser(
        user_id=user_id,
        user_type=user_type,
        gym_id=payload.get("gym_id"),
    )
