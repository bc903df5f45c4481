"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from ranker.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    username: str
    ver: int = 0  # User.session_version at issue time
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, username: str, settings: AuthSettings, session_version: int = 0
) -> str:
    """Create a session token for the user.

    Args:
        user_id: User ID
        username: Username
        settings: Authentication settings
        session_version: The user's current session version

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "username": username,
        "ver": session_version,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        # Signed by us but missing claims
        raise JWTError("Invalid token payload")
