# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError

# Local application imports
from .config import get_settings

BCRYPT_ROUNDS = 10


def hash_password(plain_password: str) -> str:
    """Bcrypt hash stored as the account's passwordHash (used by the seed routine)"""
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a submitted login password against the stored passwordHash

    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_session_token(user_id: str) -> str:
    """
    Create a signed session token bound to a user ID

    Args:
        user_id: ID of the authenticated user (stored as the "sub" claim)

    Returns:
        Encoded JWT string, valid for the configured session max age
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + settings.session_max_age_seconds

    token_payload = {
        "sub": user_id,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.session_secret,
        algorithm=settings.session_algorithm
    )


def decode_session_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a session token

    Args:
        token: The JWT string read from the session cookie

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, expired or missing required claims
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")
