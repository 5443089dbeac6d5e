# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Request, Response

# Local application imports
from .security import create_session_token, decode_session_token

logger = logging.getLogger(__name__)


class SessionCookieManager:
    """
    Issues, reads and destroys the signed session cookie.

    The cookie value is a signed token whose "sub" claim is the user ID;
    expiry is enforced both by the cookie max-age and by the token "exp".
    """

    def __init__(self, cookie_name: str, max_age_seconds: int, secure: bool) -> None:
        self.cookie_name = cookie_name
        self.max_age_seconds = max_age_seconds
        self.secure = secure

    def create_session(self, response: Response, user_id: str) -> None:
        """Attach a fresh session cookie bound to user_id"""
        response.set_cookie(
            key=self.cookie_name,
            value=create_session_token(user_id),
            max_age=self.max_age_seconds,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def get_user_id(self, request: Request) -> Optional[str]:
        """
        Read the user ID from the request's session cookie

        Returns:
            The user ID, or None if the cookie is absent, tampered with or expired
        """
        token = request.cookies.get(self.cookie_name)
        if not token:
            return None

        try:
            payload = decode_session_token(token)
        except ValueError as e:
            logger.debug(f"Rejected session cookie: {e}")
            return None

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            return None
        return user_id

    def destroy_session(self, response: Response) -> None:
        """Expire the session cookie on the client"""
        response.delete_cookie(
            key=self.cookie_name,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
