# Standard library imports
from urllib.parse import urlencode

# External package imports
from fastapi import Request
from fastapi.responses import RedirectResponse

# Local application imports
from ...core.session import SessionCookieManager
from ...domain.exceptions import SessionRequiredError
from ...di.container import get_container


LOGIN_PATH = "/login"


async def require_user_id(request: Request) -> str:
    """
    FastAPI dependency returning the user ID bound to the session cookie

    Args:
        request: Incoming request

    Returns:
        User ID from the session

    Raises:
        SessionRequiredError: If there is no valid session; handled by the
            application as a redirect to the login page that preserves the
            requested path
    """
    session_manager = get_container().get(SessionCookieManager)
    user_id = session_manager.get_user_id(request)
    if user_id is None:
        raise SessionRequiredError(redirect_to=request.url.path)
    return user_id


def safe_redirect_target(target: object, default: str = "/") -> str:
    """
    Only allow local absolute paths as post-login destinations

    Browsers read a backslash as a slash and drop control characters, so
    targets containing either are rejected along with "//host".
    """
    if not isinstance(target, str) or not target.startswith("/") or target.startswith("//"):
        return default
    if "\\" in target or any(ord(char) < 0x20 or ord(char) == 0x7F for char in target):
        return default
    return target


def login_redirect(redirect_to: str) -> RedirectResponse:
    """Redirect to the login page, remembering where the user was going"""
    query = urlencode({"redirectTo": safe_redirect_target(redirect_to)})
    return RedirectResponse(url=f"{LOGIN_PATH}?{query}", status_code=302)
