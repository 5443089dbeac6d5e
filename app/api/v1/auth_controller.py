# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Form, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

# Local application imports
from ...application.dto.auth_dto import LoginErrors, LoginErrorResponse, LoginFormResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...core.session import SessionCookieManager
from ...domain.exceptions import AuthErrorKind
from ...di.container import get_container
from .dependencies import safe_redirect_target

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


router = APIRouter(tags=["authentication"])


def _login_error(**errors: str) -> JSONResponse:
    body = LoginErrorResponse(errors=LoginErrors(**errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


@router.get("/login", response_model=LoginFormResponse)
async def login_form(redirect_to: Optional[str] = Query(None, alias="redirectTo")) -> LoginFormResponse:
    """
    Describe the login form

    Args:
        redirect_to: Path the user was trying to reach

    Returns:
        LoginFormResponse with the sanitized post-login destination
    """
    return LoginFormResponse(redirect_to=safe_redirect_target(redirect_to))


@router.post("/login")
async def login(
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    redirect_to: Optional[str] = Form(None, alias="redirectTo"),
):
    """
    Authenticate with username and password

    On success the session cookie is set and the client is redirected to
    redirectTo (or "/"). Failures return field-level errors with status 400.
    """
    if username is None or password is None:
        return _login_error(form="Form not submitted correctly.")

    if len(username) < MIN_USERNAME_LENGTH:
        return _login_error(username="Username is too short")

    if len(password) < MIN_PASSWORD_LENGTH:
        return _login_error(password="Password is too short")

    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    result = await login_use_case.execute(username, password)

    if not result.ok:
        if result.error.kind == AuthErrorKind.USERNAME_NOT_FOUND:
            return _login_error(username=result.error.message)
        if result.error.kind == AuthErrorKind.INVALID_PASSWORD:
            return _login_error(password=result.error.message)
        return _login_error(form=result.error.message)

    user = result.value
    response = RedirectResponse(
        url=safe_redirect_target(redirect_to),
        status_code=status.HTTP_303_SEE_OTHER,
    )
    container.get(SessionCookieManager).create_session(response, user.id)
    logger.info(f"Session created for user {user.id}")
    return response
