# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse, RedirectResponse

# Local application imports
from ...application.dto.favorites_dto import ErrorResponse, FavoritesViewResponse
from ...application.use_cases.favorites.add_city import AddCityUseCase
from ...application.use_cases.favorites.remove_city import RemoveCityUseCase
from ...application.use_cases.favorites.list_favorites import ListFavoritesWithWeatherUseCase
from ...core.session import SessionCookieManager
from ...di.container import get_container
from .dependencies import LOGIN_PATH, require_user_id

logger = logging.getLogger(__name__)


router = APIRouter(tags=["favorites"])


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


def _back_to_favorites() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_model=FavoritesViewResponse)
async def list_favorites(user_id: str = Depends(require_user_id)) -> FavoritesViewResponse:
    """
    Authenticated view: favorite cities with their current weather

    Args:
        user_id: ID of the authenticated user (from dependency)

    Returns:
        FavoritesViewResponse; a city whose lookup failed carries an error
        entry instead of weather
    """
    container = get_container()
    list_use_case = container.get(ListFavoritesWithWeatherUseCase)
    return await list_use_case.execute(user_id)


@router.post("/")
async def mutate_favorites(
    action: Optional[str] = Form(None),
    city: Optional[str] = Form(None),
    user_id: str = Depends(require_user_id),
):
    """
    Handle the favorites form: add, remove or logout

    Returns:
        303 redirect to "/" on add/remove success, 303 redirect to the login
        page on logout, or 400 with {"error": ...}
    """
    container = get_container()

    if action == "logout":
        response = RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
        container.get(SessionCookieManager).destroy_session(response)
        logger.info(f"User {user_id} logged out")
        return response

    if action == "add":
        add_use_case = container.get(AddCityUseCase)
        result = await add_use_case.execute(user_id, city or "")
        if not result.ok:
            logger.info(f"Add city rejected for user {user_id}: {result.error.kind.value}")
            return _error(result.error.message)
        return _back_to_favorites()

    if action == "remove":
        if not city or not city.strip():
            return _error("City name is required")
        remove_use_case = container.get(RemoveCityUseCase)
        result = await remove_use_case.execute(user_id, city)
        if not result.ok:
            return _error(result.error.message)
        return _back_to_favorites()

    return _error("Unknown action")
