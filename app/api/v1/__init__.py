from .auth_controller import router as auth_router
from .favorites_controller import router as favorites_router
from .suggestions_controller import router as suggestions_router


__all__ = ["auth_router", "favorites_router", "suggestions_router"]
