from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.seed_user import SeedUserUseCase
from ...core.session import SessionCookieManager

if TYPE_CHECKING:
    from ..container import DIContainer


class AuthProvider:
    """Authentication provider - registers the session manager and auth use cases"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register authentication dependencies.
        Use cases are created on-demand via factories.
        """
        settings = container.settings
        
        container.register_singleton(
            SessionCookieManager,
            SessionCookieManager(
                cookie_name=settings.session_cookie_name,
                max_age_seconds=settings.session_max_age_seconds,
                secure=settings.is_production,
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            SeedUserUseCase,
            lambda: SeedUserUseCase(
                user_repository=container.get(UserRepository),
                username=settings.seed_username,
                password=settings.seed_password,
            )
        )
