from .login_user import LoginUserUseCase
from .seed_user import SeedUserUseCase

__all__ = ["LoginUserUseCase", "SeedUserUseCase"]
