"""
Unit tests for auth use cases (Login, Seed).
"""
import pytest
from app.core.security import hash_password, verify_password
from app.application.use_cases.auth.login_user import LoginUserUseCase
from app.application.use_cases.auth.seed_user import SeedUserUseCase
from app.domain.exceptions import AuthErrorKind
from app.domain.models.user import User


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, user_factory):
        user = user_factory(password_hash=hash_password("carmaker"))
        mock_user_repo.find_by_username.return_value = user

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute("ipgautomotive", "carmaker")

        assert result.ok
        assert result.value is user
        mock_user_repo.find_by_username.assert_awaited_once_with("ipgautomotive")

    @pytest.mark.asyncio
    async def test_login_username_not_found(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute("nobody", "whatever")

        assert not result.ok
        assert result.error.kind == AuthErrorKind.USERNAME_NOT_FOUND
        assert result.error.message == "Username not found"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, user_factory):
        mock_user_repo.find_by_username.return_value = user_factory(
            password_hash=hash_password("carmaker")
        )

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute("ipgautomotive", "wrongpassword")

        assert not result.ok
        assert result.error.kind == AuthErrorKind.INVALID_PASSWORD
        assert result.error.message == "Invalid password"

    @pytest.mark.asyncio
    async def test_login_store_failure_is_unknown(self, mock_user_repo):
        mock_user_repo.find_by_username.side_effect = RuntimeError("connection refused")

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute("ipgautomotive", "carmaker")

        assert not result.ok
        assert result.error.kind == AuthErrorKind.UNKNOWN
        assert "connection refused" not in result.error.message


class TestSeedUserUseCase:
    """Tests for SeedUserUseCase"""

    @pytest.mark.asyncio
    async def test_creates_user_when_missing(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="64b7f0c2a1b2c3d4e5f60799",
            username=user.username,
            password_hash=user.password_hash,
            favorites=user.favorites,
        )

        use_case = SeedUserUseCase(mock_user_repo, "ipgautomotive", "carmaker")
        result = await use_case.execute()

        assert result.id == "64b7f0c2a1b2c3d4e5f60799"
        assert result.username == "ipgautomotive"
        assert result.favorites == []
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None
        assert saved.password_hash != "carmaker"
        assert verify_password("carmaker", saved.password_hash)

    @pytest.mark.asyncio
    async def test_existing_user_is_left_untouched(self, mock_user_repo, user_factory):
        mock_user_repo.find_by_username.return_value = user_factory(favorites=["Paris"])

        use_case = SeedUserUseCase(mock_user_repo, "ipgautomotive", "carmaker")
        result = await use_case.execute()

        assert result.username == "ipgautomotive"
        assert result.favorites == ["Paris"]
        mock_user_repo.save.assert_not_called()
