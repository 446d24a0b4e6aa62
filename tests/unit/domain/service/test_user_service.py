"""Unit tests for UserService."""

import pytest

from newsfeed.domain.error import NotFoundError
from newsfeed.domain.service import UserService
from newsfeed.domain.value import UserId, UserRole
from tests.conftest import author, reader
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestUserService:
    """Tests for the mirrored user records."""

    @pytest.mark.asyncio
    async def test_ensure_user_creates_once(self, unit_env):
        """The first sighting creates the record, later ones reuse it."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        created = await service.ensure_user(author(7, handle="ada"))
        again = await service.ensure_user(author(7, handle="renamed"))

        # Assert
        assert created.id == 7
        assert created.role is UserRole.AUTHOR
        assert created.verified is True
        assert again.handle.root == "ada"

    @pytest.mark.asyncio
    async def test_missing_handle_falls_back(self, unit_env):
        """Users without a handle get a placeholder one."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        user = await service.ensure_user(reader(3))

        # Assert
        assert user.handle.root == "user-3"

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, unit_env):
        """Unknown users should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found: 1"):
            await service.get_by_id(UserId(1))

    @pytest.mark.asyncio
    async def test_get_by_ids_leaves_out_unknown(self, unit_env):
        """Bulk lookup should only return known users."""
        # Arrange
        service = await unit_env.get(UserService)
        await service.ensure_user(reader(1))

        # Act
        users = await service.get_by_ids([UserId(1), UserId(2)])

        # Assert
        assert list(users) == [1]
