"""
Unit tests for user CRUD use cases.
"""
from unittest.mock import AsyncMock

import pytest

from users_api.application.dto.user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserPatchRequest,
    UserResponse,
)
from users_api.application.use_cases.users.list_users import ListUsersUseCase
from users_api.application.use_cases.users.get_user import GetUserUseCase
from users_api.application.use_cases.users.create_user import CreateUserUseCase
from users_api.application.use_cases.users.replace_user import ReplaceUserUseCase
from users_api.application.use_cases.users.patch_user import PatchUserUseCase
from users_api.application.use_cases.users.delete_user import DeleteUserUseCase
from users_api.domain.exceptions import (
    InvalidIdError,
    MissingFieldsError,
    EmailTakenError,
    UsernameTakenError,
    WeakPasswordError,
    UserNotFoundError,
)
from users_api.domain.models.user import User


def _create_request(username="alice", email="alice@example.com", password="abc123"):
    return UserCreateRequest(username=username, email=email, password=password)


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self):
        repo = AsyncMock()
        repo.list.return_value = []
        result = await ListUsersUseCase(repo).execute()
        assert result == []

    @pytest.mark.asyncio
    async def test_list_strips_passwords(self):
        repo = AsyncMock()
        repo.list.return_value = [
            User(id=1, username="alice", email="a@x.com", password="abc123"),
            User(id=2, username="bob", email="b@x.com", password="abc456"),
        ]
        result = await ListUsersUseCase(repo).execute()
        assert [user.model_dump() for user in result] == [
            {"id": 1, "username": "alice", "email": "a@x.com"},
            {"id": 2, "username": "bob", "email": "b@x.com"},
        ]


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self, user_repo):
        use_case = CreateUserUseCase(user_repo)
        first = await use_case.execute(_create_request())
        second = await use_case.execute(_create_request(username="bob", email="bob@example.com"))
        assert first.id == 1
        assert second.id == first.id + 1
        assert isinstance(first, UserResponse)
        assert "password" not in first.model_dump()

    @pytest.mark.asyncio
    async def test_create_stores_trimmed_username(self, user_repo):
        result = await CreateUserUseCase(user_repo).execute(_create_request(username="  alice  "))
        assert result.username == "alice"
        stored = await user_repo.find_by_id(result.id)
        assert stored.username == "alice"
        assert stored.password == "abc123"

    @pytest.mark.asyncio
    async def test_rejected_create_does_not_consume_id(self, user_repo):
        use_case = CreateUserUseCase(user_repo)
        await use_case.execute(_create_request())
        with pytest.raises(UsernameTakenError):
            await use_case.execute(_create_request(email="other@example.com"))
        third = await use_case.execute(_create_request(username="carol", email="carol@example.com"))
        assert third.id == 2

    @pytest.mark.asyncio
    async def test_missing_fields_never_touch_store(self):
        repo = AsyncMock()
        with pytest.raises(MissingFieldsError):
            await CreateUserUseCase(repo).execute(UserCreateRequest(username="alice"))
        repo.insert.assert_not_called()
        repo.next_id.assert_not_called()


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_round_trip_with_create(self, user_repo):
        created = await CreateUserUseCase(user_repo).execute(_create_request())
        fetched = await GetUserUseCase(user_repo).execute(str(created.id))
        assert fetched == created

    @pytest.mark.asyncio
    async def test_invalid_id(self, user_repo):
        with pytest.raises(InvalidIdError):
            await GetUserUseCase(user_repo).execute("abc")

    @pytest.mark.asyncio
    async def test_not_found(self, user_repo):
        with pytest.raises(UserNotFoundError, match="User not found"):
            await GetUserUseCase(user_repo).execute("12")


class TestReplaceUserUseCase:
    """Tests for ReplaceUserUseCase"""

    @pytest.mark.asyncio
    async def test_replace_with_identical_values(self, user_repo, make_user):
        user = await make_user(username="alice", email="a@x.com", password="abc123")
        result = await ReplaceUserUseCase(user_repo).execute(
            str(user.id),
            UserUpdateRequest(username="alice", email="a@x.com", password="abc123"),
        )
        assert result.id == user.id
        assert result.username == "alice"

    @pytest.mark.asyncio
    async def test_replace_overwrites_all_fields(self, user_repo, make_user):
        user = await make_user()
        await ReplaceUserUseCase(user_repo).execute(
            str(user.id),
            UserUpdateRequest(username="alicia", email="alicia@example.com", password="xyz789"),
        )
        stored = await user_repo.find_by_id(user.id)
        assert (stored.username, stored.email, stored.password) == ("alicia", "alicia@example.com", "xyz789")

    @pytest.mark.asyncio
    async def test_replace_with_other_users_email(self, user_repo, make_user):
        await make_user(username="alice", email="a@x.com")
        bob = await make_user(username="bob", email="b@x.com")
        with pytest.raises(EmailTakenError):
            await ReplaceUserUseCase(user_repo).execute(
                str(bob.id),
                UserUpdateRequest(username="bob", email="a@x.com", password="abc123"),
            )

    @pytest.mark.asyncio
    async def test_replace_unknown_user(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await ReplaceUserUseCase(user_repo).execute(
                "4",
                UserUpdateRequest(username="alice", email="a@x.com", password="abc123"),
            )


class TestPatchUserUseCase:
    """Tests for PatchUserUseCase"""

    @pytest.mark.asyncio
    async def test_patch_only_email(self, user_repo, make_user):
        user = await make_user(username="alice", email="a@x.com", password="abc123")
        result = await PatchUserUseCase(user_repo).execute(
            str(user.id), UserPatchRequest(email="new@x.com")
        )
        assert result.email == "new@x.com"
        stored = await user_repo.find_by_id(user.id)
        assert stored.username == "alice"
        assert stored.password == "abc123"

    @pytest.mark.asyncio
    async def test_patch_without_fields(self, user_repo, make_user):
        user = await make_user()
        with pytest.raises(MissingFieldsError):
            await PatchUserUseCase(user_repo).execute(str(user.id), UserPatchRequest())

    @pytest.mark.asyncio
    async def test_failed_patch_leaves_record_unchanged(self, user_repo, make_user):
        user = await make_user(username="alice", email="a@x.com", password="abc123")
        with pytest.raises(WeakPasswordError):
            await PatchUserUseCase(user_repo).execute(
                str(user.id), UserPatchRequest(username="alicia", password="nodigits")
            )
        stored = await user_repo.find_by_id(user.id)
        assert stored.username == "alice"


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_existing(self, user_repo, make_user):
        user = await make_user()
        assert await DeleteUserUseCase(user_repo).execute(str(user.id)) == user.id
        assert await user_repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_leaves_store_untouched(self, user_repo, make_user):
        for index in range(3):
            await make_user(username=f"user{index}", email=f"user{index}@example.com")
        with pytest.raises(UserNotFoundError):
            await DeleteUserUseCase(user_repo).execute("9999")
        assert user_repo.count() == 3

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self):
        repo = AsyncMock()
        with pytest.raises(InvalidIdError):
            await DeleteUserUseCase(repo).execute("-1")
        repo.remove.assert_not_called()
