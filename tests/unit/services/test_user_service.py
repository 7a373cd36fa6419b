"""Tests for UserService with the repository mocked out."""

import uuid
from unittest.mock import MagicMock, patch

import pytest

from app.core.errors import UserConflictError, UserNotFoundError, UserStoreError
from app.core.security import verify_password
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_service import UserService


class TestUserService:
    def setup_method(self):
        self.mock_repo = MagicMock()
        self.service = UserService(self.mock_repo)

    def test_create_user_hashes_password(self):
        self.mock_repo.create.return_value = User(username="alice", email="alice@example.com",
                                                  password_hash="hashed")
        result = self.service.create_user(
            UserCreate(username="alice", email="alice@example.com", password="s3cretpass"))

        stored = self.mock_repo.create.call_args[0][0]
        assert stored.username == "alice"
        assert stored.email == "alice@example.com"
        assert stored.password != "s3cretpass"
        assert stored.password.startswith("$2b$")
        assert verify_password("s3cretpass", stored.password)
        assert result.username == "alice"

    def test_update_hashes_password_when_present(self):
        user_id = uuid.uuid4()
        self.service.update_user(user_id, UserUpdate(password="newpassword"))

        called_id, stored = self.mock_repo.update.call_args[0]
        assert called_id == user_id
        assert verify_password("newpassword", stored.password)

    def test_update_without_password_leaves_it_unset(self):
        user_id = uuid.uuid4()
        self.service.update_user(user_id, UserUpdate(email="new@example.com"))

        _, stored = self.mock_repo.update.call_args[0]
        assert stored.email == "new@example.com"
        assert stored.password is None
        assert stored.username is None

    def test_get_user_by_id(self):
        user_id = uuid.uuid4()
        self.mock_repo.get_one.return_value = User(id=user_id, username="alice", email="a@b.com",
                                                   password_hash="h")
        assert self.service.get_user_by_id(user_id).id == user_id
        self.mock_repo.get_one.assert_called_once_with(user_id)

    def test_get_all_users_passes_window(self):
        self.mock_repo.get_all.return_value = []
        assert self.service.get_all_users(10, 5) == []
        self.mock_repo.get_all.assert_called_once_with(10, 5)

    def test_delete_user(self):
        user_id = uuid.uuid4()
        self.service.delete_user(user_id)
        self.mock_repo.delete.assert_called_once_with(user_id)

    @pytest.mark.parametrize("error", [
        UserNotFoundError("x"),
        UserConflictError("users_email_key"),
        UserStoreError("boom"),
    ])
    def test_repository_errors_propagate_unchanged(self, error):
        self.mock_repo.update.side_effect = error
        with pytest.raises(type(error)) as exc_info:
            self.service.update_user(uuid.uuid4(), UserUpdate(username="bob"))
        assert exc_info.value is error

    def test_hash_failure_is_store_error(self):
        with patch("app.services.user_service.hash_password", side_effect=ValueError("bad salt")):
            with pytest.raises(UserStoreError):
                self.service.create_user(
                    UserCreate(username="alice", email="alice@example.com", password="s3cretpass"))
        self.mock_repo.create.assert_not_called()
