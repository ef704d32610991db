"""Unit tests for UserDirectoryService."""

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest

from stockroom.application.services import UserDirectoryService
from stockroom.domain.shared.exceptions import ConflictError, ValidationError
from stockroom.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    PasswordTooLongError,
    User,
)
from stockroom_auth import PasswordHashingService
from tests.shared.fixtures.factories import make_user


@pytest.fixture
def mock_user_repo():
    """Create a mock user repository that echoes created users back."""
    repo = AsyncMock()
    repo.find_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda user: user)
    return repo


@pytest.fixture
def mock_password_service():
    service = MagicMock()
    service.hash = MagicMock(return_value="$2b$12$hashed")
    return service


@pytest.fixture
def directory(mock_user_repo, mock_password_service):
    return UserDirectoryService(
        user_repository=mock_user_repo,
        password_service=mock_password_service,
    )


class TestRegister:
    async def test_register_persists_hashed_password(
        self, directory, mock_user_repo, mock_password_service
    ):
        await directory.register("Ana", "ana@mail.com", "pw123")

        mock_password_service.hash.assert_called_once_with("pw123")
        mock_user_repo.create.assert_called_once()
        stored: User = mock_user_repo.create.call_args.args[0]
        assert stored.name == "Ana"
        assert stored.email == "ana@mail.com"
        assert stored.password_hash == "$2b$12$hashed"

    async def test_register_returns_user_without_password(self, directory):
        user = await directory.register("Ana", "ana@mail.com", "pw123")

        assert user.password_hash == ""
        assert user.name == "Ana"
        assert user.email == "ana@mail.com"

    async def test_register_duplicate_email_raises_conflict(
        self, directory, mock_user_repo, mock_password_service
    ):
        mock_user_repo.find_by_email.return_value = make_user(email="ana@mail.com")

        with pytest.raises(EmailAlreadyExistsError, match="Email already in use") as e:
            await directory.register("Someone Else", "ana@mail.com", "other")

        assert isinstance(e.value, ConflictError)
        mock_user_repo.create.assert_not_called()
        mock_password_service.hash.assert_not_called()

    async def test_register_malformed_email_raises_validation(
        self, directory, mock_user_repo
    ):
        with pytest.raises(InvalidEmailError):
            await directory.register("Ana", "ana.mail.com", "pw123")

        mock_user_repo.find_by_email.assert_not_called()
        mock_user_repo.create.assert_not_called()

    @pytest.mark.parametrize("password", ["x" * 80, "\u00e9" * 40])
    async def test_register_password_over_byte_limit_raises_validation(
        self, directory, mock_user_repo, mock_password_service, password
    ):
        with pytest.raises(PasswordTooLongError, match="72 bytes") as e:
            await directory.register("Ana", "ana@mail.com", password)

        assert isinstance(e.value, ValidationError)
        mock_password_service.hash.assert_not_called()
        mock_user_repo.create.assert_not_called()

    async def test_register_with_real_hasher_accepts_72_byte_password(
        self, mock_user_repo
    ):
        directory = UserDirectoryService(
            user_repository=mock_user_repo,
            password_service=PasswordHashingService(rounds=4),
        )

        await directory.register("Ana", "ana@mail.com", "\u00e9" * 36)

        mock_user_repo.create.assert_called_once()

    async def test_register_stores_email_verbatim(self, directory, mock_user_repo):
        await directory.register("Ana", "Ana@Mail.COM", "pw123")

        mock_user_repo.find_by_email.assert_called_once_with("Ana@Mail.COM")
        stored: User = mock_user_repo.create.call_args.args[0]
        assert stored.email == "Ana@Mail.COM"

    async def test_register_hashes_off_the_event_loop_thread(
        self, directory, mock_password_service
    ):
        loop_thread = threading.get_ident()
        hashing_threads = []

        def record_thread(secret):
            hashing_threads.append(threading.get_ident())
            return "$2b$12$hashed"

        mock_password_service.hash.side_effect = record_thread

        await directory.register("Ana", "ana@mail.com", "pw123")

        assert hashing_threads and hashing_threads[0] != loop_thread


class TestFindByEmail:
    async def test_find_existing_user_includes_hash(self, directory, mock_user_repo):
        stored = make_user(email="ana@mail.com", password_hash="$2b$12$stored")
        mock_user_repo.find_by_email.return_value = stored

        user = await directory.find_by_email("ana@mail.com")

        assert user is stored
        assert user.password_hash == "$2b$12$stored"
        mock_user_repo.find_by_email.assert_called_once_with("ana@mail.com")

    async def test_find_missing_user_returns_none(self, directory):
        assert await directory.find_by_email("nobody@mail.com") is None

    @pytest.mark.parametrize("email", ["", "ana", "ana.mail.com"])
    async def test_email_without_at_sign_never_queries_store(
        self, directory, mock_user_repo, email
    ):
        with pytest.raises(ValidationError, match="Email invalid"):
            await directory.find_by_email(email)

        mock_user_repo.find_by_email.assert_not_called()
