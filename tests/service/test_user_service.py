"""
Tests for UserService against the in-memory repository.
"""

import pytest
from usermgr.model.types import User
from usermgr.repository.memory import InMemoryUserRepository
from usermgr.service.types import ServiceResult
from usermgr.service.users import UserService


class CountingRepository(InMemoryUserRepository):
    """Records how many times save() was called."""

    def __init__(self, users=()):
        super().__init__(users)
        self.save_count = 0

    def save(self) -> bool:
        self.save_count += 1
        return super().save()


@pytest.fixture
def repo() -> CountingRepository:
    return CountingRepository()


@pytest.fixture
def service(repo: CountingRepository) -> UserService:
    return UserService(repo)


class TestCreateUser:
    def test_valid_user_is_appended(self, service: UserService, repo: CountingRepository):
        repo.add_user(User("Existing", "old@x.co"))

        result = service.create_user("Ann", "ann@x.co")

        assert result == ServiceResult(success=True, message="User Ann added successfully")
        users = service.get_all_users()
        assert users[-1] == User("Ann", "ann@x.co")
        assert [u.email for u in users].count("ann@x.co") == 1

    def test_empty_name_is_rejected_before_email_check(self, service: UserService, repo: CountingRepository):
        ok, message = service.create_user("", "not-an-email")

        assert ok is False
        assert message == "Name cannot be empty"
        assert repo.save_count == 0

    def test_invalid_email_is_rejected(self, service: UserService):
        ok, message = service.create_user("Ann", "a@b")

        assert ok is False
        assert message == "Invalid email format"
        assert service.get_all_users() == ()

    def test_duplicate_email_is_rejected(self, service: UserService):
        service.create_user("Ann", "ann@x.co")

        ok, message = service.create_user("Someone", "ann@x.co")

        assert ok is False
        assert message == "User with email ann@x.co already exists"
        assert len(service.get_all_users()) == 1

    def test_input_is_not_trimmed(self, service: UserService):
        ok, message = service.create_user("Ann", " ann@x.co")

        assert ok is False
        assert message == "Invalid email format"


class TestRemoveUser:
    def test_remove_existing(self, service: UserService):
        service.create_user("Ann", "ann@x.co")

        result = service.remove_user("ann@x.co")

        assert result.success is True
        assert result.message == "User with email ann@x.co removed"
        assert service.get_all_users() == ()

    def test_remove_twice(self, service: UserService):
        service.create_user("Ann", "ann@x.co")
        service.create_user("Bob", "bob@x.co")
        service.remove_user("ann@x.co")
        after_first = service.get_all_users()

        ok, message = service.remove_user("ann@x.co")

        assert ok is False
        assert message == "User with email ann@x.co not found"
        assert service.get_all_users() == after_first


def test_service_result_unpacks_as_pair():
    ok, message = ServiceResult.fail("nope")

    assert (ok, message) == (False, "nope")
    assert tuple(ServiceResult.ok("yes")) == (True, "yes")
