from usermgr.model.types import User
from usermgr.repository.memory import InMemoryUserRepository


class CountingRepository(InMemoryUserRepository):
    """Records how many times save() was called."""

    def __init__(self, users=()):
        super().__init__(users)
        self.save_count = 0

    def save(self) -> bool:
        self.save_count += 1
        return super().save()


class TestInMemoryUserRepository:
    def test_starts_with_given_users(self):
        repo = InMemoryUserRepository([User("Ann", "ann@x.co")])

        assert repo.get_users() == (User("Ann", "ann@x.co"),)

    def test_add_and_delete_follow_store_contract(self):
        repo = InMemoryUserRepository()

        assert repo.add_user(User("Ann", "ann@x.co")) is True
        assert repo.add_user(User("Ann 2", "ann@x.co")) is False
        assert repo.delete_user("ann@x.co") is True
        assert repo.delete_user("ann@x.co") is False
        assert repo.get_users() == ()

    def test_save_always_succeeds(self):
        assert InMemoryUserRepository().save() is True

    def test_saves_only_on_successful_mutation(self):
        repo = CountingRepository()
        repo.add_user(User("Ann", "ann@x.co"))
        repo.add_user(User("Ann", "ann@x.co"))
        repo.delete_user("missing@x.co")

        assert repo.save_count == 1
