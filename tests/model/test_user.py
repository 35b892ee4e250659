import pytest
from usermgr.model.types import User


class TestUser:
    def test_to_dict_keeps_field_names(self):
        assert User(name="Ann", email="ann@x.co").to_dict() == {"name": "Ann", "email": "ann@x.co"}

    def test_from_dict_ignores_unknown_keys(self):
        user = User.from_dict({"name": "Ann", "email": "ann@x.co", "age": 30})
        assert user == User(name="Ann", email="ann@x.co")

    def test_is_immutable(self):
        user = User(name="Ann", email="ann@x.co")
        with pytest.raises(AttributeError):
            user.name = "Bob"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "data",
        [
            ["Ann", "ann@x.co"],
            {"name": "Ann"},
            {"email": "ann@x.co"},
            {"name": 1, "email": "ann@x.co"},
            {"name": "Ann", "email": None},
        ],
    )
    def test_from_dict_rejects_bad_records(self, data):
        with pytest.raises(ValueError):
            User.from_dict(data)
