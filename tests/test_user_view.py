import pytest

from rumbl.app.schemas.user import User
from rumbl.app.views.user_view import first_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("José", "José"),
        ("José Valim", "José"),
        ("  Chris   McCord ", "Chris"),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_first_name(name, expected):
    assert first_name(User(id="1", name=name)) == expected
