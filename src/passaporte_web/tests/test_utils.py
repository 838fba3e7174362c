import pytest

from ..exceptions import ResourceNotFoundError
from ..utils import UNSPECIFIED, UnspecifiedType, english_enumerate


@pytest.mark.parametrize(
    "items,expected",
    [
        ([], ""),
        (["a"], "a"),
        (["a", "b"], "a and b"),
        (["a", "b", "c"], "a, b, and c"),
    ],
)
def test_english_enumerate(items, expected):
    assert english_enumerate(items) == expected


def test_english_enumerate_conj():
    assert english_enumerate(iter(["a", "b"]), "or") == "a or b"


def test_unspecified():
    assert UnspecifiedType() is UNSPECIFIED
    assert not UNSPECIFIED
    assert repr(UNSPECIFIED) == "UNSPECIFIED"


def test_not_found_message():
    e = ResourceNotFoundError("identity", {"email": "a@b.c", "page": 2})
    assert str(e) == "no \"identity\" found for email='a@b.c' and page=2"
