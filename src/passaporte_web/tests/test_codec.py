import datetime
import decimal
import json

import pytest


@pytest.fixture
def target():
    from ..codec import JSONCodec

    return JSONCodec()


def test_encode(target):
    encoded = target.encode(
        {
            "birth_date": datetime.date(1983, 4, 19),
            "scheduled_to": datetime.datetime(2012, 1, 1, 0, 0, 0),
            "amount": decimal.Decimal("1.50"),
            "tos": True,
            "nickname": "Fulaninho",
        }
    )
    assert json.loads(encoded) == {
        "birth_date": "1983-04-19",
        "scheduled_to": "2012-01-01 00:00:00",
        "amount": "1.50",
        "tos": True,
        "nickname": "Fulaninho",
    }


def test_encode_unsupported(target):
    with pytest.raises(TypeError):
        target.encode({"a": object()})


def test_decode(target):
    assert target.decode(b'{"count": 3}') == {"count": 3}
    assert target.decode("[\"ação\"]".encode("utf-8")) == ["ação"]


@pytest.mark.parametrize("body", [b"", b"  \n"])
def test_decode_empty(target, body):
    assert target.decode(body) is None


def test_decode_invalid(target):
    with pytest.raises(ValueError):
        target.decode(b"<html>")
