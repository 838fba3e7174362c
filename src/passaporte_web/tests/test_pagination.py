import pytest

from ..pagination import PageReferences, parse_link_header


def test_next_and_prev():
    assert parse_link_header(
        '<http://x/?page=2>; rel="next", <http://x/?page=1>; rel="prev"', 20
    ) == PageReferences(limit=20, next=2, prev=1, first=None, last=None)


def test_all_relations():
    header = (
        "<https://app.passaporteweb.com.br/notifications/api/?page=3&limit=10>; rel=next, "
        "<https://app.passaporteweb.com.br/notifications/api/?page=1&limit=10>; rel=prev, "
        "<https://app.passaporteweb.com.br/notifications/api/?page=1&limit=10>; rel=first, "
        "<https://app.passaporteweb.com.br/notifications/api/?page=123&limit=10>; rel=last"
    )
    assert parse_link_header(header, 20) == PageReferences(
        limit=10, next=3, prev=1, first=1, last=123
    )


def test_multiple_relations_in_one_entry():
    assert parse_link_header('<http://x/?page=1>; rel="first prev"') == PageReferences(
        limit=20, prev=1, first=1
    )


def test_page_token():
    assert parse_link_header('<http://x/?page=abc>; rel="next"', 5) == PageReferences(
        limit=5, next="abc"
    )


def test_unknown_relations_are_ignored():
    assert parse_link_header('<http://x/?page=9>; rel="self"', 5) == PageReferences(limit=5)


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "garbage",
        "<http://x/?page=2>",
        '<http://x/>; rel="next"',
        'http://x/?page=2; rel="next"',
        "<http://x/?page=2&limit=abc>; rel=",
    ],
)
def test_missing_or_malformed(value):
    assert parse_link_header(value, 15) == PageReferences(limit=15)


def test_partial():
    assert parse_link_header('garbage, <http://x/?page=4>; rel="last"', 20) == PageReferences(
        limit=20, last=4
    )
