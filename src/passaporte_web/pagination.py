import dataclasses
import logging
import re
import typing
import urllib.parse

logger = logging.getLogger(__name__)

PageIndicator = typing.Union[int, str]

RELATIONS = ("next", "prev", "first", "last")

DEFAULT_LIMIT = 20

_link_re = re.compile(r"^\s*<([^>]*)>\s*(.*)$")
_rel_re = re.compile(r"""rel\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s;,]+))""")


@dataclasses.dataclass(frozen=True)
class PageReferences:
    limit: int = DEFAULT_LIMIT
    next: typing.Optional[PageIndicator] = None
    prev: typing.Optional[PageIndicator] = None
    first: typing.Optional[PageIndicator] = None
    last: typing.Optional[PageIndicator] = None


def _page_indicator(value: str) -> PageIndicator:
    try:
        return int(value)
    except ValueError:
        return value


def split_links(value: str) -> typing.Iterator[typing.Tuple[str, typing.Sequence[str]]]:
    """
    Splits a ``Link`` header value (RFC 5988) into ``(url, relations)`` pairs.
    Entries that cannot be parsed are skipped.
    """
    for entry in re.split(r",\s*(?=<)", value):
        m = _link_re.match(entry)
        if m is None:
            logger.debug("skipping malformed link entry %r", entry)
            continue
        url, params = m.groups()
        rels: typing.List[str] = []
        for rm in _rel_re.finditer(params):
            rels.extend(next(g for g in rm.groups() if g is not None).split())
        yield url, rels


def parse_link_header(
    value: typing.Optional[str], default_limit: int = DEFAULT_LIMIT
) -> PageReferences:
    """
    Builds a :py:class:`PageReferences` from a ``Link`` header value.

    The page of each known relation is read from the ``page`` query parameter of its
    URL. The page size comes from a ``limit`` parameter when the links carry one,
    otherwise ``default_limit`` is used. A missing or malformed header never raises.

    :param Optional[str] value: the header value.
    :param int default_limit: the page size assumed when the links do not carry one.
    :return: the page references.
    """
    if not value:
        return PageReferences(limit=default_limit)

    limit: typing.Optional[int] = None
    pages: typing.Dict[str, PageIndicator] = {}

    for url, rels in split_links(value):
        params = urllib.parse.parse_qs(urllib.parse.urlsplit(url).query)
        if limit is None and params.get("limit"):
            try:
                limit = int(params["limit"][0])
            except ValueError:
                pass
        page = params.get("page")
        if not page:
            continue
        for rel in rels:
            if rel in RELATIONS:
                pages[rel] = _page_indicator(page[0])

    return PageReferences(limit=limit if limit is not None else default_limit, **pages)
