"""
The transport is the only component that talks to the network. The resource
clients hand it already-encoded bodies and receive raw responses back; client
fault statuses are returned as ordinary responses, never raised.
"""
import abc
import dataclasses
import logging
import typing

import requests
from requests.structures import CaseInsensitiveDict

from .config import AuthType, Configuration
from .exceptions import TransportError

logger = logging.getLogger(__name__)

Query = typing.Mapping[str, typing.Any]

JSON_CONTENT_TYPE = "application/json"


@dataclasses.dataclass
class Response:
    status_code: int
    body: bytes = b""
    headers: typing.Mapping[str, str] = dataclasses.field(default_factory=CaseInsensitiveDict)

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers)


class Transport(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def request(
        self,
        method: str,
        path: str,
        query: typing.Optional[Query] = None,
        body: typing.Optional[bytes] = None,
        auth: AuthType = AuthType.APPLICATION,
    ) -> Response:
        """
        Issues a single request.

        :param str method: one of ``GET``, ``POST``, ``PUT`` and ``DELETE``.
        :param str path: the path relative to the service root.
        :param Optional[Mapping[str, Any]] query: query string parameters.
        :param Optional[bytes] body: an encoded request body.
        :param AuthType auth: the credential the request is made under.
        :return: the response, whatever its status code.
        """
        ...  # pragma: nocover


class RequestsTransport(Transport):
    config: Configuration
    session: requests.Session

    def _url(self, path: str) -> str:
        return self.config.url.rstrip("/") + "/" + path.lstrip("/")

    def request(
        self,
        method: str,
        path: str,
        query: typing.Optional[Query] = None,
        body: typing.Optional[bytes] = None,
        auth: AuthType = AuthType.APPLICATION,
    ) -> Response:
        credentials = self.config.credentials_for(auth)
        logger.debug("%s %s %r (%s)", method, path, query, auth.value)
        try:
            resp = self.session.request(
                method,
                self._url(path),
                params=query,
                data=body,
                auth=credentials,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(method, path) from e
        logger.debug("%s %s -> %d", method, path, resp.status_code)
        return Response(
            status_code=resp.status_code,
            body=resp.content,
            headers=resp.headers,
        )

    def __init__(self, config: Configuration, session: typing.Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "User-Agent": config.user_agent,
                "Accept": JSON_CONTENT_TYPE,
                "Content-Type": JSON_CONTENT_TYPE,
            }
        )
