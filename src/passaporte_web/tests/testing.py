import dataclasses
import json
import typing

from ..config import AuthType
from ..transport import Query, Response, Transport


@dataclasses.dataclass
class RecordedRequest:
    method: str
    path: str
    query: typing.Optional[Query]
    body: typing.Optional[bytes]
    auth: AuthType

    @property
    def json(self) -> typing.Any:
        assert self.body is not None
        return json.loads(self.body)


def json_response(
    status_code: int,
    payload: typing.Any = None,
    headers: typing.Optional[typing.Mapping[str, str]] = None,
) -> Response:
    return Response(
        status_code=status_code,
        body=json.dumps(payload).encode("utf-8") if payload is not None else b"",
        headers=headers or {},
    )


class FakeTransport(Transport):
    """
    A transport that replays queued responses and records every request made.
    """

    responses: typing.List[Response]
    requests: typing.List[RecordedRequest]

    def queue(self, *responses: Response) -> "FakeTransport":
        self.responses.extend(responses)
        return self

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    def request(
        self,
        method: str,
        path: str,
        query: typing.Optional[Query] = None,
        body: typing.Optional[bytes] = None,
        auth: AuthType = AuthType.APPLICATION,
    ) -> Response:
        self.requests.append(RecordedRequest(method, path, query, body, auth))
        if not self.responses:
            raise AssertionError(f"no response queued for {method} {path}")
        return self.responses.pop(0)

    def __init__(self, *responses: Response):
        self.responses = list(responses)
        self.requests = []
