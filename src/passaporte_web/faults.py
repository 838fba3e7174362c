import collections.abc
import logging
import typing

from .codec import Codec
from .exceptions import ErrorMap, UnexpectedResponseError
from .transport import Response

logger = logging.getLogger(__name__)

MESSAGE_KEY = "message"


class ErrorTranslator:
    """
    Turns fault responses of the remote service into local error maps.

    Only the client fault statuses an operation names are recoverable; the fault
    document is passed through as-is. Anything else raises
    :py:class:`UnexpectedResponseError`.
    """

    codec: Codec

    def unexpected(self, response: Response) -> UnexpectedResponseError:
        logger.warning(
            "unexpected response: %d - %r", response.status_code, response.body[:200]
        )
        return UnexpectedResponseError(response.status_code, response.body)

    def expect(self, response: Response, *statuses: int) -> Response:
        if response.status_code not in statuses:
            raise self.unexpected(response)
        return response

    def translate(self, response: Response, faults: typing.Collection[int]) -> ErrorMap:
        """
        Decodes the body of a client fault response into an error map.

        :param Response response: the fault response.
        :param Collection[int] faults: the statuses the operation treats as client faults.
        :return: the decoded fault document.
        """
        if response.status_code not in faults:
            raise self.unexpected(response)
        try:
            decoded = self.codec.decode(response.body)
        except ValueError:
            decoded = response.body.decode("utf-8", "replace")
        if isinstance(decoded, collections.abc.Mapping):
            return dict(decoded)
        return {MESSAGE_KEY: decoded}

    def __init__(self, codec: Codec):
        self.codec = codec


def precondition_failed(message: str) -> ErrorMap:
    return {MESSAGE_KEY: message}
