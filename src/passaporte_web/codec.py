import abc
import base64
import datetime
import decimal
import json
import typing

JSONValue = typing.Any


class Codec(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def decode(self, body: bytes) -> JSONValue:
        """
        Decodes a response body into a structured value.

        :param bytes body: the raw body.
        :return: the decoded value, or :py:const:`None` for an empty body.
        """
        ...  # pragma: nocover

    @abc.abstractmethod
    def encode(self, value: JSONValue) -> bytes:
        ...  # pragma: nocover


class JSONCodec(Codec):
    _encoding: str = "utf-8"

    def _render_datetime(self, value: typing.Any) -> str:
        return typing.cast(datetime.datetime, value).isoformat(sep=" ")

    def _render_date(self, value: typing.Any) -> str:
        return typing.cast(datetime.date, value).isoformat()

    def _render_decimal(self, value: typing.Any) -> str:
        return str(typing.cast(decimal.Decimal, value))

    def _render_bytes(self, value: typing.Any) -> str:
        return base64.b64encode(typing.cast(bytes, value)).decode("ascii")

    _supported_types: typing.ClassVar[typing.Dict[type, typing.Callable]] = {
        datetime.datetime: _render_datetime,
        datetime.date: _render_date,
        decimal.Decimal: _render_decimal,
        bytes: _render_bytes,
    }

    def _default(self, value: typing.Any) -> typing.Any:
        # datetime must be tried before its base class date
        for type_, r in self._supported_types.items():
            if isinstance(value, type_):
                return r(self, value)
        raise TypeError(f"values of type {type(value).__name__} cannot be encoded")

    def decode(self, body: bytes) -> JSONValue:
        if not body or not body.strip():
            return None
        return json.loads(body.decode(self._encoding))

    def encode(self, value: JSONValue) -> bytes:
        return json.dumps(value, default=self._default).encode(self._encoding)

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
