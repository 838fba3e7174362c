import collections.abc
import datetime
import logging
import typing
import urllib.parse

from .codec import Codec, JSONCodec
from .config import AuthType
from .exceptions import (
    ErrorMap,
    ImmutableAttributeError,
    InvalidArgumentError,
    ResourceNotFoundError,
)
from .faults import ErrorTranslator
from .models import ResourceDescriptor
from .payload import Payload, PayloadBuilder
from .state import Lifecycle
from .store import AttributeStore
from .transport import Query, Response, Transport

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409


class Resource:
    """
    The base class of the local representation of a remote entity.

    Every declared attribute can be read as an instance attribute (or by item
    access); unset attributes read as :py:const:`None`. Only creatable or
    updatable attributes can be assigned.
    """

    descriptor: typing.ClassVar[ResourceDescriptor]

    _client: "ResourceClient"
    _store: AttributeStore
    _lifecycle: Lifecycle
    _errors: ErrorMap

    @property
    def attributes(self) -> typing.Dict[str, typing.Any]:
        return self._store.get_all()

    @property
    def errors(self) -> ErrorMap:
        """
        The errors of the last attempted operation; empty when it succeeded.
        """
        return self._errors

    @property
    def identifier(self) -> typing.Any:
        return self._store.get(self.descriptor.identifier)

    @property
    def is_persisted(self) -> bool:
        return self._lifecycle.is_persisted and self.identifier is not None

    @property
    def is_destroyed(self) -> bool:
        return self._lifecycle.is_destroyed

    def _succeeded(self, values: typing.Optional[typing.Mapping[str, typing.Any]] = None) -> bool:
        if values is not None:
            self._store.set_all(values)
        self._errors = {}
        return True

    def _failed(self, errors: ErrorMap) -> bool:
        self._errors = errors
        return False

    def __getattr__(self, name: str) -> typing.Any:
        if not name.startswith("_") and name in self.descriptor:
            return self._store.get(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: typing.Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        elif name in self.descriptor:
            if name not in self.descriptor.writable_names:
                raise ImmutableAttributeError(self.descriptor.name, name)
            self._store.set(name, value)
        elif hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __getitem__(self, name: str) -> typing.Any:
        try:
            return self._store.get(name)
        except AttributeError:
            raise KeyError(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.identifier is not None and self.identifier == other.identifier

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.descriptor.identifier}={self.identifier!r} "
            f"({self._lifecycle.state.value})>"
        )

    def __init__(
        self,
        client: "ResourceClient",
        attributes: typing.Optional[typing.Mapping[str, typing.Any]] = None,
        lifecycle: typing.Optional[Lifecycle] = None,
    ):
        self._client = client
        self._store = AttributeStore(self.descriptor, attributes)
        self._lifecycle = lifecycle if lifecycle is not None else Lifecycle()
        self._errors = {}


R = typing.TypeVar("R", bound=Resource)


def format_query_value(value: typing.Any) -> typing.Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, (datetime.datetime, datetime.date)):
        return value.strftime("%Y-%m-%d")
    return value


def build_query(**params: typing.Any) -> typing.Dict[str, typing.Any]:
    """
    Builds query string parameters, leaving out the ones that are :py:const:`None`
    or render as an empty string.
    """
    return {
        k: format_query_value(v)
        for k, v in params.items()
        if v is not None and str(v) != ""
    }


def quote_identifier(value: typing.Any) -> str:
    return urllib.parse.quote(str(value), safe="")


class ResourceClient(typing.Generic[R]):
    """
    Issues the requests of a resource kind, and maps their responses back onto
    resource instances. Every operation performs at most one transport call.

    :param Transport transport: the transport requests are sent through.
    :param Codec codec: the codec used for request and response bodies.
    """

    resource_class: typing.ClassVar[typing.Type[Resource]]
    auth: typing.ClassVar[AuthType] = AuthType.APPLICATION
    """
    The credential requests are made under unless an operation says otherwise.
    """

    transport: Transport
    codec: Codec
    translator: ErrorTranslator
    payload_builder: PayloadBuilder

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self.resource_class.descriptor

    def new(self, **attributes: typing.Any) -> R:
        """
        Instantiates a transient resource with the supplied attributes.
        Undeclared attributes are ignored.
        """
        return typing.cast(R, self.resource_class(self, attributes))

    def _request(
        self,
        method: str,
        path: str,
        query: typing.Optional[Query] = None,
        body: typing.Optional[Payload] = None,
        auth: typing.Optional[AuthType] = None,
    ) -> Response:
        encoded = self.codec.encode(body) if body is not None else None
        return self.transport.request(
            method,
            path,
            query=query,
            body=encoded,
            auth=auth if auth is not None else self.auth,
        )

    def _decode(self, response: Response) -> typing.Any:
        try:
            return self.codec.decode(response.body)
        except ValueError:
            raise self.translator.unexpected(response)

    def _decode_attributes(self, response: Response) -> typing.Mapping[str, typing.Any]:
        values = self._decode(response)
        if not isinstance(values, collections.abc.Mapping):
            raise self.translator.unexpected(response)
        return values

    def _hydrate(self, response: Response, values: typing.Any) -> R:
        if (
            not isinstance(values, collections.abc.Mapping)
            or values.get(self.descriptor.identifier) is None
        ):
            raise self.translator.unexpected(response)
        return typing.cast(R, self.resource_class(self, values, Lifecycle.persisted()))

    def _fetch_one(
        self,
        path: str,
        criteria: typing.Mapping[str, typing.Any],
        query: typing.Optional[Query] = None,
        auth: typing.Optional[AuthType] = None,
    ) -> R:
        response = self._request("GET", path, query=query, auth=auth)
        if response.status_code == HTTP_NOT_FOUND:
            raise ResourceNotFoundError(self.descriptor.name, criteria)
        self.translator.expect(response, HTTP_OK)
        return self._hydrate(response, self._decode_attributes(response))

    def _fetch_value(
        self,
        path: str,
        query: typing.Optional[Query] = None,
        auth: typing.Optional[AuthType] = None,
    ) -> typing.Tuple[typing.Any, Response]:
        response = self._request("GET", path, query=query, auth=auth)
        if response.status_code == HTTP_NOT_FOUND:
            raise ResourceNotFoundError(self.descriptor.name, query or {})
        elif response.status_code == HTTP_BAD_REQUEST:
            raise InvalidArgumentError(self.translator.translate(response, (HTTP_BAD_REQUEST,)))
        self.translator.expect(response, HTTP_OK)
        return self._decode(response), response

    def _fetch_collection(
        self,
        path: str,
        query: typing.Optional[Query] = None,
        auth: typing.Optional[AuthType] = None,
    ) -> typing.Tuple[typing.List[R], Response]:
        values, response = self._fetch_value(path, query=query, auth=auth)
        if not isinstance(values, collections.abc.Sequence) or isinstance(values, str):
            raise self.translator.unexpected(response)
        return [self._hydrate(response, v) for v in values], response

    def _mutate(
        self,
        instance: Resource,
        method: str,
        path: str,
        body: typing.Optional[Payload],
        auth: typing.Optional[AuthType],
        success: typing.Collection[int],
        faults: typing.Collection[int],
        transition: typing.Optional[typing.Callable[[], None]] = None,
    ) -> bool:
        """
        Performs a request that changes the remote resource. On success the
        attributes are refreshed from the response body and ``transition`` is
        applied; on a client fault only the errors are replaced. A response that
        cannot be applied raises before the instance is touched.
        """
        response = self._request(method, path, body=body, auth=auth)
        if response.status_code not in success:
            return instance._failed(self.translator.translate(response, faults))

        values = self._decode(response)
        if values is not None and not isinstance(values, collections.abc.Mapping):
            raise self.translator.unexpected(response)
        if transition is not None:
            identifier_key = self.descriptor.identifier
            if values is not None and identifier_key in values:
                identifier = values[identifier_key]
            else:
                identifier = instance.identifier
            if identifier is None:
                raise self.translator.unexpected(response)
        instance._succeeded(values)
        if transition is not None:
            transition()
        logger.info("%s %s %r succeeded", method, self.descriptor.name, instance.identifier)
        return True

    def __init__(self, transport: Transport, codec: typing.Optional[Codec] = None):
        self.transport = transport
        self.codec = codec if codec is not None else JSONCodec()
        self.translator = ErrorTranslator(self.codec)
        self.payload_builder = PayloadBuilder()
