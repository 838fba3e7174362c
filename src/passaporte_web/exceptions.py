import abc
import typing

from .utils import english_enumerate

ErrorMap = typing.Dict[str, typing.Any]


class PassaporteWebError(Exception, metaclass=abc.ABCMeta):
    @property
    @abc.abstractmethod
    def message(self) -> str:
        ...  # pragma: nocover

    def __str__(self):
        return self.message


class InvalidDeclarationError(PassaporteWebError):
    resource_name: str
    names: typing.Sequence[str]
    detail: str

    @property
    def message(self):
        return f'attribute {english_enumerate(self.names)} in "{self.resource_name}" {self.detail}'

    def __init__(self, resource_name: str, names: typing.Sequence[str], detail: str):
        self.resource_name = resource_name
        self.names = names
        self.detail = detail


class ImmutableAttributeError(PassaporteWebError, AttributeError):
    resource_name: str
    name: str

    @property
    def message(self):
        return f'attribute ({self.name}) in "{self.resource_name}" is read-only'

    def __init__(self, resource_name: str, name: str):
        self.resource_name = resource_name
        self.name = name


class InvalidStateTransitionError(PassaporteWebError):
    current: str
    requested: str

    @property
    def message(self):
        return f"cannot transition from {self.current} to {self.requested}"

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested


class ConfigurationError(PassaporteWebError):
    _message: str

    @property
    def message(self):
        return self._message

    def __init__(self, message: str):
        self._message = message


class ResourceNotFoundError(PassaporteWebError):
    """
    Raised when the remote service reports that no resource matches a lookup,
    or that the requested page of a collection does not exist.
    """

    resource_name: str
    criteria: typing.Mapping[str, typing.Any]

    @property
    def message(self):
        criteria = english_enumerate(f"{k}={v!r}" for k, v in self.criteria.items())
        return f'no "{self.resource_name}" found for {criteria}'

    def __init__(self, resource_name: str, criteria: typing.Mapping[str, typing.Any]):
        self.resource_name = resource_name
        self.criteria = criteria


class InvalidArgumentError(PassaporteWebError):
    """
    Raised when the remote service rejects the filter parameters of a
    collection or count request. ``errors`` holds the decoded fault document.
    """

    errors: ErrorMap

    @property
    def message(self):
        return f"invalid arguments: {self.errors!r}"

    def __init__(self, errors: ErrorMap):
        self.errors = errors


class UnexpectedResponseError(PassaporteWebError):
    """
    Raised for any status code an operation does not anticipate. This is a
    contract breach with the remote service and is never recovered from.
    """

    status_code: int
    body: bytes

    @property
    def message(self):
        return f"unexpected response: {self.status_code} - {self.body.decode('utf-8', 'replace')}"

    def __init__(self, status_code: int, body: bytes):
        self.status_code = status_code
        self.body = body


class TransportError(PassaporteWebError):
    method: str
    path: str

    @property
    def message(self):
        return f"{self.method} {self.path} failed ({self.__cause__!s})"

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
