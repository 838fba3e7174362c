import enum
import typing
from collections import OrderedDict

from .exceptions import InvalidDeclarationError


class AttributeRole(enum.IntFlag):
    NONE = 0
    READ_ONLY = 1
    CREATABLE = 2
    UPDATABLE = 4
    WRITABLE = CREATABLE | UPDATABLE


class ResourceAttributeDescriptor:
    """
    A :py:class:`ResourceAttributeDescriptor` describes a single attribute of a remote
    resource, and the role it plays in requests sent to the remote service.

    :param str name: the attribute name as it appears in request and response bodies.
    :param AttributeRole role: the role of the attribute.
    """

    parent: typing.Optional["ResourceDescriptor"] = None
    name: str
    role: AttributeRole

    @property
    def read_only(self) -> bool:
        return bool(self.role & AttributeRole.READ_ONLY)

    @property
    def creatable(self) -> bool:
        return bool(self.role & AttributeRole.CREATABLE)

    @property
    def updatable(self) -> bool:
        return bool(self.role & AttributeRole.UPDATABLE)

    @property
    def writable(self) -> bool:
        return bool(self.role & AttributeRole.WRITABLE)

    def bind(self, parent: "ResourceDescriptor") -> "ResourceAttributeDescriptor":
        self.parent = parent
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.role!r})"

    def __init__(self, name: str, role: AttributeRole = AttributeRole.READ_ONLY):
        self.name = name
        self.role = role


class ResourceDescriptor:
    """
    A :py:class:`ResourceDescriptor` holds the static schema of a resource kind.

    :param str name: The name of the resource kind.
    :param Iterable[ResourceAttributeDescriptor] attributes: The descriptors for the attributes the resource holds.
    :param str identifier: The name of the attribute that identifies a resource on the remote service.
    :param bool skip_blank_on_create: Leave empty strings out of creation payloads in addition to null values.
    """

    name: str
    """
    The name of the resource kind.
    """
    identifier: str
    """
    The name of the identifier attribute.
    """
    skip_blank_on_create: bool
    _attributes: typing.MutableMapping[str, ResourceAttributeDescriptor]

    @property
    def attributes(self) -> typing.Mapping[str, ResourceAttributeDescriptor]:
        """
        The mapping of attribute names to :py:class:`ResourceAttributeDescriptor`s.
        """
        return self._attributes

    @property
    def names(self) -> typing.Sequence[str]:
        return tuple(self._attributes.keys())

    def names_with(self, role: AttributeRole) -> typing.Sequence[str]:
        return tuple(name for name, attr in self._attributes.items() if attr.role & role)

    @property
    def creatable_names(self) -> typing.Sequence[str]:
        return self.names_with(AttributeRole.CREATABLE)

    @property
    def updatable_names(self) -> typing.Sequence[str]:
        return self.names_with(AttributeRole.UPDATABLE)

    @property
    def writable_names(self) -> typing.Sequence[str]:
        return self.names_with(AttributeRole.WRITABLE)

    def add_attribute(self, attr: ResourceAttributeDescriptor) -> None:
        """
        Add an attribute to the resource descriptor.

        :param ResourceAttributeDescriptor attr: the attribute to add.
        """
        if attr.read_only and attr.writable:
            raise InvalidDeclarationError(
                self.name, [attr.name], "cannot be both read-only and writable"
            )
        if attr.name in self._attributes:
            raise InvalidDeclarationError(self.name, [attr.name], "is declared more than once")
        self._attributes[attr.name] = attr.bind(self)

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __init__(
        self,
        name: str,
        attributes: typing.Iterable[ResourceAttributeDescriptor] = (),
        identifier: str = "uuid",
        skip_blank_on_create: bool = False,
    ) -> None:
        self.name = name
        self.identifier = identifier
        self.skip_blank_on_create = skip_blank_on_create
        self._attributes = OrderedDict()
        for attr in attributes:
            self.add_attribute(attr)
        if identifier not in self._attributes:
            raise InvalidDeclarationError(name, [identifier], "is not declared as an attribute")
