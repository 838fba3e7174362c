import collections.abc
import dataclasses
import typing

from .exceptions import InvalidDeclarationError
from .models import AttributeRole, ResourceAttributeDescriptor, ResourceDescriptor
from .utils import UNSPECIFIED, UnspecifiedType


@dataclasses.dataclass
class Attr:
    name: typing.Union[UnspecifiedType, str] = UNSPECIFIED
    role: AttributeRole = AttributeRole.READ_ONLY


def ReadOnly(name: typing.Union[UnspecifiedType, str] = UNSPECIFIED) -> Attr:
    return Attr(name=name, role=AttributeRole.READ_ONLY)


def Creatable(name: typing.Union[UnspecifiedType, str] = UNSPECIFIED) -> Attr:
    return Attr(name=name, role=AttributeRole.CREATABLE)


def Updatable(name: typing.Union[UnspecifiedType, str] = UNSPECIFIED) -> Attr:
    return Attr(name=name, role=AttributeRole.UPDATABLE)


def Writable(name: typing.Union[UnspecifiedType, str] = UNSPECIFIED) -> Attr:
    return Attr(name=name, role=AttributeRole.WRITABLE)


@dataclasses.dataclass
class Meta:
    name: str
    attributes: typing.Sequence[Attr] = ()
    identifier: str = "uuid"
    skip_blank_on_create: bool = False


def handle_meta(meta: typing.Type) -> Meta:
    """
    Reads the ``Meta`` inner class of a resource kind. ``attributes`` is either a
    sequence of named :py:class:`Attr` or a mapping of names to :py:class:`Attr`.
    """
    attrs = {k: v for k, v in vars(meta).items() if not k.startswith("__")}
    if "name" not in attrs:
        raise InvalidDeclarationError(meta.__qualname__, [], "Meta lacks a resource name")
    name = typing.cast(str, attrs["name"])
    attributes: typing.Sequence[Attr] = ()

    if "attributes" in attrs:
        _attributes = typing.cast(
            typing.Union[
                typing.Sequence[Attr],
                typing.Mapping[str, Attr],
            ],
            attrs["attributes"],
        )
        if isinstance(_attributes, collections.abc.Mapping):
            attributes = [
                dataclasses.replace(attr, name=attr_name)
                for attr_name, attr in _attributes.items()
            ]
        else:
            assert isinstance(_attributes, collections.abc.Sequence)
            attributes = _attributes

    unnamed = [repr(attr) for attr in attributes if attr.name is UNSPECIFIED]
    if unnamed:
        raise InvalidDeclarationError(name, unnamed, "must be given a name")

    return Meta(
        name=name,
        attributes=attributes,
        identifier=attrs.get("identifier", "uuid"),
        skip_blank_on_create=attrs.get("skip_blank_on_create", False),
    )


def build_descriptor(meta: Meta) -> ResourceDescriptor:
    return ResourceDescriptor(
        name=meta.name,
        attributes=(
            ResourceAttributeDescriptor(typing.cast(str, attr.name), attr.role)
            for attr in meta.attributes
        ),
        identifier=meta.identifier,
        skip_blank_on_create=meta.skip_blank_on_create,
    )
