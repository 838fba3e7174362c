import logging
import typing
from collections import OrderedDict

from .models import ResourceDescriptor

logger = logging.getLogger(__name__)


class AttributeStore:
    """
    Holds the current attribute values of a single resource instance. Only the
    names declared by the resource descriptor are ever stored; this class does
    no validation of its own.
    """

    descr: ResourceDescriptor
    _values: typing.Dict[str, typing.Any]

    def get(self, name: str) -> typing.Any:
        if name not in self.descr:
            raise AttributeError(f'"{self.descr.name}" has no attribute {name!r}')
        return self._values.get(name)

    def set(self, name: str, value: typing.Any) -> None:
        if name not in self.descr:
            raise AttributeError(f'"{self.descr.name}" has no attribute {name!r}')
        self._values[name] = value

    def set_all(self, values: typing.Mapping[str, typing.Any]) -> None:
        """
        Copies every declared attribute found in ``values``. Unknown keys are dropped.

        :param Mapping[str, Any] values: attribute values keyed by name.
        """
        dropped = []
        for name, value in values.items():
            if name in self.descr:
                self._values[name] = value
            else:
                dropped.append(name)
        if dropped:
            logger.debug("%s: dropped undeclared attributes %r", self.descr.name, dropped)

    def get_all(self) -> typing.Dict[str, typing.Any]:
        return OrderedDict((name, self._values.get(name)) for name in self.descr.names)

    def __init__(
        self,
        descr: ResourceDescriptor,
        values: typing.Optional[typing.Mapping[str, typing.Any]] = None,
    ):
        self.descr = descr
        self._values = {}
        if values is not None:
            self.set_all(values)
