import typing
from collections import OrderedDict

from .models import ResourceDescriptor
from .store import AttributeStore

Payload = typing.Dict[str, typing.Any]


class PayloadBuilder:
    """
    Derives request bodies from the current values of an :py:class:`AttributeStore`.

    Only attributes holding a value are sent, so that fields the caller never
    touched are not cleared on the remote side.
    """

    def _select(
        self,
        store: AttributeStore,
        names: typing.Collection[str],
        skip_blank: bool,
    ) -> Payload:
        body: Payload = OrderedDict()
        for name, value in store.get_all().items():
            if name not in names or value is None:
                continue
            if skip_blank and str(value) == "":
                continue
            body[name] = value
        return body

    def build_create_body(self, store: AttributeStore, descr: ResourceDescriptor) -> Payload:
        return self._select(store, descr.creatable_names, descr.skip_blank_on_create)

    def build_update_body(self, store: AttributeStore, descr: ResourceDescriptor) -> Payload:
        return self._select(store, descr.updatable_names, False)
