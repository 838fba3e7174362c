import typing

from .codec import Codec, JSONCodec
from .config import Configuration
from .identity import IdentityClient
from .notification import NotificationClient
from .transport import RequestsTransport, Transport


class PassaporteWeb:
    """
    The entry point to the resource clients.

    Example::

        api = PassaporteWeb(Configuration.from_environ())
        identity = api.identities.find("ac3540c7-5453-424d-bdfd-8ef2d9ff78df")
        page = api.notifications.find_all(limit=10)

    :param Optional[Configuration] config: defaults to :py:meth:`Configuration.from_environ`.
    :param Optional[Transport] transport: defaults to a :py:class:`RequestsTransport` built from ``config``.
    :param Optional[Codec] codec: defaults to :py:class:`JSONCodec`.
    """

    config: Configuration
    transport: Transport
    codec: Codec
    identities: IdentityClient
    notifications: NotificationClient

    def __init__(
        self,
        config: typing.Optional[Configuration] = None,
        transport: typing.Optional[Transport] = None,
        codec: typing.Optional[Codec] = None,
    ):
        self.config = config if config is not None else Configuration.from_environ()
        self.transport = transport if transport is not None else RequestsTransport(self.config)
        self.codec = codec if codec is not None else JSONCodec()
        self.identities = IdentityClient(self.transport, self.codec)
        self.notifications = NotificationClient(self.transport, self.codec)
