from .api import PassaporteWeb  # noqa
from .config import AuthType, Configuration  # noqa
from .exceptions import (  # noqa
    ConfigurationError,
    ImmutableAttributeError,
    InvalidArgumentError,
    InvalidStateTransitionError,
    PassaporteWebError,
    ResourceNotFoundError,
    TransportError,
    UnexpectedResponseError,
)
from .identity import Identity, IdentityClient  # noqa
from .notification import Notification, NotificationClient, NotificationPage  # noqa
from .pagination import PageReferences, parse_link_header  # noqa
from .state import PersistenceState  # noqa
from .transport import RequestsTransport, Response, Transport  # noqa
