import enum
import logging

from .exceptions import InvalidStateTransitionError

logger = logging.getLogger(__name__)


class PersistenceState(enum.Enum):
    TRANSIENT = "transient"
    """The instance exists only locally."""
    PERSISTED = "persisted"
    """The instance is known to exist on the remote service."""
    DESTROYED = "destroyed"
    """The instance was deleted on the remote service. This state is final."""


class Lifecycle:
    """
    Tracks the persistence state of a resource instance. Transitions are only
    requested after the remote service confirmed the operation, so a failed call
    leaves the state exactly as it was.
    """

    state: PersistenceState

    @classmethod
    def persisted(cls) -> "Lifecycle":
        """
        Returns a lifecycle already in the ``PERSISTED`` state, for instances
        hydrated from a response of the remote service.
        """
        return cls(PersistenceState.PERSISTED)

    def _transition(self, requested: PersistenceState) -> None:
        logger.info("%s -> %s", self.state.value, requested.value)
        self.state = requested

    def mark_persisted(self) -> None:
        if self.state is PersistenceState.DESTROYED:
            raise InvalidStateTransitionError(self.state.value, PersistenceState.PERSISTED.value)
        self._transition(PersistenceState.PERSISTED)

    def mark_destroyed(self) -> None:
        if self.state is not PersistenceState.PERSISTED:
            raise InvalidStateTransitionError(self.state.value, PersistenceState.DESTROYED.value)
        self._transition(PersistenceState.DESTROYED)

    @property
    def is_persisted(self) -> bool:
        return self.state is PersistenceState.PERSISTED

    @property
    def is_destroyed(self) -> bool:
        return self.state is PersistenceState.DESTROYED

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state})"

    def __init__(self, state: PersistenceState = PersistenceState.TRANSIENT):
        self.state = state
