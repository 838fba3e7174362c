import dataclasses
import datetime
import logging
import typing

from .config import AuthType
from .declarative import Creatable, ReadOnly, build_descriptor, handle_meta
from .faults import precondition_failed
from .pagination import DEFAULT_LIMIT, PageReferences, parse_link_header
from .resource import (
    HTTP_BAD_REQUEST,
    HTTP_CREATED,
    HTTP_FORBIDDEN,
    HTTP_NO_CONTENT,
    HTTP_OK,
    Resource,
    ResourceClient,
    build_query,
    quote_identifier,
)

logger = logging.getLogger(__name__)

Since = typing.Union[datetime.date, datetime.datetime, str, None]


class Notification(Resource):
    """
    A notification delivered to an identity.

    Example::

        notification = api.notifications.new(
            destination="ac3540c7-5453-424d-bdfd-8ef2d9ff78df",
            body="Feliz ano novo!",
            target_url="https://app.passaporteweb.com.br",
            scheduled_to="2012-01-01 00:00:00",
        )
        notification.save(AuthType.APPLICATION)
    """

    class Meta:
        name = "notification"
        identifier = "uuid"
        skip_blank_on_create = True
        attributes = {
            "body": Creatable(),
            "target_url": Creatable(),
            "uuid": ReadOnly(),
            "absolute_url": ReadOnly(),
            "scheduled_to": Creatable(),
            "sender_data": ReadOnly(),
            "read_at": ReadOnly(),
            "notification_type": ReadOnly(),
            "destination": Creatable(),
        }

    descriptor = build_descriptor(handle_meta(Meta))

    def save(self, auth: AuthType = AuthType.USER) -> bool:
        """
        Creates the notification. ``body`` and ``destination`` are required by the
        remote service. With :py:attr:`AuthType.USER` the notification is sent by the
        authenticated identity, with :py:attr:`AuthType.APPLICATION` by the application.
        """
        return self._client.save(self, auth)

    def read(self) -> bool:
        """
        Marks the notification as read.
        """
        return self._client.read(self)

    def destroy(self) -> bool:
        """
        Deletes the notification. Only notifications scheduled for the future can be deleted.
        """
        return self._client.destroy(self)


@dataclasses.dataclass
class NotificationPage:
    notifications: typing.List[Notification]
    meta: PageReferences

    def __iter__(self):
        return iter(self.notifications)

    def __len__(self):
        return len(self.notifications)


class NotificationClient(ResourceClient[Notification]):
    resource_class = Notification
    auth = AuthType.USER

    collection_path = "/notifications/api/"
    count_path = "/notifications/api/count/"
    member_path = "/notifications/api/{uuid}/"

    def find(self, uuid: str) -> Notification:
        """
        Finds a notification by its UUID.

        :raises ResourceNotFoundError: when no notification has the UUID.
        """
        return self._fetch_one(
            self.member_path.format(uuid=quote_identifier(uuid)),
            criteria={"uuid": uuid},
        )

    def find_all(
        self,
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
        since: Since = None,
        show_read: bool = False,
        ordering: str = "oldest-first",
    ) -> NotificationPage:
        """
        Finds the notifications destined to the authenticated identity, one page at a time.

        Example::

            data = api.notifications.find_all()
            data.notifications  # => [notification1, notification2, ...]
            data.meta           # => PageReferences(limit=20, next=2, prev=None, first=1, last=123)

        :raises ResourceNotFoundError: when the requested page does not exist.
        :raises InvalidArgumentError: when the remote service rejects the parameters.
        """
        notifications, response = self._fetch_collection(
            self.collection_path,
            query=build_query(
                page=page, limit=limit, since=since, show_read=show_read, ordering=ordering
            ),
        )
        return NotificationPage(
            notifications=notifications,
            meta=parse_link_header(response.headers.get("Link"), limit),
        )

    def count(self, show_read: bool = False, since: Since = None) -> int:
        """
        Returns the number of notifications available to the authenticated identity.

        :raises InvalidArgumentError: when the remote service rejects the parameters.
        """
        data, response = self._fetch_value(
            self.count_path, query=build_query(since=since, show_read=show_read)
        )
        try:
            return int(data["count"])
        except (KeyError, TypeError, ValueError):
            raise self.translator.unexpected(response)

    def save(self, notification: Notification, auth: typing.Optional[AuthType] = None) -> bool:
        if notification.is_destroyed:
            return notification._failed(precondition_failed("notification already destroyed"))
        if notification.is_persisted:
            return notification._failed(
                precondition_failed(
                    "notification already persisted, call read() to mark it as read"
                )
            )
        return self._mutate(
            notification,
            "POST",
            self.collection_path,
            body=self.payload_builder.build_create_body(notification._store, self.descriptor),
            auth=auth,
            success=(HTTP_CREATED,),
            faults=(HTTP_BAD_REQUEST,),
            transition=notification._lifecycle.mark_persisted,
        )

    def read(self, notification: Notification) -> bool:
        if not notification.is_persisted:
            return notification._failed(precondition_failed("notification not persisted"))
        if notification.read_at is not None:
            return notification._failed(precondition_failed("notification already read"))
        succeeded = self._mutate(
            notification,
            "PUT",
            self.member_path.format(uuid=quote_identifier(notification.identifier)),
            body={},
            auth=AuthType.USER,
            success=(HTTP_OK,),
            faults=(HTTP_BAD_REQUEST,),
            transition=notification._lifecycle.mark_persisted,
        )
        if succeeded and notification.read_at is None:
            # the response did not carry the read timestamp
            notification._store.set(
                "read_at", datetime.datetime.now(datetime.timezone.utc).isoformat()
            )
        return succeeded

    def destroy(self, notification: Notification) -> bool:
        if not notification.is_persisted:
            return notification._failed(precondition_failed("notification not persisted yet"))
        return self._mutate(
            notification,
            "DELETE",
            self.member_path.format(uuid=quote_identifier(notification.identifier)),
            body=None,
            auth=AuthType.APPLICATION,
            success=(HTTP_NO_CONTENT,),
            faults=(HTTP_FORBIDDEN,),
            transition=notification._lifecycle.mark_destroyed,
        )
