"""
An Identity is a person registered on PassaporteWeb. Signing up for
PassaporteWeb creates one.
"""
import logging

from .declarative import Creatable, ReadOnly, Writable, build_descriptor, handle_meta
from .faults import precondition_failed
from .resource import (
    HTTP_BAD_REQUEST,
    HTTP_CONFLICT,
    HTTP_CREATED,
    HTTP_OK,
    Resource,
    ResourceClient,
    quote_identifier,
)

logger = logging.getLogger(__name__)


class Identity(Resource):
    """
    Example::

        identity = api.identities.new(
            email="fulano@detal.com.br",
            password="123456",
            password2="123456",
            must_change_password=False,
            tos=True,
            first_name="Fulano",
            last_name="de Tal",
            cpf="342.766.570-40",
            birth_date="1983-04-19",
        )
        if not identity.save():
            print(identity.errors)
    """

    class Meta:
        name = "identity"
        identifier = "uuid"
        attributes = {
            "accounts": ReadOnly(),
            "birth_date": Writable(),
            "country": Writable(),
            "cpf": Writable(),
            "email": Creatable(),
            "first_name": Writable(),
            "gender": Writable(),
            "is_active": ReadOnly(),
            "language": Writable(),
            "last_name": Writable(),
            "nickname": Writable(),
            "notifications": ReadOnly(),
            "send_myfreecomm_news": Writable(),
            "send_partner_news": Writable(),
            "services": ReadOnly(),
            "timezone": Writable(),
            "update_info_url": ReadOnly(),
            "uuid": ReadOnly(),
            "password": Creatable(),
            "password2": Creatable(),
            "must_change_password": Creatable(),
            "inhibit_activation_message": ReadOnly(),
            "tos": Creatable(),
        }

    descriptor = build_descriptor(handle_meta(Meta))

    def save(self) -> bool:
        """
        Creates the identity if it is new, or updates it otherwise. Returns
        :py:const:`True` on success; on failure :py:attr:`errors` holds the reason.

        Example::

            identity = api.identities.find_by_email("foo@bar.com")
            identity.cpf = "12"
            identity.save()  # => False
            identity.errors  # => {"cpf": ["Certifique-se de que o valor tenha no mínimo 11 caracteres (ele possui 2)."]}
        """
        return self._client.save(self)


class IdentityClient(ResourceClient[Identity]):
    resource_class = Identity

    create_path = "/accounts/api/create/"
    collection_path = "/accounts/api/identities/"
    member_path = "/accounts/api/identities/{uuid}/"

    def find(self, uuid: str) -> Identity:
        """
        Finds an identity by its UUID.

        :raises ResourceNotFoundError: when no identity has the UUID.
        """
        return self._fetch_one(
            self.member_path.format(uuid=quote_identifier(uuid)),
            criteria={"uuid": uuid},
        )

    def find_by_email(self, email: str) -> Identity:
        """
        Finds an identity by its email address, which is unique on PassaporteWeb.

        :raises ResourceNotFoundError: when no identity has the email address.
        """
        return self._fetch_one(
            self.collection_path,
            criteria={"email": email},
            query={"email": email},
        )

    def save(self, identity: Identity) -> bool:
        if identity.is_destroyed:
            return identity._failed(precondition_failed("identity already destroyed"))
        if identity.is_persisted:
            return self._mutate(
                identity,
                "PUT",
                self.member_path.format(uuid=quote_identifier(identity.identifier)),
                body=self.payload_builder.build_update_body(identity._store, self.descriptor),
                auth=self.auth,
                success=(HTTP_OK,),
                faults=(HTTP_BAD_REQUEST, HTTP_CONFLICT),
                transition=identity._lifecycle.mark_persisted,
            )
        return self._mutate(
            identity,
            "POST",
            self.create_path,
            body=self.payload_builder.build_create_body(identity._store, self.descriptor),
            auth=self.auth,
            success=(HTTP_OK, HTTP_CREATED),
            faults=(HTTP_BAD_REQUEST, HTTP_CONFLICT),
            transition=identity._lifecycle.mark_persisted,
        )
