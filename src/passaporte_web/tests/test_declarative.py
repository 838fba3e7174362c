import pytest

from ..exceptions import InvalidDeclarationError
from ..models import AttributeRole


class TestHandleMeta:
    @pytest.fixture
    def target(self):
        from ..declarative import build_descriptor, handle_meta

        return lambda meta: build_descriptor(handle_meta(meta))

    def test_mapping(self, target):
        from ..declarative import Creatable, ReadOnly, Updatable, Writable

        class Meta:
            name = "foos"
            attributes = {
                "uuid": ReadOnly(),
                "a": Creatable(),
                "b": Updatable(),
                "c": Writable(),
            }

        descr = target(Meta)
        assert descr.name == "foos"
        assert descr.identifier == "uuid"
        assert descr.names == ("uuid", "a", "b", "c")
        assert descr.names_with(AttributeRole.READ_ONLY) == ("uuid",)
        assert descr.creatable_names == ("a", "c")
        assert descr.updatable_names == ("b", "c")
        assert descr.writable_names == ("a", "b", "c")
        assert descr.skip_blank_on_create is False
        assert descr.attributes["a"].parent is descr

    def test_sequence(self, target):
        from ..declarative import Attr

        class Meta:
            name = "foos"
            identifier = "id"
            skip_blank_on_create = True
            attributes = [
                Attr("id"),
                Attr("a", AttributeRole.CREATABLE),
            ]

        descr = target(Meta)
        assert descr.identifier == "id"
        assert descr.skip_blank_on_create is True
        assert descr.attributes["id"].read_only
        assert descr.attributes["a"].creatable
        assert not descr.attributes["a"].updatable

    def test_unnamed_attribute(self, target):
        from ..declarative import ReadOnly

        class Meta:
            name = "foos"
            attributes = [ReadOnly("uuid"), ReadOnly()]

        with pytest.raises(InvalidDeclarationError):
            target(Meta)

    def test_missing_name(self, target):
        class Meta:
            attributes = {}

        with pytest.raises(InvalidDeclarationError):
            target(Meta)

    def test_duplicate(self, target):
        from ..declarative import Creatable, ReadOnly

        class Meta:
            name = "foos"
            attributes = [ReadOnly("uuid"), Creatable("a"), ReadOnly("a")]

        with pytest.raises(InvalidDeclarationError) as e:
            target(Meta)
        assert "a" in e.value.names

    def test_read_only_and_writable(self, target):
        from ..declarative import Attr, ReadOnly

        class Meta:
            name = "foos"
            attributes = [
                ReadOnly("uuid"),
                Attr("a", AttributeRole.READ_ONLY | AttributeRole.CREATABLE),
            ]

        with pytest.raises(InvalidDeclarationError) as e:
            target(Meta)
        assert e.value.message == 'attribute a in "foos" cannot be both read-only and writable'

    def test_identifier_not_declared(self, target):
        from ..declarative import Creatable

        class Meta:
            name = "foos"
            attributes = {"a": Creatable()}

        with pytest.raises(InvalidDeclarationError):
            target(Meta)


def test_identity_roles():
    from ..identity import Identity

    descr = Identity.descriptor
    assert set(descr.updatable_names) == {
        "first_name",
        "last_name",
        "nickname",
        "cpf",
        "birth_date",
        "gender",
        "send_myfreecomm_news",
        "send_partner_news",
        "country",
        "language",
        "timezone",
    }
    assert set(descr.creatable_names) == set(descr.updatable_names) | {
        "email",
        "password",
        "password2",
        "must_change_password",
        "tos",
    }
    assert "uuid" in descr.names_with(AttributeRole.READ_ONLY)
    assert not set(descr.names_with(AttributeRole.READ_ONLY)) & set(descr.writable_names)


def test_notification_roles():
    from ..notification import Notification

    descr = Notification.descriptor
    assert set(descr.creatable_names) == {"body", "target_url", "scheduled_to", "destination"}
    assert descr.updatable_names == ()
    assert descr.skip_blank_on_create is True
