import pytest

from ..declarative import Creatable, ReadOnly, build_descriptor, handle_meta


@pytest.fixture
def descr():
    class Meta:
        name = "foos"
        attributes = {"uuid": ReadOnly(), "a": Creatable(), "b": Creatable()}

    return build_descriptor(handle_meta(Meta))


@pytest.fixture
def target():
    from ..store import AttributeStore

    return AttributeStore


def test_set_all_drops_unknown_keys(target, descr):
    store = target(descr)
    store.set_all({"uuid": "1", "a": "x", "unknown": "y"})
    assert store.get_all() == {"uuid": "1", "a": "x", "b": None}


def test_get_all_includes_every_declared_name(target, descr):
    store = target(descr)
    assert list(store.get_all().items()) == [("uuid", None), ("a", None), ("b", None)]


def test_set_all_overwrites(target, descr):
    store = target(descr, {"a": "x", "b": "y"})
    store.set_all({"a": "z"})
    assert store.get("a") == "z"
    assert store.get("b") == "y"


def test_get_and_set(target, descr):
    store = target(descr)
    store.set("uuid", "1")
    assert store.get("uuid") == "1"
    assert store.get("b") is None
    with pytest.raises(AttributeError):
        store.get("unknown")
    with pytest.raises(AttributeError):
        store.set("unknown", 1)
