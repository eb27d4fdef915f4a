import logging

import pytest

from view_constants.store import ConstantMapping, ConstantStore, ConstantStoreError


def test_new_store_is_empty():
    store = ConstantStore()

    assert len(store) == 0
    assert not store.initialized


def test_register_copies_constants(store):
    constants = {"RED": "r"}
    store.register("Colors", constants)
    constants["GREEN"] = "g"

    assert store["Colors"] == {"RED": "r"}


def test_register_overwrites_with_warning(store, caplog):
    store.register("Colors", {"RED": "r"})
    store.register("Colors", {"BLUE": "b"})

    assert store["Colors"] == {"BLUE": "b"}
    assert [r.levelno for r in caplog.records] == [logging.WARNING]


def test_frozen_store_refuses_registration(store):
    store.register("Colors", {"RED": "r"})
    store.freeze()

    assert store.initialized
    with pytest.raises(ConstantStoreError):
        store.register("Sizes", {"SMALL": 1})
    assert list(store) == ["Colors"]


def test_as_dict_snapshot(store):
    store.register("Colors", {"RED": "r"})

    snapshot = store.as_dict()
    snapshot["Sizes"] = {}

    assert "Sizes" not in store
    assert snapshot["Colors"]["RED"] == "r"


def test_registered_constants_read_as_attributes(store):
    store.register("Shadowing", {"keys": "the-keys", "FOO": "f"})

    constants = store["Shadowing"]
    assert isinstance(constants, ConstantMapping)
    assert constants.FOO == "f"
    assert constants["keys"] == "the-keys"
    with pytest.raises(AttributeError):
        constants.MISSING
