"""Shared fixtures."""

import pytest

from mythologic.config import get_settings
from mythologic.models import Deity, Hero
from mythologic.ontology import MythOntology


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from MYTHOLOGIC_* variables and the settings cache."""
    import os

    for key in list(os.environ):
        if key.startswith("MYTHOLOGIC_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def zeus():
    return Deity(name="Zeus", description="King of the gods", culture="Greek")


@pytest.fixture
def hera():
    return Deity(name="Hera", description="Queen of the gods", culture="Greek")


@pytest.fixture
def odin():
    return Deity(name="Odin", description="Allfather", culture="Norse")


@pytest.fixture
def heracles():
    return Hero(name="Heracles", culture="Greek")


@pytest.fixture
def ontology(zeus, hera, odin, heracles):
    """A small store with three Greek entities and one Norse deity."""
    store = MythOntology()
    for entity in (zeus, hera, odin, heracles):
        store.add_entity(entity)
    return store
