# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - sample_contacts  → a few valid contacts
# - record_store     → empty RecordStore (capacity 1000)
# - codec            → ModExpCodec with the default key set
# - serializer       → RecordSerializer with the default buffer limit
# - persistence      → PersistenceService built from the two above
# - app_config       → AppConfig pointing the data file into tmp_path
#
# NOTES:
# ------
# - Use tmp_path for temporary files
# - get_config() is a singleton; tests that touch it reset it
# ==============================================

import pytest

from contactbook import config as config_module
from contactbook.codec.mod_exp import ModExpCodec
from contactbook.config import AppConfig, PersistenceConfig
from contactbook.persistence.contact_file import PersistenceService
from contactbook.records.contact import Contact
from contactbook.serialization.serializer import RecordSerializer
from contactbook.storage.record_store import RecordStore


@pytest.fixture
def sample_contacts():
    """Return a list of valid contacts."""
    return [
        Contact(name="Ann", phone="+44123456", email="ann@example.com", date="2024-01-15"),
        Contact(name="Anna", phone="555-0101", email="", date=""),
        Contact(name="Bob", phone="+60312345", email="bob@example.org", date="01/02/2023"),
    ]


@pytest.fixture
def record_store():
    """Provide an empty store with the default capacity."""
    return RecordStore()


@pytest.fixture
def codec():
    return ModExpCodec()


@pytest.fixture
def serializer():
    return RecordSerializer()


@pytest.fixture
def persistence(codec, serializer):
    return PersistenceService(codec, serializer)


@pytest.fixture
def app_config(tmp_path):
    """Provide a config whose data file lives in a temporary directory."""
    return AppConfig(
        persistence=PersistenceConfig(data_file=str(tmp_path / "contacts.enc"))
    )


@pytest.fixture
def reset_config(monkeypatch):
    """Clear the get_config() singleton for the duration of a test."""
    monkeypatch.setattr(config_module, "_config_instance", None)
    yield
