import pytest

from config.settings import get_settings
from models.character import CharacterRecord


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def people():
    return (
        CharacterRecord(name="Luke Skywalker", birth_year="19BBY"),
        CharacterRecord(name="C-3PO", birth_year="112BBY"),
    )
