import pytest

from enginetools.world import settings


@pytest.fixture
def restore_settings():
    previous = settings.SETTINGS
    yield
    settings.apply_settings(previous)
