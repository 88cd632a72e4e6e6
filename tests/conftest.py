import pytest

from snapmark.settings import reset_global_settings


@pytest.fixture(autouse=True)
def clean_global_settings():
    reset_global_settings()
    yield
    reset_global_settings()
