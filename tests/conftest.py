import pytest

from aksprime.config import clear_config
from aksprime.runtime import reset_cancel


@pytest.fixture(autouse=True)
def clean_state():
    clear_config()
    reset_cancel()
    yield
    clear_config()
    reset_cancel()
