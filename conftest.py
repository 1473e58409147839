import pytest

from library import Library
from main import LibraryManager
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture
def lib():
    # Fresh, empty library for each test
    return Library()


@pytest.fixture
def seeded_lib(lib):
    lib.seed_demo_data()
    return lib


@pytest.fixture(autouse=True)
def _isolate_cli_state(monkeypatch):
    # Every test starts with plain output and no shared Library singleton
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    LibraryManager.reset()
    yield
    LibraryManager.reset()
