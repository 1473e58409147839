import importlib

import config
import main
from main import LibraryManager


def test_default_settings():
    settings = config.Settings()
    assert settings.app_name
    assert settings.output_mode in ("plain", "json", "rich")
    assert isinstance(settings.seed_demo_data, bool)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LIBRARY_SEED_DEMO_DATA", "no")
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("DEBUG", "1")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.settings.seed_demo_data is False
        assert reloaded.settings.log_level == "INFO"
        assert reloaded.settings.debug is True
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_library_manager_follows_seed_setting(monkeypatch):
    monkeypatch.setattr(main.settings, "seed_demo_data", False)
    assert LibraryManager.get_instance().list_available_books() == []

    LibraryManager.reset()
    monkeypatch.setattr(main.settings, "seed_demo_data", True)
    assert len(LibraryManager.get_instance().list_available_books()) == 3


def test_library_manager_is_singleton():
    first = LibraryManager.get_instance(seed=False)
    assert LibraryManager.get_instance(seed=True) is first
    assert first.list_available_books() == []
