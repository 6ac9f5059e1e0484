import pytest

from wow_guide import config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    for var in (
        "WOW_GUIDE_API_KEY",
        "WOW_GUIDE_MODEL",
        "WOW_GUIDE_PORT",
        "PORT",
        "WOW_GUIDE_BLIZZARD_CLIENT_ID",
        "WOW_GUIDE_BLIZZARD_CLIENT_SECRET",
    ):
        monkeypatch.delenv(var, raising=False)
    config._settings = None
    yield
    config._settings = None
