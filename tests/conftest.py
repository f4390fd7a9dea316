"""Shared test configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep APEXMD_* settings from the developer's shell or .env out of the tests."""
    for key in ("APEXMD_MODE", "APEXMD_CAPTION_POSITION", "APEXMD_PRETTY", "APEXMD_STANDALONE", "APEXMD_ARIA", "APEXMD_ADVANCED_TABLES"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("apexmd.config.load_dotenv", lambda *args, **kwargs: False)
