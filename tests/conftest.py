from pathlib import Path

import pytest

from component_bundler.config import get_settings


@pytest.fixture(autouse=True)
def test_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BUNDLER_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.delenv("BUNDLER_COMPONENT_NAME", raising=False)
    monkeypatch.delenv("BUNDLER_HASH_ALGORITHM", raising=False)
    monkeypatch.delenv("BUNDLER_DIGEST_LENGTH", raising=False)
    monkeypatch.delenv("BUNDLER_ENCODING", raising=False)
    monkeypatch.setenv("APP_ENV", "dev")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
