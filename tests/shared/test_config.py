# tests\shared\test_config.py
import os

from lingosync.shared.config import AppEnv, Settings

def test_defaults(monkeypatch):
    monkeypatch.delenv("LINGOSYNC_API_BASE_URL", raising=False)
    s = Settings(_env_file=None)

    assert s.APP_ENV == AppEnv.DEVELOPMENT
    assert s.CONTENT_FETCH_TIMEOUT == 50.0
    assert s.CONTENT_FETCH_RETRIES == 1
    assert s.CONTENT_EXTRACTION_TIMEOUT == 12
    assert s.DIFFICULTY_RANK_BOUNDARY == 10000
    assert s.PROBE_URL == s.API_BASE_URL

def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LINGOSYNC_API_BASE_URL", "http://localhost:9001/")
    monkeypatch.setenv("LINGOSYNC_APP_ENV", "testing")
    monkeypatch.setenv("LINGOSYNC_STORAGE_PATH", str(tmp_path))
    monkeypatch.setenv("LINGOSYNC_NETWORK_PROBE_URL", "http://probe.local/")

    s = Settings(_env_file=None)

    assert s.API_BASE_URL == "http://localhost:9001/"
    assert s.APP_ENV == AppEnv.TESTING
    assert s.STORAGE_DIR == os.path.abspath(str(tmp_path))
    assert s.PROBE_URL == "http://probe.local/"

def test_storage_dir_expands_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/ada")
    s = Settings(_env_file=None, STORAGE_PATH="~/.lingosync")

    assert s.STORAGE_DIR == "/home/ada/.lingosync"
