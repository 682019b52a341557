from pathlib import Path

import pytest
import yaml

from publish_core.config_manager import AppConfig, ConfigManager


@pytest.fixture
def mock_config_file(tmp_path):
    """Creates a temporary config file."""
    config_data = {
        "paths": {
            "log_dir": str(tmp_path / "logs"),
        },
        "logging": {"level": "DEBUG"},
        "ingestion": {"request_timeout": 10},
        "distribution": {
            "client_id": "id-from-yaml",
            "client_secret": "secret-from-yaml",
            "refresh_token": "token-from-yaml",
        },
        "server": {"port": 9000},
    }

    config_path = tmp_path / "test_settings.yaml"
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)

    return str(config_path)


def test_config_load_valid(mock_config_file):
    manager = ConfigManager(config_path=mock_config_file)
    assert isinstance(manager.config, AppConfig)
    assert manager.logging.level == "DEBUG"
    assert manager.ingestion.request_timeout == 10
    assert manager.distribution.client_id == "id-from-yaml"
    assert manager.server.port == 9000


def test_config_file_not_found():
    with pytest.raises(FileNotFoundError):
        ConfigManager(config_path="non_existent.yaml")


def test_default_values(tmp_path):
    config_path = tmp_path / "minimal.yaml"
    config_path.write_text("")

    manager = ConfigManager(config_path=str(config_path))
    assert manager.paths.log_dir == "logs"
    assert manager.logging.rotation == "10 MB"
    assert manager.distribution.upload_chunk_size == -1
    assert manager.server.host == "127.0.0.1"


def test_credentials_fall_back_to_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "env-id")
    monkeypatch.setenv("YOUTUBE_REFRESH_TOKEN", "env-token")
    monkeypatch.delenv("GOOGLE_CLIENT_SECRET", raising=False)
    config_path = tmp_path / "settings.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"distribution": {}}, f)

    manager = ConfigManager(config_path=str(config_path))
    assert manager.distribution.client_id == "env-id"
    assert manager.distribution.refresh_token == "env-token"
    assert manager.distribution.client_secret is None


def test_shipped_settings_file_loads():
    manager = ConfigManager(str(Path(__file__).parent.parent / "config" / "settings.yaml"))
    assert manager.distribution.watch_url_base == "https://www.youtube.com/watch?v="
