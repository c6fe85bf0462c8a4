import pytest

from services.config_manager import CONFIG_DIR_ENV, ConfigManager
from services.log_context import comparison_id_context


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # Every test gets its own config directory and a fresh singleton
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    ConfigManager._instance = None
    yield config_dir
    ConfigManager._instance = None
    comparison_id_context.set(None)
