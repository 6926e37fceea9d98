import logging

import pytest

from shimmer import config


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch):
    root_level = logging.getLogger().level
    for key in config.DEFAULT_CONFIG:
        monkeypatch.delenv(f"SHIMMER_{key.upper()}", raising=False)
    yield
    config.CLIENT_CONFIG.clear()
    config.CLIENT_CONFIG.update(config.DEFAULT_CONFIG)
    logging.getLogger().setLevel(root_level)


def test_defaults_without_env(tmp_path):
    loaded = config.load_config(str(tmp_path / "missing.env"))
    assert loaded["username"] == "Shimmer"
    assert loaded["tick_interval"] == 0.05
    assert loaded["verbose"] is False


def test_env_overrides_are_coerced(monkeypatch, tmp_path):
    monkeypatch.setenv("SHIMMER_SERVER_PORT", "9001")
    monkeypatch.setenv("SHIMMER_VERBOSE", "yes")
    monkeypatch.setenv("SHIMMER_TICK_INTERVAL", "0.2")
    monkeypatch.setenv("SHIMMER_LOG_LEVEL", "debug")

    loaded = config.load_config(str(tmp_path / "missing.env"))
    assert loaded["server_port"] == 9001
    assert loaded["verbose"] is True
    assert loaded["tick_interval"] == 0.2
    assert loaded["log_level"] == "DEBUG"
    assert config.get("server_port") == 9001


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SHIMMER_USERNAME=Carol\n")
    # load_dotenv writes into os.environ; register it for cleanup
    monkeypatch.setenv("SHIMMER_USERNAME", "")
    monkeypatch.delenv("SHIMMER_USERNAME")

    assert config.load_config(str(env_file))["username"] == "Carol"


@pytest.mark.parametrize(
    "key, value",
    [
        ("SHIMMER_SERVER_PORT", "70000"),
        ("SHIMMER_SERVER_PORT", "not-a-port"),
        ("SHIMMER_TICK_INTERVAL", "0"),
        ("SHIMMER_USERNAME", "   "),
        ("SHIMMER_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, tmp_path, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(config.ConfigError):
        config.load_config(str(tmp_path / "missing.env"))


def test_values_follow_declared_key_types(monkeypatch, tmp_path):
    monkeypatch.setenv("SHIMMER_TICK_INTERVAL", "1")
    monkeypatch.setenv("SHIMMER_READ_SIZE", "512")

    loaded = config.load_config(str(tmp_path / "missing.env"))
    assert loaded["tick_interval"] == 1.0 and isinstance(loaded["tick_interval"], float)
    assert loaded["read_size"] == 512 and isinstance(loaded["read_size"], int)
    assert set(config.CONFIG_TYPES) == set(config.DEFAULT_CONFIG)
