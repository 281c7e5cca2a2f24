import random

import pytest

from byzop.config import DEFAULT_CHAIN_ID, Config, LogConfig


def test_config(tmp_path):
    """
    Config should be able to make directories and set sensible defaults
    """
    config = Config(logs={"dir": tmp_path / "log"})
    assert config.logs.dir.exists()
    assert config.chain_id == DEFAULT_CHAIN_ID
    assert config.rpc_url is None
    assert config.private_key is None


def test_set_config(set_config, tmp_path):
    """We should be able to set parameters from all available modalities"""
    file_n = int(random.randint(0, 100))
    rpc_url = f"http://127.0.0.1:{random.randint(8000, 9000)}"

    set_config({"rpc_url": rpc_url, "chain_id": 1, "logs": {"file_n": file_n}})

    config = Config()
    assert config.rpc_url == rpc_url
    assert config.chain_id == 1
    assert config.logs.file_n == file_n


def test_config_from_environment(tmp_path, set_env):
    """
    Setting environmental variables should set the config, including recursive models
    """
    override_logdir = tmp_path / "fancylogdir"

    set_env({"chain_id": 11155111, "logs": {"dir": str(override_logdir), "level": "error"}})

    config = Config()
    assert config.chain_id == 11155111
    assert config.logs.dir == override_logdir
    assert config.logs.level == "ERROR"


def test_config_sources_overrides(set_env, set_dotenv, set_pyproject, set_local_yaml):
    """Test that the different config sources are overridden in the correct order"""
    set_pyproject({"logs": {"file_n": 2}})
    assert Config().logs.file_n == 2
    set_local_yaml({"logs": {"file_n": 3}})
    assert Config().logs.file_n == 3
    set_dotenv({"logs": {"file_n": 4}})
    assert Config().logs.file_n == 4
    set_env({"logs": {"file_n": 5}})
    assert Config().logs.file_n == 5
    assert Config(**{"logs": {"file_n": 6}}).logs.file_n == 6


def test_secrets_hidden(set_env):
    """Keys and mnemonics are not exposed in reprs or dumps"""
    key = "0x" + "22" * 32
    set_env({"private_key": key})

    config = Config()
    assert config.private_key.get_secret_value() == key
    assert key not in repr(config)
    assert key not in str(config.model_dump())


def test_tx_timeout_positive():
    with pytest.raises(ValueError):
        Config(tx_timeout=0)


def test_log_config(tmp_path):
    """Levels are case-insensitive and the log dir is created"""
    log_dir = tmp_path / "nested" / "logs"
    logs = LogConfig(level="debug", level_file="warning", dir=log_dir)
    assert logs.level == "DEBUG"
    assert logs.level_file == "WARNING"
    assert log_dir.is_dir()

    assert LogConfig(dir=False).dir is False
    with pytest.raises(ValueError):
        LogConfig(file_n=-1)
