from .chain import (
    CHAIN_ID,
    NETWORK_ADDRESS,
    OPERATOR_INDEX,
    TEST_PRIVATE_KEY,
    VAULT_ADDRESS,
    account,
    client,
    fake_w3,
    read_only_client,
)
from .config import (
    clean_env,
    set_config,
    set_dotenv,
    set_env,
    set_local_yaml,
    set_pyproject,
    tmp_cwd,
)

__all__ = [
    "CHAIN_ID",
    "NETWORK_ADDRESS",
    "OPERATOR_INDEX",
    "TEST_PRIVATE_KEY",
    "VAULT_ADDRESS",
    "account",
    "clean_env",
    "client",
    "fake_w3",
    "read_only_client",
    "set_config",
    "set_dotenv",
    "set_env",
    "set_local_yaml",
    "set_pyproject",
    "tmp_cwd",
]
