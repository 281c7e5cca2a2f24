from pathlib import Path
from typing import Literal

from platformdirs import PlatformDirs
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    PyprojectTomlConfigSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_dirs = PlatformDirs("byzop", "byzantine")
LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_CHAIN_ID = 17000
"""Holesky, the chain used when none is configured"""


class LogConfig(BaseModel):
    """
    Where client calls and sent transactions are logged, and at what severity
    """

    model_config = ConfigDict(validate_default=True)

    level: LOG_LEVELS = "INFO"
    """
    Default severity. ``INFO`` logs every sent transaction, ``DEBUG`` also logs contract reads.
    """
    level_file: LOG_LEVELS | None = None
    """Severity written to ``byzop.log``. If unset, use ``level``"""
    level_stdout: LOG_LEVELS | None = None
    """Severity printed to the console (stderr). If unset, use ``level``"""
    dir: Path | Literal[False] = Path(_dirs.user_log_dir)
    """
    Directory holding ``byzop.log`` and its rotated copies, created if missing.
    ``False`` disables file logging.
    """
    file_n: int = Field(5, ge=0)
    """Rotated copies of ``byzop.log`` to keep"""
    file_size: int = Field(2**22, ge=0)
    """Size in bytes at which ``byzop.log`` is rotated. ``0`` never rotates"""
    width: int | None = None
    """Console width, detected from the terminal when unset"""

    @field_validator("level", "level_file", "level_stdout", mode="before")
    @classmethod
    def uppercase_levels(cls, value: str | None = None) -> str | None:
        if value is not None:
            value = value.upper()
        return value

    @field_validator("dir", mode="after")
    @classmethod
    def create_dir(cls, value: Path | Literal[False]) -> Path | Literal[False]:
        if value is not False:
            value.mkdir(parents=True, exist_ok=True)
        return value


class Config(BaseSettings):
    """
    Connection, signing and logging settings.

    Only ``logs`` is used implicitly (by :func:`.init_logger`).
    The connection fields are consumed by :meth:`.ByzOperatorClient.from_config`
    and the CLI; constructing a client directly ignores them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="byzop_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file="byzop_config.yaml",
        pyproject_toml_table_header=("tool", "byzop", "config"),
        validate_default=True,
    )

    logs: LogConfig = LogConfig()
    rpc_url: str | None = Field(
        default=None, description="HTTP(S) JSON-RPC endpoint of an ethereum node"
    )
    chain_id: int = DEFAULT_CHAIN_ID
    private_key: SecretStr | None = Field(
        default=None, description="Hex private key of the operator account"
    )
    mnemonic: SecretStr | None = Field(
        default=None,
        description="BIP39 phrase of the operator account, used if no private_key is set",
    )
    gas_price_gwei: float | None = Field(
        default=None,
        description="Fixed legacy gas price. If unset, fees are filled in by web3",
    )
    tx_timeout: float = Field(
        default=120, gt=0, description="Seconds to wait for a transaction receipt"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """
        Read config settings from, in order of priority from high to low, where
        high priorities override lower priorities:

        * in the arguments passed to the class constructor (not user configurable)
        * in environment variables like ``export BYZOP_RPC_URL=https://...``
        * in a ``.env`` file in the working directory
        * in a ``byzop_config.yaml`` file in the working directory
        * in the ``tool.byzop.config`` table in a ``pyproject.toml`` file
          in the working directory
        * the default values in the :class:`.Config` model

        """

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            PyprojectTomlConfigSettingsSource(settings_cls),
        )


config = Config()
