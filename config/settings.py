from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.constants import (
    DEFAULT_CONTRACT_ADDRESS,
    ETHERSCAN_DEFAULT_BASE_URL,
    ETHERSCAN_MAINNET_CHAIN_ID,
)

# Each section reads its own env vars; nesting alone would not populate them.
ENV_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = ENV_CONFIG

    name: str = Field("Contract Standard Checker", validation_alias="APP_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class EtherscanSettings(BaseSettings):
    """Settings for the Etherscan contract API. Handed to EtherscanClient explicitly."""

    model_config = ENV_CONFIG

    api_key: Optional[str] = Field(
        default=None,
        validation_alias="ETHERSCAN_API_KEY",
        description="Etherscan API key",
    )
    base_url: str = Field(default=ETHERSCAN_DEFAULT_BASE_URL, validation_alias="ETHERSCAN_BASE_URL")
    chain_id: int = Field(default=ETHERSCAN_MAINNET_CHAIN_ID, gt=0, validation_alias="ETHERSCAN_CHAIN_ID")
    # Total request timeout (seconds)
    request_timeout: int = Field(default=30, gt=0, validation_alias="ETHERSCAN_TIMEOUT")
    default_contract_address: str = Field(
        default=DEFAULT_CONTRACT_ADDRESS,
        validation_alias="DEFAULT_CONTRACT_ADDRESS",
        description="Contract checked when no address is given on the command line",
    )


class StandardSettings(BaseSettings):
    """Where token-standard definitions come from."""

    model_config = ENV_CONFIG

    abi_dir: Optional[str] = Field(
        default=None,
        validation_alias="STANDARD_ABI_DIR",
        description="Directory holding erc20/erc721/erc1155 .abi.json files. Built-in ABIs are used if unset.",
    )


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Sub-settings map flat env vars (via validation_alias) to the nested structure.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    etherscan: EtherscanSettings = Field(default_factory=EtherscanSettings)
    standards: StandardSettings = Field(default_factory=StandardSettings)

    model_config = ENV_CONFIG


# Singleton instance
settings = Settings()
