from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.constants import GOVERNANCE_CONTRACT_NAME, TOKEN_CONTRACT_NAME


class _EnvSettings(BaseSettings):
    """Base for setting groups; each group reads its own flat env vars."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


class AppSettings(_EnvSettings):
    """General application settings."""

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class EthereumSettings(_EnvSettings):
    """Settings related to Ethereum Node connection and RPC."""

    provider_uri: str = Field(
        default="http://127.0.0.1:8545",
        validation_alias="PROVIDER_URI",
        description="Ethereum Node JSON-RPC URL",
    )
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")
    # Only used to sign locally; falls back to eth_chainId when unset
    chain_id: Optional[int] = Field(default=None, gt=0, validation_alias="CHAIN_ID")

    # hardhat-deploy layout: <deployments_dir>/<network>/<ContractName>.json
    network: str = Field(default="localhost", validation_alias="NETWORK")
    deployments_dir: str = Field(default="deployments", validation_alias="DEPLOYMENTS_DIR")


class GovernanceSettings(_EnvSettings):
    """Settings for the governor and token contracts the proposal targets."""

    governance_contract_name: str = Field(
        default=GOVERNANCE_CONTRACT_NAME, validation_alias="GOVERNANCE_CONTRACT_NAME"
    )
    token_contract_name: str = Field(default=TOKEN_CONTRACT_NAME, validation_alias="TOKEN_CONTRACT_NAME")

    # Explicit addresses take precedence over deployment artifacts
    governance_address: Optional[str] = Field(default=None, validation_alias="GOVERNANCE_ADDRESS")
    token_address: Optional[str] = Field(default=None, validation_alias="TOKEN_ADDRESS")

    token_decimals: Optional[int] = Field(default=None, ge=0, le=255, validation_alias="TOKEN_DECIMALS")

    receipt_timeout_seconds: int = Field(default=120, gt=0, validation_alias="RECEIPT_TIMEOUT_SECONDS")
    receipt_poll_latency: float = Field(default=0.5, gt=0, validation_alias="RECEIPT_POLL_LATENCY")


class SignerSettings(_EnvSettings):
    """
    Account used to send the proposal.
    Without a private key the node's unlocked account is used (local hardhat node).
    """

    private_key: Optional[SecretStr] = Field(default=None, validation_alias="PRIVATE_KEY")
    sender_address: Optional[str] = Field(default=None, validation_alias="SENDER_ADDRESS")


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each group resolves its own validation_alias env names, so flat env vars
    (PROVIDER_URI, PRIVATE_KEY, ...) end up in the nested structure.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    ethereum: EthereumSettings = Field(default_factory=EthereumSettings)
    governance: GovernanceSettings = Field(default_factory=GovernanceSettings)
    signer: SignerSettings = Field(default_factory=SignerSettings)

    # Config to load from .env file
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Singleton instance
settings = Settings()
