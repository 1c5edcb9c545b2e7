from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ETHERSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API access
    api_key: str = ""
    network: str = "eth-mainnet"
    version: str = "v2"  # "v1" uses per-explorer hosts, "v2" the unified endpoint

    # Dispatcher
    timeout_ms: int = 30000
    rate_limit_enabled: bool = True
    max_requests_per_second: int = 5

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs


settings = Settings()


def validate_settings(config: Settings | None = None) -> None:
    """Validate critical settings before building a client."""
    from etherscan_sdk.exceptions import ValidationError
    from etherscan_sdk.networks import SUPPORTED_NETWORKS, SUPPORTED_VERSIONS

    config = config or settings
    errors: list[str] = []

    if not config.api_key:
        errors.append("ETHERSCAN_API_KEY must be set")

    if config.network not in SUPPORTED_NETWORKS:
        errors.append(f"ETHERSCAN_NETWORK '{config.network}' is not a supported network")

    if config.version not in SUPPORTED_VERSIONS:
        errors.append(f"ETHERSCAN_VERSION must be one of {', '.join(SUPPORTED_VERSIONS)}")

    if config.timeout_ms <= 0:
        errors.append("ETHERSCAN_TIMEOUT_MS must be a positive integer")

    if config.max_requests_per_second <= 0:
        errors.append("ETHERSCAN_MAX_REQUESTS_PER_SECOND must be a positive integer")

    if errors:
        raise ValidationError("Configuration errors:\n  - " + "\n  - ".join(errors))
