import json
from pathlib import Path
from typing import Dict, Any, Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from webhook_bench.const import (
    CONFIG_FILE_NAME,
    DEFAULT_DATABASE_MAX_OVERFLOW,
    DEFAULT_DATABASE_POOL_SIZE,
    DEFAULT_DATABASE_URL,
    DEFAULT_DOCUMENT_COLLECTION,
    DEFAULT_DOCUMENT_ID,
    DEFAULT_LOCAL_BASE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    ENV_PREFIX,
    LIBRARY_LOG_LEVELS,
)


class Config(BaseSettings):
    """Global configuration settings for Webhook Bench."""

    server_host: str = DEFAULT_SERVER_HOST
    server_port: int = DEFAULT_SERVER_PORT
    local_base_url: str = DEFAULT_LOCAL_BASE_URL

    # Document store; the connection string is a secret and never hardcoded
    database_url: SecretStr = SecretStr(DEFAULT_DATABASE_URL)
    database_pool_size: int = DEFAULT_DATABASE_POOL_SIZE
    database_max_overflow: int = DEFAULT_DATABASE_MAX_OVERFLOW
    document_collection: str = DEFAULT_DOCUMENT_COLLECTION
    document_id: str = DEFAULT_DOCUMENT_ID

    # Benchmarking
    latency_samples: int = 10
    throughput_duration_ms: int = 15000
    request_timeout: float = 30.0
    success_mode: Literal["status", "opaque"] = "status"
    ignore_failed_samples: bool = False

    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
