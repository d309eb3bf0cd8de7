import json
import logging
import os
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.9",
    "Content-Type": "application/json",
    "Origin": "https://cnvmp3.com",
    "Referer": "https://cnvmp3.com/v25",
    "Sec-Ch-Ua": '"Chromium";v="122", "Not(A:Brand";v="24", "Google Chrome";v="122"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
}


class UpstreamConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default="https://cnvmp3.com", description="Conversion service base URL")
    check_path: str = Field(default="/check_database.php", description="Cache lookup endpoint")
    video_data_path: str = Field(default="/get_video_data.php", description="Metadata endpoint")
    convert_path: str = Field(default="/download_video_ucep.php", description="Conversion endpoint")
    record_path: str = Field(default="/insert_to_database.php", description="Result recording endpoint")
    token: str = Field(default="1234", description="Token sent with metadata requests")
    headers: Dict[str, str] = Field(default_factory=lambda: dict(BROWSER_HEADERS), description="Headers sent upstream")
    verify_ssl: bool = Field(default=False, description="Verify upstream TLS certificates")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Upstream request timeout")
    rate_limit_error_type: int = Field(default=4, description="Upstream errorType meaning throttled")
    retry_after_seconds: int = Field(default=60, ge=1, description="Retry hint returned when throttled")


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(default="[%(request_id)s] %(message)s", description="Log format")
    enable_rich: bool = Field(default=True, description="Enable rich console logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


class I18nConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_locale: str = Field(default="en", description="Default locale")
    supported_locales: List[str] = Field(default=["en", "ja"], description="Supported locales")


class ApiConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(default="YouTube Conversion Proxy", description="API title")
    description: str = Field(default="Relays YouTube conversions to an upstream service", description="API description")
    version: str = Field(default="1.0.0", description="API version")
    cors_origins: List[str] = Field(default=["*"], description="CORS allowed origins")
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port")


class Config(BaseSettings):
    """Main configuration model"""
    model_config = SettingsConfigDict(
        env_prefix="YTPROXY_",
        env_nested_delimiter="__",
        frozen=True,
    )

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def load_from_file(cls, config_path: str = "config.json") -> "Config":
        """Load configuration from JSON file, falling back to env and defaults"""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)
            logger.info(f"Configuration loaded from {config_path}")
            return cls(**config_data)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config from {config_path}: {str(e)}")
            logger.info("Using environment/default configuration")
            return cls()


def load_config() -> Config:
    """Load configuration with priority: config.json > env vars > defaults"""
    config_path = os.getenv("CONFIG_PATH", "config.json")

    if os.path.exists(config_path):
        return Config.load_from_file(config_path)

    logger.info(f"Config file not found at {config_path}, checking environment variables")
    return Config()
