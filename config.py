"""Test configuration using Pydantic Settings."""
import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_FORBIDDEN_MESSAGE = (
    "Your Airflow administrator chose not to expose the configuration, "
    "most likely for security reasons."
)


class ConfigPageSettings(BaseSettings):
    """Expectations for the Configuration page, loaded from TEST_CONFIG_PAGE_* variables."""

    path: str = "/configs"
    expected_heading: str = "Configuration"
    expects_table_data: bool = False
    forbidden_message: str = DEFAULT_FORBIDDEN_MESSAGE
    expected_section: str = "core"
    expected_key: str = "dags_folder"

    @field_validator('path')
    @classmethod
    def validate_path(cls, v):
        if not v or not v.startswith('/'):
            raise ValueError('path must start with "/"')
        return v

    @field_validator('expected_heading')
    @classmethod
    def validate_expected_heading(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('expected_heading must not be empty')
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f'expected_heading is not a valid pattern: {e}')
        return v

    @field_validator('forbidden_message', 'expected_section', 'expected_key')
    @classmethod
    def validate_not_blank(cls, v):
        if not v or len(v.strip()) == 0:
            raise ValueError('value must not be empty')
        return v.strip()

    model_config = SettingsConfigDict(
        env_prefix="TEST_CONFIG_PAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


class Settings(BaseSettings):
    """Suite settings loaded from TEST_* environment variables."""

    # Target application; unset means the bundled stub UI is started
    base_url: Optional[str] = None

    # Credentials; unset means no login step
    username: Optional[str] = None
    password: Optional[str] = None

    # Browser
    headless: bool = True

    # Timeouts (milliseconds)
    default_timeout_ms: int = 30_000
    navigation_timeout_ms: int = 30_000
    load_timeout_ms: int = 30_000

    # Logging
    log_level: str = "INFO"
    log_format: str = "standard"  # "json" or "standard"

    config_page: ConfigPageSettings = Field(default_factory=ConfigPageSettings)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        if v is None or len(v.strip()) == 0:
            return None
        v = v.strip()
        if not v.startswith(('http://', 'https://')):
            raise ValueError('base_url must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('default_timeout_ms', 'navigation_timeout_ms', 'load_timeout_ms')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError('timeouts must be positive')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of {valid_levels}')
        return v.upper()

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        valid_formats = ['json', 'standard']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of {valid_formats}')
        return v.lower()

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    model_config = SettingsConfigDict(
        env_prefix="TEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


# Global settings instance
settings = Settings()
