"""Configuration management for the lineup setter."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types."""
    TEST = "TEST"
    DEV = "DEV"
    PROD = "PROD"


class AppSettings(BaseSettings):
    """Application settings with dotenv support.

    The default TEST environment never submits lineups; see
    submission_blocked_reason().

    Environment variables can be set directly or via .env file.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    # ===================
    # Environment
    # ===================
    ENV: Environment = Field(
        default=Environment.TEST,
        description='Application environment: TEST, DEV, or PROD'
    )

    # ===================
    # Fantasy league
    # ===================
    LEAGUE_URL: str = Field(
        default='http://nothingbutnetolicky.basketball.cbssports.com',
        description='Base URL of the fantasy league host'
    )
    TEAM_ID: int = Field(default=13, description='Fantasy team identifier')
    ACCESS_TOKEN: SecretStr = Field(
        default=SecretStr(''),
        description='League API access token'
    )
    TIMEZONE: str = Field(
        default='America/New_York',
        description='Timezone used to stamp the lineup scoring period'
    )

    # ===================
    # HTTP Client
    # ===================
    TIMEOUT_S: float = Field(default=15.0, description='HTTP request timeout in seconds')
    USER_AGENT: str = Field(
        default='Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36',
        description='User agent for HTTP requests'
    )

    # ===================
    # Retry & Backoff
    # ===================
    RETRY_MAX: int = Field(default=3, ge=0, description='Retries after the first failed attempt')
    RETRY_BASE_DELAY_MS: int = Field(
        default=1000,
        ge=0,
        description='Delay before the first retry, doubled on each further retry'
    )

    # ===================
    # Roster input
    # ===================
    ROSTER_PATH: Path = Field(
        default=Path('roster.json'),
        description='Default roster file read by the CLI'
    )

    # ===================
    # Logging
    # ===================
    LOG_LEVEL: str = Field(default='INFO', description='Logging level')
    LOG_FORMAT: str = Field(default='json', description='Log format: json or text')

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in ('json', 'text'):
            raise ValueError("LOG_FORMAT must be one of: json, text")
        return v_lower

    @field_validator('LEAGUE_URL')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @field_validator('ENV', mode='before')
    @classmethod
    def validate_env(cls, v) -> Environment:
        """Validate and normalize environment value."""
        if isinstance(v, Environment):
            return v
        if isinstance(v, str):
            v_upper = v.upper()
            # Map common variations to standard values
            if v_upper in ('TEST', 'TESTING'):
                return Environment.TEST
            elif v_upper in ('DEV', 'DEVELOPMENT', 'LOCAL'):
                return Environment.DEV
            elif v_upper in ('PROD', 'PRODUCTION'):
                return Environment.PROD
        raise ValueError(f"ENV must be TEST, DEV, or PROD (got: {v})")

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.ENV == Environment.TEST

    def is_prod(self) -> bool:
        """Check if running in production environment."""
        return self.ENV == Environment.PROD

    def submission_blocked_reason(self) -> Optional[str]:
        """Why lineups may not be sent to the league host, or None if they may.

        Only PROD with an access token submits; TEST and DEV stay offline.
        """
        if not self.is_prod():
            return f"lineup submission is disabled in {self.ENV.value} environment (set ENV=PROD)"
        if not self.ACCESS_TOKEN.get_secret_value():
            return "lineup submission requires ACCESS_TOKEN"
        return None

    @property
    def lineup_url(self) -> str:
        """Endpoint accepting lineup transactions."""
        return f"{self.LEAGUE_URL}/api/league/transactions/lineup"


@lru_cache()
def get_settings() -> AppSettings:
    """Get cached application settings.

    Loads settings from:
    1. Environment variables
    2. .env file (if exists)
    3. Default values

    Returns:
        AppSettings: Cached settings instance
    """
    return AppSettings()
