"""Engine settings.

Every field can be set through a TAX_INVENTORY_-prefixed environment
variable or a .env file in the working directory. Library code never reads
the environment directly; it receives a Settings instance or calls
get_settings().
"""

from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Runtime options for logging, the tax-year rule table and the importer.

    Examples:
        TAX_INVENTORY_DEFAULT_TAX_YEAR=2026
        TAX_INVENTORY_TAX_RULES_FILE=/etc/tax_inventory/rules.json
        TAX_INVENTORY_IMPORT_BONUS_FROM_TAX_YEAR=true
        TAX_INVENTORY_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="TAX_INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Tax Inventory Engine"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="'console' for people, 'json' for log shippers",
    )
    log_file: Path | None = Field(default=None, description="Also append log records here")

    default_tax_year: int = Field(
        default=2025,
        ge=2000,
        description="Rule year used when a requested tax year is not in the table",
    )
    tax_rules_file: Path | None = Field(
        default=None,
        description="JSON file replacing the built-in tax-year rule table",
    )

    import_bonus_percent: Decimal = Field(
        default=Decimal("100"),
        ge=0,
        le=100,
        description="Bonus depreciation percent applied to imported items",
    )
    import_bonus_from_tax_year: bool = Field(
        default=False,
        description="Take the bonus percent from the acquisition year's rule instead",
    )

    @model_validator(mode="after")
    def _json_logs_in_production(self) -> "Settings":
        # An explicit log_format always wins.
        if self.is_production and "log_format" not in self.model_fields_set:
            self.log_format = "json"
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process; get_settings.cache_clear() reloads."""
    return Settings()
