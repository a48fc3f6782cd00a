"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from decimal import Decimal
from enum import Enum
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from SOLIDSHOP_* environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="SolidShop", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Storage
    database_url: str = Field(
        default="sqlite:///./solidshop.db",
        description="SQLAlchemy connection URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=5, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=1.0, ge=0, description="Delay between DB init attempts"
    )
    storage_backend: Literal["sql", "memory"] = Field(
        default="sql", description="Which repository implementations are bound"
    )

    # Payments
    payment_gateway: str = Field(
        default="stripe", min_length=1, description="Default payment gateway name"
    )
    default_currency: str = Field(
        default="USD", min_length=3, max_length=3, description="Order currency"
    )
    max_charge_amount: Decimal = Field(
        default=Decimal("10000.00"),
        gt=0,
        description="Gateways decline single charges above this amount",
    )

    # Notifications
    email_transport: str = Field(default="outbox", description="outbox | log")
    sms_transport: str = Field(default="outbox", description="outbox | log | none")
    mail_from: str = Field(
        default="no-reply@solidshop.local", description="Sender address"
    )
    outbox_max_messages: int = Field(
        default=1000, ge=1, description="Messages the outbox keeps before dropping the oldest"
    )

    # Event log
    event_log_sink: str = Field(default="logging", description="logging | jsonl | memory")
    event_log_path: Optional[str] = Field(
        default=None, description="Target file for the jsonl event log sink"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="SolidShop API", description="API documentation title"
    )
    api_description: str = Field(
        default="Users, orders, payments and notifications wired through small abstractions",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_prefix="SOLIDSHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("payment_gateway", "email_transport", "sms_transport", "event_log_sink")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return v.lower().strip()

    @field_validator("default_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
