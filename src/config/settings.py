"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared.validators.password import Rule, compose_rule_set, get_rule_set

logger = logging.getLogger(__name__)

DEVELOPMENT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def parse_comma_separated_list(value: str | None) -> list[str]:
    """Split a comma-separated setting into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Credential Validation API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api"

    # CORS
    cors_allow_origins: str | None = None
    cors_allow_credentials: bool = False

    # Rate limiting (slowapi limit string)
    rate_limit_enabled: bool = True
    rate_limit: str = "60/minute"

    # Password policy
    password_rule_set: str = "standard"  # standard, strict
    password_rules: str | None = None  # comma-separated rule keys, overrides password_rule_set

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("password_rule_set", mode="before")
    @classmethod
    def validate_password_rule_set(cls, v: str) -> str:
        """Reject rule set names that have no definition."""
        name = str(v).lower()
        get_rule_set(name)
        return name

    @field_validator("password_rules")
    @classmethod
    def validate_password_rules(cls, v: str | None) -> str | None:
        """Reject unknown rule keys and empty rule lists."""
        if v is None:
            return v
        keys = parse_comma_separated_list(v)
        if not keys:
            raise ValueError("password_rules must name at least one rule")
        compose_rule_set(keys)
        return ",".join(keys)

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        fmt = str(v).lower()
        if fmt not in {"json", "text"}:
            raise ValueError(f"Log format must be 'json' or 'text', got {fmt}")
        return fmt

    def get_password_rules(self) -> tuple[Rule, ...]:
        """Resolve the effective password rule set.

        An explicit rule key list wins over the named rule set.
        """
        if self.password_rules:
            return compose_rule_set(parse_comma_separated_list(self.password_rules))
        return get_rule_set(self.password_rule_set)

    def get_cors_origins(self) -> list[str]:
        """Get allowed CORS origins, defaulting to localhost in development."""
        origins = [origin.rstrip("/") for origin in parse_comma_separated_list(self.cors_allow_origins)]
        if not origins and self.environment == "development":
            return list(DEVELOPMENT_ORIGINS)
        if not origins:
            logger.warning(f"No CORS origins configured for {self.environment} environment")
        if self.cors_allow_credentials and "*" in origins:
            raise ValueError("Cannot enable CORS credentials with wildcard origins (*)")
        return origins


settings = Settings()  # type: ignore[call-arg]
