"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Cleaning Dispatch Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Database
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "cleaning_user"
    POSTGRES_PASSWORD: str = "cleaning_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_DB: str = "cleaning_dispatch"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 3600

    # Identity (auth is handled upstream, the gateway forwards the profile id)
    IDENTITY_HEADER: str = "X-Profile-Id"

    # Request workflow
    WORKFLOW_POLICY: str = "shortcut"  # "shortcut" or "strict"
    PRICING_ENABLED: bool = True

    # Monitoring
    ENABLE_METRICS: bool = True
    HEALTH_CHECK_TIMEOUT: int = 5

    # Development
    ENABLE_SWAGGER: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @model_validator(mode="after")
    def assemble_db_connection(self) -> "Settings":
        # Build from individual components if DATABASE_URL is not provided
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_SERVER}:5432/{self.POSTGRES_DB}"
            )
        return self

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("WORKFLOW_POLICY")
    @classmethod
    def validate_workflow_policy(cls, v: str) -> str:
        if v.lower() not in ["shortcut", "strict"]:
            raise ValueError("Workflow policy must be one of: shortcut, strict")
        return v.lower()

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
