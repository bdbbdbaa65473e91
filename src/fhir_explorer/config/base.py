"""Base configuration settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the FHIR Explorer testing framework."""

    model_config = SettingsConfigDict(
        env_prefix="FHIR_EXPLORER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "FHIR Explorer"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Default target server
    default_server_url: str = Field(default="https://hapi.fhir.org/baseR4")
    default_server_version: str = Field(default="HAPI FHIR 6.0.0")
    default_fhir_version: str = Field(default="R4")
    test_runner: str = Field(default="FHIR Explorer Testing Framework")
    user_agent: str = Field(default="FHIR-Explorer/1.0")

    # HTTP client
    request_timeout: float = Field(default=30.0, gt=0)

    # Reports
    report_directory: str = Field(default="reports")
    default_report_format: Literal["html", "json", "xml"] = "json"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level
