"""
Core configuration and settings for the Variant Service
Following FastAPI best practices for configuration management
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Allow extra fields to be ignored
    )

    # Service information
    service_name: str = Field(default="variant-service")
    service_version: str = Field(default="1.0.0")
    api_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=8003)
    host: str = Field(default="0.0.0.0")

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/variant-service.log")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")
    enable_tracing: bool = Field(default=False)

    # Variant selection rules
    max_quantity_per_line: int = Field(default=99, ge=1)
    low_stock_threshold: int = Field(default=10, ge=0)
    selection_reset_policy: Literal["in_stock", "exists"] = Field(default="in_stock")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Global config instance
config = Config()
