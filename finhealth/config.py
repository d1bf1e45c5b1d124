"""Configuration management using Pydantic Settings"""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINHEALTH_",
        extra="ignore",
    )

    # Service
    service_name: str = "finhealth"
    log_level: str = "INFO"

    # Analysis
    max_action_items: int = Field(default=5, ge=1, le=8)
    # JSON mapping of indicator -> weight, e.g. {"bill_payment": 0.10, "financial_planning": 0.10}
    indicator_weights: Optional[Dict[str, float]] = None


settings = Settings()
