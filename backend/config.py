"""
LeaveRight Configuration

Environment-based settings for the paid-leave simulator.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "LeaveRight"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"
    allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Collective-agreement salary bounds, inclusive (SALARY_FLOOR / SALARY_CEILING)
    salary_floor: Decimal = Field(
        default=Decimal("200"),
        gt=0,
        description="Lowest monthly salary accepted by the simulator",
    )
    salary_ceiling: Decimal = Field(
        default=Decimal("1200"),
        gt=0,
        description="Highest monthly salary accepted by the simulator",
    )

    @model_validator(mode="after")
    def check_salary_bounds(self) -> "Settings":
        if self.salary_floor > self.salary_ceiling:
            raise ValueError("salary_floor must not exceed salary_ceiling")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
