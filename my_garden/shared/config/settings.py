# 📄 File: my_garden/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads every setting from environment variables
# (or a .env file) and hands them to the rest of the garden app in one place.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for storage, calendar, reminder and image settings.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - my_garden.main (application startup)
# - my_garden.container (storage backend selection)
# - Calendar, scheduler and image processing services

import calendar
from datetime import time
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from my_garden import __version__


STORAGE_BACKENDS = ["memory", "file", "redis"]

WEEKDAY_NAMES = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="My Garden API", description="Application name")
    APP_VERSION: str = Field(default=__version__, description="Application version")
    APP_DESCRIPTION: str = Field(
        default="House plant tracking with watering reminders",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format (json/text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="CORS allowed origins"
    )

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    STORAGE_BACKEND: str = Field(default="file", description="memory, file or redis")
    STORAGE_DIR: str = Field(default=".garden_data", description="Directory for file storage")
    REDIS_URL: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    REDIS_MAX_CONNECTIONS: int = Field(default=10, description="Redis connection pool size")

    PLANTS_STORAGE_KEY: str = Field(default="plants_key", description="Slot holding the plant list")
    WATERED_MARKS_STORAGE_KEY: str = Field(
        default="watered_marks_key",
        description="Slot holding the watered calendar days"
    )

    # =========================================================================
    # CALENDAR
    # =========================================================================

    FIRST_WEEKDAY: int = Field(
        default=calendar.SUNDAY,
        description="First column of the month grid (0=Monday ... 6=Sunday, or a day name)"
    )
    WATERED_MARKER: str = Field(default="💧", description="Symbol drawn on watered days")
    CALENDAR_TITLE_FORMAT: str = Field(default="%B %Y", description="Month header format")

    # =========================================================================
    # WATERING REMINDERS
    # =========================================================================

    WATERING_FREQUENCY_MIN: int = Field(default=1, description="Shortest watering interval (days)")
    WATERING_FREQUENCY_MAX: int = Field(default=30, description="Longest watering interval (days)")
    NOTIFICATIONS_ENABLED: bool = Field(default=True, description="Whether reminders may be delivered")
    REMINDER_TIME: time = Field(default=time(9, 0), description="Local time reminders fire at")
    REMINDER_TITLE_TEMPLATE: str = Field(
        default="Time to water 🌿 {name}",
        description="Reminder title, formatted with the plant name"
    )
    REMINDER_BODY_TEMPLATE: str = Field(
        default="Remember to water {name} today!",
        description="Reminder body, formatted with the plant name"
    )

    # =========================================================================
    # IMAGES
    # =========================================================================

    MAX_IMAGE_SIZE: int = Field(default=5242880, description="Max image size (5MB)")
    IMAGE_JPEG_QUALITY: int = Field(default=80, description="JPEG re-encoding quality")
    MAX_IMAGE_PIXELS: int = Field(default=50_000_000, description="Max decoded image area in pixels")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Validate storage backend name."""
        if v.lower() not in STORAGE_BACKENDS:
            raise ValueError(f"Storage backend must be one of {STORAGE_BACKENDS}")
        return v.lower()

    @field_validator("FIRST_WEEKDAY", mode="before")
    @classmethod
    def validate_first_weekday(cls, v):
        """Accept a weekday number (0=Monday) or an English day name."""
        if isinstance(v, str) and not v.strip().isdigit():
            name = v.strip().lower()
            if name not in WEEKDAY_NAMES:
                raise ValueError(f"First weekday must be one of {list(WEEKDAY_NAMES)}")
            return WEEKDAY_NAMES[name]
        if not 0 <= int(v) <= 6:
            raise ValueError("First weekday must be between 0 (Monday) and 6 (Sunday)")
        return int(v)

    @field_validator("IMAGE_JPEG_QUALITY")
    @classmethod
    def validate_jpeg_quality(cls, v: int) -> int:
        if not 1 <= v <= 95:
            raise ValueError("JPEG quality must be between 1 and 95")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
