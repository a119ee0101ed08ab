from __future__ import annotations

import logging

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    ENVIRONMENT: str = Field(description="Environment type", default="development")
    PROJECT_NAME: str = Field(description="Project name", default="Country Code Picker")
    API_V1_STR: str = Field(description="API version string", default="/api/v1")

    BACKEND_CORS_ORIGINS: list[AnyHttpUrl] = Field(description="Allowed CORS origins", default=[])
    ENABLE_DOCS: bool = Field(default=True)

    # Picker screen
    PICKER_LOCALE: str = Field(default="en", description="Default locale for country display names")
    PICKER_COMMON_COUNTRY_CODES: list[str] | None = Field(
        default=None,
        description="Region codes listed in the common section. Falls back to the built-in list when unset.",
    )
    PICKER_SCREEN_TITLE: str = Field(default="Choose your country", description="Picker screen title")
    PICKER_SEARCH_PLACEHOLDER: str = Field(
        default="Search Country Codes", description="Placeholder for the country code search field"
    )
    PICKER_SEARCH_FONT_SIZE: float = Field(default=14, description="Search placeholder font size in points")
    PICKER_CANCEL_TITLE: str = Field(default="Cancel", description="Cancel button title")
    PICKER_BG_COLOR: str = Field(default="#FFFFFF", description="Picker background color (hex)")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()  # ty:ignore[missing-argument]
