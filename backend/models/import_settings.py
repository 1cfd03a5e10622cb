"""
Settings model for a single course import run.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Choices offered by the import form
MAX_COURSES_CHOICES = (1, 2, 3, 5)


class ImportSettings(BaseModel):
    """Credentials and tuning for one import run. Never persisted."""
    model_config = ConfigDict(frozen=True)

    supabase_url: str = Field(min_length=1)
    supabase_key: str = Field(min_length=1, repr=False)
    api_key: str = Field(min_length=1, repr=False)
    max_courses_per_term: int = 3
    delay_seconds: float = Field(2.5, ge=0)
    api_base_url: str = "https://api.golfcourseapi.com/v1"
    api_timeout_seconds: float = Field(30.0, gt=0)

    @field_validator("supabase_url", "supabase_key", "api_key")
    @classmethod
    def strip_credentials(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("max_courses_per_term")
    @classmethod
    def check_max_courses(cls, value: int) -> int:
        if value not in MAX_COURSES_CHOICES:
            raise ValueError(f"must be one of {MAX_COURSES_CHOICES}")
        return value

    @classmethod
    def from_config(cls, config: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> "ImportSettings":
        """
        Build settings from the application config, applying non-empty overrides.

        Args:
            config: Application configuration dict (see config.config)
            overrides: Values supplied by the form or the command line

        Returns:
            Validated ImportSettings
        """
        values = {
            "supabase_url": config["supabase"]["url"],
            "supabase_key": config["supabase"]["key"],
            "api_key": config["golf_api"]["api_key"],
            "api_base_url": config["golf_api"]["base_url"],
            "api_timeout_seconds": config["golf_api"]["timeout_seconds"],
            "max_courses_per_term": config["importer"]["max_courses_per_term"],
            "delay_seconds": config["importer"]["delay_seconds"],
        }
        for key, value in (overrides or {}).items():
            if value is not None and value != "":
                values[key] = value
        return cls(**values)
