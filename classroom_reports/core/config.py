from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Read-only: the app never writes back to Classroom.
SCOPES = [
    "https://www.googleapis.com/auth/classroom.courses.readonly",
    "https://www.googleapis.com/auth/classroom.rosters.readonly",
    "https://www.googleapis.com/auth/classroom.coursework.students.readonly",
    "https://www.googleapis.com/auth/classroom.profile.emails",
    "https://www.googleapis.com/auth/classroom.profile.photos",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLASSROOM_REPORTS_",
        extra="ignore",
    )

    app_name: str = "Classroom Reports"
    debug: bool = False
    log_level: str = "INFO"

    # Service-account key; falls back to application default credentials when unset.
    google_credentials_file: Optional[Path] = None
    # Teacher account impersonated through domain-wide delegation.
    google_delegated_user: Optional[str] = None

    page_size: Optional[int] = None
    allowed_origins: List[str] = []


@lru_cache
def get_settings() -> Settings:
    return Settings()
