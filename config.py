"""Process-wide settings for the contact mailer."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SES_REGION = "ap-northeast-1"


class Settings(BaseSettings):
    """Settings read once from the environment (and `.env`) at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # AWS SES
    SES_REGION: Optional[str] = None
    AWS_REGION: Optional[str] = None
    SES_FROM_EMAIL: Optional[str] = None  # Verified sender address
    SES_TO_EMAIL: Optional[str] = None  # Default contact form recipient

    # Logfire
    LOGFIRE_WRITE_TOKEN: Optional[str] = None
    LOGFIRE_INSTRUMENT: bool = False

    # Server
    SERVICE_NAME: str = "contact-mailer"
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8000

    @property
    def ses_region(self) -> str:
        return self.SES_REGION or self.AWS_REGION or DEFAULT_SES_REGION


@lru_cache
def get_settings() -> Settings:
    return Settings()
