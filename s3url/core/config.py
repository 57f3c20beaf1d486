from functools import lru_cache

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from s3url.schemas.request import DEFAULT_DURATION_MINUTES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_duration: int = Field(default=DEFAULT_DURATION_MINUTES, gt=0, alias="S3URL_DURATION")

    # Credentials are left to the boto3 chain (profile, env, instance role).
    s3_endpoint: HttpUrl | None = Field(default=None, alias="S3_ENDPOINT_URL")
    s3_region: str | None = Field(default=None, alias="S3_REGION")

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
