from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DURATION_MINUTES = 5


class PresignRequest(BaseModel):
    """Everything one invocation needs: the object, how long, and how to reach it."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)
    duration_minutes: int = Field(default=DEFAULT_DURATION_MINUTES, gt=0)
    profile: str | None = None
    upload_path: Path | None = None

