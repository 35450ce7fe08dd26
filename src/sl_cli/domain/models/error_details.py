"""API error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """What an SL API answered when a call failed."""

    model_config = ConfigDict(frozen=True)

    action: str
    status_code: int
    reason: str
    url: str | None = None
    body_excerpt: str | None = None
