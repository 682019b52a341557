from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class Visibility(str, Enum):
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class PublishDirective(BaseModel):
    """Resolved visibility, timing and audience decision for one upload."""

    model_config = ConfigDict(frozen=True)

    visibility: Visibility
    age_restricted: bool
    publish_at: Optional[datetime] = None

    @model_validator(mode="after")
    def publish_at_only_when_private(self) -> "PublishDirective":
        if (self.publish_at is not None) != (self.visibility is Visibility.PRIVATE):
            raise ValueError("publish_at must be set exactly when visibility is private")
        return self


class PublishRequest(BaseModel):
    """Everything the publish collaborator needs besides the media bytes."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    tags: Tuple[str, ...]
    classification_code: str
    language: str
    directive: PublishDirective


class PublishResult(BaseModel):
    external_id: str
    external_url: str
    scheduled_publish_at: Optional[str] = None


class UploadSummary(BaseModel):
    """Result handed back to the caller; dumps with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    tags: Tuple[str, ...]
    hashtags: Tuple[str, ...]
    thumbnail_prompt: str
    scheduled_publish_at: Optional[str] = None
    external_id: Optional[str] = None
    external_url: Optional[str] = None
