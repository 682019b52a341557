import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from publish_core.packaging.models import Category

LANGUAGE_CODE_RE = re.compile(r"[a-z]{2}(-[a-z]{2})?", re.IGNORECASE)


class Monetization(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    LIMITED = "limited"


class UploadRequest(BaseModel):
    """Validated categorical inputs for one upload. Enum fields are stored as plain strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )

    category: Category = Category.TECH
    language: str = Field(default="en", min_length=2, max_length=7)
    monetization: Monetization = Monetization.ENABLED
    schedule_time: Optional[str] = None

    @field_validator("language")
    @classmethod
    def check_language_code(cls, value: str) -> str:
        if not LANGUAGE_CODE_RE.fullmatch(value):
            raise ValueError("Use ISO language code like en or en-US")
        return value

    @field_validator("schedule_time")
    @classmethod
    def strip_schedule(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None


class MediaSource(BaseModel):
    """A seekable binary stream plus the label keywords are derived from."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label: str
    stream: Any
    mimetype: str = "application/octet-stream"

    def close(self) -> None:
        self.stream.close()
