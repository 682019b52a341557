from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

CORE_PLACEHOLDER = "{core}"


class Category(str, Enum):
    TECH = "tech"
    VLOG = "vlog"
    SHORTS = "shorts"
    GAMING = "gaming"
    TUTORIAL = "tutorial"


class CategoryTemplate(BaseModel):
    """Fixed text fragments used to build metadata for one content category."""

    model_config = ConfigDict(frozen=True)

    title_frames: Tuple[str, ...] = Field(min_length=1)
    description_focus: Tuple[str, ...] = Field(min_length=1)
    thumbnail_scenes: Tuple[str, ...] = Field(min_length=1)
    classification_code: str  # YouTube categoryId

    @field_validator("title_frames")
    @classmethod
    def frames_have_placeholder(cls, frames: Tuple[str, ...]) -> Tuple[str, ...]:
        for frame in frames:
            if frame.count(CORE_PLACEHOLDER) != 1:
                raise ValueError(f"Title frame must contain exactly one {CORE_PLACEHOLDER}: {frame!r}")
        return frames


class CorePhrases(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str = ""


class SeoPackage(BaseModel):
    """Final SEO metadata for one upload."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(max_length=70)
    description: str = Field(min_length=1)
    tags: Tuple[str, ...] = Field(max_length=15)
    hashtags: Tuple[str, ...] = Field(max_length=5)
    thumbnail_prompt: str
