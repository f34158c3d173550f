"""Pydantic models for gateway request/response types."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from imagegen_gateway.common.config import DEFAULT_MODEL


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GenerationRequest(_CamelModel):
    """Incoming generation call. ``prompt`` is checked by the gateway so a
    missing value is reported as "Prompt is required"."""
    prompt: str | None = None
    style: str = ""
    aspect_ratio: str = Field("square", alias="aspectRatio")
    quality: str = "standard"
    model: str | None = None

    @field_validator("style", "aspect_ratio", "quality", mode="before")
    @classmethod
    def _null_option_is_empty(cls, value: Any) -> Any:
        # null options contribute no clause
        return "" if value is None else value


class GenerationSettings(_CamelModel):
    style: str
    aspect_ratio: str = Field(alias="aspectRatio")
    quality: str
    model: str = DEFAULT_MODEL


class GenerationResult(_CamelModel):
    success: bool = True
    image_url: str = Field(alias="imageUrl")
    prompt: str
    original_prompt: str = Field(alias="originalPrompt")
    settings: GenerationSettings
    timestamp: int
