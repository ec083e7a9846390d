"""System prompt generation — request / result / HTTP envelopes.

The request mirrors the JSON the copy editor sends (camelCase keys); snake_case
keys are accepted as well.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from schemas.copy_context import (
    DEFAULT_COPY_TYPE,
    AudienceSegment,
    CopyContext,
    Offer,
    coerce_style_tags,
    default_copy_type,
)
from schemas.project import ConfigRecord, ProjectIdentity, ProjectMethodology


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class GenerateSystemPromptRequest(ConfigRecord):
    copy_type: str = Field(DEFAULT_COPY_TYPE, validation_alias=_alias("copyType", "copy_type"))
    framework: Optional[str] = None
    objective: Optional[str] = None
    styles: list[str] = Field(default_factory=list)
    emotional_focus: Optional[str] = Field(
        None, validation_alias=_alias("emotionalFocus", "emotional_focus")
    )
    project_identity: Optional[ProjectIdentity] = Field(
        None, validation_alias=_alias("projectIdentity", "project_identity")
    )
    methodology: Optional[ProjectMethodology] = Field(
        None, validation_alias=_alias("methodology", "projectMethodology", "project_methodology")
    )
    audience_segment: Optional[AudienceSegment] = Field(
        None, validation_alias=_alias("audienceSegment", "audience_segment")
    )
    offer: Optional[Offer] = None
    copy_id: Optional[str] = Field(None, validation_alias=_alias("copyId", "copy_id"))
    project_id: Optional[str] = Field(None, validation_alias=_alias("projectId", "project_id"))
    platform: Optional[str] = None

    @field_validator("copy_type", mode="before")
    @classmethod
    def _default_copy_type(cls, value: Any) -> Any:
        return default_copy_type(value)

    @field_validator("styles", mode="before")
    @classmethod
    def _coerce_styles(cls, value: Any) -> list[str]:
        return coerce_style_tags(value)

    def to_copy_context(self) -> CopyContext:
        return CopyContext(
            copy_type=self.copy_type,
            framework=self.framework,
            audience=self.audience_segment,
            offer=self.offer,
            objective=self.objective,
            styles=self.styles,
            emotional_focus=self.emotional_focus,
        )


class GeneratedSystemPrompt(BaseModel):
    """The artifact returned to the caller and persisted against ``copy_id``."""

    system_prompt: str
    context_hash: str
    model: str
    timestamp: str
    used_fallback: bool = False
    copy_id: Optional[str] = None

    def to_response(self) -> dict[str, Any]:
        return {
            "success": True,
            "systemPrompt": self.system_prompt,
            "contextHash": self.context_hash,
            "model": self.model,
            "timestamp": self.timestamp,
        }

    def to_storage_row(self) -> dict[str, Any]:
        return {
            "generated_system_prompt": self.system_prompt,
            "system_prompt_context_hash": self.context_hash,
            "system_prompt_generated_at": self.timestamp,
            "system_prompt_model": self.model,
        }


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    fallback: bool = True
