"""Copy context schemas — what is being written, for whom, and how."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator

from schemas.project import ConfigRecord, coerce_text_list

DEFAULT_COPY_TYPE = "outro"


def default_copy_type(value: Any) -> Any:
    """Validator helper: a missing/null copy type becomes "outro"; "" is kept."""
    return DEFAULT_COPY_TYPE if value is None else value


def coerce_style_tags(value: Any) -> list[str]:
    """Validator helper: split a comma string, trim, drop blanks.

    Style tags are user-chosen codes, not pasted lists, so they are kept
    verbatim otherwise. Unknown tags must reach the prompt unchanged.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple)):
        value = [value]
    tags = (str(item).strip() for item in value if item is not None)
    return [tag for tag in tags if tag]


class Demographics(ConfigRecord):
    age_range: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None
    income_level: Optional[str] = None
    education_level: Optional[str] = None


class AudienceSegment(ConfigRecord):
    segment_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("segment_name", "name")
    )
    description: Optional[str] = None
    demographics: Optional[Demographics] = None
    pain_points: list[str] = Field(default_factory=list)
    desires: list[str] = Field(default_factory=list)

    @field_validator("pain_points", "desires", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return coerce_text_list(value)


class Offer(ConfigRecord):
    offer_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("offer_name", "name")
    )
    description: Optional[str] = Field(
        None, validation_alias=AliasChoices("description", "short_description")
    )
    value_proposition: Optional[str] = None
    main_benefit: Optional[str] = None
    secondary_benefits: list[str] = Field(default_factory=list)
    differentials: list[str] = Field(default_factory=list)

    @field_validator("secondary_benefits", "differentials", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return coerce_text_list(value)


class CopyContext(ConfigRecord):
    """Everything the copy compiler needs about a single copy.

    ``copy_type`` falls back to "outro" when the caller leaves it out (or sends
    null). An explicit empty string is kept, which suppresses the type section.
    """

    copy_type: str = Field(
        DEFAULT_COPY_TYPE, validation_alias=AliasChoices("copy_type", "copyType")
    )
    framework: Optional[str] = None
    audience: Optional[AudienceSegment] = Field(
        None, validation_alias=AliasChoices("audience", "audienceSegment")
    )
    offer: Optional[Offer] = None
    objective: Optional[str] = None
    styles: list[str] = Field(default_factory=list)
    emotional_focus: Optional[str] = Field(
        None, validation_alias=AliasChoices("emotional_focus", "emotionalFocus")
    )

    @field_validator("copy_type", mode="before")
    @classmethod
    def _default_copy_type(cls, value: Any) -> Any:
        return default_copy_type(value)

    @field_validator("styles", mode="before")
    @classmethod
    def _coerce_styles(cls, value: Any) -> list[str]:
        return coerce_style_tags(value)
