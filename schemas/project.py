"""Project schemas — brand identity and methodology.

Both records are fully optional: a project may have filled in any subset of
fields, and an empty record contributes nothing to the compiled prompt.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pipeline.list_sanitizer import sanitize_list_content


def coerce_text_list(value: Any) -> list[str]:
    """Validator helper: accept a list or a pasted string for list fields."""
    if value is None:
        return []
    return sanitize_list_content(value, min_item_length=1)


class ConfigRecord(BaseModel):
    """Base for loosely-filled configuration records coming from the UI."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        str_strip_whitespace=True,
    )

    def has_content(self) -> bool:
        """True if at least one field carries a value."""
        for value in self.__dict__.values():
            if isinstance(value, ConfigRecord):
                if value.has_content():
                    return True
            elif value:
                return True
        return False


class ProjectIdentity(ConfigRecord):
    brand_name: Optional[str] = None
    central_purpose: Optional[str] = None
    sector: Optional[str] = None
    brand_personality: list[str] = Field(default_factory=list)
    voice_tones: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)

    @field_validator("brand_personality", "voice_tones", "keywords", mode="before")
    @classmethod
    def _coerce_lists(cls, value: Any) -> list[str]:
        return coerce_text_list(value)


class ProjectMethodology(ConfigRecord):
    """The business mechanism behind the project (its 'method')."""

    name: Optional[str] = None
    tese_central: Optional[str] = Field(None, description="Core thesis")
    mecanismo_primario: Optional[str] = Field(None, description="Unique mechanism")
    por_que_funciona: Optional[str] = Field(None, description="Why it works")
    erro_invisivel: Optional[str] = Field(
        None, description="Invisible mistake the audience keeps making"
    )
    diferenciacao: Optional[str] = None
    principios_fundamentos: Optional[str] = None
    etapas_metodo: Optional[str] = None
    transformacao_real: Optional[str] = None
    prova_funcionamento: Optional[str] = None

    @field_validator(
        "principios_fundamentos", "etapas_metodo", "prova_funcionamento", mode="before"
    )
    @classmethod
    def _join_lists(cls, value: Any) -> Any:
        # Older projects stored these as arrays
        if isinstance(value, (list, tuple)):
            return "\n".join(f"- {item}" for item in coerce_text_list(value))
        return value
