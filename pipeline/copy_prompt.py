"""Copy prompt compiler.

prompt_copy = type + structure + audience + offer + objective + styles +
emotional focus, always in that order. Every section except the copy type is
optional, and a section that would render no lines is dropped entirely.
"""

from __future__ import annotations

from pipeline.descriptors import (
    describe_copy_type,
    describe_emotional_focus,
    describe_framework,
    describe_objective,
    describe_style,
)
from schemas.copy_context import AudienceSegment, CopyContext, Demographics, Offer

COPY_TYPE_TITLE = "## TIPO DE COPY"
FRAMEWORK_TITLE = "## ESTRUTURA"
AUDIENCE_TITLE = "## PÚBLICO-ALVO"
OFFER_TITLE = "## OFERTA"
OBJECTIVE_TITLE = "## OBJETIVO"
STYLES_TITLE = "## ESTILOS"
EMOTIONAL_FOCUS_TITLE = "## FOCO EMOCIONAL"

SECTION_ORDER = [
    COPY_TYPE_TITLE,
    FRAMEWORK_TITLE,
    AUDIENCE_TITLE,
    OFFER_TITLE,
    OBJECTIVE_TITLE,
    STYLES_TITLE,
    EMOTIONAL_FOCUS_TITLE,
]

STYLE_SEPARATOR = "\n\n---\n\n"


def _section(title: str, body: str) -> str:
    return f"{title}\n{body}" if body else ""


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def format_demographics(demographics: Demographics) -> str:
    """Comma-joined 'Label: value' pairs for the demographic fields present."""
    parts = []
    if demographics.age_range:
        parts.append(f"Faixa etária: {demographics.age_range}")
    if demographics.gender:
        parts.append(f"Gênero: {demographics.gender}")
    if demographics.location:
        parts.append(f"Localização: {demographics.location}")
    if demographics.income_level:
        parts.append(f"Nível de renda: {demographics.income_level}")
    if demographics.education_level:
        parts.append(f"Escolaridade: {demographics.education_level}")
    return ", ".join(parts)


def _audience_body(audience: AudienceSegment) -> str:
    lines = []
    if audience.segment_name:
        lines.append(f"Segmento: {audience.segment_name}")
    if audience.description:
        lines.append(f"Descrição: {audience.description}")
    if audience.demographics:
        demographics = format_demographics(audience.demographics)
        if demographics:
            lines.append(f"Demografia: {demographics}")
    if audience.pain_points:
        lines.append(f"Dores:\n{_bullets(audience.pain_points)}")
    if audience.desires:
        lines.append(f"Desejos:\n{_bullets(audience.desires)}")
    return "\n".join(lines)


def _offer_body(offer: Offer) -> str:
    lines = []
    if offer.offer_name:
        lines.append(f"Nome: {offer.offer_name}")
    if offer.description:
        lines.append(f"Descrição: {offer.description}")
    if offer.value_proposition:
        lines.append(f"Proposta de valor: {offer.value_proposition}")
    if offer.main_benefit:
        lines.append(f"Benefício principal: {offer.main_benefit}")
    if offer.secondary_benefits:
        lines.append(f"Benefícios secundários:\n{_bullets(offer.secondary_benefits)}")
    if offer.differentials:
        lines.append(f"Diferenciais:\n{_bullets(offer.differentials)}")
    return "\n".join(lines)


def build_copy_prompt(context: CopyContext) -> str:
    """Compile a CopyContext into the copy prompt block."""
    sections = []

    if context.copy_type:
        sections.append(_section(COPY_TYPE_TITLE, describe_copy_type(context.copy_type)))

    if context.framework:
        sections.append(_section(FRAMEWORK_TITLE, describe_framework(context.framework)))

    if context.audience:
        sections.append(_section(AUDIENCE_TITLE, _audience_body(context.audience)))

    if context.offer:
        sections.append(_section(OFFER_TITLE, _offer_body(context.offer)))

    if context.objective:
        sections.append(_section(OBJECTIVE_TITLE, describe_objective(context.objective)))

    if context.styles:
        styles = STYLE_SEPARATOR.join(describe_style(s) for s in context.styles)
        sections.append(_section(STYLES_TITLE, styles))

    if context.emotional_focus:
        sections.append(
            _section(EMOTIONAL_FOCUS_TITLE, describe_emotional_focus(context.emotional_focus))
        )

    return "\n\n".join(s for s in sections if s)
