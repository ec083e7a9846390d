"""Project prompt compiler.

prompt_project = identity section + methodology section. Either section is
left out when its record is missing or empty; with both empty the result is
an empty string.
"""

from __future__ import annotations

import logging
from typing import Any

from schemas.project import ProjectIdentity, ProjectMethodology

logger = logging.getLogger(__name__)

IDENTITY_TITLE = "## IDENTIDADE DO PROJETO"
METHODOLOGY_TITLE = "## METODOLOGIA E MECANISMO ÚNICO"

# (field, label) in output order
METHODOLOGY_FIELDS: list[tuple[str, str]] = [
    ("name", "Nome da Metodologia"),
    ("tese_central", "Tese Central"),
    ("mecanismo_primario", "Mecanismo Primário (Mecanismo Único)"),
    ("por_que_funciona", "Por Que Funciona"),
    ("erro_invisivel", "Erro Invisível"),
    ("diferenciacao", "Diferenciação"),
    ("principios_fundamentos", "Princípios e Fundamentos"),
    ("etapas_metodo", "Etapas do Método"),
    ("transformacao_real", "Transformação Real"),
    ("prova_funcionamento", "Prova de Funcionamento"),
]


def _identity_section(identity: ProjectIdentity) -> str:
    lines = []
    if identity.brand_name:
        lines.append(f"Nome da marca: {identity.brand_name}")
    if identity.central_purpose:
        lines.append(f"Propósito central: {identity.central_purpose}")
    if identity.sector:
        lines.append(f"Setor: {identity.sector}")
    if identity.brand_personality:
        lines.append(f"Personalidade da marca: {', '.join(identity.brand_personality)}")
    if identity.voice_tones:
        lines.append(f"Tons de voz: {', '.join(identity.voice_tones)}")
    if identity.keywords:
        lines.append(f"Palavras-chave: {', '.join(identity.keywords)}")

    if not lines:
        return ""
    return IDENTITY_TITLE + "\n" + "\n".join(lines)


def _methodology_section(methodology: ProjectMethodology) -> str:
    paragraphs = []
    for field, label in METHODOLOGY_FIELDS:
        value = getattr(methodology, field)
        if value:
            paragraphs.append(f"**{label}:**\n{value}")

    if not paragraphs:
        return ""
    return METHODOLOGY_TITLE + "\n\n" + "\n\n".join(paragraphs)


def build_project_prompt(
    identity: ProjectIdentity | None = None,
    methodology: ProjectMethodology | None = None,
) -> str:
    """Compile brand identity + methodology into the project prompt block."""
    sections = []
    if identity is not None:
        sections.append(_identity_section(identity))
    if methodology is not None:
        sections.append(_methodology_section(methodology))
    return "\n\n".join(s for s in sections if s)


# ---------------------------------------------------------------------------
# Extraction from a stored project row
# ---------------------------------------------------------------------------

_IDENTITY_COLUMNS = (
    "brand_name",
    "central_purpose",
    "sector",
    "brand_personality",
    "voice_tones",
    "keywords",
)


def extract_project_identity(project: dict[str, Any] | None) -> ProjectIdentity | None:
    """Build a ProjectIdentity from a `projects` row, or None if it has no identity data."""
    if not project:
        return None
    data = {col: project.get(col) for col in _IDENTITY_COLUMNS}
    if not any(data.values()):
        return None
    return ProjectIdentity.model_validate(data)


def extract_project_methodology(project: dict[str, Any] | None) -> ProjectMethodology | None:
    """Build a ProjectMethodology from the row's `methodology` JSON column."""
    if not project or not isinstance(project.get("methodology"), dict):
        return None
    methodology = ProjectMethodology.model_validate(project["methodology"])
    if not methodology.has_content():
        return None
    return methodology
