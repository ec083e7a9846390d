"""Social platform character limits.

When a copy of type "conteudo" targets a specific platform, a hard length
constraint is appended to the end of the system prompt so it takes priority
over softer style instructions.
"""

from __future__ import annotations

from typing import NamedTuple


class PlatformLimit(NamedTuple):
    max_chars: int
    label: str
    strict: bool


PLATFORM_LIMITS: dict[str, PlatformLimit] = {
    "x_twitter": PlatformLimit(280, "X (Twitter)", True),
    "threads": PlatformLimit(500, "Threads", True),
    "pinterest": PlatformLimit(500, "Pinterest", True),
    "instagram": PlatformLimit(2200, "Instagram", False),
    "linkedin": PlatformLimit(3000, "LinkedIn", False),
    "tiktok": PlatformLimit(4000, "TikTok", False),
    "youtube": PlatformLimit(5000, "YouTube", False),
    "facebook": PlatformLimit(63206, "Facebook", False),
}

PLATFORM_COPY_TYPES = {"conteudo"}

_RULE = "━" * 45


def _format_chars(n: int) -> str:
    # pt-BR thousands separator
    return f"{n:,}".replace(",", ".")


def build_platform_constraint(platform: str | None) -> str:
    """Return the constraint block for a known platform, or "" otherwise."""
    if not platform:
        return ""
    limit = PLATFORM_LIMITS.get(platform.strip().lower())
    if limit is None:
        return ""

    lines = [
        _RULE,
        f"⚠️ RESTRIÇÃO CRÍTICA DE PLATAFORMA: {limit.label}",
        _RULE,
        f"LIMITE MÁXIMO ABSOLUTO: {_format_chars(limit.max_chars)} caracteres",
        "",
        "REGRAS INVIOLÁVEIS:",
        f"- O texto final NÃO PODE exceder {limit.max_chars} caracteres (incluindo espaços e emojis)",
        "- Conte caracteres mentalmente durante a geração",
        "- Priorize IMPACTO sobre VOLUME",
        "- Se o conteúdo naturalmente excederia o limite, seja mais conciso",
    ]
    if limit.strict:
        lines += [
            "",
            f"⚠️ MODO ESTRITO ATIVADO (limite muito curto: {limit.max_chars} caracteres)",
            "- CADA PALAVRA deve ter propósito: elimine todo enchimento",
            "- Use frases de impacto, não parágrafos",
            "- Verbos fortes e diretos, sem construções passivas",
            "- Emojis contam como cerca de 2 caracteres cada",
            "- Se o conteúdo não couber, sugira dividir em múltiplos posts",
        ]
    lines.append(_RULE)
    return "\n".join(lines)


def applies_to(copy_type: str | None) -> bool:
    return bool(copy_type) and copy_type.strip().lower() in PLATFORM_COPY_TYPES
