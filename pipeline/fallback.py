"""Local fallback system prompt.

Used when the model answers with nothing usable. Built only from the
compiled context, with no network access, so it always succeeds.
"""

from __future__ import annotations

import config

FALLBACK_HEADER = (
    "Você é um copywriter especialista em copy de alta conversão, escrevendo em português brasileiro. "
    "Use o contexto abaixo como fonte única de verdade sobre a marca, o público, a oferta e o formato da copy."
)

FALLBACK_RULES = """# REGRAS
- Siga a identidade, a metodologia e o tom de voz descritos no contexto, quando presentes.
- Respeite o tipo de copy, a estrutura, o objetivo, os estilos e o foco emocional indicados.
- Fale diretamente com o público-alvo, usando as dores e os desejos descritos.
- Nunca invente dados, números, depoimentos, preços ou garantias que não estejam no contexto.
- Organize a copy em sessões e blocos (headline, subheadline, texto, lista, botão), usando apenas os blocos que fizerem sentido.
- Termine com uma chamada para ação clara."""


def build_fallback_system_prompt(context: str, max_context_chars: int | None = None) -> str:
    """Deterministic system prompt wrapping the first N chars of the context."""
    limit = config.FALLBACK_CONTEXT_CHARS if max_context_chars is None else max_context_chars
    excerpt = (context or "").strip()[:limit]
    parts = [FALLBACK_HEADER]
    if excerpt:
        parts.append(f"# CONTEXTO\n{excerpt}")
    parts.append(FALLBACK_RULES)
    return "\n\n".join(parts)
