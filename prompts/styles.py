"""Style descriptors — tone and texture. A copy can combine several styles."""

STYLE_DESCRIPTIONS: dict[str, str] = {
    "storytelling": (
        "Storytelling: conduza a mensagem por meio de uma narrativa com personagem, conflito e virada. "
        "Use detalhes sensoriais e momentos concretos para que o leitor se veja na história. "
        "A lição ou o produto surge como consequência natural da trama, nunca como interrupção."
    ),
    "polemico": (
        "Polêmico e disruptivo: desafie crenças estabelecidas do mercado e diga o que ninguém tem coragem de dizer. "
        "Use afirmações fortes e contraintuitivas, sempre sustentadas por argumentos. "
        "Provoque sem ofender pessoas e sem prometer o que não pode ser cumprido."
    ),
    "aspiracional": (
        "Aspiracional e luxo: escreva para o desejo de status, exclusividade e sofisticação. "
        "Use vocabulário elegante, frases mais pausadas e imagens de um estilo de vida desejado. "
        "Nunca fale de preço como barato; fale de valor, exclusividade e pertencimento."
    ),
    "urgente": (
        "Urgente e alarmista: transmita que a janela de ação é curta e que esperar tem um custo real. "
        "Use prazos, escassez legítima e consequências concretas de adiar a decisão. "
        "Frases curtas e verbos no imperativo; a urgência precisa ser verdadeira para não destruir a confiança."
    ),
    "cientifico": (
        "Científico e baseado em dados: sustente cada afirmação com números, estudos, estatísticas ou métricas. "
        "Explique o mecanismo de funcionamento com precisão e linguagem acessível. "
        "Prefira dados específicos a adjetivos e cite a origem das evidências sempre que possível."
    ),
    "conversacional": (
        "Conversacional: escreva como se estivesse conversando com um amigo, usando 'você' e frases naturais. "
        "Evite jargão corporativo e construções formais. "
        "Faça perguntas, use expressões do dia a dia e mantenha o ritmo leve e próximo."
    ),
    "mistico": (
        "Místico e espiritual: use linguagem de propósito, energia, conexão e transformação interior. "
        "Trate a jornada do leitor como um despertar e o produto como parte desse caminho. "
        "Mantenha respeito e sensibilidade, sem fazer promessas de cura ou resultados sobrenaturais."
    ),
}

STYLE_ALIASES: dict[str, str] = {
    "story": "storytelling",
    "controverso": "polemico",
    "disruptivo": "polemico",
    "luxo": "aspiracional",
    "alarmista": "urgente",
    "urgencia": "urgente",
    "dados": "cientifico",
    "data_driven": "cientifico",
    "casual": "conversacional",
    "espiritual": "mistico",
}
