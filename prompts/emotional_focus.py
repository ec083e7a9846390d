"""Emotional focus descriptors — the emotion the copy leans on."""

EMOTIONAL_FOCUS_DESCRIPTIONS: dict[str, str] = {
    "dor": (
        "Foco na dor: conduza a copy a partir do sofrimento atual do leitor. "
        "Nomeie a dor com precisão, mostre que você a entende melhor do que ninguém e evidencie o custo de continuar nela. "
        "A solução aparece como alívio, sem exagerar o drama a ponto de perder credibilidade."
    ),
    "desejo": (
        "Foco no desejo: conduza a copy a partir do que o leitor mais quer conquistar. "
        "Pinte o resultado desejado com detalhes concretos e emocionais, deixando claro que ele é alcançável. "
        "O produto é o caminho mais curto até esse desejo."
    ),
    "transformacao": (
        "Foco na transformação: conduza a copy pelo contraste entre quem o leitor é hoje e quem ele pode se tornar. "
        "Mostre a jornada, os marcos do caminho e a nova identidade do leitor depois da mudança. "
        "Use histórias de antes e depois como prova."
    ),
    "prevencao": (
        "Foco na prevenção: conduza a copy a partir do risco de algo ruim acontecer no futuro. "
        "Mostre de forma crível o que está em jogo e como agir agora evita perdas maiores. "
        "Transmita segurança e controle, não pânico."
    ),
}

EMOTIONAL_FOCUS_ALIASES: dict[str, str] = {
    "pain": "dor",
    "desire": "desejo",
    "transformation": "transformacao",
    "prevention": "prevencao",
}
