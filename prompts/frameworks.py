"""Rhetorical framework descriptors — the structure the copy must follow."""

FRAMEWORK_DESCRIPTIONS: dict[str, str] = {
    "aida": (
        "AIDA (Atenção, Interesse, Desejo, Ação): abra capturando a atenção com uma promessa ou provocação forte. "
        "Em seguida gere interesse mostrando por que o assunto importa para o leitor agora. "
        "Construa desejo com benefícios concretos, prova e a imagem do resultado alcançado. "
        "Finalize com uma ação única, clara e fácil de executar."
    ),
    "pas": (
        "PAS (Problema, Agitação, Solução): comece nomeando o problema exatamente como o leitor o sente, com as palavras dele. "
        "Agite o problema mostrando as consequências de não resolvê-lo e o custo emocional e financeiro de continuar igual. "
        "Só então apresente a solução como o alívio natural para essa tensão, explicando por que ela funciona onde outras falharam."
    ),
    "fab": (
        "FAB (Características, Vantagens, Benefícios): para cada característica relevante do produto, explique a vantagem "
        "que ela proporciona e traduza essa vantagem no benefício final na vida do cliente. "
        "Nunca pare na característica técnica; o leitor precisa enxergar o que ganha. "
        "Ordene do benefício mais desejado para o menos desejado."
    ),
    "4ps": (
        "4Ps (Imagem, Promessa, Prova, Proposta): pinte uma imagem vívida da situação desejada para o leitor se enxergar nela. "
        "Faça uma promessa específica de como o produto leva até essa imagem. "
        "Sustente a promessa com provas: depoimentos, números, demonstrações ou autoridade. "
        "Feche com um empurrão final: a proposta irrecusável e o motivo para agir agora."
    ),
    "quest": (
        "QUEST (Qualificar, Entender, Educar, Estimular, Transicionar): qualifique o leitor logo no início, deixando claro para quem é a mensagem. "
        "Demonstre que entende a situação dele com empatia e detalhes reais. "
        "Eduque sobre a causa do problema e o caminho para resolvê-lo. "
        "Estimule o desejo pela solução e transicione o leitor de interessado para comprador com uma chamada direta."
    ),
    "bab": (
        "BAB (Antes, Depois, Ponte): descreva o mundo do leitor hoje, com a dor e as limitações do 'antes'. "
        "Mostre o 'depois': como a vida fica quando o problema está resolvido. "
        "Apresente o produto como a ponte entre os dois estados, explicando o caminho de forma simples e crível."
    ),
    "pastor": (
        "PASTOR (Problema, Amplificação, História, Transformação, Oferta, Resposta): identifique o problema, "
        "amplifique o custo de não resolvê-lo e conte uma história real de quem passou por isso. "
        "Mostre a transformação alcançada com testemunhos e provas, apresente a oferta em detalhes "
        "e peça uma resposta clara e imediata do leitor."
    ),
}

FRAMEWORK_ALIASES: dict[str, str] = {
    "problem_agitate_solve": "pas",
    "features_advantages_benefits": "fab",
    "4p": "4ps",
    "ippp": "4ps",
    "image_promise_proof_push": "4ps",
    "before_after_bridge": "bab",
}
