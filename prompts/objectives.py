"""Objective descriptors — the outcome the copy has to produce."""

OBJECTIVE_DESCRIPTIONS: dict[str, str] = {
    "venda_direta": (
        "Venda direta: o único objetivo é converter o leitor em comprador agora. "
        "Toda frase deve aproximar da decisão de compra: apresente a oferta com clareza, empilhe valor, "
        "antecipe e derrube objeções, use garantia para reverter o risco e crie um motivo legítimo para agir imediatamente. "
        "O CTA é de compra, explícito e repetido."
    ),
    "geracao_leads": (
        "Geração de leads: o objetivo é capturar o contato do leitor em troca de algo de valor. "
        "Destaque o benefício imediato da isca (material, aula, diagnóstico) e reduza ao mínimo a fricção do cadastro. "
        "Não tente vender o produto principal; venda apenas o próximo passo."
    ),
    "engajamento": (
        "Engajamento e viralidade: o objetivo é gerar comentários, compartilhamentos e salvamentos. "
        "Use temas que provoquem identificação ou opinião, ganchos fortes e perguntas abertas. "
        "Escreva algo que o leitor queira mostrar para alguém e termine convidando explicitamente à interação."
    ),
    "educacao": (
        "Educação: o objetivo é ensinar algo útil e posicionar a marca como autoridade. "
        "Explique conceitos com clareza, use exemplos práticos e passos acionáveis. "
        "A venda, se houver, é sutil e vem como consequência natural do conhecimento entregue."
    ),
    "retencao": (
        "Retenção: o objetivo é manter clientes atuais satisfeitos e ativos. "
        "Reforce o valor que eles já recebem, celebre conquistas, ensine a extrair mais do produto "
        "e fortaleça o relacionamento. Evite tom de venda agressivo."
    ),
    "upsell": (
        "Upsell e cross-sell: o objetivo é levar um cliente atual a comprar algo a mais. "
        "Parta do resultado que ele já obteve e mostre como a oferta complementar acelera ou amplia esse resultado. "
        "Personalize a comunicação com base na compra anterior e deixe claro o benefício exclusivo para quem já é cliente."
    ),
    "reativacao": (
        "Reativação: o objetivo é trazer de volta clientes ou leads inativos. "
        "Reconheça o tempo afastado sem culpar o leitor, mostre o que mudou ou melhorou "
        "e ofereça um motivo concreto e fácil para retornar agora."
    ),
}

OBJECTIVE_ALIASES: dict[str, str] = {
    "venda": "venda_direta",
    "direct_sale": "venda_direta",
    "leads": "geracao_leads",
    "lead_generation": "geracao_leads",
    "engagement": "engajamento",
    "viralidade": "engajamento",
    "education": "educacao",
    "retention": "retencao",
    "cross_sell": "upsell",
    "reactivation": "reativacao",
}
