"""Copy type descriptors — how the copywriter should behave per deliverable.

Keys are the copy type codes stored on a copy (`copies.copy_type`).
"""

COPY_TYPE_DESCRIPTIONS: dict[str, str] = {
    "landing_page": (
        "Landing Page: página de conversão focada em UMA única ação (cadastro, compra ou agendamento). "
        "Abra com uma headline que entregue a promessa principal em até 12 palavras e use a subheadline "
        "para especificar para quem é e em quanto tempo o resultado acontece. "
        "Organize o corpo em blocos escaneáveis: problema, solução, benefícios em lista, prova social, "
        "quebra de objeções e garantia. Repita a chamada para ação ao longo da página, sempre com o mesmo verbo, "
        "e elimine qualquer link ou assunto que desvie o leitor da conversão."
    ),
    "anuncio": (
        "Anúncio: copy para mídia paga que precisa parar a rolagem em até 3 segundos. "
        "A primeira linha é o gancho: provocação, pergunta específica ou benefício direto, nunca uma apresentação da marca. "
        "Mantenha o texto curto, com uma ideia por frase e no máximo um benefício central por variação. "
        "Para artes e criativos de imagem, limite-se a headline de até 8 palavras, subheadline de até 12 e CTA de até 4. "
        "Feche sempre com uma chamada para ação imperativa e clara."
    ),
    "vsl": (
        "Video Sales Letter (VSL): roteiro falado de vendas em vídeo, escrito para ser lido em voz alta. "
        "Comece com um gancho forte nos primeiros 10 segundos que prometa uma revelação ou resultado específico. "
        "Conduza a narrativa por história pessoal, descoberta do mecanismo, prova, apresentação da oferta, "
        "empilhamento de valor, garantia e chamada final. "
        "Use frases curtas, ritmo de conversa e transições que mantenham a retenção, evitando jargões que soem como texto lido."
    ),
    "email": (
        "E-mail: comunicação direta e pessoal, escrita como uma mensagem de uma pessoa para outra. "
        "O assunto e a primeira linha decidem a abertura: use curiosidade ou benefício específico, sem caixa alta excessiva. "
        "Desenvolva UMA ideia central por e-mail, em parágrafos curtos e escaneáveis. "
        "Termine com um único CTA claro e, quando fizer sentido, um P.S. que reforce a urgência ou o benefício principal."
    ),
    "webinar": (
        "Webinar: roteiro e materiais de apresentação online ao vivo ou gravada. "
        "Estruture em abertura com promessa do que será aprendido, agenda clara, conteúdo em três a cinco "
        "ensinamentos de valor real, transição natural para a oferta e sessão de perguntas e respostas. "
        "O conteúdo deve educar e gerar autoridade antes de vender; cada ensinamento precisa quebrar uma crença "
        "que impede a compra. Inclua momentos de interação com a audiência."
    ),
    "conteudo": (
        "Conteúdo: post, artigo ou legenda de valor educativo para redes sociais ou blog. "
        "Priorize entregar valor genuíno antes de qualquer venda: ensine, provoque reflexão ou entretenha. "
        "Use um título ou primeira linha que gere curiosidade, desenvolva o tema com exemplos concretos "
        "e use listas quando houver passos, dicas ou conceitos múltiplos. "
        "Respeite o limite de caracteres da plataforma e termine com um convite à interação."
    ),
    "mensagem": (
        "Mensagem: texto para WhatsApp, Telegram ou direct, lido no celular em poucos segundos. "
        "Seja minimalista e conversacional: frases curtas, tom próximo, como quem fala com um conhecido. "
        "Evite blocos longos, formatação pesada e linguagem publicitária. "
        "Uma mensagem deve ter um único objetivo e terminar com uma pergunta ou ação simples de responder."
    ),
    "outro": (
        "Outro tipo de copy: formato livre definido pelo usuário. "
        "Identifique pelo contexto fornecido qual é o canal e o objetivo do texto e adapte estrutura, "
        "tamanho e tom a eles. Na dúvida, escreva de forma clara, persuasiva e escaneável, "
        "com uma promessa principal, desenvolvimento objetivo e uma chamada para ação explícita."
    ),
}

COPY_TYPE_ALIASES: dict[str, str] = {
    "landing": "landing_page",
    "lp": "landing_page",
    "sales_page": "landing_page",
    "ad": "anuncio",
    "ads": "anuncio",
    "video_sales_letter": "vsl",
    "video_script": "vsl",
    "e_mail": "email",
    "content": "conteudo",
    "blog_post": "conteudo",
    "social_post": "conteudo",
    "message": "mensagem",
    "direct_message": "mensagem",
    "dm": "mensagem",
    "other": "outro",
}
