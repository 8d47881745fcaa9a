"""
Prompt templates.

Plain str.format templates, kept apart from the builder logic so wording can
change without touching prompt_builder. All templates are Portuguese except
THUMBNAIL_*, which are written in English for the image model.
"""

# =============================================================================
# Content (story / prayer)
# =============================================================================

CONTENT_HEADER = """Sua tarefa tem cinco regras ABSOLUTAS e OBRIGATÓRIAS.

REGRA 0 (IDIOMA): A resposta DEVE ser escrita inteiramente em {language_name}.
"""

STORY_RULES = """
REGRA 1 (FIDELIDADE BÍBLICA E EXPANSÃO NARRATIVA): Sua principal diretriz é a fidelidade bíblica. É INACEITÁVEL gerar uma história curta; você DEVE usar as seguintes técnicas para expandir a narrativa e atingir o comprimento solicitado na REGRA 3, fazendo isso EXCLUSIVAMENTE através de:
- **Elaboração Detalhada de Cenas:** Aprofunde CADA cena da história. Em vez de simplesmente narrar um evento, mergulhe nos detalhes. Descreva o cenário (o calor do sol, a textura da areia, os sons do mercado), as vestimentas, a atmosfera baseando-se no contexto histórico e geográfico da passagem.
- **Monólogo Interior Aprofundado:** Dedique parágrafos para explorar os pensamentos, emoções, medos e esperanças dos personagens BÍBLICOS. Infira esses sentimentos a partir de suas ações e do contexto da Escritura. O que Davi sentiu ao ver Golias? Qual a angústia de Jonas no ventre do peixe?
- **Ações Ricas em Detalhes:** Transforme ações simples (ex: 'ele caminhou') em descrições vívidas e prolongadas (ex: 'ele caminhou com passos firmes e hesitantes sobre a poeira da estrada, sentindo cada pedra sob suas sandálias gastas, enquanto o sol forte castigava seu rosto e o vento sussurrava dúvidas em seus ouvidos...').
- **Linguagem Sensorial Imersiva:** Descreva o que os personagens veem, ouvem, cheiram, provam e sentem. Faça o leitor se sentir presente na cena.
- **CRUCIALMENTE: NÃO INVENTE novos personagens, diálogos falados que não estão no texto, ou eventos que contradigam a passagem.** A precisão teológica é primordial, mas a profundidade da narrativa deve ser usada para alcançar o comprimento desejado.

REGRA 2 (ESTRUTURA NARRATIVA COMPLETA): É ABSOLUTAMENTE ESSENCIAL que o texto tenha uma narrativa completa, com um início, meio e fim claros e bem definidos.
- **Início:** Comece com uma introdução curta e cativante que desperte a curiosidade do leitor e estabeleça a cena ou o dilema inicial.
- **Meio:** Desenvolva a história de forma fluida, utilizando as técnicas de expansão da REGRA 1.
- **Fim:** A história DEVE ter uma conclusão satisfatória e com sentido. NÃO INTERROMPA A NARRATIVA abruptamente. O final deve fornecer uma resolução, uma lição ou um momento de reflexão que feche a história de forma coesa. A qualidade da conclusão é mais importante do que atingir a contagem exata de caracteres.
"""

PRAYER_RULES = """
REGRA 1 (PROFUNDIDADE E EXPANSÃO DA ORAÇÃO): Sua principal diretriz é criar uma oração sincera, profunda e teologicamente sólida. É INACEITÁVEL gerar uma oração curta; você DEVE usar as seguintes técnicas para expandir a oração e atingir o comprimento solicitado na REGRA 3:
- **Elaboração Detalhada de Temas:** Aprofunde CADA ponto da oração. Se o tema for gratidão, não diga apenas "obrigado pela família", mas descreva momentos específicos de alegria, o que cada membro significa, e a gratidão por sua saúde e união. Se for uma súplica por força, descreva a natureza do desafio, os sentimentos de fraqueza e a confiança específica na intervenção divina, baseando-se em promessas bíblicas.
- **Uso de Metáforas e Linguagem Poética:** Utilize linguagem rica e poética, inspirada nos Salmos. Por exemplo, em vez de "proteja-me", use "seja meu escudo e fortaleza, a rocha em que me firmo, a sombra que me abriga do calor da tribulação".
- **Referências Bíblicas Explícitas:** Incorpore referências ou alusões a passagens bíblicas que sustentem o tema da oração. Diga "Assim como guardaste Daniel na cova dos leões, guarda-me dos perigos que me cercam" ou "Que a Tua paz, que excede todo entendimento, inunde meu coração como prometido em Filipenses".
- **Estrutura Progressiva e Prolongada:** Desenvolve a oração em seções distintas e bem elaboradas. Dedique parágrafos separados para adoração, confissão, gratidão, súplicas e intercessões, concluindo com uma declaração de fé e confiança. Não apresse as transições.
- **CRUCIALMENTE: A oração deve ser respeitosa, reverente e alinhada com os princípios cristãos.**

REGRA 2 (ESTRUTURA COMPLETA DA ORAÇÃO): É ABSOLUTAMENTE ESSENCIAL que a oração seja uma peça completa, com início, meio e fim claros e bem definidos.
- **Início:** Comece com uma introdução curta e reverente, como uma invocação ou adoração, que estabeleça o tom da oração.
- **Meio:** Desenvolva o corpo da oração de forma fluida, abordando os temas de gratidão, súplica ou intercessão com a profundidade descrita na REGRA 1.
- **Fim:** A oração DEVE ter uma conclusão com sentido e que transmita um sentimento de encerramento. NÃO TERMINE A ORAÇÃO abruptamente. Finalize com uma declaração de fé, confiança, ou um "Amém" que se sinta natural e conclusivo. A qualidade do encerramento é mais importante do que atingir a contagem exata de caracteres.
"""

CONTENT_FOOTER = """
REGRA 3 (CONTAGEM DE CARACTERES): O resultado final DEVE ter aproximadamente {character_count} caracteres (com uma tolerância de +/- {tolerance} caracteres). Esta é uma regra CRÍTICA e OBRIGATÓRIA. Use a liberdade criativa descrita na REGRA 1 para expandir o conteúdo e ATINGIR a contagem de caracteres solicitada. É essencial que o texto tenha o comprimento adequado. Repito, o texto final deve ter aproximadamente {character_count} caracteres.

REGRA 4 (FORMATO DA RESPOSTA): Sua resposta deve ser EXCLUSIVAMENTE o texto da {content_noun}. NÃO inclua nenhum texto introdutório, títulos, explicações, confirmações das regras, ou qualquer outro texto que não seja a criação solicitada. A resposta deve começar diretamente com a primeira palavra da {content_noun}.

Agora, seguindo TODAS as regras acima sem exceção, crie a {content_label} com base no tema: "{main_prompt}".
{modification_block}
Formate com parágrafos."""

CONTENT_MODIFICATION = '\n\nInstrução de modificação: "{modification}". Aplique-a, mas SEMPRE respeitando TODAS as regras.'

LENGTH_TOO_SHORT = "A tentativa anterior foi muito curta ({length} caracteres)."
LENGTH_TOO_LONG = "A tentativa anterior foi muito longa ({length} caracteres)."

LENGTH_FEEDBACK = (
    "\n\nAVISO IMPORTANTE: {verdict} Expanda ou resuma {content_word} para atingir a "
    "contagem de caracteres solicitada de aproximadamente {character_count} caracteres. "
    "A obediência a esta regra é essencial, mas é ainda MAIS IMPORTANTE garantir que a "
    "{content_word} tenha um final conclusivo."
)

# =============================================================================
# Metadata
# =============================================================================

TITLES = (
    'Baseado na seguinte ideia: "{main_prompt}", gere 5 sugestões de títulos otimizados '
    "para SEO no YouTube. Os títulos devem ser cativantes, gerar curiosidade e incluir "
    "palavras-chave relevantes para aumentar a visibilidade e a taxa de cliques (CTR) "
    "para uma {type_text}."
)
TITLES_CLOSING = " Gere os títulos no idioma {language_name}. Responda com um array JSON de strings."

DESCRIPTION = (
    'Baseado na seguinte ideia: "{main_prompt}", escreva uma descrição otimizada para SEO '
    "de um vídeo no YouTube sobre uma {type_text}. A descrição deve ser envolvente, rica "
    "em palavras-chave relevantes e estruturada para maximizar a descoberta e o "
    "engajamento na plataforma."
)
DESCRIPTION_CLOSING = (
    " Escreva a resposta no idioma {language_name}. Retorne apenas o texto da descrição, "
    "pronta para ser copiada e colada no YouTube."
)

TAGS = """Aja como um especialista em SEO para YouTube. Sua tarefa é gerar uma lista de tags de SEO altamente otimizadas para um vídeo sobre uma {type_text} com o tema: "{main_prompt}".

**REGRAS OBRIGATÓRIAS:**
1.  **Relevância Máxima:** As tags devem ser extremamente relevantes para o tema principal.
2.  **Mistura Estratégica:** Crie uma mistura inteligente de:
    *   **Tags Específicas (Long-tail):** Frases que um usuário digitaria para encontrar este vídeo específico (ex: "história do irmão do filho pródigo", "oração de agradecimento pela família").
    *   **Tags Abrangentes (Short-tail):** Palavras-chave mais amplas que definem a categoria (ex: "parábolas de Jesus", "oração da noite", "histórias bíblicas").
3.  **Limite de Caracteres:** A soma total de caracteres de TODAS as tags deve ser inferior a {tag_budget} caracteres. Isso é crucial para garantir uma margem de segurança dentro do limite de {tag_limit} caracteres do YouTube. Seja conciso e priorize as tags mais importantes.
4.  **Idioma:** As tags devem ser no idioma {language_name}."""
TAGS_CLOSING = " Responda com um array JSON de strings."

CTA = (
    'Baseado no tema "{main_prompt}" para uma {type_text}, crie uma "call to action" (CTA) '
    "persuasiva e otimizada para o engajamento no YouTube. A CTA deve incentivar o "
    "espectador a se inscrever no canal, ativar as notificações, curtir o vídeo e deixar "
    "um comentário com suas reflexões. Seja criativo e pessoal. O resultado final DEVE "
    "ter no máximo {max_length} caracteres."
)
CTA_CLOSING = " Escreva a resposta no idioma {language_name}. Retorne apenas o texto da CTA."

REFINEMENT = ' Leve em consideração: "{hint}".'
MODIFICATION = ' Modifique com a seguinte instrução: "{modification}".'
CTA_MODIFICATION = ' Modifique com a instrução: "{modification}".'

# =============================================================================
# Thumbnail (pivot language)
# =============================================================================

THUMBNAIL_INTRO = (
    "Your task is to create a detailed prompt, written entirely IN ENGLISH, for an image "
    "generation AI. This prompt will be used to generate a thumbnail for a YouTube video "
    'about a {type_text} about "{main_prompt}". The thumbnail must be optimized for '
    "YouTube: high-contrast, emotionally engaging, and designed to maximize click-through "
    'rate (CTR). The story/prayer content begins with: "{teaser}...".\n\n'
)

THUMBNAIL_RULES = (
    "The final ENGLISH prompt you generate must follow two CRITICAL rules:\n\n"
    "RULE 1: VISUAL DESCRIPTION. You must describe a compelling, high-contrast scene with "
    "details about the artistic style, dramatic lighting, and clear composition, focusing "
    "on emotionally resonant subjects suitable for a YouTube thumbnail.\n"
    "RULE 2: TEXT INTEGRATION. This is the most important rule. You MUST invent a short, "
    "powerful, and curiosity-arousing text phrase ({caption_min} to {caption_max} words "
    "long) in the {language_name} language, relevant to the content. This text must be "
    "easily readable on small screens. Then, you MUST include an explicit instruction in "
    "your prompt to render this EXACT text phrase onto the image using a bold, clear font. "
    "The instruction for the text must be very clear and direct. For example: \"The text "
    "'UM EXEMPLO EM {language_name}' should be emblazoned across the image in a cinematic, "
    "golden, and highly readable font.\" or \"Featuring the words 'OUTRO EXEMPLO EM "
    "{language_name}' in a gritty, hand-written style at the bottom that is still easy to "
    'read."\n\n'
)

THUMBNAIL_STYLE = 'The user has provided a style preference to consider: "{hint}".\n'
THUMBNAIL_MODIFICATION = 'Apply this modification to your generation: "{modification}".\n'
THUMBNAIL_CLOSING = (
    "\nNow, generate ONLY the final text prompt for the image AI, following all rules. "
    "Do not add any conversational text or explanations before or after the prompt."
)

# =============================================================================
# Idea enhancement
# =============================================================================

ENHANCE = """Aja como um roteirista e teólogo criativo. Sua tarefa é aprimorar uma ideia para uma história bíblica, mantendo-se estritamente fiel ao texto bíblico original.
Ideia original: "{main_prompt}".

Sua tarefa é expandir esta ideia em um prompt mais rico e detalhado. Você pode sugerir:
- Foco em emoções e pensamentos dos personagens REAIS da passagem.
- Detalhes do cenário e da atmosfera baseados em conhecimentos históricos e bíblicos.
- Um clímax que intensifique o momento central da passagem.

**REGRA CRÍTICA E ABSOLUTA: Não invente personagens, diálogos ou eventos que não estejam explicitamente ou implicitamente na passagem bíblica. A fidelidade ao texto sagrado é a prioridade máxima.**

O resultado deve ser um novo parágrafo único que sirva como um prompt aprimorado.
Retorne APENAS o texto do prompt aprimorado, no idioma {language_name}."""
