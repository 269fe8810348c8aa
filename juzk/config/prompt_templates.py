"""
Editable prompt templates for the AI assistant.
Edit this file to tune the wording sent to the model.

Placeholders use str.format syntax; every template is Portuguese because the
drafts and summaries are delivered to Brazilian lawyers.
"""

SYSTEM_PROMPT = (
    "Você é um assistente jurídico sênior de um escritório de advocacia brasileiro. "
    "Responda sempre em português, com linguagem técnica, precisa e objetiva."
)

NOTICE_SUMMARY_PROMPT = """Analise o seguinte texto de uma publicação jurídica/intimação.
Extraia um resumo conciso do que aconteceu, identifique se há prazo processual (se sim, qual) e qual a providência a ser tomada.

Responda SOMENTE com um objeto JSON com as chaves:
- "summary": resumo do teor da publicação
- "prazo": data ou prazo mencionado (ex: "15 dias"), ou null se não houver
- "acao": ação sugerida para o advogado, ou null se for apenas informativo

Texto: \"\"\"{text}\"\"\""""

DRAFT_PROMPT = """Atue como um advogado especialista em Direito {area}.
Redija uma minuta de {piece_type} profissional e bem fundamentada.

Fatos do caso: {facts}

Argumentos/Teses principais a utilizar: {arguments}

Estruture a peça com cabeçalho, fatos, direito e pedidos. Use linguagem jurídica formal e adequada."""

RESEARCH_PROMPT = """Pesquise jurisprudências recentes e teses jurídicas sobre: "{query}".
Cite tribunais superiores (STJ, STF, TST) quando aplicável.
Retorne um texto explicativo consolidando o entendimento atual."""

THESIS_NOTEBOOK_PROMPT = """Você é um assistente jurídico especializado (Notebook AI). Seu objetivo é ajudar o advogado a analisar, melhorar ou entender a tese jurídica fornecida abaixo.

CONTEXTO DA TESE:
\"\"\"
{thesis_content}
\"\"\"

HISTÓRICO DA CONVERSA:
{history}

PERGUNTA ATUAL DO USUÁRIO:
{question}

Responda de forma direta, técnica e útil."""

THESIS_CONTENT_PROMPT = """Escreva o conteúdo completo e detalhado de uma tese jurídica.

Título: {title}
Área: {area}
Descrição/Resumo: {description}

O texto deve conter introdução, fundamentação legal, jurisprudência e conclusão."""

# Suggested piece types for the draft generator (free text is also accepted)
DRAFT_PIECE_TYPES: list[str] = [
    "Petição Inicial",
    "Contestação",
    "Réplica",
    "Recurso de Apelação",
    "Agravo de Instrumento",
    "Embargos de Declaração",
    "Contrarrazões",
    "Notificação Extrajudicial",
]
DEFAULT_PIECE_TYPE = DRAFT_PIECE_TYPES[0]

# Role labels used when flattening the notebook history into the prompt
HISTORY_ROLE_LABELS = {"user": "Usuário", "assistant": "Assistente"}
