"""
AI Legal Assistant
Notice summaries, draft generation, case-law research and the thesis notebook,
backed by the OpenAI API.

API failures never reach the UI: after retries are exhausted the error is
logged and the operation's fallback text is returned. Empty or oversize input
is rejected with ValidationError before any API call.
"""

import json
import os
import time
from dataclasses import dataclass, field

from openai import OpenAI

from juzk.config.logging_config import setup_logger
from juzk.config.prompt_templates import (
    DRAFT_PROMPT,
    HISTORY_ROLE_LABELS,
    NOTICE_SUMMARY_PROMPT,
    RESEARCH_PROMPT,
    SYSTEM_PROMPT,
    THESIS_CONTENT_PROMPT,
    THESIS_NOTEBOOK_PROMPT,
)
from juzk.config.settings import config
from juzk.domain.errors import ValidationError
from juzk.domain.models import LegalArea
from juzk.utils.retry import with_retry

logger = setup_logger(__name__)

# Fallback texts shown to the user when the AI call fails
SUMMARY_ERROR = "Erro ao processar resumo."
DRAFT_EMPTY = "Não foi possível gerar a peça."
DRAFT_ERROR = "Erro ao conectar com o serviço de IA."
RESEARCH_ERROR = "Erro ao realizar pesquisa jurídica."
NOTEBOOK_EMPTY = "Não foi possível gerar uma resposta."
NOTEBOOK_ERROR = "Erro ao processar sua pergunta."
THESIS_EMPTY = "Erro ao gerar conteúdo."
THESIS_ERROR = "Erro ao gerar o conteúdo da tese."

DEFAULT_SOURCE_TITLE = "Fonte Web"


@dataclass
class NoticeSummary:
    summary: str
    deadline: str | None = None
    action: str | None = None


@dataclass
class ResearchSource:
    title: str
    uri: str


@dataclass
class ResearchResult:
    text: str
    sources: list[ResearchSource] = field(default_factory=list)


def _require_text(value: str | None, field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError({field_name: "Campo obrigatório."})
    if len(text) > config.MAX_AI_INPUT_LENGTH:
        raise ValidationError(
            {field_name: f"Texto muito longo ({len(text)} caracteres, máximo {config.MAX_AI_INPUT_LENGTH})."}
        )
    return text


def _optional_str(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text and text.lower() != "null" else None


class AIAssistant:
    """Generative-AI helpers using GPT models"""

    def __init__(self, client: OpenAI | None = None, fast_model: str | None = None, pro_model: str | None = None):
        self.client = client or OpenAI(api_key=os.getenv("OPENAI_API_KEY"), timeout=config.AI_REQUEST_TIMEOUT)
        self.fast_model = fast_model or config.AI_FAST_MODEL
        self.pro_model = pro_model or config.AI_PRO_MODEL

    # ------------------------------------------------------------------
    # Raw calls (retried)
    # ------------------------------------------------------------------
    @with_retry()
    def _chat(self, prompt: str, model: str, json_mode: bool = False) -> str:
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        logger.info("[AI] Calling %s (json=%s)...", model, json_mode)
        start = time.time()
        response = self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=config.AI_TEMPERATURE,
            max_tokens=config.AI_MAX_TOKENS,
            **kwargs,
        )
        logger.info("[AI] %s completed in %.2fs", model, time.time() - start)
        return (response.choices[0].message.content or "").strip()

    @with_retry()
    def _web_search(self, prompt: str):
        logger.info("[AI] Web research with %s...", self.pro_model)
        start = time.time()
        response = self.client.responses.create(
            model=self.pro_model,
            instructions=SYSTEM_PROMPT,
            input=prompt,
            tools=[{"type": "web_search"}],
        )
        logger.info("[AI] Web research completed in %.2fs", time.time() - start)
        return response

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def summarize_notice(self, text: str) -> NoticeSummary:
        """Summarize a court notice (intimação) and extract deadline and suggested action."""
        text = _require_text(text, "text")
        try:
            raw = self._chat(NOTICE_SUMMARY_PROMPT.format(text=text), self.fast_model, json_mode=True)
            if not raw:
                raise ValueError("empty response from model")
            data = json.loads(raw)
        except Exception as e:
            logger.error("Notice summary failed: %s", e)
            return NoticeSummary(summary=SUMMARY_ERROR)
        return NoticeSummary(
            summary=str(data.get("summary") or "").strip() or SUMMARY_ERROR,
            deadline=_optional_str(data.get("prazo", data.get("deadline"))),
            action=_optional_str(data.get("acao", data.get("action"))),
        )

    def generate_draft(self, area: LegalArea, piece_type: str, facts: str, arguments: str) -> str:
        facts = _require_text(facts, "facts")
        piece_type = (piece_type or "").strip() or "Petição Inicial"
        area_label = area.value if isinstance(area, LegalArea) else str(area)
        prompt = DRAFT_PROMPT.format(
            area=area_label, piece_type=piece_type, facts=facts, arguments=(arguments or "").strip()
        )
        try:
            return self._chat(prompt, self.pro_model) or DRAFT_EMPTY
        except Exception as e:
            logger.error("Draft generation failed: %s", e)
            return DRAFT_ERROR

    def research_case_law(self, query: str) -> ResearchResult:
        """Web-grounded case-law research. Sources come from the URL citations of the answer."""
        query = _require_text(query, "query")
        try:
            response = self._web_search(RESEARCH_PROMPT.format(query=query))
        except Exception as e:
            logger.error("Case-law research failed: %s", e)
            return ResearchResult(text=RESEARCH_ERROR)
        return ResearchResult(text=getattr(response, "output_text", "") or "", sources=_extract_sources(response))

    def ask_thesis(self, thesis_content: str, question: str, history: list[dict]) -> str:
        """Notebook-style Q&A over one thesis. ``history`` items are {"role": "user"|"assistant", "text": ...}."""
        question = _require_text(question, "question")
        history_text = "\n".join(
            f"{HISTORY_ROLE_LABELS['user'] if h.get('role') == 'user' else HISTORY_ROLE_LABELS['assistant']}: "
            f"{h.get('text', '')}"
            for h in history or []
        )
        prompt = THESIS_NOTEBOOK_PROMPT.format(
            thesis_content=thesis_content or "", history=history_text, question=question
        )
        try:
            return self._chat(prompt, self.pro_model) or NOTEBOOK_EMPTY
        except Exception as e:
            logger.error("Thesis notebook failed: %s", e)
            return NOTEBOOK_ERROR

    def generate_thesis_content(self, title: str, description: str, area: str) -> str:
        title = _require_text(title, "title")
        area_label = area.value if isinstance(area, LegalArea) else str(area or "")
        prompt = THESIS_CONTENT_PROMPT.format(title=title, area=area_label, description=(description or "").strip())
        try:
            return self._chat(prompt, self.pro_model) or THESIS_EMPTY
        except Exception as e:
            logger.error("Thesis generation failed: %s", e)
            return THESIS_ERROR


def _extract_sources(response) -> list[ResearchSource]:
    """Collect url_citation annotations from a Responses API result, deduplicated by URL."""
    sources: list[ResearchSource] = []
    seen: set[str] = set()
    for item in getattr(response, "output", None) or []:
        if getattr(item, "type", None) != "message":
            continue
        for part in getattr(item, "content", None) or []:
            for ann in getattr(part, "annotations", None) or []:
                if getattr(ann, "type", None) != "url_citation":
                    continue
                uri = getattr(ann, "url", None) or "#"
                if uri in seen:
                    continue
                seen.add(uri)
                sources.append(ResearchSource(title=getattr(ann, "title", None) or DEFAULT_SOURCE_TITLE, uri=uri))
    return sources
