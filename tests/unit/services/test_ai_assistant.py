"""
Unit tests for the AI assistant: prompt wiring, JSON parsing of notice
summaries, fallback texts on API failure and web-search source extraction.

The OpenAI client is a MagicMock; no network calls.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from juzk.domain.errors import ValidationError
from juzk.domain.models import LegalArea
from juzk.services.ai_assistant import (
    DEFAULT_SOURCE_TITLE,
    DRAFT_EMPTY,
    DRAFT_ERROR,
    NOTEBOOK_ERROR,
    RESEARCH_ERROR,
    SUMMARY_ERROR,
    THESIS_ERROR,
    AIAssistant,
    ResearchSource,
)
from juzk.services.protocols import LegalAssistant


def _chat_response(content: str | None):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _citation(url: str, title: str | None = "STJ"):
    return SimpleNamespace(type="url_citation", url=url, title=title)


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def assistant(client):
    return AIAssistant(client=client, fast_model="fast-model", pro_model="pro-model")


@pytest.fixture(autouse=True)
def _no_sleep():
    with patch("juzk.utils.retry.time.sleep"):
        yield


class TestSummarizeNotice:
    def test_parses_portuguese_keys(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response(
            json.dumps({"summary": "Intimação para réplica.", "prazo": "15 dias", "acao": "Apresentar réplica"})
        )
        result = assistant.summarize_notice("Fica a parte autora intimada...")
        assert result.summary == "Intimação para réplica."
        assert result.deadline == "15 dias"
        assert result.action == "Apresentar réplica"

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "fast-model"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert "Fica a parte autora intimada" in kwargs["messages"][1]["content"]

    def test_null_fields_become_none(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response(
            json.dumps({"summary": "Ciência.", "deadline": "null", "action": None})
        )
        result = assistant.summarize_notice("texto")
        assert result.deadline is None
        assert result.action is None

    def test_invalid_json_falls_back(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response("not json")
        assert assistant.summarize_notice("texto").summary == SUMMARY_ERROR

    def test_empty_input_rejected_before_call(self, assistant, client) -> None:
        with pytest.raises(ValidationError):
            assistant.summarize_notice("   ")
        client.chat.completions.create.assert_not_called()

    def test_oversize_input_rejected(self, assistant, client) -> None:
        from juzk.services.ai_assistant import config

        with patch.object(config, "MAX_AI_INPUT_LENGTH", 10), pytest.raises(ValidationError):
            assistant.summarize_notice("x" * 11)


class TestGenerateDraft:
    def test_uses_pro_model_and_area_label(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response("EXCELENTÍSSIMO SENHOR...")
        draft = assistant.generate_draft(LegalArea.TRABALHISTA, "Contestação", "Fatos", "Argumentos")
        assert draft == "EXCELENTÍSSIMO SENHOR..."
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "pro-model"
        assert "response_format" not in kwargs
        prompt = kwargs["messages"][1]["content"]
        assert "Trabalhista" in prompt
        assert "Contestação" in prompt

    def test_empty_answer(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response(None)
        assert assistant.generate_draft(LegalArea.CIVEL, "", "Fatos", "") == DRAFT_EMPTY

    def test_api_error_returns_fallback(self, assistant, client) -> None:
        client.chat.completions.create.side_effect = RuntimeError("invalid api key")
        assert assistant.generate_draft(LegalArea.CIVEL, "Petição Inicial", "Fatos", "") == DRAFT_ERROR
        assert client.chat.completions.create.call_count == 1

    def test_transient_error_is_retried(self, assistant, client) -> None:
        client.chat.completions.create.side_effect = [RuntimeError("429 rate limit"), _chat_response("ok")]
        assert assistant.generate_draft(LegalArea.CIVEL, "Petição Inicial", "Fatos", "") == "ok"
        assert client.chat.completions.create.call_count == 2


class TestResearch:
    def test_sources_deduplicated_by_url(self, assistant, client) -> None:
        client.responses.create.return_value = SimpleNamespace(
            output_text="Jurisprudência dominante...",
            output=[
                SimpleNamespace(type="web_search_call"),
                SimpleNamespace(
                    type="message",
                    content=[
                        SimpleNamespace(
                            annotations=[
                                _citation("https://stj.jus.br/a"),
                                _citation("https://stj.jus.br/a", "Duplicado"),
                                _citation("https://tst.jus.br/b", None),
                                SimpleNamespace(type="file_citation"),
                            ]
                        )
                    ],
                ),
            ],
        )
        result = assistant.research_case_law("dano moral bancário")
        assert result.text == "Jurisprudência dominante..."
        assert result.sources == [
            ResearchSource(title="STJ", uri="https://stj.jus.br/a"),
            ResearchSource(title=DEFAULT_SOURCE_TITLE, uri="https://tst.jus.br/b"),
        ]
        kwargs = client.responses.create.call_args.kwargs
        assert kwargs["tools"] == [{"type": "web_search"}]
        assert kwargs["model"] == "pro-model"

    def test_failure_returns_fallback_without_sources(self, assistant, client) -> None:
        client.responses.create.side_effect = RuntimeError("boom")
        result = assistant.research_case_law("dano moral")
        assert result.text == RESEARCH_ERROR
        assert result.sources == []


class TestThesisHelpers:
    def test_history_is_included_in_prompt(self, assistant, client) -> None:
        client.chat.completions.create.return_value = _chat_response("Resposta")
        history = [{"role": "user", "text": "Primeira pergunta"}, {"role": "assistant", "text": "Primeira resposta"}]
        assert assistant.ask_thesis("Conteúdo da tese", "Segunda pergunta", history) == "Resposta"
        prompt = client.chat.completions.create.call_args.kwargs["messages"][1]["content"]
        assert "Primeira pergunta" in prompt
        assert "Primeira resposta" in prompt
        assert "Conteúdo da tese" in prompt

    def test_notebook_failure(self, assistant, client) -> None:
        client.chat.completions.create.side_effect = RuntimeError("boom")
        assert assistant.ask_thesis("", "Pergunta", []) == NOTEBOOK_ERROR

    def test_generate_thesis_content_requires_title(self, assistant) -> None:
        with pytest.raises(ValidationError):
            assistant.generate_thesis_content("", "desc", "Cível")

    def test_generate_thesis_content_failure(self, assistant, client) -> None:
        client.chat.completions.create.side_effect = RuntimeError("boom")
        assert assistant.generate_thesis_content("Tese", "desc", LegalArea.PENAL) == THESIS_ERROR


def test_assistant_satisfies_protocol(assistant) -> None:
    assert isinstance(assistant, LegalAssistant)
