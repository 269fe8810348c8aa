"""AI tools: court-notice analysis, draft generation and case-law research."""

import streamlit as st

from juzk.config.prompt_templates import DEFAULT_PIECE_TYPE, DRAFT_PIECE_TYPES
from juzk.config.settings import config
from juzk.config.translations import t
from juzk.domain.errors import ValidationError
from juzk.domain.models import LegalArea
from juzk.ui.session import get_assistant


def _show_validation(e: ValidationError) -> None:
    for message in e.errors.values():
        st.error(message)


def render(store, lang: str) -> None:
    st.title(t("nav_ai", lang))
    st.caption(t("ai_subtitle", lang))
    if not config.AI_ENABLED:
        st.info(t("ai_disabled", lang))
        return

    summary_tab, draft_tab, research_tab = st.tabs(
        [t("ai_tab_summary", lang), t("ai_tab_draft", lang), t("ai_tab_research", lang)]
    )
    with summary_tab:
        _render_summary(lang)
    with draft_tab:
        _render_draft(lang)
    with research_tab:
        _render_research(lang)


def _render_summary(lang: str) -> None:
    text = st.text_area(
        t("ai_notice_label", lang),
        placeholder="Ex: INTIMAÇÃO. Fica a parte autora intimada para...",
        height=200,
        max_chars=config.MAX_AI_INPUT_LENGTH,
    )
    if st.button(t("ai_analyze", lang), type="primary", key="ai_summary_btn"):
        try:
            with st.spinner(t("ai_working", lang)):
                st.session_state["ai_summary_result"] = get_assistant().summarize_notice(text)
        except ValidationError as e:
            _show_validation(e)

    result = st.session_state.get("ai_summary_result")
    if result:
        st.markdown(f"**{t('ai_summary', lang)}**")
        st.write(result.summary)
        if result.deadline:
            st.error(f"**{t('ai_deadline_found', lang)}:** {result.deadline}")
        if result.action:
            st.info(f"**{t('ai_suggested_action', lang)}:** {result.action}")


def _render_draft(lang: str) -> None:
    c1, c2 = st.columns(2)
    area = c1.selectbox(t("area", lang), list(LegalArea), format_func=lambda a: a.value, key="draft_area")
    piece_type = c2.selectbox(
        t("ai_piece_type", lang),
        DRAFT_PIECE_TYPES,
        index=DRAFT_PIECE_TYPES.index(DEFAULT_PIECE_TYPE),
        accept_new_options=True,
        key="draft_type",
    )
    facts = st.text_area(t("ai_facts", lang), placeholder=t("ai_facts_placeholder", lang), height=160)
    arguments = st.text_area(t("ai_arguments", lang), placeholder=t("ai_arguments_placeholder", lang), height=120)
    if st.button(t("ai_generate_draft", lang), type="primary", key="ai_draft_btn"):
        try:
            with st.spinner(t("ai_working", lang)):
                st.session_state["ai_draft_result"] = get_assistant().generate_draft(area, piece_type, facts, arguments)
        except ValidationError as e:
            _show_validation(e)

    draft = st.session_state.get("ai_draft_result")
    if draft:
        st.markdown(draft)
        st.download_button(t("download", lang), draft, file_name="minuta.md", mime="text/markdown")


def _render_research(lang: str) -> None:
    query = st.text_input(
        t("ai_research_label", lang), placeholder="Ex: Prescrição intercorrente na execução fiscal após Lei 11.051"
    )
    if st.button(t("ai_research", lang), type="primary", key="ai_research_btn"):
        try:
            with st.spinner(t("ai_working", lang)):
                st.session_state["ai_research_result"] = get_assistant().research_case_law(query)
        except ValidationError as e:
            _show_validation(e)

    result = st.session_state.get("ai_research_result")
    if result:
        st.markdown(result.text)
        if result.sources:
            st.markdown(f"**{t('ai_sources', lang)}**")
            for source in result.sources:
                st.markdown(f"- [{source.title}]({source.uri})")
