"""Thesis library: search, area filter, reader / editor / AI notebook."""

import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.settings import config
from juzk.config.translations import t
from juzk.domain.errors import JuzkError, ValidationError
from juzk.domain.models import LegalArea, Thesis
from juzk.services.search import ALL, filter_theses
from juzk.ui.session import flash, get_assistant
from juzk.utils.formatting import format_date_br

logger = setup_logger(__name__)

_SELECTED_KEY = "theses_selected"
_HISTORY_KEY = "thesis_notebook"  # {thesis_id: [{"role": ..., "text": ...}]}


def render(store, lang: str) -> None:
    st.title(t("nav_theses", lang))

    theses = store.list_theses()
    col_search, col_area = st.columns([3, 1])
    term = col_search.text_input(t("search", lang), placeholder=t("theses_search_placeholder", lang))
    area = col_area.selectbox(
        t("area", lang), [ALL, *LegalArea], format_func=lambda a: t("all", lang) if a == ALL else a.value
    )

    with st.expander(t("theses_new", lang)):
        _render_new_form(store, lang)

    filtered = filter_theses(theses, term, area)
    if not filtered:
        st.info(t("theses_empty", lang))
        return

    ids = [th.id for th in filtered]
    current = st.session_state.get(_SELECTED_KEY)
    selected = st.radio(
        t("theses_library", lang),
        ids,
        index=ids.index(current) if current in ids else 0,
        format_func=lambda tid: next(f"{th.title} ({th.area.value})" for th in filtered if th.id == tid),
    )
    st.session_state[_SELECTED_KEY] = selected
    thesis = next(th for th in filtered if th.id == selected)

    reader, editor, notebook = st.tabs([t("theses_read", lang), t("theses_edit", lang), t("theses_notebook", lang)])
    with reader:
        st.subheader(thesis.title)
        st.caption(f"{thesis.area.value} · {format_date_br(thesis.created_at)}")
        if thesis.description:
            st.markdown(f"_{thesis.description}_")
        st.markdown(thesis.content or t("theses_no_content", lang))
    with editor:
        _render_editor(store, thesis, lang)
    with notebook:
        _render_notebook(thesis, lang)


def _render_new_form(store, lang: str) -> None:
    with st.form("new_thesis_form", clear_on_submit=True):
        title = st.text_input(t("theses_title", lang))
        area = st.selectbox(t("area", lang), list(LegalArea), format_func=lambda a: a.value)
        description = st.text_area(t("description", lang))
        generate = st.checkbox(t("theses_generate_ai", lang), disabled=not config.AI_ENABLED)
        if not st.form_submit_button(t("save", lang), type="primary"):
            return
    content = ""
    if generate and title.strip():
        with st.spinner(t("ai_working", lang)):
            content = get_assistant().generate_thesis_content(title, description, area.value)
    try:
        created = store.add_thesis(Thesis(title=title.strip(), area=area, description=description.strip(), content=content))
    except ValidationError as e:
        for message in e.errors.values():
            st.error(message)
        return
    except JuzkError as e:
        logger.error("Thesis create failed: %s", e)
        st.error(t("error_store", lang))
        return
    st.session_state[_SELECTED_KEY] = created.id
    flash(t("saved", lang))
    st.rerun()


def _render_editor(store, thesis: Thesis, lang: str) -> None:
    with st.form(f"thesis_edit_{thesis.id}"):
        title = st.text_input(t("theses_title", lang), value=thesis.title)
        areas = list(LegalArea)
        area = st.selectbox(t("area", lang), areas, index=areas.index(thesis.area), format_func=lambda a: a.value)
        description = st.text_area(t("description", lang), value=thesis.description)
        content = st.text_area(t("theses_content", lang), value=thesis.content, height=400)
        save, regenerate = st.columns(2)
        submitted = save.form_submit_button(t("save", lang), type="primary")
        ai_fill = regenerate.form_submit_button(t("theses_generate_ai", lang), disabled=not config.AI_ENABLED)

    if ai_fill:
        with st.spinner(t("ai_working", lang)):
            content = get_assistant().generate_thesis_content(title, description, area.value)
        submitted = True
    if submitted:
        thesis.title = title.strip()
        thesis.area = area
        thesis.description = description.strip()
        thesis.content = content
        try:
            store.update_thesis(thesis)
        except ValidationError as e:
            for message in e.errors.values():
                st.error(message)
            return
        except JuzkError as e:
            logger.error("Thesis update failed: %s", e)
            st.error(t("error_store", lang))
            return
        flash(t("saved", lang))
        st.rerun()

    if st.checkbox(t("theses_confirm_delete", lang), key=f"confirm_delete_thesis_{thesis.id}"):
        if st.button(t("delete", lang), key=f"delete_thesis_{thesis.id}"):
            try:
                store.delete_thesis(thesis.id)
            except JuzkError as e:
                logger.error("Thesis delete failed: %s", e)
                st.error(t("error_store", lang))
                return
            st.session_state.pop(_SELECTED_KEY, None)
            st.rerun()


def _render_notebook(thesis: Thesis, lang: str) -> None:
    if not config.AI_ENABLED:
        st.info(t("ai_disabled", lang))
        return
    histories = st.session_state.setdefault(_HISTORY_KEY, {})
    history = histories.setdefault(thesis.id, [])

    for entry in history:
        with st.chat_message("user" if entry["role"] == "user" else "assistant"):
            st.markdown(entry["text"])

    question = st.chat_input(t("theses_ask_placeholder", lang), key=f"notebook_input_{thesis.id}")
    if not question:
        if history and st.button(t("theses_clear_notebook", lang), key=f"clear_nb_{thesis.id}"):
            histories[thesis.id] = []
            st.rerun()
        return
    try:
        with st.spinner(t("ai_working", lang)):
            answer = get_assistant().ask_thesis(thesis.content, question, history)
    except ValidationError as e:
        st.error(next(iter(e.errors.values())))
        return
    history.append({"role": "user", "text": question})
    history.append({"role": "assistant", "text": answer})
    st.rerun()
