"""Settings: custom case fields per legal area, language and demo-data maintenance."""

import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.translations import LANGUAGE_OPTIONS, t
from juzk.domain.errors import JuzkError
from juzk.domain.models import CUSTOM_FIELD_TYPES, CustomFieldConfig, LegalArea
from juzk.ui.session import flash, get_custom_fields

logger = setup_logger(__name__)


def _field_id(area: LegalArea, label: str) -> str:
    slug = "".join(ch if ch.isalnum() else "_" for ch in label.lower()).strip("_")
    return f"{area.name.lower()}_{slug}"


def render(store, lang: str) -> None:
    st.title(t("nav_settings", lang))

    st.subheader(t("settings_custom_fields", lang))
    fields = get_custom_fields()
    for i, f in enumerate(fields):
        col_area, col_label, col_type, col_rm = st.columns([2, 4, 1, 1])
        col_area.markdown(f"`{f.area.value}`")
        col_label.markdown(f.label)
        col_type.caption(f.type)
        if col_rm.button("🗑", key=f"rm_field_{i}_{f.id}"):
            fields.pop(i)
            st.rerun()

    with st.form("new_field_form", clear_on_submit=True):
        c1, c2, c3 = st.columns([2, 3, 1])
        area = c1.selectbox(t("area", lang), list(LegalArea), format_func=lambda a: a.value)
        label = c2.text_input(t("settings_field_label", lang))
        field_type = c3.selectbox(t("type", lang), CUSTOM_FIELD_TYPES)
        if st.form_submit_button(t("add", lang)):
            if not label.strip():
                st.error(t("settings_field_label_required", lang))
            else:
                fields.append(CustomFieldConfig(_field_id(area, label), area, label.strip(), field_type))
                st.rerun()

    st.subheader(t("language", lang))
    labels = list(LANGUAGE_OPTIONS.keys())
    values = list(LANGUAGE_OPTIONS.values())
    selected = st.selectbox(t("language", lang), labels, index=values.index(lang) if lang in values else 0)
    if LANGUAGE_OPTIONS[selected] != lang:
        st.session_state.lang = LANGUAGE_OPTIONS[selected]
        st.rerun()

    st.subheader(t("settings_data", lang))
    st.caption(t("settings_backend", lang, backend=store.backend))
    c1, c2 = st.columns(2)
    if c1.button(t("settings_seed", lang)):
        try:
            store.seed_mock_data()
        except JuzkError as e:
            logger.error("Seed failed: %s", e)
            st.error(t("error_store", lang))
        else:
            flash(t("settings_seeded", lang))
            st.rerun()
    confirm = c2.checkbox(t("settings_confirm_clear", lang))
    if c2.button(t("settings_clear", lang), disabled=not confirm):
        try:
            store.clear_all_data()
        except JuzkError as e:
            logger.error("Clear failed: %s", e)
            st.error(t("error_store", lang))
        else:
            flash(t("settings_cleared", lang))
            st.rerun()
