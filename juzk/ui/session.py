"""
Session-scoped service access for the Streamlit views.

The data store, the admin store and the AI assistant are created once per
browser session and cached in ``st.session_state``.
"""

import copy

import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.domain.models import DEFAULT_CUSTOM_FIELDS, CustomFieldConfig
from juzk.services.admin_service import get_admin_store
from juzk.services.ai_assistant import AIAssistant
from juzk.services.data_store import get_data_store
from juzk.services.protocols import AdminStore, DataStore, LegalAssistant
from juzk.ui.auth import get_current_office_id
from juzk.ui.supabase_client import get_supabase_client

logger = setup_logger(__name__)

_STORE_KEY = "data_store"
_ASSISTANT_KEY = "ai_assistant"
_CUSTOM_FIELDS_KEY = "custom_fields"
_FLASH_KEY = "flash_messages"

NAV_KEY = "nav_page"
SELECTED_CASE_KEY = "cases_selected"


def get_lang() -> str:
    return st.session_state.get("lang", "pt")


def get_store() -> DataStore:
    """Office-scoped data store; rebuilt when the office changes (login/logout)."""
    office_id = get_current_office_id()
    cached = st.session_state.get(_STORE_KEY)
    if cached is None or cached.office_id != str(office_id or "default"):
        cached = get_data_store(office_id, client=get_supabase_client())
        st.session_state[_STORE_KEY] = cached
        logger.info("Data store ready (backend=%s, office=%s)", cached.backend, cached.office_id)
    return cached


def get_admin() -> AdminStore:
    return get_admin_store(get_supabase_client())


def get_assistant() -> LegalAssistant:
    if _ASSISTANT_KEY not in st.session_state:
        st.session_state[_ASSISTANT_KEY] = AIAssistant()
    return st.session_state[_ASSISTANT_KEY]


def get_custom_fields() -> list[CustomFieldConfig]:
    if _CUSTOM_FIELDS_KEY not in st.session_state:
        st.session_state[_CUSTOM_FIELDS_KEY] = copy.deepcopy(DEFAULT_CUSTOM_FIELDS)
    return st.session_state[_CUSTOM_FIELDS_KEY]


def flash(message: str, kind: str = "success") -> None:
    """Queue a message to show after the next rerun."""
    st.session_state.setdefault(_FLASH_KEY, []).append((kind, message))


def show_flashes() -> None:
    for kind, message in st.session_state.pop(_FLASH_KEY, []):
        getattr(st, kind, st.info)(message)


def open_case(case_id: str) -> None:
    """Switch to the cases page with ``case_id`` open. Use as an ``on_click`` callback."""
    st.session_state[SELECTED_CASE_KEY] = case_id
    st.session_state[NAV_KEY] = "cases"
