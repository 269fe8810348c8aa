"""
Streamlit interface for Juzk SAJ
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("LOG_FORMAT", "simple")

import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from juzk.config.logging_config import setup_logger
from juzk.config.settings import APP_TITLE, PAGE_CONFIG, config, is_supabase_configured, validate_env_for_app
from juzk.config.translations import t
from juzk.domain.errors import StoreUnavailableError
from juzk.ui.auth import get_current_office, get_current_user, is_authenticated, is_dev_mode, render_auth_page
from juzk.ui.auth import restore_session, sign_out
from juzk.ui.session import NAV_KEY, get_lang, get_store, show_flashes
from juzk.ui.views import admin, agenda, ai_tools, cases, clients, dashboard, finance, settings, theses

logger = setup_logger(__name__)

# (page id, translation key, view module)
PAGES = [
    ("dashboard", "nav_dashboard", dashboard),
    ("clients", "nav_clients", clients),
    ("cases", "nav_cases", cases),
    ("agenda", "nav_agenda", agenda),
    ("theses", "nav_theses", theses),
    ("ai", "nav_ai", ai_tools),
    ("finance", "nav_finance", finance),
    ("admin", "nav_admin", admin),
    ("settings", "nav_settings", settings),
]


def _requires_login() -> bool:
    """Login is enforced only when Supabase Auth is available; the local store runs single-user."""
    return is_supabase_configured() or bool(config.DEV_MASTER_KEY)


def main():
    validate_env_for_app()

    if "lang" not in st.session_state:
        st.session_state.lang = "pt"
    lang = get_lang()

    st.set_page_config(**PAGE_CONFIG)

    if _requires_login() and not (is_authenticated() or restore_session()):
        render_auth_page(lang)
        return

    page_id = _render_sidebar(lang)
    show_flashes()

    try:
        store = get_store()
        module = next(m for pid, _, m in PAGES if pid == page_id)
        module.render(store, lang)
    except StoreUnavailableError as e:
        logger.error("Page %s failed: %s", page_id, e)
        st.error(t("error_store", lang))


def _render_sidebar(lang: str) -> str:
    with st.sidebar:
        st.markdown(f"## {PAGE_CONFIG['page_icon']} {APP_TITLE}")
        office = get_current_office()
        if office:
            st.caption(office.name)

        page_id = st.radio(
            t("navigation", lang),
            [pid for pid, _, _ in PAGES],
            format_func=lambda pid: t(next(key for p, key, _ in PAGES if p == pid), lang),
            key=NAV_KEY,
            label_visibility="collapsed",
        )
        st.markdown("---")

        if not is_supabase_configured():
            st.caption(t("local_mode", lang))
        if is_dev_mode():
            st.caption(t("dev_mode", lang))

        user = get_current_user()
        if user:
            st.caption(user.name or user.email)
            if st.button(t("sign_out", lang), use_container_width=True, type="secondary"):
                sign_out()
                st.rerun()
    return page_id


if __name__ == "__main__":
    main()
