"""
Supabase Auth integration for Juzk SAJ.

Provides login/signup UI and session management. Every user belongs to an
office (escritório); sign-up creates the office first and stores its id in the
user metadata, and all practice data is scoped by that office id.

A developer login (DEV_MASTER_KEY) opens a fixed development office without
touching Supabase. It is disabled when the key is not configured.
"""

import hmac

import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.settings import APP_ICON, APP_TITLE, config
from juzk.config.translations import t
from juzk.domain.models import AppUser, Office
from juzk.services.admin_service import get_admin_store
from juzk.services.data_store import create_supabase_client

logger = setup_logger(__name__)

_AUTH_SESSION_KEY = "auth_session"
_AUTH_USER_KEY = "auth_user"
_AUTH_OFFICE_KEY = "auth_office"
_DEV_MODE_KEY = "juzk_dev_mode"
_EMAIL_NOT_CONFIRMED = "__EMAIL_NOT_CONFIRMED__"

DEV_OFFICE_ID = "00000000-0000-0000-0000-000000000000"
DEV_USER_ID = "dev-user-master"
DEV_USER_EMAIL = "dev@juzk.ia"

MIN_PASSWORD_LENGTH = 6


def _get_auth_client():
    """Get or create a Supabase client for auth operations."""
    if "auth_supabase" not in st.session_state:
        try:
            st.session_state["auth_supabase"] = create_supabase_client()
        except Exception as exc:
            logger.error("Failed to create auth Supabase client: %s", exc)
            st.session_state["auth_supabase"] = None
    return st.session_state["auth_supabase"]


def is_authenticated() -> bool:
    """Check if a user is currently authenticated."""
    return st.session_state.get(_AUTH_USER_KEY) is not None


def is_dev_mode() -> bool:
    return bool(st.session_state.get(_DEV_MODE_KEY))


def get_current_user() -> AppUser | None:
    data = st.session_state.get(_AUTH_USER_KEY)
    if not data:
        return None
    return AppUser(id=data["id"], email=data.get("email", ""), office_id=data.get("office_id"), name=data.get("name", ""))


def get_current_office() -> Office | None:
    data = st.session_state.get(_AUTH_OFFICE_KEY)
    if not data:
        return None
    return Office(id=data["id"], name=data.get("name", ""))


def get_current_office_id() -> str | None:
    office = get_current_office()
    if office:
        return office.id
    user = get_current_user()
    return user.office_id if user else None


def _load_office(office_id: str | None) -> None:
    """Fetch the user's office from `offices` into session state. Missing office leaves it unset."""
    if not office_id:
        st.session_state.pop(_AUTH_OFFICE_KEY, None)
        return
    client = _get_auth_client()
    office = get_admin_store(client).get_office(office_id) if client else None
    if office:
        st.session_state[_AUTH_OFFICE_KEY] = office.to_dict()
    else:
        logger.warning("Office %s of the current user was not found", office_id)
        st.session_state.pop(_AUTH_OFFICE_KEY, None)


def _store_auth_session(user, access_token: str, refresh_token: str = "") -> None:
    """Persist authenticated user (and its office) into Streamlit session state."""
    metadata = getattr(user, "user_metadata", None) or {}
    office_id = metadata.get("office_id")
    st.session_state[_AUTH_USER_KEY] = {
        "id": user.id,
        "email": user.email,
        "office_id": office_id,
        "name": metadata.get("full_name") or "",
    }
    st.session_state[_AUTH_SESSION_KEY] = {
        "access_token": access_token,
        "refresh_token": refresh_token,
    }
    _load_office(office_id)


def restore_session() -> bool:
    """Re-read the session kept by the Supabase client (e.g. after a rerun that lost our keys)."""
    if is_authenticated():
        return True
    client = _get_auth_client()
    if not client:
        return False
    try:
        session = client.auth.get_session()
    except Exception as exc:
        logger.warning("Session restore failed: %s", exc)
        return False
    if not session or not getattr(session, "user", None):
        return False
    _store_auth_session(session.user, session.access_token, getattr(session, "refresh_token", "") or "")
    logger.info("Session restored for %s", session.user.email)
    return True


def login_as_dev(master_key: str) -> bool:
    """Open the development office when ``master_key`` matches DEV_MASTER_KEY."""
    if not config.DEV_MASTER_KEY:
        return False
    if not hmac.compare_digest((master_key or "").encode(), config.DEV_MASTER_KEY.encode()):
        logger.warning("Developer login rejected")
        return False
    st.session_state[_DEV_MODE_KEY] = True
    st.session_state[_AUTH_USER_KEY] = {
        "id": DEV_USER_ID,
        "email": DEV_USER_EMAIL,
        "office_id": DEV_OFFICE_ID,
        "name": "Desenvolvedor Master",
    }
    st.session_state[_AUTH_OFFICE_KEY] = {"id": DEV_OFFICE_ID, "name": "Escritório de Desenvolvimento"}
    logger.info("Developer mode enabled")
    return True


def sign_out() -> None:
    """Sign out the current user and clear session state."""
    client = _get_auth_client()
    if client and not is_dev_mode():
        try:
            client.auth.sign_out()
        except Exception as exc:
            logger.warning("Sign-out API call failed (session cleared locally): %s", exc)

    for key in [_AUTH_SESSION_KEY, _AUTH_USER_KEY, _AUTH_OFFICE_KEY, _DEV_MODE_KEY, "auth_supabase", "data_store"]:
        st.session_state.pop(key, None)


def _sign_in(email: str, password: str, lang: str = "pt") -> tuple[bool, str]:
    """Attempt sign-in. Returns (success, error_message)."""
    client = _get_auth_client()
    if not client:
        return False, t("auth_unavailable", lang)

    try:
        response = client.auth.sign_in_with_password({"email": email, "password": password})
        if response.user:
            access_token = response.session.access_token if response.session else ""
            refresh_token = response.session.refresh_token if response.session else ""
            _store_auth_session(response.user, access_token, refresh_token)
            logger.info("User signed in: %s", email)
            return True, ""
        return False, t("auth_invalid_credentials", lang)
    except Exception as exc:
        error_msg = str(exc)
        if "Invalid login credentials" in error_msg:
            return False, t("auth_invalid_credentials", lang)
        if "Email not confirmed" in error_msg:
            return False, _EMAIL_NOT_CONFIRMED
        logger.error("Sign-in failed: %s", exc)
        return False, t("auth_sign_in_failed", lang, error=error_msg)


def _sign_up(email: str, password: str, full_name: str, office_name: str, lang: str = "pt") -> tuple[bool, str]:
    """Create the office, then the user linked to it. Returns (success, message)."""
    client = _get_auth_client()
    if not client:
        return False, t("auth_unavailable", lang)

    try:
        office = get_admin_store(client).create_office(office_name)
    except Exception as exc:
        logger.error("Office creation during sign-up failed: %s", exc)
        return False, t("auth_sign_up_failed", lang, error=str(exc))

    try:
        response = client.auth.sign_up(
            {
                "email": email,
                "password": password,
                "options": {"data": {"full_name": full_name, "office_id": office.id}},
            }
        )
        if response.user:
            if getattr(response.user, "identities", None) == []:
                return False, t("auth_email_taken", lang)
            logger.info("User signed up: %s (office %s)", email, office.id)
            return True, t("auth_check_email", lang)
        return False, t("auth_sign_up_failed", lang, error="")
    except Exception as exc:
        error_msg = str(exc)
        if "already registered" in error_msg.lower():
            return False, t("auth_email_taken", lang)
        logger.error("Sign-up failed: %s", exc)
        return False, t("auth_sign_up_failed", lang, error=error_msg)


# ---------------------------------------------------------------------------
#  Page
# ---------------------------------------------------------------------------


def render_auth_page(lang: str) -> None:
    """Render the login / signup page. Blocks the main app until authenticated."""
    st.markdown(f"## {APP_ICON} {APP_TITLE}")
    st.caption(t("auth_subtitle", lang))

    if _get_auth_client() is None:
        st.warning(t("auth_unavailable", lang))

    # st.radio keeps the selected mode across reruns
    auth_mode = st.radio(
        "auth_mode",
        options=["login", "signup"],
        format_func=lambda x: t("auth_login", lang) if x == "login" else t("auth_signup", lang),
        horizontal=True,
        key="auth_mode",
        label_visibility="collapsed",
    )

    if auth_mode == "login":
        _render_login_form(lang)
    else:
        _render_signup_form(lang)

    if config.DEV_MASTER_KEY:
        _render_dev_login(lang)


def _render_login_form(lang: str) -> None:
    with st.form("login_form"):
        email = st.text_input(t("auth_email", lang), key="login_email")
        password = st.text_input(t("auth_password", lang), type="password", key="login_password")
        submitted = st.form_submit_button(t("auth_login_button", lang), use_container_width=True, type="primary")

        if submitted:
            if not email or not password:
                st.error(t("auth_fields_required", lang))
            else:
                success, message = _sign_in(email.strip(), password, lang)
                if success:
                    st.rerun()
                elif message == _EMAIL_NOT_CONFIRMED:
                    st.warning(t("auth_email_not_verified", lang))
                else:
                    st.error(message)


def _render_signup_form(lang: str) -> None:
    with st.form("signup_form"):
        office_name = st.text_input(t("auth_office_name", lang), key="signup_office", placeholder="Ex: Silva & Advogados")
        full_name = st.text_input(t("auth_full_name", lang), key="signup_name")
        email = st.text_input(t("auth_email", lang), key="signup_email")
        password = st.text_input(t("auth_password", lang), type="password", key="signup_password")
        submitted = st.form_submit_button(t("auth_signup_button", lang), use_container_width=True, type="primary")

        if submitted:
            if not all(v.strip() for v in (office_name, full_name, email, password)):
                st.error(t("auth_fields_required", lang))
            elif len(password) < MIN_PASSWORD_LENGTH:
                st.error(t("auth_password_min_length", lang, min=MIN_PASSWORD_LENGTH))
            else:
                success, message = _sign_up(email.strip(), password, full_name.strip(), office_name.strip(), lang)
                if success:
                    st.info(message)
                else:
                    st.error(message)


def _render_dev_login(lang: str) -> None:
    with st.expander(t("auth_dev_access", lang)):
        with st.form("dev_login_form"):
            key = st.text_input(t("auth_dev_key", lang), type="password", key="dev_master_key")
            if st.form_submit_button(t("auth_login_button", lang)):
                if login_as_dev(key):
                    st.rerun()
                else:
                    st.error(t("auth_dev_rejected", lang))
