"""Administration: offices and registered users."""

import pandas as pd
import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.translations import t
from juzk.domain.errors import JuzkError, ValidationError
from juzk.ui.session import flash, get_admin

logger = setup_logger(__name__)


def render(store, lang: str) -> None:
    st.title(t("nav_admin", lang))
    admin = get_admin()

    try:
        offices = admin.list_offices()
        users = admin.list_users()
    except JuzkError as e:
        logger.error("Admin data unavailable: %s", e)
        st.error(t("error_store", lang))
        return

    offices_tab, users_tab = st.tabs([t("admin_offices", lang), t("admin_users", lang)])
    with offices_tab:
        with st.form("new_office_form", clear_on_submit=True):
            name = st.text_input(t("admin_office_name", lang), placeholder="Ex: Silva & Advogados")
            if st.form_submit_button(t("add", lang), type="primary"):
                try:
                    admin.create_office(name)
                except ValidationError as e:
                    st.error(next(iter(e.errors.values())))
                except JuzkError as e:
                    logger.error("Office create failed: %s", e)
                    st.error(t("error_store", lang))
                else:
                    flash(t("saved", lang))
                    st.rerun()

        if not offices:
            st.caption(t("admin_no_offices", lang))
        for office in offices:
            col_name, col_action = st.columns([4, 1])
            members = sum(1 for u in users if u.office_id == office.id)
            col_name.markdown(f"**{office.name}** · {t('admin_members', lang, count=members)}")
            col_name.caption(office.id)
            if col_action.button(t("delete", lang), key=f"delete_office_{office.id}"):
                st.session_state["admin_confirm_delete"] = office.id
            if st.session_state.get("admin_confirm_delete") == office.id:
                st.warning(t("admin_delete_warning", lang))
                if st.button(t("confirm", lang), key=f"confirm_delete_office_{office.id}"):
                    try:
                        admin.delete_office(office.id)
                    except JuzkError as e:
                        logger.error("Office delete failed: %s", e)
                        st.error(t("error_store", lang))
                    else:
                        st.session_state.pop("admin_confirm_delete", None)
                        flash(t("admin_office_deleted", lang))
                        st.rerun()

    with users_tab:
        if not users:
            st.caption(t("admin_no_users", lang))
        else:
            names = {o.id: o.name for o in offices}
            st.dataframe(
                pd.DataFrame(
                    [
                        {
                            t("name", lang): u.name,
                            "Email": u.email,
                            t("admin_office", lang): names.get(u.office_id or "", u.office_id or ""),
                        }
                        for u in users
                    ]
                ),
                hide_index=True,
                use_container_width=True,
            )
