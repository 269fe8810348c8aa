"""Client registry: search, PF/PJ filter, pagination, create/edit with contacts, delete."""

import pandas as pd
import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.settings import config
from juzk.config.translations import t
from juzk.domain.errors import ClientHasCasesError, JuzkError, ValidationError
from juzk.domain.models import CLIENT_STATUSES, Client, Contact, new_id
from juzk.services.search import ALL, filter_clients, paginate
from juzk.ui.session import flash
from juzk.utils.formatting import format_cpf_cnpj

logger = setup_logger(__name__)

_EDIT_KEY = "clients_editing"  # client id being edited, "" for a new one
_PAGE_KEY = "clients_page"
_CONTACT_COLUMNS = ["name", "role", "email", "phone"]


def _reset_page() -> None:
    st.session_state[_PAGE_KEY] = 1


def render(store, lang: str) -> None:
    st.title(t("nav_clients", lang))

    if st.button(t("clients_new", lang), type="primary"):
        st.session_state[_EDIT_KEY] = ""

    clients = store.list_clients()
    editing = st.session_state.get(_EDIT_KEY)
    if editing is not None:
        current = next((c for c in clients if c.id == editing), None) or Client()
        _render_form(store, current, lang)
        st.divider()

    col_search, col_kind = st.columns([3, 1])
    term = col_search.text_input(
        t("search", lang), placeholder=t("clients_search_placeholder", lang), on_change=_reset_page
    )
    kind = col_kind.selectbox(
        t("type", lang),
        [ALL, "PF", "PJ"],
        format_func=lambda k: t(f"clients_kind_{k.lower()}", lang),
        on_change=_reset_page,
    )

    filtered = filter_clients(clients, term, kind)
    page = paginate(filtered, st.session_state.get(_PAGE_KEY, 1), config.CLIENTS_PAGE_SIZE)
    st.session_state[_PAGE_KEY] = page.number

    if not page.items:
        st.info(t("clients_empty", lang))
    for client in page.items:
        _render_row(store, client, lang)

    prev_col, info_col, next_col = st.columns([1, 2, 1])
    if prev_col.button("‹", disabled=page.number <= 1, key="clients_prev"):
        st.session_state[_PAGE_KEY] = page.number - 1
        st.rerun()
    info_col.caption(t("page_of", lang, page=page.number, total=page.total_pages, count=page.total_items))
    if next_col.button("›", disabled=page.number >= page.total_pages, key="clients_next"):
        st.session_state[_PAGE_KEY] = page.number + 1
        st.rerun()


def _render_row(store, client: Client, lang: str) -> None:
    with st.container(border=True):
        info, actions = st.columns([4, 1])
        info.markdown(f"**{client.name}** · {client.kind} · {client.document}")
        info.caption(" · ".join(v for v in (client.email, client.phone, client.city, client.status) if v))
        if actions.button(t("edit", lang), key=f"edit_client_{client.id}"):
            st.session_state[_EDIT_KEY] = client.id
            st.rerun()
        if actions.button(t("delete", lang), key=f"delete_client_{client.id}"):
            try:
                store.delete_client(client.id)
                flash(t("clients_deleted", lang))
                st.rerun()
            except ClientHasCasesError as e:
                st.warning(t("clients_delete_blocked", lang, count=e.case_count))
            except JuzkError as e:
                logger.error("Client delete failed: %s", e)
                st.error(t("error_store", lang))


def _render_form(store, client: Client, lang: str) -> None:
    is_new = not client.id
    st.subheader(t("clients_new", lang) if is_new else t("clients_edit", lang))
    with st.form("client_form"):
        name = st.text_input(t("clients_name", lang), value=client.name)
        document = st.text_input(t("clients_document", lang), value=client.document, placeholder="000.000.000-00")
        c1, c2 = st.columns(2)
        email = c1.text_input("Email", value=client.email)
        phone = c2.text_input(t("phone", lang), value=client.phone)
        city = c1.text_input(t("clients_city", lang), value=client.city)
        status = c2.selectbox(
            "Status",
            CLIENT_STATUSES,
            index=CLIENT_STATUSES.index(client.status) if client.status in CLIENT_STATUSES else 0,
        )
        st.markdown(f"**{t('clients_contacts', lang)}**")
        contacts_df = st.data_editor(
            pd.DataFrame([c.to_dict() for c in client.contacts], columns=["id", *_CONTACT_COLUMNS]),
            column_order=_CONTACT_COLUMNS,
            num_rows="dynamic",
            use_container_width=True,
            key=f"contacts_editor_{client.id or 'new'}",
        )
        save, cancel = st.columns(2)
        submitted = save.form_submit_button(t("save", lang), type="primary")
        cancelled = cancel.form_submit_button(t("cancel", lang))

    if cancelled:
        st.session_state.pop(_EDIT_KEY, None)
        st.rerun()
    if not submitted:
        return

    contacts = []
    for row in contacts_df.to_dict("records"):
        values = {k: ("" if pd.isna(v) else v) for k, v in row.items()}
        if not str(values.get("name") or "").strip():
            continue
        # rows added in the editor come without an id
        values["id"] = values.get("id") or new_id()
        contacts.append(Contact.from_dict(values))
    updated = Client(
        id=client.id,
        name=name.strip(),
        document=format_cpf_cnpj(document),
        email=email.strip(),
        phone=phone.strip(),
        city=city.strip(),
        status=status,
        contacts=contacts,
    )
    try:
        if is_new:
            store.add_client(updated)
        else:
            store.update_client(updated)
    except ValidationError as e:
        for message in e.errors.values():
            st.error(message)
        return
    except JuzkError as e:
        logger.error("Client save failed: %s", e)
        st.error(t("error_store", lang))
        return
    st.session_state.pop(_EDIT_KEY, None)
    flash(t("saved", lang))
    st.rerun()
