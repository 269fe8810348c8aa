"""
Case management: searchable list, new-case form and a detail panel with tabs
for data, deadlines, hearings, finance and movement history.
"""

from datetime import date, datetime, time

import pandas as pd
import streamlit as st

from juzk.config.logging_config import setup_logger
from juzk.config.settings import DEFAULT_RESPONSIBLE
from juzk.config.translations import t
from juzk.domain.errors import InvalidTransactionError, JuzkError
from juzk.domain.models import (
    DEADLINE_DONE,
    DEADLINE_PENDING,
    EXPENSE,
    HEARING_CANCELLED,
    HEARING_HELD,
    HEARING_KINDS,
    HEARING_SCHEDULED,
    INCOME,
    MOVEMENT_KINDS,
    TRANSACTION_CATEGORIES,
    CaseFinance,
    CaseStatus,
    CaseTransaction,
    Deadline,
    FeeConfig,
    Hearing,
    LegalArea,
    LegalCase,
    Movement,
)
from juzk.services import case_finance, schedule
from juzk.services.search import client_name, filter_cases
from juzk.ui.session import SELECTED_CASE_KEY, flash, get_custom_fields
from juzk.utils.formatting import format_brl, format_date_br, format_datetime_br, parse_date, parse_datetime

logger = setup_logger(__name__)

_NEW_KEY = "cases_new"


def _save(store, case: LegalCase, lang: str, message_key: str = "saved") -> None:
    try:
        store.update_case(case)
    except JuzkError as e:
        logger.error("Case %s save failed: %s", case.id, e)
        st.error(t("error_store", lang))
        return
    flash(t(message_key, lang))
    st.rerun()


def render(store, lang: str) -> None:
    st.title(t("nav_cases", lang))

    clients = store.list_clients()
    cases = store.list_cases()

    if st.button(t("cases_new", lang), type="primary"):
        st.session_state[_NEW_KEY] = True
    if st.session_state.get(_NEW_KEY):
        _render_new_case_form(store, clients, lang)
        st.divider()

    term = st.text_input(t("search", lang), placeholder=t("cases_search_placeholder", lang))
    filtered = filter_cases(cases, clients, term)
    today = datetime.now().date()

    if not filtered:
        st.info(t("cases_empty", lang))
        return

    rows = []
    for c in filtered:
        deadline = schedule.next_deadline(c, today)
        rows.append(
            {
                t("cases_number", lang): c.number,
                t("cases_title", lang): c.title,
                t("client", lang): client_name(clients, c.client_id),
                t("area", lang): c.area.value,
                "Status": c.status.value,
                t("cases_next_deadline", lang): format_date_br(deadline.date) if deadline else "",
                t("cases_claim_value", lang): format_brl(c.claim_value),
            }
        )
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

    ids = [c.id for c in filtered]
    selected = st.selectbox(
        t("cases_open", lang),
        [""] + ids,
        index=(ids.index(st.session_state[SELECTED_CASE_KEY]) + 1) if st.session_state.get(SELECTED_CASE_KEY) in ids else 0,
        format_func=lambda cid: next((f"{c.number} - {c.title}" for c in filtered if c.id == cid), "—"),
    )
    st.session_state[SELECTED_CASE_KEY] = selected or None
    if selected:
        _render_detail(store, next(c for c in filtered if c.id == selected), clients, lang)


def _render_new_case_form(store, clients, lang: str) -> None:
    if not clients:
        st.warning(t("cases_need_client", lang))
        return
    with st.form("new_case_form"):
        number = st.text_input(t("cases_number", lang))
        title = st.text_input(t("cases_title", lang))
        client_id = st.selectbox(
            t("client", lang), [c.id for c in clients], format_func=lambda cid: client_name(clients, cid)
        )
        c1, c2 = st.columns(2)
        area = c1.selectbox(t("area", lang), list(LegalArea), format_func=lambda a: a.value)
        status = c2.selectbox("Status", list(CaseStatus), format_func=lambda s: s.value)
        opposing = c1.text_input(t("cases_opposing_party", lang))
        claim_value = c2.number_input(t("cases_claim_value", lang), min_value=0.0, step=1000.0)
        filing = c1.date_input(t("cases_filing_date", lang), value=datetime.now().date(), format="DD/MM/YYYY")
        save, cancel = st.columns(2)
        submitted = save.form_submit_button(t("save", lang), type="primary")
        cancelled = cancel.form_submit_button(t("cancel", lang))

    if cancelled:
        st.session_state.pop(_NEW_KEY, None)
        st.rerun()
    if not submitted:
        return
    if not title.strip() or not number.strip():
        st.error(t("cases_required", lang))
        return
    case = LegalCase(
        number=number.strip(),
        title=title.strip(),
        client_id=client_id,
        opposing_party=opposing.strip(),
        area=area,
        status=status,
        claim_value=float(claim_value),
        filing_date=filing.isoformat(),
        finance=CaseFinance(),
        responsible=DEFAULT_RESPONSIBLE,
    )
    try:
        created = store.add_case(case)
    except JuzkError as e:
        logger.error("Case create failed: %s", e)
        st.error(t("error_store", lang))
        return
    st.session_state.pop(_NEW_KEY, None)
    st.session_state[SELECTED_CASE_KEY] = created.id
    flash(t("saved", lang))
    st.rerun()


def _render_detail(store, case: LegalCase, clients, lang: str) -> None:
    st.subheader(f"{case.number} · {case.title}")
    tabs = st.tabs(
        [
            t("cases_tab_data", lang),
            t("cases_tab_deadlines", lang),
            t("cases_tab_hearings", lang),
            t("cases_tab_finance", lang),
            t("cases_tab_movements", lang),
        ]
    )
    with tabs[0]:
        _render_data_tab(store, case, clients, lang)
    with tabs[1]:
        _render_deadlines_tab(store, case, lang)
    with tabs[2]:
        _render_hearings_tab(store, case, lang)
    with tabs[3]:
        _render_finance_tab(store, case, lang)
    with tabs[4]:
        _render_movements_tab(store, case, lang)


def _render_data_tab(store, case: LegalCase, clients, lang: str) -> None:
    client_ids = [c.id for c in clients]
    with st.form(f"case_data_{case.id}"):
        number = st.text_input(t("cases_number", lang), value=case.number)
        title = st.text_input(t("cases_title", lang), value=case.title)
        client_id = st.selectbox(
            t("client", lang),
            client_ids,
            index=client_ids.index(case.client_id) if case.client_id in client_ids else 0,
            format_func=lambda cid: client_name(clients, cid),
        )
        c1, c2 = st.columns(2)
        area = c1.selectbox(
            t("area", lang), list(LegalArea), index=list(LegalArea).index(case.area), format_func=lambda a: a.value
        )
        status = c2.selectbox(
            "Status", list(CaseStatus), index=list(CaseStatus).index(case.status), format_func=lambda s: s.value
        )
        opposing = c1.text_input(t("cases_opposing_party", lang), value=case.opposing_party)
        claim_value = c2.number_input(t("cases_claim_value", lang), min_value=0.0, value=float(case.claim_value))
        responsible = c1.text_input(t("cases_responsible", lang), value=case.responsible)

        custom_values = {}
        fields = [f for f in get_custom_fields() if f.area == case.area]
        if fields:
            st.markdown(f"**{t('cases_custom_fields', lang)}**")
        for f in fields:
            current = case.custom_data.get(f.id)
            if f.type == "date":
                value = st.date_input(f.label, value=parse_date(current), format="DD/MM/YYYY", key=f"cf_{case.id}_{f.id}")
                custom_values[f.id] = value.isoformat() if value else ""
            elif f.type in ("number", "currency"):
                custom_values[f.id] = st.number_input(
                    f.label, value=float(current or 0), key=f"cf_{case.id}_{f.id}"
                )
            else:
                custom_values[f.id] = st.text_input(f.label, value=str(current or ""), key=f"cf_{case.id}_{f.id}")

        submitted = st.form_submit_button(t("save", lang), type="primary")

    if submitted:
        case.number = number.strip()
        case.title = title.strip()
        case.client_id = client_id
        case.area = area
        case.status = status
        case.opposing_party = opposing.strip()
        case.claim_value = float(claim_value)
        case.responsible = responsible.strip()
        case.custom_data = {**case.custom_data, **custom_values}
        _save(store, case, lang)

    if st.checkbox(t("cases_confirm_delete", lang), key=f"confirm_delete_{case.id}"):
        if st.button(t("delete", lang), key=f"delete_case_{case.id}"):
            try:
                store.delete_case(case.id)
            except JuzkError as e:
                logger.error("Case delete failed: %s", e)
                st.error(t("error_store", lang))
                return
            st.session_state.pop(SELECTED_CASE_KEY, None)
            flash(t("cases_deleted", lang))
            st.rerun()


def _render_deadlines_tab(store, case: LegalCase, lang: str) -> None:
    today = datetime.now().date()
    deadlines = sorted(schedule.merged_deadlines(case), key=lambda d: parse_date(d.date) or date.max)
    if not deadlines:
        st.caption(t("cases_no_deadlines", lang))
    for d in deadlines:
        overdue = d.status == DEADLINE_PENDING and (parse_date(d.date) or today) < today
        label = f"{format_date_br(d.date)} · {d.description}"
        col_label, col_done, col_remove = st.columns([4, 1, 1])
        col_label.markdown(f"{'🔴 ' if overdue else ''}{label} · `{d.status}`")
        if d.status == DEADLINE_PENDING and col_done.button("✔", key=f"done_{case.id}_{d.id}"):
            _save(store, schedule.set_deadline_status(case, d.id, DEADLINE_DONE), lang)
        if d.status == DEADLINE_DONE and col_done.button("↺", key=f"reopen_{case.id}_{d.id}"):
            _save(store, schedule.set_deadline_status(case, d.id, DEADLINE_PENDING), lang)
        if col_remove.button("🗑", key=f"rm_deadline_{case.id}_{d.id}"):
            _save(store, schedule.remove_deadline(case, d.id), lang)
        with st.expander(t("edit", lang)):
            _render_deadline_edit_form(store, case, d, lang)

    with st.form(f"add_deadline_{case.id}", clear_on_submit=True):
        c1, c2 = st.columns([1, 2])
        when = c1.date_input(t("date", lang), value=today, format="DD/MM/YYYY")
        description = c2.text_input(t("description", lang))
        if st.form_submit_button(t("cases_add_deadline", lang)):
            if not description.strip():
                st.error(t("description_required", lang))
            else:
                deadline = Deadline(date=when.isoformat(), description=description.strip())
                _save(store, schedule.add_deadline(case, deadline), lang)


def _render_deadline_edit_form(store, case: LegalCase, deadline: Deadline, lang: str) -> None:
    statuses = [DEADLINE_PENDING, DEADLINE_DONE]
    key = f"{case.id}_{deadline.id}"
    with st.form(f"edit_deadline_{key}"):
        c1, c2, c3 = st.columns([1, 2, 1])
        when = c1.date_input(
            t("date", lang), value=parse_date(deadline.date), format="DD/MM/YYYY", key=f"edit_deadline_date_{key}"
        )
        description = c2.text_input(t("description", lang), value=deadline.description, key=f"edit_deadline_desc_{key}")
        status = c3.selectbox(
            "Status",
            statuses,
            index=statuses.index(deadline.status) if deadline.status in statuses else 0,
            key=f"edit_deadline_status_{key}",
        )
        if not st.form_submit_button(t("save", lang)):
            return
    if not description.strip() or when is None:
        st.error(t("description_required", lang))
        return
    updated = schedule.update_deadline(
        case, deadline.id, new_date=when.isoformat(), description=description.strip(), status=status
    )
    _save(store, updated, lang)


def _render_hearing_edit_form(store, case: LegalCase, hearing: Hearing, lang: str) -> None:
    current = parse_datetime(hearing.date) or datetime.combine(datetime.now().date(), time(14, 0))
    kinds = HEARING_KINDS if hearing.kind in HEARING_KINDS else [hearing.kind, *HEARING_KINDS]
    key = f"{case.id}_{hearing.id}"
    with st.form(f"edit_hearing_{key}"):
        c1, c2, c3 = st.columns(3)
        day = c1.date_input(t("date", lang), value=current.date(), format="DD/MM/YYYY", key=f"edit_hearing_day_{key}")
        at = c2.time_input(t("time", lang), value=current.time(), key=f"edit_hearing_time_{key}")
        kind = c3.selectbox(t("type", lang), kinds, index=kinds.index(hearing.kind), key=f"edit_hearing_kind_{key}")
        location = st.text_input(
            t("cases_hearing_location", lang), value=hearing.location or "", key=f"edit_hearing_location_{key}"
        )
        notes = st.text_area(t("notes", lang), value=hearing.notes or "", key=f"edit_hearing_notes_{key}")
        if not st.form_submit_button(t("save", lang)):
            return
    updated = schedule.update_hearing(
        case,
        hearing.id,
        new_date=datetime.combine(day, at).isoformat(timespec="minutes"),
        kind=kind,
        location=location.strip(),
        notes=notes.strip(),
    )
    _save(store, updated, lang)


def _render_hearings_tab(store, case: LegalCase, lang: str) -> None:
    hearings = sorted(schedule.merged_hearings(case), key=lambda h: h.date or "")
    if not hearings:
        st.caption(t("cases_no_hearings", lang))
    statuses = [HEARING_SCHEDULED, HEARING_HELD, HEARING_CANCELLED]
    for h in hearings:
        with st.container(border=True):
            st.markdown(f"**{format_datetime_br(h.date)}** · {h.kind} · `{h.status}`")
            if schedule.is_url(h.location):
                st.link_button(t("agenda_join", lang), h.location)
            elif h.location:
                st.caption(h.location)
            if h.notes:
                st.caption(h.notes)
            new_status = st.selectbox(
                "Status",
                statuses,
                index=statuses.index(h.status) if h.status in statuses else 0,
                key=f"hearing_status_{case.id}_{h.id}",
            )
            if new_status != h.status:
                _save(store, schedule.set_hearing_status(case, h.id, new_status), lang)
            if st.button("🗑", key=f"rm_hearing_{case.id}_{h.id}"):
                _save(store, schedule.remove_hearing(case, h.id), lang)
            with st.expander(t("edit", lang)):
                _render_hearing_edit_form(store, case, h, lang)

    with st.form(f"add_hearing_{case.id}", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        day = c1.date_input(t("date", lang), value=datetime.now().date(), format="DD/MM/YYYY")
        at = c2.time_input(t("time", lang), value=time(14, 0))
        kind = c3.selectbox(t("type", lang), HEARING_KINDS)
        location = st.text_input(t("cases_hearing_location", lang))
        notes = st.text_area(t("notes", lang))
        if st.form_submit_button(t("cases_add_hearing", lang)):
            hearing = Hearing(
                date=datetime.combine(day, at).isoformat(timespec="minutes"),
                kind=kind,
                location=location.strip(),
                notes=notes.strip(),
            )
            _save(store, schedule.add_hearing(case, hearing), lang)


def _render_finance_tab(store, case: LegalCase, lang: str) -> None:
    summary = case_finance.summarize_case_finance(case)
    c1, c2, c3 = st.columns(3)
    c1.metric(t("finance_gross", lang), format_brl(summary.gross_income))
    c2.metric(t("finance_expenses", lang), format_brl(summary.expenses))
    c3.metric(t("finance_net", lang), format_brl(summary.net_balance))
    c1.metric(t("finance_contractual", lang), format_brl(summary.contractual_fee))
    c2.metric(t("finance_success_fee", lang), format_brl(summary.projected_success_fee))
    c3.metric(t("finance_loss_award", lang), format_brl(summary.projected_loss_award_fee))

    fees = case.finance.config if case.finance else FeeConfig()
    with st.form(f"fees_{case.id}"):
        st.markdown(f"**{t('finance_fee_config', lang)}**")
        f1, f2, f3 = st.columns(3)
        contractual = f1.number_input(t("finance_contractual", lang), min_value=0.0, value=float(fees.contractual_fee))
        success = f2.number_input(
            t("finance_success_percent", lang), min_value=0.0, max_value=100.0, value=float(fees.success_percent)
        )
        loss_award = f3.number_input(
            t("finance_loss_award_percent", lang), min_value=0.0, max_value=100.0, value=float(fees.loss_award_percent)
        )
        if st.form_submit_button(t("save", lang)):
            if case.finance is None:
                case.finance = CaseFinance()
            case.finance.config = FeeConfig(float(contractual), float(success), float(loss_award))
            _save(store, case, lang)

    transactions = case.finance.transactions if case.finance else []
    if transactions:
        st.markdown(f"**{t('finance_ledger', lang)}**")
        for tx in sorted(transactions, key=lambda x: x.date or "", reverse=True):
            col_info, col_amount, col_rm = st.columns([4, 2, 1])
            col_info.markdown(f"{format_date_br(tx.date)} · {tx.description} · _{tx.category}_")
            sign = "+" if tx.kind == INCOME else "-"
            col_amount.markdown(f"{sign} {format_brl(tx.amount)}")
            if col_rm.button("🗑", key=f"rm_tx_{case.id}_{tx.id}"):
                _save(store, case_finance.remove_transaction(case, tx.id), lang)
    else:
        st.caption(t("finance_no_transactions", lang))

    with st.form(f"add_tx_{case.id}", clear_on_submit=True):
        st.markdown(f"**{t('finance_add_transaction', lang)}**")
        c1, c2, c3 = st.columns(3)
        when = c1.date_input(t("date", lang), value=datetime.now().date(), format="DD/MM/YYYY")
        kind = c2.selectbox(
            t("type", lang), [INCOME, EXPENSE], format_func=lambda k: t(f"finance_kind_{k.lower()}", lang)
        )
        category = c3.selectbox(t("category", lang), TRANSACTION_CATEGORIES)
        description = st.text_input(t("description", lang))
        amount = st.number_input(t("amount", lang), min_value=0.0, step=100.0)
        if st.form_submit_button(t("add", lang)):
            tx = CaseTransaction(
                date=when.isoformat(), description=description.strip(), kind=kind, amount=float(amount), category=category
            )
            try:
                updated = case_finance.add_transaction(case, tx)
            except InvalidTransactionError:
                st.error(t("finance_invalid_transaction", lang))
            else:
                _save(store, updated, lang)


def _render_movements_tab(store, case: LegalCase, lang: str) -> None:
    with st.form(f"add_movement_{case.id}", clear_on_submit=True):
        c1, c2 = st.columns([1, 1])
        when = c1.date_input(t("date", lang), value=datetime.now().date(), format="DD/MM/YYYY")
        kind = c2.selectbox(t("type", lang), MOVEMENT_KINDS, index=1)
        description = st.text_area(t("description", lang))
        if st.form_submit_button(t("cases_add_movement", lang)):
            if not description.strip():
                st.error(t("description_required", lang))
            else:
                try:
                    store.add_movement(case.id, Movement(date=when.isoformat(), description=description.strip(), kind=kind))
                except JuzkError as e:
                    logger.error("Movement add failed: %s", e)
                    st.error(t("error_store", lang))
                else:
                    flash(t("saved", lang))
                    st.rerun()

    if not case.movements:
        st.caption(t("cases_no_movements", lang))
    for m in case.movements:
        st.markdown(f"**{format_date_br(m.date)}** · `{m.kind}`  \n{m.description}")
