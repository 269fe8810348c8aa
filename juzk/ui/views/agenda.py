"""Agenda: pending deadlines and scheduled hearings of all cases, grouped by day."""

from datetime import datetime

import streamlit as st

from juzk.config.translations import t
from juzk.services.schedule import EVENT_HEARING, AgendaEvent, collect_agenda_events, group_agenda_events, is_url
from juzk.ui.session import open_case
from juzk.utils.formatting import format_datetime_br


def _render_event(event: AgendaEvent, index: int, lang: str) -> None:
    with st.container(border=True):
        icon = "⚖️" if event.kind == EVENT_HEARING else "⏰"
        st.markdown(f"{icon} **{format_datetime_br(event.date)}** · {t(f'event_{event.kind.lower()}', lang)}")
        st.markdown(event.description)
        st.caption(f"{event.case_number} · {event.case_title}")
        if is_url(event.location):
            st.link_button(t("agenda_join", lang), event.location)
        elif event.location:
            st.caption(f"📍 {event.location}")
        st.button(
            t("agenda_open_case", lang),
            key=f"agenda_open_{event.case_id}_{event.id}_{index}",
            on_click=open_case,
            args=(event.case_id,),
        )


def render(store, lang: str) -> None:
    st.title(t("nav_agenda", lang))

    groups = group_agenda_events(collect_agenda_events(store.list_cases()), datetime.now().date())
    if groups.total() == 0:
        st.info(t("agenda_empty", lang))
        return

    sections = [
        ("agenda_overdue", groups.overdue),
        ("agenda_today", groups.today),
        ("agenda_tomorrow", groups.tomorrow),
        ("agenda_this_week", groups.this_week),
        ("agenda_later", groups.later),
    ]
    for key, events in sections:
        if not events:
            continue
        st.subheader(f"{t(key, lang)} ({len(events)})")
        for index, event in enumerate(events):
            _render_event(event, index, lang)
