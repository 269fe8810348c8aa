"""Overview page: headline metrics, cases by area and by status, next events."""

from datetime import datetime

import pandas as pd
import streamlit as st

from juzk.config.translations import t
from juzk.services.schedule import collect_agenda_events, dashboard_metrics, group_agenda_events
from juzk.utils.formatting import format_brl, format_datetime_br


def render(store, lang: str) -> None:
    st.title(t("nav_dashboard", lang))
    st.caption(t("dashboard_subtitle", lang))

    cases = store.list_cases()
    today = datetime.now().date()
    metrics = dashboard_metrics(cases, today)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric(t("dashboard_active_cases", lang), metrics.active_cases)
    c2.metric(t("dashboard_claim_value", lang), format_brl(metrics.total_claim_value))
    c3.metric(t("dashboard_critical_deadlines", lang), metrics.critical_deadlines)
    c4.metric(t("dashboard_productivity", lang), f"{metrics.productivity}%")

    if not cases:
        st.info(t("dashboard_empty", lang))
        return

    left, right = st.columns(2)
    with left:
        st.subheader(t("dashboard_by_area", lang))
        st.bar_chart(pd.DataFrame({t("cases", lang): metrics.area_counts}))
    with right:
        st.subheader(t("dashboard_by_status", lang))
        st.bar_chart(pd.DataFrame({t("cases", lang): metrics.status_counts}))

    groups = group_agenda_events(collect_agenda_events(cases), today)
    upcoming = groups.overdue + groups.today + groups.tomorrow + groups.this_week
    st.subheader(t("dashboard_upcoming", lang))
    if not upcoming:
        st.caption(t("agenda_empty", lang))
        return
    st.dataframe(
        pd.DataFrame(
            [
                {
                    t("date", lang): format_datetime_br(e.date),
                    t("type", lang): t(f"event_{e.kind.lower()}", lang),
                    t("description", lang): e.description,
                    t("case", lang): f"{e.case_number} - {e.case_title}",
                }
                for e in upcoming
            ]
        ),
        hide_index=True,
        use_container_width=True,
    )
