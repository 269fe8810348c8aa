"""Office finance: month-over-month metrics, monthly chart, per-case table and PDF report."""

from datetime import datetime

import pandas as pd
import streamlit as st

from juzk.config.settings import config
from juzk.config.translations import t
from juzk.services.case_finance import office_finance_metrics, summarize_case_finance
from juzk.services.finance_report import generate_finance_report_pdf
from juzk.ui.auth import get_current_office
from juzk.utils.formatting import format_brl

_REPORT_KEY = "finance_report_pdf"


def render(store, lang: str) -> None:
    st.title(t("nav_finance", lang))

    cases = store.list_cases()
    today = datetime.now().date()
    metrics = office_finance_metrics(cases, today, config.FINANCE_CHART_MONTHS)

    c1, c2, c3 = st.columns(3)
    c1.metric(
        t("finance_month_revenue", lang),
        format_brl(metrics.current_month_revenue),
        f"{metrics.revenue_growth:.1f}%",
    )
    c2.metric(
        t("finance_month_expense", lang),
        format_brl(metrics.current_month_expense),
        f"{metrics.expense_growth:.1f}%",
        delta_color="inverse",
    )
    c3.metric(t("finance_contractual_active", lang), format_brl(metrics.total_contractual_fees))

    st.subheader(t("finance_chart_title", lang, months=len(metrics.monthly)))
    chart = pd.DataFrame(
        {
            t("finance_revenue", lang): [float(b.revenue) for b in metrics.monthly],
            t("finance_expense", lang): [float(b.expense) for b in metrics.monthly],
        },
        index=[b.label for b in metrics.monthly],
    )
    st.bar_chart(chart, stack=False)

    rows = []
    for case in cases:
        if case.finance is None:
            continue
        s = summarize_case_finance(case)
        rows.append(
            {
                t("case", lang): f"{case.number} - {case.title}",
                t("finance_gross", lang): format_brl(s.gross_income),
                t("finance_expenses", lang): format_brl(s.expenses),
                t("finance_net", lang): format_brl(s.net_balance),
                t("finance_projected_fees", lang): format_brl(s.projected_total_fees),
            }
        )
    if rows:
        st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
    else:
        st.info(t("finance_no_transactions", lang))

    if st.button(t("finance_generate_report", lang)):
        office = get_current_office()
        st.session_state[_REPORT_KEY] = generate_finance_report_pdf(cases, today, office.name if office else "")
    report = st.session_state.get(_REPORT_KEY)
    if report:
        st.download_button(
            t("finance_download_report", lang),
            data=report,
            file_name=f"relatorio-financeiro-{today.isoformat()}.pdf",
            mime="application/pdf",
        )
