"""
Financial report PDF.

Office metrics for the current month, the monthly revenue/expense series and
a per-case ledger table, rendered with ReportLab.
"""

from datetime import date, datetime
from io import BytesIO

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from juzk.config.logging_config import setup_logger
from juzk.config.settings import APP_TITLE, config
from juzk.domain.models import LegalCase
from juzk.services.case_finance import office_finance_metrics, summarize_case_finance
from juzk.utils.formatting import format_brl
from juzk.utils.pdf_shared import escape_for_reportlab, register_and_get_fonts

logger = setup_logger(__name__)

_FONT, _FONT_BOLD, _ = register_and_get_fonts()

_PRIMARY = HexColor("#1e3a5f")
_DARK = HexColor("#222222")
_GREY = HexColor("#666666")
_HR_COLOR = HexColor("#e2e8f0")
_ROW_ALT = HexColor("#f8fafc")


def _build_styles() -> dict[str, ParagraphStyle]:
    return {
        "title": ParagraphStyle(
            "ReportTitle", fontName=_FONT_BOLD, fontSize=16, leading=20, textColor=_PRIMARY, alignment=TA_CENTER
        ),
        "subtitle": ParagraphStyle(
            "ReportSubtitle", fontName=_FONT, fontSize=9, leading=12, spaceAfter=10, textColor=_GREY, alignment=TA_CENTER
        ),
        "heading": ParagraphStyle(
            "SectionHeading", fontName=_FONT_BOLD, fontSize=11, leading=14, spaceBefore=10, spaceAfter=4, textColor=_PRIMARY
        ),
        "cell": ParagraphStyle("Cell", fontName=_FONT, fontSize=8.5, leading=11, textColor=_DARK),
        "cell_right": ParagraphStyle("CellRight", fontName=_FONT, fontSize=8.5, leading=11, textColor=_DARK, alignment=TA_RIGHT),
        "cell_head": ParagraphStyle("CellHead", fontName=_FONT_BOLD, fontSize=8.5, leading=11, textColor=_PRIMARY),
        "footer": ParagraphStyle("Footer", fontName=_FONT, fontSize=7.5, leading=10, textColor=_GREY, alignment=TA_CENTER),
    }


def _table(rows: list[list], col_widths: list[float]) -> Table:
    table = Table(rows, colWidths=col_widths, repeatRows=1)
    style = [
        ("LINEBELOW", (0, 0), (-1, 0), 0.8, _PRIMARY),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    for i in range(2, len(rows), 2):
        style.append(("BACKGROUND", (0, i), (-1, i), _ROW_ALT))
    table.setStyle(TableStyle(style))
    return table


def generate_finance_report_pdf(cases: list[LegalCase], today: date, office_name: str = "") -> bytes:
    """Build the office financial report and return the PDF bytes."""
    styles = _build_styles()
    metrics = office_finance_metrics(cases, today, config.FINANCE_CHART_MONTHS)

    def p(text, style="cell"):
        return Paragraph(escape_for_reportlab(str(text)), styles[style])

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4, leftMargin=18 * mm, rightMargin=18 * mm, topMargin=18 * mm, bottomMargin=18 * mm
    )
    width = A4[0] - 36 * mm
    story: list = []

    title = "Relatório Financeiro" + (f" - {office_name}" if office_name else "")
    story.append(p(title, "title"))
    story.append(p(f"{APP_TITLE} · {today.strftime('%d/%m/%Y')}", "subtitle"))
    story.append(HRFlowable(width="100%", thickness=1, color=_HR_COLOR, spaceBefore=2, spaceAfter=6))

    story.append(p("Resumo do mês", "heading"))
    summary_rows = [
        [p("Indicador", "cell_head"), p("Mês atual", "cell_head"), p("Mês anterior", "cell_head"), p("Variação", "cell_head")],
        [
            p("Receitas"),
            p(format_brl(metrics.current_month_revenue), "cell_right"),
            p(format_brl(metrics.last_month_revenue), "cell_right"),
            p(f"{metrics.revenue_growth:.1f}%", "cell_right"),
        ],
        [
            p("Despesas"),
            p(format_brl(metrics.current_month_expense), "cell_right"),
            p(format_brl(metrics.last_month_expense), "cell_right"),
            p(f"{metrics.expense_growth:.1f}%", "cell_right"),
        ],
    ]
    story.append(_table(summary_rows, [width * 0.31, width * 0.23, width * 0.23, width * 0.23]))
    story.append(Spacer(1, 4))
    story.append(p(f"Honorários contratuais (processos ativos): {format_brl(metrics.total_contractual_fees)}"))

    story.append(p("Evolução mensal", "heading"))
    month_rows = [[p("Mês", "cell_head"), p("Receitas", "cell_head"), p("Despesas", "cell_head"), p("Saldo", "cell_head")]]
    for bucket in metrics.monthly:
        month_rows.append(
            [
                p(bucket.label),
                p(format_brl(bucket.revenue), "cell_right"),
                p(format_brl(bucket.expense), "cell_right"),
                p(format_brl(bucket.revenue - bucket.expense), "cell_right"),
            ]
        )
    story.append(_table(month_rows, [width * 0.25] * 4))

    story.append(p("Processos", "heading"))
    case_rows = [
        [p("Processo", "cell_head"), p("Bruto", "cell_head"), p("Despesas", "cell_head"), p("Líquido", "cell_head")]
    ]
    for case in cases:
        if case.finance is None or not case.finance.transactions:
            continue
        s = summarize_case_finance(case)
        case_rows.append(
            [
                p(f"{case.number} - {case.title}"),
                p(format_brl(s.gross_income), "cell_right"),
                p(format_brl(s.expenses), "cell_right"),
                p(format_brl(s.net_balance), "cell_right"),
            ]
        )
    if len(case_rows) == 1:
        story.append(p("Nenhum lançamento registrado."))
    else:
        story.append(_table(case_rows, [width * 0.46, width * 0.18, width * 0.18, width * 0.18]))

    story.append(Spacer(1, 12))
    story.append(p(f"{APP_TITLE} | gerado em {datetime.now().strftime('%d/%m/%Y %H:%M')}", "footer"))

    doc.build(story)
    logger.info("Finance report generated (%s cases)", len(cases))
    return buffer.getvalue()
