"""
Unit tests for the financial report PDF and the ReportLab helpers.
"""

from datetime import date

from juzk.domain.models import EXPENSE, INCOME
from juzk.services.finance_report import generate_finance_report_pdf
from juzk.utils.pdf_shared import escape_for_reportlab, register_and_get_fonts
from tests.helpers import make_case, make_finance, make_tx


def test_report_is_a_pdf() -> None:
    cases = [
        make_case(
            id="p1",
            title="Ação <Revisional> & Cobrança",
            finance=make_finance(
                make_tx("a", "2025-03-01", INCOME, 4500),
                make_tx("b", "2025-03-02", EXPENSE, 350.5, "Custas"),
                fee=4500,
                success=20,
            ),
        ),
        make_case(id="p2", finance=None),
    ]
    pdf = generate_finance_report_pdf(cases, date(2025, 3, 15), office_name="Silva & Associados")
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")


def test_report_without_cases() -> None:
    assert generate_finance_report_pdf([], date(2025, 3, 15)).startswith(b"%PDF")


def test_escape_for_reportlab() -> None:
    assert escape_for_reportlab("A & B <c>") == "A &amp; B &lt;c&gt;"
    assert escape_for_reportlab("") == ""


def test_report_fonts_are_registered_once() -> None:
    fonts = register_and_get_fonts()
    assert fonts in (
        ("DejaVuSans", "DejaVuSans-Bold", "DejaVuSans-Oblique"),
        ("DejaVuSans", "DejaVuSans-Bold", "Helvetica-Oblique"),
        ("DejaVuSans", "Helvetica-Bold", "Helvetica-Oblique"),
        ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique"),
    )
    assert register_and_get_fonts() is fonts
