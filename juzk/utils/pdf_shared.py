"""
ReportLab helpers for the office finance report (services/finance_report.py).

The report carries Portuguese case titles, client names and category labels,
so it prefers DejaVu Sans (full accent coverage) and falls back to the
built-in Helvetica family. Case titles and descriptions are user input and
go through escape_for_reportlab before they reach a Paragraph.
"""

from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

_FONT_CACHE: tuple[str, str, str] | None = None

_FONT_DIRS = [
    "/usr/share/fonts/truetype/dejavu",
    "/usr/share/fonts/dejavu",
]


def register_and_get_fonts() -> tuple[str, str, str]:
    """
    Register DejaVuSans (and Bold, Oblique) if available; return (font, font_bold, font_italic).
    Falls back to the Helvetica family. Cached after the first call.
    """
    global _FONT_CACHE  # noqa: PLW0603
    if _FONT_CACHE is not None:
        return _FONT_CACHE
    font, font_bold, font_italic = "Helvetica", "Helvetica-Bold", "Helvetica-Oblique"
    for font_dir in _FONT_DIRS:
        regular = Path(font_dir) / "DejaVuSans.ttf"
        if not regular.exists():
            continue
        pdfmetrics.registerFont(TTFont("DejaVuSans", str(regular)))
        font = "DejaVuSans"
        bold = Path(font_dir) / "DejaVuSans-Bold.ttf"
        if bold.exists():
            pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", str(bold)))
            font_bold = "DejaVuSans-Bold"
        oblique = Path(font_dir) / "DejaVuSans-Oblique.ttf"
        if oblique.exists():
            pdfmetrics.registerFont(TTFont("DejaVuSans-Oblique", str(oblique)))
            font_italic = "DejaVuSans-Oblique"
        break
    _FONT_CACHE = (font, font_bold, font_italic)
    return _FONT_CACHE


def escape_for_reportlab(s: str) -> str:
    """Escape for ReportLab Paragraph (XML-style; prevents markup injection in PDF content)."""
    return (
        (s or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
