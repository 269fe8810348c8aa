"""
Formatting and parsing helpers for Brazilian conventions:
currency (R$ 1.234,56), dates (dd/mm/yyyy) and CPF/CNPJ documents.
"""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

_BR_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_NON_DIGITS = re.compile(r"\D")

CPF_DIGITS = 11


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO date/date-time (with optional 'Z') or a dd/mm/yyyy date. Returns naive datetime or None."""
    if not value:
        return None
    text = str(value).strip()
    if not text:
        return None
    m = _BR_DATE_RE.match(text)
    if m:
        day, month, year = (int(g) for g in m.groups())
        try:
            return datetime(year, month, day)
        except ValueError:
            return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def parse_date(value: str | None) -> date | None:
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


def format_date_br(value: str | None) -> str:
    """'2025-11-20' -> '20/11/2025'; empty string when unparseable."""
    parsed = parse_datetime(value)
    return parsed.strftime("%d/%m/%Y") if parsed else ""


def format_datetime_br(value: str | None) -> str:
    parsed = parse_datetime(value)
    if not parsed:
        return ""
    if "T" not in str(value) and " " not in str(value).strip():
        return parsed.strftime("%d/%m/%Y")
    return parsed.strftime("%d/%m/%Y %H:%M")


def to_money(value) -> Decimal:
    """Convert to Decimal rounded to cents (half-up)."""
    return Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_brl(value) -> str:
    """Format as Brazilian Real: 1234.5 -> 'R$ 1.234,50', -10 -> '-R$ 10,00'."""
    amount = to_money(value)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def only_digits(value: str | None) -> str:
    return _NON_DIGITS.sub("", value or "")


def infer_client_kind(document: str | None) -> str:
    """More than 11 digits means CNPJ (legal entity, PJ); otherwise CPF (PF)."""
    return "PJ" if len(only_digits(document)) > CPF_DIGITS else "PF"


def format_cpf_cnpj(value: str | None) -> str:
    """Progressively mask a CPF (000.000.000-00) or CNPJ (00.000.000/0000-00) while typing."""
    v = only_digits(value)
    if len(v) <= CPF_DIGITS:
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", v, count=1)
        v = re.sub(r"(\d{3})(\d)", r"\1.\2", v, count=1)
        return re.sub(r"(\d{3})(\d{1,2})$", r"\1-\2", v, count=1)
    v = re.sub(r"^(\d{2})(\d)", r"\1.\2", v, count=1)
    v = re.sub(r"^(\d{2})\.(\d{3})(\d)", r"\1.\2.\3", v, count=1)
    v = re.sub(r"\.(\d{3})(\d)", r".\1/\2", v, count=1)
    v = re.sub(r"(\d{4})(\d)", r"\1-\2", v, count=1)
    return v[:18]
