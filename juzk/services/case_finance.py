"""
Case Finance

Aggregates the per-case ledger (fee agreement + transactions) into gross/net
figures and builds the office-wide monthly view used by the finance page and
the PDF report. All money math is done in Decimal cents.
"""

import copy
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from juzk.config.logging_config import setup_logger
from juzk.domain.errors import InvalidTransactionError
from juzk.domain.models import EXPENSE, INCOME, CaseFinance, CaseStatus, CaseTransaction, LegalCase, new_id
from juzk.utils.formatting import parse_date, to_money

logger = setup_logger(__name__)

_ZERO = Decimal("0.00")
_HUNDRED = Decimal("100")

_PT_MONTHS = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")


@dataclass
class CaseFinanceSummary:
    gross_income: Decimal = _ZERO
    expenses: Decimal = _ZERO
    net_balance: Decimal = _ZERO
    contractual_fee: Decimal = _ZERO
    projected_success_fee: Decimal = _ZERO
    projected_loss_award_fee: Decimal = _ZERO
    projected_total_fees: Decimal = _ZERO
    by_category: dict[str, Decimal] = field(default_factory=dict)


@dataclass
class MonthBucket:
    key: str  # YYYY-MM
    label: str  # e.g. "Nov/25"
    revenue: Decimal = _ZERO
    expense: Decimal = _ZERO


@dataclass
class OfficeFinanceMetrics:
    current_month_revenue: Decimal = _ZERO
    current_month_expense: Decimal = _ZERO
    last_month_revenue: Decimal = _ZERO
    last_month_expense: Decimal = _ZERO
    revenue_growth: float = 0.0
    expense_growth: float = 0.0
    total_contractual_fees: Decimal = _ZERO
    monthly: list[MonthBucket] = field(default_factory=list)


def _percent_of(base: Decimal, percent: float) -> Decimal:
    return to_money(base * Decimal(str(percent or 0)) / _HUNDRED)


def summarize_case_finance(case: LegalCase) -> CaseFinanceSummary:
    """Aggregate the case ledger. A case without a finance block yields zeros."""
    if case.finance is None:
        return CaseFinanceSummary()

    gross = _ZERO
    expenses = _ZERO
    by_category: dict[str, Decimal] = {}
    for tx in case.finance.transactions:
        amount = to_money(tx.amount)
        if tx.kind == INCOME:
            gross += amount
            signed = amount
        else:
            expenses += amount
            signed = -amount
        by_category[tx.category] = by_category.get(tx.category, _ZERO) + signed

    fees = case.finance.config
    claim_value = to_money(case.claim_value)
    contractual = to_money(fees.contractual_fee)
    success = _percent_of(claim_value, fees.success_percent)
    loss_award = _percent_of(claim_value, fees.loss_award_percent)

    return CaseFinanceSummary(
        gross_income=gross,
        expenses=expenses,
        net_balance=gross - expenses,
        contractual_fee=contractual,
        projected_success_fee=success,
        projected_loss_award_fee=loss_award,
        projected_total_fees=contractual + success + loss_award,
        by_category=by_category,
    )


def validate_transaction(tx: CaseTransaction) -> None:
    """Reject transactions without description or with a non-positive amount."""
    if not (tx.description or "").strip():
        raise InvalidTransactionError("Transaction description is required")
    if to_money(tx.amount) <= _ZERO:
        raise InvalidTransactionError(f"Transaction amount must be positive, got {tx.amount}")
    if tx.kind not in (INCOME, EXPENSE):
        raise InvalidTransactionError(f"Unknown transaction kind {tx.kind!r}")


def add_transaction(case: LegalCase, tx: CaseTransaction) -> LegalCase:
    """Return a copy of the case with the validated transaction appended."""
    validate_transaction(tx)
    updated = copy.deepcopy(case)
    if updated.finance is None:
        updated.finance = CaseFinance()
    if not tx.id:
        tx.id = new_id()
    updated.finance.transactions.append(tx)
    return updated


def remove_transaction(case: LegalCase, tx_id: str) -> LegalCase:
    updated = copy.deepcopy(case)
    if updated.finance is not None:
        updated.finance.transactions = [t for t in updated.finance.transactions if str(t.id) != str(tx_id)]
    return updated


def _growth(current: Decimal, previous: Decimal) -> float:
    if previous > _ZERO:
        return float((current - previous) / previous * _HUNDRED)
    return 100.0 if current > _ZERO else 0.0


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _month_label(year: int, month: int) -> str:
    return f"{_PT_MONTHS[month - 1].capitalize()}/{year % 100:02d}"


def office_finance_metrics(cases: list[LegalCase], today: date, months: int = 6) -> OfficeFinanceMetrics:
    """
    Office-wide finance view.

    Month-over-month comparison of revenue and expense, contractual fees of
    active cases, and a per-month series (oldest first) of the last ``months``
    months including the current one. Transactions with unparseable dates are
    skipped.
    """
    metrics = OfficeFinanceMetrics()
    current_key = (today.year, today.month)
    last_key = _shift_month(today.year, today.month, -1)

    buckets: dict[tuple[int, int], MonthBucket] = {}
    for i in range(months - 1, -1, -1):
        y, m = _shift_month(today.year, today.month, -i)
        buckets[(y, m)] = MonthBucket(key=f"{y:04d}-{m:02d}", label=_month_label(y, m))

    skipped = 0
    for case in cases:
        if case.finance is None:
            continue
        if case.status == CaseStatus.ATIVO:
            metrics.total_contractual_fees += to_money(case.finance.config.contractual_fee)

        for tx in case.finance.transactions:
            tx_date = parse_date(tx.date)
            if tx_date is None:
                skipped += 1
                continue
            amount = to_money(tx.amount)
            is_income = tx.kind == INCOME
            key = (tx_date.year, tx_date.month)

            if key == current_key:
                if is_income:
                    metrics.current_month_revenue += amount
                else:
                    metrics.current_month_expense += amount
            elif key == last_key:
                if is_income:
                    metrics.last_month_revenue += amount
                else:
                    metrics.last_month_expense += amount

            bucket = buckets.get(key)
            if bucket is not None:
                if is_income:
                    bucket.revenue += amount
                else:
                    bucket.expense += amount

    if skipped:
        logger.debug("Skipped %s transactions without a valid date", skipped)

    metrics.revenue_growth = _growth(metrics.current_month_revenue, metrics.last_month_revenue)
    metrics.expense_growth = _growth(metrics.current_month_expense, metrics.last_month_expense)
    metrics.monthly = list(buckets.values())
    return metrics
