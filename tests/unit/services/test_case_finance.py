"""
Unit tests for case finance: ledger aggregation, fee projections,
transaction validation and the office-wide monthly view.
"""

from datetime import date
from decimal import Decimal

import pytest

from juzk.domain.errors import InvalidTransactionError
from juzk.domain.models import EXPENSE, INCOME, CaseStatus, CaseTransaction
from juzk.services.case_finance import (
    add_transaction,
    office_finance_metrics,
    remove_transaction,
    summarize_case_finance,
    validate_transaction,
)
from tests.helpers import make_case, make_finance, make_tx


class TestSummarizeCaseFinance:
    def test_case_without_finance_yields_zeros(self) -> None:
        summary = summarize_case_finance(make_case(finance=None))
        assert summary.gross_income == Decimal("0.00")
        assert summary.net_balance == Decimal("0.00")
        assert summary.by_category == {}

    def test_gross_expenses_and_net(self) -> None:
        case = make_case(
            finance=make_finance(
                make_tx("t1", "2025-01-05", INCOME, 4500),
                make_tx("t2", "2025-01-06", EXPENSE, 350.50, "Custas"),
                make_tx("t3", "2025-01-07", INCOME, 0.10, "Alvará"),
            )
        )
        summary = summarize_case_finance(case)
        assert summary.gross_income == Decimal("4500.10")
        assert summary.expenses == Decimal("350.50")
        assert summary.net_balance == Decimal("4149.60")
        assert summary.by_category == {
            "Honorários": Decimal("4500.00"),
            "Custas": Decimal("-350.50"),
            "Alvará": Decimal("0.10"),
        }

    def test_fee_projections_from_claim_value(self) -> None:
        case = make_case(claim_value=100000.0, finance=make_finance(fee=4500, success=20, loss=10))
        summary = summarize_case_finance(case)
        assert summary.contractual_fee == Decimal("4500.00")
        assert summary.projected_success_fee == Decimal("20000.00")
        assert summary.projected_loss_award_fee == Decimal("10000.00")
        assert summary.projected_total_fees == Decimal("34500.00")

    def test_float_amounts_do_not_drift(self) -> None:
        txs = [make_tx(f"t{i}", "2025-01-01", INCOME, 0.1) for i in range(10)]
        summary = summarize_case_finance(make_case(finance=make_finance(*txs)))
        assert summary.gross_income == Decimal("1.00")


class TestTransactions:
    @pytest.mark.parametrize(
        "tx",
        [
            CaseTransaction(description="", amount=10),
            CaseTransaction(description="x", amount=0),
            CaseTransaction(description="x", amount=-5),
            CaseTransaction(description="x", amount=5, kind="OUTRO"),
        ],
    )
    def test_invalid_transactions_rejected(self, tx) -> None:
        with pytest.raises(InvalidTransactionError):
            validate_transaction(tx)

    def test_add_creates_finance_block_and_keeps_original(self) -> None:
        case = make_case(finance=None)
        updated = add_transaction(case, CaseTransaction(id="", description="Alvará", amount=100, kind=INCOME))
        assert case.finance is None
        assert len(updated.finance.transactions) == 1
        assert updated.finance.transactions[0].id

    def test_remove_by_id(self) -> None:
        case = make_case(finance=make_finance(make_tx("t1", "", INCOME, 1), make_tx("t2", "", INCOME, 2)))
        updated = remove_transaction(case, "t1")
        assert [tx.id for tx in updated.finance.transactions] == ["t2"]
        assert len(case.finance.transactions) == 2


class TestOfficeFinanceMetrics:
    def test_month_over_month_and_series(self) -> None:
        cases = [
            make_case(
                id="p1",
                status=CaseStatus.ATIVO,
                finance=make_finance(
                    make_tx("a", "2025-03-10", INCOME, 2000),
                    make_tx("b", "2025-02-10", INCOME, 1000),
                    make_tx("c", "2025-03-11", EXPENSE, 300),
                    make_tx("d", "2024-01-01", INCOME, 999),
                    fee=4500,
                ),
            ),
            make_case(id="p2", status=CaseStatus.ARQUIVADO, finance=make_finance(fee=1000)),
        ]
        metrics = office_finance_metrics(cases, date(2025, 3, 15), months=6)

        assert metrics.current_month_revenue == Decimal("2000.00")
        assert metrics.last_month_revenue == Decimal("1000.00")
        assert metrics.current_month_expense == Decimal("300.00")
        assert metrics.revenue_growth == pytest.approx(100.0)
        assert metrics.expense_growth == 100.0
        assert metrics.total_contractual_fees == Decimal("4500.00")

        assert [b.key for b in metrics.monthly] == ["2024-10", "2024-11", "2024-12", "2025-01", "2025-02", "2025-03"]
        assert metrics.monthly[0].label == "Out/24"
        assert metrics.monthly[-1].revenue == Decimal("2000.00")
        assert metrics.monthly[-2].revenue == Decimal("1000.00")

    def test_no_activity_means_zero_growth(self) -> None:
        metrics = office_finance_metrics([make_case(finance=make_finance())], date(2025, 1, 15))
        assert metrics.revenue_growth == 0.0
        assert metrics.expense_growth == 0.0

    def test_january_compares_with_previous_december(self) -> None:
        case = make_case(finance=make_finance(make_tx("a", "2024-12-31", INCOME, 500)))
        metrics = office_finance_metrics([case], date(2025, 1, 2))
        assert metrics.last_month_revenue == Decimal("500.00")

    def test_undated_transactions_are_skipped(self) -> None:
        case = make_case(finance=make_finance(make_tx("a", "", INCOME, 500), make_tx("b", "??", INCOME, 1)))
        metrics = office_finance_metrics([case], date(2025, 1, 2))
        assert metrics.current_month_revenue == Decimal("0.00")
        assert sum(b.revenue for b in metrics.monthly) == Decimal("0.00")
