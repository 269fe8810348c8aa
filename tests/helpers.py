"""
Shared test helpers. Used across unit tests to avoid duplication.
"""

from unittest.mock import MagicMock

from juzk.domain.models import CaseFinance, CaseTransaction, Client, FeeConfig, LegalCase


def make_client(**overrides: object) -> Client:
    """Create a minimal valid Client."""
    defaults: dict[str, object] = {
        "id": "c1",
        "name": "Maria Souza",
        "kind": "PF",
        "document": "123.456.789-00",
        "email": "maria@example.com",
    }
    defaults.update(overrides)
    return Client(**defaults)


def make_case(**overrides: object) -> LegalCase:
    """Create a minimal LegalCase with sensible defaults for tests."""
    defaults: dict[str, object] = {
        "id": "p1",
        "number": "0001234-55.2024.8.26.0100",
        "title": "Ação de Cobrança",
        "client_id": "c1",
        "claim_value": 10000.0,
    }
    defaults.update(overrides)
    return LegalCase(**defaults)


def make_tx(tx_id: str, date: str, kind: str, amount: float, category: str = "Honorários") -> CaseTransaction:
    return CaseTransaction(id=tx_id, date=date, description=f"tx {tx_id}", kind=kind, amount=amount, category=category)


def make_finance(*transactions: CaseTransaction, fee: float = 0.0, success: float = 0.0, loss: float = 0.0) -> CaseFinance:
    return CaseFinance(config=FeeConfig(fee, success, loss), transactions=list(transactions))


def mock_supabase_client():
    """Build a mock Supabase client; every table() call returns the same chainable table mock."""
    client = MagicMock()
    table = MagicMock()
    client.table.return_value = table
    for method in ("select", "insert", "update", "delete", "eq", "order", "limit"):
        getattr(table, method).return_value = table
    return client, table
