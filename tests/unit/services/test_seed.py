"""
Unit tests for demo data generation.
"""

from datetime import date, datetime

from juzk.domain.models import LegalArea
from juzk.services.seed import (
    CASE_COUNT,
    CLIENT_COUNT,
    THESIS_COUNT,
    build_mock_cases,
    build_mock_clients,
    build_mock_data,
)

NOW = datetime(2025, 1, 31, 9, 0)


def test_counts() -> None:
    clients, cases, theses = build_mock_data(NOW)
    assert len(clients) == CLIENT_COUNT == 15
    assert len(cases) == CASE_COUNT == 20
    assert len(theses) == THESIS_COUNT == 10


def test_clients_alternate_kind() -> None:
    clients = build_mock_clients()
    assert clients[0].kind == "PF"
    assert clients[1].kind == "PJ"
    assert len({c.id for c in clients}) == CLIENT_COUNT


def test_cases_reference_existing_clients() -> None:
    clients = build_mock_clients()
    ids = {c.id for c in clients}
    assert all(case.client_id in ids for case in build_mock_cases(clients, NOW.date()))


def test_cases_cycle_through_all_areas() -> None:
    cases = build_mock_cases(build_mock_clients(), NOW.date())
    assert {c.area for c in cases} == set(LegalArea)


def test_dates_are_relative_to_today() -> None:
    today = date(2025, 1, 31)
    cases = build_mock_cases(build_mock_clients(), today)
    for case in cases:
        assert case.deadlines[0].date > today.isoformat()
        assert case.filing_date <= today.isoformat()
        assert case.finance.transactions[1].date == today.isoformat()
    assert cases[0].hearings[0].date == "2025-02-05T14:30"
    assert cases[1].hearings == []
