"""
Unit tests for list filtering and pagination.
"""

import pytest

from juzk.domain.models import LegalArea, Thesis
from juzk.services.search import ALL, client_name, filter_cases, filter_clients, filter_theses, paginate
from tests.helpers import make_case, make_client

CLIENTS = [
    make_client(id="c1", name="Maria Souza", kind="PF", document="123.456.789-00"),
    make_client(id="c2", name="ACME Indústria S/A", kind="PJ", document="12.345.678/0001-99"),
]


class TestPaginate:
    def test_slices_pages(self) -> None:
        page = paginate(list(range(25)), 3, 12)
        assert page.items == [24]
        assert page.number == 3
        assert page.total_pages == 3
        assert page.total_items == 25

    @pytest.mark.parametrize(("requested", "expected"), [(0, 1), (-4, 1), (99, 3)])
    def test_page_number_is_clamped(self, requested, expected) -> None:
        assert paginate(list(range(25)), requested, 12).number == expected

    def test_empty_list_has_one_page(self) -> None:
        page = paginate([], 1, 12)
        assert page.total_pages == 1
        assert page.items == []


class TestFilterClients:
    def test_name_is_case_insensitive(self) -> None:
        assert [c.id for c in filter_clients(CLIENTS, "acme")] == ["c2"]

    def test_document_is_literal(self) -> None:
        assert [c.id for c in filter_clients(CLIENTS, "456.789")] == ["c1"]

    def test_kind_filter(self) -> None:
        assert [c.id for c in filter_clients(CLIENTS, "", "PJ")] == ["c2"]
        assert len(filter_clients(CLIENTS, "", ALL)) == 2

    def test_blank_term_matches_all(self) -> None:
        assert len(filter_clients(CLIENTS, "   ")) == 2


class TestFilterCases:
    CASES = [
        make_case(id="p1", title="Ação de Cobrança", number="0001", client_id="c1"),
        make_case(id="p2", title="Execução Fiscal", number="0002", client_id="c2"),
    ]

    def test_by_title(self) -> None:
        assert [c.id for c in filter_cases(self.CASES, CLIENTS, "fiscal")] == ["p2"]

    def test_by_number(self) -> None:
        assert [c.id for c in filter_cases(self.CASES, CLIENTS, "0001")] == ["p1"]

    def test_by_client_name(self) -> None:
        assert [c.id for c in filter_cases(self.CASES, CLIENTS, "maria")] == ["p1"]


def test_filter_theses_by_term_and_area() -> None:
    theses = [
        Thesis(id="t1", title="Prescrição", area=LegalArea.CIVEL, description="Intercorrente"),
        Thesis(id="t2", title="Horas extras", area=LegalArea.TRABALHISTA, description=""),
    ]
    assert [t.id for t in filter_theses(theses, "intercorrente")] == ["t1"]
    assert [t.id for t in filter_theses(theses, "", LegalArea.TRABALHISTA)] == ["t2"]
    assert filter_theses(theses, "prescrição", LegalArea.TRABALHISTA) == []


def test_client_name() -> None:
    assert client_name(CLIENTS, "c2") == "ACME Indústria S/A"
    assert client_name(CLIENTS, "zz") == ""
