"""
Unit tests for Brazilian formatting helpers: dates, currency and CPF/CNPJ.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from juzk.utils.formatting import (
    format_brl,
    format_cpf_cnpj,
    format_date_br,
    format_datetime_br,
    infer_client_kind,
    parse_date,
    parse_datetime,
    to_money,
)


class TestParsing:
    def test_iso_date_and_datetime(self) -> None:
        assert parse_date("2025-11-20") == date(2025, 11, 20)
        assert parse_datetime("2025-11-20T14:30") == datetime(2025, 11, 20, 14, 30)

    def test_utc_suffix_is_dropped_to_naive(self) -> None:
        assert parse_datetime("2025-11-20T14:30:00Z") == datetime(2025, 11, 20, 14, 30)

    def test_brazilian_date(self) -> None:
        assert parse_date("05/03/2024") == date(2024, 3, 5)

    @pytest.mark.parametrize("value", [None, "", "  ", "amanhã", "31/02/2024"])
    def test_invalid_values_return_none(self, value) -> None:
        assert parse_datetime(value) is None


class TestDisplay:
    def test_format_date_br(self) -> None:
        assert format_date_br("2025-11-20") == "20/11/2025"
        assert format_date_br("garbage") == ""

    def test_format_datetime_br_keeps_time_only_when_present(self) -> None:
        assert format_datetime_br("2025-11-20T09:05") == "20/11/2025 09:05"
        assert format_datetime_br("2025-11-20") == "20/11/2025"


class TestMoney:
    def test_to_money_rounds_half_up(self) -> None:
        assert to_money(0.125) == Decimal("0.13")
        assert to_money(None) == Decimal("0.00")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1234.5, "R$ 1.234,50"), (0, "R$ 0,00"), (1000000, "R$ 1.000.000,00"), (-10, "-R$ 10,00")],
    )
    def test_format_brl(self, value, expected) -> None:
        assert format_brl(value) == expected


class TestDocuments:
    def test_infer_kind_by_digit_count(self) -> None:
        assert infer_client_kind("123.456.789-00") == "PF"
        assert infer_client_kind("12.345.678/0001-99") == "PJ"
        assert infer_client_kind("") == "PF"

    def test_cpf_mask(self) -> None:
        assert format_cpf_cnpj("12345678900") == "123.456.789-00"
        assert format_cpf_cnpj("1234") == "123.4"

    def test_cnpj_mask(self) -> None:
        assert format_cpf_cnpj("12345678000199") == "12.345.678/0001-99"

    def test_mask_is_idempotent(self) -> None:
        assert format_cpf_cnpj("123.456.789-00") == "123.456.789-00"
