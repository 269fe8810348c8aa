"""
Unit tests for domain models: enum parsing and dict (de)serialization,
including the legacy camelCase keys of browser-exported data.
"""

from juzk.domain.models import (
    DEADLINE_PENDING,
    CaseStatus,
    Client,
    LegalArea,
    LegalCase,
    Thesis,
)


class TestEnums:
    def test_parse_accepts_label_and_member_name(self) -> None:
        assert LegalArea.parse("Tributário") is LegalArea.TRIBUTARIO
        assert LegalArea.parse("TRIBUTARIO") is LegalArea.TRIBUTARIO
        assert CaseStatus.parse("Em Recurso") is CaseStatus.EM_RECURSO

    def test_parse_unknown_falls_back_to_default(self) -> None:
        assert LegalArea.parse("Marítimo") is LegalArea.CIVEL
        assert LegalArea.parse(None) is LegalArea.CIVEL
        assert CaseStatus.parse("") is CaseStatus.ATIVO


class TestClient:
    def test_round_trip_keeps_contacts(self) -> None:
        data = {
            "id": "c1",
            "name": "ACME S/A",
            "kind": "PJ",
            "document": "12.345.678/0001-99",
            "contacts": [{"id": "k1", "name": "Ana", "role": "Jurídico"}],
        }
        client = Client.from_dict(data)
        assert client.contacts[0].name == "Ana"
        assert Client.from_dict(client.to_dict()) == client

    def test_accepts_legacy_portuguese_keys(self) -> None:
        client = Client.from_dict(
            {"id": 7, "nome": "João", "tipo": "PF", "documento": "111", "telefone": "9", "cidade": "SP", "contatos": []}
        )
        assert client.id == "7"
        assert client.name == "João"
        assert client.document == "111"
        assert client.phone == "9"
        assert client.city == "SP"

    def test_contacts_without_id_load_with_the_same_id(self) -> None:
        data = {"id": "7", "nome": "Empresa", "contatos": [{"nome": "Ana"}, {"nome": "Bruno"}]}
        ids = [c.id for c in Client.from_dict(data).contacts]
        assert ids == [c.id for c in Client.from_dict(data).contacts]
        assert len(set(ids)) == 2


class TestLegalCase:
    def test_from_legacy_dict(self) -> None:
        case = LegalCase.from_dict(
            {
                "id": "p1",
                "numero": "0001",
                "titulo": "Cobrança",
                "clienteId": 3,
                "area": "Trabalhista",
                "status": "Suspenso",
                "valorCausa": "1500.50",
                "prazoFatal": "2025-01-10",
                "proximaAudiencia": "2025-01-20T14:00",
                "ultimoAndamento": {"data": "2024-12-01", "descricao": "Citação"},
                "prazos": [{"id": "d1", "data": "2025-01-10", "descricao": "Réplica"}],
                "financeiro": {
                    "config": {"honorariosContratuais": 3000, "percentualExito": 20},
                    "transacoes": [{"id": "t1", "data": "2024-12-01", "tipo": "DESPESA", "valor": 100}],
                },
            }
        )
        assert case.client_id == "3"
        assert case.area is LegalArea.TRABALHISTA
        assert case.status is CaseStatus.SUSPENSO
        assert case.claim_value == 1500.5
        assert case.fatal_deadline == "2025-01-10"
        assert case.next_hearing == "2025-01-20T14:00"
        assert case.last_movement == {"date": "2024-12-01", "description": "Citação"}
        assert case.deadlines[0].status == DEADLINE_PENDING
        assert case.finance.config.contractual_fee == 3000.0
        assert case.finance.transactions[0].amount == 100.0

    def test_to_dict_serializes_enums_as_labels(self) -> None:
        data = LegalCase(id="p1", area=LegalArea.PENAL, status=CaseStatus.JULGADO).to_dict()
        assert data["area"] == "Penal"
        assert data["status"] == "Julgado"
        assert data["finance"] is None

    def test_round_trip(self) -> None:
        case = LegalCase.from_dict({"id": "p9", "title": "X", "area": "Família", "claim_value": 10})
        assert LegalCase.from_dict(case.to_dict()) == case

    def test_invalid_claim_value_becomes_zero(self) -> None:
        assert LegalCase.from_dict({"id": "p1", "valorCausa": "abc"}).claim_value == 0.0

    def test_nested_records_without_id_load_with_the_same_id(self) -> None:
        data = {
            "id": "p1",
            "prazos": [{"data": "2025-01-10", "descricao": "Réplica"}, {"data": "2025-02-10", "descricao": "Recurso"}],
            "audiencias": [{"data": "2025-01-20T14:00"}],
            "historicoAndamentos": [{"data": "2024-12-01", "descricao": "Citação"}],
            "financeiro": {"transacoes": [{"data": "2024-12-01", "tipo": "DESPESA", "valor": 100}]},
        }
        first = LegalCase.from_dict(data)
        second = LegalCase.from_dict(data)
        assert [d.id for d in first.deadlines] == [d.id for d in second.deadlines]
        assert len({d.id for d in first.deadlines}) == 2
        assert first.hearings[0].id == second.hearings[0].id
        assert first.movements[0].id == second.movements[0].id
        assert first.finance.transactions[0].id == second.finance.transactions[0].id
        assert LegalCase.from_dict(first.to_dict()) == first

    def test_stored_nested_ids_are_kept(self) -> None:
        case = LegalCase.from_dict({"id": "p1", "deadlines": [{"id": "abc", "date": "2025-01-10"}]})
        assert case.deadlines[0].id == "abc"


class TestThesis:
    def test_legacy_keys(self) -> None:
        thesis = Thesis.from_dict({"id": "t1", "titulo": "Tese", "conteudo": "Texto", "dataCriacao": "2024-01-01"})
        assert thesis.title == "Tese"
        assert thesis.content == "Texto"
        assert thesis.created_at == "2024-01-01"
        assert thesis.to_dict()["area"] == "Cível"
