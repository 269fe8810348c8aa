"""
Unit tests for the practice data stores.

LocalDataStore runs against a tmp_path JSON file. SupabaseDataStore runs
against a MagicMock client and checks the queries it builds.
"""

import json
from datetime import datetime
from unittest.mock import MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from juzk.domain.errors import ClientHasCasesError, RecordNotFoundError, StoreUnavailableError, ValidationError
from juzk.domain.models import DEADLINE_PENDING, Deadline, Hearing, Movement, Thesis
from juzk.services import schedule
from juzk.services.data_store import (
    CASES,
    CLIENTS,
    THESES,
    LocalDataStore,
    SupabaseDataStore,
    get_data_store,
)
from juzk.services.protocols import DataStore
from juzk.services.seed import CASE_COUNT, CLIENT_COUNT, THESIS_COUNT
from tests.helpers import make_case, make_client, mock_supabase_client

NOW = datetime(2025, 3, 12, 10, 0)


@pytest.fixture
def store(tmp_path):
    return LocalDataStore("office-1", data_dir=tmp_path, clock=lambda: NOW)


class TestLocalClients:
    def test_add_assigns_id_and_infers_kind(self, store) -> None:
        client = store.add_client(make_client(id="", document="12.345.678/0001-99"))
        assert client.id
        assert client.kind == "PJ"
        assert [c.id for c in store.list_clients()] == [client.id]

    def test_missing_name_and_document(self, store) -> None:
        with pytest.raises(ValidationError) as exc_info:
            store.add_client(make_client(name=" ", document=""))
        assert set(exc_info.value.errors) == {"name", "document"}
        assert store.list_clients() == []

    def test_update(self, store) -> None:
        store.add_client(make_client())
        store.update_client(make_client(name="Maria S. Lima"))
        assert store.list_clients()[0].name == "Maria S. Lima"

    def test_update_unknown_raises(self, store) -> None:
        with pytest.raises(RecordNotFoundError):
            store.update_client(make_client(id="ghost"))

    def test_delete_blocked_while_cases_reference_client(self, store) -> None:
        store.add_client(make_client())
        store.add_case(make_case(id="p1", client_id="c1"))
        store.add_case(make_case(id="p2", client_id="c1"))
        with pytest.raises(ClientHasCasesError) as exc_info:
            store.delete_client("c1")
        assert exc_info.value.case_count == 2
        assert len(store.list_clients()) == 1

    def test_delete(self, store) -> None:
        store.add_client(make_client())
        store.delete_client("c1")
        assert store.list_clients() == []
        with pytest.raises(RecordNotFoundError):
            store.delete_client("c1")


class TestLocalCases:
    def test_add_refreshes_summary(self, store) -> None:
        case = store.add_case(make_case(id="", deadlines=[Deadline(id="d1", date="2025-03-20")]))
        assert case.id
        assert store.get_case(case.id).fatal_deadline == "2025-03-20"

    def test_get_case_unknown(self, store) -> None:
        with pytest.raises(RecordNotFoundError):
            store.get_case("nope")

    def test_add_movement(self, store) -> None:
        store.add_case(make_case())
        store.add_movement("p1", Movement(id="m1", date="2025-03-11", description="Sentença publicada"))
        case = store.get_case("p1")
        assert case.movements[0].id == "m1"
        assert case.last_movement == {"date": "2025-03-11", "description": "Sentença publicada"}

    def test_backdated_movement_becomes_last_movement(self, store) -> None:
        store.add_case(make_case(movements=[Movement(id="m1", date="2025-03-10", description="Recente")]))
        store.add_movement("p1", Movement(id="m2", date="2025-02-01", description="Juntada tardia"))
        case = store.get_case("p1")
        assert [m.id for m in case.movements] == ["m2", "m1"]
        assert case.last_movement == {"date": "2025-02-01", "description": "Juntada tardia"}
        store.update_case(case)
        assert store.get_case("p1").last_movement == {"date": "2025-02-01", "description": "Juntada tardia"}

    def test_delete_case(self, store) -> None:
        store.add_case(make_case())
        store.delete_case("p1")
        assert store.list_cases() == []


class TestLocalSchedule:
    def test_deleted_deadline_stays_deleted(self, store) -> None:
        store.add_case(make_case(deadlines=[Deadline(id="d1", date="2025-04-01", description="Réplica")]))
        assert store.get_case("p1").fatal_deadline == "2025-04-01"

        store.update_case(schedule.remove_deadline(store.get_case("p1"), "d1"))
        case = store.get_case("p1")
        assert case.deadlines == []
        assert case.fatal_deadline is None
        assert schedule.merged_deadlines(case) == []
        assert schedule.collect_agenda_events(store.list_cases()) == []

        # another save must not bring it back
        store.update_case(case)
        assert schedule.merged_deadlines(store.get_case("p1")) == []

    def test_deleted_hearing_stays_deleted(self, store) -> None:
        store.add_case(make_case(hearings=[Hearing(id="h1", date="2025-04-01T14:00")]))
        assert store.get_case("p1").next_hearing == "2025-04-01T14:00"

        store.update_case(schedule.remove_hearing(store.get_case("p1"), "h1"))
        store.update_case(store.get_case("p1"))
        case = store.get_case("p1")
        assert case.next_hearing is None
        assert schedule.merged_hearings(case) == []
        assert schedule.collect_agenda_events([case]) == []

    def test_rescheduled_deadline_has_single_entry(self, store) -> None:
        store.add_case(make_case(deadlines=[Deadline(id="d1", date="2025-04-01", description="Réplica")]))
        edited = schedule.update_deadline(
            store.get_case("p1"), "d1", new_date="2025-04-20", description="Réplica", status=DEADLINE_PENDING
        )
        store.update_case(edited)
        case = store.get_case("p1")
        assert case.fatal_deadline == "2025-04-20"
        assert [(d.id, d.date) for d in schedule.merged_deadlines(case)] == [("d1", "2025-04-20")]


class TestLocalTheses:
    def test_title_required(self, store) -> None:
        with pytest.raises(ValidationError):
            store.add_thesis(Thesis(title=""))

    def test_created_at_from_clock(self, store) -> None:
        thesis = store.add_thesis(Thesis(title="Prescrição intercorrente"))
        assert thesis.created_at == "2025-03-12T10:00:00"
        thesis.content = "Texto"
        store.update_thesis(thesis)
        assert store.list_theses()[0].content == "Texto"
        store.delete_thesis(thesis.id)
        assert store.list_theses() == []


class TestLocalFile:
    def test_uses_browser_keys(self, store) -> None:
        store.add_client(make_client())
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert set(data) == {"nexus_clients"}

    def test_reads_legacy_camel_case_export(self, store) -> None:
        store.path.write_text(
            json.dumps({"nexus_cases": [{"id": "p1", "titulo": "Antigo", "clienteId": "c1", "prazoFatal": "2025-04-01"}]}),
            encoding="utf-8",
        )
        case = store.get_case("p1")
        assert case.title == "Antigo"
        assert case.fatal_deadline == "2025-04-01"

    def test_corrupt_file_reads_as_empty(self, store) -> None:
        store.path.write_text("{not json", encoding="utf-8")
        assert store.list_clients() == []

    def test_offices_are_isolated(self, tmp_path) -> None:
        a = LocalDataStore("a", data_dir=tmp_path, clock=lambda: NOW)
        b = LocalDataStore("b", data_dir=tmp_path, clock=lambda: NOW)
        a.add_client(make_client())
        assert b.list_clients() == []

    def test_office_id_is_sanitized_for_file_name(self, tmp_path) -> None:
        store = LocalDataStore("../evil", data_dir=tmp_path)
        assert store.path.parent == tmp_path


class TestLocalBulk:
    def test_seed_replaces_everything(self, store) -> None:
        store.add_client(make_client(id="old"))
        store.seed_mock_data()
        clients = store.list_clients()
        assert len(clients) == CLIENT_COUNT
        assert "old" not in {c.id for c in clients}
        assert len(store.list_cases()) == CASE_COUNT
        assert len(store.list_theses()) == THESIS_COUNT

    def test_clear(self, store) -> None:
        store.seed_mock_data()
        store.clear_all_data()
        assert store.list_clients() == []
        assert store.list_cases() == []
        assert store.list_theses() == []


class TestSupabaseDataStore:
    def _store(self):
        client, table = mock_supabase_client()
        return SupabaseDataStore(client, "office-1", clock=lambda: NOW), client, table

    def test_list_merges_row_id_into_data(self) -> None:
        store, client, table = self._store()
        table.execute.return_value = MagicMock(data=[{"id": "c9", "data": {"name": "Ana", "document": "1"}}])
        clients = store.list_clients()
        client.table.assert_called_with(CLIENTS)
        table.select.assert_called_with("id, data")
        table.eq.assert_called_with("office_id", "office-1")
        assert clients[0].id == "c9"
        assert clients[0].name == "Ana"

    def test_insert_case_row_shape(self) -> None:
        store, client, table = self._store()
        store.add_case(make_case(id="p1", client_id="c7"))
        row = table.insert.call_args[0][0]
        assert row["id"] == "p1"
        assert row["office_id"] == "office-1"
        assert row["client_id"] == "c7"
        assert row["data"]["title"] == "Ação de Cobrança"
        client.table.assert_called_with(CASES)

    def test_update_without_matching_row_raises(self) -> None:
        store, _, table = self._store()
        table.execute.return_value = MagicMock(data=[])
        with pytest.raises(RecordNotFoundError):
            store.update_thesis(Thesis(id="t1", title="X"))

    def test_update_filters_by_office(self) -> None:
        store, client, table = self._store()
        table.execute.return_value = MagicMock(data=[{"id": "t1"}])
        store.update_thesis(Thesis(id="t1", title="X"))
        client.table.assert_called_with(THESES)
        table.eq.assert_any_call("id", "t1")
        table.eq.assert_any_call("office_id", "office-1")

    def test_delete_client_with_cases_blocked(self) -> None:
        store, _, table = self._store()
        table.execute.return_value = MagicMock(data=[{"id": "p1"}])
        with pytest.raises(ClientHasCasesError):
            store.delete_client("c1")
        table.eq.assert_any_call("client_id", "c1")
        table.delete.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [APIError({"message": "boom", "code": "500"}), httpx.ConnectError("down")],
    )
    def test_backend_errors_are_wrapped(self, error) -> None:
        store, _, table = self._store()
        table.execute.side_effect = error
        with pytest.raises(StoreUnavailableError):
            store.list_cases()

    def test_seed_deletes_then_inserts_per_table(self) -> None:
        store, client, table = self._store()
        store.seed_mock_data()
        assert [c.args[0] for c in client.table.call_args_list] == [CLIENTS, CLIENTS, CASES, CASES, THESES, THESES]
        inserted = [len(c.args[0]) for c in table.insert.call_args_list]
        assert inserted == [CLIENT_COUNT, CASE_COUNT, THESIS_COUNT]

    def test_clear_skips_empty_insert(self) -> None:
        store, _, table = self._store()
        store.clear_all_data()
        assert table.delete.call_count == 3
        table.insert.assert_not_called()


class TestGetDataStore:
    def test_local_when_not_configured(self) -> None:
        assert isinstance(get_data_store("x"), LocalDataStore)

    def test_supabase_when_client_given(self) -> None:
        client, _ = mock_supabase_client()
        store = get_data_store("x", client=client)
        assert isinstance(store, SupabaseDataStore)
        assert store.office_id == "x"

    def test_default_office(self) -> None:
        assert get_data_store().office_id == "default"


def test_both_backends_satisfy_data_store_protocol(tmp_path) -> None:
    client, _ = mock_supabase_client()
    assert isinstance(LocalDataStore("x", data_dir=tmp_path), DataStore)
    assert isinstance(SupabaseDataStore(client, "x"), DataStore)
