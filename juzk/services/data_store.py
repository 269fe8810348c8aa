"""
Practice data persistence.

Two backends behind the same operations:
- SupabaseDataStore: rows in the `clients`, `cases` and `theses` tables, scoped
  by office_id, with the record serialized into a JSON `data` column.
- LocalDataStore: one JSON file per office under LOCAL_DATA_DIR, used when
  Supabase credentials are absent.

Validation, id generation, the "client still has cases" rule and the case
summary refresh live in BaseDataStore so both backends behave the same.
"""

import json
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import httpx
from postgrest.exceptions import APIError as PostgrestAPIError

from juzk.config.logging_config import setup_logger
from juzk.config.settings import config, is_supabase_configured
from juzk.domain.errors import ClientHasCasesError, RecordNotFoundError, StoreUnavailableError, ValidationError
from juzk.domain.models import Client, LegalCase, Movement, Thesis, new_id
from juzk.services import schedule
from juzk.services.seed import build_mock_data
from juzk.utils.formatting import infer_client_kind

logger = setup_logger(__name__)

CLIENTS = "clients"
CASES = "cases"
THESES = "theses"

# Keys of the local JSON document (same names the browser build used in localStorage)
_LOCAL_KEYS = {CLIENTS: "nexus_clients", CASES: "nexus_cases", THESES: "nexus_theses"}

DEFAULT_OFFICE_ID = "default"


def validate_client(client: Client) -> None:
    """Name and document are mandatory. Raises ValidationError with per-field messages."""
    errors: dict[str, str] = {}
    if not (client.name or "").strip():
        errors["name"] = "Nome é obrigatório."
    if not (client.document or "").strip():
        errors["document"] = "Documento é obrigatório."
    if errors:
        raise ValidationError(errors)


class BaseDataStore:
    """Backend-independent rules. Subclasses implement the row primitives."""

    backend = "base"

    def __init__(self, office_id: str | None = None, clock: Callable[[], datetime] = datetime.now) -> None:
        self.office_id = str(office_id or DEFAULT_OFFICE_ID)
        self._clock = clock

    # -- primitives ---------------------------------------------------------
    def _list_rows(self, collection: str) -> list[dict]:
        raise NotImplementedError

    def _insert_row(self, collection: str, row: dict) -> None:
        raise NotImplementedError

    def _update_row(self, collection: str, record_id: str, row: dict) -> bool:
        raise NotImplementedError

    def _delete_row(self, collection: str, record_id: str) -> bool:
        raise NotImplementedError

    def _replace_all(self, collection: str, rows: list[dict]) -> None:
        raise NotImplementedError

    def _count_client_cases(self, client_id: str) -> int:
        return sum(1 for c in self.list_cases() if str(c.client_id) == str(client_id))

    # -- clients ------------------------------------------------------------
    def list_clients(self) -> list[Client]:
        return [Client.from_dict(row) for row in self._list_rows(CLIENTS)]

    def add_client(self, client: Client) -> Client:
        validate_client(client)
        client.kind = infer_client_kind(client.document)
        if not client.id:
            client.id = new_id()
        self._insert_row(CLIENTS, client.to_dict())
        logger.info("Client %s added (office=%s, backend=%s)", client.id, self.office_id, self.backend)
        return client

    def update_client(self, client: Client) -> Client:
        validate_client(client)
        client.kind = infer_client_kind(client.document)
        if not self._update_row(CLIENTS, str(client.id), client.to_dict()):
            raise RecordNotFoundError(CLIENTS, str(client.id))
        return client

    def delete_client(self, client_id: str) -> None:
        linked = self._count_client_cases(client_id)
        if linked:
            raise ClientHasCasesError(str(client_id), linked)
        if not self._delete_row(CLIENTS, str(client_id)):
            raise RecordNotFoundError(CLIENTS, str(client_id))
        logger.info("Client %s deleted (office=%s)", client_id, self.office_id)

    # -- cases --------------------------------------------------------------
    def list_cases(self) -> list[LegalCase]:
        return [LegalCase.from_dict(row) for row in self._list_rows(CASES)]

    def add_case(self, case: LegalCase) -> LegalCase:
        if not case.id:
            case.id = new_id()
        case = schedule.refresh_case_summary(case, self._clock())
        self._insert_row(CASES, case.to_dict())
        logger.info("Case %s added (office=%s, backend=%s)", case.id, self.office_id, self.backend)
        return case

    def update_case(self, case: LegalCase) -> LegalCase:
        case = schedule.refresh_case_summary(case, self._clock())
        if not self._update_row(CASES, str(case.id), case.to_dict()):
            raise RecordNotFoundError(CASES, str(case.id))
        return case

    def delete_case(self, case_id: str) -> None:
        if not self._delete_row(CASES, str(case_id)):
            raise RecordNotFoundError(CASES, str(case_id))

    def get_case(self, case_id: str) -> LegalCase:
        for case in self.list_cases():
            if str(case.id) == str(case_id):
                return case
        raise RecordNotFoundError(CASES, str(case_id))

    def add_movement(self, case_id: str, movement: Movement) -> LegalCase:
        case = schedule.add_movement(self.get_case(case_id), movement)
        return self.update_case(case)

    # -- theses -------------------------------------------------------------
    def list_theses(self) -> list[Thesis]:
        return [Thesis.from_dict(row) for row in self._list_rows(THESES)]

    def add_thesis(self, thesis: Thesis) -> Thesis:
        if not (thesis.title or "").strip():
            raise ValidationError({"title": "Título é obrigatório."})
        if not thesis.id:
            thesis.id = new_id()
        if not thesis.created_at:
            thesis.created_at = self._clock().isoformat(timespec="seconds")
        self._insert_row(THESES, thesis.to_dict())
        return thesis

    def update_thesis(self, thesis: Thesis) -> Thesis:
        if not (thesis.title or "").strip():
            raise ValidationError({"title": "Título é obrigatório."})
        if not self._update_row(THESES, str(thesis.id), thesis.to_dict()):
            raise RecordNotFoundError(THESES, str(thesis.id))
        return thesis

    def delete_thesis(self, thesis_id: str) -> None:
        if not self._delete_row(THESES, str(thesis_id)):
            raise RecordNotFoundError(THESES, str(thesis_id))

    # -- bulk ---------------------------------------------------------------
    def seed_mock_data(self) -> None:
        logger.info("Seeding demo data (office=%s, backend=%s)", self.office_id, self.backend)
        clients, cases, theses = build_mock_data(self._clock())
        now = self._clock()
        self._replace_all(CLIENTS, [c.to_dict() for c in clients])
        self._replace_all(CASES, [schedule.refresh_case_summary(c, now).to_dict() for c in cases])
        self._replace_all(THESES, [t.to_dict() for t in theses])

    def clear_all_data(self) -> None:
        logger.info("Clearing all data (office=%s, backend=%s)", self.office_id, self.backend)
        for collection in (CLIENTS, CASES, THESES):
            self._replace_all(collection, [])


# ---------------------------------------------------------------------------
# Local JSON backend
# ---------------------------------------------------------------------------
_LOCAL_LOCK = threading.Lock()


class LocalDataStore(BaseDataStore):
    """JSON file store: {LOCAL_DATA_DIR}/{office_id}.json"""

    backend = "local"

    def __init__(
        self,
        office_id: str | None = None,
        data_dir: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(office_id, clock)
        self.data_dir = Path(data_dir or config.LOCAL_DATA_DIR)
        safe_name = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in self.office_id)
        self.path = self.data_dir / f"{safe_name}.json"

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
            return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Local store %s unreadable, starting empty: %s", self.path, exc)
            return {}

    def _write(self, data: dict) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".json.tmp")
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.error("Failed to write local store %s: %s", self.path, exc)
            raise StoreUnavailableError(f"Local store write failed: {exc}") from exc

    def _list_rows(self, collection: str) -> list[dict]:
        with _LOCAL_LOCK:
            return list(self._read().get(_LOCAL_KEYS[collection], []))

    def _insert_row(self, collection: str, row: dict) -> None:
        with _LOCAL_LOCK:
            data = self._read()
            data.setdefault(_LOCAL_KEYS[collection], []).append(row)
            self._write(data)

    def _update_row(self, collection: str, record_id: str, row: dict) -> bool:
        with _LOCAL_LOCK:
            data = self._read()
            rows = data.get(_LOCAL_KEYS[collection], [])
            for i, existing in enumerate(rows):
                if str(existing.get("id")) == str(record_id):
                    rows[i] = row
                    self._write(data)
                    return True
            return False

    def _delete_row(self, collection: str, record_id: str) -> bool:
        with _LOCAL_LOCK:
            data = self._read()
            rows = data.get(_LOCAL_KEYS[collection], [])
            kept = [r for r in rows if str(r.get("id")) != str(record_id)]
            if len(kept) == len(rows):
                return False
            data[_LOCAL_KEYS[collection]] = kept
            self._write(data)
            return True

    def _replace_all(self, collection: str, rows: list[dict]) -> None:
        with _LOCAL_LOCK:
            data = self._read()
            data[_LOCAL_KEYS[collection]] = rows
            self._write(data)


# ---------------------------------------------------------------------------
# Supabase backend
# ---------------------------------------------------------------------------
_BACKEND_ERRORS = (PostgrestAPIError, httpx.HTTPError, OSError)


class SupabaseDataStore(BaseDataStore):
    """
    Supabase tables (clients, cases, theses) with columns:
    id (text PK), office_id (uuid), data (jsonb), updated_at (timestamptz).
    The cases table also has client_id (text) for the linked-client check.
    """

    backend = "supabase"

    def __init__(self, client, office_id: str | None = None, clock: Callable[[], datetime] = datetime.now) -> None:
        super().__init__(office_id, clock)
        self.client = client

    def _row(self, collection: str, record: dict) -> dict:
        row = {
            "id": str(record["id"]),
            "office_id": self.office_id,
            "data": record,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        if collection == CASES:
            row["client_id"] = str(record.get("client_id") or "")
        return row

    def _list_rows(self, collection: str) -> list[dict]:
        try:
            result = self.client.table(collection).select("id, data").eq("office_id", self.office_id).execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to list %s: %s", collection, exc)
            raise StoreUnavailableError(f"Could not load {collection}: {exc}") from exc
        return [{**(row.get("data") or {}), "id": row["id"]} for row in (result.data or [])]

    def _insert_row(self, collection: str, row: dict) -> None:
        try:
            self.client.table(collection).insert(self._row(collection, row)).execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to insert into %s: %s", collection, exc)
            raise StoreUnavailableError(f"Could not save to {collection}: {exc}") from exc

    def _update_row(self, collection: str, record_id: str, row: dict) -> bool:
        payload = self._row(collection, row)
        payload.pop("id")
        try:
            result = (
                self.client.table(collection)
                .update(payload)
                .eq("id", record_id)
                .eq("office_id", self.office_id)
                .execute()
            )
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to update %s %s: %s", collection, record_id, exc)
            raise StoreUnavailableError(f"Could not update {collection}: {exc}") from exc
        return bool(result.data)

    def _delete_row(self, collection: str, record_id: str) -> bool:
        try:
            result = (
                self.client.table(collection).delete().eq("id", record_id).eq("office_id", self.office_id).execute()
            )
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to delete %s %s: %s", collection, record_id, exc)
            raise StoreUnavailableError(f"Could not delete from {collection}: {exc}") from exc
        return bool(result.data)

    def _replace_all(self, collection: str, rows: list[dict]) -> None:
        try:
            self.client.table(collection).delete().eq("office_id", self.office_id).execute()
            if rows:
                self.client.table(collection).insert([self._row(collection, r) for r in rows]).execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to replace %s: %s", collection, exc)
            raise StoreUnavailableError(f"Could not rewrite {collection}: {exc}") from exc

    def _count_client_cases(self, client_id: str) -> int:
        try:
            result = (
                self.client.table(CASES)
                .select("id")
                .eq("office_id", self.office_id)
                .eq("client_id", str(client_id))
                .execute()
            )
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to check cases of client %s: %s", client_id, exc)
            raise StoreUnavailableError(f"Could not check linked cases: {exc}") from exc
        return len(result.data or [])


def create_supabase_client():
    """Create a Supabase client from config, or None when cloud sync is not configured."""
    if not is_supabase_configured():
        return None
    from supabase import create_client

    return create_client(config.SUPABASE_URL, config.SUPABASE_KEY)


def get_data_store(office_id: str | None = None, client=None) -> BaseDataStore:
    """
    Pick the backend: Supabase when configured (or when a client is passed in),
    otherwise the local JSON store.
    """
    if client is None and is_supabase_configured():
        client = create_supabase_client()
    if client is not None:
        return SupabaseDataStore(client, office_id)
    logger.warning("Supabase credentials missing, using local store in %s", config.LOCAL_DATA_DIR)
    return LocalDataStore(office_id)
