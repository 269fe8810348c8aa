"""
Office and user administration.

Supabase tables `offices` (id, name) and `profiles` (id, email, office_id, full_name),
with a local JSON fallback holding `juzk_admin_offices` / `juzk_admin_users`.
"""

import json
import os
from pathlib import Path

import httpx
from postgrest.exceptions import APIError as PostgrestAPIError

from juzk.config.logging_config import setup_logger
from juzk.config.settings import config
from juzk.domain.errors import RecordNotFoundError, StoreUnavailableError, ValidationError
from juzk.domain.models import AppUser, Office, new_id

logger = setup_logger(__name__)

_BACKEND_ERRORS = (PostgrestAPIError, httpx.HTTPError, OSError)

OFFICES_KEY = "juzk_admin_offices"
USERS_KEY = "juzk_admin_users"


def _validate_office_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError({"name": "Nome do escritório é obrigatório."})
    return name


class SupabaseAdminStore:
    def __init__(self, client):
        self.client = client

    def list_offices(self) -> list[Office]:
        try:
            result = self.client.table("offices").select("*").order("name").execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to list offices: %s", exc)
            raise StoreUnavailableError(f"Could not load offices: {exc}") from exc
        return [Office(id=str(row["id"]), name=row.get("name") or "") for row in (result.data or [])]

    def get_office(self, office_id: str) -> Office | None:
        try:
            result = self.client.table("offices").select("*").eq("id", office_id).limit(1).execute()
        except _BACKEND_ERRORS as exc:
            logger.warning("Failed to load office %s: %s", office_id, exc)
            return None
        rows = result.data or []
        return Office(id=str(rows[0]["id"]), name=rows[0].get("name") or "") if rows else None

    def create_office(self, name: str) -> Office:
        name = _validate_office_name(name)
        try:
            result = self.client.table("offices").insert({"name": name}).execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to create office %r: %s", name, exc)
            raise StoreUnavailableError(f"Could not create office: {exc}") from exc
        row = (result.data or [{}])[0]
        office = Office(id=str(row.get("id") or ""), name=row.get("name") or name)
        logger.info("Office created: %s (%s)", office.name, office.id)
        return office

    def delete_office(self, office_id: str) -> None:
        try:
            result = self.client.table("offices").delete().eq("id", office_id).execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to delete office %s: %s", office_id, exc)
            raise StoreUnavailableError(f"Could not delete office: {exc}") from exc
        if not result.data:
            raise RecordNotFoundError("offices", office_id)
        logger.info("Office deleted: %s", office_id)

    def list_users(self) -> list[AppUser]:
        try:
            result = self.client.table("profiles").select("id, email, office_id, full_name").execute()
        except _BACKEND_ERRORS as exc:
            logger.error("Failed to list profiles: %s", exc)
            raise StoreUnavailableError(f"Could not load users: {exc}") from exc
        return [
            AppUser(
                id=str(row["id"]),
                email=row.get("email") or "",
                office_id=row.get("office_id"),
                name=row.get("full_name") or "",
            )
            for row in (result.data or [])
        ]


class LocalAdminStore:
    """Admin data in {LOCAL_DATA_DIR}/admin.json"""

    def __init__(self, data_dir: str | Path | None = None):
        self.path = Path(data_dir or config.LOCAL_DATA_DIR) / "admin.json"

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Admin store %s unreadable, starting empty: %s", self.path, exc)
            return {}

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".json.tmp")
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StoreUnavailableError(f"Admin store write failed: {exc}") from exc

    def list_offices(self) -> list[Office]:
        offices = [Office(id=str(o["id"]), name=o.get("name", "")) for o in self._read().get(OFFICES_KEY, [])]
        return sorted(offices, key=lambda o: o.name.lower())

    def get_office(self, office_id: str) -> Office | None:
        return next((o for o in self.list_offices() if o.id == str(office_id)), None)

    def create_office(self, name: str) -> Office:
        office = Office(id=new_id(), name=_validate_office_name(name))
        data = self._read()
        data.setdefault(OFFICES_KEY, []).append(office.to_dict())
        self._write(data)
        logger.info("Office created locally: %s (%s)", office.name, office.id)
        return office

    def delete_office(self, office_id: str) -> None:
        data = self._read()
        offices = data.get(OFFICES_KEY, [])
        kept = [o for o in offices if str(o.get("id")) != str(office_id)]
        if len(kept) == len(offices):
            raise RecordNotFoundError("offices", office_id)
        data[OFFICES_KEY] = kept
        self._write(data)

    def list_users(self) -> list[AppUser]:
        return [
            AppUser(
                id=str(u["id"]),
                email=u.get("email", ""),
                office_id=u.get("office_id"),
                name=u.get("name") or u.get("full_name") or "",
            )
            for u in self._read().get(USERS_KEY, [])
        ]


def get_admin_store(client=None):
    if client is not None:
        return SupabaseAdminStore(client)
    return LocalAdminStore()
