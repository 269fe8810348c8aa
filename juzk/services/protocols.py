"""
Service Protocols (Interfaces)

Defines the contracts for the persistence and AI services so they can be mocked
in tests and swapped between the Supabase and local backends without coupling
the UI to concrete implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from juzk.domain.models import AppUser, Client, LegalArea, LegalCase, Movement, Office, Thesis


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------
@runtime_checkable
class DataStore(Protocol):
    """Contract for the office-scoped practice data store.

    Implemented by SupabaseDataStore (cloud) and LocalDataStore (JSON file fallback).
    """

    backend: str

    def list_clients(self) -> list[Client]: ...

    def add_client(self, client: Client) -> Client: ...

    def update_client(self, client: Client) -> Client: ...

    def delete_client(self, client_id: str) -> None:
        """Raises ClientHasCasesError when cases still reference the client."""
        ...

    def list_cases(self) -> list[LegalCase]: ...

    def add_case(self, case: LegalCase) -> LegalCase: ...

    def update_case(self, case: LegalCase) -> LegalCase: ...

    def delete_case(self, case_id: str) -> None: ...

    def add_movement(self, case_id: str, movement: Movement) -> LegalCase: ...

    def list_theses(self) -> list[Thesis]: ...

    def add_thesis(self, thesis: Thesis) -> Thesis: ...

    def update_thesis(self, thesis: Thesis) -> Thesis: ...

    def delete_thesis(self, thesis_id: str) -> None: ...

    def seed_mock_data(self) -> None: ...

    def clear_all_data(self) -> None: ...


@runtime_checkable
class AdminStore(Protocol):
    """Contract for office / user administration."""

    def list_offices(self) -> list[Office]: ...

    def create_office(self, name: str) -> Office: ...

    def delete_office(self, office_id: str) -> None: ...

    def list_users(self) -> list[AppUser]: ...


# ---------------------------------------------------------------------------
# AI
# ---------------------------------------------------------------------------
@runtime_checkable
class LegalAssistant(Protocol):
    """Contract for the generative-AI helpers used by the AI tools and thesis notebook."""

    def summarize_notice(self, text: str): ...

    def generate_draft(self, area: LegalArea, piece_type: str, facts: str, arguments: str) -> str: ...

    def research_case_law(self, query: str): ...

    def ask_thesis(self, thesis_content: str, question: str, history: list[dict]) -> str: ...

    def generate_thesis_content(self, title: str, description: str, area: str) -> str: ...
