"""
Domain exceptions raised by the stores and services and translated by the UI.
"""


class JuzkError(Exception):
    """Base class for application errors."""


class ValidationError(JuzkError):
    """A record failed validation. ``errors`` maps field name -> message."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


class RecordNotFoundError(JuzkError):
    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} record {record_id!r} not found")


class ClientHasCasesError(JuzkError):
    """Deleting a client that still owns cases is prohibited."""

    def __init__(self, client_id: str, case_count: int):
        self.client_id = client_id
        self.case_count = case_count
        super().__init__(f"Client {client_id!r} is linked to {case_count} case(s)")


class InvalidTransactionError(JuzkError):
    pass


class StoreUnavailableError(JuzkError):
    """The persistence backend failed (network, API or filesystem error)."""
