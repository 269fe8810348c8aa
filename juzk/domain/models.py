"""
Practice Management Domain Models

Pure data structures with no external dependencies, shared by the stores,
the finance/schedule services and the UI.

Records serialize to snake_case dicts. ``from_dict`` also accepts the
camelCase keys written by the browser version of the app (``clienteId``,
``valorCausa``, ``prazoFatal``...) so exported local data can be imported as-is.
"""

import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


def new_id() -> str:
    """Generate a record id."""
    return uuid.uuid4().hex


def _stable_id(data: dict, prefix: str, index: int) -> str:
    """Stored id, or one derived from the position so repeated loads agree."""
    return str(_pick(data, "id", default="") or f"{prefix}-{index}")


def _pick(data: dict, *keys: str, default: Any = None) -> Any:
    """Return the first present key among snake_case / legacy camelCase aliases."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


class LegalArea(str, Enum):
    CIVEL = "Cível"
    TRABALHISTA = "Trabalhista"
    TRIBUTARIO = "Tributário"
    PENAL = "Penal"
    FAMILIA = "Família"
    EMPRESARIAL = "Empresarial"
    BANCARIO = "Bancário"
    PREVIDENCIARIO = "Previdenciário"
    IMOBILIARIO = "Imobiliário"

    @classmethod
    def parse(cls, value: Any) -> "LegalArea":
        """Accept either the label ('Cível') or the member name ('CIVEL'); default CIVEL."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        return cls.CIVEL


class CaseStatus(str, Enum):
    ATIVO = "Ativo"
    SUSPENSO = "Suspenso"
    ARQUIVADO = "Arquivado"
    EM_RECURSO = "Em Recurso"
    JULGADO = "Julgado"

    @classmethod
    def parse(cls, value: Any) -> "CaseStatus":
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        return cls.ATIVO


# Allowed literal values for the string-typed status/kind fields
CLIENT_KINDS = ("PF", "PJ")
CLIENT_STATUSES = ("Ativo", "Inativo")
MOVEMENT_KINDS = ("PUBLICACAO", "MOVIMENTACAO", "INTERNO")
DEADLINE_PENDING = "PENDENTE"
DEADLINE_DONE = "CONCLUIDO"
HEARING_SCHEDULED = "AGENDADA"
HEARING_HELD = "REALIZADA"
HEARING_CANCELLED = "CANCELADA"
HEARING_KINDS = ("Instrução", "Una", "Conciliação", "Julgamento")
INCOME = "RECEITA"
EXPENSE = "DESPESA"
TRANSACTION_CATEGORIES = ("Honorários", "Alvará", "Acordo", "Custas", "Perito", "Outros")
CUSTOM_FIELD_TYPES = ("text", "date", "number", "currency")


@dataclass
class Contact:
    """Person associated with a client (e.g. a company's legal contact)"""

    id: str = field(default_factory=new_id)
    name: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "Contact":
        return cls(
            id=_stable_id(data, "contact", index),
            name=_pick(data, "name", "nome", default=""),
            role=_pick(data, "role", "cargo", default=""),
            email=_pick(data, "email", default=""),
            phone=_pick(data, "phone", "telefone", default=""),
        )


@dataclass
class Client:
    """Client registry entry (PF = natural person, PJ = legal entity)"""

    id: str = ""
    name: str = ""
    kind: str = "PF"
    document: str = ""  # CPF or CNPJ, formatted
    email: str = ""
    phone: str = ""
    city: str = ""
    status: str = "Ativo"
    contacts: list[Contact] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["contacts"] = [c.to_dict() for c in self.contacts]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        return cls(
            id=str(_pick(data, "id", default="")),
            name=_pick(data, "name", "nome", default=""),
            kind=_pick(data, "kind", "tipo", default="PF"),
            document=_pick(data, "document", "documento", default=""),
            email=_pick(data, "email", default=""),
            phone=_pick(data, "phone", "telefone", default=""),
            city=_pick(data, "city", "cidade", default=""),
            status=_pick(data, "status", default="Ativo"),
            contacts=[Contact.from_dict(c, i) for i, c in enumerate(_pick(data, "contacts", "contatos", default=[]))],
        )


@dataclass
class Thesis:
    """Legal-argument knowledge base entry"""

    id: str = ""
    title: str = ""
    area: LegalArea = LegalArea.CIVEL
    description: str = ""
    content: str = ""
    created_at: str = ""  # ISO timestamp

    def to_dict(self) -> dict:
        data = asdict(self)
        data["area"] = self.area.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Thesis":
        return cls(
            id=str(_pick(data, "id", default="")),
            title=_pick(data, "title", "titulo", default=""),
            area=LegalArea.parse(_pick(data, "area")),
            description=_pick(data, "description", "descricao", default=""),
            content=_pick(data, "content", "conteudo", default=""),
            created_at=_pick(data, "created_at", "dataCriacao", default=""),
        )


@dataclass
class Movement:
    """Case history entry (andamento)"""

    id: str = field(default_factory=new_id)
    date: str = ""
    description: str = ""
    kind: str = "MOVIMENTACAO"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "Movement":
        return cls(
            id=_stable_id(data, "movement", index),
            date=_pick(data, "date", "data", default=""),
            description=_pick(data, "description", "descricao", default=""),
            kind=_pick(data, "kind", "tipo", default="MOVIMENTACAO"),
        )


@dataclass
class Deadline:
    """Procedural deadline or task (prazo). ``date`` is an ISO date."""

    id: str = field(default_factory=new_id)
    date: str = ""
    description: str = ""
    status: str = DEADLINE_PENDING

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "Deadline":
        return cls(
            id=_stable_id(data, "deadline", index),
            date=_pick(data, "date", "data", default=""),
            description=_pick(data, "description", "descricao", default=""),
            status=_pick(data, "status", default=DEADLINE_PENDING),
        )


@dataclass
class Hearing:
    """Court hearing (audiência). ``date`` is an ISO date-time, ``location`` an address or a URL."""

    id: str = field(default_factory=new_id)
    date: str = ""
    kind: str = "Instrução"
    location: str = ""
    status: str = HEARING_SCHEDULED
    notes: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "Hearing":
        return cls(
            id=_stable_id(data, "hearing", index),
            date=_pick(data, "date", "data", default=""),
            kind=_pick(data, "kind", "tipo", default="Instrução"),
            location=_pick(data, "location", "local", default=""),
            status=_pick(data, "status", default=HEARING_SCHEDULED),
            notes=_pick(data, "notes", "observacao", default=""),
        )


@dataclass
class FeeConfig:
    """Fee agreement of a case: fixed contractual fee plus success and loss-award percentages"""

    contractual_fee: float = 0.0
    success_percent: float = 0.0
    loss_award_percent: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict | None) -> "FeeConfig":
        data = data or {}
        return cls(
            contractual_fee=_to_float(_pick(data, "contractual_fee", "honorariosContratuais")),
            success_percent=_to_float(_pick(data, "success_percent", "percentualExito")),
            loss_award_percent=_to_float(_pick(data, "loss_award_percent", "percentualSucumbencia")),
        )


@dataclass
class CaseTransaction:
    """Ledger entry of a case: RECEITA (e.g. court release, fees) or DESPESA (costs, expert)"""

    id: str = field(default_factory=new_id)
    date: str = ""
    description: str = ""
    kind: str = INCOME
    amount: float = 0.0
    category: str = "Honorários"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "CaseTransaction":
        return cls(
            id=_stable_id(data, "tx", index),
            date=_pick(data, "date", "data", default=""),
            description=_pick(data, "description", "descricao", default=""),
            kind=_pick(data, "kind", "tipo", default=INCOME),
            amount=_to_float(_pick(data, "amount", "valor")),
            category=_pick(data, "category", "categoria", default="Honorários"),
        )


@dataclass
class CaseFinance:
    config: FeeConfig = field(default_factory=FeeConfig)
    transactions: list[CaseTransaction] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "config": self.config.to_dict(),
            "transactions": [tx.to_dict() for tx in self.transactions],
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "CaseFinance":
        data = data or {}
        return cls(
            config=FeeConfig.from_dict(data.get("config")),
            transactions=[
                CaseTransaction.from_dict(tx, i)
                for i, tx in enumerate(_pick(data, "transactions", "transacoes", default=[]))
            ],
        )


@dataclass
class LegalCase:
    """Lawsuit (processo) with its embedded schedule, history and ledger"""

    id: str = ""
    number: str = ""
    title: str = ""
    client_id: str = ""
    opposing_party: str = ""
    area: LegalArea = LegalArea.CIVEL
    status: CaseStatus = CaseStatus.ATIVO
    claim_value: float = 0.0
    filing_date: str = ""

    # Single-field summaries. Older records carry only these, without the lists.
    next_hearing: str | None = None
    fatal_deadline: str | None = None
    last_movement: dict | None = None  # {"date": ..., "description": ...}

    deadlines: list[Deadline] = field(default_factory=list)
    hearings: list[Hearing] = field(default_factory=list)
    movements: list[Movement] = field(default_factory=list)

    finance: CaseFinance | None = None

    custom_data: dict[str, Any] = field(default_factory=dict)
    responsible: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "number": self.number,
            "title": self.title,
            "client_id": self.client_id,
            "opposing_party": self.opposing_party,
            "area": self.area.value,
            "status": self.status.value,
            "claim_value": self.claim_value,
            "filing_date": self.filing_date,
            "next_hearing": self.next_hearing,
            "fatal_deadline": self.fatal_deadline,
            "last_movement": self.last_movement,
            "deadlines": [d.to_dict() for d in self.deadlines],
            "hearings": [h.to_dict() for h in self.hearings],
            "movements": [m.to_dict() for m in self.movements],
            "finance": self.finance.to_dict() if self.finance else None,
            "custom_data": dict(self.custom_data),
            "responsible": self.responsible,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LegalCase":
        last = _pick(data, "last_movement", "ultimoAndamento")
        if last:
            last = {
                "date": _pick(last, "date", "data", default=""),
                "description": _pick(last, "description", "descricao", default=""),
            }
        finance = _pick(data, "finance", "financeiro")
        return cls(
            id=str(_pick(data, "id", default="")),
            number=_pick(data, "number", "numero", default=""),
            title=_pick(data, "title", "titulo", default=""),
            client_id=str(_pick(data, "client_id", "clienteId", default="")),
            opposing_party=_pick(data, "opposing_party", "parteAdversa", default=""),
            area=LegalArea.parse(_pick(data, "area")),
            status=CaseStatus.parse(_pick(data, "status")),
            claim_value=_to_float(_pick(data, "claim_value", "valorCausa")),
            filing_date=_pick(data, "filing_date", "dataDistribuicao", default=""),
            next_hearing=_pick(data, "next_hearing", "proximaAudiencia") or None,
            fatal_deadline=_pick(data, "fatal_deadline", "prazoFatal") or None,
            last_movement=last or None,
            deadlines=[Deadline.from_dict(d, i) for i, d in enumerate(_pick(data, "deadlines", "prazos", default=[]))],
            hearings=[Hearing.from_dict(h, i) for i, h in enumerate(_pick(data, "hearings", "audiencias", default=[]))],
            movements=[
                Movement.from_dict(m, i)
                for i, m in enumerate(_pick(data, "movements", "historicoAndamentos", default=[]))
            ],
            finance=CaseFinance.from_dict(finance) if finance else None,
            custom_data=dict(_pick(data, "custom_data", "customData", default={})),
            responsible=_pick(data, "responsible", "responsavel", default=""),
        )


@dataclass
class CustomFieldConfig:
    """Extra per-area field shown on the case form"""

    id: str
    area: LegalArea
    label: str
    type: str = "text"


DEFAULT_CUSTOM_FIELDS: list[CustomFieldConfig] = [
    CustomFieldConfig("trab_demissao", LegalArea.TRABALHISTA, "Data da Demissão", "date"),
    CustomFieldConfig("trib_regime", LegalArea.TRIBUTARIO, "Regime Tributário", "text"),
    CustomFieldConfig("civ_danos", LegalArea.CIVEL, "Tipo de Dano", "text"),
    CustomFieldConfig("prev_nb", LegalArea.PREVIDENCIARIO, "Número do Benefício (NB)", "number"),
    CustomFieldConfig("banc_contrato", LegalArea.BANCARIO, "Número do Contrato", "text"),
    CustomFieldConfig("imob_matricula", LegalArea.IMOBILIARIO, "Matrícula do Imóvel", "text"),
]


@dataclass
class Office:
    id: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AppUser:
    id: str
    email: str
    office_id: str | None = None
    name: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
