"""
Demo data for a fresh office: 15 clients, 20 cases and 10 theses.

Dates are relative to ``today`` so the agenda and the finance chart always
have something to show.
"""

from datetime import date, datetime, timedelta

from juzk.config.settings import DEFAULT_RESPONSIBLE
from juzk.domain.models import (
    DEADLINE_PENDING,
    EXPENSE,
    HEARING_SCHEDULED,
    INCOME,
    CaseFinance,
    CaseStatus,
    CaseTransaction,
    Client,
    Deadline,
    FeeConfig,
    Hearing,
    LegalArea,
    LegalCase,
    Movement,
    Thesis,
)

CLIENT_COUNT = 15
CASE_COUNT = 20
THESIS_COUNT = 10


def _months_back(day: date, months: int, days: int) -> date:
    index = day.year * 12 + (day.month - 1) - months
    year, month = index // 12, index % 12 + 1
    return date(year, month, min(day.day, 28)) - timedelta(days=days)


def build_mock_clients() -> list[Client]:
    clients = []
    for i in range(CLIENT_COUNT):
        natural_person = i % 2 == 0
        clients.append(
            Client(
                id=f"c{i + 1}",
                name=f"Pessoa Física Demo {i + 1}" if natural_person else f"Empresa Multinacional {i + 1} S/A",
                kind="PF" if natural_person else "PJ",
                document=f"123.456.789-{i % 10}{i % 10}" if natural_person else f"12.345.678/0001-{i % 10}{i % 10}",
                email=f"contato{i}@nexuslegal.com.br",
                phone=f"(11) 98888-{i:04d}",
                city="São Paulo - SP",
                status="Ativo",
            )
        )
    return clients


def build_mock_cases(clients: list[Client], today: date) -> list[LegalCase]:
    areas = list(LegalArea)
    statuses = list(CaseStatus)
    cases = []
    for i in range(CASE_COUNT):
        area = areas[i % len(areas)]
        client = clients[i % len(clients)]
        filed = _months_back(today, i % 6, i * 2)
        deadline_day = today + timedelta(days=i % 10 + 2)
        hearings = []
        if i % 4 == 0:
            hearing_at = datetime.combine(today + timedelta(days=i + 5), datetime.min.time()).replace(hour=14, minute=30)
            hearings.append(
                Hearing(
                    id=f"au{i}",
                    date=hearing_at.isoformat(timespec="minutes"),
                    kind="Instrução",
                    location="Tribunal Online",
                    status=HEARING_SCHEDULED,
                )
            )
        cases.append(
            LegalCase(
                id=f"p{i + 1}",
                number=f"{2024000 + i}-55.2024.8.26.0{100 + i}",
                title=f"{area.value} - Caso Estratégico #{i + 1}",
                client_id=client.id,
                opposing_party="Oponente de Mercado Ltda",
                area=area,
                status=statuses[i % len(statuses)],
                claim_value=25000.0 * (i + 1),
                filing_date=filed.isoformat(),
                deadlines=[
                    Deadline(
                        id=f"pr{i}",
                        date=deadline_day.isoformat(),
                        description="Manifestação sobre Contestação",
                        status=DEADLINE_PENDING,
                    )
                ],
                hearings=hearings,
                movements=[
                    Movement(
                        id=f"h{i}",
                        date=filed.isoformat(),
                        description="Ação protocolada e sistema atualizado.",
                        kind="MOVIMENTACAO",
                    )
                ],
                last_movement={"date": filed.isoformat(), "description": "Ação protocolada e sistema atualizado."},
                finance=CaseFinance(
                    config=FeeConfig(contractual_fee=4500.0, success_percent=20.0, loss_award_percent=10.0),
                    transactions=[
                        CaseTransaction(
                            id=f"t1-{i}",
                            date=filed.isoformat(),
                            description="Honorários Pró-labore",
                            kind=INCOME,
                            amount=4500.0,
                            category="Honorários",
                        ),
                        CaseTransaction(
                            id=f"t2-{i}",
                            date=today.isoformat(),
                            description="Custas de Protocolo",
                            kind=EXPENSE,
                            amount=350.50,
                            category="Custas",
                        ),
                    ],
                ),
                responsible=DEFAULT_RESPONSIBLE,
            )
        )
    return cases


def build_mock_theses(now: datetime) -> list[Thesis]:
    areas = list(LegalArea)
    theses = []
    for i in range(THESIS_COUNT):
        area = areas[i % len(areas)]
        theses.append(
            Thesis(
                id=f"t{i + 1}",
                title=f"Tese de Defesa: Direito {area.value} #{i + 1}",
                area=area,
                description=f"Compêndio jurídico atualizado sobre Direito {area.value} focado em {now.year - 1}/{now.year}.",
                content=f"Este é um conteúdo demonstrativo da biblioteca de teses da Nexus para {area.value}.",
                created_at=now.isoformat(timespec="seconds"),
            )
        )
    return theses


def build_mock_data(now: datetime) -> tuple[list[Client], list[LegalCase], list[Thesis]]:
    clients = build_mock_clients()
    return clients, build_mock_cases(clients, now.date()), build_mock_theses(now)
