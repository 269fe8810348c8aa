"""
Deadlines, hearings and agenda.

A case keeps its schedule in two shapes: the ``deadlines``/``hearings`` lists
and the older single fields ``fatal_deadline``/``next_hearing``. Everything
here works on the merged view so records written before the lists existed
still show up on the agenda and the dashboard.
"""

import copy
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from juzk.domain.errors import RecordNotFoundError
from juzk.domain.models import (
    DEADLINE_DONE,
    DEADLINE_PENDING,
    HEARING_SCHEDULED,
    CaseStatus,
    Deadline,
    Hearing,
    LegalArea,
    LegalCase,
    Movement,
)
from juzk.utils.formatting import parse_date, parse_datetime

LEGACY_DEADLINE_ID = "legacy-fatal-deadline"
LEGACY_HEARING_ID = "legacy-next-hearing"

EVENT_DEADLINE = "PRAZO"
EVENT_HEARING = "AUDIENCIA"


def merged_deadlines(case: LegalCase) -> list[Deadline]:
    """Listed deadlines plus the legacy ``fatal_deadline`` when it is not already listed."""
    deadlines = list(case.deadlines)
    legacy = parse_date(case.fatal_deadline)
    if legacy is not None and all(parse_date(d.date) != legacy for d in deadlines):
        deadlines.append(
            Deadline(
                id=LEGACY_DEADLINE_ID,
                date=legacy.isoformat(),
                description="Prazo fatal",
                status=DEADLINE_PENDING,
            )
        )
    return deadlines


def merged_hearings(case: LegalCase) -> list[Hearing]:
    """Listed hearings plus the legacy ``next_hearing`` when it is not already listed."""
    hearings = list(case.hearings)
    legacy = parse_datetime(case.next_hearing)
    if legacy is not None and all(parse_datetime(h.date) != legacy for h in hearings):
        hearings.append(
            Hearing(
                id=LEGACY_HEARING_ID,
                date=case.next_hearing,
                kind="Audiência",
                status=HEARING_SCHEDULED,
            )
        )
    return hearings


def next_deadline(case: LegalCase, today: date) -> Deadline | None:
    """Earliest pending deadline dated today or later."""
    return _earliest_pending_deadline(merged_deadlines(case), today)


def next_hearing(case: LegalCase, now: datetime) -> Hearing | None:
    """Earliest scheduled hearing at or after ``now``."""
    return _earliest_scheduled_hearing(merged_hearings(case), now)


def overdue_deadlines(case: LegalCase, today: date) -> list[Deadline]:
    return [
        d
        for d in merged_deadlines(case)
        if d.status == DEADLINE_PENDING and (d_date := parse_date(d.date)) is not None and d_date < today
    ]


def _latest_movement(movements: list[Movement]) -> Movement | None:
    dated = [(m_dt, m) for m in movements if (m_dt := parse_datetime(m.date)) is not None]
    if dated:
        return max(dated, key=lambda pair: pair[0])[1]
    return movements[0] if movements else None


def _refers_to(summary: dict | None, movements: list[Movement]) -> bool:
    if not summary:
        return False
    return any(m.date == summary.get("date") and m.description == summary.get("description") for m in movements)


def refresh_case_summary(case: LegalCase, now: datetime) -> LegalCase:
    """
    Recompute the single-field summaries.

    Once a case has a deadline (or hearing) list, the summary comes from the
    list alone; the legacy field only counts for records that never had one.
    Past legacy values drop off. ``last_movement`` is kept while it still
    names a movement in the history, otherwise it becomes the latest one.
    """
    updated = copy.deepcopy(case)
    today = now.date()
    if case.deadlines:
        deadline = _earliest_pending_deadline(case.deadlines, today)
    else:
        deadline = next_deadline(case, today)
    updated.fatal_deadline = deadline.date if deadline else None

    if case.hearings:
        hearing = _earliest_scheduled_hearing(case.hearings, now)
    else:
        hearing = next_hearing(case, now)
    updated.next_hearing = hearing.date if hearing else None

    if not _refers_to(case.last_movement, case.movements):
        latest = _latest_movement(case.movements)
        if latest is not None:
            updated.last_movement = {"date": latest.date, "description": latest.description}
    return updated


def _earliest_pending_deadline(deadlines: list[Deadline], today: date) -> Deadline | None:
    upcoming = [
        (d_date, d)
        for d in deadlines
        if d.status == DEADLINE_PENDING and (d_date := parse_date(d.date)) is not None and d_date >= today
    ]
    return min(upcoming, key=lambda pair: pair[0])[1] if upcoming else None


def _earliest_scheduled_hearing(hearings: list[Hearing], now: datetime) -> Hearing | None:
    upcoming = [
        (h_dt, h)
        for h in hearings
        if h.status == HEARING_SCHEDULED and (h_dt := parse_datetime(h.date)) is not None and h_dt >= now
    ]
    return min(upcoming, key=lambda pair: pair[0])[1] if upcoming else None


def add_movement(case: LegalCase, movement: Movement) -> LegalCase:
    """Prepend the movement to the history and make it the case's last movement."""
    updated = copy.deepcopy(case)
    updated.movements = [movement] + updated.movements
    updated.last_movement = {"date": movement.date, "description": movement.description}
    return updated


def add_deadline(case: LegalCase, deadline: Deadline) -> LegalCase:
    """Append a deadline. A legacy ``fatal_deadline`` is moved into the list first."""
    updated = copy.deepcopy(case)
    updated.deadlines = merged_deadlines(updated) + [deadline]
    return updated


def add_hearing(case: LegalCase, hearing: Hearing) -> LegalCase:
    updated = copy.deepcopy(case)
    updated.hearings = merged_hearings(updated) + [hearing]
    return updated


def _drop_legacy_deadline(case: LegalCase, old_date: str) -> None:
    legacy = parse_date(case.fatal_deadline)
    if legacy is not None and legacy == parse_date(old_date):
        case.fatal_deadline = None


def _drop_legacy_hearing(case: LegalCase, old_date: str) -> None:
    legacy = parse_datetime(case.next_hearing)
    if legacy is not None and legacy == parse_datetime(old_date):
        case.next_hearing = None


def update_deadline(
    case: LegalCase, deadline_id: str, *, new_date: str, description: str, status: str
) -> LegalCase:
    """Edit a deadline in place. Raises RecordNotFoundError for an unknown id."""
    updated = copy.deepcopy(case)
    if str(deadline_id) == LEGACY_DEADLINE_ID:
        updated.deadlines = merged_deadlines(updated)
    target = next((d for d in updated.deadlines if str(d.id) == str(deadline_id)), None)
    if target is None:
        raise RecordNotFoundError("deadlines", str(deadline_id))
    if parse_date(target.date) != parse_date(new_date):
        _drop_legacy_deadline(updated, target.date)
    target.date = new_date
    target.description = description
    target.status = status
    return updated


def update_hearing(
    case: LegalCase, hearing_id: str, *, new_date: str, kind: str, location: str, notes: str
) -> LegalCase:
    """Edit a hearing in place. Raises RecordNotFoundError for an unknown id."""
    updated = copy.deepcopy(case)
    if str(hearing_id) == LEGACY_HEARING_ID:
        updated.hearings = merged_hearings(updated)
    target = next((h for h in updated.hearings if str(h.id) == str(hearing_id)), None)
    if target is None:
        raise RecordNotFoundError("hearings", str(hearing_id))
    if parse_datetime(target.date) != parse_datetime(new_date):
        _drop_legacy_hearing(updated, target.date)
    target.date = new_date
    target.kind = kind
    target.location = location
    target.notes = notes
    return updated


def set_deadline_status(case: LegalCase, deadline_id: str, status: str) -> LegalCase:
    """
    Change a deadline's status. The synthesized legacy deadline is written into
    the list first so the change sticks.
    """
    updated = copy.deepcopy(case)
    if str(deadline_id) == LEGACY_DEADLINE_ID:
        updated.deadlines = merged_deadlines(updated)
    for d in updated.deadlines:
        if str(d.id) == str(deadline_id):
            d.status = status
    return updated


def set_hearing_status(case: LegalCase, hearing_id: str, status: str) -> LegalCase:
    updated = copy.deepcopy(case)
    if str(hearing_id) == LEGACY_HEARING_ID:
        updated.hearings = merged_hearings(updated)
    for h in updated.hearings:
        if str(h.id) == str(hearing_id):
            h.status = status
    return updated


def remove_deadline(case: LegalCase, deadline_id: str) -> LegalCase:
    """Drop a deadline, and the legacy field too when it points at the same date."""
    updated = copy.deepcopy(case)
    if str(deadline_id) == LEGACY_DEADLINE_ID:
        updated.fatal_deadline = None
    for d in updated.deadlines:
        if str(d.id) == str(deadline_id):
            _drop_legacy_deadline(updated, d.date)
    updated.deadlines = [d for d in updated.deadlines if str(d.id) != str(deadline_id)]
    return updated


def remove_hearing(case: LegalCase, hearing_id: str) -> LegalCase:
    updated = copy.deepcopy(case)
    if str(hearing_id) == LEGACY_HEARING_ID:
        updated.next_hearing = None
    for h in updated.hearings:
        if str(h.id) == str(hearing_id):
            _drop_legacy_hearing(updated, h.date)
    updated.hearings = [h for h in updated.hearings if str(h.id) != str(hearing_id)]
    return updated


def is_url(location: str | None) -> bool:
    """True for http(s) links (virtual hearing rooms)."""
    return bool(location) and str(location).startswith(("http://", "https://"))


# ---------------------------------------------------------------------------
# Agenda
# ---------------------------------------------------------------------------
@dataclass
class AgendaEvent:
    id: str
    case_id: str
    case_title: str
    case_number: str
    date: str
    kind: str  # PRAZO | AUDIENCIA
    description: str
    status: str
    location: str = ""

    @property
    def when(self) -> datetime:
        return parse_datetime(self.date)


@dataclass
class AgendaGroups:
    overdue: list[AgendaEvent] = field(default_factory=list)
    today: list[AgendaEvent] = field(default_factory=list)
    tomorrow: list[AgendaEvent] = field(default_factory=list)
    this_week: list[AgendaEvent] = field(default_factory=list)
    later: list[AgendaEvent] = field(default_factory=list)

    def total(self) -> int:
        return len(self.overdue) + len(self.today) + len(self.tomorrow) + len(self.this_week) + len(self.later)


def collect_agenda_events(cases: list[LegalCase]) -> list[AgendaEvent]:
    """Pending deadlines and scheduled hearings of all cases, sorted by date. Undated items are skipped."""
    events: list[AgendaEvent] = []
    for case in cases:
        for d in merged_deadlines(case):
            if d.status != DEADLINE_PENDING or parse_datetime(d.date) is None:
                continue
            events.append(
                AgendaEvent(
                    id=d.id,
                    case_id=case.id,
                    case_title=case.title,
                    case_number=case.number,
                    date=d.date,
                    kind=EVENT_DEADLINE,
                    description=d.description,
                    status=d.status,
                )
            )
        for h in merged_hearings(case):
            if h.status != HEARING_SCHEDULED or parse_datetime(h.date) is None:
                continue
            events.append(
                AgendaEvent(
                    id=h.id,
                    case_id=case.id,
                    case_title=case.title,
                    case_number=case.number,
                    date=h.date,
                    kind=EVENT_HEARING,
                    description=h.kind,
                    status=h.status,
                    location=h.location or "",
                )
            )
    events.sort(key=lambda e: e.when)
    return events


def end_of_week(today: date) -> date:
    """The coming Sunday; a week ahead when today is Sunday."""
    days_from_sunday = (today.weekday() + 1) % 7
    return today + timedelta(days=7 - days_from_sunday)


def group_agenda_events(events: list[AgendaEvent], today: date) -> AgendaGroups:
    groups = AgendaGroups()
    tomorrow = today + timedelta(days=1)
    week_end = end_of_week(today)
    for event in events:
        day = event.when.date()
        if day < today:
            groups.overdue.append(event)
        elif day == today:
            groups.today.append(event)
        elif day == tomorrow:
            groups.tomorrow.append(event)
        elif day <= week_end:
            groups.this_week.append(event)
        else:
            groups.later.append(event)
    return groups


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
@dataclass
class DashboardMetrics:
    active_cases: int = 0
    total_claim_value: float = 0.0
    critical_deadlines: int = 0
    productivity: int = 100
    status_counts: dict[str, int] = field(default_factory=dict)
    area_counts: dict[str, int] = field(default_factory=dict)


def dashboard_metrics(cases: list[LegalCase], today: date) -> DashboardMetrics:
    """Headline numbers for the overview page. Zero-count statuses and areas are omitted."""
    total_deadlines = 0
    done_deadlines = 0
    for case in cases:
        total_deadlines += len(case.deadlines)
        done_deadlines += sum(1 for d in case.deadlines if d.status == DEADLINE_DONE)

    # half-up, not round()'s half-even
    productivity = 100 if total_deadlines == 0 else int(done_deadlines * 100 / total_deadlines + 0.5)

    status_counts = {
        s.value: n for s in CaseStatus if (n := sum(1 for c in cases if c.status == s)) > 0
    }
    area_counts = {
        a.value: n for a in LegalArea if (n := sum(1 for c in cases if c.area == a)) > 0
    }

    return DashboardMetrics(
        active_cases=sum(1 for c in cases if c.status == CaseStatus.ATIVO),
        total_claim_value=sum(c.claim_value or 0 for c in cases),
        critical_deadlines=sum(1 for c in cases if next_deadline(c, today) is not None),
        productivity=productivity,
        status_counts=status_counts,
        area_counts=area_counts,
    )
