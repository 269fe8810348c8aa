"""
List filtering and pagination used by the clients, cases and theses pages.
"""

import math
from dataclasses import dataclass

from juzk.domain.models import Client, LegalArea, LegalCase, Thesis

ALL = "all"


@dataclass
class Page:
    items: list
    number: int  # 1-based, clamped to [1, total_pages]
    total_pages: int
    total_items: int


def paginate(items: list, page: int, page_size: int) -> Page:
    """Slice ``items`` for a 1-based page. An empty list still has one (empty) page."""
    total_pages = max(1, math.ceil(len(items) / page_size))
    number = min(max(1, page), total_pages)
    start = (number - 1) * page_size
    return Page(items=items[start : start + page_size], number=number, total_pages=total_pages, total_items=len(items))


def filter_clients(clients: list[Client], term: str = "", kind: str = ALL) -> list[Client]:
    """Case-insensitive name match or literal document match, optionally restricted to PF/PJ."""
    needle = (term or "").strip()
    lowered = needle.lower()
    return [
        c
        for c in clients
        if (not needle or lowered in c.name.lower() or needle in c.document) and (kind == ALL or c.kind == kind)
    ]


def filter_cases(cases: list[LegalCase], clients: list[Client], term: str = "") -> list[LegalCase]:
    """Match on title, case number or client name."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(cases)
    names = {str(c.id): c.name.lower() for c in clients}
    return [
        c
        for c in cases
        if needle in c.title.lower() or needle in c.number.lower() or needle in names.get(str(c.client_id), "")
    ]


def filter_theses(theses: list[Thesis], term: str = "", area: LegalArea | str = ALL) -> list[Thesis]:
    needle = (term or "").strip().lower()
    return [
        th
        for th in theses
        if (not needle or needle in th.title.lower() or needle in th.description.lower())
        and (area == ALL or th.area == area)
    ]


def client_name(clients: list[Client], client_id: str) -> str:
    return next((c.name for c in clients if str(c.id) == str(client_id)), "")
