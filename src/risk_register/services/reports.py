import re
from datetime import date
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from risk_register.config import AppConfig
from risk_register.models import RiskItem
from risk_register.utils.constants import (
    PRIORITY_CRITICAL,
    PRIORITY_HIGH,
    REPORT_CATALOGUE,
    REPORT_MAINTENANCE_PLAN,
    REPORT_RESOLUTION,
)
from risk_register.utils.errors import ItemNotFoundError


class ResolutionRow(NamedTuple):
    priority: int
    title: str
    owner: str
    cost: float


class PlanningRow(NamedTuple):
    deadline: date
    title: str
    urgency: str
    cost: float


class SummaryRow(NamedTuple):
    title: str
    area: str
    status: str


def priority_resolution_rows(items: Iterable[RiskItem]) -> Tuple[List[ResolutionRow], float]:
    selected = [i for i in items if i.priority in (PRIORITY_CRITICAL, PRIORITY_HIGH)]
    rows = [ResolutionRow(i.priority, i.title, i.owner, i.cost) for i in selected]
    return rows, sum(i.cost for i in selected)


def planning_rows(items: Iterable[RiskItem]) -> List[PlanningRow]:
    return [PlanningRow(i.deadline, i.title, i.urgency, i.cost) for i in sorted(items, key=lambda i: i.deadline)]


def summary_rows(items: Iterable[RiskItem]) -> List[SummaryRow]:
    return [SummaryRow(i.title, i.area, i.status) for i in items]


def report_catalogue() -> List[Dict[str, str]]:
    return [
        {"report_type": key, "name": entry["name"], "description": entry["description"]}
        for key, entry in REPORT_CATALOGUE.items()
    ]


def _cell(value: Any) -> Any:
    return value.isoformat() if isinstance(value, date) else value


def report_file_name(report_name: str, today: date) -> str:
    stem = re.sub(r"\s+", "_", report_name)
    return f"{stem}_{today.strftime('%Y%m%d')}.pdf"


def build_report(
    report_type: str, items: Iterable[RiskItem], config: AppConfig, today: Optional[date] = None
) -> Dict[str, Any]:
    entry = REPORT_CATALOGUE.get(report_type)
    if entry is None:
        raise ItemNotFoundError(f"Unknown report type {report_type}")
    today = today or date.today()
    items = list(items)
    total = None
    if report_type == REPORT_RESOLUTION:
        rows, total = priority_resolution_rows(items)
    elif report_type == REPORT_MAINTENANCE_PLAN:
        rows = planning_rows(items)
    else:
        rows = summary_rows(items)
    return {
        "export_version": config.export_version,
        "title": config.report_title,
        "report_type": report_type,
        "report_name": entry["name"],
        "generated_on": today.isoformat(),
        "heading": entry["heading"],
        "columns": list(entry["columns"]),
        "rows": [[_cell(v) for v in row] for row in rows],
        "total": total,
        "file_name": report_file_name(entry["name"], today),
    }
