import math
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from risk_register.config import AppConfig
from risk_register.models import DashboardMetrics, RiskItem
from risk_register.utils.constants import (
    LONG_RANGE_URGENCIES,
    NEAR_TERM_URGENCIES,
    PRIORITY_CRITICAL,
    QUADRANT_PRIORITY_INVESTMENTS,
    QUADRANT_QUICK_WINS,
    QUADRANT_STRATEGIC_PLANNING,
    STATUS_COLORS,
    STATUS_COMPLETED,
    STATUSES,
)

QUICK_WIN_THRESHOLD = 5000


def priority_investments(items: Iterable[RiskItem], threshold: float = QUICK_WIN_THRESHOLD) -> List[RiskItem]:
    return [i for i in items if i.urgency in NEAR_TERM_URGENCIES and i.cost > threshold]


def quick_wins(items: Iterable[RiskItem], threshold: float = QUICK_WIN_THRESHOLD) -> List[RiskItem]:
    return [i for i in items if i.urgency in NEAR_TERM_URGENCIES and i.cost <= threshold]


def strategic_planning(items: Iterable[RiskItem]) -> List[RiskItem]:
    return [i for i in items if i.urgency in LONG_RANGE_URGENCIES]


def classify_quadrants(
    items: Iterable[RiskItem], threshold: float = QUICK_WIN_THRESHOLD
) -> Dict[str, List[RiskItem]]:
    items = list(items)
    return {
        QUADRANT_PRIORITY_INVESTMENTS: priority_investments(items, threshold),
        QUADRANT_QUICK_WINS: quick_wins(items, threshold),
        QUADRANT_STRATEGIC_PLANNING: strategic_planning(items),
    }


def status_distribution(items: Iterable[RiskItem]) -> List[Dict[str, Any]]:
    counts = dict.fromkeys(STATUSES, 0)
    for item in items:
        if item.status in counts:
            counts[item.status] += 1
    return [{"name": status, "value": counts[status], "color": STATUS_COLORS[status]} for status in STATUSES]


def budget_by_area(items: Iterable[RiskItem]) -> Dict[str, float]:
    """Sum cost per area, areas in order of first appearance."""
    totals: Dict[str, float] = {}
    for item in items:
        totals[item.area] = totals.get(item.area, 0) + item.cost
    return totals


def total_budget(items: Iterable[RiskItem]) -> float:
    return sum(item.cost for item in items)


def critical_count(items: Iterable[RiskItem]) -> int:
    return sum(1 for item in items if item.priority == PRIORITY_CRITICAL)


def completed_count(items: Iterable[RiskItem]) -> int:
    return sum(1 for item in items if item.status == STATUS_COMPLETED)


def compliance_score(items: Iterable[RiskItem]) -> Optional[int]:
    """Percentage of completed items, rounded half up; ``None`` for an empty collection."""
    items = list(items)
    if not items:
        return None
    return int(math.floor(completed_count(items) / len(items) * 100 + 0.5))


def upcoming_deadlines(items: Iterable[RiskItem], limit: int = 5) -> List[RiskItem]:
    open_items = [i for i in items if i.status != STATUS_COMPLETED]
    # sorted() is stable, so equal deadlines keep collection order
    return sorted(open_items, key=lambda i: i.deadline)[:limit]


def is_overdue(item: RiskItem, today: date) -> bool:
    return item.deadline < today


def filter_items(
    items: Iterable[RiskItem],
    priority: Optional[int] = None,
    area: Optional[str] = None,
    status: Optional[str] = None,
) -> List[RiskItem]:
    result = []
    for item in items:
        if priority is not None and item.priority != priority:
            continue
        if area is not None and item.area != area:
            continue
        if status is not None and item.status != status:
            continue
        result.append(item)
    return result


def dashboard_metrics(items: Iterable[RiskItem]) -> DashboardMetrics:
    items = list(items)
    return DashboardMetrics(
        compliance_score=compliance_score(items),
        total_budget=total_budget(items),
        critical_count=critical_count(items),
        completed_count=completed_count(items),
    )


def dashboard_snapshot(items: Iterable[RiskItem], config: AppConfig, today: Optional[date] = None) -> Dict[str, Any]:
    items = list(items)
    today = today or date.today()
    return {
        "isEmpty": not items,
        "metrics": dashboard_metrics(items).to_dict(),
        "statusDistribution": status_distribution(items),
        "budgetByArea": [{"name": area, "cost": cost} for area, cost in budget_by_area(items).items()],
        "upcomingDeadlines": [
            {**item.to_dict(), "overdue": is_overdue(item, today)}
            for item in upcoming_deadlines(items, config.upcoming_limit)
        ],
    }
