"""Urgency-vs-cost matrix coordinates for the decision chart."""

import hashlib
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from risk_register.models import RiskItem
from risk_register.utils.constants import (
    COST_LOG_MAX,
    COST_LOG_MIN,
    COST_Y_CEILING,
    COST_Y_FLOOR,
    JITTER_ID,
    JITTER_INDEX,
    JITTER_SOURCES,
    PLOT_MAX,
    PLOT_MIN,
    PRIORITY_COLORS,
    PRIORITY_MODERATE,
    PRIORITY_SIZES,
    UNKNOWN_URGENCY_X,
    URGENCY_X_BASE,
)


@dataclass
class MatrixPoint:
    id: str
    title: str
    x: float
    y: float
    size: int
    color: str
    priority: Any
    urgency: str
    cost: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "x": self.x,
            "y": self.y,
            "size": self.size,
            "color": self.color,
            "priority": self.priority,
            "urgency": self.urgency,
            "cost": self.cost,
        }


def urgency_to_x(urgency: str) -> float:
    return float(URGENCY_X_BASE.get(urgency, UNKNOWN_URGENCY_X))


def cost_to_y(cost: float) -> float:
    """Log10 scale mapping 100 -> 10 and 100000 -> 90; anything <= 100 sits on the floor."""
    if cost <= 0 or math.isnan(cost):
        return COST_Y_FLOOR
    log_cost = max(math.log10(cost), COST_LOG_MIN)
    span = COST_Y_CEILING - COST_Y_FLOOR
    return COST_Y_FLOOR + (log_cost - COST_LOG_MIN) / (COST_LOG_MAX - COST_LOG_MIN) * span


def jitter(seed: int) -> Tuple[int, int]:
    jitter_x = (1 if seed % 2 == 0 else -1) * (seed % 5)
    jitter_y = (1 if seed % 3 == 0 else -1) * (seed % 3)
    return jitter_x, jitter_y


def id_seed(item_id: str) -> int:
    digest = hashlib.sha256(str(item_id).encode("utf-8")).hexdigest()
    return int(digest[:12], 16)


def clamp(value: float) -> float:
    return min(max(value, PLOT_MIN), PLOT_MAX)


def priority_size(priority: Any) -> int:
    return PRIORITY_SIZES.get(priority, PRIORITY_SIZES[PRIORITY_MODERATE])


def priority_color(priority: Any) -> str:
    return PRIORITY_COLORS.get(priority, PRIORITY_COLORS[PRIORITY_MODERATE])


def matrix_points(items: Iterable[RiskItem], jitter_source: str = JITTER_INDEX) -> List[MatrixPoint]:
    """Place every item on the 0-100 urgency (x) / cost (y) plane.

    Jitter separates items sharing an urgency. With ``jitter_source="index"``
    it depends on each item's position in ``items``; ``"id"`` derives it from
    the item id instead so the layout survives re-sorting.
    """
    if jitter_source not in JITTER_SOURCES:
        raise ValueError(f"Unknown jitter source {jitter_source!r}")
    points = []
    for index, item in enumerate(items):
        seed = id_seed(item.id) if jitter_source == JITTER_ID else index
        jitter_x, jitter_y = jitter(seed)
        points.append(
            MatrixPoint(
                id=item.id,
                title=item.title,
                x=clamp(urgency_to_x(item.urgency) + jitter_x),
                y=clamp(cost_to_y(item.cost) + jitter_y),
                size=priority_size(item.priority),
                color=priority_color(item.priority),
                priority=item.priority,
                urgency=item.urgency,
                cost=item.cost,
            )
        )
    return points
