import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from numbers import Real
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

from risk_register.utils.constants import (
    AREAS,
    COST_RANGES,
    LEGAL_RISKS,
    PRIORITIES,
    STATUS_CYCLE,
    STATUSES,
    URGENCIES,
)
from risk_register.utils.errors import ValidationError


Base = declarative_base()


def utcnow() -> datetime:
    return datetime.utcnow()


class StorageSlot(Base):
    """A named slot holding one serialized collection."""

    __tablename__ = "storage_slots"

    name = Column(String, primary_key=True)
    payload_json = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


# Storage field name -> attribute name
FIELD_MAP = {
    "id": "id",
    "title": "title",
    "description": "description",
    "priority": "priority",
    "status": "status",
    "area": "area",
    "cost": "cost",
    "costRange": "cost_range",
    "deadline": "deadline",
    "owner": "owner",
    "impact": "impact",
    "legalRisk": "legal_risk",
    "urgency": "urgency",
}


@dataclass
class RiskItem:
    id: str
    title: str
    description: str
    priority: int
    status: str
    area: str
    cost: float
    cost_range: str
    deadline: date
    owner: str
    impact: str
    legal_risk: str
    urgency: str
    dependencies: Optional[List[str]] = None

    def is_same_item(self, other: "RiskItem") -> bool:
        return self.id == other.id

    def to_dict(self) -> Dict[str, Any]:
        data = {key: getattr(self, attr) for key, attr in FIELD_MAP.items()}
        data["deadline"] = self.deadline.isoformat() if isinstance(self.deadline, date) else self.deadline
        if self.dependencies is not None:
            data["dependencies"] = list(self.dependencies)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskItem":
        """Build an item from its storage encoding.

        Only shape is checked here (missing fields, unparseable deadline,
        non-list dependencies); enum membership and cost bounds are left
        to :func:`validate`.
        """
        if not isinstance(data, dict):
            raise ValidationError([{"field": "item", "message": "expected an object"}])
        errors = [
            {"field": key, "message": "missing"} for key in FIELD_MAP if key not in data
        ]
        if errors:
            raise ValidationError(errors)
        kwargs = {attr: data[key] for key, attr in FIELD_MAP.items()}
        kwargs["deadline"] = parse_deadline(data["deadline"])
        dependencies = data.get("dependencies")
        if dependencies is not None and not isinstance(dependencies, list):
            raise ValidationError([{"field": "dependencies", "message": "must be a list of item ids"}])
        kwargs["dependencies"] = list(dependencies) if dependencies is not None else None
        return cls(**kwargs)


def parse_deadline(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError([{"field": "deadline", "message": f"not an ISO-8601 date: {value!r}"}])


def _enum_error(field: str, value: Any, allowed) -> Dict[str, str]:
    return {"field": field, "message": f"{value!r} is not one of {', '.join(str(a) for a in allowed)}"}


def validate(item: RiskItem) -> List[Dict[str, str]]:
    """Return field-level errors for ``item``; an empty list means valid."""
    errors: List[Dict[str, str]] = []
    if not isinstance(item.id, str) or not item.id:
        errors.append({"field": "id", "message": "must be a non-empty string"})
    for field in ("title", "description"):
        value = getattr(item, field)
        if not isinstance(value, str) or not value.strip():
            errors.append({"field": field, "message": "must not be empty"})
    for field in ("owner", "impact"):
        if not isinstance(getattr(item, field), str):
            errors.append({"field": field, "message": "must be text"})
    if isinstance(item.priority, bool) or item.priority not in PRIORITIES:
        errors.append(_enum_error("priority", item.priority, PRIORITIES))
    if item.status not in STATUSES:
        errors.append(_enum_error("status", item.status, STATUSES))
    if item.area not in AREAS:
        errors.append(_enum_error("area", item.area, AREAS))
    if item.cost_range not in COST_RANGES:
        errors.append(_enum_error("costRange", item.cost_range, COST_RANGES))
    if item.legal_risk not in LEGAL_RISKS:
        errors.append(_enum_error("legalRisk", item.legal_risk, LEGAL_RISKS))
    if item.urgency not in URGENCIES:
        errors.append(_enum_error("urgency", item.urgency, URGENCIES))
    if isinstance(item.cost, bool) or not isinstance(item.cost, Real):
        errors.append({"field": "cost", "message": "must be a number"})
    elif not math.isfinite(item.cost):
        errors.append({"field": "cost", "message": "must be a finite number"})
    elif item.cost < 0:
        errors.append({"field": "cost", "message": "must not be negative"})
    if not isinstance(item.deadline, date):
        errors.append({"field": "deadline", "message": "must be a calendar date"})
    if item.dependencies is not None and (
        not isinstance(item.dependencies, list) or not all(isinstance(d, str) for d in item.dependencies)
    ):
        errors.append({"field": "dependencies", "message": "must be a list of item ids"})
    return errors


def ensure_valid(item: RiskItem) -> RiskItem:
    errors = validate(item)
    if errors:
        raise ValidationError(errors, message=f"Invalid risk item {item.id!r}")
    return item


def advance_status(item: RiskItem) -> RiskItem:
    """Return a copy of ``item`` moved one step along NotStarted -> InProgress -> Completed -> NotStarted."""
    if item.status not in STATUS_CYCLE:
        raise ValidationError([_enum_error("status", item.status, STATUSES)])
    return replace(item, status=STATUS_CYCLE[item.status])


@dataclass
class DashboardMetrics:
    compliance_score: Optional[int]
    total_budget: float
    critical_count: int
    completed_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "complianceScore": self.compliance_score,
            "totalBudget": self.total_budget,
            "criticalCount": self.critical_count,
            "completedCount": self.completed_count,
        }
