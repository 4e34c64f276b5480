from datetime import date

import pytest

from risk_register.models import RiskItem


def build_item(item_id="1", **overrides):
    fields = {
        "id": item_id,
        "title": f"Item {item_id}",
        "description": "Remediation work",
        "priority": 2,
        "status": "NotStarted",
        "area": "Structural",
        "cost": 1000,
        "cost_range": "low",
        "deadline": date(2025, 1, 10),
        "owner": "Administrator",
        "impact": "Reduced exposure",
        "legal_risk": "Civil",
        "urgency": "ShortTerm",
    }
    fields.update(overrides)
    return RiskItem(**fields)


@pytest.fixture
def make_item():
    return build_item
