from typing import List

import yaml

from risk_register.models import RiskItem
from risk_register.services.storage import items_from_records


def load_seed(path: str) -> List[RiskItem]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    records = data.get("items", []) if isinstance(data, dict) else data
    return items_from_records(records)
