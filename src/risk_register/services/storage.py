import json
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from risk_register.models import RiskItem, StorageSlot, ensure_valid, utcnow
from risk_register.utils.db import session_scope
from risk_register.utils.errors import StorageError, ValidationError


class SlotStorage(ABC):
    @abstractmethod
    def read(self, name: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def write(self, name: str, payload: str) -> None:
        raise NotImplementedError


class MemorySlotStorage(SlotStorage):
    def __init__(self, slots: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(slots or {})

    def read(self, name: str) -> Optional[str]:
        return self.slots.get(name)

    def write(self, name: str, payload: str) -> None:
        self.slots[name] = payload


class SqlSlotStorage(SlotStorage):
    def __init__(self, Session):
        self.Session = Session

    def read(self, name: str) -> Optional[str]:
        with session_scope(self.Session) as session:
            slot = session.get(StorageSlot, name)
            return slot.payload_json if slot else None

    def write(self, name: str, payload: str) -> None:
        with session_scope(self.Session) as session:
            slot = session.get(StorageSlot, name)
            if slot is None:
                session.add(StorageSlot(name=name, payload_json=payload))
            else:
                slot.payload_json = payload
                slot.updated_at = utcnow()


def serialize(items: Iterable[RiskItem]) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False, allow_nan=False)


def items_from_records(records) -> List[RiskItem]:
    """Turn decoded records into validated items, rejecting duplicate ids."""
    if not isinstance(records, list):
        raise StorageError(f"Expected a list of items, got {type(records).__name__}")
    items: List[RiskItem] = []
    seen = set()
    for position, record in enumerate(records):
        try:
            item = ensure_valid(RiskItem.from_dict(record))
        except ValidationError as exc:
            raise StorageError(f"Item at position {position} is invalid: {exc.errors}")
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Item at position {position} is malformed: {exc}")
        if item.id in seen:
            raise StorageError(f"Duplicate item id {item.id!r}")
        seen.add(item.id)
        items.append(item)
    return items


def deserialize(payload: str) -> List[RiskItem]:
    try:
        records = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Stored collection is not valid JSON: {exc}")
    return items_from_records(records)
