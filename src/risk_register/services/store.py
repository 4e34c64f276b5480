import logging
from typing import Callable, List, Optional

from risk_register.config import AppConfig
from risk_register.models import RiskItem, advance_status, ensure_valid
from risk_register.services.seed import load_seed
from risk_register.services.storage import SlotStorage, deserialize, serialize
from risk_register.utils.errors import ItemNotFoundError, StorageError

logger = logging.getLogger(__name__)


class CollectionStore:
    """Owns the session's ordered collection and mirrors it to a storage slot.

    Items are only ever replaced in place: ``upsert`` never appends and nothing
    is deleted. ``version`` increases on every successful mutation so callers
    caching derived views know when to recompute.
    """

    def __init__(
        self,
        storage: SlotStorage,
        config: AppConfig,
        seed_loader: Optional[Callable[[str], List[RiskItem]]] = None,
    ):
        self.storage = storage
        self.config = config
        self.seed_loader = seed_loader or load_seed
        self._items: List[RiskItem] = []
        self.version = 0

    @property
    def items(self) -> List[RiskItem]:
        return list(self._items)

    def _seed(self) -> List[RiskItem]:
        return self.seed_loader(self.config.seed_path)

    def load(self) -> List[RiskItem]:
        slot = self.config.storage_slot
        payload = self.storage.read(slot)
        if payload is None:
            logger.info("No saved collection, using seed", extra={"slot": slot})
            items = self._seed()
        else:
            try:
                items = deserialize(payload)
            except StorageError as exc:
                logger.error(
                    "Saved collection unreadable, using seed",
                    extra={"slot": slot, "error": str(exc)},
                    exc_info=True,
                )
                items = self._seed()
        self._items = items
        self.version = 0
        return self.items

    def get(self, item_id: str) -> Optional[RiskItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def upsert(self, item: RiskItem) -> List[RiskItem]:
        ensure_valid(item)
        position = next((i for i, existing in enumerate(self._items) if existing.is_same_item(item)), None)
        if position is None:
            logger.warning("Upsert for unknown item ignored", extra={"item_id": item.id})
            return self.items
        updated = list(self._items)
        updated[position] = item
        # Persist before swapping so a failed write leaves the session untouched.
        self.storage.write(self.config.storage_slot, serialize(updated))
        self._items = updated
        self.version += 1
        logger.info("Item updated", extra={"item_id": item.id, "version": self.version})
        return self.items

    def advance_status(self, item_id: str) -> RiskItem:
        current = self.get(item_id)
        if current is None:
            raise ItemNotFoundError(f"Item {item_id} not found")
        advanced = advance_status(current)
        self.upsert(advanced)
        return advanced
