from __future__ import annotations

import threading
from collections.abc import Iterable

import structlog

from menu_api.core.errors import MenuItemNotFoundError
from menu_api.menu.models import MenuItem, MenuItemCreate, MenuItemUpdate

logger = structlog.get_logger(__name__)


class MenuStore:
    """In-memory menu items in insertion order plus the id counter.

    Ids are handed out from ``next_id`` and never reused, even after the
    item holding one is deleted. Items are returned as copies.
    """

    def __init__(self, items: Iterable[MenuItem] = (), next_id: int | None = None) -> None:
        self._items: list[MenuItem] = [item.model_copy(deep=True) for item in items]
        highest = max((item.id for item in self._items), default=0)
        if next_id is None:
            next_id = highest + 1
        if next_id <= highest:
            raise ValueError(f"next_id {next_id} must be greater than existing id {highest}")
        self._next_id = next_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def list(self) -> list[MenuItem]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items]

    def get(self, item_id: int) -> MenuItem:
        with self._lock:
            return self._items[self._index_of(item_id)].model_copy(deep=True)

    def create(self, payload: MenuItemCreate) -> MenuItem:
        with self._lock:
            item = MenuItem(id=self._next_id, **payload.model_dump(exclude_unset=True))
            self._next_id += 1
            self._items.append(item)
        logger.info("menu_item_created", item_id=item.id)
        return item.model_copy(deep=True)

    def update(self, item_id: int, payload: MenuItemUpdate) -> MenuItem:
        changes = payload.present_fields()
        with self._lock:
            index = self._index_of(item_id)
            current = self._items[index]
            updated = MenuItem.model_validate(
                {**current.model_dump(), **changes, "id": current.id}
            )
            self._items[index] = updated
        logger.info("menu_item_updated", item_id=item_id, fields=sorted(changes))
        return updated.model_copy(deep=True)

    def delete(self, item_id: int) -> MenuItem:
        with self._lock:
            removed = self._items.pop(self._index_of(item_id))
        logger.info("menu_item_deleted", item_id=item_id)
        return removed

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise MenuItemNotFoundError(item_id)
