from __future__ import annotations

from collections.abc import Sequence


class MenuItemNotFoundError(LookupError):
    def __init__(self, item_id: int | str) -> None:
        super().__init__(f"Menu item {item_id} not found")
        self.item_id = item_id


class MenuValidationError(ValueError):
    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class MalformedBodyError(ValueError):
    pass
