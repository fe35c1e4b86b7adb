"""
Field rules for menu item write payloads.

Every rule is a pure predicate paired with the message reported when it fails.
All rules of a rule set run against the payload so the client gets every
problem at once, in rule order.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog
from pydantic import ValidationError

from menu_api.core.errors import MenuValidationError
from menu_api.menu.models import Category, MenuItemCreate, MenuItemUpdate

logger = structlog.get_logger(__name__)

PayloadT = TypeVar("PayloadT", MenuItemCreate, MenuItemUpdate)

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"

CATEGORY_VALUES = frozenset(category.value for category in Category)

# Plain decimal or exponent notation; no whitespace, underscores or inf/nan.
DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True)
class Rule:
    field: str
    check: Callable[[Any], bool]
    message: str
    optional: bool = False


def _min_length(length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= length

    return check


def to_price(value: Any) -> float | None:
    """Return ``value`` as a finite float, or None when it is not a price."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    if isinstance(value, str) and not DECIMAL_RE.fullmatch(value):
        return None
    try:
        price = float(value)
    except (ValueError, OverflowError):
        return None
    return price if math.isfinite(price) else None


def _is_positive_number(value: Any) -> bool:
    price = to_price(value)
    return price is not None and price > 0


def _is_category(value: Any) -> bool:
    return isinstance(value, str) and value in CATEGORY_VALUES


def _is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) >= 1


def _is_text_list(value: Any) -> bool:
    # An empty or non-list value is reported by the array rule.
    if not isinstance(value, list):
        return True
    return all(isinstance(entry, str) for entry in value)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


CREATE_RULES: tuple[Rule, ...] = (
    Rule("name", _min_length(3), "Name must be at least 3 characters long"),
    Rule("description", _min_length(10), "Description must be at least 10 characters long"),
    Rule("price", _is_positive_number, "Price must be greater than 0"),
    Rule(
        "category",
        _is_category,
        "Category must be appetizer, entree, dessert, or beverage",
    ),
    Rule(
        "ingredients",
        _is_non_empty_list,
        "Ingredients must be an array with at least one item",
    ),
    Rule("ingredients", _is_text_list, "Ingredients must only contain text values"),
    Rule("available", _is_boolean, "Available must be true or false", optional=True),
)

UPDATE_RULES: tuple[Rule, ...] = tuple(
    Rule(rule.field, rule.check, rule.message, optional=True) for rule in CREATE_RULES
)


def collect_errors(payload: Any, rules: tuple[Rule, ...]) -> list[str]:
    if not isinstance(payload, dict):
        return [NOT_AN_OBJECT_MESSAGE]

    messages: list[str] = []
    for rule in rules:
        if rule.field not in payload:
            if rule.optional:
                continue
            messages.append(rule.message)
            continue
        if not rule.check(payload[rule.field]):
            messages.append(rule.message)
    return messages


def _raise_if_invalid(payload: Any, rules: tuple[Rule, ...]) -> None:
    messages = collect_errors(payload, rules)
    if messages:
        logger.info("menu_validation_failed", messages=messages)
        raise MenuValidationError(messages)


def _build(model: type[PayloadT], payload: dict[str, Any]) -> PayloadT:
    data = dict(payload)
    if "price" in data:
        data["price"] = to_price(data["price"])
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        messages = [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()]
        logger.warning("menu_payload_rejected", messages=messages)
        raise MenuValidationError(messages) from exc


def validate_create(payload: Any) -> MenuItemCreate:
    _raise_if_invalid(payload, CREATE_RULES)
    return _build(MenuItemCreate, payload)


def validate_update(payload: Any) -> MenuItemUpdate:
    _raise_if_invalid(payload, UPDATE_RULES)
    return _build(MenuItemUpdate, payload)
