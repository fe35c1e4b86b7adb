from __future__ import annotations

import json
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request

from menu_api.core.errors import MalformedBodyError, MenuItemNotFoundError
from menu_api.menu.models import MenuItem, MenuItemCreate, MenuItemUpdate
from menu_api.menu.store import MenuStore
from menu_api.menu.validation import validate_create, validate_update

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/menu", tags=["menu"])


def get_menu_store(request: Request) -> MenuStore:
    return request.app.state.menu_store


async def json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        payload: Any = {}
    else:
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise MalformedBodyError(str(exc)) from exc
    logger.info("request_body", body=payload)
    return payload


async def create_payload(payload: Any = Depends(json_body)) -> MenuItemCreate:
    return validate_create(payload)


async def update_payload(payload: Any = Depends(json_body)) -> MenuItemUpdate:
    return validate_update(payload)


def _parse_item_id(raw_id: str) -> int:
    try:
        return int(raw_id, 10)
    except ValueError:
        raise MenuItemNotFoundError(raw_id) from None


@router.get("", response_model=list[MenuItem], response_model_exclude_none=True)
async def list_menu_items(store: MenuStore = Depends(get_menu_store)) -> list[MenuItem]:
    return store.list()


@router.get("/{item_id}", response_model=MenuItem, response_model_exclude_none=True)
async def get_menu_item(item_id: str, store: MenuStore = Depends(get_menu_store)) -> MenuItem:
    return store.get(_parse_item_id(item_id))


@router.post(
    "",
    response_model=MenuItem,
    response_model_exclude_none=True,
    status_code=201,
)
async def create_menu_item(
    payload: MenuItemCreate = Depends(create_payload),
    store: MenuStore = Depends(get_menu_store),
) -> MenuItem:
    return store.create(payload)


@router.put("/{item_id}", response_model=MenuItem, response_model_exclude_none=True)
async def update_menu_item(
    item_id: str,
    payload: MenuItemUpdate = Depends(update_payload),
    store: MenuStore = Depends(get_menu_store),
) -> MenuItem:
    return store.update(_parse_item_id(item_id), payload)


@router.delete("/{item_id}", response_model=MenuItem, response_model_exclude_none=True)
async def delete_menu_item(item_id: str, store: MenuStore = Depends(get_menu_store)) -> MenuItem:
    return store.delete(_parse_item_id(item_id))
