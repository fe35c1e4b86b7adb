from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from menu_api.main import create_app
from menu_api.menu.seed import default_menu
from menu_api.menu.store import MenuStore

VEGGIE_WRAP = {
    "name": "Veggie Wrap",
    "description": "Fresh vegetables wrapped in a tortilla",
    "price": 6.5,
    "category": "entree",
    "ingredients": ["tortilla", "lettuce"],
}


@pytest.fixture()
def store() -> MenuStore:
    return MenuStore(default_menu())


@pytest.fixture()
def app(store: MenuStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def veggie_wrap() -> dict[str, object]:
    return dict(VEGGIE_WRAP)
