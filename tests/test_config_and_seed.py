from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from menu_api.core.config import Settings
from menu_api.main import build_store, create_app
from menu_api.menu.seed import DEFAULT_MENU, load_menu


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MENU_API_PORT", raising=False)

    config = Settings(_env_file=None)

    assert config.port == 3000
    assert config.seed_path is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MENU_API_PORT", "8080")
    monkeypatch.setenv("MENU_API_LOG_LEVEL", "debug")

    config = Settings(_env_file=None)

    assert config.port == 8080
    assert config.log_level == "debug"


def test_default_store_uses_builtin_seed() -> None:
    store = build_store(Settings(_env_file=None))

    assert len(store) == len(DEFAULT_MENU)
    assert store.next_id == 7


def _write_seed(tmp_path: Path, items: list[dict[str, object]]) -> Path:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(items), encoding="utf-8")
    return path


def test_seed_file_replaces_builtin_menu(tmp_path: Path) -> None:
    path = _write_seed(
        tmp_path,
        [
            {
                "id": 10,
                "name": "Iced Tea",
                "description": "Black tea served over ice with lemon",
                "price": 2.5,
                "category": "beverage",
                "ingredients": ["tea", "ice", "lemon"],
            }
        ],
    )
    app = create_app(Settings(_env_file=None, seed_path=path))
    client = TestClient(app)

    data = client.get("/api/menu").json()
    assert [item["id"] for item in data] == [10]
    assert "available" not in data[0]
    assert client.post(
        "/api/menu",
        json={
            "name": "Lemon Tart",
            "description": "Shortcrust pastry with lemon curd",
            "price": 5,
            "category": "dessert",
            "ingredients": ["flour", "lemon", "butter"],
            "available": True,
        },
    ).json()["id"] == 11


def test_seed_file_rejects_invalid_items(tmp_path: Path) -> None:
    path = _write_seed(tmp_path, [{"id": 1, "name": "ab"}])

    with pytest.raises(ValidationError):
        load_menu(path)


def test_seed_file_rejects_duplicate_ids(tmp_path: Path) -> None:
    item = dict(DEFAULT_MENU[0])
    path = _write_seed(tmp_path, [item, item])

    with pytest.raises(ValueError, match="Duplicate"):
        load_menu(path)
