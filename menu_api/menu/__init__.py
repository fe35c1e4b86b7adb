from menu_api.menu.models import Category, MenuItem, MenuItemCreate, MenuItemUpdate
from menu_api.menu.store import MenuStore

__all__ = [
    "Category",
    "MenuItem",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuStore",
]
