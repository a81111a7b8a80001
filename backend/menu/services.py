import logging
from typing import List, Optional

from core_backend.store import EntityStore

from .models import MenuItem

logger = logging.getLogger(__name__)


class MenuCatalogService:
    """Read-only access to the menu for the ordering screens."""

    def __init__(self, menu_store: Optional[EntityStore] = None):
        self.items = menu_store or EntityStore(MenuItem)

    @staticmethod
    def _validate_category(category: Optional[str]) -> None:
        if category is not None and category not in MenuItem.Category.values:
            raise ValueError(f"'{category}' is not a valid menu category.")

    def get_item(self, menu_item_id) -> MenuItem:
        return self.items.get(menu_item_id)

    @staticmethod
    def _matching(items: List[MenuItem], search: str) -> List[MenuItem]:
        needle = (search or "").strip().lower()
        if not needle:
            return items
        return [item for item in items if needle in item.name.lower()]

    def list_items(self, category: Optional[str] = None, search: str = "") -> List[MenuItem]:
        """Every menu item, available or not, optionally limited to one category."""
        self._validate_category(category)
        if category is None:
            items = self.items.list("name")
        else:
            items = self.items.filter(sort_key="name", category=category)
        return self._matching(items, search)

    def orderable_items(self, category: Optional[str] = None, search: str = "") -> List[MenuItem]:
        """
        Items that can be added to a cart: available, in ``category`` if given,
        and whose name contains ``search`` (case-insensitive).
        """
        self._validate_category(category)
        predicates = {"is_available": True}
        if category is not None:
            predicates["category"] = category
        return self._matching(self.items.filter(sort_key="name", **predicates), search)

    def recommended_items(self) -> List[MenuItem]:
        return self.items.filter(sort_key="name", is_available=True, is_recommended=True)
