import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from orders.calculators import OrderCalculator
from orders.exceptions import MenuItemUnavailableError, TableTransitionError
from orders.lines import OrderLine

logger = logging.getLogger(__name__)


class OrderBuilder:
    """
    The cart for one ordering session at one table.

    Lifecycle: created when staff open the table's order screen, discarded on
    submit() or cancel(). Each session is its own object; nothing is shared
    between sessions or terminals.

    Invariants: at most one line per menu_item_id, and every line has a
    positive quantity.
    """

    def __init__(self, table_id, order_service=None):
        self.table_id = table_id
        self._order_service = order_service
        self._lines: List[OrderLine] = []

    @property
    def order_service(self):
        if self._order_service is None:
            from .order_service import OrderService

            self._order_service = OrderService()
        return self._order_service

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @property
    def lines(self) -> Tuple[OrderLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def _index_of(self, menu_item_id) -> Optional[int]:
        for index, line in enumerate(self._lines):
            if line.menu_item_id == menu_item_id:
                return index
        return None

    def total(self) -> Decimal:
        return OrderCalculator.lines_total(self._lines)

    def item_count(self) -> int:
        return OrderCalculator.item_count(self._lines)

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def add_item(self, menu_item, quantity: int = 1) -> OrderLine:
        """
        Adds ``quantity`` of a menu item. An existing line for the item gets its
        quantity raised; otherwise a new line is appended with the item's
        current name and price.
        """
        if quantity <= 0:
            raise ValueError(f"Quantity to add must be positive, got {quantity}")
        if not menu_item.is_available:
            raise MenuItemUnavailableError(menu_item)

        index = self._index_of(menu_item.id)
        if index is None:
            line = OrderLine.from_menu_item(menu_item, quantity)
            self._lines.append(line)
        else:
            line = self._lines[index].with_quantity(self._lines[index].quantity + quantity)
            self._lines[index] = line
        return line

    def remove_item(self, menu_item_id) -> None:
        """Drops the line for menu_item_id whatever its quantity."""
        self._lines = [line for line in self._lines if line.menu_item_id != menu_item_id]

    def change_quantity(self, menu_item_id, delta: int) -> Optional[OrderLine]:
        """
        Shifts a line's quantity by ``delta``. A line that reaches zero or below
        is removed and None is returned.
        """
        index = self._index_of(menu_item_id)
        if index is None:
            return None

        new_quantity = self._lines[index].quantity + delta
        if new_quantity <= 0:
            del self._lines[index]
            return None

        line = self._lines[index].with_quantity(new_quantity)
        self._lines[index] = line
        return line

    def set_note(self, menu_item_id, note: str) -> OrderLine:
        index = self._index_of(menu_item_id)
        if index is None:
            raise ValueError(f"Menu item {menu_item_id} is not in the cart")
        line = self._lines[index].with_note(note)
        self._lines[index] = line
        return line

    def clear(self) -> None:
        self._lines = []

    def cancel(self) -> None:
        """Discards the session without submitting."""
        if self._lines:
            logger.info(f"Cart for table {self.table_id} cancelled with {len(self._lines)} line(s)")
        self.clear()

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def submit(self):
        """
        Persists the cart as a new PENDING round for the table.

        The cart is cleared once the order is stored. On EmptyCartError or a
        failed order write it is left untouched so the submit can be retried.
        """
        try:
            order = self.order_service.submit(self.table_id, self._lines)
        except TableTransitionError:
            # The round itself is stored; keeping the lines would duplicate it.
            self.clear()
            raise
        self.clear()
        return order
