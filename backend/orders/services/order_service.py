import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from core_backend.exceptions import PersistenceError
from core_backend.store import EntityStore

from orders.calculators import OrderCalculator
from orders.exceptions import EmptyCartError, TableTransitionError
from orders.lines import OrderLine
from orders.models import Order
from orders.signals import order_submitted

logger = logging.getLogger(__name__)


class OrderService:
    """Creates rounds for a table and answers questions about them."""

    def __init__(
        self,
        order_store: Optional[EntityStore] = None,
        table_service=None,
        menu_service=None,
    ):
        self.orders = order_store or EntityStore(Order)
        self._table_service = table_service
        self._menu_service = menu_service

    @property
    def table_service(self):
        if self._table_service is None:
            # Import here to avoid circular imports
            from tables.services import TableService

            self._table_service = TableService(order_store=self.orders)
        return self._table_service

    @property
    def menu_service(self):
        if self._menu_service is None:
            from menu.services import MenuCatalogService

            self._menu_service = MenuCatalogService()
        return self._menu_service

    def new_session(self, table_id):
        """Opens a cart for the table. The table must exist."""
        from .builder import OrderBuilder

        self.table_service.get_table(table_id)
        return OrderBuilder(table_id, order_service=self)

    def submit(self, table_id, lines: Sequence[OrderLine]) -> Order:
        """
        Stores ``lines`` as a new PENDING round, then moves the table from
        EMPTY to OCCUPIED. Occupied tables keep their status.

        The table is only touched after the order write has succeeded.

        Raises:
            EmptyCartError: no lines (nothing is written)
            NotFoundError: unknown table (nothing is written)
            PersistenceError: the order could not be stored
            TableTransitionError: the order was stored but the table status write failed
        """
        if not lines:
            raise EmptyCartError(table_id)

        table = self.table_service.get_table(table_id)

        # Builders already keep one line per item; merge anyway for callers that don't.
        merged = OrderCalculator.merge_lines(lines)
        order = self.orders.create(
            table_id=table.id,
            table_number=table.table_number,
            items=[line.to_dict() for line in merged],
            total=OrderCalculator.lines_total(merged),
            status=Order.OrderStatus.PENDING,
        )
        logger.info(f"Created order {order.id} for table {table.table_number} (total {order.total})")

        try:
            self.table_service.mark_occupied_if_empty(table.id)
        except PersistenceError as e:
            logger.error(f"Order {order.id} stored but table {table.id} was not marked occupied: {e}")
            raise TableTransitionError(order) from e

        order_submitted.send(sender=self.__class__, order=order, table_id=table.id)
        return order

    def submit_lines(self, table_id, items: Iterable[Tuple[int, int, str]]) -> Order:
        """
        Builds a cart from (menu_item_id, quantity, note) triples using current
        catalog prices and submits it.
        """
        builder = self.new_session(table_id)
        for menu_item_id, quantity, note in items:
            menu_item = self.menu_service.get_item(menu_item_id)
            builder.add_item(menu_item, quantity)
            if note:
                builder.set_note(menu_item_id, note)
        return builder.submit()

    def get_order(self, order_id) -> Order:
        return self.orders.get(order_id)

    def outstanding_orders(self, table_id) -> List[Order]:
        """Unpaid rounds for the table, oldest first."""
        return self.orders.filter(
            sort_key="id",
            table_id=table_id,
            status__ne=Order.OrderStatus.PAID,
        )

    def rounds(self, table_id) -> List[Tuple[int, Order]]:
        """Outstanding rounds numbered from 1 in the order they were placed."""
        return list(enumerate(self.outstanding_orders(table_id), start=1))
