"""
Settlement: turning a table's outstanding rounds into one bill and one payment.

The store offers no multi-document transaction, so settle() pays orders one
at a time and frees the table only after every update went through. A failed
settle can simply be retried: it re-reads what is still outstanding, and
orders already marked PAID are never touched again.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from django.utils import timezone

from core_backend.exceptions import FloorServiceError
from core_backend.store import EntityStore
from orders.calculators import OrderCalculator
from orders.lines import OrderLine
from orders.models import Order

from .exceptions import NoOutstandingOrdersError
from .money import money_sum
from .signals import order_settled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bill:
    """Everything a table owes right now, merged for the receipt."""

    table_id: int
    table_number: str
    rounds: Tuple[Order, ...]
    lines: Tuple[OrderLine, ...]
    grand_total: Decimal

    @property
    def item_count(self) -> int:
        return OrderCalculator.item_count(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.rounds


@dataclass(frozen=True)
class SettlementResult:
    bill: Bill
    payment_method: str
    paid_date: datetime
    paid_order_ids: Tuple[int, ...]


class SettlementService:
    """Computes bills and settles tables."""

    def __init__(self, order_store: Optional[EntityStore] = None, table_service=None):
        self.orders = order_store or EntityStore(Order)
        self._table_service = table_service

    @property
    def table_service(self):
        if self._table_service is None:
            from tables.services import TableService

            self._table_service = TableService(order_store=self.orders)
        return self._table_service

    def get_outstanding(self, table_id) -> List[Order]:
        """Orders for the table that are not PAID, in the order they were placed."""
        return self.orders.filter(
            sort_key="id",
            table_id=table_id,
            status__ne=Order.OrderStatus.PAID,
        )

    def compute_bill(self, table_id) -> Bill:
        """
        Merges every outstanding round into one bill.

        Lines are grouped per menu item with summed quantities (first-seen name
        and price win). The grand total is the sum of the stored order totals,
        not a re-pricing of the merged lines.
        """
        table = self.table_service.get_table(table_id)
        outstanding = self.get_outstanding(table.id)

        lines = OrderCalculator.merge_lines(
            line for order in outstanding for line in order.lines
        )
        return Bill(
            table_id=table.id,
            table_number=table.table_number,
            rounds=tuple(outstanding),
            lines=tuple(lines),
            grand_total=money_sum(order.total for order in outstanding),
        )

    def receipt(self, table_id, printed_at: Optional[datetime] = None) -> str:
        """Text receipt for the current bill. Read-only; works before payment."""
        from .receipts import render_receipt

        return render_receipt(self.compute_bill(table_id), printed_at=printed_at)

    def settle(self, table_id, payment_method: str) -> SettlementResult:
        """
        Marks every outstanding order PAID with ``payment_method`` and one shared
        paid_date, then sets the table EMPTY.

        Raises:
            ValueError: unknown payment method (nothing is written)
            NotFoundError: unknown table (nothing is written)
            NoOutstandingOrdersError: nothing to pay (nothing is written)
            PersistenceError: an order update failed; orders paid before the
                failure stay PAID and the table keeps its status
        """
        if payment_method not in Order.PaymentMethod.values:
            raise ValueError(f"'{payment_method}' is not a valid payment method.")

        bill = self.compute_bill(table_id)
        if bill.is_empty:
            raise NoOutstandingOrdersError(table_id)

        paid_date = timezone.now()
        paid_ids = []
        for order in bill.rounds:
            try:
                self.orders.update(
                    order.id,
                    status=Order.OrderStatus.PAID,
                    payment_method=payment_method,
                    paid_date=paid_date,
                )
            except FloorServiceError as e:
                logger.error(
                    f"Settlement of table {bill.table_number} stopped at order {order.id}: "
                    f"{len(paid_ids)} of {len(bill.rounds)} order(s) already paid; "
                    f"table left as is. Retry settles the rest. ({e})"
                )
                raise
            order.status = Order.OrderStatus.PAID
            order.payment_method = payment_method
            order.paid_date = paid_date
            paid_ids.append(order.id)

        self.table_service.mark_empty(bill.table_id)

        logger.info(
            f"Settled table {bill.table_number}: {len(paid_ids)} order(s), "
            f"total {bill.grand_total}, method {payment_method}"
        )
        order_settled.send(
            sender=self.__class__,
            table_id=bill.table_id,
            orders=list(bill.rounds),
            payment_method=payment_method,
            grand_total=bill.grand_total,
        )
        return SettlementResult(
            bill=bill,
            payment_method=payment_method,
            paid_date=paid_date,
            paid_order_ids=tuple(paid_ids),
        )
