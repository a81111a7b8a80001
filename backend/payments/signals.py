from django.dispatch import Signal, receiver
import logging

logger = logging.getLogger(__name__)

# Sent once every outstanding order is PAID and the table is EMPTY.
# kwargs: table_id, orders, payment_method, grand_total
order_settled = Signal()


@receiver(order_settled)
def log_order_settled(sender, table_id=None, orders=None, payment_method=None, grand_total=None, **kwargs):
    logger.info(
        f"Table {table_id} settled: {len(orders or [])} order(s), "
        f"{grand_total} by {payment_method}"
    )
