from django.dispatch import Signal, receiver
import logging

logger = logging.getLogger(__name__)

# Sent after a round has been persisted and the table updated.
# kwargs: order, table_id
order_submitted = Signal()


@receiver(order_submitted)
def log_order_submitted(sender, order=None, table_id=None, **kwargs):
    if order is not None:
        logger.info(
            f"Order {order.id} submitted for table {order.table_number} "
            f"({len(order.items)} line(s), total {order.total})"
        )
