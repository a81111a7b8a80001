from django.dispatch import Signal, receiver
import logging

logger = logging.getLogger(__name__)

# Sent by TableService after every status write.
# kwargs: table_id, old_status, new_status, manual
table_status_changed = Signal()


@receiver(table_status_changed)
def log_table_status_change(sender, table_id=None, old_status=None, new_status=None, manual=False, **kwargs):
    """Audit trail for table transitions."""
    source = "manual edit" if manual else "order flow"
    logger.info(f"Table {table_id}: {old_status} -> {new_status} ({source})")
