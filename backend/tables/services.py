"""
Table state machine.

States: EMPTY -> OCCUPIED -> (AWAITING_PAYMENT, staff-set) -> EMPTY.

- Order submission on an EMPTY table moves it to OCCUPIED; any other state stays.
- Settlement moves any state to EMPTY.
- Staff may set any state by hand. That escape hatch may leave outstanding
  orders behind an EMPTY table; it is logged and reported, never blocked.
"""
import logging
from typing import Dict, List, Optional

from core_backend.store import EntityStore

from .models import Table
from .signals import table_status_changed

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("table_number", "seats", "status")


class TableService:
    """Owns table occupancy status and staff table management."""

    def __init__(self, table_store: Optional[EntityStore] = None, order_store: Optional[EntityStore] = None):
        self.tables = table_store or EntityStore(Table)
        self._orders = order_store

    @property
    def orders(self) -> EntityStore:
        if self._orders is None:
            # Import here to avoid circular imports
            from orders.models import Order

            self._orders = EntityStore(Order)
        return self._orders

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_table(self, table_id) -> Table:
        return self.tables.get(table_id)

    def list_tables(self) -> List[Table]:
        return self.tables.list("table_number")

    def status_summary(self) -> Dict[str, int]:
        """Number of tables per status; every status is present."""
        summary = {choice: 0 for choice in Table.TableStatus.values}
        for table in self.tables.list():
            summary[table.status] = summary.get(table.status, 0) + 1
        return summary

    def outstanding_order_count(self, table_id) -> int:
        from orders.models import Order

        return len(self.orders.filter(table_id=table_id, status__ne=Order.OrderStatus.PAID))

    # ------------------------------------------------------------------
    # Staff table management
    # ------------------------------------------------------------------

    def create_table(self, table_number: str, seats: int = 4) -> Table:
        """Creates a new table. New tables always start EMPTY."""
        table_number = str(table_number).strip()
        if not table_number:
            raise ValueError("table_number is required")
        if int(seats) <= 0:
            raise ValueError("seats must be greater than zero")

        table = self.tables.create(
            table_number=table_number, seats=int(seats), status=Table.TableStatus.EMPTY
        )
        logger.info(f"Created table {table.table_number} (id={table.id}, seats={table.seats})")
        return table

    def update_table(self, table_id, **fields) -> int:
        """
        Edits table metadata. A ``status`` field is applied as a manual status
        override through set_status().

        Returns:
            int: number of outstanding orders orphaned by a manual EMPTY, else 0
        """
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot edit table fields: {sorted(unknown)}")

        new_status = fields.pop("status", None)
        if "seats" in fields and int(fields["seats"]) <= 0:
            raise ValueError("seats must be greater than zero")
        if "table_number" in fields:
            fields["table_number"] = str(fields["table_number"]).strip()
            if not fields["table_number"]:
                raise ValueError("table_number is required")

        if fields:
            self.tables.update(table_id, **fields)

        if new_status is not None:
            return self.set_status(table_id, new_status, manual=True)
        return 0

    def delete_table(self, table_id) -> None:
        """Deletes a table. Orders stay in place, addressable by table_id."""
        self.tables.delete(table_id)
        logger.info(f"Deleted table {table_id}")

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_status(self, table_id, new_status: str, manual: bool = False) -> int:
        """
        Writes a table status.

        Returns:
            int: outstanding orders left behind when a manual edit empties the
            table (0 otherwise). The edit is applied regardless.
        """
        if new_status not in Table.TableStatus.values:
            raise ValueError(f"'{new_status}' is not a valid table status.")

        table = self.tables.get(table_id)
        old_status = table.status

        orphaned = 0
        if manual and new_status == Table.TableStatus.EMPTY:
            orphaned = self.outstanding_order_count(table_id)
            if orphaned:
                logger.warning(
                    f"Table {table.table_number} set to EMPTY by hand with {orphaned} "
                    f"outstanding order(s); they stay unpaid until settled"
                )

        self.tables.update(table_id, status=new_status)
        table_status_changed.send(
            sender=self.__class__,
            table_id=table_id,
            old_status=old_status,
            new_status=new_status,
            manual=manual,
        )
        return orphaned

    def mark_occupied_if_empty(self, table_id) -> bool:
        """
        Order-submission transition: EMPTY -> OCCUPIED. Idempotent; OCCUPIED and
        AWAITING_PAYMENT tables are left alone.

        Returns:
            bool: True if the table was transitioned
        """
        table = self.tables.get(table_id)
        if table.status != Table.TableStatus.EMPTY:
            return False
        self.set_status(table_id, Table.TableStatus.OCCUPIED)
        return True

    def mark_empty(self, table_id) -> None:
        """Settlement transition: any state -> EMPTY."""
        self.set_status(table_id, Table.TableStatus.EMPTY)
