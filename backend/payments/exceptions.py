"""
Settlement-specific exceptions.
"""
from core_backend.exceptions import FloorServiceError


class NoOutstandingOrdersError(FloorServiceError):
    """Raised when a table with nothing owed is settled."""

    def __init__(self, table_id, message=None):
        self.table_id = table_id
        if message is None:
            message = f"Table {table_id} has no outstanding orders to settle"
        super().__init__(message)
