"""
Order-specific exceptions.
"""
from core_backend.exceptions import FloorServiceError, PersistenceError


class EmptyCartError(FloorServiceError):
    """Raised when a cart with no lines is submitted."""

    def __init__(self, table_id=None, message=None):
        self.table_id = table_id
        if message is None:
            message = "Cannot submit an empty order"
        super().__init__(message)


class MenuItemUnavailableError(FloorServiceError):
    """Raised when an unavailable menu item is added to a cart."""

    def __init__(self, menu_item, message=None):
        self.menu_item = menu_item
        if message is None:
            message = f"'{menu_item.name}' is not available"
        super().__init__(message)


class TableTransitionError(PersistenceError):
    """
    Raised when a round was saved but the table could not be moved to
    OCCUPIED. The saved order is attached so callers do not submit it twice.
    """

    def __init__(self, order, message=None):
        self.order = order
        if message is None:
            message = f"Order {order.id} saved but table {order.table_id} status was not updated"
        super().__init__(message)
