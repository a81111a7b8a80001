"""
Shared error types for the floor services and the DRF exception handler
that turns them into API responses.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class FloorServiceError(Exception):
    """Base exception for floor domain errors."""
    pass


class NotFoundError(FloorServiceError):
    """Raised when a Table, MenuItem or Order id is unknown to the store."""

    def __init__(self, entity, entity_id, message=None):
        self.entity = entity
        self.entity_id = entity_id
        if message is None:
            message = f"{entity} '{entity_id}' not found"
        super().__init__(message)


class PersistenceError(FloorServiceError):
    """Raised when the underlying store fails to read or write."""
    pass


# Error kind -> HTTP status. Checked in order, so subclasses go first.
def _status_for(exc):
    from orders.exceptions import EmptyCartError, MenuItemUnavailableError
    from payments.exceptions import NoOutstandingOrdersError

    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, PersistenceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(exc, (EmptyCartError, MenuItemUnavailableError, NoOutstandingOrdersError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, FloorServiceError):
        return status.HTTP_400_BAD_REQUEST
    return None


def floor_exception_handler(exc, context):
    """
    DRF exception handler that maps floor domain errors to responses.

    Anything that is not a floor error (or a plain ValueError raised by a
    service) is left to DRF's default handler.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ValueError) and not isinstance(exc, FloorServiceError):
        logger.info(f"Rejected request: {exc}")
        return Response(
            {"error": "ValueError", "detail": str(exc)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    status_code = _status_for(exc)
    if status_code is None:
        return None

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"
    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} in {view_name}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {view_name}: {exc}")

    return Response(
        {"error": exc.__class__.__name__, "detail": str(exc)},
        status=status_code,
    )
