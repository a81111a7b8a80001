"""
Orders services package.

- OrderService: creates rounds for a table and lists outstanding ones
- OrderBuilder: the per-session cart that produces a round on submit
"""

from .order_service import OrderService
from .builder import OrderBuilder

__all__ = [
    'OrderService',
    'OrderBuilder',
]
