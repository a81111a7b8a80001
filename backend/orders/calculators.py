"""
Order line calculators shared by the cart builder, order creation and billing.

Usage:
    from orders.calculators import OrderCalculator
    total = OrderCalculator.lines_total(builder.lines)
    merged = OrderCalculator.merge_lines(line for order in orders for line in order.lines)
"""

from decimal import Decimal
from typing import Dict, Iterable, List

from payments.money import money_sum

from .lines import OrderLine


class OrderCalculator:
    """Pure functions over sequences of OrderLine."""

    @staticmethod
    def lines_total(lines: Iterable[OrderLine]) -> Decimal:
        """Sum of price x quantity. Always recomputed, never cached."""
        return money_sum(line.amount for line in lines)

    @staticmethod
    def item_count(lines: Iterable[OrderLine]) -> int:
        return sum(line.quantity for line in lines)

    @staticmethod
    def merge_lines(lines: Iterable[OrderLine]) -> List[OrderLine]:
        """
        Collapse lines that share a menu_item_id, summing quantities.

        Output keeps first-seen order. Name, price and note come from the first
        occurrence; a later line with a different snapshot price is folded in at
        the first price.
        """
        merged: Dict[int, OrderLine] = {}
        for line in lines:
            existing = merged.get(line.menu_item_id)
            if existing is None:
                merged[line.menu_item_id] = line
            else:
                merged[line.menu_item_id] = existing.with_quantity(existing.quantity + line.quantity)
        return list(merged.values())
