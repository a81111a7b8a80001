"""
Daily sales report built from settled orders.

aggregate_daily_sales() is a pure function of a date and a set of orders:
the same input always yields the same output, key order and list order
included. generate_daily_sales() only adds the store read in front of it.
"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from core_backend.config import app_settings
from core_backend.store import EntityStore
from orders.models import Order
from payments.money import ZERO, money_sum

from .timezone_utils import TimezoneUtils

logger = logging.getLogger(__name__)

PAYMENT_METHODS = tuple(Order.PaymentMethod.values)


class SalesReportService:
    """Service for generating daily sales reports."""

    def __init__(self, order_store: Optional[EntityStore] = None):
        self.orders = order_store or EntityStore(Order)

    def generate_daily_sales(self, report_date: date, top_limit: Optional[int] = None) -> Dict[str, Any]:
        """Reads every PAID order from the store and aggregates ``report_date``."""
        paid_orders = self.orders.filter(sort_key="paid_date", status=Order.OrderStatus.PAID)
        logger.info(f"Generating daily sales for {report_date} from {len(paid_orders)} paid order(s)")
        return self.aggregate_daily_sales(report_date, paid_orders, top_limit=top_limit)

    @staticmethod
    def aggregate_daily_sales(
        report_date: date,
        orders: Iterable[Order],
        tz=None,
        top_limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Summary statistics for one local calendar day.

        Returns:
            dict with date, timezone, total_revenue, order_count,
            by_payment_method, payment_method_counts, top_selling_items,
            hourly_revenue and orders
        """
        tz = tz or TimezoneUtils.get_local_timezone()
        if top_limit is None:
            top_limit = int(app_settings.top_selling_limit)

        day_orders = SalesReportService._filter_orders_for_day(report_date, orders, tz)

        report = {
            "date": report_date.isoformat(),
            "timezone": str(tz),
            "total_revenue": money_sum(order.total for order in day_orders),
            "order_count": len(day_orders),
        }
        report.update(SalesReportService._calculate_payment_breakdown(day_orders))
        report["top_selling_items"] = SalesReportService._calculate_top_selling_items(day_orders, top_limit)
        report["hourly_revenue"] = SalesReportService._calculate_hourly_revenue(day_orders, tz)
        report["orders"] = SalesReportService._summarize_orders(day_orders, tz)
        return report

    @staticmethod
    def _filter_orders_for_day(report_date: date, orders: Iterable[Order], tz) -> List[Order]:
        """PAID orders whose paid_date falls in [start of day, start of next day), by paid_date."""
        start, end = TimezoneUtils.day_bounds(report_date, tz)
        day_orders = [
            order
            for order in orders
            if order.status == Order.OrderStatus.PAID
            and order.paid_date is not None
            and start <= order.paid_date < end
        ]
        day_orders.sort(key=lambda order: (order.paid_date, order.id))
        return day_orders

    @staticmethod
    def _calculate_payment_breakdown(orders: List[Order]) -> Dict[str, Any]:
        """Revenue and order count per payment method. Unknown methods land in neither bucket."""
        amounts = {method: ZERO for method in PAYMENT_METHODS}
        counts = {method: 0 for method in PAYMENT_METHODS}
        for order in orders:
            if order.payment_method not in amounts:
                logger.warning(f"Order {order.id} has unrecognized payment method {order.payment_method!r}")
                continue
            amounts[order.payment_method] += order.total
            counts[order.payment_method] += 1
        return {"by_payment_method": amounts, "payment_method_counts": counts}

    @staticmethod
    def _calculate_top_selling_items(orders: List[Order], limit: int) -> List[Dict[str, Any]]:
        """
        Quantity and revenue per item name, highest revenue first. Items with
        equal revenue keep first-seen order.
        """
        stats: Dict[str, Dict[str, Any]] = {}
        for order in orders:
            for line in order.lines:
                entry = stats.setdefault(line.name, {"name": line.name, "quantity": 0, "revenue": ZERO})
                entry["quantity"] += line.quantity
                entry["revenue"] += line.amount
        ranked = sorted(stats.values(), key=lambda entry: entry["revenue"], reverse=True)
        return ranked[:limit]

    @staticmethod
    def _calculate_hourly_revenue(orders: List[Order], tz) -> List[Dict[str, Any]]:
        """Revenue and count per local hour of paid_date. Hours without sales are omitted."""
        buckets: Dict[int, Dict[str, Any]] = {}
        for order in orders:
            hour = TimezoneUtils.to_local(order.paid_date, tz).hour
            bucket = buckets.setdefault(hour, {"hour": hour, "amount": ZERO, "count": 0})
            bucket["amount"] += order.total
            bucket["count"] += 1
        return [buckets[hour] for hour in sorted(buckets)]

    @staticmethod
    def _summarize_orders(orders: List[Order], tz) -> List[Dict[str, Any]]:
        return [
            {
                "id": order.id,
                "table_number": order.table_number,
                "payment_method": order.payment_method,
                "paid_date": TimezoneUtils.to_local(order.paid_date, tz).isoformat(),
                "total": order.total,
                "items": [line.to_dict() for line in order.lines],
            }
            for order in orders
        ]
