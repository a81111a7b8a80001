from decimal import Decimal
from typing import List

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.translation import gettext_lazy as _

from .lines import OrderLine


class Order(models.Model):
    """
    One round of ordering at a table.

    Created PENDING when a cart is submitted; the settlement flow is the only
    writer afterwards (status -> PAID plus payment_method and paid_date).
    PAID orders are permanent sales records and are never deleted.

    ``table_id`` is a plain column rather than a foreign key: deleting a table
    leaves its orders in place, still addressable by the old id.
    """

    class OrderStatus(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        PAID = "PAID", _("Paid")

    class PaymentMethod(models.TextChoices):
        CASH = "CASH", _("Cash")
        TRANSFER = "TRANSFER", _("Transfer")

    table_id = models.BigIntegerField(db_index=True)
    table_number = models.CharField(
        max_length=20, help_text=_("Table number at the time the order was placed")
    )
    items = models.JSONField(
        default=list,
        encoder=DjangoJSONEncoder,
        help_text=_("Snapshot order lines: menu_item_id, name, price, quantity, note"),
    )
    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Sum of price x quantity over items"),
    )
    status = models.CharField(
        max_length=10,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
    )
    payment_method = models.CharField(
        max_length=10,
        choices=PaymentMethod.choices,
        null=True,
        blank=True,
    )
    paid_date = models.DateTimeField(null=True, blank=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        # Creation order is round order on the bill.
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["table_id", "status"], name="order_table_status_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} - Table {self.table_number} ({self.status})"

    @property
    def lines(self) -> List[OrderLine]:
        return [OrderLine.from_dict(item) for item in self.items or []]

    @property
    def is_paid(self) -> bool:
        return self.status == self.OrderStatus.PAID

    def calculate_total(self) -> Decimal:
        from .calculators import OrderCalculator

        return OrderCalculator.lines_total(self.lines)
