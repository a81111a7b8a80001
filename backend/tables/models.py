from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Table(models.Model):
    """
    A physical table on the floor.

    ``status`` is owned by tables.services.TableService: order submission
    moves EMPTY -> OCCUPIED, settlement moves any state -> EMPTY, and staff
    may set any state by hand.
    """

    class TableStatus(models.TextChoices):
        EMPTY = "EMPTY", _("Empty")
        OCCUPIED = "OCCUPIED", _("Occupied")
        AWAITING_PAYMENT = "AWAITING_PAYMENT", _("Awaiting Payment")

    table_number = models.CharField(max_length=20, db_index=True)
    seats = models.PositiveIntegerField(
        default=4,
        validators=[MinValueValidator(1)],
        help_text=_("Number of seats, at least one"),
    )
    status = models.CharField(
        max_length=20,
        choices=TableStatus.choices,
        default=TableStatus.EMPTY,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Table")
        verbose_name_plural = _("Tables")
        ordering = ["table_number"]

    def __str__(self):
        return f"Table {self.table_number} ({self.get_status_display()})"

    @property
    def is_empty(self) -> bool:
        return self.status == self.TableStatus.EMPTY
