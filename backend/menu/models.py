from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class MenuItem(models.Model):
    """
    An orderable dish or drink. Read-only to the ordering flow: orders copy
    name and price into their own lines at submission time.
    """

    class Category(models.TextChoices):
        MAIN = "MAIN", _("Main Dish")
        SNACK = "SNACK", _("Snack")
        DESSERT = "DESSERT", _("Dessert")
        DRINK = "DRINK", _("Drink")

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=Category.MAIN,
        db_index=True,
    )
    image_url = models.URLField(max_length=500, blank=True, default="")
    is_recommended = models.BooleanField(default=False)
    is_available = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Menu Item")
        verbose_name_plural = _("Menu Items")
        ordering = ["category", "name"]

    def __str__(self):
        return f"{self.name} ({self.price})"
