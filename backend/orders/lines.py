"""
Order line value type.

Lines live inside Order.items as JSON. Name and price are snapshots taken
from the menu when the line was first added, so later menu edits never
change a submitted round.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Dict

from payments.money import line_amount, to_decimal


@dataclass(frozen=True)
class OrderLine:
    menu_item_id: int
    name: str
    price: Decimal
    quantity: int
    note: str = ""

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.quantity <= 0:
            raise ValueError(f"Line quantity must be positive, got {self.quantity}")

    @property
    def amount(self) -> Decimal:
        return line_amount(self.price, self.quantity)

    def with_quantity(self, quantity: int) -> "OrderLine":
        return replace(self, quantity=quantity)

    def with_note(self, note: str) -> "OrderLine":
        return replace(self, note=note or "")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menu_item_id": self.menu_item_id,
            "name": self.name,
            # Stored as a string so the JSON snapshot never goes through float
            "price": str(self.price),
            "quantity": self.quantity,
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderLine":
        return cls(
            menu_item_id=data["menu_item_id"],
            name=data["name"],
            price=to_decimal(data["price"]),
            quantity=int(data["quantity"]),
            note=data.get("note") or "",
        )

    @classmethod
    def from_menu_item(cls, menu_item, quantity: int = 1) -> "OrderLine":
        return cls(
            menu_item_id=menu_item.id,
            name=menu_item.name,
            price=to_decimal(menu_item.price),
            quantity=quantity,
        )
