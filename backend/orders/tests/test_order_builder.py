"""
Order Builder Tests

The cart is a plain in-memory object, so most of these run without a
database. Menu items are stand-ins carrying only what the cart reads.
"""
import random
from decimal import Decimal
from types import SimpleNamespace

import pytest

from orders.exceptions import MenuItemUnavailableError
from orders.lines import OrderLine
from orders.services import OrderBuilder


def menu_item(item_id, name, price, is_available=True):
    return SimpleNamespace(id=item_id, name=name, price=Decimal(price), is_available=is_available)


PAD_THAI = menu_item(1, "Pad Thai", "60.00")
TOM_YUM = menu_item(2, "Tom Yum", "85.00")
THAI_TEA = menu_item(3, "Thai Tea", "35.50")


class TestOrderBuilderEditing:

    def test_adding_same_item_merges_lines(self):
        builder = OrderBuilder(table_id=1)

        builder.add_item(PAD_THAI)
        builder.add_item(PAD_THAI, 2)

        assert builder.lines == (OrderLine(1, "Pad Thai", Decimal("60.00"), 3),)

    def test_lines_keep_insertion_order(self):
        builder = OrderBuilder(table_id=1)

        builder.add_item(TOM_YUM)
        builder.add_item(PAD_THAI)
        builder.add_item(TOM_YUM)

        assert [line.menu_item_id for line in builder.lines] == [2, 1]

    def test_price_is_snapshot_at_first_add(self):
        builder = OrderBuilder(table_id=1)
        item = menu_item(9, "Som Tam", "45.00")

        builder.add_item(item)
        item.price = Decimal("55.00")
        builder.add_item(item)

        assert builder.lines[0].price == Decimal("45.00")
        assert builder.total() == Decimal("90.00")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_rejects_non_positive_quantity(self, quantity):
        builder = OrderBuilder(table_id=1)

        with pytest.raises(ValueError):
            builder.add_item(PAD_THAI, quantity)

        assert builder.is_empty

    def test_add_rejects_unavailable_item(self):
        builder = OrderBuilder(table_id=1)

        with pytest.raises(MenuItemUnavailableError):
            builder.add_item(menu_item(4, "Mango Sticky Rice", "70.00", is_available=False))

        assert builder.is_empty

    def test_change_quantity_to_zero_removes_line(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI, 2)

        assert builder.change_quantity(PAD_THAI.id, -1).quantity == 1
        assert builder.change_quantity(PAD_THAI.id, -1) is None
        assert builder.is_empty

    def test_change_quantity_of_missing_item_is_noop(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI)

        assert builder.change_quantity(TOM_YUM.id, 3) is None
        assert len(builder.lines) == 1

    def test_remove_item_drops_whole_line(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI, 5)
        builder.add_item(TOM_YUM)

        builder.remove_item(PAD_THAI.id)

        assert [line.menu_item_id for line in builder.lines] == [TOM_YUM.id]

    def test_set_note(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI)

        builder.set_note(PAD_THAI.id, "no peanuts")

        assert builder.lines[0].note == "no peanuts"

    def test_set_note_on_missing_item_fails(self):
        with pytest.raises(ValueError):
            OrderBuilder(table_id=1).set_note(PAD_THAI.id, "spicy")

    def test_totals(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI, 2)
        builder.add_item(THAI_TEA, 3)

        assert builder.total() == Decimal("226.50")
        assert builder.item_count() == 5

    def test_cancel_discards_lines(self):
        builder = OrderBuilder(table_id=1)
        builder.add_item(PAD_THAI)

        builder.cancel()

        assert builder.is_empty
        assert builder.total() == Decimal("0")


class TestOrderBuilderInvariants:
    """Random edit sequences must never break the cart's invariants."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_edit_sequence(self, seed):
        rng = random.Random(seed)
        items = [PAD_THAI, TOM_YUM, THAI_TEA]
        builder = OrderBuilder(table_id=1)

        for _ in range(60):
            item = rng.choice(items)
            op = rng.choice(["add", "remove", "change"])
            if op == "add":
                builder.add_item(item, rng.randint(1, 3))
            elif op == "remove":
                builder.remove_item(item.id)
            else:
                builder.change_quantity(item.id, rng.randint(-3, 3))

            ids = [line.menu_item_id for line in builder.lines]
            assert len(ids) == len(set(ids))
            assert all(line.quantity > 0 for line in builder.lines)
            assert builder.total() == sum(
                (line.price * line.quantity for line in builder.lines), Decimal("0")
            )


class TestOrderLine:

    def test_rejects_non_positive_quantity(self):
        with pytest.raises(ValueError):
            OrderLine(1, "Pad Thai", Decimal("60"), 0)

    def test_snapshot_stores_price_as_string(self):
        line = OrderLine(1, "Pad Thai", Decimal("60.00"), 2, "no egg")

        assert line.to_dict() == {
            "menu_item_id": 1,
            "name": "Pad Thai",
            "price": "60.00",
            "quantity": 2,
            "note": "no egg",
        }
        assert OrderLine.from_dict(line.to_dict()) == line

    def test_float_price_is_coerced_exactly(self):
        line = OrderLine(1, "Thai Tea", 0.1, 3)

        assert line.price == Decimal("0.1")
        assert line.amount == Decimal("0.3")
