"""
Table State Machine Tests

Test Categories:
1. Staff table management (create, edit, delete, summary)
2. Order-flow transitions (EMPTY -> OCCUPIED, any -> EMPTY)
3. Manual status overrides and orphaned orders
4. Status change notifications
"""
import pytest

from core_backend.exceptions import NotFoundError
from orders.models import Order
from tables.models import Table
from tables.services import TableService
from tables.signals import table_status_changed


@pytest.fixture
def status_events():
    """Collects table_status_changed payloads for the duration of a test."""
    events = []

    def _collect(sender, **kwargs):
        events.append(kwargs)

    table_status_changed.connect(_collect, weak=False)
    yield events
    table_status_changed.disconnect(_collect)


# ============================================================================
# TABLE MANAGEMENT
# ============================================================================

@pytest.mark.django_db
class TestTableManagement:

    def test_new_table_starts_empty(self):
        table = TableService().create_table("12", seats=6)

        assert table.status == Table.TableStatus.EMPTY
        assert table.seats == 6
        assert table.table_number == "12"

    def test_create_table_strips_number(self):
        table = TableService().create_table("  3 ")

        assert table.table_number == "3"
        assert table.seats == 4

    @pytest.mark.parametrize("seats", [0, -2])
    def test_create_table_rejects_non_positive_seats(self, seats):
        with pytest.raises(ValueError):
            TableService().create_table("1", seats=seats)

        assert Table.objects.count() == 0

    def test_create_table_requires_number(self):
        with pytest.raises(ValueError):
            TableService().create_table("   ")

    def test_list_tables_sorted_by_number(self, make_table):
        make_table("C")
        make_table("A")
        make_table("B")

        assert [t.table_number for t in TableService().list_tables()] == ["A", "B", "C"]

    def test_update_table_edits_metadata(self, table):
        orphaned = TableService().update_table(table.id, table_number="5A", seats=2)

        table.refresh_from_db()
        assert orphaned == 0
        assert table.table_number == "5A"
        assert table.seats == 2
        assert table.status == Table.TableStatus.EMPTY

    def test_update_table_rejects_unknown_fields(self, table):
        with pytest.raises(ValueError):
            TableService().update_table(table.id, colour="red")

    def test_update_table_rejects_zero_seats(self, table):
        with pytest.raises(ValueError):
            TableService().update_table(table.id, seats=0)

        table.refresh_from_db()
        assert table.seats == 4

    def test_delete_table_keeps_its_orders(self, table, pad_thai, place_order):
        order = place_order(table, [(pad_thai, 1)])

        TableService().delete_table(table.id)

        assert not Table.objects.filter(pk=table.id).exists()
        order.refresh_from_db()
        assert order.table_id == table.id
        assert order.status == Order.OrderStatus.PENDING

    def test_delete_unknown_table_raises_not_found(self):
        with pytest.raises(NotFoundError):
            TableService().delete_table(424242)

    def test_status_summary_has_every_status(self, make_table):
        make_table("1")
        make_table("2", status=Table.TableStatus.OCCUPIED)
        make_table("3", status=Table.TableStatus.OCCUPIED)

        summary = TableService().status_summary()

        assert summary == {"EMPTY": 1, "OCCUPIED": 2, "AWAITING_PAYMENT": 0}


# ============================================================================
# ORDER-FLOW TRANSITIONS
# ============================================================================

@pytest.mark.django_db
class TestOrderFlowTransitions:

    def test_empty_table_becomes_occupied(self, table):
        changed = TableService().mark_occupied_if_empty(table.id)

        table.refresh_from_db()
        assert changed is True
        assert table.status == Table.TableStatus.OCCUPIED

    def test_occupied_table_stays_occupied(self, make_table, status_events):
        table = make_table("8", status=Table.TableStatus.OCCUPIED)

        changed = TableService().mark_occupied_if_empty(table.id)

        table.refresh_from_db()
        assert changed is False
        assert table.status == Table.TableStatus.OCCUPIED
        assert status_events == []

    def test_awaiting_payment_is_not_reverted_by_new_order(self, make_table):
        table = make_table("8", status=Table.TableStatus.AWAITING_PAYMENT)

        TableService().mark_occupied_if_empty(table.id)

        table.refresh_from_db()
        assert table.status == Table.TableStatus.AWAITING_PAYMENT

    @pytest.mark.parametrize("start", list(Table.TableStatus.values))
    def test_mark_empty_from_any_state(self, make_table, start):
        table = make_table("8", status=start)

        TableService().mark_empty(table.id)

        table.refresh_from_db()
        assert table.status == Table.TableStatus.EMPTY

    def test_unknown_table_raises_not_found(self):
        with pytest.raises(NotFoundError):
            TableService().mark_occupied_if_empty(424242)


# ============================================================================
# MANUAL OVERRIDES
# ============================================================================

@pytest.mark.django_db
class TestManualStatusOverride:

    def test_invalid_status_is_rejected(self, table):
        with pytest.raises(ValueError):
            TableService().set_status(table.id, "CLOSED", manual=True)

        table.refresh_from_db()
        assert table.status == Table.TableStatus.EMPTY

    def test_staff_can_set_awaiting_payment(self, table):
        orphaned = TableService().set_status(table.id, Table.TableStatus.AWAITING_PAYMENT, manual=True)

        table.refresh_from_db()
        assert orphaned == 0
        assert table.status == Table.TableStatus.AWAITING_PAYMENT

    def test_manual_empty_reports_orphaned_orders(self, table, pad_thai, tom_yum, place_order, caplog):
        place_order(table, [(pad_thai, 1)])
        place_order(table, [(tom_yum, 2)])

        orphaned = TableService().set_status(table.id, Table.TableStatus.EMPTY, manual=True)

        table.refresh_from_db()
        assert orphaned == 2
        assert table.status == Table.TableStatus.EMPTY
        assert Order.objects.filter(table_id=table.id, status=Order.OrderStatus.PENDING).count() == 2
        assert "outstanding order(s)" in caplog.text

    def test_manual_empty_without_orders_reports_nothing(self, make_table):
        table = make_table("8", status=Table.TableStatus.OCCUPIED)

        assert TableService().set_status(table.id, Table.TableStatus.EMPTY, manual=True) == 0

    def test_update_table_status_goes_through_manual_override(self, table, pad_thai, place_order):
        place_order(table, [(pad_thai, 1)])

        orphaned = TableService().update_table(table.id, status=Table.TableStatus.EMPTY)

        assert orphaned == 1


# ============================================================================
# NOTIFICATIONS
# ============================================================================

@pytest.mark.django_db
class TestStatusNotifications:

    def test_status_write_sends_signal(self, table, status_events):
        TableService().mark_occupied_if_empty(table.id)

        assert status_events == [{
            "signal": table_status_changed,
            "table_id": table.id,
            "old_status": Table.TableStatus.EMPTY,
            "new_status": Table.TableStatus.OCCUPIED,
            "manual": False,
        }]

    def test_manual_write_is_flagged(self, table, status_events):
        TableService().set_status(table.id, Table.TableStatus.AWAITING_PAYMENT, manual=True)

        assert status_events[-1]["manual"] is True
