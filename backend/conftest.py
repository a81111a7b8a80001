"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from decimal import Decimal

from core_backend.config import app_settings


# ============================================================================
# AUTO-USE FIXTURES (Run automatically for every test)
# ============================================================================

@pytest.fixture(autouse=True)
def reload_app_settings():
    """
    Reload RESTAURANT_FLOOR after each test.

    Tests that use override_settings would otherwise leak their values
    through the AppSettings singleton.
    """
    yield
    app_settings.reload()


# ============================================================================
# API CLIENT
# ============================================================================

@pytest.fixture
def api_client():
    """
    Unauthenticated DRF API client. The floor API has no authentication.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/tables/')
    """
    from rest_framework.test import APIClient
    return APIClient()


# ============================================================================
# FLOOR DATA
# ============================================================================

@pytest.fixture
def table(db):
    """An EMPTY four-seat table numbered 5."""
    from tables.models import Table
    return Table.objects.create(table_number="5", seats=4)


@pytest.fixture
def make_table(db):
    """
    Factory for extra tables.

    Usage:
        def test_two_tables(make_table):
            t1 = make_table("1")
            t2 = make_table("2", status="OCCUPIED")
    """
    from tables.models import Table

    def _make(table_number, seats=4, status=Table.TableStatus.EMPTY):
        return Table.objects.create(table_number=table_number, seats=seats, status=status)

    return _make


@pytest.fixture
def pad_thai(db):
    from menu.models import MenuItem
    return MenuItem.objects.create(
        name="Pad Thai",
        price=Decimal("60.00"),
        category=MenuItem.Category.MAIN,
        is_recommended=True,
    )


@pytest.fixture
def tom_yum(db):
    from menu.models import MenuItem
    return MenuItem.objects.create(
        name="Tom Yum",
        price=Decimal("85.00"),
        category=MenuItem.Category.MAIN,
    )


@pytest.fixture
def thai_tea(db):
    from menu.models import MenuItem
    return MenuItem.objects.create(
        name="Thai Tea",
        price=Decimal("35.00"),
        category=MenuItem.Category.DRINK,
    )


@pytest.fixture
def sold_out_item(db):
    from menu.models import MenuItem
    return MenuItem.objects.create(
        name="Mango Sticky Rice",
        price=Decimal("70.00"),
        category=MenuItem.Category.DESSERT,
        is_available=False,
    )


@pytest.fixture
def place_order(db):
    """
    Submits a round through OrderService.

    Usage:
        order = place_order(table, [(pad_thai, 2), (tom_yum, 1)])
    """
    from orders.services import OrderService

    def _place(table, items):
        builder = OrderService().new_session(table.id)
        for menu_item, quantity in items:
            builder.add_item(menu_item, quantity)
        return builder.submit()

    return _place
