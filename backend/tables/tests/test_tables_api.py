"""
Tables API Integration Tests

Run with: pytest backend/tables/tests/test_tables_api.py -v
"""
import pytest
from rest_framework import status

from tables.models import Table


@pytest.mark.django_db
class TestTablesAPI:

    def test_list_tables(self, api_client, make_table):
        make_table("2")
        make_table("1")

        response = api_client.get("/api/tables/")

        assert response.status_code == status.HTTP_200_OK
        assert [t["table_number"] for t in response.data] == ["1", "2"]

    def test_filter_tables_by_status(self, api_client, make_table):
        make_table("1")
        make_table("2", status=Table.TableStatus.OCCUPIED)

        response = api_client.get("/api/tables/", {"status": "OCCUPIED"})

        assert [t["table_number"] for t in response.data] == ["2"]

    def test_create_table_ignores_status(self, api_client):
        response = api_client.post(
            "/api/tables/",
            {"table_number": "9", "seats": 2, "status": "OCCUPIED"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["status"] == "EMPTY"
        assert response.data["seats"] == 2

    def test_create_table_with_zero_seats_fails(self, api_client):
        response = api_client.post("/api/tables/", {"table_number": "9", "seats": 0}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "seats" in response.data

    def test_patch_status_with_orders_returns_warning(self, api_client, table, pad_thai, place_order):
        place_order(table, [(pad_thai, 2)])

        response = api_client.patch(f"/api/tables/{table.id}/", {"status": "EMPTY"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "EMPTY"
        assert response.data["orphaned_orders"] == 1
        assert "warning" in response.data

    def test_patch_invalid_status_fails(self, api_client, table):
        response = api_client.patch(f"/api/tables/{table.id}/", {"status": "CLOSED"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_unknown_table_returns_404(self, api_client):
        response = api_client.patch("/api/tables/424242/", {"seats": 3}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "NotFoundError"

    def test_delete_table(self, api_client, table):
        response = api_client.delete(f"/api/tables/{table.id}/")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Table.objects.filter(pk=table.id).exists()

    def test_summary(self, api_client, make_table):
        make_table("1")
        make_table("2", status=Table.TableStatus.AWAITING_PAYMENT)

        response = api_client.get("/api/tables/summary/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"EMPTY": 1, "OCCUPIED": 0, "AWAITING_PAYMENT": 1}

    def test_rounds_are_numbered_in_order(self, api_client, table, pad_thai, tom_yum, place_order):
        first = place_order(table, [(pad_thai, 1)])
        second = place_order(table, [(tom_yum, 1)])

        response = api_client.get(f"/api/tables/{table.id}/rounds/")

        assert response.status_code == status.HTTP_200_OK
        assert [(r["round"], r["order"]["id"]) for r in response.data] == [(1, first.id), (2, second.id)]

    def test_rounds_for_unknown_table_returns_404(self, api_client):
        response = api_client.get("/api/tables/424242/rounds/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
