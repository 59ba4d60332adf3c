"""
HTTP tests for /api/v1/apparels
"""
from decimal import Decimal
from unittest.mock import patch

from sqlalchemy import text

from apparel_store.models import Apparel
from apparel_store.repositories import ApparelRepository

BASE_URL = "/api/v1/apparels"


def seed_apparels(db_session, count, name="Tee", style="Regular"):
    for i in range(count):
        db_session.add(Apparel(
            apparel_name=f"{name} {i:02d}",
            apparel_style=style,
            upc=f"UPC{i:03d}",
            quantity_on_hand=i,
            price=Decimal("9.99"),
        ))
    db_session.commit()


class TestCreateAndRead:
    """Test POST and GET by id"""

    def test_create_returns_201_with_new_id(self, client, sample_apparel_data):
        response = client.post(BASE_URL, json={**sample_apparel_data, "id": 999})

        assert response.status_code == 201
        body = response.json()
        assert body["id"] != 999
        assert body["apparelName"] == "Test Apparel"
        assert body["quantityOnHand"] == 10
        assert body["price"] == 11.99
        assert body["version"] == 1
        assert body["createdDate"] is not None

    def test_get_by_id(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()

        response = client.get(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["apparelStyle"] == "IPA"

    def test_get_missing_returns_404_with_empty_body(self, client):
        response = client.get(f"{BASE_URL}/999")

        assert response.status_code == 404
        assert response.content == b""

    def test_create_with_invalid_fields_returns_validation_problem(self, client, sample_apparel_data):
        body = {**sample_apparel_data, "apparelName": "  ", "price": 0, "quantityOnHand": -1}

        response = client.post(BASE_URL, json=body)

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        problem = response.json()
        assert problem["type"].endswith("/validation-error")
        assert problem["title"] == "Validation Error"
        assert problem["instance"] == BASE_URL
        assert set(problem["extensions"]) == {"apparelName", "price", "quantityOnHand"}


class TestUpdate:
    """Test PUT and PATCH"""

    def test_put_replaces_fields(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()
        update = {**sample_apparel_data, "apparelName": "Renamed", "description": None}

        response = client.put(f"{BASE_URL}/{created['id']}", json=update)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["apparelName"] == "Renamed"
        assert body["description"] is None

    def test_put_missing_returns_404(self, client, sample_apparel_data):
        response = client.put(f"{BASE_URL}/999", json=sample_apparel_data)

        assert response.status_code == 404
        assert response.content == b""

    def test_put_with_stale_version_returns_409(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()
        first = client.put(f"{BASE_URL}/{created['id']}", json={**sample_apparel_data, "version": 1, "upc": "A"})
        assert first.status_code == 200
        assert first.json()["version"] == 2

        response = client.put(f"{BASE_URL}/{created['id']}", json={**sample_apparel_data, "version": 1, "upc": "B"})

        assert response.status_code == 409
        problem = response.json()
        assert problem["type"].endswith("/conflict")
        assert problem["status"] == 409
        assert client.get(f"{BASE_URL}/{created['id']}").json()["upc"] == "A"

    def test_patch_of_row_changed_by_another_writer_returns_409(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()
        find_by_id = ApparelRepository.find_by_id

        def find_then_bump(repository, apparel_id):
            apparel = find_by_id(repository, apparel_id)
            assert apparel.version == 1
            repository.db.execute(
                text("UPDATE apparel SET version = version + 1 WHERE id = :id"), {"id": apparel_id}
            )
            return apparel

        with patch.object(ApparelRepository, "find_by_id", find_then_bump):
            response = client.patch(f"{BASE_URL}/{created['id']}", json={"price": 15.99})

        assert response.status_code == 409
        assert response.headers["content-type"].startswith("application/problem+json")
        problem = response.json()
        assert problem["type"].endswith("/conflict")
        assert problem["title"] == "Concurrency Conflict"
        assert problem["status"] == 409
        assert str(created["id"]) in problem["detail"]

        unchanged = client.get(f"{BASE_URL}/{created['id']}").json()
        assert unchanged["price"] == 11.99
        assert unchanged["version"] == 1

    def test_patch_changes_only_price(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()

        response = client.patch(f"{BASE_URL}/{created['id']}", json={"price": 15.99})

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 15.99
        assert body["apparelName"] == "Test Apparel"
        assert body["apparelStyle"] == "IPA"
        assert body["description"] == "A test apparel"

    def test_patch_missing_returns_404(self, client):
        response = client.patch(f"{BASE_URL}/999", json={"price": 1.5})

        assert response.status_code == 404

    def test_id_beyond_integer_range_is_a_validation_problem(self, client, sample_apparel_data):
        oversized = "99999999999999999999"

        for response in (
            client.get(f"{BASE_URL}/{oversized}"),
            client.put(f"{BASE_URL}/{oversized}", json=sample_apparel_data),
            client.delete(f"{BASE_URL}/{oversized}"),
        ):
            assert response.status_code == 400
            problem = response.json()
            assert problem["type"].endswith("/validation-error")
            assert "apparel_id" in problem["extensions"]

    def test_largest_integer_id_is_accepted(self, client):
        assert client.get(f"{BASE_URL}/{2**31 - 1}").status_code == 404


class TestDelete:
    """Test DELETE"""

    def test_delete_returns_204_then_404(self, client, sample_apparel_data):
        created = client.post(BASE_URL, json=sample_apparel_data).json()

        assert client.delete(f"{BASE_URL}/{created['id']}").status_code == 204
        assert client.get(f"{BASE_URL}/{created['id']}").status_code == 404
        assert client.delete(f"{BASE_URL}/{created['id']}").status_code == 404


class TestList:
    """Test filtered, paginated listing"""

    def test_pagination_envelope(self, client, db_session):
        seed_apparels(db_session, 25)

        pages = [client.get(BASE_URL, params={"page": page, "size": 10}).json() for page in range(3)]

        assert [page["numberOfElements"] for page in pages] == [10, 10, 5]
        assert [page["number"] for page in pages] == [0, 1, 2]
        assert all(page["totalElements"] == 25 for page in pages)
        assert all(page["totalPages"] == 3 for page in pages)
        assert pages[0]["first"] is True
        assert pages[2]["last"] is True
        assert pages[1]["first"] is False and pages[1]["last"] is False

    def test_default_page_size(self, client, db_session):
        seed_apparels(db_session, 25)

        body = client.get(BASE_URL).json()

        assert body["size"] == 20
        assert len(body["content"]) == 20

    def test_filters_are_case_insensitive_and_combined(self, client, db_session):
        seed_apparels(db_session, 2, name="Denim Jacket", style="Loose")
        seed_apparels(db_session, 3, name="Denim Shorts", style="Slim")
        seed_apparels(db_session, 4, name="Chino", style="Slim")

        assert client.get(BASE_URL, params={"apparelName": "DENIM"}).json()["totalElements"] == 5
        assert client.get(BASE_URL, params={"apparelStyle": "slim"}).json()["totalElements"] == 7
        assert client.get(BASE_URL, params={"apparelName": "denim", "apparelStyle": "SLIM"}).json()["totalElements"] == 3
        assert client.get(BASE_URL, params={"apparelName": "", "apparelStyle": ""}).json()["totalElements"] == 9

    def test_empty_result(self, client):
        body = client.get(BASE_URL, params={"apparelName": "nothing"}).json()

        assert body["content"] == []
        assert body["empty"] is True
        assert body["totalPages"] == 0

    def test_invalid_page_parameters(self, client):
        response = client.get(BASE_URL, params={"page": -1, "size": 0})

        assert response.status_code == 400
        assert set(response.json()["extensions"]) == {"page", "size"}
