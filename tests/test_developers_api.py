"""
HTTP level tests for the developer endpoints.
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from developer_api.app.main import create_app


def create(client, name, fav_lang):
    response = client.post("/developers", json={"name": name, "fav_lang": fav_lang})
    assert response.status_code == 200
    return response


class TestCreate:
    def test_create_returns_confirmation(self, client):
        response = create(client, "Ada", "Rust")
        assert response.json() == {"message": "Resource created"}
        assert response.headers["content-type"].startswith("application/json")

    def test_created_developer_is_listed(self, client):
        create(client, "Ada", "Rust")
        assert {"name": "Ada", "fav_lang": "Rust"} in client.get("/developers").json()

    def test_create_then_show_returns_same_fields(self, client):
        create(client, "Ada", "Rust")
        body = client.get("/developers/1").json()
        assert body["name"] == "Ada"
        assert body["fav_lang"] == "Rust"

    def test_form_encoded_body(self, client):
        response = client.post("/developers", data={"name": "Linus", "fav_lang": "C"})
        assert response.status_code == 200
        assert client.get("/developers/1").json()["fav_lang"] == "C"

    def test_missing_fields_are_stored_as_null(self, client):
        response = client.post("/developers", json={})
        assert response.status_code == 200
        body = client.get("/developers/1").json()
        assert body["name"] is None
        assert body["fav_lang"] is None

    def test_empty_request_is_accepted(self, client):
        assert client.post("/developers").status_code == 200
        assert client.get("/developers").json() == [{"name": None, "fav_lang": None}]

    def test_malformed_json_is_accepted(self, client):
        response = client.post(
            "/developers",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 200
        assert client.get("/developers/1").json()["name"] is None

    def test_non_string_values_are_stored_as_text(self, client):
        create(client, 42, "Python")
        assert client.get("/developers/1").json()["name"] == "42"

    def test_query_parameters_are_read(self, client):
        assert client.post("/developers?name=Ken&fav_lang=B").status_code == 200
        assert client.get("/developers/1").json()["name"] == "Ken"

    def test_duplicates_are_allowed(self, client):
        create(client, "Ada", "Rust")
        create(client, "Ada", "Rust")
        assert len(client.get("/developers").json()) == 2


class TestList:
    def test_empty(self, client):
        response = client.get("/developers")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_each_record_once_in_insertion_order(self, client):
        create(client, "Ada", "Rust")
        create(client, "Grace", "COBOL")
        create(client, "Alan", "Go")
        assert client.get("/developers").json() == [
            {"name": "Ada", "fav_lang": "Rust"},
            {"name": "Grace", "fav_lang": "COBOL"},
            {"name": "Alan", "fav_lang": "Go"},
        ]

    def test_items_expose_only_name_and_fav_lang(self, client):
        create(client, "Ada", "Rust")
        (item,) = client.get("/developers").json()
        assert set(item) == {"name", "fav_lang"}


class TestShow:
    def test_returns_full_record(self, client):
        create(client, "Ada", "Rust")
        response = client.get("/developers/1")
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "name", "fav_lang", "created_at", "updated_at"}
        assert body["id"] == 1
        assert body["created_at"]

    @pytest.mark.parametrize("developer_id", ["999", "abc", "0"])
    def test_unknown_id_is_404(self, client, developer_id):
        response = client.get(f"/developers/{developer_id}")
        assert response.status_code == 404
        assert response.json() == {"detail": "Developer not found"}

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    @pytest.mark.parametrize("developer_id", ["99999999999999999999", "-99999999999999999999"])
    def test_id_beyond_integer_range_is_404(self, client, method, developer_id):
        response = client.request(method.upper(), f"/developers/{developer_id}", json={"name": "X"})
        assert response.status_code == 404

    @pytest.mark.parametrize("developer_id", ["1_0", "+10", "010", "1e1"])
    def test_non_canonical_id_does_not_resolve(self, client, developer_id):
        for _ in range(10):
            create(client, "x", "y")
        assert client.get(f"/developers/{developer_id}").status_code == 404
        assert client.put(f"/developers/{developer_id}", json={"name": "Z"}).status_code == 404
        assert client.delete(f"/developers/{developer_id}").status_code == 404
        assert client.get("/developers/10").json()["name"] == "x"


class TestUpdate:
    def test_put_overwrites_fields(self, client):
        create(client, "Ada", "Rust")
        response = client.put("/developers/1", json={"name": "Grace", "fav_lang": "Go"})
        assert response.status_code == 200
        assert response.json() == {"message": "Resource updated"}
        body = client.get("/developers/1").json()
        assert (body["name"], body["fav_lang"]) == ("Grace", "Go")

    def test_patch_is_an_alias_for_put(self, client):
        create(client, "Ada", "Rust")
        response = client.patch("/developers/1", json={"name": "Grace", "fav_lang": "Go"})
        assert response.json() == {"message": "Resource updated"}
        assert client.get("/developers/1").json()["name"] == "Grace"

    def test_update_does_not_merge_missing_fields(self, client):
        create(client, "Ada", "Rust")
        client.patch("/developers/1", json={"name": "Grace"})
        body = client.get("/developers/1").json()
        assert body["name"] == "Grace"
        assert body["fav_lang"] is None

    def test_update_keeps_id_and_creation_time(self, client):
        create(client, "Ada", "Rust")
        before = client.get("/developers/1").json()
        client.put("/developers/1", json={"name": "Grace", "fav_lang": "Go"})
        after = client.get("/developers/1").json()
        assert after["id"] == before["id"]
        assert after["created_at"] == before["created_at"]

    def test_update_touches_only_target_record(self, client):
        create(client, "Ada", "Rust")
        create(client, "Alan", "Go")
        client.put("/developers/1", json={"name": "Grace", "fav_lang": "COBOL"})
        assert client.get("/developers/2").json()["name"] == "Alan"

    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_unknown_id_is_404(self, client, method):
        response = getattr(client, method)("/developers/7", json={"name": "X", "fav_lang": "Y"})
        assert response.status_code == 404
        assert client.get("/developers").json() == []


class TestDelete:
    def test_delete_then_show_is_404(self, client):
        create(client, "Ada", "Rust")
        response = client.delete("/developers/1")
        assert response.status_code == 200
        assert response.json() == {"message": "Resource deleted"}
        assert client.get("/developers/1").status_code == 404

    def test_delete_removes_from_list(self, client):
        create(client, "Ada", "Rust")
        create(client, "Alan", "Go")
        client.delete("/developers/1")
        assert client.get("/developers").json() == [{"name": "Alan", "fav_lang": "Go"}]

    def test_unknown_id_is_404(self, client):
        assert client.delete("/developers/1").status_code == 404

    def test_deleting_twice_is_404(self, client):
        create(client, "Ada", "Rust")
        client.delete("/developers/1")
        assert client.delete("/developers/1").status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_store_failure_is_500(client, db_path):
    conn = sqlite3.connect(db_path)
    conn.execute("DROP TABLE developers")
    conn.commit()
    conn.close()

    response = client.get("/developers")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


def test_api_prefix_moves_developers_but_not_health(repository):
    app = create_app(repository=repository, api_prefix="/api")
    with TestClient(app) as prefixed:
        assert prefixed.post("/api/developers", json={"name": "Ada", "fav_lang": "Rust"}).status_code == 200
        assert prefixed.get("/api/developers/1").json()["name"] == "Ada"
        assert prefixed.get("/developers").status_code == 404
        assert prefixed.get("/health").json() == {"status": "ok"}
        assert prefixed.get("/api/health").status_code == 404
