from datetime import date

from fastapi.testclient import TestClient

from book_store_api.app.core.store import BookStore
from book_store_api.app.main import create_app


def test_list_seeded_books(client):
    response = client.get("/books")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 3
    assert [book["id"] for book in body["data"]] == [1, 2, 3]
    assert body["data"][1] == {
        "id": 2,
        "title": "1984",
        "author": "George Orwell",
        "year": 1949,
        "genre": "Dystopian Fiction",
    }


def test_get_book(client):
    response = client.get("/books/3")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"id": 3, "title": "Pride and Prejudice", "author": "Jane Austen", "year": 1813, "genre": "Romance"},
    }


def test_get_missing_book(client):
    response = client.get("/books/42")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Book not found"}


def test_get_non_numeric_id_is_not_found(client):
    response = client.get("/books/abc")
    assert response.status_code == 404
    assert response.json()["message"] == "Book not found"


def test_create_book_normalizes_fields(client):
    response = client.post("/books", json={"title": "  Dune ", "author": " Frank Herbert  ", "genre": " Sci-Fi "})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Book created successfully"
    assert body["data"] == {"id": 4, "title": "Dune", "author": "Frank Herbert", "year": None, "genre": "Sci-Fi"}

    fetched = client.get("/books/4").json()["data"]
    assert fetched == body["data"]


def test_created_ids_strictly_increase(client):
    ids = []
    for n in range(3):
        response = client.post("/books", json={"title": f"T{n}", "author": "A"})
        assert response.status_code == 201
        ids.append(response.json()["data"]["id"])
    assert ids == [4, 5, 6]


def test_failed_create_does_not_consume_id(client):
    response = client.post("/books", json={"title": "", "author": "X"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation errors"
    assert any("Title" in error for error in body["errors"])

    created = client.post("/books", json={"title": "T", "author": "A"})
    assert created.json()["data"]["id"] == 4


def test_create_collects_all_errors(client):
    response = client.post("/books", json={"title": 5, "year": "soon"})
    assert response.status_code == 400
    assert len(response.json()["errors"]) == 3


def test_create_rejects_future_year(client):
    response = client.post("/books", json={"title": "T", "author": "A", "year": 3000})
    assert response.status_code == 400

    response = client.post("/books", json={"title": "T", "author": "A", "year": date.today().year})
    assert response.status_code == 201


def test_create_keeps_zero_year(client):
    response = client.post("/books", json={"title": "T", "author": "A", "year": 0})
    assert response.status_code == 201
    assert response.json()["data"]["year"] == 0


def test_create_without_body(client):
    response = client.post("/books")
    assert response.status_code == 400
    assert len(response.json()["errors"]) == 2


def test_create_with_non_object_body(client):
    response = client.post("/books", json=["title", "author"])
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation errors"
    assert body["errors"]


def test_create_with_malformed_json(client):
    response = client.post("/books", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"] == ["JSON decode error"]


def test_put_replaces_all_fields(client):
    response = client.put("/books/1", json={"title": "New", "author": "Auth"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Book updated successfully"
    assert body["data"] == {"id": 1, "title": "New", "author": "Auth", "year": None, "genre": None}
    assert [book["id"] for book in client.get("/books").json()["data"]] == [1, 2, 3]


def test_put_missing_book_checked_before_validation(client):
    response = client.put("/books/99", json={})
    assert response.status_code == 404
    assert response.json()["message"] == "Book not found"


def test_put_invalid_payload_leaves_book_untouched(client):
    response = client.put("/books/1", json={"title": "New", "author": "  "})
    assert response.status_code == 400
    assert client.get("/books/1").json()["data"]["author"] == "Harper Lee"


def test_patch_genre_only(client):
    response = client.patch("/books/2", json={"genre": "Noir"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data == {"id": 2, "title": "1984", "author": "George Orwell", "year": 1949, "genre": "Noir"}


def test_patch_trims_supplied_fields(client):
    response = client.patch("/books/1", json={"title": "  Go Set a Watchman  ", "genre": ""})
    data = response.json()["data"]
    assert data["title"] == "Go Set a Watchman"
    assert data["genre"] is None
    assert data["year"] == 1960


def test_patch_explicit_null_title_rejected(client):
    response = client.patch("/books/1", json={"title": None})
    assert response.status_code == 400
    assert client.get("/books/1").json()["data"]["title"] == "To Kill a Mockingbird"


def test_patch_can_clear_year(client):
    response = client.patch("/books/3", json={"year": None})
    assert response.status_code == 200
    assert response.json()["data"]["year"] is None


def test_patch_invalid_year(client):
    response = client.patch("/books/3", json={"year": 3000})
    assert response.status_code == 400
    assert client.get("/books/3").json()["data"]["year"] == 1813


def test_patch_missing_book(client):
    response = client.patch("/books/99", json={"genre": "Noir"})
    assert response.status_code == 404


def test_delete_then_get(client):
    response = client.delete("/books/2")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Book deleted successfully"
    assert body["data"]["title"] == "1984"

    assert client.get("/books/2").status_code == 404
    assert client.delete("/books/2").status_code == 404
    assert client.get("/books").json()["count"] == 2


def test_deleted_id_not_reused(client):
    created = client.post("/books", json={"title": "T", "author": "A"}).json()["data"]
    client.delete(f"/books/{created['id']}")
    again = client.post("/books", json={"title": "T", "author": "A"}).json()["data"]
    assert again["id"] == created["id"] + 1


def test_unknown_route(client):
    response = client.get("/nonexistent-route")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def test_unsupported_method_is_route_not_found(client):
    response = client.post("/books/1", json={"title": "T", "author": "A"})
    assert response.status_code == 404
    assert response.json()["message"] == "Route not found"


class ExplodingStore(BookStore):
    def list(self):
        raise RuntimeError("disk on fire")


def test_unexpected_error_returns_generic_500():
    client = TestClient(create_app(store=ExplodingStore()), raise_server_exceptions=False)
    response = client.get("/books")
    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "message": "Something went wrong!"}
    assert "disk on fire" not in response.text


def test_apps_do_not_share_state():
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.delete("/books/1")
    assert second.get("/books").json()["count"] == 3



def test_non_string_genre_is_not_stored(client):
    response = client.post("/books", json={"title": "T", "author": "A", "genre": ["x"]})
    assert response.status_code == 201
    assert response.json()["data"]["genre"] is None

    response = client.patch("/books/1", json={"genre": 42})
    assert response.json()["data"]["genre"] is None


def test_trailing_slash_list_and_create(client):
    response = client.get("/books/", follow_redirects=False)
    assert response.status_code == 200
    assert response.json()["count"] == 3

    response = client.post("/books/", json={"title": "T", "author": "A"}, follow_redirects=False)
    assert response.status_code == 201
    assert response.json()["data"]["id"] == 4


def test_trailing_slash_item_routes(client):
    response = client.get("/books/1/", follow_redirects=False)
    assert response.status_code == 200
    assert response.json()["data"]["id"] == 1

    response = client.put("/books/1/", json={"title": "New", "author": "Auth"}, follow_redirects=False)
    assert response.status_code == 200

    response = client.patch("/books/1/", json={"genre": "Noir"}, follow_redirects=False)
    assert response.json()["data"]["genre"] == "Noir"

    response = client.delete("/books/1/", follow_redirects=False)
    assert response.status_code == 200
    assert client.get("/books/1/").status_code == 404


def test_trailing_slash_unknown_route_is_json(client):
    response = client.get("/nonexistent-route/", follow_redirects=False)
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}
