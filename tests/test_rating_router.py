from bson import ObjectId
from pymongo.errors import AutoReconnect, OperationFailure, ServerSelectionTimeoutError, WriteError


def test_list_empty(client):
    response = client.get("/ratings")
    assert response.status_code == 200
    assert response.json() == []


def test_rating_lifecycle(client):
    response = client.post("/ratings", json={"name": "Alice", "review": "Great", "rating": 8})
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Alice"
    assert created["review"] == "Great"
    assert created["rating"] == 8
    assert created["picture"] == ""
    assert created["createdAt"]
    assert "_id" not in created
    rating_id = created["id"]

    response = client.get("/ratings")
    assert response.status_code == 200
    assert response.json()[0] == created

    response = client.put(f"/ratings/{rating_id}", json={"rating": 10})
    assert response.status_code == 200
    assert response.json()["rating"] == 10
    assert response.json()["name"] == "Alice"

    response = client.delete(f"/ratings/{rating_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Rating deleted successfully"}

    response = client.put(f"/ratings/{rating_id}", json={"rating": 1})
    assert response.status_code == 404
    assert response.json() == {"error": "Rating not found"}


def test_create_returns_validator_message(client, collection):
    response = client.post("/ratings", json={"name": "Alice", "rating": 8})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required field: review"}

    response = client.post("/ratings", json={"name": "Alice", "review": "Great", "rating": -1})
    assert response.status_code == 400
    assert response.json() == {"error": "Rating must be between 0 and 10"}
    assert collection.documents == {}


def test_create_accepts_inclusive_bounds(client):
    for score in (0, 10):
        response = client.post("/ratings", json={"name": "Edge", "review": "Case", "rating": score})
        assert response.status_code == 201
        assert response.json()["rating"] == score


def test_create_round_trip_trims_text(client):
    body = {"name": "  Bob  ", "review": " Solid ", "rating": 7.5, "picture": "https://example.com/bob.png"}
    created = client.post("/ratings", json=body).json()

    listed = client.get("/ratings").json()
    assert listed == [created]
    assert created["name"] == "Bob"
    assert created["review"] == "Solid"
    assert created["rating"] == 7.5
    assert created["picture"] == "https://example.com/bob.png"


def test_create_store_validation_error(client):
    response = client.post(
        "/ratings",
        json={"name": "Bob", "review": "Solid", "rating": 5, "createdAt": "yesterday-ish"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"
    assert response.json()["details"]


def test_create_server_side_validation_failure(client, collection):
    collection.fail_with = WriteError("Document failed validation", code=121)
    response = client.post("/ratings", json={"name": "Bob", "review": "Solid", "rating": 5})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_store_failures_are_500(client, collection):
    collection.fail_with = ServerSelectionTimeoutError("no servers")

    response = client.get("/ratings")
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch ratings"
    assert "no servers" in response.json()["details"]

    response = client.post("/ratings", json={"name": "Bob", "review": "Solid", "rating": 5})
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to create rating"

    rating_id = str(ObjectId())
    assert client.put(f"/ratings/{rating_id}", json={"rating": 3}).status_code == 500
    assert client.delete(f"/ratings/{rating_id}").status_code == 500


def test_update_partial_fields(client):
    created = client.post(
        "/ratings", json={"name": "Alice", "review": "Great", "rating": 8, "picture": "pic"}
    ).json()

    updated = client.put(f"/ratings/{created['id']}", json={"rating": 5}).json()

    assert updated == {**created, "rating": 5}


def test_update_invalid_field_is_400(client):
    created = client.post("/ratings", json={"name": "Alice", "review": "Great", "rating": 8}).json()

    response = client.put(f"/ratings/{created['id']}", json={"rating": 42})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_unknown_and_malformed_ids_are_404(client):
    client.post("/ratings", json={"name": "Alice", "review": "Great", "rating": 8})

    for rating_id in (str(ObjectId()), "12345", "not-an-object-id"):
        assert client.put(f"/ratings/{rating_id}", json={"rating": 1}).status_code == 404
        assert client.delete(f"/ratings/{rating_id}").status_code == 404

    assert len(client.get("/ratings").json()) == 1


def test_store_failure_details_reach_every_500(client, collection):
    created = client.post("/ratings", json={"name": "Bob", "review": "Solid", "rating": 5}).json()
    collection.fail_with = AutoReconnect("connection reset by peer")

    responses = [
        client.get("/ratings"),
        client.post("/ratings", json={"name": "Bob", "review": "Solid", "rating": 5}),
        client.put(f"/ratings/{created['id']}", json={"rating": 3}),
        client.delete(f"/ratings/{created['id']}"),
    ]

    for response in responses:
        assert response.status_code == 500
        assert "connection reset by peer" in response.json()["details"]


def test_update_server_side_validation_failure_is_400(client, collection):
    created = client.post("/ratings", json={"name": "Bob", "review": "Solid", "rating": 5}).json()
    collection.fail_with = OperationFailure("Document failed validation", code=121)

    response = client.put(f"/ratings/{created['id']}", json={"rating": 2})

    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"
