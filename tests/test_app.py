from tests.conftest import auth_header


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_wrong_method_returns_json_405(client):
    response = client.delete("/api/clauses")

    assert response.status_code == 405


def test_indexes_are_created(db):
    user_indexes = db.users.index_information()
    assert any(
        info.get("unique") and info["key"] == [("email", 1)]
        for info in user_indexes.values()
    )


def test_requests_do_not_fall_back_to_a_session(client, alice):
    # A successful authenticated request must not leave the client logged in
    assert client.get("/api/contracts", headers=auth_header(alice["token"])).status_code == 200
    assert client.get("/api/contracts").status_code == 401
