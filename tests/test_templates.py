from tests.conftest import auth_header


def test_create_and_list_own_templates(client, alice):
    content = {"sections": [{"heading": "Scope", "body": "..."}], "version": 2}
    response = client.post(
        "/api/templates",
        json={"name": "NDA", "type": "confidentiality", "content": content},
        headers=auth_header(alice["token"]),
    )

    assert response.status_code == 201
    template = response.get_json()
    assert template["name"] == "NDA"
    assert template["type"] == "confidentiality"
    assert template["content"] == content
    assert template["ownerId"] == alice["user"]["id"]

    response = client.get("/api/templates", headers=auth_header(alice["token"]))
    assert response.status_code == 200
    assert [t["id"] for t in response.get_json()] == [template["id"]]


def test_templates_are_private_to_their_owner(client, alice, bob):
    client.post(
        "/api/templates",
        json={"name": "Alice only", "type": "service", "content": {}},
        headers=auth_header(alice["token"]),
    )

    response = client.get("/api/templates", headers=auth_header(bob["token"]))

    assert response.status_code == 200
    assert response.get_json() == []


def test_templates_require_authentication(client):
    assert client.get("/api/templates").status_code == 401
    assert client.post("/api/templates", json={"name": "x"}).status_code == 401


def test_template_name_must_be_a_string(client, alice):
    response = client.post(
        "/api/templates",
        json={"name": ["NDA"], "type": "nda"},
        headers=auth_header(alice["token"]),
    )

    assert response.status_code == 400
    assert response.get_json() == {"error": "name must be a string"}
