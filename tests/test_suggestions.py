import pytest

from contract_backend.routes.suggestions import FALLBACK_SUGGESTION, SUGGESTIONS, suggestion_for
from tests.conftest import auth_header


@pytest.mark.parametrize("suggestion_type", sorted(SUGGESTIONS))
def test_known_types_return_their_text(client, alice, suggestion_type):
    response = client.post(
        "/api/ai-suggestions",
        json={"type": suggestion_type, "context": "ignored"},
        headers=auth_header(alice["token"]),
    )

    assert response.status_code == 200
    assert response.get_json() == {"suggestion": SUGGESTIONS[suggestion_type]}


def test_unknown_or_missing_type_falls_back(client, alice):
    for body in ({"type": "indemnity"}, {}, {"type": 7}):
        response = client.post(
            "/api/ai-suggestions", json=body, headers=auth_header(alice["token"])
        )
        assert response.status_code == 200
        assert response.get_json() == {"suggestion": FALLBACK_SUGGESTION}


def test_suggestions_require_authentication(client):
    response = client.post("/api/ai-suggestions", json={"type": "payment"})

    assert response.status_code == 401


def test_non_json_body_is_rejected(client, alice):
    response = client.post(
        "/api/ai-suggestions",
        data="payment",
        content_type="text/plain",
        headers=auth_header(alice["token"]),
    )

    assert response.status_code == 400


def test_suggestion_for_is_a_pure_lookup():
    assert suggestion_for("termination") == SUGGESTIONS["termination"]
    assert suggestion_for(None) == FALLBACK_SUGGESTION
