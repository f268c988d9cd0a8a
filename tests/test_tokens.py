import jwt
import pytest

from contract_backend.utils.tokens import (
    InvalidToken,
    issue_token,
    token_from_header,
    verify_token,
)
from tests.conftest import JWT_SECRET


def test_issued_token_carries_only_the_user_id(app):
    with app.app_context():
        token = issue_token("abc123")
        assert verify_token(token) == "abc123"

    payload = jwt.decode(token, JWT_SECRET, algorithms=["HS256"])
    assert payload == {"id": "abc123"}


def test_verify_rejects_garbage_and_missing_id(app):
    with app.app_context():
        with pytest.raises(InvalidToken):
            verify_token("not-a-token")

        token = jwt.encode({"sub": "abc"}, JWT_SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            verify_token(token)


def test_token_from_header():
    assert token_from_header("Bearer abc.def") == "abc.def"
    assert token_from_header("Bearer   ") is None
    assert token_from_header("Basic abc") is None
    assert token_from_header(None) is None
