import jwt
from flask import current_app

BEARER_PREFIX = 'Bearer '

class InvalidToken(Exception):
    pass

def issue_token(user_id):
    """Sign an identity token for user_id; tokens carry no expiry"""
    return jwt.encode(
        {'id': str(user_id)},
        current_app.config['JWT_SECRET'],
        algorithm=current_app.config['JWT_ALGORITHM']
    )

def verify_token(token):
    """Return the user id carried by token, or raise InvalidToken"""
    try:
        payload = jwt.decode(
            token,
            current_app.config['JWT_SECRET'],
            algorithms=[current_app.config['JWT_ALGORITHM']]
        )
    except jwt.PyJWTError as e:
        raise InvalidToken(str(e)) from e

    user_id = payload.get('id')
    if not isinstance(user_id, str) or not user_id:
        raise InvalidToken('Token carries no user id')
    return user_id

def token_from_header(header_value):
    """Extract the token from an ``Authorization: Bearer <token>`` header"""
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        return None
    token = header_value[len(BEARER_PREFIX):].strip()
    return token or None
