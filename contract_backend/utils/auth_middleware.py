import logging
from functools import wraps
from flask import request, jsonify
from contract_backend.models.user import User
from contract_backend.utils.tokens import InvalidToken, token_from_header, verify_token

logger = logging.getLogger(__name__)

AUTH_ERROR = 'Please authenticate.'

def load_user_from_request(req):
    """Flask-Login request loader: resolve the bearer token to a User"""
    token = token_from_header(req.headers.get('Authorization'))
    if token is None:
        return None

    try:
        user_id = verify_token(token)
    except InvalidToken as e:
        logger.info("Rejected token: %s", e)
        return None

    return User.find_by_id(user_id)

def unauthorized():
    return jsonify({'error': AUTH_ERROR}), 401

def validate_json_data(required_fields):
    """Reject requests whose body is not a JSON object holding required_fields"""
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({'error': 'Request must be JSON'}), 400

            for field in required_fields:
                if data.get(field) in (None, ''):
                    return jsonify({'error': f'Missing required field: {field}'}), 400

            return view(*args, **kwargs)
        return wrapper
    return decorator
