import logging
from flask import Blueprint, request, jsonify
from pymongo.errors import DuplicateKeyError
from contract_backend.models.user import User, normalize_email
from contract_backend.utils.auth_middleware import validate_json_data
from contract_backend.utils.tokens import issue_token

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

def _credentials(data):
    email = data['email']
    password = data['password']
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValueError('Email and password must be strings')
    return normalize_email(email), password

@auth_bp.route('/register', methods=['POST'])
@validate_json_data(['email', 'password'])
def register():
    """Register a new user"""
    try:
        data = request.get_json()
        email, password = _credentials(data)
        name = data.get('name')
        if name is not None and not isinstance(name, str):
            raise ValueError('Name must be a string')

        if User.find_by_email(email):
            return jsonify({'error': 'User already exists'}), 400

        user = User(email=email, name=name.strip() if name else name)
        user.set_password(password)
        user.save()

        logger.info("Registered user %s", user.id)
        return jsonify({
            'user': user.to_dict(),
            'token': issue_token(user.id)
        }), 201

    except DuplicateKeyError:
        # Lost a race with a concurrent registration for the same email
        return jsonify({'error': 'User already exists'}), 400
    except Exception as e:
        logger.exception("Registration failed")
        return jsonify({'error': str(e)}), 400

@auth_bp.route('/login', methods=['POST'])
@validate_json_data(['email', 'password'])
def login():
    """Login user"""
    try:
        data = request.get_json()
        email, password = _credentials(data)

        user = User.find_by_email(email)
        if not user or not user.check_password(password):
            logger.info("Failed login attempt")
            return jsonify({'error': 'Invalid credentials'}), 400

        return jsonify({
            'user': user.to_dict(),
            'token': issue_token(user.id)
        }), 200

    except Exception as e:
        logger.exception("Login failed")
        return jsonify({'error': str(e)}), 400
