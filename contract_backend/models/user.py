from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from datetime import datetime, timezone
from contract_backend.config.database import db_instance
from contract_backend.utils.object_ids import parse_object_id

def normalize_email(email):
    return email.strip().lower()

class User(UserMixin):
    def __init__(self, email, password_hash=None, name=None, _id=None, created_at=None):
        self.id = str(_id) if _id else None
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.created_at = created_at or datetime.now(timezone.utc)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check if password is correct"""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def save(self):
        """Insert user into database.

        Raises pymongo.errors.DuplicateKeyError when the email is already
        registered; the unique index on ``users.email`` is the final word
        on uniqueness.
        """
        db = db_instance.get_db()
        user_data = {
            'email': self.email,
            'password_hash': self.password_hash,
            'name': self.name,
            'created_at': self.created_at
        }

        result = db.users.insert_one(user_data)
        self.id = str(result.inserted_id)

        return self

    @staticmethod
    def from_document(user_data):
        return User(
            email=user_data['email'],
            password_hash=user_data.get('password_hash'),
            name=user_data.get('name'),
            _id=user_data['_id'],
            created_at=user_data.get('created_at')
        )

    @staticmethod
    def find_by_email(email):
        """Find user by email"""
        db = db_instance.get_db()
        user_data = db.users.find_one({'email': email})
        return User.from_document(user_data) if user_data else None

    @staticmethod
    def find_by_id(user_id):
        """Find user by ID; malformed ids simply match nothing"""
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None

        db = db_instance.get_db()
        user_data = db.users.find_one({'_id': object_id})
        return User.from_document(user_data) if user_data else None

    def to_dict(self):
        """Public view of the user; the password hash never leaves the server"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email
        }
