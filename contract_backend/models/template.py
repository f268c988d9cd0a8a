from datetime import datetime, timezone
from contract_backend.config.database import db_instance
from contract_backend.errors import ValidationError
from contract_backend.utils.timestamps import to_iso

class Template:
    """Reusable contract skeleton, private to the user who saved it.

    ``content`` is stored exactly as the client sent it (any JSON value).
    """

    def __init__(self, owner_id, name=None, type=None, content=None, _id=None, created_at=None):
        self.id = str(_id) if _id else None
        self.owner_id = owner_id
        self.name = name
        self.type = type
        self.content = content
        self.created_at = created_at or datetime.now(timezone.utc)

    @staticmethod
    def from_request(owner_id, data):
        """Build a template from a request body"""
        for field in ('name', 'type'):
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f'{field} must be a string')

        return Template(
            owner_id=owner_id,
            name=data.get('name'),
            type=data.get('type'),
            content=data.get('content')
        )

    def save(self):
        """Insert template into database"""
        db = db_instance.get_db()
        template_data = {
            'owner_id': self.owner_id,
            'name': self.name,
            'type': self.type,
            'content': self.content,
            'created_at': self.created_at
        }

        result = db.templates.insert_one(template_data)
        self.id = str(result.inserted_id)
        return self

    @staticmethod
    def find_by_owner(owner_id):
        """Find templates owned by a user, newest first"""
        db = db_instance.get_db()
        cursor = db.templates.find({'owner_id': owner_id}).sort('created_at', -1)

        return [
            Template(
                owner_id=template_data['owner_id'],
                name=template_data.get('name'),
                type=template_data.get('type'),
                content=template_data.get('content'),
                _id=template_data['_id'],
                created_at=template_data.get('created_at')
            )
            for template_data in cursor
        ]

    def to_dict(self):
        return {
            'id': self.id,
            'ownerId': self.owner_id,
            'name': self.name,
            'type': self.type,
            'content': self.content,
            'createdAt': to_iso(self.created_at)
        }
