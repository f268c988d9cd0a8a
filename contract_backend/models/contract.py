from datetime import datetime, timezone
from pymongo import ReturnDocument
from contract_backend.config.database import db_instance
from contract_backend.errors import ValidationError
from contract_backend.models.user import normalize_email
from contract_backend.utils.object_ids import parse_object_id
from contract_backend.utils import permissions
from contract_backend.utils.timestamps import to_iso

DRAFT = 'draft'
SIGNED = 'signed'

# Request field -> stored field, for the fields an owner may edit
EDITABLE_FIELDS = {
    'title': 'title',
    'content': 'content',
    'clientName': 'client_name',
    'providerName': 'provider_name',
    'collaborators': 'collaborators',
}

def _utcnow():
    return datetime.now(timezone.utc)

def clean_collaborators(value):
    """Validate and normalise a collaborator email list"""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError('collaborators must be a list of email addresses')

    emails = []
    for entry in value:
        if not isinstance(entry, str):
            raise ValidationError('collaborators must be a list of email addresses')
        email = normalize_email(entry)
        if email and email not in emails:
            emails.append(email)
    return emails

def clean_editable_fields(data):
    """Stored-field updates for the editable fields present in data"""
    updates = {}
    for request_field, stored_field in EDITABLE_FIELDS.items():
        if request_field not in data:
            continue
        value = data[request_field]
        if stored_field == 'collaborators':
            value = clean_collaborators(value)
        elif value is not None and not isinstance(value, str):
            raise ValidationError(f'{request_field} must be a string')
        updates[stored_field] = value
    return updates

def _contract_object_id(contract_id):
    object_id = parse_object_id(contract_id)
    if object_id is None:
        raise ValidationError('Invalid contract id')
    return object_id

class Contract:
    def __init__(self, owner_id, title=None, content=None, client_name=None, provider_name=None,
                 status=DRAFT, collaborators=None, signatures=None, _id=None,
                 created_at=None, updated_at=None):
        self.id = str(_id) if _id else None
        self.owner_id = owner_id
        self.title = title
        self.content = content
        self.client_name = client_name
        self.provider_name = provider_name
        self.status = status  # draft, signed
        self.collaborators = collaborators or []
        self.signatures = signatures or []  # List of {"name", "signature", "signed_at"}
        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or self.created_at

    @staticmethod
    def from_request(owner_id, data):
        """Build a new draft contract from a request body"""
        fields = clean_editable_fields(data)
        return Contract(owner_id=owner_id, **fields)

    @staticmethod
    def from_document(contract_data):
        return Contract(
            owner_id=contract_data['owner_id'],
            title=contract_data.get('title'),
            content=contract_data.get('content'),
            client_name=contract_data.get('client_name'),
            provider_name=contract_data.get('provider_name'),
            status=contract_data.get('status', DRAFT),
            collaborators=contract_data.get('collaborators', []),
            signatures=contract_data.get('signatures', []),
            _id=contract_data['_id'],
            created_at=contract_data.get('created_at'),
            updated_at=contract_data.get('updated_at')
        )

    def save(self):
        """Insert a new contract.

        Existing contracts are only changed through ``update_for`` and
        ``append_signature`` so that every write carries its access check.
        """
        if self.id:
            raise ValueError('Contract already saved')

        db = db_instance.get_db()
        contract_data = {
            'owner_id': self.owner_id,
            'title': self.title,
            'content': self.content,
            'client_name': self.client_name,
            'provider_name': self.provider_name,
            'status': self.status,
            'collaborators': self.collaborators,
            'signatures': self.signatures,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }

        result = db.contracts.insert_one(contract_data)
        self.id = str(result.inserted_id)
        return self

    @staticmethod
    def find_accessible(identity):
        """Contracts identity owns or collaborates on, newest first"""
        db = db_instance.get_db()
        cursor = db.contracts.find(
            permissions.query_for(identity, permissions.READ)
        ).sort('created_at', -1)
        return [Contract.from_document(contract_data) for contract_data in cursor]

    @staticmethod
    def update_for(identity, contract_id, data):
        """Apply an owner's edit; returns None when identity is not the owner"""
        updates = clean_editable_fields(data)
        updates['updated_at'] = _utcnow()

        db = db_instance.get_db()
        query = {'_id': _contract_object_id(contract_id)}
        query.update(permissions.query_for(identity, permissions.WRITE))

        contract_data = db.contracts.find_one_and_update(
            query,
            {'$set': updates},
            return_document=ReturnDocument.AFTER
        )
        return Contract.from_document(contract_data) if contract_data else None

    @staticmethod
    def append_signature(identity, contract_id, name, signature):
        """Append a signature and mark the contract signed.

        The access check, the push and the status change happen in one
        document update, so concurrent signers cannot overwrite each other.
        Returns None when identity may not sign the contract.
        """
        for field, value in (('name', name), ('signature', signature)):
            if value is not None and not isinstance(value, str):
                raise ValidationError(f'{field} must be a string')

        now = _utcnow()
        db = db_instance.get_db()
        query = {'_id': _contract_object_id(contract_id)}
        query.update(permissions.query_for(identity, permissions.SIGN))

        contract_data = db.contracts.find_one_and_update(
            query,
            {
                '$push': {'signatures': {'name': name, 'signature': signature, 'signed_at': now}},
                '$set': {'status': SIGNED, 'updated_at': now}
            },
            return_document=ReturnDocument.AFTER
        )
        return Contract.from_document(contract_data) if contract_data else None

    def to_dict(self):
        """Convert contract to dictionary"""
        return {
            'id': self.id,
            'ownerId': self.owner_id,
            'title': self.title,
            'content': self.content,
            'clientName': self.client_name,
            'providerName': self.provider_name,
            'status': self.status,
            'collaborators': self.collaborators,
            'signatures': [
                {
                    'name': signature.get('name'),
                    'signature': signature.get('signature'),
                    'signedAt': to_iso(signature.get('signed_at'))
                }
                for signature in self.signatures
            ],
            'createdAt': to_iso(self.created_at),
            'updatedAt': to_iso(self.updated_at)
        }
