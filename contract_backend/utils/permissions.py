"""
Contract access control

Owners may read, write and sign their contracts. Collaborators, named by
email address in ``collaborators``, may read and sign but never write.
Everyone else gets nothing, and handlers report that as "not found".

``query_for`` is the only place these rules live. Every contract lookup and
write combines its filter with the id it targets, so the check and the
operation are a single store call.
"""

READ = 'read'
WRITE = 'write'
SIGN = 'sign'

PERMISSIONS = (READ, WRITE, SIGN)

def _owner_clause(identity):
    return {'owner_id': identity.id}

def _collaborator_clause(identity):
    # Matches when the email is an element of the collaborators array
    return {'collaborators': identity.email}

def query_for(identity, permission):
    """MongoDB filter selecting the contracts identity holds permission on"""
    if permission == WRITE:
        return _owner_clause(identity)
    if permission in (READ, SIGN):
        return {'$or': [_owner_clause(identity), _collaborator_clause(identity)]}
    raise ValueError(f'Unknown permission: {permission}')
