class ValidationError(ValueError):
    """Request data that cannot be stored; surfaced to the client as a 400"""
