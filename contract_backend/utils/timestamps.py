from datetime import timezone

def to_iso(value):
    """ISO-8601 UTC string with milliseconds, e.g. 2024-05-01T09:30:00.125Z"""
    if value is None:
        return None
    # The store hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
