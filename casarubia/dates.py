from datetime import timezone

from dateutil.parser import isoparse


def parse_timestamp(value):
    """
    Parse an ISO 8601 date or timestamp into a naive UTC datetime.

    Accepts bare dates ('2024-06-01') as well as full timestamps with an
    optional offset ('2024-06-01T00:00:00.000Z'). Bare dates are taken as
    midnight UTC so they compare consistently with full timestamps.

    Raises ValueError when the value cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f'Invalid timestamp: {value!r}')
    try:
        parsed = isoparse(value.strip())
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except OverflowError as e:
        raise ValueError(f'Timestamp out of range: {value!r}') from e
    return parsed


def format_timestamp(value):
    return value.isoformat() if value else None
