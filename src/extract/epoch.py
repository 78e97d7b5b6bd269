"""Apple Core Data timestamp conversion."""

from datetime import datetime, timedelta, timezone

from common.constants import APPLE_EPOCH_OFFSET

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def apple_epoch_to_datetime(seconds: float) -> datetime:
    """
    Convert a Core Data timestamp into an aware UTC datetime.

    Core Data counts seconds from 2001-01-01T00:00:00Z. Fractional seconds
    are kept.

    Args:
        seconds: Seconds since the Apple epoch

    Returns:
        Equivalent UTC datetime
    """
    return UNIX_EPOCH + timedelta(seconds=float(seconds) + APPLE_EPOCH_OFFSET)
