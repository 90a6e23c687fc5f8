"""Clock abstraction and ISO-8601 timestamp rendering."""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def domain_utc_now() -> datetime:
    """Return the current wall-clock time in UTC.

    Returns:
        datetime: Timezone-aware current UTC time.
    """

    return datetime.now(timezone.utc)


def domain_format_timestamp(moment: datetime) -> str:
    """Render a moment as ISO-8601 UTC text with millisecond precision.

    Output matches the `YYYY-MM-DDTHH:MM:SS.sssZ` shape. Naive datetimes are
    interpreted as UTC; aware datetimes are converted to UTC first.

    Args:
        moment: Datetime to render.

    Returns:
        str: Rendered timestamp with `Z` suffix.
    """

    if moment.tzinfo is None:
        moment_utc = moment
    else:
        moment_utc = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return f"{moment_utc.isoformat(timespec='milliseconds')}Z"
