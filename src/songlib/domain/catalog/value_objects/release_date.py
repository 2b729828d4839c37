"""Release date parsing and formatting."""

import re
from datetime import date, datetime
from typing import Optional

from songlib.domain.catalog.exceptions import InvalidDateFormatError

RELEASE_DATE_FORMAT = "%Y-%m-%d"

# strptime alone also accepts unpadded months and days
_RELEASE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_release_date(value: str) -> date:
    """Parse a release date given strictly as YYYY-MM-DD.

    Raises
    ------
    InvalidDateFormatError
        If the value uses any other layout or is not a real calendar date.
    """
    if not isinstance(value, str) or not _RELEASE_DATE_PATTERN.match(value):
        raise InvalidDateFormatError(value)
    try:
        return datetime.strptime(value, RELEASE_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormatError(value) from e


def format_release_date(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(RELEASE_DATE_FORMAT)
