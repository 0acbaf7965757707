"""Human-readable formatting of post dates."""

from __future__ import annotations

from datetime import datetime

from dandesite.constants import DATETIME_FORMAT


def format_post_date(date_str: str) -> str:
    """Format ``YYYY-MM-DD HH:MM:SS`` as ``Month D, YYYY``.

    Raises ValueError when the input does not match that format.
    """
    moment = datetime.strptime(date_str, DATETIME_FORMAT)
    return f"{moment:%B} {moment.day}, {moment.year}"