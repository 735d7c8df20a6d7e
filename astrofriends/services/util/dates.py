"""Date helpers shared by the HTTP routes and the CLI."""

from datetime import date, datetime, timezone
from typing import Optional


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def resolve_date(value: Optional[date]) -> date:
    """Explicit date if given, otherwise today's date in UTC."""

    return value if value is not None else today_utc()
