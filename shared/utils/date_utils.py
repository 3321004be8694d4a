from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Tuple
from dateutil.relativedelta import relativedelta


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """sqlite hands back naive timestamps; treat them as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def start_of_month(today: Optional[date] = None) -> datetime:
    today = today or datetime.now(timezone.utc).date()
    return datetime(today.year, today.month, 1)


def received_window_start(window: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """First received date included by an inventory date filter.

    ``today`` keeps only items received today, ``week`` the last 7 days and
    ``month`` the last 30 days. Anything else means no lower bound.
    """
    today = today or date.today()
    if window == "today":
        return today
    if window == "week":
        return today - timedelta(days=7)
    if window == "month":
        return today - timedelta(days=30)
    return None


def last_month_windows(count: int = 6, today: Optional[date] = None) -> List[Tuple[str, datetime, datetime]]:
    """(label, start, end) for the last ``count`` calendar months, oldest first."""
    first = start_of_month(today)
    windows = []
    for back in range(count - 1, -1, -1):
        start = first - relativedelta(months=back)
        end = start + relativedelta(months=1)
        windows.append((start.strftime("%b %Y"), start, end))
    return windows
