"""
Utility helper functions
"""
from datetime import date, datetime
from typing import Optional, Union

ISO_DATE_FORMAT = "%Y-%m-%d"
LABEL_DATE_FORMAT = "%b %d, %Y"


def safe_int(s: Optional[str]) -> Optional[int]:
    """Safely convert string to int"""
    if s is None:
        return None
    s = str(s).strip()
    if not s:
        return None
    try:
        return int(s)
    except (ValueError, TypeError):
        return None


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse stored YYYY-MM-DD text into a date; None when empty or invalid"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        # Accept a full ISO timestamp, but nothing else after the date
        day, _, _ = text.partition("T")
        return datetime.strptime(day, ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: Optional[date]) -> Optional[str]:
    """Serialize a date back to YYYY-MM-DD text"""
    if value is None:
        return None
    return value.strftime(ISO_DATE_FORMAT)


def clamp(value: int, min_val: int, max_val: int) -> int:
    """Clamp value between min and max"""
    return max(min_val, min(max_val, value))


def truncate_text(text: str, max_length: int = 50) -> str:
    """Truncate text to max length with ellipsis"""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
