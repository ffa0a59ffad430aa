"""Formatting helpers: currency, dates, date keys, ids and notifications (pure functions)."""

from __future__ import annotations

import logging
import math
import random
import string
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo

from pos_client.config.constants import (
    APP_TIMEZONE,
    CURRENCY_SYMBOL,
    THOUSANDS_SEPARATOR,
    WEEKDAY_ABBREVIATIONS,
)

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase

NOTIFICATION_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """
    Return a best-effort unique id: base-36 epoch milliseconds plus a random
    base-36 suffix. Collisions are possible but unlikely.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choice(_BASE36) for _ in range(11))
    return _to_base36(millis) + suffix


def format_currency(amount: Union[int, float]) -> str:
    """
    Render an amount as Colombian pesos with no decimals, e.g. 85000 -> "$ 85.000".

    Args:
        amount: Amount in pesos; fractions are rounded half away from zero.

    Returns:
        Currency text with a non-breaking space after the symbol.

    Raises:
        ValueError: amount is NaN or infinite.
    """
    value = float(amount)
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite amount {amount!r}")
    whole = int(abs(value) + 0.5)
    grouped = f"{whole:,}".replace(",", THOUSANDS_SEPARATOR)
    sign = "-" if value < 0 and whole else ""
    return f"{sign}{CURRENCY_SYMBOL}\u00a0{grouped}"


def _as_aware(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC instants."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_iso(iso_string: str) -> datetime:
    if iso_string.endswith("Z"):
        iso_string = iso_string[:-1] + "+00:00"
    return datetime.fromisoformat(iso_string)


def format_date(value: Union[str, datetime], tz: str = APP_TIMEZONE) -> str:
    """Format an instant (datetime or ISO string) as "dd/mm/yyyy, HH:MM" in tz."""
    moment = _parse_iso(value) if isinstance(value, str) else value
    local = _as_aware(moment).astimezone(ZoneInfo(tz))
    return local.strftime("%d/%m/%Y, %H:%M")


def get_date_key(value: Optional[datetime] = None, tz: str = APP_TIMEZONE) -> str:
    """
    Return the calendar day of an instant in tz as "YYYY-MM-DD".

    The key depends only on the instant and tz, not on the host timezone.
    Defaults to now.
    """
    moment = _as_aware(value) if value is not None else _now()
    return moment.astimezone(ZoneInfo(tz)).strftime("%Y-%m-%d")


def get_month_key(value: Optional[datetime] = None, tz: str = APP_TIMEZONE) -> str:
    """Return the calendar month of an instant in tz as "YYYY-MM". Defaults to now."""
    moment = _as_aware(value) if value is not None else _now()
    return moment.astimezone(ZoneInfo(tz)).strftime("%Y-%m")


def get_last_month_key(tz: str = APP_TIMEZONE, now: Optional[datetime] = None) -> str:
    """Return the "YYYY-MM" key of the calendar month before the current one in tz."""
    local = _as_aware(now or _now()).astimezone(ZoneInfo(tz))
    year, month = (local.year, local.month - 1) if local.month > 1 else (local.year - 1, 12)
    return f"{year:04d}-{month:02d}"


def get_date_key_from_iso(iso_string: Optional[str], tz: str = APP_TIMEZONE) -> str:
    if not iso_string:
        return ""
    return get_date_key(_parse_iso(iso_string), tz)


def get_month_key_from_iso(iso_string: Optional[str], tz: str = APP_TIMEZONE) -> str:
    if not iso_string:
        return ""
    return get_month_key(_parse_iso(iso_string), tz)


def format_date_key_for_chart(date_key: Optional[str], tz: str = APP_TIMEZONE) -> str:
    """
    Short chart label for a "YYYY-MM-DD" key: weekday abbreviation and day, e.g. "vie 17".

    The day is anchored at 12:00 UTC so converting into tz (any offset within
    +/-12h) never moves it to a neighbouring date. Missing month/day parts
    default to 1; out-of-range parts roll over (month 13 is January of the
    next year, day 32 of October is 1 November).
    """
    if not date_key:
        return ""
    parts = [int(p) for p in date_key.split("-") if p]
    year = parts[0]
    month = parts[1] if len(parts) > 1 and parts[1] else 1
    day = parts[2] if len(parts) > 2 and parts[2] else 1
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    anchor = datetime(year, month, 1, 12, 0, 0, tzinfo=timezone.utc) + timedelta(days=day - 1)
    local = anchor.astimezone(ZoneInfo(tz))
    return f"{WEEKDAY_ABBREVIATIONS[local.weekday()]} {local.day}"


def notify(
    message: str,
    level: str = "info",
    alert: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Log a user-facing notification. Only "error" notifications reach alert
    (a blocking dialog in the UI); every other level is logged only.
    """
    logger.log(NOTIFICATION_LEVELS.get(level, logging.INFO), "[%s] %s", level.upper(), message)
    if level == "error" and alert is not None:
        alert(message)
