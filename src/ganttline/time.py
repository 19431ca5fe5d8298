# SPDX-License-Identifier: MIT

import datetime
import math
from typing import Any, Optional, cast

import pendulum

# Largest magnitude a timestamp may have, in milliseconds from the epoch
MAX_EPOCH_MS = 8.64e15

DISPLAY_DATETIME_FORMAT = "YYYY-MM-DD HH:mm:ss"


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def parse_epoch_ms(value: Any) -> Optional[int]:
    """Resolve a raw start/end attribute value to epoch milliseconds.

    Returns None when the value is missing or does not describe a valid instant.
    Naive datetimes and ISO strings without an offset are read as UTC so the
    result does not depend on the host timezone. Strings that only make sense
    against the current clock, like "now" or a bare time of day, are rejected.
    """
    if is_missing(value):
        return None

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if math.isnan(value) or math.isinf(value) or abs(value) > MAX_EPOCH_MS:
            return None
        return int(value)

    if isinstance(value, datetime.datetime):
        return datetime_to_epoch_ms(pendulum.instance(value))

    if isinstance(value, str):
        text = value.strip()
        # pendulum resolves "now" against the clock
        if text.lower() == "now":
            return None
        try:
            parsed = pendulum.parse(text, exact=True)
        except (ValueError, OverflowError):
            return None
        if isinstance(parsed, pendulum.DateTime):
            return datetime_to_epoch_ms(parsed)
        if isinstance(parsed, pendulum.Date):
            return datetime_to_epoch_ms(
                pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
            )
        return None

    return None


def datetime_to_epoch_ms(value: pendulum.DateTime) -> int:
    return value.int_timestamp * 1000 + value.microsecond // 1000


def epoch_ms_to_datetime(value: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(value / 1000, tz="UTC")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def duration_minutes(start_ms: int, end_ms: int) -> int:
    return round_half_up((end_ms - start_ms) / 60000)


def format_time_label(timestamp_ms: float, format_string: str = "HH:mm:ss") -> str:
    """Format an axis timestamp with pendulum tokens, e.g. "HH:mm:ss" or "MM/DD HH:mm".

    Falls back to the ISO representation when the format string cannot be applied.
    """
    value = epoch_ms_to_datetime(timestamp_ms)
    try:
        return value.in_tz("local").format(format_string)
    except (ValueError, KeyError, TypeError):
        return value.isoformat()


def datetime_to_display_local_datetime_str(value: pendulum.DateTime) -> str:
    return value.in_tz("local").format(DISPLAY_DATETIME_FORMAT)


def epoch_ms_to_display_str(value: int) -> str:
    return datetime_to_display_local_datetime_str(epoch_ms_to_datetime(value))


def datetime_from_str_utc(value: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(value))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time
