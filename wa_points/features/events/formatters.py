"""
Performance parsing and formatting.

Callers turn raw text into a performance value here before building a
score input. seconds_to_time_string is display-only and never used in
scoring math.
"""

import math

from .models import Event, PerformanceType


INVALID_TIME_MESSAGE = (
    "Invalid time format. Use formats like 10.50, 1:30.25, or 2:15:30.50"
)
INVALID_DISTANCE_MESSAGE = (
    "Invalid distance format. Enter a number in meters (e.g., 8.95)"
)


class TimeParseError(ValueError):
    """Time string could not be parsed; message names the failing part."""
    pass


class PerformanceParseError(ValueError):
    """Performance text is neither a valid time nor a valid distance."""
    pass


def _parse_number(text: str) -> float:
    """
    Plain decimal number.

    Stricter than float(): no digit separators and no whitespace inside
    the number.

    Raises:
        ValueError: If text is not a plain number
    """
    if "_" in text or text != text.strip():
        raise ValueError(f"Not a plain number: {text!r}")
    return float(text)


def _parse_part(part: str, message: str) -> float:
    try:
        return _parse_number(part)
    except ValueError:
        raise TimeParseError(message) from None


def parse_time_to_seconds(time_str: str) -> float:
    """
    Parse a time string to seconds.

    Accepted formats:
        ss.mmm        -> seconds
        mm:ss.mmm     -> minutes * 60 + seconds
        hh:mm:ss.mmm  -> hours * 3600 + minutes * 60 + seconds

    Args:
        time_str: Time as typed by the user (e.g., '1:30.25')

    Returns:
        Time in seconds (e.g., 90.25)

    Raises:
        TimeParseError: Wrong number of parts or a non-numeric part
    """
    time_str = time_str.strip()
    parts = time_str.split(":")

    if len(parts) == 1:
        return _parse_part(parts[0], f"Invalid seconds format: {time_str}")

    if len(parts) == 2:
        minutes = _parse_part(parts[0], f"Invalid minutes: {parts[0]}")
        seconds = _parse_part(parts[1], f"Invalid seconds: {parts[1]}")
        return minutes * 60 + seconds

    if len(parts) == 3:
        hours = _parse_part(parts[0], f"Invalid hours: {parts[0]}")
        minutes = _parse_part(parts[1], f"Invalid minutes: {parts[1]}")
        seconds = _parse_part(parts[2], f"Invalid seconds: {parts[2]}")
        return hours * 3600 + minutes * 60 + seconds

    raise TimeParseError(
        f"Invalid time format: {time_str}. "
        "Expected formats: ss.mmm, mm:ss.mmm, or hh:mm:ss.mmm"
    )


def seconds_to_time_string(seconds: float) -> str:
    """
    Format seconds as 'mm:ss.mmm', or 'hh:mm:ss.mmm' from one hour up.

    Args:
        seconds: Time in seconds (e.g., 8130.5)

    Returns:
        Formatted string (e.g., '02:15:30.500'); 'NaN' or '±inf' as-is
    """
    if math.isnan(seconds):
        return "NaN"
    if math.isinf(seconds):
        return "inf" if seconds > 0 else "-inf"

    if seconds < 3600:
        minutes = math.floor(seconds / 60)
        remaining_seconds = seconds - minutes * 60
        return f"{minutes:02d}:{remaining_seconds:06.3f}"

    hours = math.floor(seconds / 3600)
    remaining_minutes = math.floor((seconds - hours * 3600) / 60)
    remaining_seconds = seconds - hours * 3600 - remaining_minutes * 60
    return f"{hours:02d}:{remaining_minutes:02d}:{remaining_seconds:06.3f}"


def parse_performance(text: str, event: Event) -> float:
    """
    Parse user input for an event into seconds or meters.

    Time events accept any parse_time_to_seconds format; distance
    events accept a plain number of meters.

    Raises:
        PerformanceParseError: With a message suitable for display
    """
    if event.performance_type == PerformanceType.TIME:
        try:
            return parse_time_to_seconds(text)
        except TimeParseError:
            try:
                return _parse_number(text.strip())
            except ValueError:
                raise PerformanceParseError(INVALID_TIME_MESSAGE) from None

    try:
        return _parse_number(text.strip())
    except ValueError:
        raise PerformanceParseError(INVALID_DISTANCE_MESSAGE) from None
