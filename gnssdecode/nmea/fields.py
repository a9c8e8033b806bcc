"""NMEA field parsing utilities.

This module provides the tokenizer and the field converters shared by every
sentence decoder. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data). Converters never raise: an empty
or malformed field resolves to the default supplied by the caller.
"""

import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import TypeVar

from gnssdecode.nmea.errors import InsufficientFieldsError
from gnssdecode.nmea.types import LocationMode

logger = logging.getLogger(__name__)

_Number = TypeVar("_Number", int, float)

_FIELD_SEPARATOR = ","

# Time of day is anchored to a fixed date; RMC carries the date separately.
_TIME_ANCHOR = datetime(2000, 1, 1, tzinfo=timezone.utc)
ZERO_TIMESTAMP = datetime.fromtimestamp(0, tz=timezone.utc)

# HHMMSS with an optional run of fractional digits after the decimal point
_UTC_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d+))?", re.ASCII)
_MILLISECOND_DIGITS = 3

_NUMBER_PATTERN = re.compile(r"[+-]?\d+(?P<fraction>\.\d*)?", re.ASCII)

_MAX_LATITUDE_DEGREES = 90.0
_MAX_LONGITUDE_DEGREES = 360.0


def tokenize(content: str) -> list[str]:
    """Split a checksummed sentence body into its comma-separated fields.

    Empty fields are preserved and no whitespace is trimmed, so field
    positions always match the NMEA field layout.

    Example:
        >>> tokenize("GNRMC,041704.000,A,,,")
        ['GNRMC', '041704.000', 'A', '', '', '']
    """
    return content.split(_FIELD_SEPARATOR)


def assign_location_mode(token: str) -> LocationMode:
    """Derive the positioning source from the talker+sentence token.

    Example:
        >>> assign_location_mode("GPGGA")
        <LocationMode.GPS: 1>
        >>> assign_location_mode("GNRMC")
        <LocationMode.COMBINED: 3>
    """
    if "GP" in token:
        return LocationMode.GPS
    if "BD" in token:
        return LocationMode.BEIDOU
    return LocationMode.COMBINED


def convert_number(value: str, default: _Number) -> _Number:
    """Convert a numeric field, falling back to ``default``.

    A plain decimal field without a decimal point is parsed as an integer,
    one with a decimal point as a float, and the result is coerced to the
    type of ``default``. Integer fields such as satellite counts therefore
    never take a float path. Anything else, including a number too large
    for the result type, resolves to ``default``.

    Args:
        value: String value from an NMEA field
        default: Value returned for an empty or unparseable field; its type
            selects the result type

    Returns:
        The parsed number as the same type as ``default``

    Example:
        >>> convert_number("12", 0)
        12
        >>> convert_number("0.9", 0.0)
        0.9
        >>> convert_number("", 7)
        7
    """
    if not value:
        return default

    # int() and float() alone would also accept "1_2", " 12", "1e3" and "nan"
    match = _NUMBER_PATTERN.fullmatch(value)
    if match is None:
        logger.debug("Field %r is not numeric, using default %r", value, default)
        return default

    kind = type(default)
    try:
        if match.group("fraction") is None:
            return kind(int(value))
        number = float(value)
        if not math.isfinite(number):
            raise OverflowError(value)
        return kind(number)
    except (ValueError, OverflowError):
        logger.debug("Field %r is out of range, using default %r", value, default)
        return default


def convert_char(value: str, default: str) -> str:
    """Return the first character of a field, or ``default`` if it is empty."""
    if not value:
        return default
    return value[0]


def _clamp_latitude(degrees: float) -> float:
    # A latitude beyond the pole is a malformed field
    if degrees > _MAX_LATITUDE_DEGREES:
        return 0.0
    return degrees


def _wrap_longitude(degrees: float) -> float:
    if degrees > _MAX_LONGITUDE_DEGREES:
        return degrees - _MAX_LONGITUDE_DEGREES
    return degrees


def convert_to_decimal_degrees(value: str, hemisphere: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    The packed value is divided by 100: the integer part is whole degrees
    and the fractional part, times 100, is decimal minutes.

        decimal_degrees = degrees + (minutes / 60)

    Sign and range handling by hemisphere:
        N: positive, forced to 0 above 90 degrees
        S: negative, forced to 0 above 90 degrees
        E: positive, reduced by 360 above 360 degrees
        W: negative, reduced by 360 above 360 degrees
        anything else: 0

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        hemisphere: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees, or 0.0 for an empty, zero or unparseable field

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    packed = convert_number(value, 0.0)
    if packed == 0.0:
        return 0.0

    fraction, degrees = math.modf(packed / 100.0)
    decimal_degrees = degrees + fraction * 100.0 / 60.0

    if hemisphere == "N":
        return _clamp_latitude(decimal_degrees)
    if hemisphere == "S":
        latitude = _clamp_latitude(decimal_degrees)
        return -latitude if latitude else 0.0
    if hemisphere == "E":
        return _wrap_longitude(decimal_degrees)
    if hemisphere == "W":
        return -_wrap_longitude(decimal_degrees)
    return 0.0


def convert_utc_time(value: str) -> datetime:
    """Convert an NMEA ``HHMMSS.sss`` time field to a UTC timestamp.

    The time of day is anchored to 2000-01-01. Up to three digits after the
    decimal point are read as a count of milliseconds; further digits are
    ignored.

    Args:
        value: UTC time field (e.g., "041704.000")

    Returns:
        Anchored timestamp, or ``ZERO_TIMESTAMP`` (the POSIX epoch) when the
        field is empty or not in ``HHMMSS`` form

    Example:
        >>> convert_utc_time("123519.25")
        datetime.datetime(2000, 1, 1, 12, 35, 19, 25000, tzinfo=datetime.timezone.utc)
    """
    if not value:
        return ZERO_TIMESTAMP

    match = _UTC_TIME_PATTERN.match(value)
    if match is None:
        logger.debug("Field %r is not a UTC time, using the zero timestamp", value)
        return ZERO_TIMESTAMP

    hours, minutes, seconds, fraction = match.groups()
    return _TIME_ANCHOR + timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        milliseconds=int(fraction[:_MILLISECOND_DIGITS] if fraction else 0),
    )


def require_field_count(fields: list[str], minimum: int) -> None:
    """Raise ``InsufficientFieldsError`` if ``fields`` is shorter than ``minimum``.

    ``fields[0]`` is the talker+sentence token, so the sentence type is
    reported from its last three characters.
    """
    if len(fields) < minimum:
        raise InsufficientFieldsError(fields[0][-3:], minimum, len(fields))


def field_at(fields: list[str], index: int) -> str:
    """Return the field at ``index``, or "" when the sentence stops short of it.

    Used for trailing fields that older NMEA revisions omit.
    """
    if index < len(fields):
        return fields[index]
    return ""
