"""RMC sentence decoder.

RMC (Recommended Minimum Navigation Information) carries the essentials of a
fix: time, validity, position, speed and course over ground, and date.

RMC Sentence Format:
    $GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E
           |          | |          | |           | |    |      |     || |
           |          | |          | |           | |    |      |     || +-- Mode (A/D/E/N)
           |          | |          | |           | |    |      |     |+-- Variation E/W
           |          | |          | |           | |    |      |     +-- Magnetic variation
           |          | |          | |           | |    |      +-- Date (DDMMYY)
           |          | |          | |           | |    +-- Course over ground (degrees)
           |          | |          | |           | +-- Speed over ground (knots)
           |          | |          | +-----------+-- Longitude + E/W
           |          | +----------+-- Latitude + N/S
           |          +-- Status (A=valid, V=warning)
           +-- UTC time (HHMMSS.sss)

The mode field was added in NMEA 2.3; older receivers stop after the
variation direction, in which case the mode defaults to 'A'.
"""

from gnssdecode.nmea.fields import (
    assign_location_mode,
    convert_char,
    convert_number,
    convert_to_decimal_degrees,
    convert_utc_time,
    field_at,
    require_field_count,
)
from gnssdecode.nmea.types import RMCData

# Fields 0-11 are mandatory, the mode indicator at 12 is optional
_MINIMUM_FIELD_COUNT = 12


def decode_rmc(fields: list[str]) -> RMCData:
    """Construct an RMCData object from sentence fields.

    Hemisphere characters are read before their coordinates so the
    converter gets the sign input; an empty hemisphere defaults to N or E.

    Args:
        fields: Tokenized sentence, ``fields[0]`` being e.g. "GNRMC"

    Returns:
        RMCData with empty fields resolved to their defaults

    Raises:
        InsufficientFieldsError: If fewer than 12 fields are present
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT)

    lat_hemisphere = convert_char(fields[4], "N")
    lon_hemisphere = convert_char(fields[6], "E")

    return RMCData(
        location_mode=assign_location_mode(fields[0]),
        utc_time=convert_utc_time(fields[1]),
        status=convert_char(fields[2], "V"),
        latitude=convert_to_decimal_degrees(fields[3], lat_hemisphere),
        lat_hemisphere=lat_hemisphere,
        longitude=convert_to_decimal_degrees(fields[5], lon_hemisphere),
        lon_hemisphere=lon_hemisphere,
        speed_knots=convert_number(fields[7], 0.0),
        course_degrees=convert_number(fields[8], 0.0),
        date=fields[9],
        magnetic_variation=convert_number(fields[10], 0.0),
        variation_direction=convert_char(fields[11], "E"),
        mode=convert_char(field_at(fields, 12), "A"),
    )
