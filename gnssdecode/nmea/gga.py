"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51
           |         |          | |           | | |  |   |    | |     | |   |
           |         |          | |           | | |  |   |    | |     | |   +-- DGPS station ID
           |         |          | |           | | |  |   |    | |     | +-- DGPS age (seconds)
           |         |          | |           | | |  |   |    | +-----+-- Geoid separation + unit
           |         |          | |           | | |  |   +----+-- Altitude above MSL + unit
           |         |          | |           | | |  +-- HDOP (horizontal dilution)
           |         |          | |           | | +-- Number of satellites
           |         |          | |           | +-- Fix quality (0-6)
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from gnssdecode.nmea.fields import (
    assign_location_mode,
    convert_char,
    convert_number,
    convert_to_decimal_degrees,
    convert_utc_time,
    require_field_count,
)
from gnssdecode.nmea.types import GGAData

# GGA sentences have 15 fields (indices 0-14), the last being the station ID
_MINIMUM_FIELD_COUNT = 15


def decode_gga(fields: list[str]) -> GGAData:
    """Construct a GGAData object from sentence fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> utc_time (HHMMSS.ss format)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude hemisphere (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude hemisphere (E/W)
        fields[6]  -> fix_quality (0-6)
        fields[7]  -> num_satellites
        fields[8]  -> HDOP (horizontal dilution of precision)
        fields[9]  -> altitude above MSL
        fields[10] -> altitude unit (M)
        fields[11] -> geoid separation
        fields[12] -> geoid separation unit (M)
        fields[13] -> age of differential corrections
        fields[14] -> differential reference station ID

    Raises:
        InsufficientFieldsError: If fewer than 15 fields are present
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT)

    lat_hemisphere = convert_char(fields[3], "N")
    lon_hemisphere = convert_char(fields[5], "E")

    return GGAData(
        location_mode=assign_location_mode(fields[0]),
        utc_time=convert_utc_time(fields[1]),
        latitude=convert_to_decimal_degrees(fields[2], lat_hemisphere),
        lat_hemisphere=lat_hemisphere,
        longitude=convert_to_decimal_degrees(fields[4], lon_hemisphere),
        lon_hemisphere=lon_hemisphere,
        fix_quality=convert_number(fields[6], 0),
        num_satellites=convert_number(fields[7], 0),
        hdop=convert_number(fields[8], 0.0),
        altitude=convert_number(fields[9], 0.0),
        altitude_unit=convert_char(fields[10], "M"),
        geoid_separation=convert_number(fields[11], 0.0),
        geoid_separation_unit=convert_char(fields[12], "M"),
        differential_age=convert_number(fields[13], 0.0),
        station_id=fields[14],
    )
