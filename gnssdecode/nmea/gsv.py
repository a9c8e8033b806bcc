"""GSV sentence decoder.

GSV (Satellites in View) lists the satellites a receiver can see, four per
sentence, with a message counter so a full view can span several sentences.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |  |
           | | |  |  |  |   |  +-- Next satellite group ...
           | | |  +--+--+---+-- Satellite ID, elevation, azimuth, SNR
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages

Empty elevation, azimuth or SNR fields (satellite not tracked) decode as 0.
A trailing group with fewer than four fields is dropped.
"""

from gnssdecode.nmea.fields import (
    assign_location_mode,
    convert_number,
    require_field_count,
)
from gnssdecode.nmea.types import GSVData, SatelliteInfo

_MINIMUM_FIELD_COUNT = 4

_FIRST_SATELLITE_FIELD = 4
_FIELDS_PER_SATELLITE = 4


def _decode_satellites(fields: list[str]) -> tuple[SatelliteInfo, ...]:
    satellites = []
    for start in range(
        _FIRST_SATELLITE_FIELD,
        len(fields) - _FIELDS_PER_SATELLITE + 1,
        _FIELDS_PER_SATELLITE,
    ):
        satellite_id, elevation, azimuth, snr = fields[
            start : start + _FIELDS_PER_SATELLITE
        ]
        satellites.append(
            SatelliteInfo(
                satellite_id=convert_number(satellite_id, 0),
                elevation=convert_number(elevation, 0.0),
                azimuth=convert_number(azimuth, 0.0),
                signal_to_noise_ratio=convert_number(snr, 0.0),
            )
        )
    return tuple(satellites)


def decode_gsv(fields: list[str]) -> GSVData:
    """Construct a GSVData object from sentence fields.

    Raises:
        InsufficientFieldsError: If the header fields are incomplete
    """
    require_field_count(fields, _MINIMUM_FIELD_COUNT)

    return GSVData(
        location_mode=assign_location_mode(fields[0]),
        total_messages=convert_number(fields[1], 0),
        message_number=convert_number(fields[2], 0),
        satellite_count=convert_number(fields[3], 0),
        satellites=_decode_satellites(fields),
    )
