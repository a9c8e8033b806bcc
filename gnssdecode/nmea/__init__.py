"""NMEA 0183 decoder for RMC, GGA, GSV, GSA and VTG sentences."""

from gnssdecode.nmea.checksum import (
    calculate_checksum,
    validate_checksum,
    verify_checksum,
)
from gnssdecode.nmea.errors import (
    ChecksumMismatchError,
    InsufficientFieldsError,
    MalformedChecksumError,
    NMEAError,
)
from gnssdecode.nmea.parser import parse_nmea
from gnssdecode.nmea.types import (
    GGAData,
    GSAData,
    GSVData,
    LocationMode,
    NMEAData,
    RMCData,
    SatelliteInfo,
    VTGData,
)

__all__ = [
    "ChecksumMismatchError",
    "GGAData",
    "GSAData",
    "GSVData",
    "InsufficientFieldsError",
    "LocationMode",
    "MalformedChecksumError",
    "NMEAData",
    "NMEAError",
    "RMCData",
    "SatelliteInfo",
    "VTGData",
    "calculate_checksum",
    "parse_nmea",
    "validate_checksum",
    "verify_checksum",
]
