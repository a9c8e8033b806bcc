"""Decoding of NMEA 0183 sentences from GNSS receivers."""

from gnssdecode.nmea import (
    GGAData,
    GSAData,
    GSVData,
    LocationMode,
    NMEAData,
    RMCData,
    SatelliteInfo,
    VTGData,
    parse_nmea,
    validate_checksum,
)
from gnssdecode.report import (
    dump_location_info,
    format_location_info,
    save_location_info,
)
from gnssdecode.worker import DecodeWorker

__all__ = [
    "DecodeWorker",
    "GGAData",
    "GSAData",
    "GSVData",
    "LocationMode",
    "NMEAData",
    "RMCData",
    "SatelliteInfo",
    "VTGData",
    "dump_location_info",
    "format_location_info",
    "parse_nmea",
    "save_location_info",
    "validate_checksum",
]
