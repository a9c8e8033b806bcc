"""Human-readable dumps of decoded NMEA messages.

These helpers only read the ``NMEAData`` they are given. Field names match
the record attributes so dumps can be grepped alongside code.
"""

import logging
import sys
from pathlib import Path
from typing import TextIO

from gnssdecode.nmea import GGAData, GSVData, NMEAData, RMCData

__all__ = ["dump_location_info", "format_location_info", "save_location_info"]

logger = logging.getLogger(__name__)

_DEFAULT_OUTPUT_PATH = Path("./output.txt")


def _format_rmc(rmc: RMCData) -> list[str]:
    return [
        f"locationMode: {rmc.location_mode.name}",
        f"utcTime: {rmc.utc_time.isoformat()}",
        f"status: {rmc.status}",
        f"latitude: {rmc.latitude:.6f}",
        f"latHemisphere: {rmc.lat_hemisphere}",
        f"longitude: {rmc.longitude:.6f}",
        f"lonHemisphere: {rmc.lon_hemisphere}",
        f"speed: {rmc.speed_knots}",
        f"course: {rmc.course_degrees}",
        f"date: {rmc.date}",
        f"variation: {rmc.magnetic_variation}",
        f"variationDirection: {rmc.variation_direction}",
        f"mode: {rmc.mode}",
    ]


def _format_gga(gga: GGAData) -> list[str]:
    return [
        f"locationMode: {gga.location_mode.name}",
        f"utcTime: {gga.utc_time.isoformat()}",
        f"latitude: {gga.latitude:.6f}",
        f"latHemisphere: {gga.lat_hemisphere}",
        f"longitude: {gga.longitude:.6f}",
        f"lonHemisphere: {gga.lon_hemisphere}",
        f"fixQuality: {gga.fix_quality}",
        f"satellites: {gga.num_satellites}",
        f"hdop: {gga.hdop}",
        f"altitude: {gga.altitude} {gga.altitude_unit}",
        f"geoidSeparation: {gga.geoid_separation} {gga.geoid_separation_unit}",
        f"ageDifferential: {gga.differential_age}",
        f"stationID: {gga.station_id}",
    ]


def _format_gsv(gsv: GSVData) -> list[str]:
    lines = [
        f"locationMode: {gsv.location_mode.name}",
        f"totalMessages: {gsv.total_messages}",
        f"messageNumber: {gsv.message_number}",
        f"satelliteCount: {gsv.satellite_count}",
    ]
    for satellite in gsv.satellites:
        lines += [
            f"satelliteID: {satellite.satellite_id}",
            f"\televation: {satellite.elevation}",
            f"\tazimuth: {satellite.azimuth}",
            f"\tsignalToNoiseRatio: {satellite.signal_to_noise_ratio}",
        ]
    return lines


def format_location_info(data: NMEAData) -> str:
    """Render the populated record of ``data`` as ``name: value`` lines.

    GSA and VTG records, and messages without a record, render as the raw
    sentence text.
    """
    if data.rmc is not None:
        lines = _format_rmc(data.rmc)
    elif data.gga is not None:
        lines = _format_gga(data.gga)
    elif data.gsv is not None:
        lines = _format_gsv(data.gsv)
    else:
        lines = [f"rawMessage: {data.raw_message.strip()}"]
    return "\n".join(lines) + "\n"


def dump_location_info(data: NMEAData | None, stream: TextIO | None = None) -> None:
    """Write the decoded record to ``stream`` (default: standard output).

    A ``None`` decode result (failed checksum) is logged and nothing is
    written.
    """
    if data is None:
        logger.warning("No decoded message to dump")
        return
    (stream or sys.stdout).write(format_location_info(data))


def save_location_info(
    data: NMEAData | None,
    path: str | Path = _DEFAULT_OUTPUT_PATH,
) -> None:
    """Append the decoded record to the text file at ``path``.

    A ``None`` decode result is logged and the file is left untouched.
    """
    if data is None:
        logger.warning("No decoded message to save to %s", path)
        return
    with Path(path).open("a", encoding="utf-8") as output:
        output.write(format_location_info(data))
    logger.info("Saved %s message to %s", data.sentence_type or "raw", path)
