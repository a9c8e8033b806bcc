"""NMEA data types for decoded sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Defaults instead of None: a field whose source token is empty or
       malformed resolves to a documented default (0 for numbers, a fixed
       character for indicator fields). A single bad field degrades to its
       default rather than discarding the whole sentence.

    2. Immutable records: every record is created fresh per decode call and is
       frozen once returned, so a decoded message can be handed to several
       consumers (console dump, file writer, WebSocket broadcast) safely.

    3. Date and time of day are kept apart: RMC carries the date as a raw
       ``DDMMYY`` string next to a time of day anchored to 2000-01-01. The two
       are never fused into a calendar timestamp.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime


class LocationMode(enum.Enum):
    """Positioning source derived from the talker identifier.

    Purely descriptive: decoding never branches on it.
    """

    GPS = 1
    BEIDOU = 2
    COMBINED = 3


@dataclass(frozen=True)
class RMCData:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        location_mode: Talker-derived positioning source.

        utc_time: Time of day anchored to 2000-01-01 UTC. The POSIX epoch
            when the time field was empty.

        status: 'A' = valid fix, 'V' = navigation receiver warning.
            Defaults to 'V'.

        latitude: Latitude in decimal degrees, positive=North. 0.0 if empty.

        lat_hemisphere: 'N' or 'S' as received. Defaults to 'N'.

        longitude: Longitude in decimal degrees, positive=East. 0.0 if empty.

        lon_hemisphere: 'E' or 'W' as received. Defaults to 'E'.

        speed_knots: Speed over ground in knots.

        course_degrees: Course over ground in degrees (true north).

        date: Date exactly as received, ``DDMMYY`` (e.g. "071124").

        magnetic_variation: Magnetic variation in degrees.

        variation_direction: 'E' or 'W'. Defaults to 'E'.

        mode: FAA mode indicator (A=autonomous, D=differential,
            E=estimated, N=not valid). Defaults to 'A'.
    """

    location_mode: LocationMode
    utc_time: datetime
    status: str
    latitude: float
    lat_hemisphere: str
    longitude: float
    lon_hemisphere: str
    speed_knots: float
    course_degrees: float
    date: str
    magnetic_variation: float
    variation_direction: str
    mode: str

    @property
    def valid(self) -> bool:
        """Return ``True`` when the receiver reports a valid fix."""
        return self.status == "A"


@dataclass(frozen=True)
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        location_mode: Talker-derived positioning source.

        utc_time: Time of day anchored to 2000-01-01 UTC.

        latitude / longitude: Decimal degrees, positive=North/East.

        lat_hemisphere / lon_hemisphere: Hemisphere characters as received,
            defaulting to 'N' and 'E'.

        fix_quality: GPS fix quality indicator (0 = invalid, 1 = GPS fix,
            2 = DGPS fix, 4 = RTK fixed, 5 = RTK float, 6 = dead reckoning).

        num_satellites: Number of satellites used in the fix.

        hdop: Horizontal dilution of precision.

        altitude: Antenna altitude above mean sea level.

        altitude_unit: Unit character of ``altitude``, normally 'M'.

        geoid_separation: Height of the geoid above the WGS-84 ellipsoid.

        geoid_separation_unit: Unit character of ``geoid_separation``.

        differential_age: Age of differential corrections in seconds.

        station_id: Differential reference station identifier, or "".
    """

    location_mode: LocationMode
    utc_time: datetime
    latitude: float
    lat_hemisphere: str
    longitude: float
    lon_hemisphere: str
    fix_quality: int
    num_satellites: int
    hdop: float
    altitude: float
    altitude_unit: str
    geoid_separation: float
    geoid_separation_unit: str
    differential_age: float
    station_id: str

    @property
    def valid(self) -> bool:
        """Return ``True`` when the receiver reports a position fix."""
        return self.fix_quality > 0


@dataclass(frozen=True)
class SatelliteInfo:
    """One satellite entry of a GSV sentence."""

    satellite_id: int
    elevation: float
    azimuth: float
    signal_to_noise_ratio: float


@dataclass(frozen=True)
class GSVData:
    """Decoded GSV (Satellites in View) sentence.

    A full constellation view is usually split over several GSV sentences;
    ``message_number`` counts from 1 up to ``total_messages``. ``satellites``
    holds only the entries carried by this one sentence (at most four).
    """

    location_mode: LocationMode
    total_messages: int
    message_number: int
    satellite_count: int
    satellites: tuple[SatelliteInfo, ...] = field(default=())


@dataclass(frozen=True)
class GSAData:
    """GSA (DOP and Active Satellites) sentence, kept as raw text only."""

    raw_message: str


@dataclass(frozen=True)
class VTGData:
    """VTG (Track Made Good and Ground Speed) sentence, kept as raw text only."""

    raw_message: str


@dataclass(frozen=True)
class NMEAData:
    """The result of decoding one NMEA sentence.

    At most one of the sentence slots is populated, selected by the
    sentence identifier. All slots are ``None`` when the identifier is not
    supported or the sentence was too short for its decoder.

    Example:
        >>> data = parse_nmea("$GNRMC,041704.000,A,2935.21718,N,...*7E")
        >>> data.sentence_type
        'rmc'
        >>> data.rmc.latitude
        29.586953
    """

    raw_message: str
    rmc: RMCData | None = None
    gga: GGAData | None = None
    gsa: GSAData | None = None
    gsv: GSVData | None = None
    vtg: VTGData | None = None

    @property
    def sentence_type(self) -> str | None:
        """Name of the populated slot ("rmc", "gga", ...), or ``None``."""
        for name in ("rmc", "gga", "gsa", "gsv", "vtg"):
            if getattr(self, name) is not None:
                return name
        return None
