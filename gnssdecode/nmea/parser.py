"""NMEA sentence dispatcher.

Decoding is a single stateless pass:

    checksum gate -> tokenize -> select decoder by sentence ID -> record

Only checksum errors reject the sentence outright. A recognized sentence that
is too short for its decoder still yields an ``NMEAData`` with the raw text
and an empty sentence slot; an unsupported sentence ID yields the same.
"""

import logging
from collections.abc import Callable
from typing import Any

from gnssdecode.nmea.checksum import verify_checksum
from gnssdecode.nmea.errors import (
    ChecksumMismatchError,
    InsufficientFieldsError,
    MalformedChecksumError,
)
from gnssdecode.nmea.fields import tokenize
from gnssdecode.nmea.gga import decode_gga
from gnssdecode.nmea.gsa import decode_gsa
from gnssdecode.nmea.gsv import decode_gsv
from gnssdecode.nmea.rmc import decode_rmc
from gnssdecode.nmea.types import NMEAData
from gnssdecode.nmea.vtg import decode_vtg

logger = logging.getLogger(__name__)

# The sentence ID follows the 2-character talker ID
_SENTENCE_ID_SLICE = slice(2, 5)

# Sentence ID -> (NMEAData slot, decoder taking the field list)
_FIELD_DECODERS: dict[str, tuple[str, Callable[[list[str]], Any]]] = {
    "RMC": ("rmc", decode_rmc),
    "GGA": ("gga", decode_gga),
    "GSV": ("gsv", decode_gsv),
}

# Sentence ID -> (NMEAData slot, holder taking the raw sentence)
_RAW_HOLDERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "GSA": ("gsa", decode_gsa),
    "VTG": ("vtg", decode_vtg),
}

SUPPORTED_SENTENCE_IDS = frozenset(_FIELD_DECODERS) | frozenset(_RAW_HOLDERS)


def sentence_id(content: str) -> str:
    """Return the 3-character sentence ID of a checksummed sentence body.

    Example:
        >>> sentence_id("GNRMC,041704.000,A")
        'RMC'
    """
    return content[_SENTENCE_ID_SLICE]


def _decode_record(sentence: str, content: str) -> dict[str, Any]:
    """Run the decoder selected by the sentence ID.

    Returns:
        Keyword arguments for ``NMEAData``: ``{slot: record}``, or an empty
        dict when the ID is unsupported or the sentence is too short
    """
    identifier = sentence_id(content)

    if identifier in _RAW_HOLDERS:
        slot, holder = _RAW_HOLDERS[identifier]
        return {slot: holder(sentence)}

    if identifier not in _FIELD_DECODERS:
        logger.debug("Unsupported sentence ID %r", identifier)
        return {}

    slot, decoder = _FIELD_DECODERS[identifier]
    try:
        return {slot: decoder(tokenize(content))}
    except InsufficientFieldsError as e:
        logger.debug("Dropping %s record: %s", identifier, e)
        return {}


def parse_nmea(sentence: str) -> NMEAData | None:
    """Decode one NMEA 0183 sentence.

    This is the main entry point of the decoder. It performs:
    1. Checksum validation (trailing ``\\r\\n`` is ignored)
    2. Sentence ID dispatch (RMC, GGA, GSV decoded; GSA, VTG kept raw)
    3. Field conversion, with malformed fields resolved to defaults

    Args:
        sentence: Raw NMEA sentence starting with '$' (or '$$')

    Returns:
        NMEAData echoing ``sentence`` with at most one record populated,
        or None if the checksum is missing, malformed, or wrong

    Example:
        >>> result = parse_nmea("$GNRMC,041704.000,A,2935.21718,N,...*7E")
        >>> result.rmc.latitude
        29.586953
        >>> parse_nmea("Invalid NMEA message") is None
        True
    """
    try:
        content = verify_checksum(sentence)
    except (MalformedChecksumError, ChecksumMismatchError) as e:
        logger.debug("Rejecting sentence %r: %s", sentence, e)
        return None

    return NMEAData(raw_message=sentence, **_decode_record(sentence, content))
