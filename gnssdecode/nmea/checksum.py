"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the leading '$' and the
last '*' (exclusive), then represented as a two-digit hexadecimal number after
the '*'.

Example sentence structure:
    $GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E
    ^                       checksum content                             ^^
    start                                                   checksum (0x7E = 126)

Some receivers and test fixtures emit a doubled ``$$`` start marker. Every
leading '$' is treated as framing, so ``$$GNRMC,...*7E`` carries the same
checksum as ``$GNRMC,...*7E``.
"""

import string

from gnssdecode.nmea.errors import ChecksumMismatchError, MalformedChecksumError

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_CHECKSUM_LENGTH = 2


def _extract_checksum_parts(sentence: str) -> tuple[str, str]:
    """Split an NMEA sentence into its payload content and provided checksum.

    NMEA sentences follow the format: $<content>*<checksum>

    Args:
        sentence: NMEA sentence with trailing terminators already stripped

    Returns:
        A tuple of (content, checksum_hex)

    Raises:
        MalformedChecksumError: If the '$' start delimiter or the '*'
            delimiter is missing, or the checksum is not exactly two
            hexadecimal characters

    Example:
        >>> _extract_checksum_parts("$$GNGGA,123519*7F")
        ('GNGGA,123519', '7F')
    """
    if not sentence.startswith(_START_DELIMITER):
        raise MalformedChecksumError("sentence does not start with '$'")

    end = sentence.rfind(_CHECKSUM_DELIMITER)
    if end < 0:
        raise MalformedChecksumError("sentence has no '*' checksum delimiter")

    provided = sentence[end + 1 :]
    if len(provided) != _CHECKSUM_LENGTH:
        raise MalformedChecksumError(
            f"expected {_CHECKSUM_LENGTH} checksum characters, got {provided!r}"
        )
    if not all(character in string.hexdigits for character in provided):
        raise MalformedChecksumError(f"checksum {provided!r} is not hexadecimal")

    content = sentence[:end].lstrip(_START_DELIMITER)
    return content, provided


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    Each character contributes its low eight bits, so the result is always
    in the range 0-255.

    Example:
        >>> f"{calculate_checksum('GNGGA,123519.00'):02X}"
        '47'
    """
    result = 0
    for character in content:
        result ^= ord(character) & 0xFF
    return result


def verify_checksum(sentence: str) -> str:
    """Verify the checksum of an NMEA sentence and return its checksummed body.

    Trailing whitespace (such as the ``\\r\\n`` sentence terminator) is not
    part of the checksum and is ignored.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum

    Returns:
        The content between the leading '$' marker(s) and the '*'

    Raises:
        MalformedChecksumError: If the checksum trailer is missing or malformed
        ChecksumMismatchError: If the calculated checksum differs from the
            provided one
    """
    content, provided = _extract_checksum_parts(sentence.strip())

    calculated = calculate_checksum(content)
    expected = int(provided, 16)
    if calculated != expected:
        raise ChecksumMismatchError(calculated, expected)

    return content


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Returns:
        True if the checksum is valid, False if the sentence is malformed
        or the calculated checksum doesn't match the provided one

    Example:
        >>> validate_checksum("$GNGGA,123519.00,...*7F")
        True
        >>> validate_checksum("$GNGGA,123519.00,...*FF")  # wrong checksum
        False
    """
    try:
        verify_checksum(sentence)
    except (MalformedChecksumError, ChecksumMismatchError):
        return False
    return True
