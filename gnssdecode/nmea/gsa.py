"""GSA sentence holder.

GSA (DOP and Active Satellites) is accepted but not decoded field by field;
the record keeps the sentence text for downstream consumers.
"""

from gnssdecode.nmea.types import GSAData


def decode_gsa(sentence: str) -> GSAData:
    """Wrap a checksum-validated GSA sentence."""
    return GSAData(raw_message=sentence)
