"""VTG sentence holder.

VTG (Track Made Good and Ground Speed) is accepted but not decoded field by
field; RMC already carries speed and course over ground. The record keeps
the sentence text for downstream consumers.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
"""

from gnssdecode.nmea.types import VTGData


def decode_vtg(sentence: str) -> VTGData:
    """Wrap a checksum-validated VTG sentence."""
    return VTGData(raw_message=sentence)
