"""JSON formatting utilities for decoded NMEA messages."""

import dataclasses
import enum
import json
from datetime import datetime
from typing import Any

from gnssdecode.nmea import NMEAData

__all__ = ["format_nmea_message"]


def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.name
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def format_nmea_message(data: NMEAData) -> str:
    """Serialize a decoded message into a JSON string for transmission.

    The populated record, if any, appears under its slot name, e.g.::

        {"type": "rmc", "raw_message": "$GNRMC,...*7E", "rmc": {"status": "A", ...}}
    """
    payload: dict[str, Any] = {
        "type": data.sentence_type,
        "raw_message": data.raw_message,
    }
    if data.sentence_type is not None:
        record = getattr(data, data.sentence_type)
        payload[data.sentence_type] = dataclasses.asdict(record)
    return json.dumps(payload, default=_encode_value)
