"""Exceptions raised while decoding NMEA sentences.

Only the checksum errors abort a decode. ``InsufficientFieldsError`` is raised
by a sentence decoder and absorbed by the dispatcher, which then returns the
raw message without a sentence record.
"""


class NMEAError(ValueError):
    """Base class for NMEA decoding errors."""


class MalformedChecksumError(NMEAError):
    """The sentence has no ``*hh`` trailer, or the trailer is not two hex digits."""


class ChecksumMismatchError(NMEAError):
    """The XOR of the sentence body differs from the declared checksum."""

    def __init__(self, calculated: int, provided: int) -> None:
        super().__init__(
            f"checksum mismatch: calculated {calculated:02X}, provided {provided:02X}"
        )
        self.calculated = calculated
        self.provided = provided


class InsufficientFieldsError(NMEAError):
    """A recognized sentence carries fewer fields than its decoder requires."""

    def __init__(self, sentence_type: str, minimum: int, actual: int) -> None:
        super().__init__(
            f"{sentence_type} requires at least {minimum} fields, got {actual}"
        )
        self.sentence_type = sentence_type
        self.minimum = minimum
        self.actual = actual
