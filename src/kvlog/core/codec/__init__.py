from .record import (
    ENCODING,
    FIELD_SEPARATOR,
    Record,
    RecordInvalidKeyError,
    RecordInvalidValueError,
    RecordMalformedError,
    decode,
    encode,
    validate_key,
)

__all__ = [
    "ENCODING",
    "FIELD_SEPARATOR",
    "Record",
    "RecordInvalidKeyError",
    "RecordInvalidValueError",
    "RecordMalformedError",
    "decode",
    "encode",
    "validate_key",
]
