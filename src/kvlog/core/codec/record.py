from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Final, Self

from kvlog import config, interface

FIELD_SEPARATOR: Final[str] = ","
FORBIDDEN_KEY_CHARACTERS: Final[frozenset[str]] = frozenset({FIELD_SEPARATOR, "\n", "\r"})
ENCODING: Final[str] = "utf-8"


class RecordInvalidKeyError(config.CodecError):
    """Raised when a key cannot be written to the log."""

    def __init__(self, *, key: str):
        self.key = key

        super().__init__(f"Key {key!r} contains a field separator, a line terminator or text that is not UTF-8")


class RecordMalformedError(config.CodecError):
    """Raised when a log line is not a `<key>,<value>` record."""

    def __init__(self, *, line: str | bytes, cause: str | Exception | None = None):
        self.line = line
        self.cause = cause

        message = f"Malformed record: {line!r}"

        if cause:
            message += f": {cause}"

        super().__init__(message)


class RecordInvalidValueError(config.CodecError):
    """Raised when a value cannot be encoded to or parsed from JSON."""

    def __init__(self, *, cause: str | Exception | None = None):
        self.cause = cause

        message = "Invalid record value"

        if cause:
            message += f": {cause}"

        super().__init__(message)


def validate_key(key: str) -> str:
    """Ensure a key can be stored as the first field of a log line.

    Args:
        key (str): The key to validate.

    Raises:
        RecordInvalidKeyError: If the key contains a comma or a line terminator, or is not encodable as UTF-8.

    Returns:
        str: The key, unchanged.
    """

    if not isinstance(key, str) or not FORBIDDEN_KEY_CHARACTERS.isdisjoint(key):
        raise RecordInvalidKeyError(key=key)

    try:
        key.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise RecordInvalidKeyError(key=key) from e

    return key


@dataclass(frozen=True)
class Record:
    """One `<key>,<json-value>` log line.

    The value is kept as raw JSON text; it is only parsed when asked for, so
    scanning for a key never fails on a value nobody needs.
    """

    key: str
    raw_value: str

    def value(self) -> interface.JSONValue:
        """Parse the raw value text.

        Raises:
            RecordInvalidValueError: If the raw value is not valid JSON.

        Returns:
            interface.JSONValue: The decoded value.
        """

        try:
            return json.loads(self.raw_value)
        except ValueError as e:
            raise RecordInvalidValueError(cause=e) from e

    def to_line(self) -> str:
        """Serialize the record to a log line without terminator.

        Returns:
            str: The `<key>,<json-value>` line.
        """

        return f"{self.key}{FIELD_SEPARATOR}{self.raw_value}"

    @classmethod
    def from_value(cls, key: str, value: interface.JSONValue) -> Self:
        """Build a record from a key and a JSON-compatible value.

        Args:
            key (str): The record key.
            value (interface.JSONValue): The value to serialize.

        Raises:
            RecordInvalidKeyError: If the key is not storable.
            RecordInvalidValueError: If the value cannot be represented as UTF-8 JSON.

        Returns:
            Self: The record holding compact JSON text.
        """

        key = validate_key(key)

        try:
            raw_value = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
            raw_value.encode(ENCODING)
        except (TypeError, ValueError) as e:
            raise RecordInvalidValueError(cause=e) from e

        return cls(key=key, raw_value=raw_value)

    @classmethod
    def from_line(cls, line: str | bytes) -> Self:
        """Split a log line into key and raw value on its first comma.

        Args:
            line (str | bytes): The line, optionally ending with a line terminator.

        Raises:
            RecordMalformedError: If the line is not UTF-8 or has no separator.

        Returns:
            Self: The decoded record.
        """

        if isinstance(line, bytes):
            try:
                text = line.decode(ENCODING)
            except UnicodeDecodeError as e:
                raise RecordMalformedError(line=line, cause=e) from e
        else:
            text = line

        text = text.removesuffix("\n").removesuffix("\r")

        key, separator, raw_value = text.partition(FIELD_SEPARATOR)

        if not separator:
            raise RecordMalformedError(line=line, cause="Missing field separator.")

        return cls(key=key, raw_value=raw_value)


def encode(key: str, value: interface.JSONValue) -> str:
    """Encode a key and value as one log line, without terminator."""

    return Record.from_value(key, value).to_line()


def decode(line: str | bytes) -> Record:
    """Decode one log line into a record whose value is still raw JSON text."""

    return Record.from_line(line)
