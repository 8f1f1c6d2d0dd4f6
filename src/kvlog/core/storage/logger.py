from __future__ import annotations

from pathlib import Path
from typing import Iterator

from kvlog import config, interface
from kvlog.core import codec
from kvlog.core.file import MonolithicFile


class LogStorageError(config.StorageError):
    """Base exception for log storage errors."""


class LogIOError(LogStorageError):
    """Raised when the log file cannot be opened, written or read."""

    def __init__(self, *, path: Path, cause: str | Exception | None = None):
        self.path = path
        self.cause = cause

        message = f"I/O failure on log '{path}'"

        if cause:
            message += f": {cause}"

        super().__init__(message)


class LogInvalidValueError(LogStorageError):
    """Raised when the most recent record for a key holds a value that is not valid JSON."""

    def __init__(self, *, key: str, cause: str | Exception | None = None):
        self.key = key
        self.cause = cause

        message = f"Invalid value stored for key {key!r}"

        if cause:
            message += f": {cause}"

        super().__init__(message)


class AppendOnlyLogStorage(interface.StorageEngine):
    """Append-only log storage over a single plain text file.

    Every write appends one `<key>,<json-value>` line; reads scan the log from
    the newest line backwards and stop at the first record for the key.
    """

    def __init__(self, path: Path | str, *, chunk_size: int = interface.DEFAULT_CHUNK_SIZE) -> None:
        """Initialize the append-only log storage.

        Nothing is opened or created until the first operation.

        Args:
            path (Path | str): Location of the log file.
            chunk_size (int, optional): Bytes read per step of a backward scan. Defaults to interface.DEFAULT_CHUNK_SIZE.

        Raises:
            ValueError: If chunk_size is not positive.
        """

        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")

        self._path = Path(path)
        self._chunk_size = chunk_size

    @property
    def path(self) -> Path:
        """Location of the log file."""

        return self._path

    def put(self, key: str, value: interface.JSONValue, /) -> None:
        """Append a key-value pair to the log.

        The existing log is never consulted, so a write costs the same however
        large the log has grown.

        Args:
            key (str): The key to store.
            value (interface.JSONValue): The value to store.

        Raises:
            RecordInvalidKeyError: If the key contains a comma or a line terminator.
            RecordInvalidValueError: If the value cannot be represented as JSON.
            LogIOError: If the log cannot be opened or written, or the line was only partly written.
        """

        data = codec.encode(key, value).encode(codec.ENCODING)
        expected = len(data) + len(interface.LINE_TERMINATOR)

        try:
            with MonolithicFile(self._path, "ab") as log_file:
                written = log_file.append_line(data)
        except OSError as e:
            raise LogIOError(path=self._path, cause=e) from e

        if written != expected:
            raise LogIOError(path=self._path, cause=f"short write of {written} out of {expected} bytes")

    def unset(self, key: str, /) -> None:
        """Append `key,null`, after which the key reads back as None.

        Earlier records for the key stay in the log.

        Args:
            key (str): The key to unset.

        Raises:
            RecordInvalidKeyError: If the key contains a comma or a line terminator.
            LogIOError: If the log cannot be opened or written.
        """

        self.put(key, None)

    def get(self, key: str, /) -> interface.JSONValue:
        """Retrieve the most recent value written for a key.

        Lines without a separator are skipped, so a foreign line elsewhere in
        the log never prevents a lookup.

        Args:
            key (str): The key to retrieve.

        Raises:
            RecordInvalidKeyError: If the key could never have been written.
            LogInvalidValueError: If the most recent record for the key is not valid JSON.
            LogIOError: If the log exists but cannot be read.

        Returns:
            interface.JSONValue: The value, or None if the log is missing or holds no record for the key.
        """

        codec.validate_key(key)

        records = self._scan(reverse=True)

        try:
            for record in records:
                if record.key == key:
                    return self._parse_value(record)
        finally:
            records.close()

        return None

    def load_map(self) -> dict[str, interface.JSONValue]:
        """Replay the whole log into a dictionary of current values.

        Keys whose latest value is null are left out.

        Raises:
            LogInvalidValueError: If any record holds a value that is not valid JSON.
            LogIOError: If the log exists but cannot be read.

        Returns:
            dict[str, interface.JSONValue]: The current value of every key.
        """

        table: dict[str, interface.JSONValue] = {}

        for record in self._scan(reverse=False):
            value = self._parse_value(record)

            if value is None:
                table.pop(record.key, None)
            else:
                table[record.key] = value

        return table

    def _scan(self, *, reverse: bool) -> Iterator[codec.Record]:
        """Yield every well-formed record of the log.

        A missing log yields nothing. Malformed lines are skipped.
        """

        try:
            with MonolithicFile(self._path, "rb") as log_file:
                lines = log_file.iter_lines_reversed(self._chunk_size) if reverse else log_file.iter_lines()

                for line in lines:
                    try:
                        record = codec.decode(line)
                    except codec.RecordMalformedError:
                        continue

                    yield record
        except FileNotFoundError:
            return
        except OSError as e:
            raise LogIOError(path=self._path, cause=e) from e

    @staticmethod
    def _parse_value(record: codec.Record) -> interface.JSONValue:
        """Parse the raw value of a record, attributing failures to its key."""

        try:
            return record.value()
        except codec.RecordInvalidValueError as e:
            raise LogInvalidValueError(key=record.key, cause=e.cause) from e
