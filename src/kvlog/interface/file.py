from abc import ABC, abstractmethod
from os import SEEK_END, SEEK_SET
from pathlib import Path
from typing import Final, Iterator, Literal, Self

OpenFileMode = Literal["rb", "ab"]

LINE_TERMINATOR: Final[bytes] = b"\n"
DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024


class File(ABC):
    """Abstract base class for line-oriented log file implementations."""

    def __init__(self, path: Path | str, mode: OpenFileMode = "rb"):
        super().__init__()

        if mode not in ("rb", "ab"):
            raise ValueError(f"Invalid mode: {mode}.")

        path = Path(path)

        if not path.name:
            raise ValueError("Path must name a file.")

        self._path: Final[Path] = path
        self._mode: Final[OpenFileMode] = mode

    @property
    def path(self) -> Path:
        """Path of the underlying file."""

        return self._path

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write bytes to the file.

        Args:
            data (bytes): The bytes to write to the file.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            int: The number of bytes written.
        """

        raise NotImplementedError

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read bytes from the file.

        Args:
            size (int, optional): Number of bytes to read. -1 reads until EOF. Defaults to -1.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            bytes: The bytes read from the file.
        """

        raise NotImplementedError

    @abstractmethod
    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Move the file pointer to a specific position.

        Args:
            offset (int): The offset position.
            whence (int, optional): Reference point for offset (SEEK_SET, SEEK_CUR, SEEK_END). Defaults to SEEK_SET.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            int: The new absolute position in the file.
        """

        raise NotImplementedError

    @abstractmethod
    def tell(self) -> int:
        """Get the current file pointer position.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            int: The current position in the file.
        """

        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Close the file.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.
        """

        raise NotImplementedError

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Check if the file is closed.

        Raises:
            NotImplementedError: This property must be implemented by subclasses.

        Returns:
            bool: True if the file is closed, False otherwise.
        """

        raise NotImplementedError

    @abstractmethod
    def __enter__(self) -> Self:
        """Enter the context manager (opens the file).

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            Self: The file instance.
        """

        raise NotImplementedError

    @abstractmethod
    def __exit__(self, *_: object) -> None:
        """Exit the context manager (closes the file).

        Args:
            *_ (object): Exception information (type, value, traceback).

        Raises:
            NotImplementedError: This method must be implemented by subclasses.
        """

        raise NotImplementedError

    def append_line(self, line: bytes) -> int:
        """Append one terminated line with a single write call.

        Args:
            line (bytes): The line content, without terminator.

        Raises:
            ValueError: If the line contains a line terminator.

        Returns:
            int: The number of bytes written, terminator included.
        """

        if LINE_TERMINATOR in line:
            raise ValueError("Line must not contain a line terminator.")

        return self.write(line + LINE_TERMINATOR)

    def iter_lines(self) -> Iterator[bytes]:
        """Yield every line from the first to the last, without terminators.

        A final line lacking its terminator is yielded as is.
        """

        self.seek(0, SEEK_SET)

        remainder = b""

        while chunk := self.read(DEFAULT_CHUNK_SIZE):
            lines = (remainder + chunk).split(LINE_TERMINATOR)
            remainder = lines.pop()

            yield from lines

        if remainder:
            yield remainder

    def iter_lines_reversed(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield every line from the last to the first, without terminators.

        The file is read backwards in chunks of ``chunk_size`` bytes, so a caller
        that stops early never touches the head of the file.

        Args:
            chunk_size (int, optional): Bytes read per step. Defaults to DEFAULT_CHUNK_SIZE.

        Raises:
            ValueError: If chunk_size is not positive.
        """

        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")

        position = self.seek(0, SEEK_END)

        if position == 0:
            return

        self.seek(position - 1, SEEK_SET)

        if self.read(1) == LINE_TERMINATOR:
            position -= 1

        remainder = b""

        while position > 0:
            step = min(chunk_size, position)
            position -= step

            self.seek(position, SEEK_SET)

            lines = (self.read(step) + remainder).split(LINE_TERMINATOR)
            remainder = lines.pop(0)

            yield from reversed(lines)

        yield remainder
