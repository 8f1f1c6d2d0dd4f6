from .file import DEFAULT_CHUNK_SIZE, LINE_TERMINATOR, File, OpenFileMode
from .storage import JSONValue, StorageEngine

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "File",
    "JSONValue",
    "LINE_TERMINATOR",
    "OpenFileMode",
    "StorageEngine",
]
