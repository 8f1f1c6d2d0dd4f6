from .exceptions import CodecError, FileError, KVLogError, StorageError
from .settings import DEFAULT_LOG_PATH, LOG_PATH_ENV, resolve_log_path

__all__ = [
    "CodecError",
    "DEFAULT_LOG_PATH",
    "FileError",
    "KVLogError",
    "LOG_PATH_ENV",
    "StorageError",
    "resolve_log_path",
]
