from .logger import (
    AppendOnlyLogStorage,
    LogInvalidValueError,
    LogIOError,
    LogStorageError,
)

__all__ = [
    "AppendOnlyLogStorage",
    "LogInvalidValueError",
    "LogIOError",
    "LogStorageError",
]
