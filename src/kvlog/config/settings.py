import os
from pathlib import Path
from typing import Final

LOG_PATH_ENV: Final[str] = "KVLOG_PATH"
DEFAULT_LOG_PATH: Final[str] = "kvlog.db"


def resolve_log_path(explicit: Path | str | None = None) -> Path:
    """Resolve the log file location.

    The explicit argument wins, then the ``KVLOG_PATH`` environment variable,
    then ``kvlog.db`` in the working directory.

    Args:
        explicit (Path | str | None, optional): A path given by the caller. Defaults to None.

    Returns:
        Path: The log file path with ``~`` expanded.
    """

    if explicit is None or str(explicit) == "":
        explicit = os.environ.get(LOG_PATH_ENV) or DEFAULT_LOG_PATH

    return Path(explicit).expanduser()
