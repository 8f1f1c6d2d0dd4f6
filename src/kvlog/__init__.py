from .core.storage import AppendOnlyLogStorage

__all__ = [
    "AppendOnlyLogStorage",
]
