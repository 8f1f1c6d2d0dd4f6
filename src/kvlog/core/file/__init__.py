from .monolith import MonolithicFile

__all__ = [
    "MonolithicFile",
]
