class KVLogError(Exception):
    """Base exception for all kvlog errors."""


class CodecError(KVLogError):
    """Exception raised for record encoding and decoding errors in kvlog."""


class FileError(KVLogError):
    """Exception raised for file-related errors in kvlog."""


class StorageError(KVLogError):
    """Exception raised for storage-related errors in kvlog."""
