from abc import ABC, abstractmethod
from typing import Any, TypeAlias

JSONValue: TypeAlias = None | bool | int | float | str | list[Any] | dict[str, Any]


class StorageEngine(ABC):
    """Abstract base class for storage engine implementations."""

    @abstractmethod
    def put(self, key: str, value: JSONValue, /) -> None:
        """Store a key-value pair in the storage engine.

        Args:
            key (str): The key to store.
            value (JSONValue): The value to store.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.
        """

        raise NotImplementedError

    @abstractmethod
    def get(self, key: str, /) -> JSONValue:
        """Retrieve the current value for a key from the storage engine.

        Args:
            key (str): The key to retrieve.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        Returns:
            JSONValue: The value associated with the key, or None if there is none.
        """

        raise NotImplementedError

    @abstractmethod
    def unset(self, key: str, /) -> None:
        """Mark a key as having no value in the storage engine.

        Args:
            key (str): The key to unset.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.
        """

        raise NotImplementedError
