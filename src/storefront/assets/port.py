"""Asset store port: abstract interface for image storage."""

from abc import ABC, abstractmethod


class AssetStore(ABC):
    @abstractmethod
    def save(self, filename: str, content: bytes) -> str:
        """Store ``content`` under a fresh unique name and return its public path."""
        ...

    @abstractmethod
    def delete(self, path: str) -> None:
        """Remove a stored asset. Raises FileNotFoundError when it is gone already."""
        ...
