"""Port for reading and writing the persisted finance document."""

from typing import Protocol


class DocumentStoragePort(Protocol):
    """Port exposing a single JSON blob, like a browser local storage key."""

    def read(self) -> str | None:
        """Return the stored JSON text, or None when nothing is stored."""

    def write(self, payload: str) -> None:
        """Replace the stored JSON text."""


__all__ = ["DocumentStoragePort"]
