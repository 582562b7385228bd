"""Port interface for the object store holding link assets."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectStoragePort(Protocol):
    """Port for object deletion by path.

    Attributes:
        public_url: Base URL that stored asset URLs start with.
    """

    public_url: str

    async def delete(self, path: str) -> None:
        """Delete the object at ``path``. Missing objects are not an error."""
        ...
