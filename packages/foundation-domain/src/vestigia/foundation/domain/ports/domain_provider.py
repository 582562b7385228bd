"""Port interface for the external DNS / hosting provider."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DomainProviderPort(Protocol):
    """Port for releasing a bound domain name at the hosting provider."""

    async def release_domain(self, domain: str) -> None:
        """Remove ``domain`` from the provider. Already-released is not an error."""
        ...
