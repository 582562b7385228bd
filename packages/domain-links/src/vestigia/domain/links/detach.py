"""Detach Coordinator: soft-deletes a domain before its data is purged.

Detaching makes the domain invisible to its workspace right away and
hands the slow cleanup to the deferred pipeline:

1. Release the name at the hosting provider.
2. Clear the workspace reference on the domain row.
3. Clear the workspace reference on every link of the domain.
4. Schedule the full deletion pipeline (no delay).

All four run concurrently and settle independently. Each failure is
logged under its origin; none is raised to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vestigia.foundation.application.settlement import settle_all
from vestigia.foundation.domain.link_value_objects import (
    DomainState,
    OperationOutcome,
    normalize_domain_name,
)
from vestigia.infra.observability import get_logger

if TYPE_CHECKING:
    from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
    from vestigia.foundation.domain.ports import DomainProviderPort, LinkStorePort

logger = get_logger(__name__)

DETACH_ORIGINS: tuple[str, ...] = ("provider", "domain_store", "link_store", "scheduler")


@dataclass(frozen=True, slots=True)
class DetachResult:
    """Outcome of a detach request.

    Attributes:
        domain: Normalized domain name.
        workspace_id: Workspace the domain was detached from.
        state: Always ``DETACHED``; failed steps are reported in ``failures``.
        failures: One outcome per failed origin.
        job_id: Deferred pipeline job id when scheduling succeeded.
    """

    domain: str
    workspace_id: str
    state: DomainState = DomainState.DETACHED
    failures: tuple[OperationOutcome, ...] = ()
    job_id: str | None = None

    @property
    def clean(self) -> bool:
        return not self.failures


class DetachCoordinator:
    """Runs the detach-first deletion path."""

    def __init__(
        self,
        provider: DomainProviderPort,
        store: LinkStorePort,
        bridge: DeletionSchedulerBridge,
    ) -> None:
        self._provider = provider
        self._store = store
        self._bridge = bridge

    async def detach(self, domain: str, workspace_id: str) -> DetachResult:
        """Detach ``domain`` from ``workspace_id`` and schedule its deletion."""
        domain = normalize_domain_name(domain)

        settled = await settle_all(
            {
                "provider": self._provider.release_domain(domain),
                "domain_store": self._store.detach_domain(domain),
                "link_store": self._store.detach_links(domain),
                "scheduler": self._bridge.enqueue(domain, workspace_id),
            }
        )

        failures: list[OperationOutcome] = []
        job_id: str | None = None
        for op in settled:
            if op.failed:
                logger.error(
                    "domain_detach_failed",
                    origin=op.name,
                    domain=domain,
                    workspace_id=workspace_id,
                    reason=str(op.error),
                )
                failures.append(
                    OperationOutcome(
                        operation=op.name,
                        domain=domain,
                        workspace_id=workspace_id,
                        error=op.error,
                    )
                )
            elif op.name == "scheduler":
                job_id = op.result

        logger.info(
            "domain_detached",
            domain=domain,
            workspace_id=workspace_id,
            failed_origins=[f.operation for f in failures],
        )
        return DetachResult(
            domain=domain,
            workspace_id=workspace_id,
            failures=tuple(failures),
            job_id=job_id,
        )
