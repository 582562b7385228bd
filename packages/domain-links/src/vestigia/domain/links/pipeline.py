"""Immediate deletion pipeline for a domain and its links.

One pass:

1. Locate the next batch of links.
2. Fan the batch out to every store (skipped for an empty batch) and
   log each failed operation.
3. Re-count the live links of the domain.
4. Links left: schedule another pass after a short delay and stop.
   None left: delete the domain row.

Passes repeat through the scheduler until the domain converges. Running
a pass on an already deleted domain is a harmless no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vestigia.foundation.domain.link_value_objects import DomainState, normalize_domain_name
from vestigia.infra.observability import get_logger

if TYPE_CHECKING:
    from vestigia.domain.links.convergence import ConvergenceChecker
    from vestigia.domain.links.fan_out import FanOutDeleter
    from vestigia.domain.links.locator import RecordLocator
    from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
    from vestigia.foundation.domain.ports import LinkStorePort

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Outcome of one pipeline pass.

    Attributes:
        domain: Normalized domain name.
        state: ``DELETED`` or ``PENDING_CHILD_CLEANUP``.
        links_processed: Size of the batch fanned out in this pass.
        remaining: Live links counted after the fan-out.
        deferred_job_id: Id of the follow-up pass, ``None`` when deleted
            or when scheduling failed.
    """

    domain: str
    state: DomainState
    links_processed: int = 0
    remaining: int = 0
    deferred_job_id: str | None = None


class DomainDeletionPipeline:
    """Drives one pass of domain deletion through its components."""

    def __init__(
        self,
        locator: RecordLocator,
        fan_out: FanOutDeleter,
        convergence: ConvergenceChecker,
        store: LinkStorePort,
        bridge: DeletionSchedulerBridge,
        retry_delay_seconds: int = 2,
    ) -> None:
        self._locator = locator
        self._fan_out = fan_out
        self._convergence = convergence
        self._store = store
        self._bridge = bridge
        self._retry_delay_seconds = retry_delay_seconds

    async def run(self, domain: str, workspace_id: str) -> DeletionResult:
        """Run one deletion pass for ``domain``.

        Raises:
            ValidationError: If ``domain`` is empty.
        """
        domain = normalize_domain_name(domain)

        links = await self._locator.locate(domain)
        if links:
            outcomes = await self._fan_out.delete(domain, workspace_id, links)
            for outcome in outcomes:
                if outcome.succeeded:
                    continue
                logger.error(
                    "domain_link_deletion_failed",
                    operation=outcome.operation,
                    domain=outcome.domain,
                    workspace_id=outcome.workspace_id,
                    reason=str(outcome.error),
                )

        convergence = await self._convergence.check(domain)
        if not convergence.complete:
            job_id = await self._bridge.try_enqueue(
                domain, workspace_id, delay_seconds=self._retry_delay_seconds
            )
            logger.info(
                "domain_deletion_deferred",
                domain=domain,
                workspace_id=workspace_id,
                links_processed=len(links),
                remaining=convergence.remaining,
                job_id=job_id,
            )
            return DeletionResult(
                domain=domain,
                state=DomainState.PENDING_CHILD_CLEANUP,
                links_processed=len(links),
                remaining=convergence.remaining,
                deferred_job_id=job_id,
            )

        deleted = await self._store.delete_domain(domain)
        logger.info(
            "domain_deleted",
            domain=domain,
            workspace_id=workspace_id,
            links_processed=len(links),
            already_absent=not deleted,
        )
        return DeletionResult(
            domain=domain,
            state=DomainState.DELETED,
            links_processed=len(links),
        )
