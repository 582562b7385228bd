"""Vestigia Domain Links: eventually-consistent deletion of domains and their links."""

from vestigia.domain.links.convergence import Convergence, ConvergenceChecker
from vestigia.domain.links.detach import DetachCoordinator, DetachResult
from vestigia.domain.links.fan_out import FAN_OUT_OPERATIONS, FanOutDeleter
from vestigia.domain.links.locator import RecordLocator
from vestigia.domain.links.pipeline import DeletionResult, DomainDeletionPipeline
from vestigia.domain.links.scheduler_bridge import DeletionSchedulerBridge
from vestigia.domain.links.settings import LinkDeletionSettings, get_link_deletion_settings

__all__ = [
    "FAN_OUT_OPERATIONS",
    "Convergence",
    "ConvergenceChecker",
    "DeletionResult",
    "DeletionSchedulerBridge",
    "DetachCoordinator",
    "DetachResult",
    "DomainDeletionPipeline",
    "FanOutDeleter",
    "LinkDeletionSettings",
    "RecordLocator",
    "get_link_deletion_settings",
]
