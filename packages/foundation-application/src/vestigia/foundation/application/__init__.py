"""Vestigia Foundation Application: application layer patterns."""

from vestigia.foundation.application.contributions import LifespanContribution
from vestigia.foundation.application.lifespan import compose_lifespan
from vestigia.foundation.application.settlement import SettledOperation, settle_all

__all__ = [
    "LifespanContribution",
    "SettledOperation",
    "compose_lifespan",
    "settle_all",
]
