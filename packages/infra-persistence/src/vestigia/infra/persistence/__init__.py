"""Vestigia Infra Persistence: async database sessions and the Redis link cache client."""

from vestigia.infra.persistence.database import (
    DatabaseManager,
    DatabaseSettings,
    dispose_engine,
    get_database_manager,
    get_session_factory,
)
from vestigia.infra.persistence.lifespan import lifespan_contribution
from vestigia.infra.persistence.redis_client import RedisFactory, get_redis_factory
from vestigia.infra.persistence.redis_settings import RedisSettings

__all__ = [
    "DatabaseManager",
    "DatabaseSettings",
    "RedisFactory",
    "RedisSettings",
    "dispose_engine",
    "get_database_manager",
    "get_redis_factory",
    "get_session_factory",
    "lifespan_contribution",
]
