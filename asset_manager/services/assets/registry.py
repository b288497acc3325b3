"""Record which addresses own which asset ids.

Each owner gets a Redis set at ``<table>:<owner address>``, so concurrent
runs recording assets for the same owner never overwrite each other.
"""
from typing import List

import structlog
from redis import Redis
from redis.exceptions import RedisError

from asset_manager.exceptions.db import AssetStoreError

log = structlog.get_logger(__name__)


class AssetRegistry:
    """Persistence collaborator of the asset lifecycle.

    :param connection: a :class:`redis.Redis` instance, or the
        :class:`asset_manager.services.utils.testing.TestRedis` mock.
    :param table: prefix of all keys written by this registry.
    """

    def __init__(self, connection, table: str = "assets"):
        self.connection = connection
        self.table = table

    @classmethod
    def from_config(cls, config) -> "AssetRegistry":
        """Create an instance from a :class:`RedisConfig`."""
        return cls(Redis(host=config.host, port=config.port, db=config.db), table=config.table)

    def key(self, owner: str) -> str:
        return f"{self.table}:{owner}"

    def record_asset(self, owner: str, asset_id: int) -> None:
        """Store `asset_id` as owned by `owner`.

        :raises AssetStoreError: if the database is unreachable.
        """
        try:
            self.connection.sadd(self.key(owner), asset_id)
        except RedisError as e:
            raise AssetStoreError(self.table, owner) from e
        log.debug("Recorded asset", owner=owner, asset_id=asset_id)

    def list_assets(self, owner: str) -> List[int]:
        """Return all asset ids recorded for `owner`, in ascending order."""
        try:
            members = self.connection.smembers(self.key(owner))
        except RedisError as e:
            raise AssetStoreError(self.table, owner) from e
        return sorted(int(member) for member in members)
