from collections.abc import MutableMapping
from typing import Any, Set


class TestRedis(MutableMapping):
    """Simple Mock for unit-testing services accessing REDIS instances.

    Only implements the set commands used by the asset registry.

    Beware that this is NOT Thread Safe!
    Concurrent access is NOT supported!
    """

    DB = {}

    def __init__(self, table: str, *args, **kwargs):
        self.table = table
        self.args = args
        self.kwargs = kwargs

    def __getitem__(self, item: str):
        return self.DB.__getitem__(item)

    def __setitem__(self, key: str, value: Any):
        return self.DB.__setitem__(key, value)

    def __iter__(self):
        return iter(self.DB)

    def __len__(self):
        return len(self.DB)

    def __delitem__(self, key: str):
        return self.DB.__delitem__(key)

    def sadd(self, name: str, *values) -> int:
        members = self.DB.setdefault(name, set())
        added = {str(v).encode("utf-8") for v in values} - members
        members.update(added)
        return len(added)

    def smembers(self, name: str) -> Set[bytes]:
        return set(self.DB.get(name, set()))

    def delete(self, *names) -> int:
        return sum(1 for name in names if self.DB.pop(name, None) is not None)

    def flush(self):
        """Drop all keys belonging to :attr:`.table`."""
        for key in [k for k in self.DB if k.startswith(f"{self.table}:")]:
            del self.DB[key]
