# Profile store adapters.
# Every store exposes list_candidate_ids() and get_record(id).

from .memory import MemoryProfileStore
from .redis_store import RedisProfileStore
from .yaml_store import YamlProfileStore

__all__ = ["MemoryProfileStore", "RedisProfileStore", "YamlProfileStore"]
