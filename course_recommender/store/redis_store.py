# Profile store backed by Redis:
#   SET  influencers           -> profile slugs
#   HASH influencer:<slug>     -> id, slug, name, Instagram|username, avatar,
#                                 bio, description, tags (JSON), stats (JSON)

from __future__ import annotations

from typing import List, Optional

import redis

from ..search.types import ProfileRecord

PROFILE_SET_KEY = "influencers"
PROFILE_KEY_PREFIX = "influencer:"


class RedisProfileStore:
    def __init__(self, client: "redis.Redis"):
        self.client = client

    @classmethod
    def from_url(cls, url: str, timeout: float = 5.0) -> "RedisProfileStore":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
        return cls(client)

    def list_candidate_ids(self) -> List[str]:
        # set members come back unordered; sort so load order is stable
        return sorted(self.client.smembers(PROFILE_SET_KEY))

    def get_record(self, slug: str) -> Optional[ProfileRecord]:
        data = self.client.hgetall(f"{PROFILE_KEY_PREFIX}{slug}")
        if not data:
            return None
        data.setdefault("slug", slug)
        return ProfileRecord.from_mapping(data)
