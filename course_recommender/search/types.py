# Data models for the search layer.
# A ProfileRecord is one catalog entry; SearchResult is what the Retriever returns.

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# stat keys rendered into the context block
FOLLOWERS = "followers"
FREE_COURSES = "free_courses"
PAID_COURSES = "paid_courses"


def _json_or_value(raw: Any, default: Any) -> Any:
    """Redis hashes store lists/dicts as JSON strings; YAML gives them natively."""
    if raw is None or raw == "":
        return default
    if isinstance(raw, (bytes, str)):
        try:
            return json.loads(raw)
        except ValueError:
            return default
    return raw


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0
    return int(num) if num.is_integer() else num


@dataclass
class ProfileRecord:
    """An influencer profile as loaded from the store."""
    id: str
    name: str
    slug: str = ""
    handle: str = ""
    avatar: str = ""
    bio: str = ""
    description: str = ""
    tags: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def stat(self, key: str) -> float:
        return _as_number(self.stats.get(key, 0))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["ProfileRecord"]:
        """Normalize a raw store mapping. Returns None for records without a name."""
        name = str(data.get("name") or "").strip()
        if not name:
            return None

        tags = _json_or_value(data.get("tags"), [])
        if not isinstance(tags, list):
            tags = []
        stats = _json_or_value(data.get("stats"), {})
        if not isinstance(stats, dict):
            stats = {}

        slug = str(data.get("slug") or "")
        handle = data.get("Instagram") or data.get("username") or data.get("handle") or ""
        return cls(
            id=str(data.get("id") or slug),
            name=name,
            slug=slug,
            handle=str(handle),
            avatar=str(data.get("avatar") or ""),
            bio=str(data.get("bio") or ""),
            description=str(data.get("description") or ""),
            tags=[str(t) for t in tags],
            stats=dict(stats),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "handle": self.handle,
            "avatar": self.avatar,
            "bio": self.bio,
            "description": self.description,
            "tags": list(self.tags),
            "stats": dict(self.stats),
        }


@dataclass
class ScoredCandidate:
    """A profile paired with its similarity or lexical score for one retrieval call."""
    record: ProfileRecord
    score: float


@dataclass
class SearchResult:
    """Ranked profiles (scores stripped) plus the scoring method that produced them."""
    query: str
    profiles: List[ProfileRecord]
    method: str
