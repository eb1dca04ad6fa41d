from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..search.types import ProfileRecord


class MemoryProfileStore:
    """In-process profile store. Keeps records in insertion order."""

    def __init__(self, records: Iterable[ProfileRecord] = ()):
        self._records: Dict[str, ProfileRecord] = {}
        for r in records:
            self.add(r)

    def add(self, record: ProfileRecord) -> None:
        self._records[record.id] = record

    def list_candidate_ids(self) -> List[str]:
        return list(self._records)

    def get_record(self, profile_id: str) -> Optional[ProfileRecord]:
        return self._records.get(profile_id)
