# Ranking helpers shared by the vector and keyword paths.
# Stateless: sort descending by score, keep input order on ties, clip to top_k.

from __future__ import annotations

from typing import List

from .types import ProfileRecord, ScoredCandidate

DEFAULT_TOP_K = 5


def sort_by_score(scored: List[ScoredCandidate]) -> List[ScoredCandidate]:
    # sorted() is stable, and stays stable with reverse=True
    return sorted(scored, key=lambda c: c.score, reverse=True)


def top_profiles(scored: List[ScoredCandidate], top_k: int = DEFAULT_TOP_K) -> List[ProfileRecord]:
    """Rank, truncate and strip scores."""
    return [c.record for c in sort_by_score(scored)[:top_k]]
