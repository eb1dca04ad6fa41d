# Keyword scoring used when embeddings are unavailable.
# Scores are small integers: +1 per query term found anywhere in the profile,
# +2 more when the term also appears inside one of the profile's tags.

from __future__ import annotations

from typing import Iterable, List

from .rank import sort_by_score
from .types import ProfileRecord, ScoredCandidate

TEXT_HIT = 1
TAG_HIT = 2


def profile_text(record: ProfileRecord) -> str:
    """Name, handle, bio, description and tags joined by single spaces."""
    parts = [record.name, record.handle, record.bio, record.description, *record.tags]
    return " ".join(p for p in parts if p)


def searchable_text(record: ProfileRecord) -> str:
    return profile_text(record).lower()


def query_terms(query: str) -> List[str]:
    return query.lower().split()


def lexical_score(query: str, record: ProfileRecord) -> int:
    text = searchable_text(record)
    tags = [t.lower() for t in record.tags]
    score = 0
    for term in query_terms(query):
        if term in text:
            score += TEXT_HIT
            if any(term in tag for tag in tags):
                score += TAG_HIT
    return score


def rank_lexical(query: str, candidates: Iterable[ProfileRecord]) -> List[ScoredCandidate]:
    """Score every candidate, drop zero scores, sort descending (stable)."""
    scored = [ScoredCandidate(record=c, score=lexical_score(query, c)) for c in candidates]
    return sort_by_score([s for s in scored if s.score > 0])
