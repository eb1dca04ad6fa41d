# Hybrid retriever over the profile catalog:
#  - Vector scoring: embed the query, then either ask a pre-built FAISS index
#    for distances or embed every profile (fan-out) and compute cosine.
#  - Keyword scoring when anything in the vector stage fails.
#  - Passthrough of the loaded catalog when keyword scoring fails too.
# Collaborators are injected; the Retriever keeps no state between calls.

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List

from ..errors import StoreUnavailable
from .lexical import profile_text, rank_lexical
from .rank import DEFAULT_TOP_K, top_profiles
from .types import ProfileRecord, ScoredCandidate, SearchResult
from .vectors import (
    SIMILARITY_FLOOR,
    distance_to_similarity,
    floor_similarity,
    score_pair,
    unwrap_vector,
)

logger = logging.getLogger(__name__)

METHOD_EMPTY = "empty"
METHOD_VECTOR = "vector"
METHOD_INDEX = "index"
METHOD_LEXICAL = "lexical"
METHOD_PASSTHROUGH = "passthrough"


class Retriever:
    def __init__(
        self,
        store,
        embedder=None,
        index=None,
        top_k: int = DEFAULT_TOP_K,
        max_workers: int = 8,
    ):
        self.store = store
        self.embedder = embedder
        self.index = index
        self.top_k = top_k
        self.max_workers = max_workers

    # -------------------------
    # Load
    # -------------------------
    def load_candidates(self) -> List[ProfileRecord]:
        """Fetch every valid record from the store, in the store's id order."""
        try:
            ids = list(self.store.list_candidate_ids())
        except Exception as e:
            raise StoreUnavailable(f"Could not list profiles: {e}") from e

        out: List[ProfileRecord] = []
        for pid in ids:
            try:
                rec = self.store.get_record(pid)
            except Exception as e:
                logger.warning("Skipping profile %s: %s", pid, e)
                continue
            if rec is not None and rec.name:
                out.append(rec)
        return out

    # -------------------------
    # Vector stage
    # -------------------------
    def _embed_candidates(self, candidates: List[ProfileRecord]) -> list:
        texts = [profile_text(c) for c in candidates]
        workers = max(1, min(self.max_workers, len(texts)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="embed") as pool:
            # map() re-raises the first failure when results are consumed
            return list(pool.map(self.embedder.embed, texts))

    def _score_by_embedding(self, query_vec, candidates: List[ProfileRecord]) -> List[ScoredCandidate]:
        embeddings = self._embed_candidates(candidates)
        return [
            ScoredCandidate(record=c, score=score_pair(query_vec, emb))
            for c, emb in zip(candidates, embeddings)
        ]

    def _score_by_index(self, query_vec, candidates: List[ProfileRecord]) -> List[ScoredCandidate]:
        # ask for every row: stale rows must not push real candidates out of the hits
        hits = self.index.search(unwrap_vector(query_vec), self.index.size)
        sims = {}
        for pid, distance in hits:
            sims.setdefault(pid, floor_similarity(distance_to_similarity(distance)))
        return [ScoredCandidate(record=c, score=sims.get(c.id, SIMILARITY_FLOOR)) for c in candidates]

    def score_vectors(self, query: str, candidates: List[ProfileRecord]) -> List[ScoredCandidate]:
        query_vec = self.embedder.embed(query)
        if self.index is not None:
            return self._score_by_index(query_vec, candidates)
        return self._score_by_embedding(query_vec, candidates)

    # -------------------------
    # Public API
    # -------------------------
    def retrieve(self, query: str) -> SearchResult:
        candidates = self.load_candidates()
        logger.info("Loaded %d candidate profiles", len(candidates))
        if not candidates:
            return SearchResult(query=query, profiles=[], method=METHOD_EMPTY)

        if self.embedder is not None:
            method = METHOD_INDEX if self.index is not None else METHOD_VECTOR
            try:
                scored = self.score_vectors(query, candidates)
            except Exception as e:
                logger.warning("Vector search failed, falling back to keyword search: %s", e)
            else:
                scores = [c.score for c in scored]
                logger.info(
                    "%s search scored %d profiles (best=%.4f, worst=%.4f)",
                    method, len(scored), max(scores), min(scores),
                )
                return SearchResult(query=query, profiles=top_profiles(scored, self.top_k), method=method)

        try:
            scored = rank_lexical(query, candidates)
        except Exception:
            logger.exception("Keyword search failed, returning unranked profiles")
            return SearchResult(query=query, profiles=candidates[: self.top_k], method=METHOD_PASSTHROUGH)

        logger.info("Keyword search matched %d profiles", len(scored))
        return SearchResult(query=query, profiles=top_profiles(scored, self.top_k), method=METHOD_LEXICAL)
