# Makes the folder importable as a package.
# Exports the Retriever, its result types and the context renderer.

from .context import render_context
from .retriever import Retriever
from .types import ProfileRecord, ScoredCandidate, SearchResult
from .vectors import SIMILARITY_FLOOR

__all__ = [
    "Retriever",
    "ProfileRecord",
    "ScoredCandidate",
    "SearchResult",
    "SIMILARITY_FLOOR",
    "render_context",
]
