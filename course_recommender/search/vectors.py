"""
Vector normalization and cosine scoring.

Embedding providers do not agree on output shape: some return a flat list of
floats, others a batch of one (``[[...]]``). ``unwrap_vector`` applies the
single unwrap rule so the scoring code never inspects shapes itself, and
``align_vectors`` truncates both sides to the shorter length so vectors from
drifting provider models stay comparable (trailing dimensions are dropped).
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Sequence, Tuple

import numpy as np

from ..errors import MalformedVectorError

# Weak matches stay visible: no vector-path score is ever reported below this.
SIMILARITY_FLOOR = 0.1


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def unwrap_vector(vec: Any) -> np.ndarray:
    """Return ``vec`` as a flat float64 array, unwrapping one level of nesting."""
    if not _is_sequence(vec):
        raise MalformedVectorError(f"Expected a sequence of numbers, got {type(vec).__name__}")
    if len(vec) > 0 and _is_sequence(vec[0]):
        vec = vec[0]

    out = np.empty(len(vec), dtype=np.float64)
    for i, x in enumerate(vec):
        if isinstance(x, (bool, np.bool_)) or not isinstance(x, (Real, np.number)):
            raise MalformedVectorError(f"Non-numeric value at position {i}: {x!r}")
        out[i] = float(x)
    return out


def align_vectors(a: Any, b: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Unwrap both vectors and truncate them to the shorter length."""
    va, vb = unwrap_vector(a), unwrap_vector(b)
    n = min(len(va), len(vb))
    return va[:n], vb[:n]


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """dot(a, b) / (|a| * |b|); 0.0 when either norm is zero."""
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm_a = float(np.sqrt(np.dot(va, va)))
    norm_b = float(np.sqrt(np.dot(vb, vb)))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb)) / (norm_a * norm_b)


def floor_similarity(score: float) -> float:
    """Apply SIMILARITY_FLOOR; NaN maps to the floor as well."""
    if math.isnan(score):
        return SIMILARITY_FLOOR
    return max(score, SIMILARITY_FLOOR)


def distance_to_similarity(distance: float) -> float:
    """Convert a nearest-neighbour distance into a similarity: max(0, 1 - distance)."""
    return max(0.0, 1.0 - distance)


def score_pair(query_vec: Any, candidate_vec: Any) -> float:
    """Normalize, align and score one (query, candidate) pair, floor applied."""
    qa, ca = align_vectors(query_vec, candidate_vec)
    return floor_similarity(cosine_similarity(qa, ca))
