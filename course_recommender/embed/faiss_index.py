# Pre-built FAISS index over profile embeddings.
#   - IndexFlatIP over L2-normalized vectors (inner product == cosine)
#   - ids.npy sidecar maps FAISS row -> profile id
#   - search() reports cosine distance (1 - inner product)
#
# Build from the configured store:
#   python -m course_recommender.embed.faiss_index --out data/index/faiss.index

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

from ..errors import MalformedVectorError
from ..search.lexical import profile_text
from ..search.types import ProfileRecord
from ..search.vectors import unwrap_vector

logger = logging.getLogger(__name__)


# ---- Lazy import FAISS to avoid heavy import cost if not used ----
def _import_faiss():
    try:
        import faiss  # type: ignore
        return faiss
    except Exception as e:
        raise RuntimeError(
            "FAISS is required for the profile index. Install `faiss-cpu` "
            "e.g. `pip install faiss-cpu`."
        ) from e


def _l2_normalize(x: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    if x.ndim != 2:
        raise ValueError("Expected a 2D array for normalization")
    norms = np.linalg.norm(x, ord=2, axis=1, keepdims=True)
    norms = np.maximum(norms, eps)
    return x / norms


def ids_path_for(index_path: str) -> Path:
    return Path(index_path).with_name("ids.npy")


class ProfileIndex:
    def __init__(self, index, ids: List[str]):
        if index.ntotal != len(ids):
            raise RuntimeError(f"Index size ({index.ntotal}) != ids count ({len(ids)})")
        self.index = index
        self.ids = ids

    @property
    def dim(self) -> int:
        return self.index.d

    @property
    def size(self) -> int:
        return self.index.ntotal

    @classmethod
    def build(cls, records: Iterable[ProfileRecord], embedder) -> "ProfileIndex":
        faiss = _import_faiss()
        records = list(records)
        if not records:
            raise ValueError("Cannot build an index without profiles")

        vecs = [unwrap_vector(embedder.embed(profile_text(r))) for r in records]
        dim = min(len(v) for v in vecs)
        if dim == 0:
            raise MalformedVectorError("Embedding provider returned an empty vector")
        if any(len(v) != dim for v in vecs):
            logger.warning("Embedding sizes differ; truncating all vectors to %d dims", dim)

        embs = _l2_normalize(np.vstack([v[:dim] for v in vecs]).astype(np.float32))
        index = faiss.IndexFlatIP(dim)
        index.add(embs)
        return cls(index, [r.id for r in records])

    def save(self, index_path: str) -> None:
        faiss = _import_faiss()
        os.makedirs(os.path.dirname(os.path.abspath(index_path)), exist_ok=True)
        faiss.write_index(self.index, index_path)
        np.save(ids_path_for(index_path).as_posix(), np.array(self.ids))

    @classmethod
    def load(cls, index_path: str) -> "ProfileIndex":
        faiss = _import_faiss()
        ids_path = ids_path_for(index_path)
        if not ids_path.exists():
            raise FileNotFoundError(f"ids sidecar not found at {ids_path}")
        index = faiss.read_index(index_path)
        ids = np.load(ids_path.as_posix()).astype(str).tolist()
        return cls(index, ids)

    def search(self, query_vector, top_n: int) -> List[Tuple[str, float]]:
        """Return up to top_n (profile id, cosine distance) pairs, nearest first."""
        # same drift rule as align_vectors: drop trailing query dims, never pad
        q = unwrap_vector(query_vector)[: self.dim]
        if len(q) != self.dim:
            raise MalformedVectorError(f"Query dim {len(q)} < index dim {self.dim}")
        k = min(top_n, self.index.ntotal)
        if k <= 0:
            return []
        qvec = _l2_normalize(q.reshape(1, -1).astype(np.float32))
        D, I = self.index.search(qvec, k)
        out: List[Tuple[str, float]] = []
        for sim, row in zip(D[0].tolist(), I[0].tolist()):
            if row < 0:
                continue
            out.append((self.ids[row], 1.0 - float(sim)))
        return out


def main():
    from ..factory import build_embedder, build_store
    from ..log import configure_logging
    from ..settings import settings

    ap = argparse.ArgumentParser(description="Embed every profile and write a FAISS index.")
    ap.add_argument("--out", default=settings.FAISS_INDEX_PATH or "data/index/faiss.index", help="Index output path")
    args = ap.parse_args()

    configure_logging(settings.LOG_LEVEL)
    embedder = build_embedder(settings)
    if embedder is None:
        raise SystemExit("EMBED_BACKEND is 'none'; nothing to index with.")

    store = build_store(settings)
    records = [r for r in (store.get_record(pid) for pid in store.list_candidate_ids()) if r is not None]
    index = ProfileIndex.build(records, embedder)
    index.save(args.out)
    logger.info("Indexed %d profiles (dim=%d) into %s", len(records), index.dim, args.out)


if __name__ == "__main__":
    main()
