# ===============================================
# tests/conftest.py
# Fakes for the external collaborators so the
# suite runs without Redis, Ollama or OpenAI.
# ===============================================

import threading

import pytest

from course_recommender.errors import ProviderUnavailable
from course_recommender.search.types import ProfileRecord
from course_recommender.store import MemoryProfileStore


class FakeEmbedder:
    """Looks texts up in a dict; unknown texts get `default` (or raise when default is None)."""

    def __init__(self, vectors, default=None):
        self.vectors = vectors
        self.default = default
        self.calls = []
        self._lock = threading.Lock()

    def embed(self, text):
        with self._lock:
            self.calls.append(text)
        if text in self.vectors:
            return self.vectors[text]
        if self.default is None:
            raise ProviderUnavailable(f"no vector for {text!r}")
        return self.default


class FailingEmbedder:
    def __init__(self):
        self.calls = 0

    def embed(self, text):
        self.calls += 1
        raise ProviderUnavailable("embedding service down")


class FakeIndex:
    def __init__(self, hits):
        self.hits = hits
        self.queries = []

    @property
    def size(self):
        return len(self.hits)

    def search(self, query_vector, top_n):
        self.queries.append((list(query_vector), top_n))
        return self.hits[:top_n]


class FakeModelClient:
    def __init__(self, reply="Try Kim Jiho's calculus course.", error=None):
        self.model = "fake-model"
        self.reply = reply
        self.error = error
        self.seen = []

    def generate(self, messages, params):
        self.seen.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.reply, {"engine": "fake", "model": self.model}


def make_profile(name, pid=None, tags=(), **kw):
    pid = pid or name.lower().replace(" ", "-")
    return ProfileRecord(id=pid, slug=pid, name=name, tags=list(tags), **kw)


@pytest.fixture
def catalog():
    return [
        make_profile(
            "Kim Jiho", pid="math-kim", handle="mathkim",
            bio="Olympiad coach", description="Calculus lessons",
            tags=["math", "calculus"],
            stats={"followers": 128400, "free_courses": 4, "paid_courses": 7},
        ),
        make_profile(
            "Lee Seoyeon", pid="english-lee", handle="seoyeon",
            bio="Reading coach", description="Essay feedback",
            tags=["english", "essay"],
            stats={"followers": 86200},
        ),
        make_profile(
            "Park Minjun", pid="science-park", handle="labpark",
            bio="Chemistry teacher", description="Lab projects and math for physics",
            tags=["chemistry", "projects"],
        ),
    ]


@pytest.fixture
def store(catalog):
    return MemoryProfileStore(catalog)
