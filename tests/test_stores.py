import json
from pathlib import Path

import pytest

from course_recommender.search.types import ProfileRecord
from course_recommender.store import MemoryProfileStore, RedisProfileStore, YamlProfileStore

from conftest import make_profile


# -----------------------------------------------
# ProfileRecord normalization
# -----------------------------------------------
def test_from_mapping_parses_json_fields():
    rec = ProfileRecord.from_mapping({
        "id": "7",
        "slug": "math-kim",
        "name": "Kim Jiho",
        "Instagram": "mathkim",
        "username": "ignored",
        "tags": json.dumps(["math", "calculus"]),
        "stats": json.dumps({"followers": 1200}),
    })
    assert rec.id == "7"
    assert rec.handle == "mathkim"
    assert rec.tags == ["math", "calculus"]
    assert rec.stat("followers") == 1200
    assert rec.stat("paid_courses") == 0


def test_from_mapping_requires_name():
    assert ProfileRecord.from_mapping({"slug": "x"}) is None
    assert ProfileRecord.from_mapping({"slug": "x", "name": "  "}) is None


def test_from_mapping_defaults():
    rec = ProfileRecord.from_mapping({"slug": "lee", "name": "Lee", "username": "lee.en", "tags": "not json"})
    assert rec.id == "lee"
    assert rec.handle == "lee.en"
    assert rec.tags == []
    assert rec.stats == {}


# -----------------------------------------------
# Memory + YAML stores
# -----------------------------------------------
def test_memory_store_keeps_insertion_order():
    a, b = make_profile("B"), make_profile("A")
    store = MemoryProfileStore([a, b])
    assert store.list_candidate_ids() == ["b", "a"]
    assert store.get_record("a") is b
    assert store.get_record("zzz") is None


def test_yaml_store_loads_and_skips_nameless(tmp_path):
    path = tmp_path / "profiles.yaml"
    path.write_text(
        "profiles:\n"
        "  - {id: '1', slug: a, name: Alpha, tags: [math], stats: {followers: 10}}\n"
        "  - {id: '2', slug: b}\n"
        "  - {slug: c, name: Gamma, Instagram: gam}\n",
        encoding="utf-8",
    )
    store = YamlProfileStore(str(path))
    assert store.list_candidate_ids() == ["1", "c"]
    assert store.get_record("c").handle == "gam"
    assert store.get_record("1").tags == ["math"]


def test_yaml_store_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlProfileStore(str(tmp_path / "nope.yaml"))


def test_bundled_catalog_loads():
    store = YamlProfileStore(str(Path(__file__).resolve().parents[1] / "data" / "profiles.yaml"))
    assert len(store.list_candidate_ids()) == 6


# -----------------------------------------------
# Redis store (fake client)
# -----------------------------------------------
class FakeRedis:
    def __init__(self, members, hashes):
        self.members = members
        self.hashes = hashes

    def smembers(self, key):
        assert key == "influencers"
        return set(self.members)

    def hgetall(self, key):
        return dict(self.hashes.get(key, {}))


def test_redis_store_reads_hashes():
    client = FakeRedis(
        ["science-park", "math-kim", "gone"],
        {
            "influencer:math-kim": {
                "id": "1", "name": "Kim Jiho", "Instagram": "mathkim",
                "tags": '["math"]', "stats": '{"followers": 5}',
            },
            "influencer:science-park": {"id": "2", "name": "Park Minjun", "tags": "[]"},
        },
    )
    store = RedisProfileStore(client)
    assert store.list_candidate_ids() == ["gone", "math-kim", "science-park"]

    kim = store.get_record("math-kim")
    assert kim.slug == "math-kim"
    assert kim.handle == "mathkim"
    assert kim.stat("followers") == 5
    assert store.get_record("gone") is None
