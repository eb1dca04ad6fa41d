import random

from course_recommender.search.lexical import (
    lexical_score,
    profile_text,
    rank_lexical,
    searchable_text,
)

from conftest import make_profile


def test_math_tutor_scenario():
    a = make_profile("A", tags=["math"])
    b = make_profile("B", tags=["art"])
    assert lexical_score("math tutor", a) == 3
    assert lexical_score("math tutor", b) == 0

    ranked = rank_lexical("math tutor", [a, b])
    assert [c.record for c in ranked] == [a]


def test_searchable_text_joins_fields_lowercased():
    p = make_profile("Kim Jiho", handle="MathKim", bio="Coach", description="", tags=["Math", "Exam Prep"])
    assert profile_text(p) == "Kim Jiho MathKim Coach Math Exam Prep"
    assert searchable_text(p) == "kim jiho mathkim coach math exam prep"


def test_text_hit_without_tag_hit():
    p = make_profile("Park", bio="Chemistry teacher", tags=["lab"])
    assert lexical_score("chemistry", p) == 1


def test_tag_bonus_is_case_insensitive():
    p = make_profile("Kim", tags=["Calculus"])
    assert lexical_score("CALCULUS", p) == 3


def test_terms_are_substrings_and_summed():
    p = make_profile("Kim", bio="olympiad coaching", tags=["mathematics"])
    # "math" in tag (+3), "coach" in bio (+1), "art" nowhere
    assert lexical_score("math coach art", p) == 4


def test_blank_query_matches_nothing(catalog):
    assert rank_lexical("   ", catalog) == []


def test_rank_orders_by_score(catalog):
    ranked = rank_lexical("math projects", catalog)
    names = [c.record.name for c in ranked]
    # Kim: math tag (3); Park: projects tag (3) + math in description (1)
    assert names == ["Park Minjun", "Kim Jiho"]
    assert [c.score for c in ranked] == [4, 3]


def test_ranking_is_deterministic_and_stable():
    rng = random.Random(1234)
    vocab = ["math", "art", "essay", "python", "lab", "history"]
    for _ in range(50):
        candidates = [
            make_profile(f"P{i}", tags=rng.sample(vocab, rng.randint(0, 3)), bio=rng.choice(vocab))
            for i in range(rng.randint(0, 12))
        ]
        query = " ".join(rng.sample(vocab, rng.randint(1, 3)))

        first = rank_lexical(query, candidates)
        second = rank_lexical(query, list(candidates))
        assert [c.record.id for c in first] == [c.record.id for c in second]

        order = {c.id: i for i, c in enumerate(candidates)}
        for prev, nxt in zip(first, first[1:]):
            assert prev.score >= nxt.score
            if prev.score == nxt.score:
                assert order[prev.record.id] < order[nxt.record.id]
        assert all(c.score > 0 for c in first)
