from course_recommender.search.context import render_context, render_profile
from course_recommender.search.types import ProfileRecord

from conftest import make_profile


def test_render_profile_template(catalog):
    block = render_profile(catalog[0])
    assert block == (
        "Influencer: Kim Jiho (@mathkim)\n"
        "Bio: Olympiad coach\n"
        "Description: Calculus lessons\n"
        "Specialties: math, calculus\n"
        "Followers: 128,400\n"
        "Free courses: 4\n"
        "Paid courses: 7"
    )


def test_missing_stats_render_as_zero(catalog):
    block = render_profile(catalog[2])
    assert "Followers: 0" in block
    assert "Free courses: 0" in block
    assert "Paid courses: 0" in block


def test_string_stats_from_store_are_formatted():
    p = ProfileRecord.from_mapping({"name": "X", "stats": '{"followers": "15200", "paid_courses": 2.0}'})
    block = render_profile(p)
    assert "Followers: 15,200" in block
    assert "Paid courses: 2" in block


def test_blocks_joined_by_blank_line_in_ranked_order(catalog):
    ranked = [catalog[1], catalog[0]]
    text = render_context(ranked)
    blocks = text.split("\n\n")
    assert len(blocks) == 2
    assert blocks[0].startswith("Influencer: Lee Seoyeon")
    assert blocks[1].startswith("Influencer: Kim Jiho")


def test_render_is_pure(catalog):
    assert render_context(catalog) == render_context(catalog)
    assert render_context([]) == ""


def test_empty_tags_render_empty_specialties():
    assert "Specialties: \n" in render_profile(make_profile("Solo"))


def test_only_followers_are_grouped():
    p = ProfileRecord.from_mapping(
        {"name": "Big", "stats": {"followers": 2500000, "free_courses": 1500, "paid_courses": 1200}}
    )
    block = render_profile(p)
    assert "Followers: 2,500,000" in block
    assert "Free courses: 1500" in block
    assert "Paid courses: 1200" in block
