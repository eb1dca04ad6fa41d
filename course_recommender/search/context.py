# Render ranked profiles into the context block embedded in the system prompt.

from __future__ import annotations

from typing import Iterable

from .types import FOLLOWERS, FREE_COURSES, PAID_COURSES, ProfileRecord

PROFILE_TEMPLATE = """\
Influencer: {name} (@{handle})
Bio: {bio}
Description: {description}
Specialties: {tags}
Followers: {followers}
Free courses: {free_courses}
Paid courses: {paid_courses}"""

BLOCK_SEPARATOR = "\n\n"


def _count(value: float, grouped: bool = False) -> str:
    # only follower counts get thousands separators
    sep = "," if grouped else ""
    if isinstance(value, int) or float(value).is_integer():
        return format(int(value), sep + "d")
    return format(value, sep)


def render_profile(p: ProfileRecord) -> str:
    return PROFILE_TEMPLATE.format(
        name=p.name,
        handle=p.handle,
        bio=p.bio,
        description=p.description,
        tags=", ".join(p.tags),
        followers=_count(p.stat(FOLLOWERS), grouped=True),
        free_courses=_count(p.stat(FREE_COURSES)),
        paid_courses=_count(p.stat(PAID_COURSES)),
    )


def render_context(profiles: Iterable[ProfileRecord]) -> str:
    """One block per profile in ranked order, separated by a blank line."""
    return BLOCK_SEPARATOR.join(render_profile(p) for p in profiles)
