"""Blog post summaries rendered by the virtualized post list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from listwindow.ui_runtime.items import ItemSequence

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, slots=True)
class PostSummary:
    """Parsed post metadata supplied by the content collection."""

    slug: str
    title: str
    date: str
    description: str = ""
    draft: bool = False

    @property
    def published_on(self) -> date:
        return parse_post_date(self.date)

    @property
    def display_date(self) -> str:
        return format_post_date(self.date)


def parse_post_date(value: str) -> date:
    """Parse the calendar date at the start of an ISO date or timestamp.

    Any time or offset suffix is ignored so the day never shifts with the
    reader's timezone.
    """
    text = value.strip()
    if len(text) < 10:
        raise ValueError(f"invalid post date: {value!r}")
    return date.fromisoformat(text[:10])


def format_post_date(value: str) -> str:
    """Format a post date as e.g. `March 5, 2024`."""
    day = parse_post_date(value)
    return f"{_MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def sort_posts(posts: Iterable[PostSummary]) -> list[PostSummary]:
    """Return posts newest first, ties broken by slug."""
    ordered = sorted(posts, key=lambda post: post.slug)
    return sorted(ordered, key=lambda post: post.published_on, reverse=True)


def post_sequence(posts: Iterable[PostSummary], *, include_drafts: bool = False) -> ItemSequence[PostSummary]:
    """Build the keyed, sorted item sequence for the post list."""
    visible = (post for post in posts if include_drafts or not post.draft)
    return ItemSequence(sort_posts(visible), key=lambda post: post.slug)
