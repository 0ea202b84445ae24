from __future__ import annotations

from collections.abc import Callable

import pytest

from listwindow.runtime.events import RuntimeEventBus
from listwindow.site.posts import PostSummary
from listwindow.ui_runtime.items import ItemSequence


def make_rows(count: int, *, prefix: str = "row") -> ItemSequence[str]:
    return ItemSequence((f"{prefix}-{index}" for index in range(count)), key=lambda item: item)


@pytest.fixture
def bus() -> RuntimeEventBus:
    return RuntimeEventBus()


@pytest.fixture
def rows_factory() -> Callable[..., ItemSequence[str]]:
    return make_rows


@pytest.fixture
def sample_posts() -> list[PostSummary]:
    return [
        PostSummary(slug="virtualized-lists", title="Virtualized lists", date="2024-03-05"),
        PostSummary(slug="astro-mdx", title="Astro and MDX", date="2023-11-20"),
        PostSummary(slug="draft-notes", title="Draft notes", date="2024-06-01", draft=True),
        PostSummary(slug="dark-mode", title="Dark mode toggle", date="2024-03-05T08:00:00Z"),
    ]
