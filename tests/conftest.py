"""Shared fixtures for the category page tests."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make the flat `api/` packages importable without an install.
API_ROOT = Path(__file__).parent.parent / "api"
sys.path.insert(0, str(API_ROOT))

from category_page import repository
from category_page.config import CategoryPageConfig

BASE_TIME = datetime(2024, 1, 5, 9, 30, tzinfo=timezone.utc)


def make_article_row(index: int, **overrides) -> dict:
    """Row shaped like `repository.list_published_articles` output."""
    row = {
        "id": index,
        "slug": f"tip-{index}",
        "title": f"Tip number {index}",
        "excerpt": f"Excerpt for tip {index}",
        "featured_image": None,
        "status": "PUBLISHED",
        "published_at": BASE_TIME - timedelta(days=index),
        "created_at": BASE_TIME - timedelta(days=index + 30),
        "author_name": "Dr. Maya Chen",
        "author_slug": "maya-chen",
        "category_name": "Oral Health Tips",
        "category_slug": "oral-health-tips",
    }
    row.update(overrides)
    return row


@pytest.fixture
def config() -> CategoryPageConfig:
    return CategoryPageConfig()


@pytest.fixture
def category_row() -> dict:
    return {
        "id": 7,
        "name": "Oral Health Tips",
        "slug": "oral-health-tips",
        "description": "Everyday habits for healthy little smiles.",
        "seo_title": None,
        "seo_description": None,
    }


@pytest.fixture
def sibling_rows() -> list[dict]:
    return [
        {"name": "Braces & Orthodontics", "slug": "orthodontics", "article_ids": [11, 12]},
        {"name": "First Visits", "slug": "first-visits", "article_ids": [21]},
    ]


@pytest.fixture
def fake_store(monkeypatch, category_row, sibling_rows):
    """
    Replace the three repository reads with in-memory results.

    Tests mutate `store` to shape the data; `calls` records each read.
    """
    store = {
        "category": category_row,
        "articles": [make_article_row(i) for i in range(1, 6)],
        "siblings": sibling_rows,
        "calls": [],
    }

    async def get_category(slug):
        store["calls"].append(("get_category", slug))
        return store["category"]

    async def list_published_articles(category_slug):
        store["calls"].append(("list_published_articles", category_slug))
        return store["articles"]

    async def list_sibling_categories(exclude_slug):
        store["calls"].append(("list_sibling_categories", exclude_slug))
        return store["siblings"]

    monkeypatch.setattr(repository, "get_category", get_category)
    monkeypatch.setattr(repository, "list_published_articles", list_published_articles)
    monkeypatch.setattr(repository, "list_sibling_categories", list_sibling_categories)
    return store
