"""
Category page orchestration.

Flow:
1) Load the category, its published articles and the sibling categories
   (three independent reads, awaited together)
2) Derive title/description metadata from the loaded category
3) Build the props the sidebar partial renders
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from . import repository
from .config import CategoryPageConfig
from .schemas import (
    Article,
    AuthorRef,
    Category,
    CategoryRef,
    OpenGraph,
    PageData,
    PageMetadata,
    SiblingCategory,
)

logger = logging.getLogger(__name__)


def article_href(slug: str) -> str:
    return f"/blog/{slug}/"


def category_href(slug: str) -> str:
    return f"/{slug}/"


def _article_from_row(row: dict[str, Any]) -> Article:
    return Article(
        id=int(row["id"]),
        slug=str(row["slug"]),
        title=str(row["title"]),
        excerpt=row.get("excerpt"),
        featured_image=row.get("featured_image"),
        status=row["status"],
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        author=AuthorRef(name=str(row["author_name"]), slug=str(row["author_slug"])),
        category=CategoryRef(name=str(row["category_name"]), slug=str(row["category_slug"])),
    )


def _sibling_from_row(row: dict[str, Any]) -> SiblingCategory:
    return SiblingCategory(
        name=str(row["name"]),
        slug=str(row["slug"]),
        count=len(row.get("article_ids") or []),
    )


async def load_page_data(config: CategoryPageConfig) -> PageData | None:
    """
    Return the page data, or None when the category does not exist.

    All three reads run concurrently and must all succeed; the first failure
    propagates to the caller. The not-found check only happens once every
    read has resolved.
    """
    slug = config.category_slug
    category_row, article_rows, sibling_rows = await asyncio.gather(
        repository.get_category(slug),
        repository.list_published_articles(slug),
        repository.list_sibling_categories(slug),
    )

    if category_row is None:
        logger.warning("category_page_not_found slug=%s", slug)
        return None

    data = PageData(
        category=Category(**category_row),
        articles=[_article_from_row(row) for row in article_rows],
        sibling_categories=[_sibling_from_row(row) for row in sibling_rows],
    )
    logger.info(
        "category_page_loaded slug=%s articles=%s siblings=%s",
        slug,
        len(data.articles),
        len(data.sibling_categories),
    )
    return data


def page_metadata(data: PageData | None, config: CategoryPageConfig) -> PageMetadata:
    if data is None:
        # Title and description only; no Open Graph tags for a missing category.
        return PageMetadata(
            title=config.not_found_title,
            description=config.not_found_description,
        )

    category = data.category
    # `is not None` keeps an explicit empty override, matching a nullish fallback.
    title = category.seo_title if category.seo_title is not None else f"{category.name} | {config.site_name}"
    if category.seo_description is not None:
        description = category.seo_description
    elif category.description is not None:
        description = category.description
    else:
        description = config.fallback_description

    return PageMetadata(
        title=title,
        description=description,
        open_graph=OpenGraph(title=title, description=description),
    )


async def build_metadata(config: CategoryPageConfig) -> PageMetadata:
    """
    Standalone metadata entrypoint: loads the page data itself.
    """
    return page_metadata(await load_page_data(config), config)


@dataclass(frozen=True)
class SidebarProps:
    category_name: str
    sibling_categories: list[SiblingCategory]
    related_articles: list[Article]
    category_link_builder: Callable[[str], str]
    active_category_slug: str


def sidebar_props(data: PageData, config: CategoryPageConfig) -> SidebarProps:
    return SidebarProps(
        category_name=data.category.name,
        sibling_categories=data.sibling_categories,
        related_articles=data.articles[: config.related_articles_limit],
        category_link_builder=category_href,
        active_category_slug=config.category_slug,
    )
