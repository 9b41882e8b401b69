"""
Category page reads (raw SQL).

Every query filters on `PUBLISHED` through a bound parameter so drafts and
archived articles never reach the page or the sibling counts.
"""

from __future__ import annotations

from core import db

from .schemas import ArticleStatus


async def get_category(slug: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, slug, description, seo_title, seo_description
        FROM categories
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )


async def list_published_articles(category_slug: str) -> list[dict]:
    """
    Published articles of one category with their author and category refs.

    Ordered newest first; `created_at` breaks ties and orders rows without a
    publish date (PostgreSQL puts NULLs first for DESC).
    """
    return await db.fetch_all(
        """
        SELECT
            a.id,
            a.slug,
            a.title,
            a.excerpt,
            a.featured_image,
            a.status,
            a.published_at,
            a.created_at,
            au.name AS author_name,
            au.slug AS author_slug,
            c.name AS category_name,
            c.slug AS category_slug
        FROM articles a
        JOIN categories c ON c.id = a.category_id
        JOIN authors au ON au.id = a.author_id
        WHERE a.status = $2
          AND c.slug = $1
        ORDER BY a.published_at DESC NULLS FIRST, a.created_at DESC
        """,
        category_slug,
        ArticleStatus.PUBLISHED.value,
    )


async def list_sibling_categories(exclude_slug: str) -> list[dict]:
    """
    Other categories with at least one published article.

    The inner join drops categories without published articles; `article_ids`
    is the list the caller counts.
    """
    return await db.fetch_all(
        """
        SELECT
            c.name,
            c.slug,
            array_agg(a.id ORDER BY a.id) AS article_ids
        FROM categories c
        JOIN articles a
          ON a.category_id = c.id
         AND a.status = $2
        WHERE c.slug <> $1
        GROUP BY c.id, c.name, c.slug
        ORDER BY c.name ASC
        """,
        exclude_slug,
        ArticleStatus.PUBLISHED.value,
    )
