"""
Pydantic read models for the category page.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ArticleStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class Category(BaseModel):
    id: int
    name: str
    slug: str
    description: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None


class AuthorRef(BaseModel):
    name: str
    slug: str


class CategoryRef(BaseModel):
    name: str
    slug: str


class Article(BaseModel):
    id: int
    slug: str
    title: str
    excerpt: str | None = None
    featured_image: str | None = None
    status: ArticleStatus
    published_at: datetime | None = None
    created_at: datetime
    author: AuthorRef
    category: CategoryRef


class SiblingCategory(BaseModel):
    name: str
    slug: str
    count: int = Field(..., ge=1)


class PageData(BaseModel):
    category: Category
    articles: list[Article]
    sibling_categories: list[SiblingCategory]


class OpenGraph(BaseModel):
    title: str
    description: str


class PageMetadata(BaseModel):
    title: str
    description: str
    open_graph: OpenGraph | None = None
