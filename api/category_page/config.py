"""
Page configuration: which category a page instance serves and its static copy.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CATEGORY_SLUG = "oral-health-tips"


@dataclass(frozen=True)
class CategoryPageConfig:
    category_slug: str = DEFAULT_CATEGORY_SLUG
    site_name: str = "Pediatric Dentist Directory"

    # Metadata used when the category row does not exist.
    not_found_title: str = "Oral Health Tips for Kids"
    not_found_description: str = (
        "Expert oral health tips to help families protect kids’ smiles with preventive care at home."
    )
    not_found_heading: str = "Page not found"
    not_found_body: str = "The page you were looking for has moved or no longer exists."
    not_found_link_label: str = "Back to the directory"
    fallback_description: str = (
        "Practical pediatric oral health advice covering brushing routines, diet tips, and preventative care."
    )

    hero_label: str = "Family Oral Care Guides"
    hero_fallback_description: str = (
        "Actionable oral health guidance from pediatric dental specialists to keep smiles bright at every age."
    )
    image_placeholder_label: str = "Oral Health Tips"
    empty_state_title: str = "More oral health tips coming soon"
    empty_state_body: str = (
        "We're preparing new family-friendly guides. Check back shortly or browse other categories in the sidebar."
    )
    read_link_label: str = "Read tip"
    related_articles_limit: int = 3

    @property
    def path(self) -> str:
        return f"/{self.category_slug}/"


def category_slug() -> str:
    return os.environ.get("CATEGORY_PAGE_SLUG", DEFAULT_CATEGORY_SLUG).strip() or DEFAULT_CATEGORY_SLUG


def default_config() -> CategoryPageConfig:
    return CategoryPageConfig(category_slug=category_slug())
