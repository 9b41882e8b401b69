"""
Jinja2 renderer for the category page.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import service
from .config import CategoryPageConfig
from .schemas import PageData, PageMetadata

# Fixed English names; strftime('%B') follows the process locale.
MONTH_NAMES = (
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


def format_date(value: datetime) -> str:
    """`2024-01-05T...` -> `January 5, 2024`."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


class PageRenderer:
    """
    Renders category page documents.

    Usage:
        renderer = PageRenderer()
        html = renderer.render(data, metadata, config)
        html = renderer.render_not_found(metadata, config)
    """

    def __init__(self, templates_dir: Path | None = None):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_date"] = format_date
        self.env.globals["article_href"] = service.article_href

    def render(self, data: PageData, metadata: PageMetadata, config: CategoryPageConfig) -> str:
        template = self.env.get_template("category_page.html")
        return template.render(
            metadata=metadata,
            config=config,
            category=data.category,
            articles=data.articles,
            sidebar=service.sidebar_props(data, config),
        )

    def render_not_found(self, metadata: PageMetadata, config: CategoryPageConfig) -> str:
        template = self.env.get_template("not_found.html")
        return template.render(metadata=metadata, config=config)
