"""
Shared building blocks for the site API.

`core/` holds the pieces every page package needs (DB pool, logging).
Page-specific SQL and view logic live in their own package
(e.g. `category_page/`).
"""
