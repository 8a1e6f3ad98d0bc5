"""
Сервисы витрины.

Импортирует все функции-помощники для удобного доступа.
"""

from .breadcrumbs import bread_crumb_routes
from .query_builders import (
    base_filter_products_query,
    build_filter_products_query,
    collect_category_ids,
    prepare_cool_bags_query,
    prepare_new_products_query,
    prepare_page_not_found_query,
    prepare_quick_search_query,
)
from .search_query import SearchQuery
from .slug import slugify
from .thumbnails import product_thumbnail_path

__all__ = [
    "SearchQuery",
    "slugify",
    "bread_crumb_routes",
    "product_thumbnail_path",
    "collect_category_ids",
    "base_filter_products_query",
    "build_filter_products_query",
    "prepare_new_products_query",
    "prepare_cool_bags_query",
    "prepare_quick_search_query",
    "prepare_page_not_found_query",
]
