"""
Формирование хлебных крошек для пути категорий.
"""

from typing import Iterable, List, Optional

from storefront.core.config import ProductsSettings, get_settings
from storefront.schemas.catalog import BreadcrumbRoute, Category


def bread_crumb_routes(
    category_path: Iterable[Category], config: Optional[ProductsSettings] = None
) -> List[BreadcrumbRoute]:
    """
    Преобразует путь категорий в список ссылок для хлебных крошек.

    Args:
        category_path: Категории от корня к текущей
        config: Настройки каталога (по умолчанию из get_settings())

    Returns:
        List[BreadcrumbRoute]: Ссылки в исходном порядке

    Example:
        [{"name": "Men", "route_link": "/c/men"}]
    """
    if config is None:
        config = get_settings().products

    prefix = "/" if config.use_short_catalog_urls else "/c/"
    routes = []
    for category in category_path:
        if isinstance(category, dict):
            category = Category.model_validate(category)
        routes.append(
            BreadcrumbRoute(name=category.name, route_link=prefix + (category.slug or ""))
        )
    return routes
