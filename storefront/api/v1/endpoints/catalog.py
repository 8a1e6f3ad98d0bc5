"""
API endpoints помощников каталога.

Содержит генерацию slug, хлебных крошек, выбор миниатюры товара
и построение поисковых запросов для страниц витрины.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.core.config import ProductsSettings, get_products_settings
from storefront.schemas.catalog import BreadcrumbRoute, Category, Product
from storefront.schemas.search import CategoryQueryRequest, SearchQueryOut, SlugOut, ThumbnailOut
from storefront.services import (
    bread_crumb_routes,
    build_filter_products_query,
    prepare_cool_bags_query,
    prepare_new_products_query,
    prepare_page_not_found_query,
    prepare_quick_search_query,
    product_thumbnail_path,
    slugify,
)

router = APIRouter()


@router.get("/slugify", response_model=SlugOut)
def get_slug(text: str = Query(..., description="Исходный текст")):
    """
    Получить slug для текста.

    Example:
        {"slug": "create-slugify"}
    """
    return {"slug": slugify(text)}


@router.post("/breadcrumbs", response_model=List[BreadcrumbRoute])
def get_breadcrumbs(
    category_path: List[Category],
    config: ProductsSettings = Depends(get_products_settings),
):
    """
    Получить хлебные крошки для пути категорий.

    Args:
        category_path: Категории от корня к текущей
        config: Настройки каталога

    Returns:
        List[BreadcrumbRoute]: Ссылки на категории
    """
    return bread_crumb_routes(category_path, config=config)


@router.post("/thumbnail", response_model=ThumbnailOut)
def get_thumbnail(
    product: Product,
    ignore_config: bool = Query(False, description="Игнорировать выбранную конфигурацию"),
):
    """Получить изображение для миниатюры товара."""
    return {"thumbnail": product_thumbnail_path(product, ignore_config=ignore_config)}


@router.post("/queries/category", response_model=SearchQueryOut)
def get_category_query(
    payload: CategoryQueryRequest,
    config: ProductsSettings = Depends(get_products_settings),
):
    """
    Построить запрос листинга категории с выбранными фильтрами.

    Args:
        payload: Категория, выбранные фильтры и фасеты
        config: Настройки каталога

    Returns:
        SearchQueryOut: Сериализованный поисковый запрос
    """
    query = build_filter_products_query(
        payload.category,
        payload.chosen_filters,
        default_filters=payload.default_filters,
        config=config,
    )
    return query.to_dict()


@router.get("/queries/new-products", response_model=SearchQueryOut)
def get_new_products_query():
    """Запрос блока новинок."""
    return prepare_new_products_query().to_dict()


@router.get("/queries/cool-bags", response_model=SearchQueryOut)
def get_cool_bags_query():
    return prepare_cool_bags_query().to_dict()


@router.get("/queries/quick-search", response_model=SearchQueryOut)
def get_quick_search_query(
    q: str = Query(..., min_length=1, description="Поисковая строка"),
    config: ProductsSettings = Depends(get_products_settings),
):
    """Запрос быстрого поиска."""
    return prepare_quick_search_query(q, config=config).to_dict()


@router.get("/queries/page-not-found", response_model=SearchQueryOut)
def get_page_not_found_query():
    """Запрос товаров для страницы 404."""
    return prepare_page_not_found_query().to_dict()
