"""
Построители поисковых запросов для страниц каталога.

Все функции возвращают новый SearchQuery и не выполняют запрос:
это делает внешний поисковый движок.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from storefront.core.config import ProductsSettings, get_settings
from storefront.schemas.catalog import Category, FilterSelection
from storefront.services.search_query import SearchQuery

logger = logging.getLogger(__name__)

# Коды видимости товара: 2 - каталог, 3 - поиск, 4 - каталог и поиск
VISIBILITY_CATALOG_SEARCH = [2, 3, 4]
VISIBILITY_SEARCH = [3, 4]

# Коды статуса товара
STATUS_CATALOG = [0, 1, 2]
STATUS_SEARCH = [0, 1]

PRICE_ATTRIBUTE = "price"
CATALOG_SCOPE = "catalog"

ChosenFilters = Union[Mapping[str, Any], Iterable[Any]]


def _products_settings(config: Optional[ProductsSettings]) -> ProductsSettings:
    return config if config is not None else get_settings().products


def _apply_in_stock(query: SearchQuery, config: ProductsSettings) -> SearchQuery:
    if config.list_out_of_stock_products is False:
        query = query.apply_filter(key="stock.is_in_stock", value={"eq": True})
    return query


def collect_category_ids(parent_category: Category) -> List[Any]:
    """
    Собирает id категории и всех ее потомков (обход в глубину, pre-order).

    Подкатегории без id пропускаются, но их дети обходятся.

    Args:
        parent_category: Корневая категория

    Returns:
        List[Any]: id корня, затем id потомков в порядке обхода
    """
    category_ids = [parent_category.id]
    stack = list(reversed(parent_category.children_data or []))
    while stack:
        category = stack.pop()
        if category is None:
            continue
        if category.id:
            category_ids.append(category.id)
        if category.children_data:
            stack.extend(reversed(category.children_data))
    return category_ids


def base_filter_products_query(
    parent_category: Category,
    filters: Iterable[str] = (),
    config: Optional[ProductsSettings] = None,
) -> SearchQuery:
    """
    Базовый запрос товаров категории вместе со всеми подкатегориями.

    Args:
        parent_category: Категория листинга
        filters: Коды атрибутов, доступных для фасетной фильтрации
        config: Настройки каталога

    Returns:
        SearchQuery: Запрос с фильтрами видимости, статуса, наличия и категорий
    """
    if isinstance(parent_category, dict):
        parent_category = Category.model_validate(parent_category)
    config = _products_settings(config)

    query = (
        SearchQuery()
        .apply_filter(key="visibility", value={"in": VISIBILITY_CATALOG_SEARCH})
        .apply_filter(key="status", value={"in": STATUS_CATALOG})
    )
    query = _apply_in_stock(query, config)

    for attribute_code in filters:
        query = query.add_available_filter(field=attribute_code, scope=CATALOG_SCOPE)

    category_ids = collect_category_ids(parent_category)
    query = query.apply_filter(key="category_ids", value={"in": category_ids})
    logger.debug(f"Category {parent_category.id} query covers categories {category_ids}")
    return query


def _price_range(selection: FilterSelection) -> dict:
    price_range = {}
    if selection.from_ is not None:
        price_range["gte"] = selection.from_
    if selection.to is not None:
        price_range["lte"] = selection.to
    return price_range


def build_filter_products_query(
    current_category: Category,
    chosen_filters: ChosenFilters,
    default_filters: Optional[Iterable[str]] = None,
    config: Optional[ProductsSettings] = None,
) -> SearchQuery:
    """
    Запрос товаров категории с учетом выбранных пользователем фильтров.

    Args:
        current_category: Текущая категория
        chosen_filters: Выбранные фильтры (словарь по коду атрибута или список)
        default_filters: Фасеты; None - взять из настроек
        config: Настройки каталога

    Returns:
        SearchQuery: Запрос с фильтрами по атрибутам и диапазону цены
    """
    config = _products_settings(config)
    if default_filters is None:
        default_filters = config.default_filters

    query = base_filter_products_query(current_category, default_filters, config=config)

    if isinstance(chosen_filters, Mapping):
        chosen_filters = chosen_filters.values()

    for selection in chosen_filters:
        if not isinstance(selection, FilterSelection):
            selection = FilterSelection.model_validate(selection)

        if selection.attribute_code != PRICE_ATTRIBUTE:
            value = {"eq": selection.id}
        else:
            value = _price_range(selection)
        query = query.apply_filter(
            key=selection.attribute_code, value=value, scope=CATALOG_SCOPE
        )

    return query


def prepare_new_products_query() -> SearchQuery:
    """Запрос блока новинок (категория "tees")."""
    return (
        SearchQuery()
        .apply_filter(key="category.name", value={"eq": "tees"})
        .apply_filter(key="visibility", value={"in": VISIBILITY_CATALOG_SEARCH})
    )


def prepare_cool_bags_query() -> SearchQuery:
    """Запрос промо-блока сумок (категория "women")."""
    return (
        SearchQuery()
        .apply_filter(key="category.name", value={"eq": "women"})
        .apply_filter(key="visibility", value={"in": VISIBILITY_CATALOG_SEARCH})
    )


def prepare_quick_search_query(
    query_text: str, config: Optional[ProductsSettings] = None
) -> SearchQuery:
    """
    Запрос быстрого поиска по тексту.

    Args:
        query_text: Поисковая строка
        config: Настройки каталога

    Returns:
        SearchQuery: Запрос с текстом, видимостью "в поиске" и активным статусом
    """
    config = _products_settings(config)
    query = (
        SearchQuery()
        .set_search_text(query_text)
        .apply_filter(key="visibility", value={"in": VISIBILITY_SEARCH})
        .apply_filter(key="status", value={"in": STATUS_SEARCH})
    )
    return _apply_in_stock(query, config)


def prepare_page_not_found_query() -> SearchQuery:
    """Запрос товаров для страницы 404."""
    return SearchQuery().apply_filter(key="visibility", value={"in": VISIBILITY_CATALOG_SEARCH})
