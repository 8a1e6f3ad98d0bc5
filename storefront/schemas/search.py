"""
Схемы запросов и ответов API поисковых запросов каталога.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from storefront.schemas.catalog import Category, FilterSelection


class AppliedFilterOut(BaseModel):
    key: str
    value: Dict[str, Any]
    scope: str
    options: Optional[Dict[str, Any]] = None


class AvailableFilterOut(BaseModel):
    field: str
    scope: str
    options: Optional[Dict[str, Any]] = None


class SearchQueryOut(BaseModel):
    """
    Сериализованный поисковый запрос.

    Attributes:
        applied_filters: Ограничивающие фильтры в порядке применения
        available_filters: Атрибуты для фасетной фильтрации
        search_text: Полнотекстовая строка поиска
    """

    applied_filters: List[AppliedFilterOut]
    available_filters: List[AvailableFilterOut]
    search_text: str = ""


class CategoryQueryRequest(BaseModel):
    """Тело запроса на построение фильтра листинга категории."""

    category: Category
    chosen_filters: Dict[str, FilterSelection] = Field(
        default_factory=dict, description="Выбранные фильтры по коду атрибута"
    )
    default_filters: Optional[List[str]] = Field(
        None, description="Фасеты; если не заданы, берутся из настроек"
    )


class SlugOut(BaseModel):
    slug: str


class ThumbnailOut(BaseModel):
    thumbnail: Optional[str] = None
