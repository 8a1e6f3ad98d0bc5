"""
Схемы данных каталога: категории, товары и выбранные фильтры.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """
    Категория каталога с вложенными подкатегориями.

    Attributes:
        id: Идентификатор категории
        name: Отображаемое название
        slug: URL-friendly название категории
        children_data: Подкатегории в порядке отображения
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    children_data: Optional[List[Optional["Category"]]] = None


class FilterSelection(BaseModel):
    """
    Выбранное пользователем значение фильтра.

    Для цены используется диапазон from/to, для остальных атрибутов id.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    attribute_code: str
    id: Any = None
    from_: Optional[Union[int, float]] = Field(None, alias="from")
    to: Optional[Union[int, float]] = None


class ConfigurableChild(BaseModel):
    """Дочерний вариант конфигурируемого товара."""

    model_config = ConfigDict(extra="allow")

    image: Optional[str] = None


class Product(BaseModel):
    """
    Товар в объеме, нужном для выбора миниатюры.

    Attributes:
        image: Основное изображение товара
        type_id: Тип товара (simple, configurable, ...)
        configurable_children: Варианты конфигурируемого товара
        is_configured: Вариант уже выбран пользователем
    """

    model_config = ConfigDict(extra="allow")

    image: Optional[str] = None
    type_id: Optional[str] = None
    configurable_children: Optional[List[ConfigurableChild]] = None
    is_configured: Optional[bool] = None


class BreadcrumbRoute(BaseModel):
    """Элемент хлебных крошек."""

    name: Optional[str] = None
    route_link: str
