"""
Конфигурация витрины.

Содержит настройки каталога товаров, уровень логирования и режим отладки.
"""

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ProductsSettings(BaseModel):
    """
    Настройки каталога товаров.

    Attributes:
        use_short_catalog_urls: Короткие ссылки на категории ("/men" вместо "/c/men")
        default_filters: Атрибуты, доступные для фильтрации по умолчанию
        list_out_of_stock_products: Показывать товары, которых нет в наличии
    """

    use_short_catalog_urls: bool = Field(
        default=False, description="Короткие URL категорий без префикса /c/"
    )
    default_filters: List[str] = Field(
        default_factory=lambda: ["color", "size", "price", "erin_recommends"],
        description="Коды атрибутов для фасетной фильтрации",
    )
    list_out_of_stock_products: bool = Field(
        default=True, description="Показывать товары не в наличии"
    )


class Settings(BaseSettings):
    """
    Настройки приложения, загружаемые из переменных окружения.

    Вложенные настройки задаются через двойное подчеркивание, например
    STOREFRONT_PRODUCTS__USE_SHORT_CATALOG_URLS=true.

    Attributes:
        DEBUG: Режим отладки
        LOG_LEVEL: Уровень логирования
        products: Настройки каталога товаров
    """

    DEBUG: bool = Field(default=False, description="Режим отладки")
    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")
    products: ProductsSettings = Field(default_factory=ProductsSettings)

    class Config:
        env_file = ".env"
        env_prefix = "STOREFRONT_"
        env_nested_delimiter = "__"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Возвращает настройки приложения (загружаются один раз на процесс).

    Returns:
        Settings: Экземпляр настроек
    """
    return Settings()


def get_products_settings() -> ProductsSettings:
    """Dependency для получения настроек каталога."""
    return get_settings().products
