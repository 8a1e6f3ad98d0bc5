"""
Выбор миниатюры товара с учетом конфигурируемых вариантов.
"""

from typing import Optional

from storefront.schemas.catalog import Product

# Значение, которым каталог помечает отсутствующее изображение
NO_SELECTION = "no_selection"


def _has_image(image: Optional[str]) -> bool:
    return bool(image) and image != NO_SELECTION


def product_thumbnail_path(product: Product, ignore_config: bool = False) -> Optional[str]:
    """
    Возвращает изображение для миниатюры товара.

    Для конфигурируемого товара, вариант которого не выбран (или если
    ignore_config=True), берется изображение первого варианта. Если у него
    изображения нет, используется первый вариант с изображением, а затем
    основное изображение товара.

    Args:
        product: Товар
        ignore_config: Игнорировать выбранную конфигурацию

    Returns:
        Optional[str]: Путь к изображению
    """
    if isinstance(product, dict):
        product = Product.model_validate(product)

    thumbnail = product.image
    children = product.configurable_children
    if (
        product.type_id == "configurable"
        and children
        and (ignore_config or not product.is_configured)
        and "image" in children[0].model_fields_set
    ):
        thumbnail = children[0].image
        if not _has_image(thumbnail):
            child_with_image = next((c for c in children if _has_image(c.image)), None)
            thumbnail = child_with_image.image if child_with_image else product.image
    return thumbnail
