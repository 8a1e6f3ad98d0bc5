"""
Описание поискового запроса к каталогу.

SearchQuery накапливает фильтры, фасеты и поисковую строку.
Выполнением запроса занимается внешний поисковый движок.
"""

from copy import deepcopy
from typing import Any, Dict, List, Optional


class SearchQuery:
    """
    Неизменяемый (по соглашению) построитель поискового запроса.

    Каждый метод-модификатор возвращает новый экземпляр, исходный
    объект не меняется, поэтому вызовы можно объединять в цепочки:

        query = SearchQuery().apply_filter("visibility", {"in": [2, 3, 4]})
    """

    def __init__(
        self,
        applied_filters: Optional[List[Dict[str, Any]]] = None,
        available_filters: Optional[List[Dict[str, Any]]] = None,
        search_text: str = "",
    ):
        self._applied_filters = list(applied_filters or [])
        self._available_filters = list(available_filters or [])
        self._search_text = search_text

    def _copy(self, **changes) -> "SearchQuery":
        params = {
            "applied_filters": self._applied_filters,
            "available_filters": self._available_filters,
            "search_text": self._search_text,
        }
        params.update(changes)
        return SearchQuery(**params)

    def apply_filter(
        self,
        key: str,
        value: Dict[str, Any],
        scope: str = "default",
        options: Optional[Dict[str, Any]] = None,
    ) -> "SearchQuery":
        """
        Добавляет ограничивающий фильтр.

        Args:
            key: Поле документа (например, "visibility" или "stock.is_in_stock")
            value: Условие в виде {"оператор": значение}, например {"in": [3, 4]}
            scope: Область применения фильтра
            options: Дополнительные параметры для поискового движка

        Returns:
            SearchQuery: Новый запрос с добавленным фильтром
        """
        applied = {"key": key, "value": deepcopy(value), "scope": scope, "options": options}
        return self._copy(applied_filters=self._applied_filters + [applied])

    def add_available_filter(
        self,
        field: str,
        scope: str = "default",
        options: Optional[Dict[str, Any]] = None,
    ) -> "SearchQuery":
        """
        Регистрирует атрибут для фасетной фильтрации (агрегации).

        Returns:
            SearchQuery: Новый запрос с добавленным фасетом
        """
        available = {"field": field, "scope": scope, "options": options}
        return self._copy(available_filters=self._available_filters + [available])

    def set_search_text(self, text: str) -> "SearchQuery":
        """Возвращает новый запрос с полнотекстовой строкой поиска."""
        return self._copy(search_text=text)

    @property
    def applied_filters(self) -> List[Dict[str, Any]]:
        return deepcopy(self._applied_filters)

    @property
    def available_filters(self) -> List[Dict[str, Any]]:
        return deepcopy(self._available_filters)

    @property
    def search_text(self) -> str:
        return self._search_text

    def get_applied_filter(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Возвращает последний фильтр, примененный к полю.

        Args:
            key: Поле документа

        Returns:
            Optional[Dict[str, Any]]: Фильтр или None, если поле не фильтруется
        """
        for applied in reversed(self._applied_filters):
            if applied["key"] == key:
                return deepcopy(applied)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Представление запроса для сериализации в JSON."""
        return {
            "applied_filters": self.applied_filters,
            "available_filters": self.available_filters,
            "search_text": self._search_text,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, SearchQuery):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"<SearchQuery(filters={len(self._applied_filters)}, "
            f"facets={len(self._available_filters)}, text='{self._search_text}')>"
        )
