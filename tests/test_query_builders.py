"""
Тесты построителей поисковых запросов каталога.
"""

from storefront.core.config import ProductsSettings
from storefront.schemas.catalog import Category, FilterSelection
from storefront.services.query_builders import (
    base_filter_products_query,
    build_filter_products_query,
    collect_category_ids,
    prepare_cool_bags_query,
    prepare_new_products_query,
    prepare_page_not_found_query,
    prepare_quick_search_query,
)


def filter_values(query):
    return [(f["key"], f["value"]) for f in query.applied_filters]


class TestCollectCategoryIds:
    def test_preorder_traversal(self, category_tree):
        assert collect_category_ids(category_tree) == [1, 2, 3, 4, 5, 6]

    def test_leaf_category(self):
        assert collect_category_ids(Category(id=7)) == [7]

    def test_each_id_appears_once(self, category_tree):
        ids = collect_category_ids(category_tree)
        assert len(ids) == len(set(ids))

    def test_null_children_are_ignored(self):
        category = Category.model_validate(
            {"id": 1, "children_data": [None, {"id": 2, "children_data": [None]}]}
        )
        assert collect_category_ids(category) == [1, 2]

    def test_string_ids_pass_through(self):
        category = Category.model_validate(
            {"id": "cat-1", "children_data": [{"id": "cat-2"}, {"id": 3}]}
        )
        assert collect_category_ids(category) == ["cat-1", "cat-2", 3]

    def test_deep_tree_does_not_recurse(self):
        root = node = Category(id=0)
        for category_id in range(1, 3000):
            child = Category(id=category_id)
            node.children_data = [child]
            node = child
        ids = collect_category_ids(root)
        assert ids[0] == 0
        assert ids[1:] == list(range(1, 3000))


class TestBaseFilterProductsQuery:
    def test_filters(self, category_tree, products_config):
        query = base_filter_products_query(category_tree, config=products_config)
        assert filter_values(query) == [
            ("visibility", {"in": [2, 3, 4]}),
            ("status", {"in": [0, 1, 2]}),
            ("category_ids", {"in": [1, 2, 3, 4, 5, 6]}),
        ]
        assert query.available_filters == []

    def test_in_stock_filter_when_out_of_stock_hidden(self, category_tree, in_stock_only_config):
        query = base_filter_products_query(category_tree, config=in_stock_only_config)
        assert query.get_applied_filter("stock.is_in_stock")["value"] == {"eq": True}
        assert [f["key"] for f in query.applied_filters] == [
            "visibility",
            "status",
            "stock.is_in_stock",
            "category_ids",
        ]

    def test_available_filters(self, category_tree, products_config):
        query = base_filter_products_query(
            category_tree, ["color", "size"], config=products_config
        )
        assert query.available_filters == [
            {"field": "color", "scope": "catalog", "options": None},
            {"field": "size", "scope": "catalog", "options": None},
        ]

    def test_string_category_ids(self, products_config):
        category = {
            "id": "cat-1",
            "children_data": [
                {"id": "cat-2"},
                {"id": "", "children_data": [{"id": "cat-3"}]},
            ],
        }
        query = base_filter_products_query(category, config=products_config)
        assert query.get_applied_filter("category_ids")["value"] == {
            "in": ["cat-1", "cat-2", "cat-3"]
        }

    def test_accepts_plain_dict(self, products_config):
        query = base_filter_products_query(
            {"id": 10, "children_data": [{"id": 11}]}, config=products_config
        )
        assert query.get_applied_filter("category_ids")["value"] == {"in": [10, 11]}


class TestBuildFilterProductsQuery:
    def test_uses_configured_default_filters(self, category_tree, products_config):
        query = build_filter_products_query(category_tree, {}, config=products_config)
        assert [f["field"] for f in query.available_filters] == ["color", "size", "price"]

    def test_explicit_default_filters(self, category_tree, products_config):
        query = build_filter_products_query(
            category_tree, {}, default_filters=["material"], config=products_config
        )
        assert [f["field"] for f in query.available_filters] == ["material"]

    def test_empty_default_filters_are_respected(self, category_tree, products_config):
        query = build_filter_products_query(
            category_tree, {}, default_filters=[], config=products_config
        )
        assert query.available_filters == []

    def test_attribute_filter(self, category_tree, products_config):
        chosen = {"color": FilterSelection(attribute_code="color", id=49)}
        query = build_filter_products_query(category_tree, chosen, config=products_config)
        color = query.get_applied_filter("color")
        assert color["value"] == {"eq": 49}
        assert color["scope"] == "catalog"

    def test_price_with_lower_bound_only(self, category_tree, products_config):
        chosen = {"price": {"attribute_code": "price", "from": 10}}
        query = build_filter_products_query(category_tree, chosen, config=products_config)
        assert query.get_applied_filter("price")["value"] == {"gte": 10}

    def test_price_range(self, category_tree, products_config):
        chosen = [FilterSelection(attribute_code="price", from_=10, to=50)]
        query = build_filter_products_query(category_tree, chosen, config=products_config)
        assert query.get_applied_filter("price")["value"] == {"gte": 10, "lte": 50}

    def test_price_without_bounds(self, category_tree, products_config):
        chosen = [{"attribute_code": "price"}]
        query = build_filter_products_query(category_tree, chosen, config=products_config)
        assert query.get_applied_filter("price")["value"] == {}

    def test_chosen_filters_follow_base_filters(self, category_tree, products_config):
        chosen = {
            "color": {"attribute_code": "color", "id": 49},
            "size": {"attribute_code": "size", "id": 167},
        }
        query = build_filter_products_query(category_tree, chosen, config=products_config)
        assert [f["key"] for f in query.applied_filters] == [
            "visibility",
            "status",
            "category_ids",
            "color",
            "size",
        ]


def test_new_products_query():
    assert filter_values(prepare_new_products_query()) == [
        ("category.name", {"eq": "tees"}),
        ("visibility", {"in": [2, 3, 4]}),
    ]


def test_cool_bags_query():
    assert filter_values(prepare_cool_bags_query()) == [
        ("category.name", {"eq": "women"}),
        ("visibility", {"in": [2, 3, 4]}),
    ]


def test_quick_search_query(products_config):
    query = prepare_quick_search_query("shoes", config=products_config)
    assert query.search_text == "shoes"
    assert filter_values(query) == [
        ("visibility", {"in": [3, 4]}),
        ("status", {"in": [0, 1]}),
    ]


def test_quick_search_query_hides_out_of_stock():
    query = prepare_quick_search_query(
        "shoes", config=ProductsSettings(list_out_of_stock_products=False)
    )
    assert query.get_applied_filter("stock.is_in_stock")["value"] == {"eq": True}


def test_page_not_found_query():
    query = prepare_page_not_found_query()
    assert filter_values(query) == [("visibility", {"in": [2, 3, 4]})]
    assert query.search_text == ""
