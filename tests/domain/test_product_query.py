"""Tests for the catalog listing query: parameter parsing, predicate and sort."""

import pytest
from protean.exceptions import ValidationError

from marketplace.product.query import ProductQuery, parse_sort


class TestFromParams:
    def test_defaults(self):
        query = ProductQuery.from_params()
        assert query.page == 1
        assert query.limit == 10
        assert query.offset == 0
        assert query.criteria() is None

    def test_string_parameters_are_parsed(self):
        query = ProductQuery.from_params(page="3", limit="5", min_price="10", max_price="99.5")
        assert query.page == 3
        assert query.limit == 5
        assert query.offset == 10
        assert query.min_price == 10.0
        assert query.max_price == 99.5

    @pytest.mark.parametrize("value", ["0", "-2", "abc", ""])
    def test_invalid_page_and_limit_fall_back(self, value):
        query = ProductQuery.from_params(page=value, limit=value)
        assert query.page == 1
        assert query.limit == 10

    def test_configured_default_limit(self):
        assert ProductQuery.from_params(default_limit=25).limit == 25

    def test_blank_search_is_ignored(self):
        assert ProductQuery.from_params(search="   ").search is None

    def test_unparsable_price_rejected(self):
        with pytest.raises(ValidationError) as exc:
            ProductQuery.from_params(min_price="cheap")
        assert "minPrice" in exc.value.messages

    def test_any_filter_yields_criteria(self):
        assert ProductQuery.from_params(category="books").criteria() is not None
        assert ProductQuery.from_params(search="lamp").criteria() is not None
        assert ProductQuery.from_params(max_price="10").criteria() is not None


class TestParseSort:
    def test_default_is_newest_first(self):
        assert parse_sort(None) == ["-created_at"]

    def test_multiple_keys(self):
        assert parse_sort("-price,name") == ["-price", "name"]

    def test_snake_case_accepted(self):
        assert parse_sort("updated_at") == ["updated_at"]

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_sort("vendor_id")
        assert "sort" in exc.value.messages
