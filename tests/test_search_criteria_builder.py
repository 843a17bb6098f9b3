from datetime import datetime

import pytest

from core.domain import Err, Ok
from core.domain.exceptions import ValidationException
from core.domain.search_criteria import ConditionType, Filter, SortOrder
from products.application.queries import ProductListArgs


def flatten(criteria):
    return [
        [(f.get_field(), f.get_value(), f.get_condition_type()) for f in group.get_filters()]
        for group in criteria.get_filter_groups()
    ]


def test_search_columns_share_one_like_group(builder):
    criteria = builder.build(ProductListArgs(search="shirt"))

    assert flatten(criteria) == [
        [("name", "%shirt%", "like"), ("sku", "%shirt%", "like")],
    ]


def test_empty_search_adds_nothing(builder):
    criteria = builder.build(ProductListArgs(search=""))
    assert criteria.get_filter_groups() == []


def test_search_without_columns_adds_nothing(builder):
    criteria = builder.with_columns(()).build(ProductListArgs(search="shirt"))
    assert criteria.get_filter_groups() == []


def test_like_filter_is_wrapped_in_wildcards(builder):
    criteria = builder.build(ProductListArgs(filter={"name": {"like": "blue"}}))
    assert flatten(criteria) == [[("name", "%blue%", "like")]]


def test_each_condition_becomes_its_own_group(builder):
    criteria = builder.build(ProductListArgs(filter={
        "price": {"gteq": 10, "lteq": 20},
        "status": {"eq": 1},
    }))

    assert flatten(criteria) == [
        [("price", 10, "gteq")],
        [("price", 20, "lteq")],
        [("status", 1, "eq")],
    ]


def test_local_datetime_filter_is_converted_to_utc(builder):
    # America/New_York is UTC-5 in January
    criteria = builder.build(ProductListArgs(filter={
        "created_at": {"from": "2024-01-01 00:00:00"},
    }))
    assert flatten(criteria) == [[("created_at", "2024-01-01 05:00:00", "from")]]


def test_summer_datetime_filter_uses_daylight_offset(builder):
    criteria = builder.build(ProductListArgs(filter={
        "created_at": {"to": "2024-07-01 20:30:00"},
    }))
    assert flatten(criteria) == [[("created_at", "2024-07-02 00:30:00", "to")]]


@pytest.mark.parametrize("value", ["2024-02-30 00:00:00", "2024-01-01", "2024-1-1 00:00:00", 20240101])
def test_non_datetime_values_are_passed_through(builder, value):
    criteria = builder.build(ProductListArgs(filter={"created_at": {"eq": value}}))
    assert flatten(criteria) == [[("created_at", value, "eq")]]


def test_like_datetime_is_not_converted(builder):
    criteria = builder.build(ProductListArgs(filter={"name": {"like": "2024-01-01 00:00:00"}}))
    assert flatten(criteria) == [[("name", "%2024-01-01 00:00:00%", "like")]]


def test_search_groups_come_before_filter_groups(builder):
    criteria = builder.build(ProductListArgs(search="x", filter={"status": {"eq": 1}}))
    assert [[f.get_field() for f in group.get_filters()] for group in criteria.get_filter_groups()] == [
        ["name", "sku"], ["status"],
    ]


def test_last_sort_entry_wins(builder):
    criteria = builder.build(ProductListArgs(sort={"name": "ASC", "price": "desc"}))

    assert criteria.get_sort_orders() == [SortOrder("price", "DESC")]


def test_no_sort_leaves_sort_orders_empty(builder):
    assert builder.build(ProductListArgs()).get_sort_orders() == []


def test_invalid_sort_direction_raises(builder):
    with pytest.raises(ValidationException):
        builder.build(ProductListArgs(sort={"name": "sideways"}))


@pytest.mark.parametrize("current_page,page_size", [(1, 20), (3, 7), (0, -1)])
def test_pagination_is_copied_verbatim(builder, current_page, page_size):
    criteria = builder.build(ProductListArgs(current_page=current_page, page_size=page_size))

    assert criteria.get_current_page() == current_page
    assert criteria.get_page_size() == page_size


def test_builds_do_not_share_state(builder):
    first = builder.build(ProductListArgs(search="a"))
    second = builder.build(ProductListArgs())

    assert len(first.get_filter_groups()) == 1
    assert second.get_filter_groups() == []


def test_with_columns_returns_new_builder(builder):
    other = builder.with_columns(["description"])

    assert other is not builder
    assert other.get_columns() == ("description",)
    assert builder.get_columns() == ("name", "sku")
    assert other.timezone_service is builder.timezone_service


def test_add_filter_appends_single_filter_group(builder):
    criteria = builder.get_search_criteria()
    builder.add_filter(criteria, "sku", "A1").add_filter(criteria, "sku", "B2", ConditionType.NEQ)

    groups = criteria.get_filter_groups()
    assert len(groups) == 2
    assert groups[0].get_filters() == [Filter("sku", "A1", "eq")]
    assert groups[1].get_filters() == [Filter("sku", "B2", "neq")]


@pytest.mark.parametrize("value,expected", [
    ("2024-01-31 23:59:59", True),
    ("2024-02-29 00:00:00", True),
    ("2023-02-29 00:00:00", False),
    ("2024-01-31", False),
    ("2024-01-31 23:59:59 ", False),
    ("", False),
    (None, False),
])
def test_is_date_valid(builder, value, expected):
    assert builder.is_date_valid(value) is expected


def test_is_date_valid_with_custom_format(builder):
    assert builder.is_date_valid("2024-01-31", "%Y-%m-%d")


def test_get_local_date_returns_store_time(builder):
    result = builder.get_local_date("2024-07-01 12:00:00")

    assert result.is_ok()
    local = result.unwrap()
    assert isinstance(local, datetime)
    assert (local.hour, local.day) == (8, 1)
    assert str(local.tzinfo) == "America/New_York"


def test_get_local_date_with_format(builder):
    assert builder.get_local_date("2024-01-01 03:00:00", "%Y-%m-%d %H:%M") == Ok("2023-12-31 22:00")


@pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-01 00:00:00"])
def test_get_local_date_failures_are_errors(builder, value):
    result = builder.get_local_date(value)

    assert isinstance(result, Err)
    assert result.unwrap_or("fallback") == "fallback"


def test_get_formatted_price(builder):
    assert builder.get_formatted_price("1234.5") == "$1,234.50"
    assert builder.get_formatted_price(None) == "$0.00"
