from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.domain.exceptions import EntityNotFoundException, ValidationException
from core.domain.search_criteria import Filter, FilterGroup, SearchCriteria
from core.infrastructure.graphql.exceptions import GraphQlInputException
from customers.infrastructure.repositories.django_customer_repository import DjangoCustomerRepository
from products.application.queries import ProductListArgs
from products.infrastructure.models.product_models import Product as ProductModel
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository

pytestmark = pytest.mark.django_db


@pytest.fixture
def catalog():
    rows = [
        dict(name="Blue Shirt", sku="SH-BLUE", price=Decimal("19.99"), status=1, weight=Decimal("0.3000")),
        dict(name="Red Shirt", sku="SH-RED", price=Decimal("24.50"), status=1),
        dict(name="Green Hat", sku="HAT-GREEN", price=Decimal("9.00"), status=2, short_description="wool"),
        dict(name="Blue Hat", sku="HAT-BLUE", price=Decimal("9.00"), status=1),
        dict(name="Socks", sku="SOCK-1", price=Decimal("4.00"), status=2),
    ]
    products = [ProductModel.objects.create(**row) for row in rows]
    created = [
        datetime(2024, 1, 1, 4, 0, tzinfo=timezone.utc),
        datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc),
        datetime(2024, 2, 1, 0, 0, tzinfo=timezone.utc),
        datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc),
        datetime(2024, 4, 1, 0, 0, tzinfo=timezone.utc),
    ]
    for product, created_at in zip(products, created):
        ProductModel.objects.filter(pk=product.pk).update(created_at=created_at)
    return {product.sku: product.pk for product in products}


@pytest.fixture
def repository():
    return DjangoProductRepository()


def skus(result):
    return [item.sku for item in result.get_items()]


def test_search_matches_name_case_insensitively(repository, builder, catalog):
    builder = builder.with_columns(["name"])
    result = repository.get_list(builder.build(ProductListArgs(search="shirt")))

    assert sorted(skus(result)) == ["SH-BLUE", "SH-RED"]
    assert result.get_total_count() == 2


def test_filter_groups_are_and_combined(repository, builder, catalog):
    criteria = builder.build(ProductListArgs(filter={
        "name": {"like": "blue"},
        "status": {"eq": 1},
        "price": {"lt": 10},
    }))
    assert skus(repository.get_list(criteria)) == ["HAT-BLUE"]


def test_filters_within_a_group_are_or_combined(repository, catalog):
    criteria = SearchCriteria().add_filter_group(FilterGroup([
        Filter("sku", "SOCK-1"),
        Filter("sku", "SH-RED"),
    ]))
    assert sorted(skus(repository.get_list(criteria))) == ["SH-RED", "SOCK-1"]


@pytest.mark.parametrize("conditions,expected", [
    ({"sku": {"in": "SH-RED,SOCK-1"}}, ["SH-RED", "SOCK-1"]),
    ({"sku": {"in": ["SH-RED"]}}, ["SH-RED"]),
    ({"sku": {"nin": ["SH-RED", "SOCK-1"]}}, ["HAT-BLUE", "HAT-GREEN", "SH-BLUE"]),
    ({"status": {"neq": 1}}, ["HAT-GREEN", "SOCK-1"]),
    ({"name": {"nlike": "%hat%"}}, ["SH-BLUE", "SH-RED", "SOCK-1"]),
    ({"weight": {"notnull": True}}, ["SH-BLUE"]),
    ({"price": {"gteq": 19}}, ["SH-BLUE", "SH-RED"]),
    ({"sort_description": {"eq": "wool"}}, ["HAT-GREEN"]),
])
def test_condition_types(repository, builder, catalog, conditions, expected):
    result = repository.get_list(builder.build(ProductListArgs(filter=conditions)))
    assert sorted(skus(result)) == expected


def test_entity_id_filter(repository, builder, catalog):
    criteria = builder.build(ProductListArgs(filter={"entity_id": {"eq": catalog["SOCK-1"]}}))
    assert skus(repository.get_list(criteria)) == ["SOCK-1"]


def test_created_at_filter_uses_store_time_zone(repository, builder, catalog):
    # 2024-01-01 00:00 in New York is 05:00 UTC
    criteria = builder.build(ProductListArgs(filter={
        "created_at": {"from": "2024-01-01 00:00:00", "to": "2024-02-01 00:00:00"},
    }))
    assert sorted(skus(repository.get_list(criteria))) == ["HAT-GREEN", "SH-RED"]


def test_sort_and_pagination(repository, builder, catalog):
    criteria = builder.build(ProductListArgs(sort={"price": "DESC"}, current_page=2, page_size=2))
    result = repository.get_list(criteria)

    assert result.get_total_count() == 5
    # equal prices are ordered by id
    assert skus(result) == ["HAT-GREEN", "HAT-BLUE"]


def test_page_beyond_last_is_empty(repository, builder, catalog):
    result = repository.get_list(builder.build(ProductListArgs(current_page=9, page_size=2)))

    assert skus(result) == []
    assert result.get_total_count() == 5


def test_unknown_filter_field_is_rejected(repository, builder, catalog):
    with pytest.raises(ValidationException):
        repository.get_list(builder.build(ProductListArgs(filter={"colour": {"eq": "red"}})))


def test_unknown_condition_type_is_rejected(repository, builder, catalog):
    with pytest.raises(ValidationException):
        repository.get_list(builder.build(ProductListArgs(filter={"name": {"regex": "x"}})))


def test_unknown_sort_field_is_rejected(repository, builder, catalog):
    with pytest.raises(ValidationException):
        repository.get_list(builder.build(ProductListArgs(sort={"colour": "ASC"})))


def test_entities_are_mapped(repository, builder, catalog):
    criteria = builder.build(ProductListArgs(filter={"entity_id": {"eq": catalog["SH-BLUE"]}}))
    (product,) = repository.get_list(criteria).get_items()

    assert product.name == "Blue Shirt"
    assert product.price == Decimal("19.99")
    assert product.weight == 0.3
    assert product.dimension_package_height is None
    assert product.is_enabled


def test_customer_repository(django_user_model):
    user = django_user_model.objects.create_user(
        username="jane", email="jane@example.com", password="secret", first_name="Jane", last_name="Doe"
    )
    customer = DjangoCustomerRepository().get_by_id(user.pk)

    assert customer.email == "jane@example.com"
    assert customer.full_name == "Jane Doe"

    with pytest.raises(EntityNotFoundException) as excinfo:
        DjangoCustomerRepository().get_by_id(user.pk + 100)
    assert excinfo.value.message == f"No such entity with customerId = {user.pk + 100}"


def test_search_matches_any_column(repository, builder, catalog):
    # "shirt" only appears in the name, "hat-" only in the sku
    result = repository.get_list(builder.build(ProductListArgs(search="shirt")))
    assert sorted(skus(result)) == ["SH-BLUE", "SH-RED"]

    result = repository.get_list(builder.build(ProductListArgs(search="hat-")))
    assert sorted(skus(result)) == ["HAT-BLUE", "HAT-GREEN"]


def test_search_is_and_combined_with_filters(repository, builder, catalog):
    criteria = builder.build(ProductListArgs(search="blue", filter={"price": {"lt": 10}}))
    assert skus(repository.get_list(criteria)) == ["HAT-BLUE"]


@pytest.mark.parametrize("conditions", [
    {"status": {"gt": "abc"}},
    {"price": {"eq": "cheap"}},
    {"entity_id": {"in": "1,x"}},
    {"created_at": {"from": "yesterday"}},
])
def test_uncoercible_values_are_rejected(repository, builder, catalog, conditions):
    with pytest.raises(ValidationException):
        repository.get_list(builder.build(ProductListArgs(filter=conditions)))


def test_uncoercible_value_is_input_error(make_resolver, customer_context, repository, catalog):
    resolver = make_resolver(product_repository=repository)

    with pytest.raises(GraphQlInputException) as excinfo:
        resolver.resolve(customer_context, {"filter": {"status": {"gt": "abc"}}})

    assert excinfo.value.message == "Invalid value of \"status\": cannot compare with 'abc'"
