from decimal import Decimal

import pytest

from core.domain.exceptions import EntityNotFoundException
from core.domain.search_criteria import SearchResult
from core.infrastructure.formatting import PricingService, TimezoneService
from core.infrastructure.graphql.context import GraphQlContext
from customers.domain.entities import Customer
from customers.domain.repositories import CustomerRepository
from products.api.resolvers import GetProductListResolver
from products.application.search_criteria import GraphQlSearchCriteriaBuilder
from products.domain.entities import Product
from products.domain.repositories import ProductRepository


class FakeProductRepository(ProductRepository):
    """In-memory catalog; returns a fixed page and records every criteria it receives."""

    def __init__(self, items=None, total_count=None):
        self.items = list(items or [])
        self.total_count = len(self.items) if total_count is None else total_count
        self.received = []

    def get_list(self, search_criteria):
        self.received.append(search_criteria)
        return SearchResult(self.items, self.total_count, search_criteria)


class FakeCustomerRepository(CustomerRepository):
    def __init__(self, customer_ids=(1,)):
        self.customers = {
            customer_id: Customer(id=customer_id, email=f"c{customer_id}@example.com")
            for customer_id in customer_ids
        }

    def get_by_id(self, id):
        if id not in self.customers:
            raise EntityNotFoundException("customer", id)
        return self.customers[id]


def make_product(id, **kwargs):
    defaults = dict(
        name=f"Product {id}",
        sku=f"SKU-{id}",
        price=Decimal("10.00"),
        description="",
        short_description="",
        status=1,
    )
    defaults.update(kwargs)
    return Product(id=id, **defaults)


@pytest.fixture
def timezone_service():
    return TimezoneService("America/New_York")


@pytest.fixture
def pricing_service():
    return PricingService(currency_code="USD", currency_symbol="$", decimal_places=2)


@pytest.fixture
def builder(timezone_service, pricing_service):
    return GraphQlSearchCriteriaBuilder(
        columns=("name", "sku"),
        timezone_service=timezone_service,
        pricing_service=pricing_service
    )


@pytest.fixture
def customer_context():
    return GraphQlContext(user_id=1, is_customer=True)


@pytest.fixture
def guest_context():
    return GraphQlContext()


@pytest.fixture
def product_repository():
    return FakeProductRepository()


@pytest.fixture
def make_resolver(builder, pricing_service):
    def factory(product_repository=None, customer_repository=None):
        return GetProductListResolver(
            product_repository=product_repository or FakeProductRepository(),
            customer_repository=customer_repository or FakeCustomerRepository(),
            search_criteria_builder=builder,
            pricing_service=pricing_service
        )

    return factory
