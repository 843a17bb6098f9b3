"""
商品基础设施层工厂。
负责创建和组装仓储、格式化服务、搜索条件构建器和GraphQL解析器。
"""
from typing import Iterable, Optional

from core.infrastructure.formatting import PricingService, TimezoneService, create_timezone_service
from customers.domain.repositories import CustomerRepository
from customers.infrastructure.repositories.django_customer_repository import DjangoCustomerRepository
from products.application.search_criteria import GraphQlSearchCriteriaBuilder
from products.domain import config
from products.domain.repositories import ProductRepository
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository


class ProductInfrastructureFactory:
    """
    商品基础设施层工厂类。
    同一工厂内创建的实例会被复用；这些实例都不持有请求级状态。
    """

    def __init__(
        self,
        search_columns: Optional[Iterable[str]] = None,
        store_time_zone: Optional[str] = None
    ):
        """
        初始化商品基础设施层工厂。

        Args:
            search_columns: 参与全文搜索的字段，默认取商品模块配置
            store_time_zone: 商店显示时区，默认取商品模块配置
        """
        self.search_columns = tuple(search_columns) if search_columns is not None else config.SEARCH_COLUMNS
        self.store_time_zone = store_time_zone or config.STORE_TIME_ZONE

        # 存储已创建的实例
        self._product_repository = None
        self._customer_repository = None
        self._timezone_service = None
        self._pricing_service = None
        self._search_criteria_builder = None

    def create_product_repository(self) -> ProductRepository:
        if not self._product_repository:
            self._product_repository = DjangoProductRepository()

        return self._product_repository

    def create_customer_repository(self) -> CustomerRepository:
        if not self._customer_repository:
            self._customer_repository = DjangoCustomerRepository()

        return self._customer_repository

    def create_timezone_service(self) -> TimezoneService:
        if not self._timezone_service:
            self._timezone_service = create_timezone_service(self.store_time_zone)

        return self._timezone_service

    def create_pricing_service(self) -> PricingService:
        if not self._pricing_service:
            self._pricing_service = PricingService(
                currency_code=config.CURRENCY_CODE,
                currency_symbol=config.CURRENCY_SYMBOL,
                decimal_places=config.CURRENCY_DECIMAL_PLACES
            )

        return self._pricing_service

    def create_search_criteria_builder(self) -> GraphQlSearchCriteriaBuilder:
        """
        创建搜索条件构建器。

        Returns:
            使用配置的全文搜索字段的构建器
        """
        if not self._search_criteria_builder:
            self._search_criteria_builder = GraphQlSearchCriteriaBuilder(
                columns=self.search_columns,
                timezone_service=self.create_timezone_service(),
                pricing_service=self.create_pricing_service()
            )

        return self._search_criteria_builder

    def create_product_list_resolver(self):
        """
        创建商品列表解析器。

        Returns:
            商品列表解析器实例
        """
        from products.api.resolvers import GetProductListResolver

        return GetProductListResolver(
            product_repository=self.create_product_repository(),
            customer_repository=self.create_customer_repository(),
            search_criteria_builder=self.create_search_criteria_builder(),
            pricing_service=self.create_pricing_service()
        )
