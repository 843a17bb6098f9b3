"""
商品GraphQL解析器。
处理商品列表请求：授权、参数校验、构建搜索条件、查询并投影为响应结构。
"""
from typing import Any, Dict, Mapping, Union

from loguru import logger

from core.domain.exceptions import EntityNotFoundException, ValidationException
from core.infrastructure.formatting import PricingService
from core.infrastructure.graphql.exceptions import (
    GraphQlAuthorizationException,
    GraphQlInputException,
    GraphQlNoSuchEntityException,
)
from customers.domain.repositories import CustomerRepository
from products.application.dtos import ProductDTO, ProductListDTO
from products.application.queries import ProductListArgs
from products.application.search_criteria import GraphQlSearchCriteriaBuilder
from products.domain.repositories import ProductRepository


class GetProductListResolver:
    """
    商品列表解析器。
    无状态，每次调用独立完成一个请求。
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        customer_repository: CustomerRepository,
        search_criteria_builder: GraphQlSearchCriteriaBuilder,
        pricing_service: PricingService
    ):
        """
        初始化商品列表解析器。

        Args:
            product_repository: 商品仓储
            customer_repository: 顾客仓储
            search_criteria_builder: 搜索条件构建器
            pricing_service: 价格格式化服务
        """
        self.product_repository = product_repository
        self.customer_repository = customer_repository
        self.search_criteria_builder = search_criteria_builder
        self.pricing_service = pricing_service

    def resolve(
        self,
        context: Any,
        args: Union[ProductListArgs, Mapping[str, Any], None]
    ) -> Dict[str, Any]:
        """
        解析商品列表请求。

        Args:
            context: 请求上下文，需要提供is_customer和user_id
            args: 查询参数，可以是GraphQL原始参数

        Returns:
            包含total_count、items和page_info的字典

        Raises:
            GraphQlAuthorizationException: 调用方不是已登录顾客
            GraphQlInputException: 分页参数小于1或查询条件无效
            GraphQlNoSuchEntityException: 上下文中的顾客不存在
        """
        # 授权检查先于任何参数校验
        if not getattr(context, "is_customer", False):
            raise GraphQlAuthorizationException("The request is allowed for logged in")

        query = args if isinstance(args, ProductListArgs) else ProductListArgs.from_graphql_args(args)

        if query.current_page < 1:
            raise GraphQlInputException("currentPage value must be greater than 0.")

        if query.page_size < 1:
            raise GraphQlInputException("pageSize value must be greater than 0.")

        # TODO: 顾客信息目前只用于确认账号存在，尚未用于按顾客过滤商品
        try:
            self.customer_repository.get_by_id(context.user_id)
        except EntityNotFoundException as e:
            raise GraphQlNoSuchEntityException(e.message) from e

        try:
            search_criteria = self.search_criteria_builder.build(query)
            search_result = self.product_repository.get_list(search_criteria)
        except ValidationException as e:
            raise GraphQlInputException(e.message) from e

        items = [
            ProductDTO.from_entity(item, self.pricing_service)
            for item in search_result.get_items()
        ]
        logger.info(
            f"顾客 {context.user_id} 查询商品列表: 总数{search_result.get_total_count()}, "
            f"第{search_criteria.get_current_page()}页"
        )

        return ProductListDTO(
            items=items,
            total_count=search_result.get_total_count(),
            page_size=search_criteria.get_page_size(),
            current_page=search_criteria.get_current_page()
        ).to_dict()
