"""
商品GraphQL schema。
定义商品列表查询字段及其输出类型，字段名与对外约定保持一致(不做驼峰转换)。
"""
from typing import Annotated, Any, Dict, List, Optional

import strawberry
from strawberry.scalars import JSON
from strawberry.types import Info

from products.api.resolvers import GetProductListResolver
from products.domain import config
from products.infrastructure.factory import ProductInfrastructureFactory


def get_product_list_resolver() -> GetProductListResolver:
    """获取商品列表解析器实例"""
    factory = ProductInfrastructureFactory()
    return factory.create_product_list_resolver()


@strawberry.type
class ProductStatusOutput:
    value: Optional[int]
    label: str


@strawberry.type
class ProductItemOutput:
    entity_id: Optional[int]
    name: Optional[str]
    sku: Optional[str]
    price: Optional[str]
    description: Optional[str]
    sort_description: Optional[str]
    status: ProductStatusOutput
    weight: Optional[float]
    dimension_package_height: Optional[float]
    dimension_package_length: Optional[float]
    dimension_package_width: Optional[float]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductItemOutput':
        return cls(
            entity_id=data["entity_id"],
            name=data["name"],
            sku=data["sku"],
            price=data["price"],
            description=data["description"],
            sort_description=data["sort_description"],
            status=ProductStatusOutput(**data["status"]),
            weight=data["weight"],
            dimension_package_height=data["dimension_package_height"],
            dimension_package_length=data["dimension_package_length"],
            dimension_package_width=data["dimension_package_width"],
        )


@strawberry.type
class PageInfoOutput:
    page_size: int
    current_page: int
    total_pages: int


@strawberry.type
class ProductListOutput:
    total_count: int
    items: List[ProductItemOutput]
    page_info: PageInfoOutput

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductListOutput':
        return cls(
            total_count=data["total_count"],
            items=[ProductItemOutput.from_dict(item) for item in data["items"]],
            page_info=PageInfoOutput(**data["page_info"]),
        )


@strawberry.type
class Query:
    """商品查询"""

    @strawberry.field(
        name="getProductList",
        description="List catalog products with search, filters, sorting and pagination. Requires a logged in customer."
    )
    def get_product_list(
        self,
        info: Info,
        search: Optional[str] = None,
        filter_: Annotated[Optional[JSON], strawberry.argument(name="filter")] = None,
        sort: Optional[JSON] = None,
        current_page: Annotated[int, strawberry.argument(name="currentPage")] = config.DEFAULT_CURRENT_PAGE,
        page_size: Annotated[int, strawberry.argument(name="pageSize")] = config.DEFAULT_PAGE_SIZE,
    ) -> ProductListOutput:
        args = {
            "search": search,
            "filter": filter_,
            "sort": sort,
            "currentPage": current_page,
            "pageSize": page_size,
        }
        data = get_product_list_resolver().resolve(info.context, args)
        return ProductListOutput.from_dict(data)
