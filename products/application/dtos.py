"""
商品应用服务层的数据传输对象(DTOs)。
定义GraphQL响应使用的数据结构。
"""
import math
from typing import Any, Dict, List, Optional

from products.domain.entities import Product, ProductStatus


class ProductStatusDTO:
    """商品状态DTO，包含状态码和显示标签"""

    def __init__(self, value: Any):
        self.value = value
        self.label = ProductStatus.label(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "label": self.label
        }


class ProductDTO:
    """商品数据传输对象，用于返回商品信息"""

    def __init__(
        self,
        entity_id: Any,
        name: str,
        sku: str,
        price: str,
        description: str,
        short_description: str,
        status: ProductStatusDTO,
        weight: Optional[float],
        dimension_package_height: Optional[float],
        dimension_package_length: Optional[float],
        dimension_package_width: Optional[float]
    ):
        """
        初始化商品DTO。

        Args:
            entity_id: 商品ID
            name: 商品名称
            sku: 库存单位编码
            price: 按商店货币格式化后的价格
            description: 商品描述
            short_description: 商品简述
            status: 商品状态
            weight: 重量
            dimension_package_height: 包装高度
            dimension_package_length: 包装长度
            dimension_package_width: 包装宽度
        """
        self.entity_id = entity_id
        self.name = name
        self.sku = sku
        self.price = price
        self.description = description
        self.short_description = short_description
        self.status = status
        self.weight = weight
        self.dimension_package_height = dimension_package_height
        self.dimension_package_length = dimension_package_length
        self.dimension_package_width = dimension_package_width

    @classmethod
    def from_entity(cls, product: Product, pricing_service) -> 'ProductDTO':
        """
        从商品实体创建DTO。

        Args:
            product: 商品实体
            pricing_service: 价格格式化服务

        Returns:
            商品DTO
        """
        return cls(
            entity_id=product.id,
            name=product.name,
            sku=product.sku,
            price=pricing_service.currency(product.price, True, False),
            description=product.description,
            short_description=product.short_description,
            status=ProductStatusDTO(product.status),
            weight=product.weight,
            dimension_package_height=product.dimension_package_height,
            dimension_package_length=product.dimension_package_length,
            dimension_package_width=product.dimension_package_width
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        将DTO转换为字典。
        简述字段沿用对外约定的键名sort_description。

        Returns:
            字典表示
        """
        return {
            "entity_id": self.entity_id,
            "name": self.name,
            "sku": self.sku,
            "price": self.price,
            "description": self.description,
            "sort_description": self.short_description,
            "status": self.status.to_dict(),
            "weight": self.weight,
            "dimension_package_height": self.dimension_package_height,
            "dimension_package_length": self.dimension_package_length,
            "dimension_package_width": self.dimension_package_width
        }


class ProductListDTO:
    """商品分页列表DTO"""

    def __init__(
        self,
        items: List[ProductDTO],
        total_count: int,
        page_size: int,
        current_page: int
    ):
        """
        初始化商品列表DTO。

        Args:
            items: 当前页的商品DTO列表
            total_count: 匹配的商品总数
            page_size: 请求的每页大小，必须大于0
            current_page: 请求的页码
        """
        self.items = items
        self.total_count = total_count
        self.page_size = page_size
        self.current_page = current_page
        self.total_pages = math.ceil(total_count / page_size)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_count": self.total_count,
            "items": [item.to_dict() for item in self.items],
            "page_info": {
                "page_size": self.page_size,
                "current_page": self.current_page,
                "total_pages": self.total_pages
            }
        }
