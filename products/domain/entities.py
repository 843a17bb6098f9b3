"""
商品领域模型中的实体。
包含商品实体及商品状态定义。
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from core.domain import Entity


class ProductStatus:
    """商品状态"""
    ENABLED = 1
    DISABLED = 2

    LABELS = {
        ENABLED: "Enabled",
        DISABLED: "Disabled",
    }

    @classmethod
    def label(cls, status: Any) -> str:
        """
        返回状态的显示标签。
        只有ENABLED显示为"Enabled"，其他任何值(包括None)都显示为"Disabled"。

        Args:
            status: 状态码

        Returns:
            状态标签
        """
        if status == cls.ENABLED:
            return cls.LABELS[cls.ENABLED]
        return cls.LABELS[cls.DISABLED]


class Product(Entity):
    """
    商品实体。
    商品目录的只读模型，由仓储按请求加载，不在解析过程中修改。
    """

    def __init__(
        self,
        id: Any = None,
        name: str = "",
        sku: str = "",
        price: Optional[Decimal] = None,
        description: str = "",
        short_description: str = "",
        status: int = ProductStatus.ENABLED,
        weight: Optional[float] = None,
        dimension_package_height: Optional[float] = None,
        dimension_package_length: Optional[float] = None,
        dimension_package_width: Optional[float] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        初始化商品实体。

        Args:
            id: 商品ID
            name: 商品名称
            sku: 库存单位编码
            price: 价格
            description: 商品描述
            short_description: 商品简述
            status: 状态码，1为启用
            weight: 重量
            dimension_package_height: 包装高度
            dimension_package_length: 包装长度
            dimension_package_width: 包装宽度
            created_at: 创建时间(UTC)
            updated_at: 更新时间(UTC)
        """
        super().__init__(id)
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
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def is_enabled(self) -> bool:
        return self.status == ProductStatus.ENABLED

    @property
    def status_label(self) -> str:
        return ProductStatus.label(self.status)
