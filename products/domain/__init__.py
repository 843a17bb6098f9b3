"""
商品领域模型包。
提供商品实体和仓储接口。
"""

# 实体
from products.domain.entities import Product, ProductStatus

# 仓储接口
from products.domain.repositories import ProductRepository

__all__ = [
    # 实体
    'Product',
    'ProductStatus',

    # 仓储接口
    'ProductRepository',
]
