"""
商品应用服务层包。
提供查询参数、搜索条件构建器和数据传输对象。
"""

# DTO
from products.application.dtos import (
    ProductDTO,
    ProductListDTO,
    ProductStatusDTO,
)

# 查询
from products.application.queries import ProductListArgs

# 搜索条件构建
from products.application.search_criteria import GraphQlSearchCriteriaBuilder

__all__ = [
    # DTO
    'ProductDTO',
    'ProductListDTO',
    'ProductStatusDTO',

    # 查询
    'ProductListArgs',

    # 搜索条件构建
    'GraphQlSearchCriteriaBuilder',
]
