"""
基础设施层包。
提供搜索条件执行、格式化服务和GraphQL等基础设施组件。
"""

# 搜索条件执行
from core.infrastructure.criteria import SearchCriteriaApplier

# 格式化服务
from core.infrastructure.formatting import (
    TimezoneService,
    PricingService,
    create_timezone_service,
)

__all__ = [
    # 搜索条件执行
    'SearchCriteriaApplier',

    # 格式化服务
    'TimezoneService',
    'PricingService',
    'create_timezone_service',
]
