"""
领域模型包。
提供实体、值对象、结果类型、搜索条件和仓储接口等核心概念。
"""

# 基础类
from core.domain.base import Entity
from core.domain.value_objects import ValueObject, Money
from core.domain.result import Ok, Err, Result

# 领域异常
from core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
    AuthorizationException,
)

# 搜索条件
from core.domain.search_criteria import (
    ConditionType,
    Filter,
    FilterGroup,
    SortOrder,
    SearchCriteria,
    SearchResult,
)

# 仓储接口
from core.domain.repositories import (
    ReadOnlyRepository,
    SearchableRepository,
)

__all__ = [
    # 基础类
    'Entity',
    'ValueObject',
    'Money',
    'Ok',
    'Err',
    'Result',

    # 领域异常
    'DomainException',
    'EntityNotFoundException',
    'ValidationException',
    'AuthorizationException',

    # 搜索条件
    'ConditionType',
    'Filter',
    'FilterGroup',
    'SortOrder',
    'SearchCriteria',
    'SearchResult',

    # 仓储接口
    'ReadOnlyRepository',
    'SearchableRepository',
]
