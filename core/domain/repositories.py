"""
仓储接口模块。
定义仓储接口，用于检索领域对象。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from core.domain.search_criteria import SearchCriteria, SearchResult

T = TypeVar('T')


class ReadOnlyRepository(Generic[T], ABC):
    """
    只读仓储接口。
    定义了只读仓储必须实现的基本操作。
    """

    @abstractmethod
    def get_by_id(self, id: Any) -> T:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体

        Raises:
            EntityNotFoundException: 实体不存在时抛出
        """
        pass


class SearchableRepository(Generic[T], ABC):
    """
    可搜索仓储接口。
    按搜索条件检索分页结果。
    """

    @abstractmethod
    def get_list(self, search_criteria: SearchCriteria) -> SearchResult:
        """
        按搜索条件检索实体。

        Args:
            search_criteria: 搜索条件

        Returns:
            包含当前页实体和总数的搜索结果

        Raises:
            ValidationException: 搜索条件引用了未知字段或不支持的条件类型时抛出
        """
        pass
