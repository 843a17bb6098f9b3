"""
商品领域模型中的仓储接口。
定义用于检索商品实体的仓储接口。
"""
from abc import abstractmethod

from core.domain.repositories import SearchableRepository
from core.domain.search_criteria import SearchCriteria, SearchResult
from products.domain.entities import Product


class ProductRepository(SearchableRepository[Product]):
    """
    商品仓储接口。
    """

    @abstractmethod
    def get_list(self, search_criteria: SearchCriteria) -> SearchResult:
        """
        按搜索条件检索商品。

        Args:
            search_criteria: 搜索条件

        Returns:
            搜索结果，items为商品实体列表

        Raises:
            ValidationException: 搜索条件无效时抛出
        """
        pass
