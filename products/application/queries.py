"""
商品应用服务层的查询对象。
定义商品列表查询的强类型参数。
"""
from typing import Any, Dict, Mapping, Optional

from products.domain.config import DEFAULT_CURRENT_PAGE, DEFAULT_PAGE_SIZE


class ProductListArgs:
    """
    商品列表查询参数。
    未提供或格式不正确的可选参数统一为None。
    """

    def __init__(
        self,
        search: Optional[str] = None,
        filter: Optional[Dict[str, Dict[str, Any]]] = None,
        sort: Optional[Dict[str, str]] = None,
        current_page: int = DEFAULT_CURRENT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE
    ):
        """
        初始化商品列表查询参数。

        Args:
            search: 全文搜索关键词，对配置的字段做子串匹配
            filter: 过滤条件，格式为{字段名: {条件类型: 值}}
            sort: 排序，格式为{字段名: 排序方向}
            current_page: 页码，从1开始
            page_size: 每页大小
        """
        self.search = search
        self.filter = filter
        self.sort = sort
        self.current_page = current_page
        self.page_size = page_size

    @classmethod
    def from_graphql_args(cls, args: Optional[Mapping[str, Any]]) -> 'ProductListArgs':
        """
        从GraphQL原始参数创建查询参数。
        filter、sort不是映射时视为未提供；filter中条件不是映射的字段被忽略。

        Args:
            args: GraphQL参数，键名与schema一致(currentPage、pageSize)

        Returns:
            查询参数
        """
        args = args or {}

        search = args.get('search')
        if not isinstance(search, str):
            search = None

        filters = args.get('filter')
        if isinstance(filters, Mapping):
            filters = {
                str(field_name): dict(conditions)
                for field_name, conditions in filters.items()
                if isinstance(conditions, Mapping)
            }
        else:
            filters = None

        sort = args.get('sort')
        if isinstance(sort, Mapping):
            sort = {str(field_name): direction for field_name, direction in sort.items()}
        else:
            sort = None

        current_page = args.get('currentPage')
        page_size = args.get('pageSize')

        return cls(
            search=search,
            filter=filters,
            sort=sort,
            current_page=DEFAULT_CURRENT_PAGE if current_page is None else current_page,
            page_size=DEFAULT_PAGE_SIZE if page_size is None else page_size
        )

    def __repr__(self) -> str:
        return (
            f"ProductListArgs(search={self.search!r}, filter={self.filter!r}, "
            f"sort={self.sort!r}, current_page={self.current_page!r}, page_size={self.page_size!r})"
        )
