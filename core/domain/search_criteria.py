"""
搜索条件模块。
定义与存储无关的查询描述：过滤条件、过滤组、排序和分页。

语义约定：
    - 同一个FilterGroup内的过滤条件以OR组合；
    - SearchCriteria中的多个FilterGroup以AND组合。
每个逻辑条件应单独追加一个过滤组，合并无关条件会颠倒AND/OR语义。
"""
from typing import Any, Iterable, List, Optional

from core.domain.exceptions import ValidationException
from core.domain.value_objects import ValueObject


class ConditionType:
    """过滤条件类型"""
    EQ = "eq"
    NEQ = "neq"
    LIKE = "like"
    NLIKE = "nlike"
    IN = "in"
    NIN = "nin"
    GT = "gt"
    GTEQ = "gteq"
    LT = "lt"
    LTEQ = "lteq"
    FROM = "from"
    TO = "to"
    NULL = "null"
    NOTNULL = "notnull"
    FINSET = "finset"

    ALL = frozenset([
        EQ, NEQ, LIKE, NLIKE, IN, NIN, GT, GTEQ, LT, LTEQ,
        FROM, TO, NULL, NOTNULL, FINSET,
    ])


class Filter(ValueObject):
    """
    过滤条件值对象。
    表示"字段 条件类型 值"形式的单个谓词。
    """

    def __init__(self, field: str, value: Any, condition_type: str = ConditionType.EQ):
        """
        初始化过滤条件。

        Args:
            field: 字段名
            value: 比较值
            condition_type: 条件类型，默认为eq
        """
        self.field = field
        self.value = value
        self.condition_type = condition_type or ConditionType.EQ

    def get_field(self) -> str:
        return self.field

    def get_value(self) -> Any:
        return self.value

    def get_condition_type(self) -> str:
        return self.condition_type


class FilterGroup(ValueObject):
    """
    过滤组值对象。
    组内的过滤条件以OR组合。
    """

    def __init__(self, filters: Iterable[Filter] = ()):
        self.filters = tuple(filters)

    def get_filters(self) -> List[Filter]:
        return list(self.filters)

    def __len__(self) -> int:
        return len(self.filters)


class SortOrder(ValueObject):
    """排序值对象"""

    ASC = "ASC"
    DESC = "DESC"

    def __init__(self, field: str, direction: str = ASC):
        """
        初始化排序。

        Args:
            field: 排序字段
            direction: 排序方向，不区分大小写的ASC或DESC

        Raises:
            ValidationException: 排序方向无效时抛出
        """
        normalized = str(direction or self.ASC).upper()
        if normalized not in (self.ASC, self.DESC):
            raise ValidationException(
                field,
                f"sort direction must be {self.ASC} or {self.DESC}, got '{direction}'"
            )
        self.field = field
        self.direction = normalized

    def get_field(self) -> str:
        return self.field

    def get_direction(self) -> str:
        return self.direction

    def is_descending(self) -> bool:
        return self.direction == self.DESC


class SearchCriteria:
    """
    搜索条件。
    由过滤组(AND组合)、排序和分页组成，每个请求独立构建。
    """

    def __init__(self):
        self.filter_groups: List[FilterGroup] = []
        self.sort_orders: List[SortOrder] = []
        self.page_size: Optional[int] = None
        self.current_page: Optional[int] = None

    def get_filter_groups(self) -> List[FilterGroup]:
        return list(self.filter_groups)

    def set_filter_groups(self, filter_groups: Iterable[FilterGroup]) -> 'SearchCriteria':
        self.filter_groups = list(filter_groups)
        return self

    def add_filter_group(self, filter_group: FilterGroup) -> 'SearchCriteria':
        """
        追加一个过滤组。

        Args:
            filter_group: 过滤组

        Returns:
            当前搜索条件，便于链式调用
        """
        self.filter_groups.append(filter_group)
        return self

    def get_sort_orders(self) -> List[SortOrder]:
        return list(self.sort_orders)

    def set_sort_orders(self, sort_orders: Iterable[SortOrder]) -> 'SearchCriteria':
        self.sort_orders = list(sort_orders)
        return self

    def get_page_size(self) -> Optional[int]:
        return self.page_size

    def set_page_size(self, page_size: Optional[int]) -> 'SearchCriteria':
        self.page_size = page_size
        return self

    def get_current_page(self) -> Optional[int]:
        return self.current_page

    def set_current_page(self, current_page: Optional[int]) -> 'SearchCriteria':
        self.current_page = current_page
        return self

    def __repr__(self) -> str:
        return (
            f"SearchCriteria(filter_groups={self.filter_groups!r}, "
            f"sort_orders={self.sort_orders!r}, page_size={self.page_size!r}, "
            f"current_page={self.current_page!r})"
        )


class SearchResult:
    """
    搜索结果。
    封装当前页的实体列表、匹配总数以及产生该结果的搜索条件。
    """

    def __init__(self, items: list, total_count: int, search_criteria: SearchCriteria):
        """
        初始化搜索结果。

        Args:
            items: 当前页的实体列表
            total_count: 匹配的总数(不受分页影响)
            search_criteria: 搜索条件
        """
        self.items = items
        self.total_count = total_count
        self.search_criteria = search_criteria

    def get_items(self) -> list:
        return self.items

    def get_total_count(self) -> int:
        return self.total_count

    def get_search_criteria(self) -> SearchCriteria:
        return self.search_criteria
