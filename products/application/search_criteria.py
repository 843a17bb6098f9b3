"""
GraphQL搜索条件构建器。
将GraphQL查询参数(全文搜索、字段过滤、排序、分页)翻译为SearchCriteria。
"""
from datetime import datetime
from typing import Any, Iterable, Optional, Tuple, Union
from zoneinfo import ZoneInfoNotFoundError

from core.domain import Err, Ok, Result
from core.domain.search_criteria import (
    ConditionType,
    Filter,
    FilterGroup,
    SearchCriteria,
    SortOrder,
)
from core.infrastructure.formatting import DEFAULT_DATETIME_FORMAT, PricingService, TimezoneService
from products.application.queries import ProductListArgs


class GraphQlSearchCriteriaBuilder:
    """
    GraphQL搜索条件构建器。
    参与全文搜索的字段在构造时确定，构建过程不修改构建器自身状态，可在请求间共享。
    """

    def __init__(
        self,
        columns: Iterable[str] = (),
        timezone_service: Optional[TimezoneService] = None,
        pricing_service: Optional[PricingService] = None
    ):
        """
        初始化搜索条件构建器。

        Args:
            columns: 参与全文搜索的字段
            timezone_service: 时区服务，用于将本地时间过滤值转换为UTC
            pricing_service: 价格格式化服务
        """
        self._columns: Tuple[str, ...] = tuple(columns)
        self.timezone_service = timezone_service or TimezoneService()
        self.pricing_service = pricing_service or PricingService()

    def get_columns(self) -> Tuple[str, ...]:
        return self._columns

    def with_columns(self, columns: Iterable[str]) -> 'GraphQlSearchCriteriaBuilder':
        """
        返回使用另一组全文搜索字段的新构建器。

        Args:
            columns: 参与全文搜索的字段

        Returns:
            新的构建器，时区与价格服务与当前构建器相同
        """
        return self.__class__(
            columns=columns,
            timezone_service=self.timezone_service,
            pricing_service=self.pricing_service
        )

    def get_search_criteria(self) -> SearchCriteria:
        """返回一个空的搜索条件"""
        return SearchCriteria()

    def build(self, args: ProductListArgs) -> SearchCriteria:
        """
        根据查询参数构建搜索条件。

        - search：所有全文搜索字段的like条件组成一个过滤组(OR)，值为%search%；
        - filter：每个(字段, 条件类型)追加一个过滤组。like条件的值加上%通配符；
          其他条件中符合"YYYY-MM-DD HH:MM:SS"格式的字符串视为本地时间，转换为UTC；
        - sort：每个排序项都会替换已有排序，最终只保留最后一项；
        - 分页参数原样写入，不做范围校验。

        Args:
            args: 查询参数

        Returns:
            搜索条件
        """
        search_criteria = self.get_search_criteria()

        if args.search and self._columns:
            # 各搜索字段放在同一个过滤组内，任一字段匹配即可
            search_criteria.add_filter_group(FilterGroup([
                Filter(column, f"%{args.search}%", ConditionType.LIKE)
                for column in self._columns
            ]))

        for field_name, conditions in (args.filter or {}).items():
            for condition_type, value in conditions.items():
                if condition_type == ConditionType.LIKE:
                    self.add_filter(search_criteria, field_name, f"%{value}%", condition_type)
                else:
                    if isinstance(value, str) and self.is_date_valid(value):
                        value = self.timezone_service.convert_config_time_to_utc(value)
                    self.add_filter(search_criteria, field_name, value, condition_type)

        for sort_field, sort_direction in (args.sort or {}).items():
            self.add_sort_order(search_criteria, sort_field, sort_direction)

        search_criteria.set_page_size(args.page_size)
        search_criteria.set_current_page(args.current_page)

        return search_criteria

    def add_filter(
        self,
        search_criteria: SearchCriteria,
        field: str,
        value: Any,
        condition_type: str = ConditionType.EQ
    ) -> 'GraphQlSearchCriteriaBuilder':
        """
        以单独过滤组的形式追加一个过滤条件。

        Args:
            search_criteria: 搜索条件
            field: 字段名
            value: 比较值
            condition_type: 条件类型

        Returns:
            当前构建器
        """
        search_criteria.add_filter_group(FilterGroup([Filter(field, value, condition_type)]))
        return self

    def add_sort_order(
        self,
        search_criteria: SearchCriteria,
        sort_field: str,
        sort_direction: str
    ) -> 'GraphQlSearchCriteriaBuilder':
        """
        用单个排序项替换搜索条件中已有的排序。

        Args:
            search_criteria: 搜索条件
            sort_field: 排序字段
            sort_direction: 排序方向

        Returns:
            当前构建器

        Raises:
            ValidationException: 排序方向无效时抛出
        """
        search_criteria.set_sort_orders([SortOrder(sort_field, sort_direction)])
        return self

    def is_date_valid(self, value: Any, format: str = DEFAULT_DATETIME_FORMAT) -> bool:
        """
        判断值是否为指定格式的有效时间。
        解析后再按同一格式输出必须与原值完全一致，例如2023-02-30无效。

        Args:
            value: 待检查的值
            format: 时间格式

        Returns:
            有效返回True，否则返回False
        """
        if not isinstance(value, str):
            return False
        try:
            parsed = datetime.strptime(value, format)
        except ValueError:
            return False
        return parsed.strftime(format) == value

    def get_local_date(self, date: Any, format: str = "") -> Result[Union[datetime, str]]:
        """
        将UTC时间转换为商店时区下的时间。

        Args:
            date: "YYYY-MM-DD HH:MM:SS"格式的UTC时间
            format: 输出格式，为空时返回datetime

        Returns:
            Ok(转换后的时间)；输入为空、格式无效或转换失败时返回Err(原因)
        """
        if date is None or date == "":
            return Err("date is empty")
        if not self.is_date_valid(date):
            return Err(f"'{date}' is not a valid date in format '{DEFAULT_DATETIME_FORMAT}'")

        try:
            local_date = self.timezone_service.date(date)
            return Ok(local_date.strftime(format) if format else local_date)
        except (ValueError, OverflowError, ZoneInfoNotFoundError) as e:
            return Err(f"unable to convert '{date}': {e}")

    def get_formatted_price(self, price: Any) -> str:
        """
        按商店货币格式渲染价格，包含货币符号，不包含HTML容器。

        Args:
            price: 价格

        Returns:
            格式化后的价格
        """
        return self.pricing_service.currency(price, True, False)
