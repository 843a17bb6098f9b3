"""
基于Django ORM的搜索条件执行器。
将SearchCriteria翻译为QuerySet：组内OR、组间AND，排序与分页。
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models
from django.db.models import Lookup, Q, QuerySet
from loguru import logger

from core.domain.exceptions import ValidationException
from core.domain.search_criteria import ConditionType, Filter, SearchCriteria, SortOrder
from core.infrastructure.formatting import DEFAULT_DATETIME_FORMAT


@models.Field.register_lookup
class Like(Lookup):
    """
    SQL LIKE查找，值中的%和_作为通配符原样传递。
    两侧都转为大写，实现与数据库排序规则无关的大小写不敏感匹配。
    """
    lookup_name = "like"
    prepare_rhs = False

    def as_sql(self, compiler, connection):
        lhs, lhs_params = self.process_lhs(compiler, connection)
        rhs, rhs_params = self.process_rhs(compiler, connection)
        return f"UPPER({lhs}) LIKE UPPER({rhs})", list(lhs_params) + list(rhs_params)


class SearchCriteriaApplier:
    """
    搜索条件执行器。
    负责字段校验、条件类型到Django查找的映射、排序和分页。
    """

    # 条件类型到Django查找的映射，值为(查找名, 是否取反)
    LOOKUPS: Dict[str, Tuple[str, bool]] = {
        ConditionType.EQ: ("exact", False),
        ConditionType.NEQ: ("exact", True),
        ConditionType.LIKE: ("like", False),
        ConditionType.NLIKE: ("like", True),
        ConditionType.IN: ("in", False),
        ConditionType.NIN: ("in", True),
        ConditionType.GT: ("gt", False),
        ConditionType.GTEQ: ("gte", False),
        ConditionType.LT: ("lt", False),
        ConditionType.LTEQ: ("lte", False),
        ConditionType.FROM: ("gte", False),
        ConditionType.TO: ("lte", False),
    }

    def __init__(self, model: type, field_aliases: Optional[Dict[str, str]] = None):
        """
        初始化执行器。

        Args:
            model: Django模型类
            field_aliases: 对外字段名到模型字段名的映射，例如entity_id -> id
        """
        self.model = model
        self.field_aliases = field_aliases or {}
        self._fields = {field.name: field for field in model._meta.concrete_fields}

    def apply(self, queryset: QuerySet, search_criteria: SearchCriteria) -> Tuple[QuerySet, int]:
        """
        将搜索条件应用到查询集。

        Args:
            queryset: 基础查询集
            search_criteria: 搜索条件

        Returns:
            当前页查询集与分页前匹配总数的元组

        Raises:
            ValidationException: 字段未知、条件类型不支持时抛出
        """
        for filter_group in search_criteria.get_filter_groups():
            group_q = self._group_to_q(filter_group.get_filters())
            if group_q is not None:
                queryset = queryset.filter(group_q)

        queryset = queryset.order_by(*self._ordering(search_criteria.get_sort_orders()))
        total_count = queryset.count()

        page_size = search_criteria.get_page_size()
        current_page = search_criteria.get_current_page()
        if page_size:
            offset = (max(current_page or 1, 1) - 1) * page_size
            queryset = queryset[offset:offset + page_size]

        logger.debug(
            f"{self.model.__name__} 查询: 过滤组{len(search_criteria.get_filter_groups())}个, "
            f"总数{total_count}, 页码{current_page}, 每页{page_size}"
        )
        return queryset, total_count

    def resolve_field(self, field_name: str) -> models.Field:
        """
        将对外字段名解析为模型字段。

        Args:
            field_name: 对外字段名

        Returns:
            模型字段

        Raises:
            ValidationException: 字段不存在时抛出
        """
        name = self.field_aliases.get(field_name, field_name)
        field = self._fields.get(name)
        if field is None:
            raise ValidationException(field_name, "unknown field")
        return field

    def _group_to_q(self, filters: Iterable[Filter]) -> Optional[Q]:
        group_q = None
        for item in filters:
            item_q = self._filter_to_q(item)
            group_q = item_q if group_q is None else group_q | item_q
        return group_q

    def _filter_to_q(self, item: Filter) -> Q:
        field = self.resolve_field(item.get_field())
        condition = (item.get_condition_type() or ConditionType.EQ).lower()
        value = item.get_value()

        if condition == ConditionType.NULL:
            return Q(**{f"{field.name}__isnull": True})
        if condition == ConditionType.NOTNULL:
            return Q(**{f"{field.name}__isnull": False})
        if condition == ConditionType.FINSET:
            return self._find_in_set(field.name, value)
        if condition not in self.LOOKUPS:
            raise ValidationException(item.get_field(), f"unsupported condition type '{condition}'")

        lookup, negate = self.LOOKUPS[condition]
        if lookup == "in":
            value = [self._coerce_value(field, v) for v in self._as_list(value)]
            for v in value:
                self._check_value(item.get_field(), field, v)
        elif lookup != "like":
            value = self._coerce_value(field, value)
            self._check_value(item.get_field(), field, value)

        q = Q(**{f"{field.name}__{lookup}": value})
        return ~q if negate else q

    @staticmethod
    def _check_value(field_name: str, field: models.Field, value: Any) -> None:
        """
        确认比较值可以转换为字段类型，例如整数字段不接受"abc"。

        Raises:
            ValidationException: 值无法转换时抛出
        """
        try:
            field.get_prep_value(value)
        except (ValueError, TypeError, DjangoValidationError) as e:
            raise ValidationException(field_name, f"cannot compare with {value!r}") from e

    def _find_in_set(self, field_name: str, value: Any) -> Q:
        # 逗号分隔集合中包含指定值
        value = str(value)
        return (
            Q(**{field_name: value})
            | Q(**{f"{field_name}__startswith": f"{value},"})
            | Q(**{f"{field_name}__endswith": f",{value}"})
            | Q(**{f"{field_name}__contains": f",{value},"})
        )

    def _coerce_value(self, field: models.Field, value: Any) -> Any:
        """
        时间字段的字符串值视为UTC时间，避免Django按默认时区解释无时区时间。
        """
        if isinstance(field, models.DateTimeField) and isinstance(value, str):
            try:
                return datetime.strptime(value, DEFAULT_DATETIME_FORMAT).replace(tzinfo=timezone.utc)
            except ValueError:
                return value
        return value

    def _ordering(self, sort_orders: List[SortOrder]) -> List[str]:
        ordering = []
        for sort_order in sort_orders:
            name = self.resolve_field(sort_order.get_field()).name
            ordering.append(f"-{name}" if sort_order.is_descending() else name)
        # 主键作为最后的排序键，保证分页稳定
        ordering.append("pk")
        return ordering

    @staticmethod
    def _as_list(value: Any) -> List[Any]:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(value, (list, tuple, set)):
            return list(value)
        return [value]
