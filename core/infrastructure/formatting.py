"""
格式化服务。
提供时区转换与货币渲染，供搜索条件构建和响应投影使用。

约定：数据库中的时间以UTC存储；"配置时区"指商店的显示时区(Django TIME_ZONE)。
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings
from django.utils.html import escape
from loguru import logger

from core.domain import Money

DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class TimezoneService:
    """
    时区服务。
    在商店配置时区与UTC之间转换时间。
    """

    def __init__(self, config_timezone: Optional[str] = None):
        """
        初始化时区服务。

        Args:
            config_timezone: 商店配置时区名称，默认取Django的TIME_ZONE

        Raises:
            ZoneInfoNotFoundError: 时区名称无效时抛出
        """
        self.config_timezone = config_timezone or settings.TIME_ZONE
        self._zone = ZoneInfo(self.config_timezone)

    def get_config_timezone(self) -> ZoneInfo:
        return self._zone

    def convert_config_time_to_utc(
        self,
        value: Union[str, datetime],
        format: str = DEFAULT_DATETIME_FORMAT
    ) -> str:
        """
        将配置时区下的本地时间转换为UTC时间字符串。

        Args:
            value: 本地时间，字符串须符合format
            format: 输入与输出使用的时间格式

        Returns:
            UTC时间字符串

        Raises:
            ValueError: 无法按format解析时抛出
        """
        local = value if isinstance(value, datetime) else datetime.strptime(value, format)
        if local.tzinfo is None:
            local = local.replace(tzinfo=self._zone)
        return local.astimezone(timezone.utc).strftime(format)

    def date(
        self,
        value: Union[str, datetime],
        format: str = DEFAULT_DATETIME_FORMAT
    ) -> datetime:
        """
        将UTC时间转换为配置时区下的时间。

        Args:
            value: UTC时间，字符串须符合format；无时区信息的datetime按UTC处理
            format: 输入字符串的时间格式

        Returns:
            带配置时区信息的datetime

        Raises:
            ValueError: 无法按format解析时抛出
        """
        utc = value if isinstance(value, datetime) else datetime.strptime(value, format)
        if utc.tzinfo is None:
            utc = utc.replace(tzinfo=timezone.utc)
        return utc.astimezone(self._zone)


class PricingService:
    """
    价格格式化服务。
    按商店货币配置渲染金额。
    """

    def __init__(
        self,
        currency_code: str = "USD",
        currency_symbol: str = "$",
        decimal_places: int = 2
    ):
        """
        初始化价格格式化服务。

        Args:
            currency_code: 货币代码
            currency_symbol: 货币符号
            decimal_places: 小数位数
        """
        self.currency_code = currency_code
        self.currency_symbol = currency_symbol
        self.decimal_places = decimal_places

    def currency(self, value: Any, format: bool = True, include_container: bool = True) -> Union[str, Decimal]:
        """
        渲染金额。

        Args:
            value: 金额，None按0处理
            format: 是否渲染为带货币符号的字符串；为False时返回四舍五入后的Decimal
            include_container: 是否包裹HTML容器<span class="price">

        Returns:
            格式化后的金额字符串或Decimal
        """
        money = Money(value, self.currency_code)
        if not format:
            return money.rounded(self.decimal_places).amount

        rendered = money.format(self.currency_symbol, self.decimal_places)
        if include_container:
            return f'<span class="price">{escape(rendered)}</span>'
        return rendered


def create_timezone_service(config_timezone: Optional[str] = None) -> TimezoneService:
    """
    创建时区服务，配置时区无效时回退到UTC并记录错误。

    Args:
        config_timezone: 商店配置时区名称

    Returns:
        时区服务实例
    """
    try:
        return TimezoneService(config_timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error(f"无效的商店时区 {config_timezone!r}: {e}，使用UTC")
        return TimezoneService("UTC")
