"""
值对象模块。
包含ValueObject基类和常用值对象实现，如Money。
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any


class ValueObject:
    """
    值对象基类。
    值对象是通过其属性值而非标识定义的不可变对象。
    相同属性值的值对象被视为相等。
    """

    def __eq__(self, other: Any) -> bool:
        """
        判断两个值对象是否相等，通过比较它们的属性值。

        Args:
            other: 另一个值对象

        Returns:
            如果两个值对象的属性值相等，则返回True；否则返回False
        """
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        # 属性值中可能包含列表(如in条件的值)，转换为repr后再计算哈希
        items = frozenset((k, repr(v)) for k, v in self.__dict__.items())
        return hash(items)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({fields})"


class Money(ValueObject):
    """
    金额值对象，表示带有货币单位的金额。
    """

    def __init__(self, amount: Any, currency: str = "USD"):
        """
        初始化金额值对象。

        Args:
            amount: 金额数值，将被转换为Decimal；None视为0
            currency: 货币代码，默认为美元(USD)
        """
        self.amount = Decimal(str(amount)) if amount is not None else Decimal("0")
        self.currency = currency

    def rounded(self, places: int = 2) -> 'Money':
        """
        按指定小数位四舍五入。

        Args:
            places: 小数位数

        Returns:
            四舍五入后的新金额
        """
        exponent = Decimal(1).scaleb(-places)
        return Money(self.amount.quantize(exponent, rounding=ROUND_HALF_UP), self.currency)

    def format(self, symbol: str, places: int = 2) -> str:
        """
        按货币格式渲染金额，例如"$1,234.50"、"-$5.00"。

        Args:
            symbol: 货币符号
            places: 小数位数

        Returns:
            格式化后的金额字符串
        """
        amount = self.rounded(places).amount
        sign = "-" if amount < 0 else ""
        return f"{sign}{symbol}{abs(amount):,.{places}f}"
