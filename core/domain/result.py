"""
结果类型模块。
用Ok/Err两个变体显式表达可能失败的操作，由调用方决定失败时的回退值。
"""
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


class Ok(Generic[T]):
    """成功结果"""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: Any) -> T:
        return self._value

    def map(self, func: Callable[[T], U]) -> 'Ok[U]':
        return Ok(func(self._value))

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Ok", repr(self._value)))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err:
    """
    失败结果。
    reason为失败原因的描述，不携带异常对象。
    """

    __slots__ = ("_reason",)

    def __init__(self, reason: str):
        self._reason = reason

    @property
    def reason(self) -> str:
        return self._reason

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """
        Raises:
            ValueError: 总是抛出，消息为失败原因
        """
        raise ValueError(self._reason)

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, func: Callable[[Any], Any]) -> 'Err':
        return self

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and other._reason == self._reason

    def __hash__(self) -> int:
        return hash(("Err", self._reason))

    def __repr__(self) -> str:
        return f"Err({self._reason!r})"


Result = Union[Ok[T], Err]
