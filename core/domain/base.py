"""
核心领域模型基类模块。
包含Entity基类，用于所有具有唯一标识的领域对象。
"""
from typing import Any


class Entity:
    """
    实体基类。
    实体是具有唯一标识的领域对象，其相等性通过标识而非属性值判断。
    标识由持久化层分配，尚未保存的实体标识为None。
    """
    def __init__(self, id: Any = None):
        """
        初始化实体。

        Args:
            id: 实体标识
        """
        self.id = id

    def get_id(self) -> Any:
        """返回实体标识"""
        return self.id

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等。
        同一类型且标识相同的实体视为相等；未保存的实体只与自身相等。

        Args:
            other: 另一个实体

        Returns:
            如果两个实体相等，则返回True；否则返回False
        """
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))
