"""
顾客仓储接口。
"""
from abc import abstractmethod
from typing import Any

from core.domain.repositories import ReadOnlyRepository
from customers.domain.entities import Customer


class CustomerRepository(ReadOnlyRepository[Customer]):
    """顾客仓储接口"""

    @abstractmethod
    def get_by_id(self, id: Any) -> Customer:
        """
        根据ID获取顾客。

        Args:
            id: 顾客ID

        Returns:
            顾客实体

        Raises:
            EntityNotFoundException: 顾客不存在时抛出
        """
        pass
