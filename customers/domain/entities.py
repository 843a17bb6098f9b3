"""
顾客领域实体。
"""
from typing import Any

from core.domain import Entity


class Customer(Entity):
    """
    顾客实体。
    代表一个可登录商店前台的账号。
    """

    def __init__(
        self,
        id: Any = None,
        email: str = "",
        firstname: str = "",
        lastname: str = "",
        is_active: bool = True
    ):
        """
        初始化顾客实体。

        Args:
            id: 顾客ID
            email: 邮箱
            firstname: 名
            lastname: 姓
            is_active: 账号是否启用
        """
        super().__init__(id)
        self.email = email
        self.firstname = firstname
        self.lastname = lastname
        self.is_active = is_active

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.firstname, self.lastname) if part)
