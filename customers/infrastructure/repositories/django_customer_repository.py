"""
顾客仓储的Django实现。
顾客账号保存在Django的用户模型中。
"""
from typing import Any

from django.contrib.auth import get_user_model
from loguru import logger

from core.domain.exceptions import EntityNotFoundException
from customers.domain.entities import Customer
from customers.domain.repositories import CustomerRepository


class DjangoCustomerRepository(CustomerRepository):
    """
    基于Django用户模型的顾客仓储实现。
    """

    def get_by_id(self, id: Any) -> Customer:
        """
        根据ID获取顾客。

        Args:
            id: 顾客ID

        Returns:
            顾客实体

        Raises:
            EntityNotFoundException: 顾客不存在或ID格式无效时抛出
        """
        user_model = get_user_model()
        if id is None:
            raise EntityNotFoundException("customer", id)
        try:
            user = user_model.objects.get(pk=id)
        except (user_model.DoesNotExist, ValueError, TypeError):
            logger.debug(f"顾客不存在: ID={id}")
            raise EntityNotFoundException("customer", id)

        return self._to_domain_entity(user)

    def _to_domain_entity(self, user: Any) -> Customer:
        return Customer(
            id=user.pk,
            email=user.email,
            firstname=user.first_name,
            lastname=user.last_name,
            is_active=user.is_active
        )
