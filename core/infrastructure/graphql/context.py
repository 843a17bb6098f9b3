"""
GraphQL请求上下文。
每个请求构建一次，携带调用方身份和是否为已登录顾客的标记。
"""
import logging
from typing import Any, Optional

from django.http import HttpRequest
from rest_framework.authentication import TokenAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)


class GraphQlContext:
    """GraphQL请求上下文"""

    def __init__(
        self,
        request: Optional[HttpRequest] = None,
        user_id: Any = None,
        is_customer: bool = False
    ):
        """
        初始化请求上下文。

        Args:
            request: Django请求
            user_id: 调用方用户ID，匿名访问时为None
            is_customer: 调用方是否为已登录顾客
        """
        self.request = request
        self.user_id = user_id
        self.is_customer = is_customer


def _is_customer(user: Any) -> bool:
    # 后台员工账号不视为顾客
    return bool(
        user is not None
        and user.is_authenticated
        and user.is_active
        and not user.is_staff
    )


def build_context(request: HttpRequest) -> GraphQlContext:
    """
    根据请求构建上下文。
    优先使用会话中的登录用户，其次尝试DRF的Token认证(Authorization: Token <key>)。
    认证失败的请求按匿名处理，由解析器决定是否拒绝。

    Args:
        request: Django请求

    Returns:
        请求上下文
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        user = None
        try:
            authenticated = TokenAuthentication().authenticate(request)
        except AuthenticationFailed as e:
            logger.warning(f"GraphQL请求Token认证失败: {e.detail}")
            authenticated = None
        if authenticated is not None:
            user = authenticated[0]

    if user is None:
        return GraphQlContext(request=request)

    return GraphQlContext(
        request=request,
        user_id=user.pk,
        is_customer=_is_customer(user)
    )
