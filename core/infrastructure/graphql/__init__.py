"""
GraphQL基础设施包。
提供GraphQL异常、请求上下文和HTTP视图。
"""

from core.infrastructure.graphql.exceptions import (
    GraphQlException,
    GraphQlAuthorizationException,
    GraphQlInputException,
    GraphQlNoSuchEntityException,
)
from core.infrastructure.graphql.context import GraphQlContext, build_context

__all__ = [
    'GraphQlException',
    'GraphQlAuthorizationException',
    'GraphQlInputException',
    'GraphQlNoSuchEntityException',
    'GraphQlContext',
    'build_context',
]
