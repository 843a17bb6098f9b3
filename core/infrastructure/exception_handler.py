"""
统一异常处理器。
以strawberry Schema扩展的形式，在操作结束后统一处理GraphQL错误：
为错误补充category扩展字段、记录日志，并在非调试模式下屏蔽未预期异常的内部信息。
"""
import logging
import traceback
from typing import Optional

from django.conf import settings
from graphql import ExecutionResult, GraphQLError
from strawberry.extensions import SchemaExtension

from core.domain.exceptions import (
    AuthorizationException,
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from core.infrastructure.graphql.exceptions import (
    GraphQlAuthorizationException,
    GraphQlException,
    GraphQlInputException,
    GraphQlNoSuchEntityException,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INTERNAL_ERROR_CATEGORY = "internal"


def error_category(exc: Optional[BaseException]) -> Optional[str]:
    """
    根据原始异常类型确定错误分类。

    Args:
        exc: 解析器中抛出的原始异常，语法或校验错误时为None

    Returns:
        错误分类；未预期的异常返回None
    """
    # 1. GraphQL异常自带分类
    if isinstance(exc, GraphQlException):
        return exc.get_category()

    # 2. 领域异常映射到对应的GraphQL分类
    if isinstance(exc, EntityNotFoundException):
        return GraphQlNoSuchEntityException.category
    if isinstance(exc, ValidationException):
        return GraphQlInputException.category
    if isinstance(exc, AuthorizationException):
        return GraphQlAuthorizationException.category
    if isinstance(exc, DomainException):
        return GraphQlException.category

    # 3. 其他未预期的异常
    return None


def handle_error(error: GraphQLError) -> GraphQLError:
    """
    处理单个GraphQL错误。

    Args:
        error: GraphQL错误

    Returns:
        处理后的GraphQL错误
    """
    original = error.original_error

    # 查询语法、字段或变量校验错误，由客户端修正
    if original is None:
        extensions = dict(error.extensions or {})
        extensions.setdefault("category", GraphQlInputException.category)
        error.extensions = extensions
        return error

    category = error_category(original)
    if category is not None:
        logger.info(f"GraphQL请求失败: [{category}] {error.message} path={error.path}")
        extensions = dict(error.extensions or {})
        extensions["category"] = category
        error.extensions = extensions
        return error

    logger.error(
        f"未处理的异常: {original.__class__.__name__} - {original}\n"
        f"路径: {error.path}\n"
        f"{''.join(traceback.format_exception(type(original), original, original.__traceback__))}"
    )
    if settings.DEBUG:
        extensions = dict(error.extensions or {})
        extensions["category"] = INTERNAL_ERROR_CATEGORY
        error.extensions = extensions
        return error

    return GraphQLError(
        INTERNAL_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None,
        extensions={"category": INTERNAL_ERROR_CATEGORY},
    )


class UnifiedErrorHandler(SchemaExtension):
    """在每个GraphQL操作结束后统一处理错误"""

    def on_operation(self):
        yield
        result = self.execution_context.result
        if isinstance(result, ExecutionResult) and result.errors:
            result.errors = [handle_error(error) for error in result.errors]
