"""
项目GraphQL schema。
汇总各模块的查询类型，并挂载统一异常处理扩展。
"""
import strawberry
from strawberry.schema.config import StrawberryConfig

from core.infrastructure.exception_handler import UnifiedErrorHandler
from products.api.schema import Query

schema = strawberry.Schema(
    query=Query,
    extensions=[UnifiedErrorHandler],
    # 对外字段名保持snake_case，参数名在字段定义中单独指定
    config=StrawberryConfig(auto_camel_case=False),
)
