"""
领域异常。
查询处理过程中可预期的失败，由解析器转换为带category的GraphQL错误。
异常消息会原样返回给GraphQL客户端，因此使用英文。
"""
from typing import Any, Optional


class DomainException(Exception):
    """领域异常基类，message为对外可见的错误消息"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundException(DomainException):
    """
    按标识查找的实体不存在。

    消息格式为"No such entity with <实体名><字段名> = <值>"，
    例如"No such entity with customerId = 5"。
    """

    def __init__(self, entity_name: str, entity_id: Any, field_name: str = "id"):
        """
        Args:
            entity_name: 实体名称，例如customer
            entity_id: 用于查找的值
            field_name: 用于查找的字段名
        """
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.field_name = field_name
        super().__init__(f"No such entity with {entity_name}{field_name.capitalize()} = {entity_id}")


class ValidationException(DomainException):
    """查询条件中的字段、条件类型或排序方向无效"""

    def __init__(self, field_name: Optional[str] = None, message: str = "Invalid value"):
        """
        Args:
            field_name: 出错的字段，为空时消息不带字段前缀
            message: 错误描述
        """
        self.field_name = field_name
        super().__init__(f"Invalid value of \"{field_name}\": {message}" if field_name else message)


class AuthorizationException(DomainException):
    """调用方无权执行操作"""

    def __init__(self, user_id: Any, operation: str):
        self.user_id = user_id
        self.operation = operation
        super().__init__(f"User (ID={user_id}) is not allowed to perform '{operation}'")
