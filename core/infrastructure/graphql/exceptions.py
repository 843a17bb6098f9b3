"""
GraphQL异常。
解析器中抛出的异常，消息与category扩展字段原样返回给客户端，均不可重试。
"""
from graphql import GraphQLError


class GraphQlException(GraphQLError):
    """GraphQL异常基类，category写入错误的extensions"""

    category = "graphql"

    def __init__(self, message: str):
        super().__init__(message, extensions={"category": self.category})

    def get_category(self) -> str:
        return self.category


class GraphQlAuthorizationException(GraphQlException):
    """调用方未通过授权，例如未以顾客身份登录"""

    category = "graphql-authorization"


class GraphQlInputException(GraphQlException):
    """请求参数无效，客户端可修正后重新请求"""

    category = "graphql-input"


class GraphQlNoSuchEntityException(GraphQlException):
    """请求引用的实体不存在"""

    category = "graphql-no-such-entity"
