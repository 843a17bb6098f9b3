"""
GraphQL HTTP入口。
基于strawberry的Django视图，为每个请求构建GraphQlContext。
"""
from django.http import HttpRequest, HttpResponse
from strawberry.django.views import GraphQLView

from core.infrastructure.graphql.context import GraphQlContext, build_context


class ContextGraphQLView(GraphQLView):
    """GraphQL视图，解析器通过info.context获取GraphQlContext"""

    def get_context(self, request: HttpRequest, response: HttpResponse) -> GraphQlContext:
        return build_context(request)
