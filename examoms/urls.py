"""
URL configuration for examoms project.
"""
from django.conf import settings
from django.contrib import admin
from django.urls import path
from django.views.decorators.csrf import csrf_exempt

from core.infrastructure.graphql.views import ContextGraphQLView
from examoms.schema import schema

urlpatterns = [
    path('admin/', admin.site.urls),
    path(
        'graphql',
        csrf_exempt(ContextGraphQLView.as_view(
            schema=schema,
            graphql_ide='graphiql' if settings.GRAPHQL_SETTINGS.get('GRAPHIQL') else None,
        )),
        name='graphql'
    ),
]
