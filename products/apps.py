"""
商品模块Django应用配置。
"""
from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'products'
    verbose_name = "商品目录"
