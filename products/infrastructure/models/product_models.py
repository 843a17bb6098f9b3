"""
商品基础设施层数据库模型。
定义与商品领域相关的Django ORM模型。
"""
from django.db import models


class Product(models.Model):
    """商品数据库模型"""

    # 商品状态选项
    class StatusChoices(models.IntegerChoices):
        ENABLED = 1, 'Enabled'
        DISABLED = 2, 'Disabled'

    id = models.AutoField(primary_key=True, verbose_name="商品ID")
    name = models.CharField(max_length=255, verbose_name="商品名称")
    sku = models.CharField(max_length=64, unique=True, verbose_name="SKU")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        default=0,
        verbose_name="价格"
    )
    description = models.TextField(blank=True, default="", verbose_name="商品描述")
    short_description = models.TextField(blank=True, default="", verbose_name="商品简述")
    status = models.PositiveSmallIntegerField(
        choices=StatusChoices.choices,
        default=StatusChoices.ENABLED,
        verbose_name="商品状态"
    )
    weight = models.DecimalField(
        max_digits=12, decimal_places=4, null=True, blank=True, verbose_name="重量"
    )
    dimension_package_height = models.DecimalField(
        max_digits=12, decimal_places=4, null=True, blank=True, verbose_name="包装高度"
    )
    dimension_package_length = models.DecimalField(
        max_digits=12, decimal_places=4, null=True, blank=True, verbose_name="包装长度"
    )
    dimension_package_width = models.DecimalField(
        max_digits=12, decimal_places=4, null=True, blank=True, verbose_name="包装宽度"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="更新时间")

    class Meta:
        app_label = 'products'
        db_table = 'catalog_product'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['name'], name='idx_product_name'),
            models.Index(fields=['status'], name='idx_product_status'),
            models.Index(fields=['created_at'], name='idx_product_created'),
        ]

    def __str__(self):
        return f"{self.sku} {self.name}"
