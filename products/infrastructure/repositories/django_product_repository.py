"""
商品仓储的Django实现。
"""
from decimal import Decimal
from typing import Optional

from loguru import logger

from core.domain.search_criteria import SearchCriteria, SearchResult
from core.infrastructure.criteria import SearchCriteriaApplier
from products.domain.entities import Product
from products.domain.repositories import ProductRepository
from products.infrastructure.models.product_models import Product as ProductModel


class DjangoProductRepository(ProductRepository):
    """
    基于Django ORM的商品仓储实现。
    """

    # 对外字段名到模型字段名的映射
    FIELD_ALIASES = {
        'entity_id': 'id',
        'sort_description': 'short_description',
    }

    def __init__(self):
        self.criteria_applier = SearchCriteriaApplier(ProductModel, self.FIELD_ALIASES)

    def get_list(self, search_criteria: SearchCriteria) -> SearchResult:
        """
        按搜索条件检索商品。

        Args:
            search_criteria: 搜索条件

        Returns:
            搜索结果

        Raises:
            ValidationException: 搜索条件引用了未知字段或不支持的条件类型时抛出
        """
        queryset, total_count = self.criteria_applier.apply(
            ProductModel.objects.all(),
            search_criteria
        )

        # 转换为领域实体
        products = [self._to_domain_entity(model) for model in queryset]
        logger.debug(f"商品列表查询完成: 总数{total_count}, 当前页{len(products)}条")

        return SearchResult(
            items=products,
            total_count=total_count,
            search_criteria=search_criteria
        )

    def _to_domain_entity(self, product_model: ProductModel) -> Product:
        """
        将数据库模型转换为领域实体。

        Args:
            product_model: 商品数据库模型

        Returns:
            商品实体
        """
        return Product(
            id=product_model.id,
            name=product_model.name,
            sku=product_model.sku,
            price=product_model.price,
            description=product_model.description,
            short_description=product_model.short_description,
            status=product_model.status,
            weight=self._to_float(product_model.weight),
            dimension_package_height=self._to_float(product_model.dimension_package_height),
            dimension_package_length=self._to_float(product_model.dimension_package_length),
            dimension_package_width=self._to_float(product_model.dimension_package_width),
            created_at=product_model.created_at,
            updated_at=product_model.updated_at
        )

    @staticmethod
    def _to_float(value: Optional[Decimal]) -> Optional[float]:
        return float(value) if value is not None else None
