"""
商品模块配置文件。
从Django设置中获取商品模块的配置。
"""
from django.conf import settings

# 获取商品模块配置，如果不存在则使用默认值
PRODUCT_SETTINGS = getattr(settings, 'PRODUCT_SETTINGS', {})

# 参与全文搜索(search参数)的字段
SEARCH_COLUMNS = tuple(PRODUCT_SETTINGS.get('SEARCH_COLUMNS', ('name', 'sku')))

# 分页默认值
DEFAULT_CURRENT_PAGE = 1
DEFAULT_PAGE_SIZE = PRODUCT_SETTINGS.get('DEFAULT_PAGE_SIZE', 20)

# 货币配置
CURRENCY_CODE = PRODUCT_SETTINGS.get('CURRENCY_CODE', 'USD')
CURRENCY_SYMBOL = PRODUCT_SETTINGS.get('CURRENCY_SYMBOL', '$')
CURRENCY_DECIMAL_PLACES = PRODUCT_SETTINGS.get('CURRENCY_DECIMAL_PLACES', 2)

# 商店显示时区
STORE_TIME_ZONE = PRODUCT_SETTINGS.get('STORE_TIME_ZONE', settings.TIME_ZONE)
