"""
测试环境配置文件。
使用内存数据库，不依赖MySQL和Redis。
"""
from .base import *

DEBUG = False

# 测试中固定商店时区，用于验证本地时间到UTC的转换
TIME_ZONE = 'America/New_York'
PRODUCT_SETTINGS['STORE_TIME_ZONE'] = TIME_ZONE

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}
SESSION_ENGINE = 'django.contrib.sessions.backends.db'

# 简化密码哈希加速测试
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

LOGGING = build_logging(console_level='ERROR', app_level='ERROR')

REST_FRAMEWORK['TEST_REQUEST_DEFAULT_FORMAT'] = 'json'
