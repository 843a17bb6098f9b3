"""
基础配置文件。
包含所有环境共用的Django配置，环境配置文件在此基础上覆盖。
"""
import os

from .env import *

# 应用定义
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'rest_framework.authtoken',
    'products.apps.ProductsConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'examoms.urls'
WSGI_APPLICATION = 'examoms.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# 国际化与时区，数据库中的时间统一以UTC存储
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# DRF配置，Token认证同时用于GraphQL请求的顾客身份识别
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.TokenAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
}

# GraphQL配置
GRAPHQL_SETTINGS = {
    'GRAPHIQL': DEBUG,
}

# 商品模块配置
PRODUCT_SETTINGS = {
    'SEARCH_COLUMNS': PRODUCT_SEARCH_COLUMNS,
    'DEFAULT_PAGE_SIZE': PRODUCT_DEFAULT_PAGE_SIZE,
    'CURRENCY_CODE': CURRENCY_CODE,
    'CURRENCY_SYMBOL': CURRENCY_SYMBOL,
    'CURRENCY_DECIMAL_PLACES': CURRENCY_DECIMAL_PLACES,
    'STORE_TIME_ZONE': TIME_ZONE,
}


def build_logging(console_level: str = 'INFO', app_level: str = 'INFO', log_dir=None) -> dict:
    """
    生成Django LOGGING配置。

    Args:
        console_level: 控制台输出级别
        app_level: 项目代码(core、products、customers)的日志级别
        log_dir: 日志目录，为空时只输出到控制台；否则按大小滚动写入django.log和error.log

    Returns:
        LOGGING字典
    """
    handlers = {
        'console': {
            'level': console_level,
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    }
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        for name, level in (('django', 'INFO'), ('error', 'ERROR')):
            handlers[f'{name}_file'] = {
                'level': level,
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': os.path.join(log_dir, f'{name}.log'),
                'maxBytes': 10 * 1024 * 1024,  # 10MB
                'backupCount': 10,
                'formatter': 'verbose',
            }

    app_logger = {'handlers': list(handlers), 'level': app_level, 'propagate': False}
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
                'style': '{',
            },
        },
        'handlers': handlers,
        'loggers': {
            'django': {'handlers': list(handlers), 'level': 'INFO', 'propagate': True},
            'core': dict(app_logger),
            'products': dict(app_logger),
            'customers': dict(app_logger),
        },
    }


LOGGING = build_logging()
