"""
Django settings for examoms project.

此文件作为配置入口点，根据DJANGO_ENV环境变量加载相应的配置模块。
"""
import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'development')

if DJANGO_ENV == 'production':
    from .config.production import *
elif DJANGO_ENV == 'testing':
    from .config.testing import *
else:  # 默认使用开发环境配置
    from .config.development import *
