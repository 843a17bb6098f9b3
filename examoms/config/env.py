"""
环境变量处理模块。
从config目录下的.env文件和进程环境变量中读取配置项。
"""
import os
import warnings
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv


# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_FILE = os.path.join(os.path.dirname(__file__), '.env')


def load_env_file(env_path: str = ENV_FILE) -> bool:
    """
    加载.env文件，已存在的进程环境变量不会被覆盖。

    Returns:
        是否成功加载
    """
    if not os.path.exists(env_path):
        return False

    try:
        load_dotenv(dotenv_path=env_path, encoding='utf-8', override=False)
    except (OSError, UnicodeDecodeError) as e:
        warnings.warn(f"加载环境变量文件{env_path}失败: {e}，将使用默认值")
        return False

    return True


load_env_file()


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    获取环境变量值，支持类型转换和默认值

    Args:
        name: 环境变量名称
        default: 环境变量不存在时返回的默认值
        cast_type: 类型转换函数，如int, bool, list, tuple

    Returns:
        环境变量的值，经过类型转换（如果指定了cast_type）
    """
    value = os.environ.get(name)

    if value is None:
        return default

    if cast_type is None:
        return value

    if cast_type is bool:
        return value.lower() in ('true', 'yes', '1', 'y')
    if cast_type in (list, tuple):
        return cast_type(item.strip() for item in value.split(',') if item.strip())

    try:
        return cast_type(value)
    except (ValueError, TypeError):
        warnings.warn(f"无法将环境变量{name}的值'{value}'转换为{cast_type.__name__}类型，使用默认值")
        return default


# 基础配置
DEBUG = get_env('DEBUG', default=True, cast_type=bool)
SECRET_KEY = get_env('SECRET_KEY', default='django-insecure-examoms-local-development-key')
ALLOWED_HOSTS = get_env('ALLOWED_HOSTS', default=['localhost', '127.0.0.1'], cast_type=list)

# 数据库配置
DB_ENGINE = get_env('DB_ENGINE', default='django.db.backends.mysql')
DB_NAME = get_env('DB_NAME', default='examoms')
DB_USER = get_env('DB_USER', default='root')
DB_PASSWORD = get_env('DB_PASSWORD', default='')
DB_HOST = get_env('DB_HOST', default='127.0.0.1')
DB_PORT = get_env('DB_PORT', default='3306')

# Redis配置，用于缓存和会话存储
REDIS_URL = get_env('REDIS_URL', default='redis://localhost:6379/1')
REDIS_PASSWORD = get_env('REDIS_PASSWORD', default='')
REDIS_MAX_CONNECTIONS = get_env('REDIS_MAX_CONNECTIONS', default=100, cast_type=int)
REDIS_KEY_PREFIX = get_env('REDIS_KEY_PREFIX', default='examoms')

# 国际化配置，TIME_ZONE同时作为商店显示时区
LANGUAGE_CODE = get_env('LANGUAGE_CODE', default='en-us')
TIME_ZONE = get_env('TIME_ZONE', default='UTC')

# 商品模块配置
PRODUCT_SEARCH_COLUMNS = get_env('PRODUCT_SEARCH_COLUMNS', default=('name', 'sku'), cast_type=tuple)
PRODUCT_DEFAULT_PAGE_SIZE = get_env('PRODUCT_DEFAULT_PAGE_SIZE', default=20, cast_type=int)
CURRENCY_CODE = get_env('CURRENCY_CODE', default='USD')
CURRENCY_SYMBOL = get_env('CURRENCY_SYMBOL', default='$')
CURRENCY_DECIMAL_PLACES = get_env('CURRENCY_DECIMAL_PLACES', default=2, cast_type=int)
