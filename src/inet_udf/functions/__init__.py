"""
函数模块
包含标量函数基类、内置函数与注册表
"""

from .base import GenericUDF
from .long_to_ip import LongToIP
from .registry import FunctionRegistry

__all__ = [
    'GenericUDF',
    'LongToIP',
    'FunctionRegistry'
]
