"""
IPv4整数转点分十进制标量函数
"""

__version__ = "1.0.0"

from .core.inet import long_to_ip, ip_to_long
from .functions import LongToIP, FunctionRegistry
from .executor import ColumnarExecutor

__all__ = ['long_to_ip', 'ip_to_long', 'LongToIP', 'FunctionRegistry', 'ColumnarExecutor']
