"""
核心模块包
包含IP编码、类型描述、延迟参数等核心实现
"""

# 导入IP模块
from .inet import long_to_ip, ip_to_long, check_range

# 导入延迟参数
from .deferred import DeferredValue

__all__ = [
    # IP模块
    'long_to_ip',
    'ip_to_long',
    'check_range',

    # 延迟参数
    'DeferredValue',
]
