"""
IP模块 - IPv4整数编码
"""

from .address import (
    long_to_ip, ip_to_long, check_range,
    IPV4_MAX, MASK, REJECT, OUT_OF_RANGE_POLICIES
)

__all__ = [
    'long_to_ip',
    'ip_to_long',
    'check_range',
    'IPV4_MAX',
    'MASK',
    'REJECT',
    'OUT_OF_RANGE_POLICIES'
]
