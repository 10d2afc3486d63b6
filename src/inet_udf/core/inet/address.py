"""
IPv4地址编码 - 整数与点分十进制之间的转换
"""
from ...exceptions import InvalidIPFormatError, CoercionError

IPV4_MAX = 0xFFFFFFFF

MASK = "mask"
REJECT = "reject"
OUT_OF_RANGE_POLICIES = (MASK, REJECT)


def long_to_ip(ip: int) -> str:
    """
    将整数形式的IP转换为点分十进制字符串

    只使用低32位：先算术右移再与0xFF相与，负数的符号扩展不会影响八位组。

    Args:
        ip: IP地址整数，如 16843009

    Returns:
        点分十进制字符串，如 "1.1.1.1"
    """
    return "%d.%d.%d.%d" % ((ip >> 24) & 0xFF, (ip >> 16) & 0xFF, (ip >> 8) & 0xFF, ip & 0xFF)


def check_range(ip: int, policy: str = MASK) -> int:
    """
    按越界策略处理超出 [0, 2^32-1] 的值

    Args:
        ip: 64位整数
        policy: "mask" 取低32位，"reject" 抛出异常

    Returns:
        0 到 2^32-1 之间的整数

    Raises:
        CoercionError: reject 策略下值越界
    """
    if 0 <= ip <= IPV4_MAX:
        return ip
    if policy == REJECT:
        raise CoercionError(value=ip, target_type="ipv4", reason="超出 0-4294967295 范围")
    return ip & IPV4_MAX


def ip_to_long(ip_string: str) -> int:
    """
    将点分十进制字符串转换为整数（long_to_ip 的逆运算）

    Args:
        ip_string: IP地址字符串，如 "1.1.1.1"

    Returns:
        IP地址整数

    Raises:
        InvalidIPFormatError: 格式无效时抛出
    """
    if not ip_string:
        raise InvalidIPFormatError(ip_address=ip_string, reason="IP地址不能为空")

    parts = ip_string.split('.')
    if len(parts) != 4:
        raise InvalidIPFormatError(
            ip_address=ip_string,
            reason=f"段数应为4: {len(parts)}"
        )

    value = 0
    for i, part in enumerate(parts):
        # isdigit 对全角数字等也返回 True，这里只接受ASCII数字
        if not (part.isascii() and part.isdigit()):
            raise InvalidIPFormatError(
                ip_address=ip_string,
                reason=f"第{i + 1}段不是数字: {part!r}"
            )

        if len(part) > 1 and part[0] == '0':
            raise InvalidIPFormatError(
                ip_address=ip_string,
                reason=f"第{i + 1}段含前导零: {part}"
            )

        octet = int(part)
        if octet > 255:
            raise InvalidIPFormatError(
                ip_address=ip_string,
                reason=f"第{i + 1}段值超出范围: {octet} (允许: 0-255)"
            )

        value = (value << 8) | octet

    return value
