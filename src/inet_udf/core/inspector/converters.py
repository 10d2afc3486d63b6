"""
类型转换器
在绑定时根据源类型和目标类型选定，求值时只读复用
"""
import operator
from abc import ABC, abstractmethod
from typing import Any

from ...interfaces import IObjectInspector, Category, PrimitiveCategory
from ...exceptions import CoercionError

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1


class Converter(ABC):
    """转换器基类"""

    @abstractmethod
    def convert(self, value: Any) -> Any:
        """
        转换运行时值

        Args:
            value: 源值，None原样返回

        Returns:
            目标类型的值

        Raises:
            CoercionError: 无法转换
        """
        pass


class LongConverter(Converter):
    """转换为64位有符号整数"""

    def convert(self, value: Any) -> Any:
        if value is None:
            return None

        # bool 可以通过 operator.index，但不是整数值
        if isinstance(value, bool):
            raise CoercionError(value=value, target_type="bigint", reason="布尔值不是整数")

        try:
            result = operator.index(value)
        except TypeError:
            raise CoercionError(
                value=value,
                target_type="bigint",
                reason=f"不支持的类型 {type(value).__name__}"
            ) from None

        if result < LONG_MIN or result > LONG_MAX:
            raise CoercionError(value=value, target_type="bigint", reason="超出64位整数范围")

        return result


def get_converter(source: IObjectInspector, target: IObjectInspector) -> Converter:
    """
    获取从源类型到bigint的转换器

    Args:
        source: 实际参数类型描述
        target: 期望类型描述

    Returns:
        转换器

    Raises:
        CoercionError: 不存在可用的转换
    """
    if target.category != Category.PRIMITIVE or target.primitive_category != PrimitiveCategory.LONG:
        raise CoercionError(value=source.type_name, target_type=target.type_name,
                            reason="只支持转换为bigint")

    if source.category != Category.PRIMITIVE:
        raise CoercionError(value=source.type_name, target_type=target.type_name,
                            reason="复合类型不能转换为bigint")

    if source.is_integral() or source.primitive_category == PrimitiveCategory.VOID:
        return LongConverter()

    raise CoercionError(value=source.type_name, target_type=target.type_name,
                        reason="只能从整数类型转换")
