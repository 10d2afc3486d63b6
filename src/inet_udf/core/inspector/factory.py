"""
类型描述工厂
提供常用单例，并从Python值或pandas dtype推断类型描述
"""
import datetime
import decimal
from typing import Any, Dict, Tuple

import numpy as np
from pandas.api import types as ptypes

from ...interfaces import IObjectInspector, PrimitiveCategory
from ...exceptions import CoercionError
from .objects import (
    PrimitiveObjectInspector, ListObjectInspector, MapObjectInspector
)


class PrimitiveObjectInspectorFactory:
    """原始类型描述工厂，同一类型只创建一个实例"""

    _cache: Dict[Tuple[PrimitiveCategory, bool], PrimitiveObjectInspector] = {}

    @classmethod
    def get_primitive(cls, category: PrimitiveCategory,
                      writable: bool = False) -> PrimitiveObjectInspector:
        """
        获取原始类型描述

        Args:
            category: 原始类型
            writable: 是否为可写表示

        Returns:
            缓存的类型描述实例
        """
        key = (category, writable)
        if key not in cls._cache:
            cls._cache[key] = PrimitiveObjectInspector(category, writable)
        return cls._cache[key]


get_primitive = PrimitiveObjectInspectorFactory.get_primitive

writable_long = get_primitive(PrimitiveCategory.LONG, writable=True)
writable_string = get_primitive(PrimitiveCategory.STRING, writable=True)
java_long = get_primitive(PrimitiveCategory.LONG)
java_int = get_primitive(PrimitiveCategory.INT)
java_string = get_primitive(PrimitiveCategory.STRING)
java_double = get_primitive(PrimitiveCategory.DOUBLE)
java_boolean = get_primitive(PrimitiveCategory.BOOLEAN)
java_void = get_primitive(PrimitiveCategory.VOID)


_SIGNED_BY_SIZE = {
    1: PrimitiveCategory.BYTE,
    2: PrimitiveCategory.SHORT,
    4: PrimitiveCategory.INT,
    8: PrimitiveCategory.LONG,
}

# 无符号类型映射到能容纳它的下一个有符号类型
_UNSIGNED_BY_SIZE = {
    1: PrimitiveCategory.SHORT,
    2: PrimitiveCategory.INT,
    4: PrimitiveCategory.LONG,
    8: PrimitiveCategory.DECIMAL,
}


def _itemsize(dtype: Any) -> int:
    # pandas可空类型通过 numpy_dtype 暴露底层numpy类型
    return np.dtype(getattr(dtype, "numpy_dtype", dtype)).itemsize


def inspector_for_dtype(dtype: Any) -> PrimitiveObjectInspector:
    """
    由pandas/numpy dtype推断类型描述

    Args:
        dtype: 列的dtype

    Returns:
        原始类型描述

    Raises:
        CoercionError: 不支持的dtype
    """
    if ptypes.is_bool_dtype(dtype):
        return get_primitive(PrimitiveCategory.BOOLEAN)

    if ptypes.is_integer_dtype(dtype):
        size = _itemsize(dtype)
        table = _UNSIGNED_BY_SIZE if ptypes.is_unsigned_integer_dtype(dtype) else _SIGNED_BY_SIZE
        return get_primitive(table[size])

    if ptypes.is_float_dtype(dtype):
        if _itemsize(dtype) == 4:
            return get_primitive(PrimitiveCategory.FLOAT)
        return get_primitive(PrimitiveCategory.DOUBLE)

    if ptypes.is_datetime64_any_dtype(dtype):
        return get_primitive(PrimitiveCategory.TIMESTAMP)

    if ptypes.is_string_dtype(dtype):
        return get_primitive(PrimitiveCategory.STRING)

    raise CoercionError(value=str(dtype), target_type="inspector", reason="不支持的dtype")


def infer_inspector(value: Any) -> IObjectInspector:
    """
    由Python值推断类型描述

    Args:
        value: 任意值

    Returns:
        类型描述

    Raises:
        CoercionError: 无法推断类型
    """
    if value is None:
        return java_void

    # numpy标量带有dtype
    dtype = getattr(value, "dtype", None)
    if dtype is not None and not isinstance(value, (list, dict)):
        return inspector_for_dtype(dtype)

    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return java_boolean
    if isinstance(value, int):
        return java_long
    if isinstance(value, float):
        return java_double
    if isinstance(value, str):
        return java_string
    if isinstance(value, (bytes, bytearray)):
        return get_primitive(PrimitiveCategory.BINARY)
    if isinstance(value, decimal.Decimal):
        return get_primitive(PrimitiveCategory.DECIMAL)
    # datetime 是 date 的子类
    if isinstance(value, datetime.datetime):
        return get_primitive(PrimitiveCategory.TIMESTAMP)
    if isinstance(value, datetime.date):
        return get_primitive(PrimitiveCategory.DATE)

    if isinstance(value, list):
        element = infer_inspector(value[0]) if value else java_void
        return ListObjectInspector(element)

    if isinstance(value, dict):
        if not value:
            return MapObjectInspector(java_void, java_void)
        key, item = next(iter(value.items()))
        return MapObjectInspector(infer_inspector(key), infer_inspector(item))

    raise CoercionError(value=value, target_type="inspector",
                        reason=f"无法推断类型: {type(value).__name__}")
