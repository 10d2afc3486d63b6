"""
测试类型描述与转换器
"""
import sys
import os
import datetime

import numpy as np
import pandas as pd
import pytest

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from inet_udf.interfaces import Category, PrimitiveCategory
from inet_udf.core.inspector import (
    PrimitiveObjectInspector, ListObjectInspector, MapObjectInspector,
    get_primitive, inspector_for_dtype, infer_inspector, get_converter,
    LongConverter,
    writable_long, writable_string, java_long, java_int, java_string, java_double,
    java_boolean, java_void
)
from inet_udf.exceptions import CoercionError


def test_primitive_inspector():
    """测试原始类型描述"""
    assert writable_long.category == Category.PRIMITIVE
    assert writable_long.primitive_category == PrimitiveCategory.LONG
    assert writable_long.type_name == "bigint"
    assert writable_long.writable
    assert not java_long.writable
    assert writable_string.type_name == "string"
    assert java_int.type_name == "int"
    assert java_long.is_integral()
    assert not java_double.is_integral()
    print("✓ 原始类型描述测试通过")


def test_factory_singletons():
    """测试工厂缓存"""
    assert get_primitive(PrimitiveCategory.LONG, writable=True) is writable_long
    assert get_primitive(PrimitiveCategory.STRING) is java_string
    assert writable_long != java_long
    assert PrimitiveObjectInspector(PrimitiveCategory.LONG) == java_long
    assert hash(PrimitiveObjectInspector(PrimitiveCategory.LONG)) == hash(java_long)


def test_composite_inspectors():
    """测试复合类型描述"""
    array = ListObjectInspector(java_string)
    assert array.category == Category.LIST
    assert array.type_name == "array<string>"
    assert array == ListObjectInspector(java_string)

    mapping = MapObjectInspector(java_string, java_long)
    assert mapping.category == Category.MAP
    assert mapping.type_name == "map<string,bigint>"

    print("✓ 复合类型描述测试通过")


@pytest.mark.parametrize("dtype, expected", [
    (np.dtype("int64"), PrimitiveCategory.LONG),
    (np.dtype("int32"), PrimitiveCategory.INT),
    (np.dtype("int16"), PrimitiveCategory.SHORT),
    (np.dtype("int8"), PrimitiveCategory.BYTE),
    (np.dtype("uint32"), PrimitiveCategory.LONG),
    (np.dtype("uint64"), PrimitiveCategory.DECIMAL),
    (pd.Int64Dtype(), PrimitiveCategory.LONG),
    (pd.UInt32Dtype(), PrimitiveCategory.LONG),
    (np.dtype("float64"), PrimitiveCategory.DOUBLE),
    (np.dtype("float32"), PrimitiveCategory.FLOAT),
    (np.dtype("bool"), PrimitiveCategory.BOOLEAN),
    (np.dtype("datetime64[ns]"), PrimitiveCategory.TIMESTAMP),
    (pd.StringDtype(), PrimitiveCategory.STRING),
])
def test_inspector_for_dtype(dtype, expected):
    """测试由dtype推断类型"""
    assert inspector_for_dtype(dtype).primitive_category == expected


def test_inspector_for_unsupported_dtype():
    """测试不支持的dtype"""
    with pytest.raises(CoercionError):
        inspector_for_dtype(np.dtype("complex128"))


def test_infer_inspector():
    """测试由Python值推断类型"""
    assert infer_inspector(None) is java_void
    assert infer_inspector(True) is java_boolean
    assert infer_inspector(16843009) is java_long
    assert infer_inspector(1.5) is java_double
    assert infer_inspector("1.1.1.1") is java_string
    assert infer_inspector(np.int64(1)).primitive_category == PrimitiveCategory.LONG
    assert infer_inspector(np.int32(1)).primitive_category == PrimitiveCategory.INT
    assert infer_inspector(datetime.date(2013, 1, 1)).primitive_category == PrimitiveCategory.DATE
    assert infer_inspector(datetime.datetime(2013, 1, 1)).primitive_category == PrimitiveCategory.TIMESTAMP
    assert infer_inspector([1, 2]) == ListObjectInspector(java_long)
    assert infer_inspector({"a": 1}).type_name == "map<string,bigint>"

    with pytest.raises(CoercionError):
        infer_inspector(object())
    print("✓ 类型推断测试通过")


class TestLongConverter:
    """测试bigint转换器"""

    @pytest.fixture
    def converter(self):
        return get_converter(java_long, writable_long)

    def test_selected(self, converter):
        assert isinstance(converter, LongConverter)
        assert isinstance(get_converter(java_int, writable_long), LongConverter)
        assert isinstance(get_converter(java_void, writable_long), LongConverter)

    def test_convert_integers(self, converter):
        assert converter.convert(16843009) == 16843009
        result = converter.convert(np.int64(42))
        assert result == 42
        assert type(result) is int
        assert converter.convert(-1) == -1

    def test_none_passes_through(self, converter):
        assert converter.convert(None) is None

    def test_int64_bounds(self, converter):
        assert converter.convert((1 << 63) - 1) == (1 << 63) - 1
        assert converter.convert(-(1 << 63)) == -(1 << 63)
        with pytest.raises(CoercionError):
            converter.convert(1 << 63)
        with pytest.raises(CoercionError):
            converter.convert(-(1 << 63) - 1)

    @pytest.mark.parametrize("value", [True, "16843009", 1.0, [1]])
    def test_rejects_non_integers(self, converter, value):
        with pytest.raises(CoercionError) as exc_info:
            converter.convert(value)
        assert exc_info.value.code == "COERCION_FAILURE"
        assert exc_info.value.details["target_type"] == "bigint"


def test_get_converter_unsupported():
    """测试不支持的转换"""
    with pytest.raises(CoercionError):
        get_converter(java_double, writable_long)
    with pytest.raises(CoercionError):
        get_converter(java_string, writable_long)
    with pytest.raises(CoercionError):
        get_converter(ListObjectInspector(java_long), writable_long)
    with pytest.raises(CoercionError):
        get_converter(java_long, java_double)
    with pytest.raises(CoercionError):
        get_converter(java_long, writable_string)
