"""
类型描述模块
"""

from .objects import (
    PrimitiveObjectInspector,
    ListObjectInspector,
    MapObjectInspector,
    INTEGRAL_CATEGORIES
)
from .factory import (
    PrimitiveObjectInspectorFactory,
    get_primitive,
    inspector_for_dtype,
    infer_inspector,
    writable_long,
    writable_string,
    java_long,
    java_int,
    java_string,
    java_double,
    java_boolean,
    java_void
)
from .converters import Converter, LongConverter, get_converter

__all__ = [
    'PrimitiveObjectInspector',
    'ListObjectInspector',
    'MapObjectInspector',
    'INTEGRAL_CATEGORIES',
    'PrimitiveObjectInspectorFactory',
    'get_primitive',
    'inspector_for_dtype',
    'infer_inspector',
    'writable_long',
    'writable_string',
    'java_long',
    'java_int',
    'java_string',
    'java_double',
    'java_boolean',
    'java_void',
    'Converter',
    'LongConverter',
    'get_converter'
]
