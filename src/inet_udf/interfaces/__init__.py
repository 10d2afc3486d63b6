"""
接口定义包
"""

from .iinspector import IObjectInspector, Category, PrimitiveCategory
from .iudf import IGenericUDF, IDeferredObject

__all__ = [
    'IObjectInspector',
    'Category',
    'PrimitiveCategory',
    'IGenericUDF',
    'IDeferredObject'
]
