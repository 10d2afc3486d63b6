"""
类型描述接口定义
"""
from abc import ABC, abstractmethod
from enum import Enum


class Category(Enum):
    """类型大类"""
    PRIMITIVE = "primitive"
    LIST = "list"
    MAP = "map"
    STRUCT = "struct"
    UNION = "union"


class PrimitiveCategory(Enum):
    """原始类型，值为对应的SQL类型名"""
    VOID = "void"
    BOOLEAN = "boolean"
    BYTE = "tinyint"
    SHORT = "smallint"
    INT = "int"
    LONG = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    VARCHAR = "varchar"
    CHAR = "char"
    DATE = "date"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    DECIMAL = "decimal"


class IObjectInspector(ABC):
    """类型描述接口 - 宿主用来描述参数和返回值类型"""

    @property
    @abstractmethod
    def category(self) -> Category:
        """类型大类"""
        pass

    @property
    @abstractmethod
    def type_name(self) -> str:
        """
        类型名称

        Returns:
            SQL风格类型名，如 "bigint"、"array<string>"
        """
        pass
