"""
类型描述实现 - 原始类型与复合类型
"""
from ...interfaces import IObjectInspector, Category, PrimitiveCategory


INTEGRAL_CATEGORIES = (
    PrimitiveCategory.BYTE,
    PrimitiveCategory.SHORT,
    PrimitiveCategory.INT,
    PrimitiveCategory.LONG,
)


class PrimitiveObjectInspector(IObjectInspector):
    """原始类型描述"""

    def __init__(self, primitive_category: PrimitiveCategory, writable: bool = False):
        """
        初始化原始类型描述

        Args:
            primitive_category: 原始类型
            writable: 是否为可写（可复用）表示
        """
        self._primitive_category = primitive_category
        self._writable = writable

    @property
    def category(self) -> Category:
        return Category.PRIMITIVE

    @property
    def primitive_category(self) -> PrimitiveCategory:
        return self._primitive_category

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def type_name(self) -> str:
        return self._primitive_category.value

    def is_integral(self) -> bool:
        """是否为整数类型"""
        return self._primitive_category in INTEGRAL_CATEGORIES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveObjectInspector):
            return False
        return (self._primitive_category == other._primitive_category
                and self._writable == other._writable)

    def __hash__(self) -> int:
        return hash((self._primitive_category, self._writable))

    def __repr__(self) -> str:
        kind = "writable" if self._writable else "java"
        return f"PrimitiveObjectInspector({self.type_name}, {kind})"


class ListObjectInspector(IObjectInspector):
    """数组类型描述"""

    def __init__(self, element: IObjectInspector):
        self._element = element

    @property
    def category(self) -> Category:
        return Category.LIST

    @property
    def element(self) -> IObjectInspector:
        return self._element

    @property
    def type_name(self) -> str:
        return f"array<{self._element.type_name}>"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListObjectInspector) and self._element == other._element

    def __hash__(self) -> int:
        return hash((Category.LIST, self._element))

    def __repr__(self) -> str:
        return f"ListObjectInspector({self.type_name})"


class MapObjectInspector(IObjectInspector):
    """映射类型描述"""

    def __init__(self, key: IObjectInspector, value: IObjectInspector):
        self._key = key
        self._value = value

    @property
    def category(self) -> Category:
        return Category.MAP

    @property
    def key(self) -> IObjectInspector:
        return self._key

    @property
    def value(self) -> IObjectInspector:
        return self._value

    @property
    def type_name(self) -> str:
        return f"map<{self._key.type_name},{self._value.type_name}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapObjectInspector):
            return False
        return self._key == other._key and self._value == other._value

    def __hash__(self) -> int:
        return hash((Category.MAP, self._key, self._value))

    def __repr__(self) -> str:
        return f"MapObjectInspector({self.type_name})"
