"""
标量函数基类
"""
from abc import ABC
from typing import Any, Dict, List, Sequence

from ..interfaces import IGenericUDF, IObjectInspector
from ..exceptions import UDFArgumentLengthError

FUNC_PLACEHOLDER = "_FUNC_"


class GenericUDF(IGenericUDF, ABC):
    """标量函数基类，提供通用实现"""

    def __init__(self,
                 name: str,
                 value: str,
                 extended: str = "",
                 deterministic: bool = True):
        """
        初始化函数

        Args:
            name: 注册名称
            value: 简要说明，_FUNC_ 会被替换为函数名
            extended: 扩展说明（示例）
            deterministic: 是否为确定性函数
        """
        self._name = name
        self._value = value
        self._extended = extended
        self._deterministic = deterministic
        self._output_inspector = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def deterministic(self) -> bool:
        return self._deterministic

    @property
    def description(self) -> str:
        return self._value.replace(FUNC_PLACEHOLDER, self._name)

    @property
    def extended_description(self) -> str:
        return self._extended.replace(FUNC_PLACEHOLDER, self._name)

    @property
    def initialized(self) -> bool:
        """initialize 是否已成功"""
        return self._output_inspector is not None

    @property
    def output_inspector(self) -> IObjectInspector:
        return self._output_inspector

    def check_arity(self, arguments: Sequence[Any], expected: int) -> None:
        """
        检查参数个数

        Raises:
            UDFArgumentLengthError: 参数个数不等于expected
        """
        if len(arguments) != expected:
            raise UDFArgumentLengthError(
                function_name=self._name,
                expected=expected,
                actual=len(arguments)
            )

    def get_display_string(self, children: List[str]) -> str:
        return f"{self._name}({', '.join(children)})"

    def get_metadata(self) -> Dict[str, Any]:
        """获取函数元数据"""
        return {
            "name": self._name,
            "class": self.__class__.__name__,
            "description": self.description,
            "extended": self.extended_description,
            "deterministic": self._deterministic
        }

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self._name}')"
