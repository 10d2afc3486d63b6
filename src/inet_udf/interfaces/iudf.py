"""
标量函数接口定义
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from .iinspector import IObjectInspector


class IDeferredObject(ABC):
    """延迟参数接口 - 值在调用 get() 时才被解析"""

    @abstractmethod
    def get(self) -> Any:
        """
        解析并返回参数值

        Returns:
            参数值，缺失时为None
        """
        pass


class IGenericUDF(ABC):
    """
    标量函数接口

    生命周期：initialize 只调用一次，之后对每一行调用 evaluate。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """注册名称"""
        pass

    @property
    @abstractmethod
    def deterministic(self) -> bool:
        """相同输入是否总是得到相同输出"""
        pass

    @abstractmethod
    def initialize(self, arguments: Sequence[IObjectInspector]) -> IObjectInspector:
        """
        绑定参数类型

        Args:
            arguments: 参数类型描述序列

        Returns:
            返回值类型描述

        Raises:
            UDFArgumentLengthError: 参数个数错误
            UDFArgumentTypeError: 参数类型错误
        """
        pass

    @abstractmethod
    def evaluate(self, arguments: Sequence[IDeferredObject]) -> Any:
        """
        对一行求值

        Args:
            arguments: 延迟参数序列

        Returns:
            返回值，缺失时为None
        """
        pass

    @abstractmethod
    def get_display_string(self, children: List[str]) -> str:
        """
        获取explain中显示的字符串

        Args:
            children: 参数的字面文本

        Returns:
            显示字符串
        """
        pass

    @abstractmethod
    def get_metadata(self) -> Dict[str, Any]:
        """获取函数元数据"""
        pass
