"""
函数注册表
以固定名称管理所有可用的标量函数，每次创建都返回独立实例
"""
from typing import Any, Dict, List, Type

from ..interfaces import IGenericUDF
from ..exceptions import FunctionNotFoundError, FunctionRegistrationError

from .long_to_ip import LongToIP

BUILTIN_FUNCTIONS = ["LongToIP"]


class FunctionRegistry:
    """函数注册表，名称不区分大小写"""

    def __init__(self):
        """初始化函数注册表"""
        self._functions: Dict[str, Type[IGenericUDF]] = {}
        self._names: Dict[str, str] = {}

        # 注册内置函数
        self._register_builtin_functions()

    def _register_builtin_functions(self):
        """注册内置函数"""
        self.register(LongToIP)

    def register(self, udf_class: Type[IGenericUDF], name: str = None) -> None:
        """
        注册函数类

        Args:
            udf_class: 函数类，必须能无参构造
            name: 注册名称，默认使用实例的 name

        Raises:
            FunctionRegistrationError: 类不合法或名称已存在
        """
        if not isinstance(udf_class, type) or not issubclass(udf_class, IGenericUDF):
            raise FunctionRegistrationError(
                function_name=str(name or udf_class),
                reason="必须实现IGenericUDF接口"
            )

        if name is None:
            try:
                name = udf_class().name
            except TypeError as e:
                raise FunctionRegistrationError(
                    function_name=udf_class.__name__,
                    reason=f"无法创建函数实例: {e}"
                ) from e

        key = name.lower()
        if key in self._functions:
            raise FunctionRegistrationError(function_name=name, reason="函数名称已存在")

        self._functions[key] = udf_class
        self._names[key] = name

    def unregister(self, name: str) -> None:
        """
        注销函数

        Raises:
            FunctionNotFoundError: 函数不存在
        """
        key = name.lower()
        if key not in self._functions:
            raise FunctionNotFoundError(function_name=name)
        del self._functions[key]
        del self._names[key]

    def get_function_class(self, name: str) -> Type[IGenericUDF]:
        """
        获取函数类

        Raises:
            FunctionNotFoundError: 函数不存在
        """
        key = name.lower()
        if key not in self._functions:
            raise FunctionNotFoundError(function_name=name)
        return self._functions[key]

    def create(self, name: str, **kwargs) -> IGenericUDF:
        """
        创建函数实例

        每个工作者应持有自己的实例，实例之间不共享状态。

        Args:
            name: 函数名称
            **kwargs: 函数构造参数

        Returns:
            新的函数实例

        Raises:
            FunctionNotFoundError: 函数不存在
        """
        return self.get_function_class(name)(**kwargs)

    def describe_function(self, name: str, extended: bool = False) -> str:
        """
        获取函数说明（DESCRIBE FUNCTION）

        Args:
            name: 函数名称
            extended: 是否附加示例

        Returns:
            说明文本
        """
        udf = self.create(name)
        text = udf.description
        if extended and udf.extended_description:
            text += "\n" + udf.extended_description
        return text

    def has_function(self, name: str) -> bool:
        """检查函数是否存在"""
        return name.lower() in self._functions

    def list_functions(self) -> List[str]:
        """列出所有函数名称"""
        return sorted(self._names.values())

    def list_functions_info(self) -> List[Dict[str, Any]]:
        """列出所有函数信息"""
        return [
            self.create(name).get_metadata()
            for name in self.list_functions()
        ]

    def clear(self) -> None:
        """清空所有函数（保留内置函数）"""
        self._functions.clear()
        self._names.clear()
        self._register_builtin_functions()

    def __len__(self) -> int:
        """获取函数数量"""
        return len(self._functions)

    def __contains__(self, name: str) -> bool:
        """检查是否包含函数"""
        return self.has_function(name)
