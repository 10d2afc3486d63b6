"""
列式执行器
以pandas DataFrame模拟宿主查询引擎：绑定参数类型、逐行以延迟参数求值、生成explain文本
"""

import inspect
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd
from pandas.api import types as ptypes

from .exceptions import CoercionError, EvaluationError, UDFArgumentError
from .config.settings import UDFSettings
from .interfaces import IGenericUDF, IObjectInspector
from .core.deferred import DeferredValue
from .core.inspector import infer_inspector, inspector_for_dtype, java_long, java_void
from .functions import FunctionRegistry


def is_missing(value: Any) -> bool:
    """判断单元格是否为缺失值（None、NA、NaT、NaN）"""
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, float) and value != value


class BoundFunction:
    """已绑定参数类型的函数实例"""

    def __init__(self, udf: IGenericUDF, arguments: List[IObjectInspector],
                 output_inspector: IObjectInspector):
        self.udf = udf
        self.arguments = arguments
        self.output_inspector = output_inspector

    @property
    def name(self) -> str:
        return self.udf.name

    def __repr__(self) -> str:
        args = ", ".join(argument.type_name for argument in self.arguments)
        return f"BoundFunction({self.name}({args}) -> {self.output_inspector.type_name})"


class ColumnarExecutor:
    """
    列式执行器
    每次执行都创建独立的函数实例，实例之间不共享可变状态
    """

    def __init__(
            self,
            settings: Optional[UDFSettings] = None,
            registry: Optional[FunctionRegistry] = None
    ):
        """
        初始化执行器

        Args:
            settings: 运行配置
            registry: 函数注册表（默认包含内置函数）
        """
        self.settings = settings or UDFSettings()

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self.registry = registry or FunctionRegistry()
        self.logger.debug(f"执行器初始化完成: {len(self.registry)}个函数")

    def _setup_logging(self):
        """配置日志系统"""
        if not self.settings.enable_logging:
            return
        logging.basicConfig(
            level=getattr(logging, self.settings.log_level),
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

    def _create(self, name: str) -> IGenericUDF:
        """按配置创建函数实例"""
        udf_class = self.registry.get_function_class(name)
        kwargs = {}
        if "out_of_range_policy" in inspect.signature(udf_class).parameters:
            kwargs["out_of_range_policy"] = self.settings.out_of_range_policy
        return udf_class(**kwargs)

    # ========== 绑定 ==========

    def bind(self, name: str, arguments: Sequence[IObjectInspector]) -> BoundFunction:
        """
        创建函数实例并绑定参数类型

        Args:
            name: 函数名称
            arguments: 参数类型描述

        Returns:
            已绑定的函数

        Raises:
            FunctionNotFoundError: 函数不存在
            UDFArgumentError: 参数个数或类型错误
        """
        udf = self._create(name)
        arguments = list(arguments)
        try:
            output = udf.initialize(arguments)
        except UDFArgumentError as e:
            self.logger.error(f"绑定失败: {name}, 错误: {e}")
            raise

        bound = BoundFunction(udf, arguments, output)
        self.logger.debug(f"绑定成功: {bound}")
        return bound

    def infer_value_inspector(self, value: Any) -> IObjectInspector:
        """
        推断单个值的参数类型

        缺失值为void，任意宽度的整数（含numpy整数）统一为bigint
        """
        if is_missing(value):
            return java_void
        if ptypes.is_integer(value):
            return java_long
        return infer_inspector(value)

    def infer_column_inspector(self, column: pd.Series) -> IObjectInspector:
        """
        推断列的参数类型

        object列中只要含有整数就按bigint绑定，不合法的值留到求值时按行报错；
        否则按第一个非缺失值推断，全部缺失时为void
        """
        if column.dtype != object:
            return inspector_for_dtype(column.dtype)

        values = [value for value in column if not is_missing(value)]
        if not values:
            return java_void
        if any(ptypes.is_integer(value) for value in values):
            return java_long
        return self.infer_value_inspector(values[0])

    # ========== 执行 ==========

    def execute(
            self,
            frame: pd.DataFrame,
            columns: Union[str, Sequence[str]],
            name: Optional[str] = None
    ) -> pd.Series:
        """
        对DataFrame逐行求值

        Args:
            frame: 输入数据
            columns: 参数列名
            name: 函数名称，默认使用配置中的 function_name

        Returns:
            与输入索引对齐的结果列，列名为explain文本

        Raises:
            UDFArgumentError: 参数绑定失败
            EvaluationError: 某一行求值失败
        """
        name = name or self.settings.function_name
        if isinstance(columns, str):
            columns = [columns]
        columns = list(columns)

        inspectors = [self.infer_column_inspector(frame[column]) for column in columns]
        bound = self.bind(name, inspectors)
        udf = bound.udf

        use_cache = udf.deterministic and self.settings.enable_cache
        cache: Dict[Any, Any] = {}
        deferred = [DeferredValue() for _ in columns]
        column_values = [frame[column].tolist() for column in columns]

        results = []
        for row, values in zip(frame.index, zip(*column_values)):
            values = tuple(None if is_missing(value) else value for value in values)

            # 键中带上类型，避免 1 与 True 命中同一条缓存
            key = tuple((type(value), value) for value in values) if use_cache else None
            if use_cache:
                try:
                    results.append(cache[key])
                    continue
                except KeyError:
                    pass
                except TypeError:
                    # 不可哈希的值（如列表）不缓存
                    pass

            for argument, value in zip(deferred, values):
                argument.prepare(lambda value=value: value)

            try:
                result = udf.evaluate(deferred)
            except CoercionError as e:
                self.logger.warning(f"{name} 第 {row} 行求值失败: {e}")
                raise EvaluationError(function_name=name, row=row, reason=e.message) from e

            if use_cache:
                if len(cache) >= self.settings.cache_size:
                    cache.clear()
                try:
                    cache[key] = result
                except TypeError:
                    pass
            results.append(result)

        return pd.Series(results, index=frame.index, dtype=object,
                         name=udf.get_display_string(columns))

    def evaluate(self, name: str, values: Sequence[Any]) -> Any:
        """
        对一组标量参数求值

        Args:
            name: 函数名称
            values: 参数值

        Returns:
            函数返回值

        Raises:
            EvaluationError: 求值失败
        """
        values = [None if is_missing(value) else value for value in values]
        bound = self.bind(name, [self.infer_value_inspector(value) for value in values])
        try:
            return bound.udf.evaluate([DeferredValue.of(value) for value in values])
        except CoercionError as e:
            self.logger.warning(f"{name} 求值失败: {e}")
            raise EvaluationError(function_name=name, row=0, reason=e.message) from e

    def explain(self, columns: Union[str, Sequence[str]], name: Optional[str] = None) -> str:
        """
        获取explain中显示的字符串

        Args:
            columns: 参数的字面文本
            name: 函数名称，默认使用配置中的 function_name
        """
        if isinstance(columns, str):
            columns = [columns]
        return self._create(name or self.settings.function_name).get_display_string(list(columns))

    def describe(self, name: Optional[str] = None, extended: bool = False) -> str:
        """DESCRIBE FUNCTION"""
        return self.registry.describe_function(name or self.settings.function_name, extended)
