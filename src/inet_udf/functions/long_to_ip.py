"""
LongToIP - 将整数形式的IP地址转换为点分十进制字符串

用法:
    SELECT LongToIP(cast(iplong AS bigint)) FROM table;
"""
from typing import List, Optional, Sequence

from ..interfaces import IObjectInspector, IDeferredObject, Category, PrimitiveCategory
from ..exceptions import UDFArgumentTypeError, UDFStateError
from ..core.inet import long_to_ip, check_range, MASK, REJECT
from ..core.inspector import get_converter, writable_long, writable_string
from .base import GenericUDF


class LongToIP(GenericUDF):
    """整数IP转点分十进制（确定性函数）"""

    def __init__(self, out_of_range_policy: str = MASK):
        """
        初始化函数

        Args:
            out_of_range_policy: 越界策略，"mask" 取低32位，"reject" 按转换失败处理
        """
        super().__init__(
            name="LongToIP",
            value="_FUNC_(iplong) - 将整数形式的IP地址转换为点分十进制字符串",
            extended="示例:\n > SELECT _FUNC_(16843009) FROM table\n > 1.1.1.1",
            deterministic=True
        )
        self._reject = out_of_range_policy == REJECT
        self._converter = None

    @property
    def out_of_range_policy(self) -> str:
        return REJECT if self._reject else MASK

    def initialize(self, arguments: Sequence[IObjectInspector]) -> IObjectInspector:
        """
        绑定参数类型，只调用一次

        只接受一个bigint参数（或NULL字面量）；转换器在这里选定并保存，供之后每一行复用。
        """
        self.check_arity(arguments, 1)

        argument = arguments[0]
        if argument.category != Category.PRIMITIVE:
            raise UDFArgumentTypeError(
                argument_index=0,
                expected_type="primitive",
                actual_type=argument.type_name
            )

        # void 是无类型的NULL字面量，每一行都求值为NULL
        if argument.primitive_category not in (PrimitiveCategory.LONG, PrimitiveCategory.VOID):
            raise UDFArgumentTypeError(
                argument_index=0,
                expected_type=PrimitiveCategory.LONG.value,
                actual_type=argument.type_name
            )

        self._converter = get_converter(argument, writable_long)
        self._output_inspector = writable_string
        return writable_string

    def evaluate(self, arguments: Sequence[IDeferredObject]) -> Optional[str]:
        converter = self._converter
        if converter is None:
            raise UDFStateError(function_name=self.name, reason="evaluate 之前必须先调用 initialize")

        self.check_arity(arguments, 1)
        value = arguments[0].get()
        if value is None:
            return None

        ip = converter.convert(value)
        if self._reject:
            ip = check_range(ip, REJECT)
        return long_to_ip(ip)

    def get_display_string(self, children: List[str]) -> str:
        self.check_arity(children, 1)
        return f"{self.name}({children[0]})"

    def get_metadata(self) -> dict:
        metadata = super().get_metadata()
        metadata["out_of_range_policy"] = self.out_of_range_policy
        return metadata
