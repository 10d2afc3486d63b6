"""
延迟参数 - 以thunk包装参数值，至多解析一次
"""
from typing import Any, Callable, Optional

from ..interfaces import IDeferredObject

_UNRESOLVED = object()


class DeferredValue(IDeferredObject):
    """
    基于thunk的延迟参数

    get() 第一次调用时执行thunk并缓存结果，从不调用则thunk不会执行。
    宿主可以通过 prepare() 在下一行复用同一个实例。
    """

    __slots__ = ("_thunk", "_value")

    def __init__(self, thunk: Optional[Callable[[], Any]] = None):
        self._thunk = thunk
        self._value = _UNRESOLVED

    @classmethod
    def of(cls, value: Any) -> 'DeferredValue':
        """包装一个已知的值"""
        deferred = cls()
        deferred._value = value
        return deferred

    def prepare(self, thunk: Callable[[], Any]) -> 'DeferredValue':
        """
        为下一行重置

        Args:
            thunk: 新的取值函数

        Returns:
            自身
        """
        self._thunk = thunk
        self._value = _UNRESOLVED
        return self

    @property
    def resolved(self) -> bool:
        """是否已解析"""
        return self._value is not _UNRESOLVED

    def get(self) -> Any:
        if self._value is _UNRESOLVED:
            thunk = self._thunk
            self._value = thunk() if thunk is not None else None
            self._thunk = None
        return self._value

    def __repr__(self) -> str:
        if self.resolved:
            return f"DeferredValue({self._value!r})"
        return "DeferredValue(<unresolved>)"
