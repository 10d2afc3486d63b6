"""
测试延迟参数
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from inet_udf.core.deferred import DeferredValue


class CountingThunk:
    """记录调用次数的取值函数"""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


def test_resolves_at_most_once():
    """测试只解析一次"""
    thunk = CountingThunk(16843009)
    deferred = DeferredValue(thunk)

    assert not deferred.resolved
    assert deferred.get() == 16843009
    assert deferred.get() == 16843009
    assert thunk.calls == 1
    assert deferred.resolved
    print("✓ 至多解析一次测试通过")


def test_not_resolved_unless_needed():
    """测试未调用get时不执行thunk"""
    thunk = CountingThunk(1)
    deferred = DeferredValue(thunk)
    assert thunk.calls == 0
    assert "unresolved" in repr(deferred)


def test_of_and_empty():
    """测试已知值与空thunk"""
    assert DeferredValue.of(5).get() == 5
    assert DeferredValue.of(None).get() is None
    assert DeferredValue().get() is None


def test_prepare_resets_for_next_row():
    """测试复用实例"""
    first = CountingThunk(1)
    second = CountingThunk(2)

    deferred = DeferredValue(first)
    assert deferred.get() == 1

    assert deferred.prepare(second) is deferred
    assert not deferred.resolved
    assert deferred.get() == 2
    assert deferred.get() == 2
    assert first.calls == 1
    assert second.calls == 1
