"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture
def settings():
    """关闭日志输出的配置"""
    from inet_udf.config import UDFSettings
    return UDFSettings(enable_logging=False)


@pytest.fixture
def executor(settings):
    """默认执行器"""
    from inet_udf.executor import ColumnarExecutor
    return ColumnarExecutor(settings)
