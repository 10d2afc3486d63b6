"""
测试运行配置
"""
import sys
import os

import pytest

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from inet_udf.config import UDFSettings
from inet_udf.exceptions import ConfigError


def test_defaults():
    """测试默认配置"""
    settings = UDFSettings()
    assert settings.function_name == "LongToIP"
    assert settings.log_level == "WARNING"
    assert settings.out_of_range_policy == "mask"
    assert settings.enable_cache
    print("✓ 默认配置测试通过")


def test_log_level_normalized():
    """测试日志级别大小写"""
    assert UDFSettings(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize("config, key", [
    ({"log_level": "VERBOSE"}, "log_level"),
    ({"out_of_range_policy": "clamp"}, "out_of_range_policy"),
    ({"cache_size": 0}, "cache_size"),
    ({"function_name": ""}, "function_name"),
    ({"function_name": "Long To IP"}, "function_name"),
])
def test_invalid_settings(config, key):
    """测试无效配置"""
    with pytest.raises(ConfigError) as exc_info:
        UDFSettings(**config)
    assert exc_info.value.code == "CONFIG_ERROR"
    assert exc_info.value.details["config_key"] == key


def test_dict_conversion():
    """测试字典转换"""
    settings = UDFSettings.from_dict({
        "out_of_range_policy": "reject",
        "cache_size": 16,
        "storage_backend": "memory"
    })
    assert settings.out_of_range_policy == "reject"
    assert settings.cache_size == 16

    data = settings.to_dict()
    assert data["out_of_range_policy"] == "reject"
    assert "storage_backend" not in data
    assert UDFSettings.from_dict(data) == settings
