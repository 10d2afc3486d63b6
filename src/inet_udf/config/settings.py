"""
函数运行配置
"""
from typing import Dict, Any
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError
from ..core.inet import OUT_OF_RANGE_POLICIES, MASK


@dataclass
class UDFSettings:
    """
    函数运行配置类
    使用dataclass确保配置的类型安全
    """

    # 注册名称
    function_name: str = "LongToIP"

    # 日志配置
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_logging: bool = True

    # 越界策略: mask 取低32位, reject 按转换失败处理
    out_of_range_policy: str = MASK

    # 缓存配置（仅对确定性函数生效）
    enable_cache: bool = True
    cache_size: int = 4096

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level",
                value=self.log_level
            )
        self.log_level = self.log_level.upper()

        if self.out_of_range_policy not in OUT_OF_RANGE_POLICIES:
            raise ConfigError(
                message=f"无效的越界策略: {self.out_of_range_policy} (允许: {', '.join(OUT_OF_RANGE_POLICIES)})",
                config_key="out_of_range_policy",
                value=self.out_of_range_policy
            )

        if not isinstance(self.cache_size, int) or self.cache_size <= 0:
            raise ConfigError(
                message=f"缓存大小必须为正整数: {self.cache_size}",
                config_key="cache_size",
                value=self.cache_size
            )

        if not self.function_name or not self.function_name.isidentifier():
            raise ConfigError(
                message=f"无效的函数名称: {self.function_name!r}",
                config_key="function_name",
                value=self.function_name
            )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'UDFSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
