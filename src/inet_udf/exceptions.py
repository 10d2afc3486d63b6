"""
IP地址转换函数异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None,
                 value: Optional[Any] = None, **kwargs):
        details = {"config_key": config_key, "value": value} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


# ==================== 参数绑定异常 ====================
class UDFArgumentError(BaseError):
    """函数参数错误基类（绑定时抛出，不可重试）"""
    def __init__(self, message: str, code: str = "UDF_ARGUMENT_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


class UDFArgumentLengthError(UDFArgumentError):
    """参数个数错误"""
    def __init__(self, function_name: str, expected: int, actual: int, **kwargs):
        super().__init__(
            message=f"{function_name} 需要 {expected} 个参数，实际传入 {actual} 个",
            code="UDF_ARGUMENT_LENGTH",
            details={
                "function_name": function_name,
                "expected": expected,
                "actual": actual
            },
            **kwargs
        )


class UDFArgumentTypeError(UDFArgumentError):
    """参数类型错误"""
    def __init__(self, argument_index: int, expected_type: str, actual_type: str, **kwargs):
        super().__init__(
            message=(f"第{argument_index + 1}个参数应为 {expected_type} 类型，"
                     f"实际传入 {actual_type} 类型"),
            code="UDF_ARGUMENT_TYPE",
            details={
                "argument_index": argument_index,
                "expected_type": expected_type,
                "actual_type": actual_type
            },
            **kwargs
        )


ArityError = UDFArgumentLengthError
ArgumentTypeError = UDFArgumentTypeError


# ==================== 求值异常 ====================
class CoercionError(BaseError):
    """运行时值无法转换为期望类型"""
    def __init__(self, value: Any, target_type: str, reason: Optional[str] = None, **kwargs):
        message = f"无法将 {value!r} 转换为 {target_type}"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message,
            code="COERCION_FAILURE",
            details={"value": value, "target_type": target_type, "reason": reason},
            **kwargs
        )


class EvaluationError(BaseError):
    """宿主报告的行级求值错误"""
    def __init__(self, function_name: str, row: Any, reason: str, **kwargs):
        super().__init__(
            message=f"{function_name} 在第 {row} 行求值失败: {reason}",
            code="EVALUATION_ERROR",
            details={"function_name": function_name, "row": row, "reason": reason},
            **kwargs
        )


class UDFStateError(BaseError):
    """函数生命周期错误（例如未初始化即求值）"""
    def __init__(self, function_name: str, reason: str, **kwargs):
        super().__init__(
            message=f"{function_name}: {reason}",
            code="UDF_STATE_ERROR",
            details={"function_name": function_name, "reason": reason},
            **kwargs
        )


# ==================== 注册表异常 ====================
class FunctionError(BaseError):
    """函数注册表错误基类"""
    pass


class FunctionNotFoundError(FunctionError):
    """函数不存在"""
    def __init__(self, function_name: str, **kwargs):
        super().__init__(
            message=f"函数不存在: {function_name}",
            code="FUNCTION_NOT_FOUND",
            details={"function_name": function_name},
            **kwargs
        )


class FunctionRegistrationError(FunctionError):
    """函数注册失败"""
    def __init__(self, function_name: str, reason: str, **kwargs):
        super().__init__(
            message=f"函数'{function_name}'注册失败: {reason}",
            code="FUNCTION_REGISTRATION_ERROR",
            details={"function_name": function_name, "reason": reason},
            **kwargs
        )


# ==================== IP相关异常 ====================
class InvalidIPFormatError(BaseError):
    """IP格式无效"""
    def __init__(self, ip_address: str, reason: Optional[str] = None, **kwargs):
        details = {"ip_address": ip_address, "reason": reason}
        message = f"无效的IP格式: {ip_address}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="INVALID_IP_FORMAT", details=details, **kwargs)
