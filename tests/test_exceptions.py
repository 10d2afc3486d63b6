"""
测试异常体系
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from inet_udf.exceptions import (
    BaseError, UDFArgumentError, UDFArgumentLengthError, UDFArgumentTypeError,
    ArityError, ArgumentTypeError, CoercionError, EvaluationError,
    FunctionError, FunctionNotFoundError, InvalidIPFormatError
)


def test_exception_creation():
    """测试异常创建"""
    error = InvalidIPFormatError(ip_address="256.0.0.1", reason="段值超出范围")

    assert error.code == "INVALID_IP_FORMAT"
    assert "256.0.0.1" in str(error)
    assert "段值超出范围" in str(error)
    assert error.details["ip_address"] == "256.0.0.1"
    assert error.details["reason"] == "段值超出范围"
    print("✓ 异常创建测试通过")


def test_argument_errors():
    """测试参数错误"""
    length = ArityError(function_name="LongToIP", expected=1, actual=2)
    assert length.code == "UDF_ARGUMENT_LENGTH"
    assert "LongToIP" in str(length)

    type_error = ArgumentTypeError(argument_index=0, expected_type="bigint", actual_type="string")
    assert type_error.code == "UDF_ARGUMENT_TYPE"
    assert "第1个参数" in type_error.message
    assert "bigint" in type_error.message and "string" in type_error.message


def test_exception_inheritance():
    """测试异常继承关系"""
    assert ArityError is UDFArgumentLengthError
    assert ArgumentTypeError is UDFArgumentTypeError
    assert issubclass(UDFArgumentLengthError, UDFArgumentError)
    assert issubclass(UDFArgumentTypeError, UDFArgumentError)
    assert issubclass(UDFArgumentError, BaseError)
    assert issubclass(FunctionNotFoundError, FunctionError)
    assert not issubclass(CoercionError, UDFArgumentError)
    assert not issubclass(ArgumentTypeError, TypeError)


def test_to_dict():
    """测试序列化"""
    error = EvaluationError(function_name="LongToIP", row=3, reason="超出范围")
    data = error.to_dict()
    assert data["code"] == "EVALUATION_ERROR"
    assert data["details"]["row"] == 3
    assert "timestamp" in data
    assert str(error).startswith("[EVALUATION_ERROR]")
