"""
命令行入口

    python -m inet_udf 16843009 3232235777
    python -m inet_udf --reverse 1.1.1.1
"""
import argparse
import sys

from .config.settings import UDFSettings
from .core.inet import ip_to_long, OUT_OF_RANGE_POLICIES, MASK
from .exceptions import BaseError
from .executor import ColumnarExecutor


def build_parser() -> argparse.ArgumentParser:
    # 创建命令行参数解析器
    parser = argparse.ArgumentParser(prog="inet_udf", description='整数IP与点分十进制互相转换')
    parser.add_argument('values', nargs='+', help='要转换的值')
    parser.add_argument('-r', '--reverse', action='store_true', help='点分十进制转整数')
    parser.add_argument('--policy', choices=OUT_OF_RANGE_POLICIES, default=MASK,
                        help='超出0-4294967295时的处理方式（默认mask）')
    parser.add_argument('--log-level', default='WARNING', help='日志级别（默认WARNING）')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = UDFSettings(log_level=args.log_level, out_of_range_policy=args.policy)
    except BaseError as e:
        print(f"错误：{e}", file=sys.stderr)
        return 1

    executor = ColumnarExecutor(settings)
    status = 0
    for value in args.values:
        try:
            if args.reverse:
                print(ip_to_long(value))
            else:
                print(executor.evaluate(settings.function_name, [int(value)]))
        except ValueError:
            print(f"错误：不是整数: {value}", file=sys.stderr)
            status = 1
        except BaseError as e:
            print(f"错误：{e}", file=sys.stderr)
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
