"""
配置模块
"""

from .settings import UDFSettings

__all__ = ['UDFSettings']
