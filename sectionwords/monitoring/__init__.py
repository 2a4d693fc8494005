"""
Logging setup and report export
"""

from .log_manager import LogManager

__all__ = [
    'LogManager'
]
