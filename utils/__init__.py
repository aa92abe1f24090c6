"""
faultdemo utilities
Trigger helpers, error messages and CLI bootstrap.
"""

from .conversions import checked_cast
from .data_stream import read_int, write_int

__all__ = ['checked_cast', 'read_int', 'write_int']
