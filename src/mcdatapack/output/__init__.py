"""
Filesystem output for compiled datapacks.
"""

from .writer import FileWriter

__all__ = ["FileWriter"]
