"""
Utility helpers shared by the data sources.
"""
from .process import is_running

__all__ = ['is_running']
