"""
Tasklist - minimal task-list HTTP service.
"""

__version__ = "1.0.0"
