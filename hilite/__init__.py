"""
hilite - editor configuration and syntax rule compilation.
"""

__version__ = "0.1.0"
