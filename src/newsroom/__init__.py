"""
Newsroom - multilingual news publishing with newsletter broadcasting.
"""

__version__ = "0.1.0"
