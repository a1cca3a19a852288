"""
Core modules for Newsroom.
"""

from newsroom.core.content_processor import escape_json_string, format_link
from newsroom.core.pagination import Pagination

__all__ = [
    # Content processor
    "escape_json_string",
    "format_link",
    # Pagination
    "Pagination",
]
