"""
Content processing utilities.

Handles:
- Escaping article content for embedding in quoted strings
- Deriving article links from titles
"""

from slugify import slugify

# Maximum slug length before the article id is appended
MAX_SLUG_LENGTH = 80

# Order matters: backslash first so later escapes are not doubled
_JSON_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("/", "\\/"),
    ("\b", "\\b"),
    ("\f", "\\f"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_json_string(text: str) -> str:
    """
    Escape text so it can be embedded as a quoted JSON string.

    Each of backslash, double quote, forward slash, backspace, form feed,
    newline, carriage return and tab is replaced by its two-character
    escape sequence. Everything else is left untouched.

    Args:
        text: Raw content

    Returns:
        Escaped content
    """
    for char, escaped in _JSON_ESCAPES:
        text = text.replace(char, escaped)
    return text


def format_link(title: str, article_id: int) -> str:
    """
    Derive an article link from its title and id.

    Non-latin titles are transliterated; a title with nothing usable
    yields the bare id.

    Examples:
        >>> format_link("Hello, World!", 42)
        'hello-world-42'
    """
    slug = slugify(title, max_length=MAX_SLUG_LENGTH, word_boundary=True)
    if not slug:
        return str(article_id)
    return f"{slug}-{article_id}"
