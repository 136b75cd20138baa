"""
Quoting helpers for the Quarto markup dialect.

Registered as Jinja2 filters by the template service and used directly by
the panel renderer for inline visualization snippets.
"""

from typing import Any


def yaml_quote(value: Any) -> str:
    """Escape a value for a single-quoted YAML scalar."""
    return str(value if value is not None else "").replace("'", "''")


def quote_attr(value: Any) -> str:
    """Escape a value for a quoted Pandoc/HTML attribute."""
    return (
        str(value if value is not None else "")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def yaml_bool(value: Any) -> str:
    return "true" if value else "false"


def as_block(markup: str) -> str:
    """Normalize surrounding whitespace so blocks concatenate with one blank line between them."""
    return markup.strip() + "\n\n"
