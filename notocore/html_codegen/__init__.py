"""MiniDocument → HTML code generation helpers."""

from .generator import (
    DEFAULT_SHELL,
    CONTENT_PLACEHOLDER,
    escape_html,
    generate_html,
    generate_html_document,
)

__all__ = [
    "DEFAULT_SHELL",
    "CONTENT_PLACEHOLDER",
    "escape_html",
    "generate_html",
    "generate_html_document",
]
