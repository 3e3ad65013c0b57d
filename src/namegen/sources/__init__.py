"""Providers for the template text and word table."""

from namegen.sources.base import TextSource, normalize_template_text
from namegen.sources.file import FileTextSource, StaticTextSource

__all__ = [
    "FileTextSource",
    "StaticTextSource",
    "TextSource",
    "normalize_template_text",
]
