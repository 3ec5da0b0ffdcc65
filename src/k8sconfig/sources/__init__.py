"""
Config map sources.

Declaration and normalized source models, label expression parsing and the
resolver that applies default name and namespace to declared sources.
"""

from .labels import format_label, parse_label
from .models import NormalizedSource, SourceDeclaration
from .resolver import resolve_sources

__all__ = [
    "SourceDeclaration",
    "NormalizedSource",
    "resolve_sources",
    "parse_label",
    "format_label",
]
