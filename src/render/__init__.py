"""
Rendering of numeric values into formatted strings.

Consumes a finished NumberFormatSpec; the format model never depends on
this package.
"""

from src.render.number_renderer import (
    NumberStringRenderer,
    SymbolLayout,
    layout_symbols,
    render_number,
)

__all__ = [
    "NumberStringRenderer",
    "SymbolLayout",
    "layout_symbols",
    "render_number",
]
