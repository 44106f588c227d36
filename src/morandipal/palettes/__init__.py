from .registry import (
    MORANDI_PALETTES,
    DEFAULT_PALETTE,
    PaletteInfo,
    list_palettes,
    palette_names,
    palette_table,
)
from .assign import (
    ResolvedPalette,
    resolve_palette,
    get_palette,
    assign_colors,
    colors_for_groups,
)
from .blend import generate_blend

__all__ = [
    "MORANDI_PALETTES",
    "DEFAULT_PALETTE",
    "PaletteInfo",
    "list_palettes",
    "palette_names",
    "palette_table",
    "ResolvedPalette",
    "resolve_palette",
    "get_palette",
    "assign_colors",
    "colors_for_groups",
    "generate_blend",
]
