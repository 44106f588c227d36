"""
morandipal: Morandi colour palettes and UMAP plotting for scRNA-seq.
"""

__version__ = "0.1.0"

from . import palettes as pal
from . import tools as tl
from . import plotting as pl
from . import datasets

from .exceptions import (
    UnknownPaletteError,
    EmptyPaletteError,
    InvalidGroupCountError,
    TruncationWarning,
)
from .palettes import (
    MORANDI_PALETTES,
    get_palette,
    list_palettes,
    palette_table,
    assign_colors,
    generate_blend,
)
from .tools import suggest_alpha, suggest_pt_size

__all__ = [
    "pal",
    "tl",
    "pl",
    "datasets",
    "UnknownPaletteError",
    "EmptyPaletteError",
    "InvalidGroupCountError",
    "TruncationWarning",
    "MORANDI_PALETTES",
    "get_palette",
    "list_palettes",
    "palette_table",
    "assign_colors",
    "generate_blend",
    "suggest_alpha",
    "suggest_pt_size",
]
