from .umap import plot_umap, plot_umap_interactive, plot_umap_optimized, adjust_plot_alpha
from .preview import preview_palette

from .style import (
    apply_morandi_theme,
    morandi_figure,
    set_style,
    gg_size_to_marker_area,
    THEME_STYLES,
    LEGEND_POSITIONS,
)

__all__ = [
    "plot_umap",
    "plot_umap_interactive",
    "plot_umap_optimized",
    "adjust_plot_alpha",
    "preview_palette",
    "apply_morandi_theme",
    "morandi_figure",
    "set_style",
    "gg_size_to_marker_area",
    "THEME_STYLES",
    "LEGEND_POSITIONS",
]
