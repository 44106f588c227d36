from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..palettes import DEFAULT_PALETTE, get_palette, resolve_palette
from .style import TITLE_SIZE, gg_size_to_points


def preview_palette(
    palette: Union[str, Sequence[str]] = DEFAULT_PALETTE,
    n: Optional[int] = None,
    title: Optional[str] = None,
    include_hex: bool = True,
    ax: Optional[plt.Axes] = None,
    show: bool = False,
    save: Optional[str] = None,
) -> plt.Axes:
    """
    Draw a palette as a row of colour tiles.

    Parameters
    ----------
    palette : str or list of str
        Palette name or list of colours.
    n : int, optional
        Only show the first ``n`` colours.
    title : str, optional
        Defaults to the palette name, or "Custom Palette" for colour lists.
    include_hex : bool
        Print the hex code on each tile.
    """
    colors = get_palette(palette, n)

    if title is None:
        resolved = resolve_palette(palette)
        title = resolved.name if resolved.is_named else "Custom Palette"

    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, 0.8 * len(colors)), 1.6), facecolor="white")

    for i, color in enumerate(colors):
        ax.add_patch(Rectangle((i + 0.025, 0.025), 0.95, 0.95, facecolor=color, edgecolor="none"))
        if include_hex:
            ax.text(i + 0.5, 0.5, color, ha="center", va="center",
                    fontsize=gg_size_to_points(3) * 0.8, color="black")

    ax.set_xlim(0, max(len(colors), 1))
    ax.set_ylim(0, 1)
    ax.set_axis_off()
    ax.set_title(title, fontsize=TITLE_SIZE - 2, fontweight="bold", loc="center")

    if save:
        ax.figure.savefig(save, bbox_inches="tight", dpi=150)
        print(f"  Saved palette preview: {save}")
    if show:
        plt.show()
    return ax
