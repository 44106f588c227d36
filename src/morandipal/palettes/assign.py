"""
Palette resolution and colour assignment for categorical groupings.
"""

import math
import warnings
from numbers import Integral
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

import pandas as pd
from matplotlib.colors import is_color_like

from ..exceptions import (
    EmptyPaletteError,
    InvalidGroupCountError,
    TruncationWarning,
    UnknownPaletteError,
)
from .registry import DEFAULT_PALETTE, MORANDI_PALETTES

PaletteLike = Union[str, Sequence[str]]


class ResolvedPalette(NamedTuple):
    """A palette argument after resolution. ``name`` is None for literal colour lists."""
    name: Optional[str]
    colors: tuple

    @property
    def is_named(self) -> bool:
        return self.name is not None


def resolve_palette(palette: PaletteLike = DEFAULT_PALETTE) -> ResolvedPalette:
    """
    Turn a palette name or a list of colours into concrete colours.

    A string naming a registered palette resolves to that palette. A string
    that is itself a colour (``"#C1747B"``, ``"grey"``) becomes a one-colour
    list. Anything else that is not a string is taken verbatim as a list of
    colours; its entries are not checked.

    Raises
    ------
    UnknownPaletteError
        ``palette`` is a string that is neither a palette name nor a colour.
    EmptyPaletteError
        ``palette`` is an empty colour list.
    """
    if isinstance(palette, str):
        if palette in MORANDI_PALETTES:
            return ResolvedPalette(palette, MORANDI_PALETTES[palette])
        if is_color_like(palette):
            return ResolvedPalette(None, (palette,))
        raise UnknownPaletteError(palette, MORANDI_PALETTES)

    colors = tuple(palette)
    if len(colors) == 0:
        raise EmptyPaletteError("Palette must contain at least one color.")
    return ResolvedPalette(None, colors)


def _check_count(n, what: str) -> int:
    # bool is an Integral but never a meaningful count
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidGroupCountError(f"{what} must be a non-negative integer, got {n!r}")
    if n < 0:
        raise InvalidGroupCountError(f"{what} must be a non-negative integer, got {n}")
    return int(n)


def get_palette(palette: PaletteLike = DEFAULT_PALETTE, n: Optional[int] = None) -> List[str]:
    """
    Retrieve a palette, or its first ``n`` colours.

    Parameters
    ----------
    palette : str or list of str
        Registered palette name or a list of hex colours.
    n : int, optional
        Number of colours to return. If ``n`` exceeds the palette size, all
        colours are returned and a ``TruncationWarning`` is emitted.

    Returns
    -------
    list of str
    """
    colors = list(resolve_palette(palette).colors)
    if n is None:
        return colors

    n = _check_count(n, "n")
    if n > len(colors):
        warnings.warn(
            f"Requested colors exceed palette size. Returning all {len(colors)} colors.",
            TruncationWarning,
            stacklevel=2,
        )
        return colors
    return colors[:n]


def assign_colors(palette: PaletteLike, n_groups: int) -> List[str]:
    """
    Return exactly ``n_groups`` colours from ``palette``.

    Short palettes are repeated end-to-end until long enough, then cut, so
    with colours ``A, B, C`` and 7 groups the result is
    ``A, B, C, A, B, C, A``.
    """
    n_groups = _check_count(n_groups, "n_groups")
    colors = list(resolve_palette(palette).colors)
    if n_groups == 0:
        return []
    if len(colors) < n_groups:
        colors = colors * math.ceil(n_groups / len(colors))
    return colors[:n_groups]


def colors_for_groups(values, palette: PaletteLike = DEFAULT_PALETTE) -> Dict:
    """
    Map each distinct value of a grouping vector to a colour.

    Categories keep their categorical order (unused ones dropped); other
    values are ordered the way pandas orders new categories.
    """
    categories = pd.Categorical(values).remove_unused_categories().categories
    return dict(zip(categories, assign_colors(palette, len(categories))))
