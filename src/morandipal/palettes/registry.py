# morandipal palette registry — Morandi-style muted colours for scRNA-seq plots

from types import MappingProxyType
from typing import List, NamedTuple

import pandas as pd

# ── Full 17-colour palette ────────────────────────────────────────────────────
MORANDI_COMPLETE_17 = (
    "#C1747B",   # almond red
    "#BDD9B6",   # mint green
    "#DBB0D4",   # purple pink
    "#929F74",   # grey green
    "#636363",   # deep grey
    "#DEA368",   # caramel gold
    "#8ED19B",   # medium green
    "#DBE6B3",   # light yellow-green
    "#679AC3",   # blue
    "#57B3C3",   # cyan
    "#9EA0A4",   # light grey
    "#CADD93",   # yellow green
    "#E1C270",   # golden yellow
    "#7B537D",   # deep purple
    "#CF8DB4",   # rose pink
    "#377EB7",   # deep blue
    "#BDBFC3",   # pale grey
)

# ── Themed 15-colour palettes (three shades per anchor colour) ────────────────
MORANDI_WARM = (
    "#C1747B", "#D08181", "#DF8787", "#DEA368", "#E0A873",
    "#E2AD7E", "#E1C270", "#DFC16F", "#DDBE6D", "#CF8DB4",
    "#D09BB6", "#D1A9B8", "#C89FB0", "#C295A8", "#BC8BA0",
)

MORANDI_COOL_GREEN = (
    "#57B3C3", "#5FB4BF", "#67B5BB", "#8ED19B", "#8FCA9C",
    "#90C39D", "#BDD9B6", "#BAD4B2", "#B7CFAE", "#679AC3",
    "#6BA0C7", "#6FA6CB", "#7EB0D3", "#8DBADB", "#9CC4E3",
)

MORANDI_PURPLE_ELEGANT = (
    "#7B537D", "#8A65A0", "#9977BC", "#DBB0D4", "#DAB3D5",
    "#D9B6D6", "#CF8DB4", "#D49EBC", "#D9AFC4", "#BDBFC3",
    "#C0B8BD", "#C3B1B7", "#C6AAB1", "#C9A3AB", "#CC9CA5",
)

MORANDI_NEUTRAL_PRO = (
    "#636363", "#737373", "#838383", "#9EA0A4", "#9BA0A3",
    "#989FA2", "#929F74", "#919D76", "#909B78", "#BDBFC3",
    "#B8BAC0", "#B3B5BD", "#AEAFBA", "#A9AAB7", "#A4A5B4",
)

MORANDI_HARMONY_BLEND = (
    "#CADD93", "#C8DB94", "#C6D995", "#DBE6B3", "#D9E4B4",
    "#D7E2B5", "#377EB7", "#4B86BE", "#5F8EC5", "#8ED19B",
    "#8CCCA2", "#8AC7A9", "#88C2B0", "#86BDB7", "#84B8BE",
)

# ── Dark-to-light ordering of the 17 anchors ─────────────────────────────────
MORANDI_GRADIENT_FULL = (
    "#636363", "#7B537D", "#377EB7", "#929F74", "#C1747B",
    "#679AC3", "#DEA368", "#57B3C3", "#9EA0A4", "#DBB0D4",
    "#CF8DB4", "#8ED19B", "#BDD9B6", "#E1C270", "#CADD93",
    "#DBE6B3", "#BDBFC3",
)

MORANDI_PALETTES = MappingProxyType({
    "complete_17":    MORANDI_COMPLETE_17,
    "warm_theme":     MORANDI_WARM,
    "cool_green":     MORANDI_COOL_GREEN,
    "purple_elegant": MORANDI_PURPLE_ELEGANT,
    "neutral_pro":    MORANDI_NEUTRAL_PRO,
    "harmony_blend":  MORANDI_HARMONY_BLEND,
    "gradient_full":  MORANDI_GRADIENT_FULL,
})

DEFAULT_PALETTE = "gradient_full"

# (description, use case) per palette, in registry order
_PALETTE_NOTES = {
    "complete_17":    ("Full 17-color palette", "General use"),
    "warm_theme":     ("Warm colors (red, gold, pink)", "Heat maps, time series"),
    "cool_green":     ("Cool colors (cyan, green, mint)", "Cell types, clustering"),
    "purple_elegant": ("Purple and pink shades", "Academic publication"),
    "neutral_pro":    ("Professional neutral grays", "Reports, printing"),
    "harmony_blend":  ("Balanced multi-color blend", "Multi-dimensional analysis"),
    "gradient_full":  ("Complete gradient from dark to light", "Gradient visualization"),
}


class PaletteInfo(NamedTuple):
    name: str
    colors: int
    description: str
    use_case: str


def palette_names() -> List[str]:
    return list(MORANDI_PALETTES)


def list_palettes() -> List[PaletteInfo]:
    """
    Describe every registered palette.

    Returns
    -------
    list of PaletteInfo
        One ``(name, colors, description, use_case)`` entry per palette, in
        registry order. ``colors`` is the palette length.
    """
    return [
        PaletteInfo(name, len(colors), *_PALETTE_NOTES[name])
        for name, colors in MORANDI_PALETTES.items()
    ]


def palette_table(verbose: bool = False) -> pd.DataFrame:
    """
    Registered palettes as a DataFrame.

    Parameters
    ----------
    verbose : bool
        Also print the table with a short usage hint.
    """
    df = pd.DataFrame(list_palettes(), columns=list(PaletteInfo._fields))
    if verbose:
        print("\n=== Morandi Color Palettes ===\n")
        print(df.to_string(index=False))
        print("\nUsage: get_palette('palette_name')\n")
    return df
