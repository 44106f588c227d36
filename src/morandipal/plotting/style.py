# morandipal plotting style module — Seurat/ggplot2-inspired defaults

# ── Typography ────────────────────────────────────────────────────────────────
FONT_FAMILY     = "sans-serif"
TITLE_SIZE      = 14
AXIS_TITLE_SIZE = 12
AXIS_TEXT_SIZE  = 10
LABEL_SIZE      = 5           # cluster label size, ggplot mm
TICK_SIZE       = 8

# ── Layout ────────────────────────────────────────────────────────────────────
FIG_BG          = "white"
PANEL_BG        = "#E5E5E5"   # ggplot grey90
SPINE_COLOR     = "#333333"
GRID_COLOR      = "#EEEEEE"
POINT_SIZE      = 0.8         # ggplot mm
ALPHA           = 0.8
THEME_STYLES    = ("minimal", "bw", "classic")
LEGEND_POSITIONS = ("right", "left", "top", "bottom", "none")

# ggplot2 sizes are in mm; matplotlib wants points
GG_PT = 72.27 / 25.4


def gg_size_to_points(size: float) -> float:
    """ggplot2 size (mm) to a matplotlib font size / marker diameter in points."""
    return size * GG_PT


def gg_size_to_marker_area(size: float) -> float:
    """ggplot2 point size (mm) to a matplotlib scatter area (points^2)."""
    return gg_size_to_points(size) ** 2


def set_style():
    """
    Apply ggplot-like styles to matplotlib global parameters.
    """
    import matplotlib.pyplot as plt
    import seaborn as sns

    sns.set_style("ticks")
    plt.rcParams["font.family"] = FONT_FAMILY
    plt.rcParams["axes.spines.top"] = False
    plt.rcParams["axes.spines.right"] = False
    plt.rcParams["axes.titlesize"] = TITLE_SIZE
    plt.rcParams["axes.labelsize"] = AXIS_TITLE_SIZE
    plt.rcParams["xtick.labelsize"] = TICK_SIZE
    plt.rcParams["ytick.labelsize"] = TICK_SIZE
    plt.rcParams["legend.frameon"] = False


def apply_morandi_theme(
    ax,
    theme_style: str = "minimal",
    bg_color: str = FIG_BG,
    panel_color: str = PANEL_BG,
    axis_text_size: float = AXIS_TEXT_SIZE,
    axis_title_size: float = AXIS_TITLE_SIZE,
    title_size: float = TITLE_SIZE,
):
    """
    Apply a ggplot2-style theme to a matplotlib Axes.

    Parameters
    ----------
    ax          : matplotlib.axes.Axes
    theme_style : str — 'minimal' = no axis lines,
                        'bw' = dark frame on all four sides,
                        'classic' = bottom+left axis lines only
    bg_color    : str — figure background
    panel_color : str — plotting panel background
    """
    if theme_style not in THEME_STYLES:
        raise ValueError(f"theme_style must be one of {THEME_STYLES}, got '{theme_style}'")

    ax.figure.set_facecolor(bg_color)
    ax.set_facecolor(panel_color)
    ax.patch.set_alpha(1.0)

    if theme_style == "minimal":
        for s in ax.spines.values():
            s.set_visible(False)
    elif theme_style == "bw":
        for s in ax.spines.values():
            s.set_visible(True)
            s.set_color(SPINE_COLOR)
            s.set_linewidth(0.8)
    else:
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        for s in ["bottom", "left"]:
            ax.spines[s].set_visible(True)
            ax.spines[s].set_color("black")
            ax.spines[s].set_linewidth(0.8)

    ax.grid(False)
    ax.tick_params(axis="both", labelsize=axis_text_size,
                   length=3, width=0.6, color=SPINE_COLOR)
    ax.xaxis.label.set_size(axis_title_size)
    ax.yaxis.label.set_size(axis_title_size)
    ax.title.set_fontsize(title_size)
    ax.title.set_fontweight("bold")
    ax.title.set_horizontalalignment("center")

    return ax


def morandi_figure(nrows=1, ncols=1, figsize=None, bg_color=FIG_BG):
    """
    Create a figure for one or more embedding panels.
    Returns (fig, axes) where axes is always a flat list.
    """
    import matplotlib.pyplot as plt

    if figsize is None:
        figsize = (6 * ncols, 5 * nrows)

    fig, axes = plt.subplots(nrows, ncols, figsize=figsize,
                             facecolor=bg_color, squeeze=False)
    return fig, list(axes.ravel())
