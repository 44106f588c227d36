"""
UMAP / embedding plots with Morandi palettes, built on scanpy.
"""

import math
from typing import List, Optional, Sequence, Union

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patheffects as PathEffects
from matplotlib.lines import Line2D
import scanpy as sc
from anndata import AnnData

from ..palettes import DEFAULT_PALETTE, colors_for_groups
from ..tools import suggest_alpha, suggest_pt_size
from .style import (
    ALPHA,
    AXIS_TEXT_SIZE,
    AXIS_TITLE_SIZE,
    FIG_BG,
    LABEL_SIZE,
    LEGEND_POSITIONS,
    PANEL_BG,
    POINT_SIZE,
    TITLE_SIZE,
    apply_morandi_theme,
    gg_size_to_marker_area,
    gg_size_to_points,
    morandi_figure,
    set_style,
)

PaletteArg = Union[str, Sequence[str]]

_LEGEND_ANCHORS = {
    "right":  dict(loc="center left", bbox_to_anchor=(1.02, 0.5)),
    "left":   dict(loc="center right", bbox_to_anchor=(-0.02, 0.5)),
    "top":    dict(loc="lower center", bbox_to_anchor=(0.5, 1.08)),
    "bottom": dict(loc="upper center", bbox_to_anchor=(0.5, -0.05)),
}


def _embedding_key(adata: AnnData, reduction: str) -> str:
    """Return the obsm key holding ``reduction``."""
    for key in (f"X_{reduction}", reduction):
        if key in adata.obsm:
            return key
    raise ValueError(f"Reduction '{reduction}' not found in adata.obsm.")


def _check_inputs(adata, group_by: str, reduction: str) -> str:
    if not isinstance(adata, AnnData):
        raise TypeError("adata must be an AnnData object")
    obsm_key = _embedding_key(adata, reduction)
    if group_by not in adata.obs.columns:
        raise ValueError(f"Metadata column '{group_by}' not found in adata.obs.")
    return obsm_key


def _as_categorical(adata: AnnData, key: str) -> None:
    # numeric cluster ids would otherwise be drawn as a continuous colour scale
    adata.obs[key] = pd.Categorical(adata.obs[key]).remove_unused_categories()


def _add_cluster_labels(ax, adata, obsm_key, group_by, color_map,
                        label_size, label_box, repel):
    """Write each group's name at the median of its cells in the embedding."""
    coords = pd.DataFrame(np.asarray(adata.obsm[obsm_key])[:, :2], columns=["x", "y"])
    coords["group"] = adata.obs[group_by].values
    centers = coords.groupby("group", observed=True)[["x", "y"]].median()

    texts = []
    for group, (x, y) in centers.iterrows():
        bbox = None
        if label_box:
            bbox = dict(facecolor="white", edgecolor=color_map[group], boxstyle="round", alpha=0.9)
        txt = ax.text(x, y, str(group), fontsize=gg_size_to_points(label_size),
                      ha="center", va="center", color="black", bbox=bbox)
        txt.set_path_effects([PathEffects.withStroke(linewidth=2, foreground="w")])
        texts.append(txt)

    if repel and len(texts) > 1:
        from adjustText import adjust_text
        adjust_text(texts, ax=ax)
    return texts


def _add_legend(ax, color_map, legend_position, pt_size):
    if legend_position == "none":
        return None
    handles = [
        Line2D([0], [0], marker="o", linestyle="", color=color,
               markersize=max(gg_size_to_points(pt_size) * 2, 6), label=str(cat))
        for cat, color in color_map.items()
    ]
    kwargs = dict(_LEGEND_ANCHORS[legend_position])
    if legend_position in ("top", "bottom"):
        kwargs["ncol"] = min(len(handles), 6)
    return ax.legend(handles=handles, frameon=False, **kwargs)


def _draw_panel(adata, reduction, obsm_key, group_by, color_map, ax, title,
                alpha, pt_size, label, label_size, repel, label_box,
                legend_position, theme_style, bg_color, panel_color,
                axis_text_size, title_size, axis_title_size):
    sc.pl.embedding(
        adata,
        basis=reduction,
        color=group_by,
        palette=color_map,
        size=gg_size_to_marker_area(pt_size),
        alpha=alpha,
        frameon=True,
        legend_loc="none",
        title=title,
        ax=ax,
        show=False,
    )
    if label:
        _add_cluster_labels(ax, adata, obsm_key, group_by, color_map,
                            label_size, label_box, repel)
    _add_legend(ax, color_map, legend_position, pt_size)
    apply_morandi_theme(
        ax,
        theme_style=theme_style,
        bg_color=bg_color,
        panel_color=panel_color,
        axis_text_size=axis_text_size,
        axis_title_size=axis_title_size,
        title_size=title_size,
    )
    return ax


def _finish(fig, show: bool, save: Optional[str], what: str) -> None:
    if save:
        fig.savefig(save, bbox_inches="tight", dpi=300)
        print(f"  Saved {what}: {save}")
    if show:
        plt.show()


def plot_umap(
    adata: AnnData,
    group_by: str = "leiden",
    reduction: str = "umap",
    palette: PaletteArg = DEFAULT_PALETTE,
    alpha: float = ALPHA,
    pt_size: float = POINT_SIZE,
    label: bool = True,
    label_size: float = LABEL_SIZE,
    repel: bool = True,
    label_box: bool = False,
    split_by: Optional[str] = None,
    ncol: int = 1,
    legend_position: str = "right",
    theme_style: str = "minimal",
    bg_color: str = FIG_BG,
    panel_color: str = PANEL_BG,
    axis_text_size: float = AXIS_TEXT_SIZE,
    title: Optional[str] = None,
    title_size: float = TITLE_SIZE,
    axis_title_size: float = AXIS_TITLE_SIZE,
    ax: Optional[plt.Axes] = None,
    show: bool = False,
    save: Optional[str] = None,
) -> Union[plt.Axes, List[plt.Axes]]:
    """
    Publication-quality UMAP plot coloured with a Morandi palette.

    A wrapper around ``sc.pl.embedding`` that assigns one palette colour per
    group (cycling the palette when there are more groups than colours), then
    adds cluster labels, a legend and a ggplot2-style theme.

    Parameters
    ----------
    adata : AnnData
        Annotated data matrix with the embedding in ``adata.obsm``.
    group_by : str
        Column of ``adata.obs`` to colour by. Converted to categorical.
    reduction : str
        Embedding name, looked up as ``obsm['X_<reduction>']`` or ``obsm[reduction]``.
    palette : str or list of str
        Palette name (see ``list_palettes``) or a list of colours.
    alpha : float
        Point transparency, 0 to 1.
    pt_size : float
        Point size in ggplot2 units (mm).
    label, label_size, repel, label_box
        Draw group names at group medians, their size, whether to push
        overlapping labels apart, and whether to box them.
    split_by : str, optional
        Column of ``adata.obs``; one panel per value, ``ncol`` panels per row.
        Colours stay the same across panels.
    legend_position : str
        'right', 'left', 'top', 'bottom' or 'none'.
    theme_style : str
        'minimal', 'bw' or 'classic'.
    ax : matplotlib.axes.Axes, optional
        Draw into this Axes. Not allowed together with ``split_by``.
    show, save
        Show the figure and/or save it to this path.

    Returns
    -------
    Axes, or list of Axes when ``split_by`` is given.
    """
    obsm_key = _check_inputs(adata, group_by, reduction)
    if legend_position not in LEGEND_POSITIONS:
        raise ValueError(f"legend_position must be one of {LEGEND_POSITIONS}, got '{legend_position}'")

    set_style()
    _as_categorical(adata, group_by)
    color_map = colors_for_groups(adata.obs[group_by], palette)

    panel_kwargs = dict(
        alpha=alpha, pt_size=pt_size, label=label, label_size=label_size,
        repel=repel, label_box=label_box, legend_position=legend_position,
        theme_style=theme_style, bg_color=bg_color, panel_color=panel_color,
        axis_text_size=axis_text_size, title_size=title_size,
        axis_title_size=axis_title_size,
    )

    if split_by is None:
        if ax is None:
            fig, axes = morandi_figure(bg_color=bg_color)
            ax = axes[0]
        _draw_panel(adata, reduction, obsm_key, group_by, color_map, ax,
                    title if title else group_by, **panel_kwargs)
        _finish(ax.figure, show, save, "UMAP plot")
        return ax

    if ax is not None:
        raise ValueError("ax cannot be combined with split_by; a new figure is created per split.")
    if split_by not in adata.obs.columns:
        raise ValueError(f"Metadata column '{split_by}' not found in adata.obs.")

    splits = list(pd.Categorical(adata.obs[split_by]).remove_unused_categories().categories)
    ncol = max(1, min(ncol, len(splits)))
    nrows = math.ceil(len(splits) / ncol)
    fig, axes = morandi_figure(nrows, ncol, bg_color=bg_color)

    for i, value in enumerate(splits):
        sub = adata[(adata.obs[split_by] == value).values].copy()
        # only the last panel in the grid carries the legend
        kwargs = dict(panel_kwargs)
        if i != len(splits) - 1:
            kwargs["legend_position"] = "none"
        _draw_panel(sub, reduction, obsm_key, group_by, color_map, axes[i],
                    str(value), **kwargs)
    for extra in axes[len(splits):]:
        extra.axis("off")

    if title:
        fig.suptitle(title, fontsize=title_size, fontweight="bold")
    fig.tight_layout()
    _finish(fig, show, save, "split UMAP plot")
    return axes[:len(splits)]


def plot_umap_interactive(
    adata: AnnData,
    group_by_list: Optional[Sequence[str]] = None,
    reduction: str = "umap",
    palette: PaletteArg = DEFAULT_PALETTE,
    alpha: float = ALPHA,
    pt_size: float = 0.5,
    ncol: int = 1,
    show: bool = False,
    save: Optional[str] = None,
    **kwargs
) -> List[plt.Axes]:
    """
    Side-by-side UMAP comparison of several metadata columns.

    Parameters
    ----------
    adata : AnnData
        Annotated data matrix.
    group_by_list : list of str
        Columns of ``adata.obs``, one panel each.
    ncol : int
        Panels per row.
    **kwargs
        Passed on to ``plot_umap`` for every panel.

    Returns
    -------
    list of Axes
    """
    if not group_by_list:
        raise ValueError("group_by_list must be provided")
    if isinstance(group_by_list, str):
        group_by_list = [group_by_list]

    ncol = max(1, min(ncol, len(group_by_list)))
    nrows = math.ceil(len(group_by_list) / ncol)
    fig, axes = morandi_figure(nrows, ncol, bg_color=kwargs.get("bg_color", FIG_BG))

    plots = []
    for group_by, ax in zip(group_by_list, axes):
        plots.append(plot_umap(
            adata,
            group_by=group_by,
            reduction=reduction,
            palette=palette,
            alpha=alpha,
            pt_size=pt_size,
            ax=ax,
            **kwargs
        ))
    for extra in axes[len(group_by_list):]:
        extra.axis("off")

    fig.tight_layout()
    _finish(fig, show, save, "UMAP comparison")
    return plots


def plot_umap_optimized(
    adata: AnnData,
    group_by: str = "leiden",
    palette: PaletteArg = DEFAULT_PALETTE,
    **kwargs
) -> Union[plt.Axes, List[plt.Axes]]:
    """
    ``plot_umap`` with alpha and point size chosen from the number of cells.
    """
    n_cells = adata.n_obs
    alpha = suggest_alpha(n_cells)
    pt_size = suggest_pt_size(n_cells)
    print(f"Plotting {n_cells} cells with alpha={alpha}, pt_size={pt_size}...")

    return plot_umap(
        adata,
        group_by=group_by,
        palette=palette,
        alpha=alpha,
        pt_size=pt_size,
        **kwargs
    )


def adjust_plot_alpha(ax: plt.Axes, alpha: float = 0.7, layer: int = 0) -> plt.Axes:
    """
    Change the transparency of the points of an existing plot.

    Parameters
    ----------
    ax : Axes
        Axes returned by ``plot_umap``.
    alpha : float
        New alpha, 0 to 1.
    layer : int
        Index of the scatter collection to modify (0 is the cells).
    """
    if alpha < 0 or alpha > 1:
        raise ValueError("alpha must be between 0 and 1")
    if layer < 0 or layer >= len(ax.collections):
        raise ValueError(f"Layer {layer} not found in plot")

    ax.collections[layer].set_alpha(alpha)
    return ax
