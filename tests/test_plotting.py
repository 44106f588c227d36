import numpy as np
import pandas as pd
import pytest
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb

from morandipal import plotting as pl
from morandipal import palettes as pal
from morandipal.exceptions import UnknownPaletteError


def _point_rgbs(ax, layer=0):
    colors = ax.collections[layer].get_facecolors()
    return {tuple(np.round(c[:3], 3)) for c in colors}


def _rgbs(hex_colors):
    return {tuple(np.round(to_rgb(c), 3)) for c in hex_colors}


def test_plot_umap(mock_adata):
    ax = pl.plot_umap(mock_adata, group_by="leiden", palette="warm_theme", alpha=0.7, repel=False)
    assert isinstance(ax, plt.Axes)
    assert ax.collections[0].get_alpha() == pytest.approx(0.7)
    assert _point_rgbs(ax) == _rgbs(pal.assign_colors("warm_theme", 5))
    assert [t.get_text() for t in ax.texts] == ["0", "1", "2", "3", "4"]
    assert ax.get_title() == "leiden"
    plt.close("all")


def test_plot_umap_cycles_short_palette(mock_adata):
    colors = ["#C1747B", "#BDD9B6"]
    ax = pl.plot_umap(mock_adata, palette=colors, label=False, title="Clusters")
    assert _point_rgbs(ax) == _rgbs(colors)
    assert ax.get_title() == "Clusters"
    assert len(ax.texts) == 0
    plt.close("all")


def test_plot_umap_numeric_groups(mock_adata):
    mock_adata.obs["cluster_id"] = mock_adata.obs["leiden"].astype(int).values
    ax = pl.plot_umap(mock_adata, group_by="cluster_id", label=False)
    assert isinstance(mock_adata.obs["cluster_id"].dtype, pd.CategoricalDtype)
    assert _point_rgbs(ax) == _rgbs(pal.assign_colors("gradient_full", 5))
    plt.close("all")


@pytest.mark.parametrize("legend_position", ["right", "left", "top", "bottom"])
def test_plot_umap_legend_positions(mock_adata, legend_position):
    ax = pl.plot_umap(mock_adata, legend_position=legend_position, label=False)
    legend = ax.get_legend()
    assert legend is not None
    assert [t.get_text() for t in legend.get_texts()] == ["0", "1", "2", "3", "4"]
    plt.close("all")


def test_plot_umap_no_legend(mock_adata):
    ax = pl.plot_umap(mock_adata, legend_position="none", label=False)
    assert ax.get_legend() is None
    plt.close("all")


@pytest.mark.parametrize("theme_style", ["minimal", "bw", "classic"])
def test_plot_umap_themes(mock_adata, theme_style):
    ax = pl.plot_umap(mock_adata, theme_style=theme_style, label_box=True, repel=False)
    assert ax.spines["left"].get_visible() == (theme_style != "minimal")
    assert ax.spines["top"].get_visible() == (theme_style == "bw")
    plt.close("all")


def test_plot_umap_split(mock_adata):
    axes = pl.plot_umap(mock_adata, split_by="sample", ncol=2, label=False, title="By sample")
    assert isinstance(axes, list)
    assert [ax.get_title() for ax in axes] == ["sample_1", "sample_2"]

    expected = pal.colors_for_groups(mock_adata.obs["leiden"], "gradient_full")
    for ax, sample in zip(axes, ["sample_1", "sample_2"]):
        present = mock_adata.obs.loc[mock_adata.obs["sample"] == sample, "leiden"].unique()
        assert _point_rgbs(ax) == _rgbs([expected[c] for c in present])
    plt.close("all")


def test_plot_umap_save(mock_adata, tmp_path):
    out = tmp_path / "umap.png"
    pl.plot_umap(mock_adata, label=False, save=str(out))
    assert out.exists()
    plt.close("all")


def test_plot_umap_validation(mock_adata):
    with pytest.raises(TypeError):
        pl.plot_umap(mock_adata.obs)
    with pytest.raises(ValueError, match="Reduction"):
        pl.plot_umap(mock_adata, reduction="tsne")
    with pytest.raises(ValueError, match="Metadata column"):
        pl.plot_umap(mock_adata, group_by="cell_type")
    with pytest.raises(UnknownPaletteError):
        pl.plot_umap(mock_adata, palette="not_a_palette")
    with pytest.raises(ValueError):
        pl.plot_umap(mock_adata, legend_position="middle")
    with pytest.raises(ValueError):
        pl.plot_umap(mock_adata, theme_style="dark", label=False)
    fig, ax = plt.subplots()
    with pytest.raises(ValueError):
        pl.plot_umap(mock_adata, split_by="sample", ax=ax)
    plt.close("all")


def test_plot_umap_interactive(mock_adata):
    plots = pl.plot_umap_interactive(mock_adata, group_by_list=["leiden", "sample"], ncol=2, label=False)
    assert len(plots) == 2
    assert plots[0].figure is plots[1].figure
    assert plots[1].get_title() == "sample"
    plt.close("all")

    with pytest.raises(ValueError):
        pl.plot_umap_interactive(mock_adata)


def test_plot_umap_optimized(mock_adata):
    ax = pl.plot_umap_optimized(mock_adata, label=False)
    # 300 cells
    assert ax.collections[0].get_alpha() == pytest.approx(1.0)
    assert ax.collections[0].get_sizes()[0] == pytest.approx(pl.gg_size_to_marker_area(1.5))
    plt.close("all")


def test_adjust_plot_alpha(mock_adata):
    ax = pl.plot_umap(mock_adata, alpha=1.0, label=False)
    pl.adjust_plot_alpha(ax, alpha=0.5)
    assert ax.collections[0].get_alpha() == pytest.approx(0.5)

    with pytest.raises(ValueError):
        pl.adjust_plot_alpha(ax, alpha=1.5)
    with pytest.raises(ValueError):
        pl.adjust_plot_alpha(ax, layer=10)
    plt.close("all")


def test_preview_palette():
    ax = pl.preview_palette("warm_theme", n=10)
    assert ax.get_title() == "warm_theme"
    assert len(ax.patches) == 10
    assert [t.get_text() for t in ax.texts] == pal.get_palette("warm_theme", n=10)
    plt.close("all")


def test_preview_custom_palette():
    ax = pl.preview_palette(["#C1747B", "#BDD9B6", "#DBB0D4"], include_hex=False)
    assert ax.get_title() == "Custom Palette"
    assert len(ax.patches) == 3
    assert len(ax.texts) == 0
    plt.close("all")
