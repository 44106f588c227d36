import os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import morandipal as mp
from morandipal.datasets import make_mock_umap


def main():
    os.makedirs("demo_figs", exist_ok=True)

    # --- Step 1: Available palettes ---
    mp.palette_table(verbose=True)

    # --- Step 2: Palette previews ---
    print("Generating palette previews...")
    for name in mp.MORANDI_PALETTES:
        mp.pl.preview_palette(name, save=f"demo_figs/palette_{name}.png")
    mp.pl.preview_palette("warm_theme", n=10, save="demo_figs/palette_warm_theme_10.png")
    plt.close("all")

    # --- Step 3: UMAP plots ---
    print("Generating mock scRNA-seq embedding...")
    adata = make_mock_umap(n_cells=3000, n_clusters=12, random_state=42)

    mp.pl.plot_umap(adata, group_by="leiden", palette="cool_green",
                    alpha=0.7, pt_size=0.6, save="demo_figs/umap_cool_green.png")
    mp.pl.plot_umap(adata, palette=["#C1747B", "#BDD9B6", "#DBB0D4"], alpha=0.9,
                    save="demo_figs/umap_custom_colors.png")
    mp.pl.plot_umap(adata, split_by="sample", ncol=2, label=False,
                    save="demo_figs/umap_split.png")
    mp.pl.plot_umap_interactive(adata, group_by_list=["leiden", "sample"], ncol=2,
                                label=False, save="demo_figs/umap_comparison.png")
    mp.pl.plot_umap_optimized(adata, save="demo_figs/umap_optimized.png")
    plt.close("all")

    # --- Step 4: Suggested parameters ---
    print("\nSuggested Parameters by Cell Count:")
    print("=====================================")
    for count in [3000, 8000, 25000, 75000, 150000]:
        print(f"Cells: {count:6d} | Alpha: {mp.suggest_alpha(count):.1f} | "
              f"Point Size: {mp.suggest_pt_size(count):.1f}")

    # --- Step 5: Colour blend ---
    blend = mp.generate_blend("#C1747B", "#CADD93", n=10)
    print(f"\nBlend: {', '.join(blend)}")
    mp.pl.preview_palette(blend, title="Almond Red to Yellow Green",
                          save="demo_figs/blend.png")
    plt.close("all")
    print("Done! Figures saved to demo_figs/")


if __name__ == "__main__":
    main()
