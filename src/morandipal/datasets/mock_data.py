"""
Synthetic single-cell data for demos and tests.
"""

import numpy as np
import pandas as pd
import anndata as ad


def make_mock_umap(
    n_cells: int = 2000,
    n_genes: int = 200,
    n_clusters: int = 8,
    n_samples: int = 2,
    random_state: int = 42,
) -> ad.AnnData:
    """
    Generate a mock AnnData object with a 2-D UMAP-like embedding and clusters.

    Parameters
    ----------
    n_cells : int
        Number of cells
    n_genes : int
        Number of genes in the (Poisson noise) count matrix
    n_clusters : int
        Number of blobs in the embedding, stored as ``obs['leiden']``
    n_samples : int
        Number of samples, stored as ``obs['sample']`` for split plots

    Returns
    -------
    anndata.AnnData
    """
    from sklearn.datasets import make_blobs
    rng = np.random.default_rng(random_state)

    # 1. Cluster layout directly in two dimensions
    emb, y = make_blobs(n_samples=n_cells, n_features=2, centers=n_clusters,
                        cluster_std=1.2, center_box=(-15.0, 15.0),
                        random_state=random_state)

    # 2. Counts carry no structure; only the embedding is plotted
    X = rng.poisson(1.0, size=(n_cells, n_genes)).astype(np.float32)

    obs = pd.DataFrame({
        "leiden": pd.Categorical([str(c) for c in y],
                                 categories=[str(c) for c in range(n_clusters)]),
        "sample": pd.Categorical([f"sample_{s + 1}" for s in rng.integers(0, n_samples, n_cells)]),
    }, index=[f"cell_{i}" for i in range(n_cells)])
    var = pd.DataFrame(index=[f"gene_{i}" for i in range(n_genes)])

    adata = ad.AnnData(X=X, obs=obs, var=var)
    adata.obsm["X_umap"] = emb.astype(np.float32)
    return adata
