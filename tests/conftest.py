import matplotlib
matplotlib.use("Agg")

import pytest
from morandipal.datasets import make_mock_umap


@pytest.fixture
def mock_adata():
    return make_mock_umap(n_cells=300, n_genes=20, n_clusters=5, n_samples=2, random_state=0)
