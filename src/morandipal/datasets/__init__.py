from .mock_data import make_mock_umap

__all__ = ["make_mock_umap"]
