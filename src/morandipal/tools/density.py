"""
Suggested scatter transparency and point size for a given number of cells.
"""

# (upper bound exclusive, value), evaluated top to bottom
ALPHA_BREAKS = (
    (5_000, 1.0),
    (10_000, 0.9),
    (50_000, 0.8),
    (100_000, 0.6),
    (float("inf"), 0.4),
)

PT_SIZE_BREAKS = (
    (5_000, 1.5),
    (10_000, 1.2),
    (50_000, 0.8),
    (100_000, 0.5),
    (float("inf"), 0.3),
)


def _step_lookup(n_cells, breaks) -> float:
    if n_cells < 0:
        raise ValueError(f"n_cells must be non-negative, got {n_cells}")
    for upper, value in breaks:
        if n_cells < upper:
            return value
    return breaks[-1][1]


def suggest_alpha(n_cells: int) -> float:
    """
    Suggest an alpha value based on cell count.

    - < 5,000 cells: 1.0 (opaque)
    - 5,000 - 10,000: 0.9
    - 10,000 - 50,000: 0.8
    - 50,000 - 100,000: 0.6
    - >= 100,000: 0.4
    """
    return _step_lookup(n_cells, ALPHA_BREAKS)


def suggest_pt_size(n_cells: int) -> float:
    """
    Suggest a point size based on cell count.

    - < 5,000 cells: 1.5
    - 5,000 - 10,000: 1.2
    - 10,000 - 50,000: 0.8
    - 50,000 - 100,000: 0.5
    - >= 100,000: 0.3
    """
    return _step_lookup(n_cells, PT_SIZE_BREAKS)
