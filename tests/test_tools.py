import numpy as np
import pytest
from morandipal import tools as tl


@pytest.mark.parametrize("n_cells, expected", [
    (0, 1.0),
    (4999, 1.0),
    (5000, 0.9),
    (9999, 0.9),
    (10000, 0.8),
    (49999, 0.8),
    (50000, 0.6),
    (99999, 0.6),
    (100000, 0.4),
    (2_000_000, 0.4),
])
def test_suggest_alpha(n_cells, expected):
    assert tl.suggest_alpha(n_cells) == expected


@pytest.mark.parametrize("n_cells, expected", [
    (0, 1.5),
    (4999, 1.5),
    (5000, 1.2),
    (9999, 1.2),
    (10000, 0.8),
    (49999, 0.8),
    (50000, 0.5),
    (99999, 0.5),
    (100000, 0.3),
    (2_000_000, 0.3),
])
def test_suggest_pt_size(n_cells, expected):
    assert tl.suggest_pt_size(n_cells) == expected


def test_advisor_accepts_numpy_ints():
    assert tl.suggest_alpha(np.int64(25000)) == 0.8
    assert tl.suggest_pt_size(np.int32(7000)) == 1.2


def test_advisor_rejects_negative_counts():
    with pytest.raises(ValueError):
        tl.suggest_alpha(-1)
    with pytest.raises(ValueError):
        tl.suggest_pt_size(-10)


def test_breakpoint_tables_aligned():
    assert [b for b, _ in tl.ALPHA_BREAKS] == [b for b, _ in tl.PT_SIZE_BREAKS]
