import numpy as np
from numbers import Integral
from typing import List
from matplotlib.colors import to_hex, to_rgb


def generate_blend(color1: str, color2: str, n: int = 10) -> List[str]:
    """
    Create a smooth blend between two colours.

    Each RGB channel is interpolated linearly in [0, 1] at ``n`` evenly
    spaced points, endpoints included. The interpolation is done on the
    sRGB-encoded values, so steps are not perceptually uniform.

    Parameters
    ----------
    color1, color2 : str
        Start and end colours (hex codes or any matplotlib colour).
    n : int
        Number of colours. ``n=1`` returns ``[color1]``.

    Returns
    -------
    list of str
        Upper-case ``#RRGGBB`` codes.
    """
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")

    rgb1 = np.array(to_rgb(color1))
    rgb2 = np.array(to_rgb(color2))

    blend_colors = []
    for t in np.linspace(0.0, 1.0, int(n)):
        rgb = rgb1 * (1 - t) + rgb2 * t
        blend_colors.append(to_hex(rgb).upper())
    return blend_colors
