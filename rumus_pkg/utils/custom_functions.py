import numpy as np


def round_half_up(value):
    """Round to the nearest integer, ties toward positive infinity (-2.5 -> -2)."""
    return np.floor(value + 0.5)


def atan2_unary(value):
    """Single-argument atan2, with the x coordinate fixed at 1."""
    return np.arctan2(value, 1.0)
