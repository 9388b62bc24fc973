"""
Global Constants
================
This module serves as the central registry for the numeric settings shared by
every primitive.

Exports:
    SCALAR_DTYPE: The floating-point type every coordinate and scalar is stored as.
    DEFAULT_TOLERANCE (float): Absolute tolerance used by approximate vector comparison.
"""
import numpy as np


# Single precision throughout, matching the component type of Vector2.
SCALAR_DTYPE: type[np.float32] = np.float32

DEFAULT_TOLERANCE: float = 1e-6
