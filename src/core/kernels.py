# core/kernels.py
import numpy as np
from numba import njit


@njit
def cross_swizzled(a, b, out):
    """
    Cross product written as a.yzx * b.zxy - a.zxy * b.yzx.
    Both swizzled products go through their own temporary before the
    subtraction; the result is stored in out.
    """
    lhs = np.empty(3, dtype=np.float32)
    rhs = np.empty(3, dtype=np.float32)

    lhs[0] = a[1] * b[2]
    lhs[1] = a[2] * b[0]
    lhs[2] = a[0] * b[1]

    rhs[0] = a[2] * b[1]
    rhs[1] = a[0] * b[2]
    rhs[2] = a[1] * b[0]

    for i in range(3):
        out[i] = lhs[i] - rhs[i]
