"""
Low-Discrepancy Generators by the Cylindrical Coordinate Method
===============================================================

CylindN lifts a point y from a nested generator to

    (sin(phi) * y, cos(phi)),   cos(phi) = 2*v - 1,

with v drawn from a Van der Corput sequence. The cylindrical marginal is
uniform on [-1, 1], so no lookup table is needed. The recursion bottoms
out at the unit circle.
"""

import math
from typing import List, Optional, Sequence, Union

from .lds import Circle, VdCorput
from .utils import take_bases

CylindVariant = Union[Circle, "CylindN"]


class CylindN:
    """
    Low-discrepancy points built by the cylindrical coordinate method.

    Parameters
    ----------
    base : Sequence[int]
        One radix per level, outermost first; the last one drives the
        base circle. n bases produce points with n + 1 coordinates.
    dim : int, optional
        Number of levels to use. Requires len(base) >= dim.

    Examples
    --------
    >>> gen = CylindN([2, 3, 5, 7])
    >>> point = gen.pop()
    >>> len(point)
    5
    >>> round(point[1], 10)
    0.5896942325
    """

    def __init__(self, base: Sequence[int], dim: Optional[int] = None):
        base = take_bases(base, dim, 2, "CylindN")
        self.n = len(base)
        self.vdc = VdCorput(base[0])

        self.c_gen: CylindVariant
        if self.n == 2:
            self.c_gen = Circle(base[1])
        else:
            self.c_gen = CylindN(base[1:])

    def pop(self) -> List[float]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1)
        sinphi = math.sqrt(max(0.0, 1.0 - cosphi * cosphi))
        return [sinphi * c for c in self.c_gen.pop()] + [cosphi]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.c_gen.reseed(seed)

    def bases(self) -> List[int]:
        """Return the radices of every level, outermost first."""
        if isinstance(self.c_gen, Circle):
            inner = [self.c_gen.vdc.base]
        else:
            inner = self.c_gen.bases()
        return [self.vdc.base] + inner

    def __repr__(self) -> str:
        return f"CylindN(base={self.bases()})"
