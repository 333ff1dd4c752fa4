"""
Recursive Low-Discrepancy Generators on S^n
===========================================

A point on the n-sphere is written in hyperspherical coordinates as

    (sin(xi) * y, cos(xi)),   y on S^{n-1},

where the polar angle xi has density proportional to sin(xi)^{n-1}.
SphereN draws xi by inverse-transform sampling of one Van der Corput
value through the Tp(n-1) table, and takes y from a nested generator of
one dimension lower. The recursion bottoms out at S^2, which is sampled
in closed form by Sphere.

Sphere3 is the stand-alone S^3 generator; it produces the same points as
SphereN with three bases.
"""

import math
from typing import List, Optional, Sequence, Union

from .lds import Sphere, VdCorput, check_base
from .tables import DEFAULT_CACHE, TableCache
from .utils import take_bases

HALF_PI = math.pi / 2.0

SphereVariant = Union[Sphere, "SphereN"]


class Sphere3:
    """
    Low-discrepancy points on S^3.

    Parameters
    ----------
    base : Sequence[int]
        Three radices: one for the polar angle, two for the inner S^2.
    cache : TableCache, optional
        Table cache to read Tp(2) from (default: the shared cache).

    Examples
    --------
    >>> gen = Sphere3([2, 3, 5])
    >>> point = gen.pop()
    >>> len(point)
    4
    """

    def __init__(self, base: Sequence[int], cache: Optional[TableCache] = None):
        if len(base) < 3:
            raise ValueError(f"Sphere3 needs 3 bases, got {len(base)}")
        for b in base:
            check_base(b)
        self.cache = DEFAULT_CACHE if cache is None else cache
        self.vdc = VdCorput(base[0])
        self.sphere2 = Sphere(base[1:3])

    def pop(self) -> List[float]:
        # Tp(2) runs from 0 to pi/2, so no affine remap is needed
        ti = HALF_PI * self.vdc.pop()
        xi = self.cache.invert(2, ti)
        sinxi = math.sin(xi)
        return [sinxi * s for s in self.sphere2.pop()] + [math.cos(xi)]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.sphere2.reseed(seed)

    def bases(self) -> List[int]:
        """Return the radices of the polar angle and the inner S^2."""
        return [self.vdc.base, self.sphere2.vdc.base, self.sphere2.cirgen.vdc.base]

    def __repr__(self) -> str:
        return f"Sphere3(base={self.bases()})"


class SphereN:
    """
    Low-discrepancy points on S^n for n >= 3, built recursively.

    Each level owns one Van der Corput generator and one nested generator
    of dimension n - 1; the nested generator at n == 3 is the closed-form
    S^2 generator, so the recursion depth is exactly n - 2.

    Parameters
    ----------
    base : Sequence[int]
        One radix per level, outermost first. The sphere dimension is
        len(base) unless ``dim`` is given.
    dim : int, optional
        Sphere dimension n. Requires len(base) >= n; extra bases are
        ignored.
    cache : TableCache, optional
        Table cache shared by every level (default: the shared cache).

    Attributes
    ----------
    n : int
        Sphere dimension; pop() returns n + 1 coordinates.
    vdc : VdCorput
        Generator for the polar angle of this level.
    s_gen : Sphere or SphereN
        Nested generator for S^{n-1}.

    Examples
    --------
    >>> gen = SphereN([2, 3, 5, 7, 11])
    >>> gen.n
    5
    >>> point = gen.pop()
    >>> round(point[1], 6)
    0.320904
    """

    def __init__(
        self,
        base: Sequence[int],
        dim: Optional[int] = None,
        cache: Optional[TableCache] = None
    ):
        base = take_bases(base, dim, 3, "SphereN")
        self.n = len(base)
        self.cache = DEFAULT_CACHE if cache is None else cache
        self.vdc = VdCorput(base[0])

        self.s_gen: SphereVariant
        if self.n == 3:
            self.s_gen = Sphere(base[1:3])
        else:
            self.s_gen = SphereN(base[1:], cache=self.cache)

        # Polar angle density is sin^{n-1}; build the table eagerly
        tp = self.cache.get_tp(self.n - 1)
        self.start = float(tp[0])
        self.range = float(tp[-1] - tp[0])

    def pop(self) -> List[float]:
        vd = self.vdc.pop()
        ti = self.start + self.range * vd  # map to [tp[0], tp[-1]]
        xi = self.cache.invert(self.n - 1, ti)
        sinphi = math.sin(xi)
        return [sinphi * s for s in self.s_gen.pop()] + [math.cos(xi)]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.s_gen.reseed(seed)

    def bases(self) -> List[int]:
        """Return the radices of every level, outermost first."""
        if isinstance(self.s_gen, Sphere):
            inner = [self.s_gen.vdc.base, self.s_gen.cirgen.vdc.base]
        else:
            inner = self.s_gen.bases()
        return [self.vdc.base] + inner

    def __repr__(self) -> str:
        return f"SphereN(base={self.bases()})"
