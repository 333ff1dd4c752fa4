"""
Low-Discrepancy Building Blocks
===============================

This module implements the one-dimensional Van der Corput sequence and the
base-case angular generators built directly on top of it:

    - VdCorput: radix-inverse sequence in a fixed integer base
    - Circle: points on the unit circle S^1
    - Sphere: points on the unit sphere S^2
    - Sphere3Hopf: points on S^3 via the Hopf fibration

None of these need a lookup table; each maps its radix draws to the
manifold with a closed-form inverse of the marginal distribution.

References
----------
[1] van der Corput, J.G. (1935). Verteilungsfunktionen.
[2] Yershova, A., Jain, S., LaValle, S.M., Mitchell, J.C. (2010).
    Generating uniform incremental grids on SO(3) using the Hopf fibration.
"""

import math
import numbers
from typing import List, Sequence

TWO_PI = 2.0 * math.pi


def vdc(k: int, base: int = 2) -> float:
    """
    Radix inverse of ``k`` in the given base.

    Writing k = d_0 + d_1 * b + d_2 * b^2 + ..., the result is
        sum_i d_i * b^{-(i+1)}

    Parameters
    ----------
    k : int
        Non-negative index into the sequence.
    base : int, optional
        Radix (default: 2).

    Returns
    -------
    float
        Value in [0, 1).

    Examples
    --------
    >>> vdc(11, 2)
    0.8125
    >>> vdc(1, 3)
    0.3333333333333333
    """
    res = 0.0
    denom = 1.0
    while k != 0:
        denom *= base
        k, remainder = divmod(k, base)
        res += remainder / denom
    return res


def check_base(base: int) -> int:
    """Validate a radix, returning it as a plain int."""
    if isinstance(base, bool) or not isinstance(base, numbers.Integral):
        raise ValueError(f"base must be an integer, got {base!r}")
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    return int(base)


class VdCorput:
    """
    Van der Corput sequence generator.

    The generator keeps a counter that is advanced before each draw, so
    a freshly constructed generator returns vdc(1), vdc(2), ...

    Parameters
    ----------
    base : int, optional
        Radix of the sequence, at least 2 (default: 2).

    Attributes
    ----------
    base : int
        Radix.
    count : int
        Index of the most recent draw.

    Examples
    --------
    >>> gen = VdCorput(2)
    >>> [gen.pop() for _ in range(3)]
    [0.5, 0.25, 0.75]
    >>> gen.reseed(0)
    >>> gen.pop()
    0.5
    """

    def __init__(self, base: int = 2):
        self.base = check_base(base)
        self.count = 0

    def pop(self) -> float:
        """Return the next value of the sequence in [0, 1)."""
        self.count += 1
        return vdc(self.count, self.base)

    def reseed(self, seed: int) -> None:
        """
        Reset the counter to ``seed``.

        This is an absolute reset, not an offset: after ``reseed(s)`` the
        next draw is vdc(s + 1).
        """
        if seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")
        self.count = seed

    def __repr__(self) -> str:
        return f"VdCorput(base={self.base}, count={self.count})"


class Circle:
    """
    Low-discrepancy points on the unit circle.

    The angle theta = 2*pi*v is taken from one Van der Corput sequence.

    Parameters
    ----------
    base : int
        Radix of the underlying sequence.

    Examples
    --------
    >>> gen = Circle(2)
    >>> gen.pop()
    [-1.0, 1.2246467991473532e-16]
    """

    def __init__(self, base: int):
        self.vdc = VdCorput(base)

    def pop(self) -> List[float]:
        theta = TWO_PI * self.vdc.pop()  # map to [0, 2*pi)
        return [math.cos(theta), math.sin(theta)]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)

    def __repr__(self) -> str:
        return f"Circle(base={self.vdc.base})"


class Sphere:
    """
    Low-discrepancy points on the unit 2-sphere.

    The polar coordinate of a uniform point on S^2 is uniform in
    cos(phi) (Archimedes), so cos(phi) = 2*v - 1 inverts the marginal
    exactly; the remaining circle is sampled by a Circle generator.

    Parameters
    ----------
    base : Sequence[int]
        Two radices: the first for cos(phi), the second for the circle.

    Examples
    --------
    >>> gen = Sphere([2, 3])
    >>> gen.pop()
    [-0.4999999999999998, 0.8660254037844387, 0.0]
    """

    def __init__(self, base: Sequence[int]):
        if len(base) < 2:
            raise ValueError(f"Sphere needs 2 bases, got {len(base)}")
        for b in base:
            check_base(b)
        self.vdc = VdCorput(base[0])
        self.cirgen = Circle(base[1])

    def pop(self) -> List[float]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1)
        sinphi = math.sqrt(max(0.0, 1.0 - cosphi * cosphi))
        c, s = self.cirgen.pop()
        return [sinphi * c, sinphi * s, cosphi]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.cirgen.reseed(seed)

    def __repr__(self) -> str:
        return f"Sphere(base=[{self.vdc.base}, {self.cirgen.vdc.base}])"


class Sphere3Hopf:
    """
    Low-discrepancy points on S^3 using the Hopf fibration.

    Two angles phi and psi are uniform on [0, 2*pi); the fibre coordinate
    eta satisfies cos(eta)^2 = v, which is uniform for the Haar measure.

    Parameters
    ----------
    base : Sequence[int]
        Three radices for phi, psi and eta.
    """

    def __init__(self, base: Sequence[int]):
        if len(base) < 3:
            raise ValueError(f"Sphere3Hopf needs 3 bases, got {len(base)}")
        for b in base:
            check_base(b)
        self.vdc0 = VdCorput(base[0])
        self.vdc1 = VdCorput(base[1])
        self.vdc2 = VdCorput(base[2])

    def pop(self) -> List[float]:
        phi = TWO_PI * self.vdc0.pop()
        psy = TWO_PI * self.vdc1.pop()
        vd = self.vdc2.pop()
        cos_eta = math.sqrt(vd)
        sin_eta = math.sqrt(1.0 - vd)
        return [
            cos_eta * math.cos(psy),
            cos_eta * math.sin(psy),
            sin_eta * math.cos(phi + psy),
            sin_eta * math.sin(phi + psy),
        ]

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)
        self.vdc2.reseed(seed)

    def __repr__(self) -> str:
        bases = [self.vdc0.base, self.vdc1.base, self.vdc2.base]
        return f"Sphere3Hopf(base={bases})"
