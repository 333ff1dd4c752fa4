"""
Lookup Tables for Inverse-Transform Sampling on S^n
===================================================

The polar angle theta of a uniform point on the n-sphere has density
proportional to sin(theta)^{n-1} on [0, pi]. Sampling it by inverse
transform needs the antiderivative

    Tp(n)(theta) = integral of sin(t)^n dt,

which is tabulated on a uniform grid over [0, pi] using the reduction
formula

    Tp(n) = ((n - 1) * Tp(n - 2) - cos(theta) * sin(theta)^{n-1}) / n

with Tp(0) = theta and Tp(1) = -cos(theta). Even and odd n form two
independent chains.

Tables are built lazily per n and kept for the lifetime of the owning
TableCache. A single process-wide cache (DEFAULT_CACHE) is shared by all
generators unless another one is injected.
"""

import logging
import threading
from typing import Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

N_POINTS = 300


class TableCache:
    """
    Memoised Tp(n) tables on a fixed angle grid.

    Parameters
    ----------
    resolution : int, optional
        Number of grid points on [0, pi] (default: 300).

    Attributes
    ----------
    x : np.ndarray
        Uniform angle grid of shape (resolution,).
    neg_cosine : np.ndarray
        -cos(x).
    sine : np.ndarray
        sin(x).

    Examples
    --------
    >>> cache = TableCache()
    >>> tp = cache.get_tp(2)
    >>> float(tp[-1])  # integral of sin^2 over [0, pi]
    1.5707963267948966
    """

    def __init__(self, resolution: int = N_POINTS):
        if resolution < 2:
            raise ValueError(f"resolution must be >= 2, got {resolution}")
        self.resolution = resolution
        self.x = _frozen(np.linspace(0.0, np.pi, resolution))
        self.neg_cosine = _frozen(-np.cos(self.x))
        self.sine = _frozen(np.sin(self.x))

        self._lock = threading.Lock()
        self._even: Dict[int, np.ndarray] = {}
        self._odd: Dict[int, np.ndarray] = {}

    def get_tp(self, n: int) -> np.ndarray:
        """
        Return the table Tp(n), building it (and Tp(n-2), ...) on a miss.

        Parameters
        ----------
        n : int
            Non-negative table index.

        Returns
        -------
        np.ndarray
            Read-only array of shape (resolution,), non-decreasing.
        """
        if n < 0:
            raise ValueError(f"table index must be non-negative, got {n}")
        with self._lock:
            return self._get_tp_locked(int(n))

    def _get_tp_locked(self, n: int) -> np.ndarray:
        store = self._even if n % 2 == 0 else self._odd
        tp = store.get(n)
        if tp is not None:
            return tp

        if n == 0:
            tp = self.x
        elif n == 1:
            tp = self.neg_cosine
        else:
            tp_minus2 = self._get_tp_locked(n - 2)
            tp = _frozen(
                ((n - 1) * tp_minus2 + self.neg_cosine * self.sine ** (n - 1)) / n
            )
        logger.debug("Built Tp(%d) table on %d grid points", n, self.resolution)
        store[n] = tp
        return tp

    def invert(self, n: int, ti: float) -> float:
        """
        Angle xi in [0, pi] with Tp(n)(xi) == ti, by linear interpolation.

        Values of ``ti`` outside [Tp(n)[0], Tp(n)[-1]] clamp to the nearest
        end of the grid (0 or pi) instead of extrapolating.
        """
        return float(np.interp(ti, self.get_tp(n), self.x))

    def cached_keys(self) -> List[int]:
        """Return the table indices built so far, in ascending order."""
        with self._lock:
            return sorted(list(self._even) + list(self._odd))

    def clear(self) -> None:
        """Drop every built table; they are rebuilt on the next request."""
        with self._lock:
            self._even.clear()
            self._odd.clear()

    def __repr__(self) -> str:
        return (f"TableCache(resolution={self.resolution}, "
                f"cached={self.cached_keys()})")


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


DEFAULT_CACHE = TableCache()


def get_tp(n: int, cache: Optional[TableCache] = None) -> np.ndarray:
    """Shortcut for ``(cache or DEFAULT_CACHE).get_tp(n)``."""
    if cache is None:
        cache = DEFAULT_CACHE
    return cache.get_tp(n)
