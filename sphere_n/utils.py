"""
Utility functions for low-discrepancy point sets on spheres.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .lds import check_base

logger = logging.getLogger(__name__)


def generate_primes(n_max: int, n_min: int = 2) -> List[int]:
    """
    Generate all prime numbers in the range [n_min, n_max] using Sieve of Eratosthenes.

    Parameters
    ----------
    n_max : int
        Upper bound for prime search.
    n_min : int, optional
        Lower bound for prime search (default: 2).

    Returns
    -------
    List[int]
        List of prime numbers in [n_min, n_max].

    Examples
    --------
    >>> generate_primes(20)
    [2, 3, 5, 7, 11, 13, 17, 19]
    >>> generate_primes(20, 10)
    [11, 13, 17, 19]
    """
    if n_max < 2:
        return []

    sieve = [True] * (n_max + 1)
    sieve[0] = sieve[1] = False

    for i in range(2, int(n_max**0.5) + 1):
        if sieve[i]:
            for j in range(i*i, n_max + 1, i):
                sieve[j] = False

    return [i for i in range(max(2, n_min), n_max + 1) if sieve[i]]


def first_primes(count: int) -> List[int]:
    """
    Return the first ``count`` primes, the usual choice of bases.

    Pairwise coprime bases keep the Van der Corput sequences of different
    levels from being correlated.

    Examples
    --------
    >>> first_primes(5)
    [2, 3, 5, 7, 11]
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    n_max = 16
    primes = generate_primes(n_max)
    while len(primes) < count:
        n_max *= 2
        primes = generate_primes(n_max)
    return primes[:count]


def take_bases(
    base: Sequence[int],
    dim: Optional[int],
    min_dim: int,
    name: str
) -> List[int]:
    """
    Resolve the bases used by a recursive generator.

    Parameters
    ----------
    base : Sequence[int]
        Candidate radices, outermost level first.
    dim : int or None
        Requested dimension; None means len(base).
    min_dim : int
        Smallest dimension the generator supports.
    name : str
        Generator name used in error messages.

    Returns
    -------
    List[int]
        The first ``dim`` bases.

    Raises
    ------
    ValueError
        If the dimension is below ``min_dim``, too few bases are given,
        or any given base (used or not) is not an integer >= 2.
    """
    base = [check_base(b) for b in base]
    if dim is None:
        dim = len(base)
    if dim < min_dim:
        raise ValueError(f"{name} dimension must be >= {min_dim}, got {dim}")
    if len(base) < dim:
        raise ValueError(
            f"{name} of dimension {dim} needs {dim} bases, got {len(base)}"
        )
    return base[:dim]


def generate_points(gen, num_points: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Draw a batch of points from a generator.

    Parameters
    ----------
    gen : object
        Any generator with ``pop()`` and ``reseed(seed)``.
    num_points : int
        Number of points to draw.
    seed : int, optional
        If given, the generator is reseeded first.

    Returns
    -------
    np.ndarray
        Point set of shape (num_points, d), in draw order.
    """
    if seed is not None:
        gen.reseed(seed)
    points = np.array([gen.pop() for _ in range(num_points)], dtype=np.float64)
    logger.debug("Generated %d points from %r", num_points, gen)
    return points


def sample_spherical(
    num_points: int,
    ndim: int = 3,
    seed: Optional[int] = None
) -> np.ndarray:
    """
    Pseudo-random uniform points on the unit sphere in R^ndim.

    Normalised standard Gaussian vectors; used as the Monte-Carlo baseline
    in comparison experiments.

    Parameters
    ----------
    num_points : int
        Number of points.
    ndim : int, optional
        Ambient dimension (default: 3).
    seed : int, optional
        Seed for ``numpy.random.default_rng``.

    Returns
    -------
    np.ndarray
        Point set of shape (num_points, ndim).
    """
    rng = np.random.default_rng(seed)
    vec = rng.standard_normal((num_points, ndim))
    vec /= np.linalg.norm(vec, axis=1, keepdims=True)
    return vec


def compute_separation_radius(points: np.ndarray) -> float:
    """
    Compute the separation radius (half of the minimum pairwise distance).

    The separation radius is defined as:
        q(P) = (1/2) * min_{i != j} ||x_i - x_j||

    Parameters
    ----------
    points : np.ndarray
        Point set of shape (n, d).

    Returns
    -------
    float
        Separation radius of the point set.

    Notes
    -----
    Time complexity: O(n^2 * d), memory O(n^2).
    """
    n = points.shape[0]
    if n < 2:
        return np.inf

    diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    dist_sq = np.sum(diff**2, axis=2)
    np.fill_diagonal(dist_sq, np.inf)

    return 0.5 * float(np.sqrt(np.min(dist_sq)))


def compute_min_angle(points: np.ndarray) -> float:
    """
    Minimum geodesic angle between two points of a set on the unit sphere.

    Parameters
    ----------
    points : np.ndarray
        Unit vectors of shape (n, d).

    Returns
    -------
    float
        Smallest pairwise angle in radians.
    """
    n = points.shape[0]
    if n < 2:
        return np.inf

    gram = np.clip(points @ points.T, -1.0, 1.0)
    np.fill_diagonal(gram, -1.0)
    return float(np.arccos(np.max(gram)))
