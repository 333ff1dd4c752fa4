"""
Low-Discrepancy Point Sequences on n-Spheres and n-Cylinders
============================================================

This package generates deterministic quasi-random points on S^n and on
cylindrical product manifolds, for quasi-Monte-Carlo sampling and
dispersion experiments.

Main classes:
- VdCorput: Van der Corput sequence in a given base
- Circle, Sphere, Sphere3Hopf: closed-form base-case generators
- Sphere3, SphereN: recursive generators on S^n via inverse-transform tables
- CylindN: recursive generators by the cylindrical coordinate method
- TableCache: memoised Tp(n) integral tables shared across generators

License: MIT
"""

from .lds import VdCorput, Circle, Sphere, Sphere3Hopf, vdc
from .tables import TableCache, DEFAULT_CACHE, get_tp
from .sphere_n import Sphere3, SphereN
from .cylind_n import CylindN
from .utils import (
    generate_primes,
    first_primes,
    generate_points,
    sample_spherical,
    compute_separation_radius,
    compute_min_angle,
)

__version__ = "1.0.0"
__all__ = [
    "vdc",
    "VdCorput",
    "Circle",
    "Sphere",
    "Sphere3Hopf",
    "TableCache",
    "DEFAULT_CACHE",
    "get_tp",
    "Sphere3",
    "SphereN",
    "CylindN",
    "generate_primes",
    "first_primes",
    "generate_points",
    "sample_spherical",
    "compute_separation_radius",
    "compute_min_angle",
]
