# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Core Types

Fundamental vector and matrix types shared by the symbolic and numeric
layers:
- Symbolic 4-vectors (expression strings over proper time tau)
- Numeric 4-vectors and 3-velocities
- Boost matrices
- Batched worldline coordinates

Mathematical Context
-------------------
All 4-vectors are ordered (t, x, y, z) and use the Minkowski metric with
signature (-, +, +, +) in natural units (c = 1):

    V·V = -(V^0)^2 + (V^1)^2 + (V^2)^2 + (V^3)^2

Usage
-----
>>> from relkin.types.core import SymbolicVector4, NumericVector4
>>>
>>> X: SymbolicVector4 = ("sinh(tau)", "cosh(tau)", "0", "0")
>>> U0: NumericVector4 = np.array([1.0, 0.0, 0.0, 0.0])

Design Philosophy
----------------
These are TYPE DEFINITIONS only - no implementation logic.
"""

from typing import Tuple

import numpy as np
from typing_extensions import TypedDict

# ============================================================================
# Symbolic Vectors
# ============================================================================

SymbolicVector4 = Tuple[str, str, str, str]
"""
Symbolic 4-vector.

Four algebraic expression strings in the single free variable ``tau``
plus reserved constant names. Component 0 is the time coordinate.
Tuples are immutable, so a new vector is always built, never mutated.

Examples
--------
>>> X: SymbolicVector4 = ("tau", "0", "0", "0")          # at rest
>>> U: SymbolicVector4 = ("cosh(tau)", "sinh(tau)", "0", "0")
"""

# ============================================================================
# Numeric Vectors
# ============================================================================

NumericVector4 = np.ndarray
"""
Numeric 4-vector.

Shape: (4,), dtype float64, same component order as SymbolicVector4.

Produced only by evaluation or transformation. Never holds NaN: the
evaluator substitutes the zero vector when any component fails.
"""

ThreeVelocity = Tuple[float, float, float]
"""
Coordinate 3-velocity v = dx/dt in units of c.

A physically admissible velocity satisfies |v| < 1.
"""

InitialVector4 = Tuple[float, float, float, float]
"""Plain-float 4-vector used for initial conditions."""

# ============================================================================
# Matrices
# ============================================================================

BoostMatrix = np.ndarray
"""
Pure Lorentz boost Λ (no rotation).

Shape: (4, 4). Symmetric, with Λ(v)·Λ(-v) = I.
"""

MetricTensor = np.ndarray
"""Minkowski metric η = diag(-1, 1, 1, 1), shape (4, 4)."""


# ============================================================================
# Batched Coordinates
# ============================================================================


class WorldlineCoordinates(TypedDict):
    """
    Batch of events along a worldline.

    Each entry is a 1-D array; all four share the same length.

    Attributes
    ----------
    t : np.ndarray
        Time coordinates
    x : np.ndarray
        x coordinates
    y : np.ndarray
        y coordinates
    z : np.ndarray
        z coordinates

    Examples
    --------
    >>> coords: WorldlineCoordinates = {
    ...     "t": np.array([0.0, 1.0]),
    ...     "x": np.array([0.0, 0.5]),
    ...     "y": np.zeros(2),
    ...     "z": np.zeros(2),
    ... }
    """

    t: np.ndarray
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray


__all__ = [
    "SymbolicVector4",
    "NumericVector4",
    "ThreeVelocity",
    "InitialVector4",
    "BoostMatrix",
    "MetricTensor",
    "WorldlineCoordinates",
]
