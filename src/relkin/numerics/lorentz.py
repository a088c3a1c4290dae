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
Lorentz/Poincaré Transform Engine

Minkowski-space helpers and pure boosts in natural units (c = 1).

Mathematical Background
----------------------
Metric η = diag(-1, 1, 1, 1). For a 4-velocity U:

    U^0 = γ,  U^i = γ v^i,  v^i = U^i / U^0

A boost into the frame moving with 3-velocity v is

    Λ^0_0 = γ
    Λ^0_i = Λ^i_0 = -γ v^i
    Λ^i_j = δ_ij + (γ - 1) v^i v^j / |v|²

Transforming a lab event E into a comoving frame (boost Λ, origin O,
time offset τ) gives E' = Λ (E - O) + (τ, 0, 0, 0).
"""

import math
from typing import Sequence

import numpy as np

from relkin.types.core import (
    BoostMatrix,
    MetricTensor,
    NumericVector4,
    ThreeVelocity,
    WorldlineCoordinates,
)
from relkin.types.kinematics import MCRFFrame

# Below this |v|² the boost is the identity (projector term is 0/0)
IDENTITY_SPEED_SQUARED = 1e-10

# Below this |U^0| the 3-velocity is reported as zero
MIN_TIME_COMPONENT = 1e-10


class SuperluminalBoostError(ValueError):
    """Raised when a boost is requested for |v| >= c"""

    pass


ETA: MetricTensor = np.diag([-1.0, 1.0, 1.0, 1.0])
ETA.setflags(write=False)


# ============================================================================
# Minkowski Products
# ============================================================================


def minkowski_inner(V: NumericVector4, W: NumericVector4) -> float:
    """
    η_μν V^μ W^ν = -V0 W0 + V1 W1 + V2 W2 + V3 W3

    Summed term by term; ``inf * 0`` off the diagonal of ``ETA`` would be NaN.
    """
    V = np.asarray(V, dtype=float)
    W = np.asarray(W, dtype=float)
    return float(-V[0] * W[0] + V[1:] @ W[1:])


def magnitude_squared(V: NumericVector4) -> float:
    """
    Invariant V·V = -(V^0)² + (V^1)² + (V^2)² + (V^3)².

    Negative for timelike, zero for null, positive for spacelike vectors.
    """
    return minkowski_inner(V, V)


def interval_squared(event1: NumericVector4, event2: NumericVector4) -> float:
    """Invariant interval Δs² between two events."""
    delta = np.asarray(event2, dtype=float) - np.asarray(event1, dtype=float)
    return magnitude_squared(delta)


# ============================================================================
# Velocities
# ============================================================================


def extract_three_velocity(U: NumericVector4) -> ThreeVelocity:
    """
    Coordinate 3-velocity v^i = U^i / U^0.

    Returns (0, 0, 0) when |U^0| is below ``MIN_TIME_COMPONENT``.
    """
    if abs(U[0]) < MIN_TIME_COMPONENT:
        return (0.0, 0.0, 0.0)
    return (float(U[1] / U[0]), float(U[2] / U[0]), float(U[3] / U[0]))


def speed_squared(v: Sequence[float]) -> float:
    """|v|²"""
    return float(v[0] ** 2 + v[1] ** 2 + v[2] ** 2)


def calculate_gamma(v: Sequence[float]) -> float:
    """
    Lorentz factor γ = 1 / sqrt(1 - |v|²).

    Returns ``math.inf`` for |v| >= 1 instead of a large finite number
    or NaN.
    """
    v2 = speed_squared(v)
    if v2 >= 1:
        return math.inf
    return 1.0 / math.sqrt(1.0 - v2)


def calculate_rapidity(v: Sequence[float]) -> float:
    """Rapidity φ = artanh(|v|)."""
    return math.atanh(math.sqrt(speed_squared(v)))


# ============================================================================
# Boosts
# ============================================================================


def build_boost(v: Sequence[float]) -> BoostMatrix:
    """
    Boost matrix into the frame moving with 3-velocity ``v``.

    Parameters
    ----------
    v : Sequence[float]
        3-velocity (vx, vy, vz) with |v| < 1

    Returns
    -------
    BoostMatrix
        (4, 4) array; the identity for |v|² < 1e-10

    Raises
    ------
    SuperluminalBoostError
        If |v| >= 1 (γ is infinite)

    Examples
    --------
    >>> L = build_boost([0.6, 0.0, 0.0])
    >>> L[0, 0]
    1.25
    >>> np.allclose(build_boost([0.3, 0.4, 0.5]) @ build_boost([-0.3, -0.4, -0.5]), np.eye(4))
    True
    """
    v = np.asarray(v, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"3-velocity must have shape (3,), got {v.shape}")

    v2 = float(v @ v)
    if v2 < IDENTITY_SPEED_SQUARED:
        return np.eye(4)

    gamma = calculate_gamma(v)
    if math.isinf(gamma):
        raise SuperluminalBoostError(
            f"Cannot boost to |v|^2 = {v2:.6g} >= 1: the Lorentz factor is infinite"
        )

    boost = np.empty((4, 4))
    boost[0, 0] = gamma
    boost[0, 1:] = -gamma * v
    boost[1:, 0] = -gamma * v
    boost[1:, 1:] = np.eye(3) + (gamma - 1.0) * np.outer(v, v) / v2
    return boost


def apply_boost(boost: BoostMatrix, V: NumericVector4) -> NumericVector4:
    """Λ V for a single 4-vector."""
    return np.asarray(boost, dtype=float) @ np.asarray(V, dtype=float)


def transform_worldline(
    coords: WorldlineCoordinates,
    boost: BoostMatrix,
    origin: NumericVector4 = (0.0, 0.0, 0.0, 0.0),
    time_offset: float = 0.0,
) -> WorldlineCoordinates:
    """
    Poincaré-transform a batch of lab events.

    Each event E becomes Λ (E - origin); ``time_offset`` is then added to
    the time component only. The spatial origin of the new frame is zero
    by construction.

    Args:
        coords: Lab coordinates {t, x, y, z}, equal-length 1-D arrays
        boost: 4x4 boost matrix
        origin: Lab event mapped to the frame origin
        time_offset: Added to every transformed time coordinate

    Returns:
        New WorldlineCoordinates in the target frame

    Example:
        >>> coords = {"t": np.array([0.0, 1.0]), "x": np.zeros(2),
        ...           "y": np.zeros(2), "z": np.zeros(2)}
        >>> out = transform_worldline(coords, build_boost([0.6, 0, 0]))
        >>> out["x"]
        array([ 0.  , -0.75])
    """
    events = np.vstack(
        [
            np.asarray(coords["t"], dtype=float),
            np.asarray(coords["x"], dtype=float),
            np.asarray(coords["y"], dtype=float),
            np.asarray(coords["z"], dtype=float),
        ]
    )
    shifted = events - np.asarray(origin, dtype=float).reshape(4, 1)
    transformed = np.asarray(boost, dtype=float) @ shifted

    return {
        "t": transformed[0] + time_offset,
        "x": transformed[1],
        "y": transformed[2],
        "z": transformed[3],
    }


def transform_event(event: NumericVector4, frame: MCRFFrame) -> NumericVector4:
    """Single-event form of ``transform_worldline`` for an ``MCRFFrame``."""
    shifted = np.asarray(event, dtype=float) - np.asarray(frame.origin, dtype=float)
    transformed = apply_boost(frame.boost, shifted)
    transformed[0] += frame.time_offset
    return transformed


__all__ = [
    "SuperluminalBoostError",
    "ETA",
    "IDENTITY_SPEED_SQUARED",
    "minkowski_inner",
    "magnitude_squared",
    "interval_squared",
    "extract_three_velocity",
    "speed_squared",
    "calculate_gamma",
    "calculate_rapidity",
    "build_boost",
    "apply_boost",
    "transform_worldline",
    "transform_event",
]
