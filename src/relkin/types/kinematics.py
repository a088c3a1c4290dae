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
Kinematic Types

Defines the symbolic description of a particle's motion:
- InputKind / PrimaryInput: which quantity the user authored
- KinematicTriple: consistent (X, U, A) as functions of proper time
- InitialConditions: integration constants for derived quantities
- MCRFFrame: affine map from lab coordinates to a comoving frame

The primary input is a tagged variant: exactly one kind is primary by
construction, so "two primaries set at once" cannot be represented.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from relkin.types.core import BoostMatrix, InitialVector4, NumericVector4, SymbolicVector4


class InputKind(Enum):
    """Which kinematic quantity is user-authored."""

    POSITION = "position"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"


@dataclass(frozen=True)
class PrimaryInput:
    """
    User-authored kinematic quantity.

    Attributes
    ----------
    kind : InputKind
        Which quantity ``vector`` describes
    vector : SymbolicVector4
        Expressions in proper time tau

    Examples
    --------
    >>> primary = PrimaryInput(InputKind.VELOCITY, [5, "4/3", 0, 0])
    >>> primary.vector
    ('5', '4/3', '0', '0')
    """

    kind: InputKind
    vector: SymbolicVector4

    def __post_init__(self):
        if len(self.vector) != 4:
            raise ValueError(f"4-vector must have 4 components, got {len(self.vector)}")
        object.__setattr__(self, "vector", tuple(str(c) for c in self.vector))

    @classmethod
    def position(cls, vector: SymbolicVector4) -> "PrimaryInput":
        return cls(InputKind.POSITION, vector)

    @classmethod
    def velocity(cls, vector: SymbolicVector4) -> "PrimaryInput":
        return cls(InputKind.VELOCITY, vector)

    @classmethod
    def acceleration(cls, vector: SymbolicVector4) -> "PrimaryInput":
        return cls(InputKind.ACCELERATION, vector)


@dataclass(frozen=True)
class KinematicTriple:
    """
    Consistent kinematic description of one worldline.

    Satisfies velocity = d(position)/dtau and
    acceleration = d(velocity)/dtau wherever defined.

    Attributes
    ----------
    position : SymbolicVector4
        X(tau)
    velocity : SymbolicVector4
        U(tau)
    acceleration : SymbolicVector4
        A(tau)
    """

    position: SymbolicVector4
    velocity: SymbolicVector4
    acceleration: SymbolicVector4


@dataclass(frozen=True)
class InitialConditions:
    """
    Integration constants for derived quantities.

    ``position`` (X0) is used when velocity or acceleration is primary,
    ``velocity`` (U0) only when acceleration is primary. Position-primary
    worldlines carry their initial conditions inside the expression.

    Defaults describe a particle at rest at the origin.
    """

    position: InitialVector4 = (0.0, 0.0, 0.0, 0.0)
    velocity: InitialVector4 = (1.0, 0.0, 0.0, 0.0)

    def __post_init__(self):
        for name in ("position", "velocity"):
            value = tuple(float(c) for c in getattr(self, name))
            if len(value) != 4:
                raise ValueError(f"{name} must have 4 components, got {len(value)}")
            object.__setattr__(self, name, value)


@dataclass(frozen=True, eq=False)
class MCRFFrame:
    """
    Momentarily comoving reference frame.

    Lab event E maps to ``boost @ (E - origin)`` with ``time_offset``
    added to the time component. For an accelerating reference object a
    new frame is built for every viewed lab time.

    Attributes
    ----------
    boost : BoostMatrix
        4x4 pure boost
    origin : NumericVector4
        Lab event placed at the spatial origin of the frame
    time_offset : float
        Added back to the transformed time component
    """

    boost: BoostMatrix = field(default_factory=lambda: np.eye(4))
    origin: NumericVector4 = field(default_factory=lambda: np.zeros(4))
    time_offset: float = 0.0


__all__ = [
    "InputKind",
    "PrimaryInput",
    "KinematicTriple",
    "InitialConditions",
    "MCRFFrame",
]
