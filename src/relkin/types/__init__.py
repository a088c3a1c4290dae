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
Types Module

Central import point for the type definitions of relkin.

Module Organization
------------------
- core: symbolic/numeric 4-vectors, boost matrices, worldline batches
- kinematics: primary input variant, kinematic triple, initial
  conditions, comoving frames
- validation: causality check results
"""

from .core import (
    BoostMatrix,
    InitialVector4,
    MetricTensor,
    NumericVector4,
    SymbolicVector4,
    ThreeVelocity,
    WorldlineCoordinates,
)
from .kinematics import (
    InitialConditions,
    InputKind,
    KinematicTriple,
    MCRFFrame,
    PrimaryInput,
)
from .validation import CausalityResult

__all__ = [
    # Core
    "SymbolicVector4",
    "NumericVector4",
    "ThreeVelocity",
    "InitialVector4",
    "BoostMatrix",
    "MetricTensor",
    "WorldlineCoordinates",
    # Kinematics
    "InputKind",
    "PrimaryInput",
    "KinematicTriple",
    "InitialConditions",
    "MCRFFrame",
    # Validation
    "CausalityResult",
]
