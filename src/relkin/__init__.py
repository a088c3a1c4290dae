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
relkin - Special-Relativistic Kinematics
========================================

Symbolic worldlines in proper time, numeric evaluation, Lorentz and
Poincaré transforms into comoving frames, and causality validation.
Natural units throughout (c = 1), metric signature (-, +, +, +).

Usage
-----
>>> from relkin import solve_from_velocity, find_tau_for_lab_time
>>>
>>> triple = solve_from_velocity(("5/3", "4/3", "0", "0"), (0, 0, 0, 0))
>>> round(find_tau_for_lab_time(triple.position, 5.0), 3)
3.0

Package Organization
--------------------
- types: 4-vector aliases, kinematic records, validation results
- symbolic: expression algebra and the kinematic solver
- numerics: evaluator, proper-time locator, transforms, frames, causality
"""

from .numerics import (
    ConvergenceError,
    ConvergenceWarning,
    EvaluationWarning,
    FrameSelection,
    SuperluminalBoostError,
    apply_boost,
    build_boost,
    calculate_gamma,
    check_causality_violation,
    evaluate_vector_at_tau,
    find_tau_for_lab_time,
    magnitude_squared,
    sample_worldline,
    select_reference_frame,
    transform_worldline,
    validate_causality,
)
from .symbolic import (
    AlgebraError,
    ExpressionParseError,
    SolverWarning,
    SymbolicExpressionError,
    WorldlineState,
    differentiate,
    integrate,
    solve,
    solve_from_acceleration,
    solve_from_position,
    solve_from_velocity,
    validate_expression,
)
from .types import (
    CausalityResult,
    InitialConditions,
    InputKind,
    KinematicTriple,
    MCRFFrame,
    PrimaryInput,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "InputKind",
    "PrimaryInput",
    "KinematicTriple",
    "InitialConditions",
    "MCRFFrame",
    "CausalityResult",
    # Symbolic
    "SymbolicExpressionError",
    "ExpressionParseError",
    "AlgebraError",
    "validate_expression",
    "differentiate",
    "integrate",
    "SolverWarning",
    "WorldlineState",
    "solve",
    "solve_from_position",
    "solve_from_velocity",
    "solve_from_acceleration",
    # Numerics
    "EvaluationWarning",
    "ConvergenceWarning",
    "ConvergenceError",
    "SuperluminalBoostError",
    "evaluate_vector_at_tau",
    "sample_worldline",
    "find_tau_for_lab_time",
    "magnitude_squared",
    "calculate_gamma",
    "build_boost",
    "apply_boost",
    "transform_worldline",
    "FrameSelection",
    "select_reference_frame",
    "validate_causality",
    "check_causality_violation",
]
