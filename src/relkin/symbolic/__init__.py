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
Symbolic Layer
==============

String-in/string-out algebra over SymPy and the kinematic solver built
on it.

Algebra
-------
>>> from relkin.symbolic import differentiate, integrate
>>>
>>> differentiate("sinh(tau)")
'cosh(tau)'
>>> integrate("sinh(tau)", 0)
'cosh(tau) - 1'

Kinematics
----------
>>> from relkin.symbolic import PrimaryInput, WorldlineState
>>>
>>> state = WorldlineState.at_rest()
>>> state = state.with_input(PrimaryInput.velocity(("5/3", "4/3", "0", "0")))
>>> state.triple.position
('5*tau/3', '4*tau/3', '0', '0')
"""

# Algebra adapter
from .algebra import (
    CONSTANTS,
    DEFAULT_VARIABLE,
    TAU,
    AlgebraError,
    EvaluationError,
    ExpressionParseError,
    SymbolicExpressionError,
    contains_variable,
    differentiate,
    evaluate_scalar,
    integrate,
    parse_expression,
    substitute,
    substitute_constants,
    validate_expression,
)

# Kinematic solver
from .kinematic_solver import (
    SolverWarning,
    WorldlineState,
    solve,
    solve_from_acceleration,
    solve_from_position,
    solve_from_velocity,
)
from ..types.kinematics import PrimaryInput

__all__ = [
    # Errors
    "SymbolicExpressionError",
    "ExpressionParseError",
    "AlgebraError",
    "EvaluationError",
    # Algebra
    "CONSTANTS",
    "TAU",
    "DEFAULT_VARIABLE",
    "substitute_constants",
    "parse_expression",
    "validate_expression",
    "contains_variable",
    "differentiate",
    "integrate",
    "substitute",
    "evaluate_scalar",
    # Kinematics
    "PrimaryInput",
    "SolverWarning",
    "WorldlineState",
    "solve",
    "solve_from_position",
    "solve_from_velocity",
    "solve_from_acceleration",
]
