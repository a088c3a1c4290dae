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
Numerics
========

Floating-point side of the package: evaluation of symbolic 4-vectors,
proper-time lookup, Lorentz/Poincaré transforms, comoving frame
selection and causality checks.

>>> from relkin.numerics import evaluate_vector_at_tau, build_boost
>>>
>>> U = evaluate_vector_at_tau(("5/4", "3/4", "0", "0"), 0.0)
>>> L = build_boost(U[1:] / U[0])
>>> np.allclose(L @ U, [1, 0, 0, 0])
True
"""

from .causality import check_causality_violation, validate_causality
from .evaluator import (
    EvaluationWarning,
    evaluate_vector_at_tau,
    minkowski_inner_exact,
    minkowski_square_exact,
    sample_worldline,
)
from .lorentz import (
    ETA,
    SuperluminalBoostError,
    apply_boost,
    build_boost,
    calculate_gamma,
    calculate_rapidity,
    extract_three_velocity,
    interval_squared,
    magnitude_squared,
    minkowski_inner,
    speed_squared,
    transform_event,
    transform_worldline,
)
from .proper_time import ConvergenceError, ConvergenceWarning, find_tau_for_lab_time
from .reference_frame import FrameSelection, is_inertial, lab_frame, select_reference_frame

__all__ = [
    # Evaluation
    "EvaluationWarning",
    "evaluate_vector_at_tau",
    "sample_worldline",
    "minkowski_square_exact",
    "minkowski_inner_exact",
    # Proper time
    "ConvergenceWarning",
    "ConvergenceError",
    "find_tau_for_lab_time",
    # Lorentz
    "ETA",
    "SuperluminalBoostError",
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
    # Frames
    "FrameSelection",
    "lab_frame",
    "is_inertial",
    "select_reference_frame",
    # Causality
    "validate_causality",
    "check_causality_violation",
]
