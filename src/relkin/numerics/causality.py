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
Causality Validator

Checks that a 4-velocity describes a physically admissible particle:

0. U finite
1. U^0 > 0                    (moving forward in time)
2. U·U = -1                   (normalized, within 1e-4)
3. |v|² = |U_spatial|²/U0² < 1 (sub-luminal)

Invalidity is returned as a ``CausalityResult``, never raised.

``check_causality_violation`` sweeps a symbolic 4-velocity over a fixed
proper-time grid. It is a heuristic: an excursion above light speed
between two samples is not detected.
"""

import math

import numpy as np

from relkin.numerics.evaluator import evaluate_vector_at_tau
from relkin.numerics.lorentz import extract_three_velocity, magnitude_squared, speed_squared
from relkin.types.core import NumericVector4, SymbolicVector4
from relkin.types.validation import CausalityResult

# Symbolic round-off is expected at this level; tighter checks false-positive
NORMALIZATION_TOLERANCE = 1e-4

# Sweep defaults
SWEEP_TAU_MIN = -50.0
SWEEP_TAU_MAX = 50.0
SWEEP_STEP = 1.0
ZERO_COMPONENT = 1e-6
# Padded above 1 to admit floating round-off at the light-speed boundary
SWEEP_SPEED_SQUARED_LIMIT = 1.05


def validate_causality(U: NumericVector4) -> CausalityResult:
    """
    Validate one numeric 4-velocity.

    Parameters
    ----------
    U : NumericVector4
        4-velocity (U^0, U^1, U^2, U^3)

    Returns
    -------
    CausalityResult
        Validity, first failure reason, and the measured U·U and |v|²

    Examples
    --------
    >>> validate_causality(np.array([1.25, 0.75, 0.0, 0.0])).is_valid
    True
    >>> result = validate_causality(np.array([0.5, 1.5, 0.0, 0.0]))
    >>> result.is_valid, result.u_squared
    (False, 2.0)
    """
    U = np.asarray(U, dtype=float)
    u_squared = magnitude_squared(U)

    if not np.all(np.isfinite(U)):
        return CausalityResult(
            is_valid=False,
            u_squared=u_squared,
            v_squared=math.nan,
            reason=f"4-velocity must be finite, but got {U.tolist()}",
        )

    if U[0] < 0:
        return CausalityResult(
            is_valid=False,
            u_squared=u_squared,
            v_squared=0.0,
            reason="U^0 must be positive (particle moving forward in time)",
        )

    # Written so that a NaN invariant fails the check
    if not abs(u_squared - (-1.0)) <= NORMALIZATION_TOLERANCE:
        return CausalityResult(
            is_valid=False,
            u_squared=u_squared,
            v_squared=0.0,
            reason=f"4-velocity invariant U^mu U_mu must equal -1, but got {u_squared:.4f}",
        )

    v_squared = speed_squared(extract_three_velocity(U))
    if not v_squared < 1:
        return CausalityResult(
            is_valid=False,
            u_squared=u_squared,
            v_squared=v_squared,
            reason=f"Speed |v| must be strictly less than c (1), but got |v|^2 = {v_squared:.4f}",
        )

    return CausalityResult(is_valid=True, u_squared=u_squared, v_squared=v_squared)


def check_causality_violation(
    velocity_expr: SymbolicVector4,
    tau_min: float = SWEEP_TAU_MIN,
    tau_max: float = SWEEP_TAU_MAX,
    step: float = SWEEP_STEP,
) -> bool:
    """
    Sweep a symbolic 4-velocity for faster-than-light samples.

    A sample violates causality if U^0 is ~0 while a spatial component
    is not (infinite coordinate speed), or if |v|² exceeds 1.05 or is
    NaN.

    Args:
        velocity_expr: 4-velocity expressions in tau
        tau_min: First sample
        tau_max: Last sample (inclusive)
        step: Sample spacing

    Returns:
        True if any sample violates causality
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    n_samples = int(math.floor((tau_max - tau_min) / step + 1e-9)) + 1
    for i in range(n_samples):
        U = evaluate_vector_at_tau(velocity_expr, tau_min + i * step)

        if abs(U[0]) < ZERO_COMPONENT:
            if np.any(np.abs(U[1:]) > ZERO_COMPONENT):
                return True
            continue

        v_squared = float(U[1] ** 2 + U[2] ** 2 + U[3] ** 2) / float(U[0] ** 2)
        if v_squared > SWEEP_SPEED_SQUARED_LIMIT or math.isnan(v_squared):
            return True

    return False


__all__ = [
    "NORMALIZATION_TOLERANCE",
    "validate_causality",
    "check_causality_violation",
]
