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
Proper-Time Locator

Maps a lab coordinate time to the proper time at which a worldline
reaches it, by bisection on t(tau) = X^0(tau).

For admissible worldlines dt/dtau = γ >= 1, so t(tau) is strictly
increasing and bisection over a fixed bracket converges.

Fallback policy
---------------
- NaN at a midpoint: return 0 immediately.
- After the iteration budget, a residual above ``divergence_limit``
  (bracket too small, or a non-monotone causality-violating worldline)
  clamps the result to 0. This is a safety value, not a solution. It is
  reported through ``ConvergenceWarning``, or raised as
  ``ConvergenceError`` when ``strict=True``.
"""

import math
import warnings

from relkin.numerics.evaluator import evaluate_vector_at_tau
from relkin.types.core import SymbolicVector4

DEFAULT_BRACKET = (-1000.0, 1000.0)
DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-4
DEFAULT_DIVERGENCE_LIMIT = 100.0


class ConvergenceWarning(RuntimeWarning):
    """Issued when the locator clamps an unconverged result to tau = 0"""

    pass


class ConvergenceError(RuntimeError):
    """Raised by the strict locator when no proper time matches the lab time"""

    pass


def find_tau_for_lab_time(
    X: SymbolicVector4,
    target_lab_time: float,
    lower: float = DEFAULT_BRACKET[0],
    upper: float = DEFAULT_BRACKET[1],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    divergence_limit: float = DEFAULT_DIVERGENCE_LIMIT,
    strict: bool = False,
) -> float:
    """
    Find tau such that X^0(tau) = target_lab_time.

    Parameters
    ----------
    X : SymbolicVector4
        Position expressions; only the time component is used
    target_lab_time : float
        Lab coordinate time to locate
    lower, upper : float
        Search bracket in proper time
    max_iterations : int
        Bisection budget
    tolerance : float
        Early exit once |t(mid) - target| < tolerance
    divergence_limit : float
        Residual above which the final result is clamped to 0
    strict : bool
        Raise ``ConvergenceError`` instead of clamping

    Returns
    -------
    float
        Proper time, or 0.0 under the fallback policy

    Examples
    --------
    >>> round(find_tau_for_lab_time(("5*tau/3", "4*tau/3", "0", "0"), 5.0), 3)
    3.0
    """
    low, high = float(lower), float(upper)

    for _ in range(max_iterations):
        mid = (low + high) / 2
        t_mid = evaluate_vector_at_tau(X, mid)[0]
        if math.isnan(t_mid):
            return 0.0
        if abs(t_mid - target_lab_time) < tolerance:
            return mid
        if t_mid < target_lab_time:
            low = mid
        else:
            high = mid

    result = (low + high) / 2
    residual = abs(evaluate_vector_at_tau(X, result)[0] - target_lab_time)

    if residual > divergence_limit:
        message = (
            f"No proper time in [{lower}, {upper}] reaches lab time {target_lab_time} "
            f"for t(tau) = {X[0]!r} (residual {residual:.3g}); "
            f"the worldline may be non-monotone"
        )
        if strict:
            raise ConvergenceError(message)
        warnings.warn(f"{message}. Clamping to tau = 0.", ConvergenceWarning, stacklevel=2)
        return 0.0

    return result


__all__ = [
    "ConvergenceWarning",
    "ConvergenceError",
    "DEFAULT_BRACKET",
    "find_tau_for_lab_time",
]
