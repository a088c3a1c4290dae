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
Numeric Evaluator

Turns symbolic 4-vectors into numbers at a given proper time.

Responsibilities:
- Evaluation of a SymbolicVector4 at one tau, degrading to the zero
  vector when any component fails or is NaN (never raises)
- Parametric sampling of a worldline over a symmetric tau range
- High-precision evaluation of Minkowski invariants, for checks at
  large tau where double precision cancels catastrophically
  (e.g. -cosh(100)² + sinh(100)²)

A partially evaluated 4-vector is physically meaningless, so the whole
vector degrades, not just the failing component.
"""

import math
import warnings
from typing import Sequence

import numpy as np
import sympy as sp

from relkin.symbolic.algebra import (
    DEFAULT_VARIABLE,
    TAU,
    SymbolicExpressionError,
    evaluate_scalar,
    parse_expression,
)
from relkin.types.core import NumericVector4, SymbolicVector4, WorldlineCoordinates


class EvaluationWarning(RuntimeWarning):
    """Issued when a 4-vector degrades to the zero vector"""

    pass


DEFAULT_TAU_RANGE = 50.0
MIN_TAU_RANGE = 10.0
MAX_TAU_RANGE = 1000.0
DEFAULT_SAMPLE_STEPS = 500
DEFAULT_DIGITS = 30
# Working-precision ceiling for cancellation retries, in digits
MAX_WORKING_DIGITS = 500

_METRIC_SIGNS = (-1, 1, 1, 1)


# ============================================================================
# Pointwise Evaluation
# ============================================================================


def evaluate_vector_at_tau(V: SymbolicVector4, tau: float) -> NumericVector4:
    """
    Evaluate a symbolic 4-vector at one proper time.

    ``tau`` is bound as a decimal string so the symbol is not
    reintroduced. If any component raises or is NaN the zero vector is
    returned and an ``EvaluationWarning`` is issued.

    Parameters
    ----------
    V : SymbolicVector4
        Expressions in tau
    tau : float
        Proper time

    Returns
    -------
    NumericVector4
        Shape (4,) float array; ``[0, 0, 0, 0]`` on failure

    Examples
    --------
    >>> evaluate_vector_at_tau(("cosh(tau)", "sinh(tau)", "0", "0"), 0.0)
    array([1., 0., 0., 0.])
    >>> evaluate_vector_at_tau(("1", "sqrt(-1)", "0", "0"), 0.0)
    array([0., 0., 0., 0.])
    """
    bindings = {DEFAULT_VARIABLE: repr(float(tau))}

    try:
        values = np.array([evaluate_scalar(component, bindings) for component in V], dtype=float)
    except (SymbolicExpressionError, ValueError, TypeError) as e:
        warnings.warn(
            f"Failed to evaluate vector {tuple(V)}: {e}",
            EvaluationWarning,
            stacklevel=2,
        )
        return np.zeros(4)

    if values.shape != (4,):
        warnings.warn(
            f"Vector {tuple(V)} has {values.size} components, expected 4",
            EvaluationWarning,
            stacklevel=2,
        )
        return np.zeros(4)

    if np.isnan(values).any():
        warnings.warn(
            f"Vector {tuple(V)} evaluated to NaN",
            EvaluationWarning,
            stacklevel=2,
        )
        return np.zeros(4)

    return values


def sample_worldline(
    V: SymbolicVector4,
    tau_range: float = DEFAULT_TAU_RANGE,
    steps: int = DEFAULT_SAMPLE_STEPS,
) -> WorldlineCoordinates:
    """
    Sample a worldline parametrically over ``[-tau_range, tau_range]``.

    Args:
        V: Position expressions in tau
        tau_range: Half-width of the proper-time window, clamped to
            [10, 1000]
        steps: Number of intervals (``steps + 1`` samples)

    Returns:
        Lab coordinates {t, x, y, z}; failed samples are zero events
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    tau_range = min(max(float(tau_range), MIN_TAU_RANGE), MAX_TAU_RANGE)
    taus = np.linspace(-tau_range, tau_range, steps + 1)
    events = np.array([evaluate_vector_at_tau(V, tau) for tau in taus])

    return {"t": events[:, 0], "x": events[:, 1], "y": events[:, 2], "z": events[:, 3]}


# ============================================================================
# High-Precision Invariants
# ============================================================================


def _exact_tau(tau: float) -> sp.Rational:
    return sp.Rational(repr(float(tau)))


def _bound_components(V: Sequence[str], tau: float):
    exact = _exact_tau(tau)
    return [parse_expression(component).xreplace({TAU: exact}) for component in V]


def _metric_sum(terms: Sequence[sp.Expr], digits: int, description: str) -> float:
    total = sp.Add(*[sign * term for sign, term in zip(_METRIC_SIGNS, terms)])
    value = total.evalf(digits, maxn=MAX_WORKING_DIGITS)
    if value.free_symbols:
        raise SymbolicExpressionError(f"{description} has unbound symbols {value.free_symbols}")
    result = float(value)
    if math.isnan(result):
        raise SymbolicExpressionError(f"{description} evaluated to NaN")
    return result


def minkowski_square_exact(V: SymbolicVector4, tau: float, digits: int = DEFAULT_DIGITS) -> float:
    """
    V·V at ``tau`` computed in arbitrary precision.

    ``tau`` is bound as an exact rational and the sum is evaluated by
    SymPy with ``digits`` significant digits, so cancellation between
    large terms does not lose the result.

    Raises
    ------
    SymbolicExpressionError
        If a component does not parse or does not evaluate
    """
    components = _bound_components(V, tau)
    return _metric_sum([c * c for c in components], digits, f"V·V for {tuple(V)}")


def minkowski_inner_exact(
    V: SymbolicVector4,
    W: SymbolicVector4,
    tau: float,
    digits: int = DEFAULT_DIGITS,
) -> float:
    """V·W at ``tau`` computed in arbitrary precision."""
    v_components = _bound_components(V, tau)
    w_components = _bound_components(W, tau)
    return _metric_sum(
        [a * b for a, b in zip(v_components, w_components)],
        digits,
        f"V·W for {tuple(V)}, {tuple(W)}",
    )


__all__ = [
    "EvaluationWarning",
    "DEFAULT_TAU_RANGE",
    "DEFAULT_SAMPLE_STEPS",
    "evaluate_vector_at_tau",
    "sample_worldline",
    "minkowski_square_exact",
    "minkowski_inner_exact",
]
