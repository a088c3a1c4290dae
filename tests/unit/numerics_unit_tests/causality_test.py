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
Unit Tests for the Causality Validator

Tests cover:
- Pointwise validation order (future-pointing, normalized, sub-luminal)
- Reported invariants and reasons
- Discrete sweep over a symbolic 4-velocity
"""

import numpy as np
import pytest

from relkin.numerics.causality import (
    NORMALIZATION_TOLERANCE,
    check_causality_violation,
    validate_causality,
)
from relkin.numerics.evaluator import evaluate_vector_at_tau
from relkin.types.validation import CausalityResult


# ============================================================================
# Test Class 1: Pointwise Validation
# ============================================================================


class TestValidateCausality:
    """Test validation of one numeric 4-velocity"""

    def test_rest(self):
        result = validate_causality(np.array([1.0, 0.0, 0.0, 0.0]))

        assert isinstance(result, CausalityResult)
        assert result.is_valid
        assert result.reason is None
        assert result.u_squared == pytest.approx(-1.0)
        assert result.v_squared == 0.0

    def test_moving(self):
        result = validate_causality(np.array([1.25, 0.75, 0.0, 0.0]))

        assert result.is_valid
        assert result.v_squared == pytest.approx(0.36)

    def test_accepts_list(self):
        assert validate_causality([5 / 3, 4 / 3, 0, 0]).is_valid

    def test_past_pointing(self):
        result = validate_causality(np.array([-1.0, 0.0, 0.0, 0.0]))

        assert not result.is_valid
        assert "positive" in result.reason
        assert result.v_squared == 0.0

    def test_not_normalized(self):
        result = validate_causality(np.array([2.0, 0.0, 0.0, 0.0]))

        assert not result.is_valid
        assert "-1" in result.reason
        assert result.u_squared == pytest.approx(-4.0)

    def test_spacelike(self):
        result = validate_causality(np.array([0.5, 1.5, 0.0, 0.0]))

        assert not result.is_valid
        assert result.u_squared > 0

    def test_light_like_fails_normalization_first(self):
        result = validate_causality(np.array([1.0, 1.0, 0.0, 0.0]))

        assert not result.is_valid
        assert result.u_squared == pytest.approx(0.0)

    def test_within_tolerance(self):
        U = np.array([1.0 + NORMALIZATION_TOLERANCE / 4, 0.0, 0.0, 0.0])
        assert validate_causality(U).is_valid

    def test_outside_tolerance(self):
        U = np.array([1.0 + NORMALIZATION_TOLERANCE, 0.0, 0.0, 0.0])
        assert not validate_causality(U).is_valid

    def test_never_raises_on_zero_vector(self):
        result = validate_causality(np.zeros(4))
        assert not result.is_valid

    def test_infinite_component_invalid(self):
        result = validate_causality(np.array([np.inf, 0.0, 0.0, 0.0]))

        assert not result.is_valid
        assert "finite" in result.reason

    def test_nan_component_invalid(self):
        result = validate_causality(np.array([np.nan, 0.0, 0.0, 0.0]))

        assert not result.is_valid
        assert "finite" in result.reason

    def test_overflowed_evaluation_invalid(self):
        U = evaluate_vector_at_tau(("cosh(tau)", "2*sinh(tau)", "0", "0"), 1000.0)

        assert not validate_causality(U).is_valid


# ============================================================================
# Test Class 2: Sweep
# ============================================================================


class TestCheckCausalityViolation:
    """Test the discrete proper-time sweep"""

    def test_rest_is_causal(self):
        assert check_causality_violation(("1", "0", "0", "0")) is False

    def test_hyperbolic_is_causal(self):
        assert check_causality_violation(("cosh(tau)", "sinh(tau)", "0", "0")) is False

    def test_constant_superluminal(self):
        assert check_causality_violation(("1", "2", "0", "0")) is True

    def test_zero_time_component_with_motion(self):
        assert check_causality_violation(("0", "1", "0", "0")) is True

    def test_zero_vector_skipped(self):
        assert check_causality_violation(("0", "0", "0", "0")) is False

    def test_light_speed_tolerated(self):
        """|v|² = 1 is inside the sweep's round-off allowance"""
        assert check_causality_violation(("1", "1", "0", "0")) is False

    def test_late_violation_found(self):
        """v = tau/40 exceeds c only for |tau| > 40"""
        assert check_causality_violation(("1", "tau/40", "0", "0")) is True

    def test_violation_outside_range_missed(self):
        assert check_causality_violation(("1", "tau/40", "0", "0"), tau_min=-10, tau_max=10) is False

    def test_violation_between_samples_missed(self):
        """Known limitation of a discrete sweep"""
        U = ("1", "2*exp(-100*(tau - 1/2)^2)", "0", "0")
        assert check_causality_violation(U) is False
        assert check_causality_violation(U, tau_min=0.0, tau_max=1.0, step=0.05) is True

    def test_invalid_step_raises(self):
        with pytest.raises(ValueError, match="step"):
            check_causality_violation(("1", "0", "0", "0"), step=0.0)
