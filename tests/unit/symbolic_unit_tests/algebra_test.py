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
Unit Tests for the Symbolic Algebra Adapter

Tests cover:
- Constant table and whole-token substitution
- Parsing and validation of user expressions
- Differentiation with respect to tau
- Integration with the definite fix-up at tau = 0
- Substitution and numeric evaluation
"""

import math

import pytest
import sympy as sp

from relkin.symbolic.algebra import (
    CONSTANTS,
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


def assert_equivalent(actual: str, expected: str):
    """Assert two expression strings denote the same function of tau"""
    difference = sp.simplify(parse_expression(actual) - parse_expression(expected))
    assert difference == 0, f"{actual!r} != {expected!r}"


# ============================================================================
# Test Class 1: Constant Table
# ============================================================================


class TestConstants:
    """Test the reserved constant table"""

    def test_speed_of_light_is_one(self):
        assert CONSTANTS["c"] == "1"

    def test_table_contents(self):
        assert set(CONSTANTS) == {"c", "g", "hbar", "kb", "phi"}
        assert float(CONSTANTS["g"]) == pytest.approx(9.80665)
        assert float(CONSTANTS["phi"]) == pytest.approx(1.6180339887)

    def test_table_is_read_only(self):
        """Mutating the table must fail"""
        with pytest.raises(TypeError):
            CONSTANTS["c"] = "2"

    def test_substitution_is_whole_token(self):
        """Constant 'c' must not touch 'cosh'"""
        assert substitute_constants("c*cosh(tau)") == "(1)*cosh(tau)"

    def test_substitution_prefers_longest_name(self):
        assert substitute_constants("hbar + h") == "(1) + h"

    def test_substitution_of_gravity(self):
        assert substitute_constants("g*tau") == "(9.80665)*tau"

    def test_no_constants_unchanged(self):
        assert substitute_constants("sinh(tau)^2") == "sinh(tau)^2"

    def test_constant_is_never_a_free_symbol(self):
        parsed = parse_expression("c*tau")
        assert parsed.free_symbols == {TAU}


# ============================================================================
# Test Class 2: Parsing and Validation
# ============================================================================


class TestParsing:
    """Test expression parsing"""

    def test_caret_is_power(self):
        assert parse_expression("tau^2") == TAU**2

    def test_double_star_is_power(self):
        assert parse_expression("tau**2") == TAU**2

    def test_implicit_multiplication(self):
        assert parse_expression("2 tau") == 2 * TAU

    def test_tau_is_real(self):
        assert parse_expression("tau").is_real

    def test_unbalanced_parenthesis_raises(self):
        with pytest.raises(ExpressionParseError, match="Cannot parse"):
            parse_expression("cosh(tau")

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError also catch parse failures"""
        with pytest.raises(ValueError):
            parse_expression("tau +* 2")

    def test_validate_expression_true(self):
        assert validate_expression("cosh(tau)^2") is True
        assert validate_expression("5/3") is True

    def test_validate_expression_false(self):
        assert validate_expression("cosh(tau") is False
        assert validate_expression("tau +* 2") is False

    def test_contains_variable(self):
        assert contains_variable("cosh(tau)")
        assert contains_variable("2*tau + 1")

    def test_contains_variable_whole_token(self):
        assert not contains_variable("5/3")
        assert not contains_variable("taux + 1")


# ============================================================================
# Test Class 3: Differentiation
# ============================================================================


class TestDifferentiate:
    """Test differentiation with respect to tau"""

    def test_hyperbolic(self):
        assert differentiate("sinh(tau)") == "cosh(tau)"
        assert differentiate("cosh(tau)") == "sinh(tau)"

    def test_polynomial(self):
        assert differentiate("tau^2") == "2*tau"

    def test_constant_gives_zero(self):
        assert differentiate("5/3") == "0"

    def test_empty_and_zero_short_circuit(self):
        assert differentiate("") == "0"
        assert differentiate("0") == "0"
        assert differentiate("   ") == "0"

    def test_constants_substituted_first(self):
        """'c' is the speed of light, not a symbol"""
        assert differentiate("c*tau") == "1"

    def test_chain_rule(self):
        assert_equivalent(differentiate("cosh(tau^2)"), "2*tau*sinh(tau^2)")

    def test_parse_failure_raises(self):
        with pytest.raises(ExpressionParseError):
            differentiate("sinh(tau")


# ============================================================================
# Test Class 4: Integration
# ============================================================================


class TestIntegrate:
    """Test integration with the initial-value fix-up"""

    def test_cosh(self):
        assert integrate("cosh(tau)", 0) == "sinh(tau)"

    def test_sinh_is_shifted_to_zero_at_origin(self):
        """Raw antiderivative cosh(tau) is 1 at tau=0; result must be 0"""
        assert integrate("sinh(tau)", 0) == "cosh(tau) - 1"

    def test_constant_integrand(self):
        assert integrate("5/3", 0) == "5*tau/3"

    def test_initial_value_applied(self):
        result = integrate("cos(tau)", 3)
        assert evaluate_scalar(result, {"tau": "0"}) == pytest.approx(3.0)
        assert_equivalent(result, "sin(tau) + 3")

    def test_negative_initial_value(self):
        result = integrate("-4/3", 4)
        assert_equivalent(result, "4 - 4*tau/3")

    def test_zero_integrand_returns_constant(self):
        assert integrate("0", 5) == "5"
        assert integrate("", 0) == "0"

    def test_fractional_constant_is_exact(self):
        assert integrate("", 2.5) == "5/2"

    def test_result_equals_constant_at_origin(self):
        for expr in ("exp(tau)", "tau^3 + 2*tau", "cosh(2*tau)"):
            result = integrate(expr, 1.5)
            assert evaluate_scalar(result, {"tau": "0"}) == pytest.approx(1.5)

    def test_derivative_of_integral_recovers_integrand(self):
        assert_equivalent(differentiate(integrate("tau*exp(tau)", 7)), "tau*exp(tau)")

    def test_divergent_at_origin_raises(self):
        """log(tau) has no finite value at tau = 0"""
        with pytest.raises(AlgebraError, match="diverges"):
            integrate("1/tau", 0)

    def test_no_closed_form_raises(self):
        with pytest.raises(AlgebraError, match="closed-form"):
            integrate("tau^tau", 0)

    def test_non_finite_constant_raises(self):
        with pytest.raises(ValueError, match="finite"):
            integrate("1", math.inf)

    def test_parse_failure_raises(self):
        with pytest.raises(ExpressionParseError):
            integrate("cosh(tau", 0)

    def test_errors_share_base_class(self):
        assert issubclass(AlgebraError, SymbolicExpressionError)
        assert issubclass(ExpressionParseError, SymbolicExpressionError)
        assert issubclass(EvaluationError, SymbolicExpressionError)


# ============================================================================
# Test Class 5: Substitution and Evaluation
# ============================================================================


class TestSubstituteAndEvaluate:
    """Test variable binding and numeric evaluation"""

    def test_substitute_numeric(self):
        assert substitute("tau^2 + 1", {"tau": "3"}) == "10"

    def test_substitute_expression(self):
        assert_equivalent(substitute("tau^2", {"tau": "2*tau"}), "4*tau^2")

    def test_substitute_unknown_name_ignored(self):
        assert substitute("tau", {"x": "3"}) == "tau"

    def test_evaluate_with_binding(self):
        assert evaluate_scalar("cosh(tau)", {"tau": "0.0"}) == pytest.approx(1.0)

    def test_evaluate_constants(self):
        assert evaluate_scalar("c + phi") == pytest.approx(2.6180339887)

    def test_evaluate_rational(self):
        assert evaluate_scalar("5/3") == pytest.approx(5 / 3)

    def test_unbound_symbol_raises(self):
        with pytest.raises(EvaluationError, match="unbound"):
            evaluate_scalar("tau")

    def test_complex_value_raises(self):
        with pytest.raises(EvaluationError, match="complex"):
            evaluate_scalar("sqrt(-1)")

    def test_nan_is_returned(self):
        """NaN is not an error at this level; callers decide how to degrade"""
        assert math.isnan(evaluate_scalar("0/0"))

    def test_overflow_is_infinite(self):
        assert evaluate_scalar("exp(tau)", {"tau": "1000.0"}) == math.inf
