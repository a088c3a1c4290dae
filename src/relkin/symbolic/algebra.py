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
Symbolic Algebra Adapter

Narrow string-in/string-out interface over SymPy for proper-time
expressions.

Provides:
- Constant substitution (read-only constant table, whole-token matching)
- Parsing and validation of user expressions
- Differentiation with respect to proper time
- Integration with a definite fix-up so the result equals a given
  constant at tau = 0
- Substitution of variable bindings and numeric evaluation

Expressions use ``^`` or ``**`` for powers and may use implicit
multiplication (``2 tau``). Every operation substitutes the constant
table first, so ``c`` in a user expression always means the speed of
light and never a free symbol.

Error Taxonomy
--------------
SymbolicExpressionError (ValueError)
    ExpressionParseError   expression does not parse
    AlgebraError           differentiate/integrate failed on a parsed
                           expression (e.g. no closed-form antiderivative)
    EvaluationError        substitution/evaluation did not give a real number
"""

import functools
import math
import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

import sympy as sp
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication,
    parse_expr,
    standard_transformations,
)

# ============================================================================
# Exceptions
# ============================================================================


class SymbolicExpressionError(ValueError):
    """Base class for failures of the symbolic layer"""

    pass


class ExpressionParseError(SymbolicExpressionError):
    """Raised when an expression string cannot be parsed"""

    pass


class AlgebraError(SymbolicExpressionError):
    """Raised when differentiation or integration fails on a parsed expression"""

    pass


class EvaluationError(SymbolicExpressionError):
    """Raised when an expression does not evaluate to a real number"""

    pass


# ============================================================================
# Constant Table
# ============================================================================

CONSTANTS: Mapping[str, str] = MappingProxyType(
    {
        # Speed of light (natural units)
        "c": "1",
        # Standard gravity, SI value used as a natural-unit approximation
        "g": "9.80665",
        # Reduced Planck constant (natural units)
        "hbar": "1",
        # Boltzmann constant (natural units)
        "kb": "1",
        # Golden ratio
        "phi": "1.6180339887",
    }
)
"""
Reserved identifiers and their literal values.

Read-only; built once at import. Substituted textually before any
symbolic or numeric operation.
"""

# Longest name first so 'hbar' is replaced before any shorter name
_CONSTANT_PATTERNS: Tuple[Tuple["re.Pattern[str]", str], ...] = tuple(
    (re.compile(rf"\b{re.escape(name)}\b"), f"({value})")
    for name, value in sorted(CONSTANTS.items(), key=lambda item: len(item[0]), reverse=True)
)

DEFAULT_VARIABLE = "tau"

TAU = sp.Symbol(DEFAULT_VARIABLE, real=True)
"""The proper-time symbol shared by every parsed expression."""

_TRANSFORMATIONS = standard_transformations + (implicit_multiplication, convert_xor)

# Relative size of an imaginary part that is treated as round-off
_IMAGINARY_TOLERANCE = 1e-12


# ============================================================================
# Constant Substitution and Parsing
# ============================================================================


def substitute_constants(expr: str) -> str:
    """
    Replace reserved constant names with their parenthesized values.

    Whole-token matching: a constant named ``c`` does not touch ``cosh``.

    Parameters
    ----------
    expr : str
        Expression text

    Returns
    -------
    str
        Expression text with constants replaced

    Examples
    --------
    >>> substitute_constants("c*cosh(tau)")
    '(1)*cosh(tau)'
    >>> substitute_constants("hbar + h")
    '(1) + h'
    """
    result = expr
    for pattern, replacement in _CONSTANT_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def variable_symbol(variable: str = DEFAULT_VARIABLE) -> sp.Symbol:
    """Return the real SymPy symbol used for ``variable``."""
    if variable == DEFAULT_VARIABLE:
        return TAU
    return sp.Symbol(variable, real=True)


@functools.lru_cache(maxsize=2048)
def _parse_cached(text: str, variable: str) -> sp.Expr:
    local_dict = {variable: variable_symbol(variable)}
    if variable != DEFAULT_VARIABLE:
        local_dict[DEFAULT_VARIABLE] = TAU

    try:
        parsed = parse_expr(text, local_dict=local_dict, transformations=_TRANSFORMATIONS)
    except Exception as e:
        raise ExpressionParseError(f"Cannot parse expression {text!r}: {e}") from e

    if not isinstance(parsed, sp.Expr):
        raise ExpressionParseError(
            f"Expression {text!r} is not an algebraic expression "
            f"(got {type(parsed).__name__})"
        )
    return parsed


def parse_expression(expr: str, variable: str = DEFAULT_VARIABLE) -> sp.Expr:
    """
    Substitute constants and parse an expression into SymPy.

    Parsed expressions are memoised; SymPy expressions are immutable so
    the cached objects are safe to share.

    Parameters
    ----------
    expr : str
        Expression text
    variable : str
        Name of the independent variable

    Returns
    -------
    sp.Expr
        Parsed expression

    Raises
    ------
    ExpressionParseError
        If the text is not a valid algebraic expression
    """
    if not isinstance(expr, str):
        expr = str(expr)
    return _parse_cached(substitute_constants(expr), variable)


def validate_expression(expr: str) -> bool:
    """
    Check whether an expression parses.

    Never raises: any failure is reported as ``False``.

    Examples
    --------
    >>> validate_expression("cosh(tau)^2")
    True
    >>> validate_expression("cosh(tau")
    False
    """
    try:
        parse_expression(expr)
        return True
    except Exception:
        return False


def contains_variable(expr: str, variable: str = DEFAULT_VARIABLE) -> bool:
    """Whole-token test for an occurrence of ``variable`` in ``expr``."""
    return re.search(rf"\b{re.escape(variable)}\b", expr) is not None


def _is_trivial(expr: Optional[str]) -> bool:
    # Empty and zero inputs never reach the algebra engine
    return expr is None or expr.strip() == "" or expr.strip() == "0"


def _to_text(expr: sp.Expr) -> str:
    return str(expr)


# ============================================================================
# Calculus
# ============================================================================


def differentiate(expr: str, variable: str = DEFAULT_VARIABLE) -> str:
    """
    Differentiate an expression with respect to ``variable``.

    Parameters
    ----------
    expr : str
        Expression text
    variable : str
        Differentiation variable (default ``tau``)

    Returns
    -------
    str
        Derivative as expression text; ``"0"`` for empty or zero input

    Raises
    ------
    ExpressionParseError
        If the expression does not parse
    AlgebraError
        If SymPy fails to differentiate

    Examples
    --------
    >>> differentiate("sinh(tau)")
    'cosh(tau)'
    >>> differentiate("")
    '0'
    """
    if _is_trivial(expr):
        return "0"

    parsed = parse_expression(expr, variable)
    try:
        derivative = sp.diff(parsed, variable_symbol(variable))
    except Exception as e:
        raise AlgebraError(f"Cannot differentiate {expr!r} with respect to {variable}: {e}") from e

    return _to_text(derivative)


def _exact_constant(constant: Union[float, int, str]) -> sp.Expr:
    """Exact rational form of a numeric integration constant."""
    if isinstance(constant, str):
        return parse_expression(constant)
    value = float(constant)
    if not math.isfinite(value):
        raise ValueError(f"Integration constant must be finite, got {constant}")
    return sp.Rational(repr(value))


def _is_finite_value(value: sp.Expr) -> bool:
    return not value.has(sp.nan, sp.zoo, sp.oo, sp.S.NegativeInfinity)


def _value_at_origin(antiderivative: sp.Expr, symbol: sp.Symbol, expr: str) -> sp.Expr:
    """Value of the antiderivative at ``symbol = 0``, via the limit if needed."""
    value = antiderivative.subs(symbol, 0)
    if _is_finite_value(value):
        return value

    try:
        value = sp.limit(antiderivative, symbol, 0)
    except Exception as e:
        raise AlgebraError(
            f"Antiderivative of {expr!r} is undefined at {symbol} = 0: {e}"
        ) from e

    if not _is_finite_value(value):
        raise AlgebraError(
            f"Antiderivative of {expr!r} diverges at {symbol} = 0 (got {value}); "
            f"cannot apply the initial condition"
        )
    return value


def integrate(
    expr: str,
    constant: Union[float, int, str] = 0.0,
    variable: str = DEFAULT_VARIABLE,
) -> str:
    """
    Integrate with respect to ``variable`` and fix the integration constant.

    The raw antiderivative F is shifted so that the result equals
    ``constant`` at ``variable = 0``::

        result(tau) = F(tau) - F(0) + constant

    Parameters
    ----------
    expr : str
        Integrand text
    constant : float, int or str
        Value of the result at ``variable = 0``
    variable : str
        Integration variable (default ``tau``)

    Returns
    -------
    str
        Definite antiderivative as expression text. Empty or zero input
        returns the constant literal.

    Raises
    ------
    ExpressionParseError
        If the integrand does not parse
    AlgebraError
        If SymPy finds no closed form, or the antiderivative diverges at 0

    Examples
    --------
    >>> integrate("cosh(tau)", 0)
    'sinh(tau)'
    >>> integrate("sinh(tau)", 0)
    'cosh(tau) - 1'
    >>> integrate("0", 5)
    '5'
    """
    constant_expr = _exact_constant(constant)
    if _is_trivial(expr):
        return _to_text(constant_expr)

    parsed = parse_expression(expr, variable)
    symbol = variable_symbol(variable)

    try:
        antiderivative = sp.integrate(parsed, symbol)
    except Exception as e:
        raise AlgebraError(f"Cannot integrate {expr!r} with respect to {variable}: {e}") from e

    if antiderivative.has(sp.Integral):
        raise AlgebraError(f"No closed-form antiderivative found for {expr!r}")

    offset = _value_at_origin(antiderivative, symbol, expr)
    return _to_text(antiderivative - offset + constant_expr)


# ============================================================================
# Substitution and Evaluation
# ============================================================================


def _bind(parsed: sp.Expr, bindings: Mapping[str, str]) -> sp.Expr:
    if not bindings:
        return parsed
    replacements: Dict[sp.Symbol, sp.Expr] = {}
    for symbol in parsed.free_symbols:
        if symbol.name in bindings:
            replacements[symbol] = parse_expression(str(bindings[symbol.name]))
    return parsed.xreplace(replacements)


def substitute(expr: str, bindings: Mapping[str, str]) -> str:
    """
    Replace named variables with expression values.

    Parameters
    ----------
    expr : str
        Expression text
    bindings : Mapping[str, str]
        Variable name -> replacement expression text

    Returns
    -------
    str
        Resulting expression text

    Raises
    ------
    ExpressionParseError
        If the expression or a binding value does not parse

    Examples
    --------
    >>> substitute("tau^2 + 1", {"tau": "3"})
    '10'
    """
    parsed = parse_expression(expr)
    return _to_text(_bind(parsed, bindings))


def evaluate_scalar(expr: str, bindings: Optional[Mapping[str, str]] = None) -> float:
    """
    Substitute bindings and evaluate to a float.

    NaN results are returned as ``float('nan')`` and overflow as
    ``inf``; the caller decides how to degrade.

    Raises
    ------
    ExpressionParseError
        If the expression or a binding does not parse
    EvaluationError
        If unbound symbols remain or the value is not real
    """
    bound = _bind(parse_expression(expr), bindings or {})

    try:
        value = bound.evalf()
    except Exception as e:
        raise EvaluationError(f"Cannot evaluate {expr!r}: {e}") from e

    if value.free_symbols:
        names = sorted(str(s) for s in value.free_symbols)
        raise EvaluationError(f"Expression {expr!r} has unbound symbols {names}")

    try:
        return float(value)
    except TypeError:
        pass

    try:
        number = complex(value)
    except TypeError as e:
        raise EvaluationError(f"Expression {expr!r} evaluated to non-number {value}") from e

    if abs(number.imag) <= _IMAGINARY_TOLERANCE * max(1.0, abs(number.real)):
        return number.real
    raise EvaluationError(f"Expression {expr!r} evaluated to a complex value")


__all__ = [
    "SymbolicExpressionError",
    "ExpressionParseError",
    "AlgebraError",
    "EvaluationError",
    "CONSTANTS",
    "TAU",
    "DEFAULT_VARIABLE",
    "substitute_constants",
    "variable_symbol",
    "parse_expression",
    "validate_expression",
    "contains_variable",
    "differentiate",
    "integrate",
    "substitute",
    "evaluate_scalar",
]
