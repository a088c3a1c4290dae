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
Kinematic Solver

Derives the consistent triple (position, velocity, acceleration) from one
user-authored 4-vector and numeric initial conditions:

    position     : U = dX/dtau,       A = dU/dtau
    velocity     : X = ∫U + X0,       A = dU/dtau
    acceleration : U = ∫A + U0,       X = ∫U + X0

Every solve is all-or-nothing: the first component that fails to
differentiate or integrate aborts the whole call, so a partially updated
triple is never returned. ``WorldlineState`` builds on this to keep the
previous consistent state when an edit cannot be solved.
"""

import warnings
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Sequence

from relkin.symbolic.algebra import SymbolicExpressionError, differentiate, integrate
from relkin.types.core import InitialVector4, SymbolicVector4
from relkin.types.kinematics import (
    InitialConditions,
    InputKind,
    KinematicTriple,
    PrimaryInput,
)


class SolverWarning(UserWarning):
    """Issued when an edit cannot be solved and the previous state is kept"""

    pass


# ============================================================================
# Component-wise Helpers
# ============================================================================


def _as_vector(vector: Sequence[str]) -> SymbolicVector4:
    if len(vector) != 4:
        raise ValueError(f"4-vector must have 4 components, got {len(vector)}")
    return tuple(str(component) for component in vector)


def _differentiate_vector(vector: SymbolicVector4) -> SymbolicVector4:
    return tuple(differentiate(component) for component in vector)


def _integrate_vector(vector: SymbolicVector4, constants: InitialVector4) -> SymbolicVector4:
    if len(constants) != 4:
        raise ValueError(f"Initial condition must have 4 components, got {len(constants)}")
    return tuple(
        integrate(component, constant) for component, constant in zip(vector, constants)
    )


# ============================================================================
# Solvers
# ============================================================================


def solve_from_position(X: Sequence[str]) -> KinematicTriple:
    """
    Derive velocity and acceleration from a 4-position.

    Initial conditions are embedded in X itself.

    Args:
        X: 4-position expressions in tau

    Returns:
        KinematicTriple with U = dX/dtau and A = dU/dtau

    Raises:
        ExpressionParseError: If a component does not parse
        AlgebraError: If differentiation fails

    Example:
        >>> triple = solve_from_position(("sinh(tau)", "cosh(tau)", "0", "0"))
        >>> triple.velocity
        ('cosh(tau)', 'sinh(tau)', '0', '0')
    """
    position = _as_vector(X)
    velocity = _differentiate_vector(position)
    acceleration = _differentiate_vector(velocity)
    return KinematicTriple(position=position, velocity=velocity, acceleration=acceleration)


def solve_from_velocity(U: Sequence[str], X0: InitialVector4) -> KinematicTriple:
    """
    Integrate a 4-velocity to a position and differentiate to an acceleration.

    Args:
        U: 4-velocity expressions in tau
        X0: Position at tau = 0

    Returns:
        KinematicTriple with X(0) = X0

    Raises:
        ExpressionParseError: If a component does not parse
        AlgebraError: If integration or differentiation fails
    """
    velocity = _as_vector(U)
    position = _integrate_vector(velocity, X0)
    acceleration = _differentiate_vector(velocity)
    return KinematicTriple(position=position, velocity=velocity, acceleration=acceleration)


def solve_from_acceleration(
    A: Sequence[str], U0: InitialVector4, X0: InitialVector4
) -> KinematicTriple:
    """
    Integrate a 4-acceleration twice.

    Args:
        A: 4-acceleration expressions in tau
        U0: 4-velocity at tau = 0
        X0: Position at tau = 0

    Returns:
        KinematicTriple with U(0) = U0 and X(0) = X0

    Raises:
        ExpressionParseError: If a component does not parse
        AlgebraError: If an integration fails
    """
    acceleration = _as_vector(A)
    velocity = _integrate_vector(acceleration, U0)
    position = _integrate_vector(velocity, X0)
    return KinematicTriple(position=position, velocity=velocity, acceleration=acceleration)


def solve(
    primary: PrimaryInput,
    initial_conditions: Optional[InitialConditions] = None,
) -> KinematicTriple:
    """
    Dispatch to the solver for the primary input's kind.

    Args:
        primary: Tagged user input
        initial_conditions: X0/U0 (defaults: at rest at the origin)

    Returns:
        KinematicTriple
    """
    ic = initial_conditions or InitialConditions()

    if primary.kind is InputKind.POSITION:
        return solve_from_position(primary.vector)
    if primary.kind is InputKind.VELOCITY:
        return solve_from_velocity(primary.vector, ic.position)
    if primary.kind is InputKind.ACCELERATION:
        return solve_from_acceleration(primary.vector, ic.velocity, ic.position)
    raise ValueError(f"Unknown input kind: {primary.kind}")


# ============================================================================
# Worldline State
# ============================================================================


def _rest_primary() -> PrimaryInput:
    return PrimaryInput.position(("tau", "0", "0", "0"))


def _rest_triple() -> KinematicTriple:
    return KinematicTriple(
        position=("tau", "0", "0", "0"),
        velocity=("1", "0", "0", "0"),
        acceleration=("0", "0", "0", "0"),
    )


@dataclass(frozen=True)
class WorldlineState:
    """
    Kinematic record of one particle.

    Holds the user's primary input, the initial conditions and the
    derived triple. Updates return a new state; when an update cannot be
    solved a ``SolverWarning`` is issued and the current state is
    returned unchanged, so the triple always matches the primary input.

    Example:
        >>> state = WorldlineState.at_rest()
        >>> state = state.with_input(PrimaryInput.velocity(("5/3", "4/3", "0", "0")))
        >>> state.triple.position
        ('5*tau/3', '4*tau/3', '0', '0')
        >>> state.with_input(PrimaryInput.position(("cosh(tau", "0", "0", "0"))) is state
        True
    """

    primary: PrimaryInput = field(default_factory=_rest_primary)
    initial_conditions: InitialConditions = field(default_factory=InitialConditions)
    triple: KinematicTriple = field(default_factory=_rest_triple)

    @classmethod
    def at_rest(cls) -> "WorldlineState":
        """Particle at rest at the spatial origin: X = (tau, 0, 0, 0)."""
        return cls()

    @classmethod
    def from_input(
        cls,
        primary: PrimaryInput,
        initial_conditions: Optional[InitialConditions] = None,
    ) -> "WorldlineState":
        """
        Build a state by solving ``primary``.

        Unlike the ``with_*`` methods this raises, since there is no
        previous state to fall back to.
        """
        ic = initial_conditions or InitialConditions()
        return cls(primary=primary, initial_conditions=ic, triple=solve(primary, ic))

    def _attempt(self, build: Callable[[], "WorldlineState"], action: str) -> "WorldlineState":
        try:
            return build()
        except SymbolicExpressionError as e:
            warnings.warn(
                f"Failed to {action}; keeping previous kinematics: {e}",
                SolverWarning,
                stacklevel=3,
            )
            return self

    def with_input(self, primary: PrimaryInput) -> "WorldlineState":
        """
        Replace the primary input and re-derive the triple.

        Switching kind discards the previous primary entirely.
        """

        def build() -> "WorldlineState":
            triple = solve(primary, self.initial_conditions)
            return replace(self, primary=primary, triple=triple)

        return self._attempt(build, f"solve {primary.kind.value} input")

    def with_initial_conditions(
        self,
        position: Optional[InitialVector4] = None,
        velocity: Optional[InitialVector4] = None,
    ) -> "WorldlineState":
        """
        Replace X0 and/or U0 and re-derive velocity/acceleration primaries.

        Position-primary states store the new values without re-solving.
        """
        ic = InitialConditions(
            position=position if position is not None else self.initial_conditions.position,
            velocity=velocity if velocity is not None else self.initial_conditions.velocity,
        )

        def build() -> "WorldlineState":
            if self.primary.kind is InputKind.POSITION:
                return replace(self, initial_conditions=ic)
            return replace(self, initial_conditions=ic, triple=solve(self.primary, ic))

        return self._attempt(build, "update initial conditions")


__all__ = [
    "SolverWarning",
    "solve_from_position",
    "solve_from_velocity",
    "solve_from_acceleration",
    "solve",
    "WorldlineState",
]
