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
Reference Frame Selection

Chooses the momentarily comoving reference frame (MCRF) used to view all
worldlines from a reference particle at a given lab time.

- Inertial reference (velocity has no ``tau``): pure boost from U(0),
  no translation. The playhead is the reference particle's proper time
  at the requested lab time.
- Accelerating reference: a fresh Poincaré frame (boost from U(tau),
  origin X(tau), time offset tau) for every requested lab time.

A near-zero U^0 or a speed at or above 0.99999 c falls back to the
identity boost at the current origin.
"""

from dataclasses import dataclass

import numpy as np

from relkin.numerics.evaluator import evaluate_vector_at_tau
from relkin.numerics.lorentz import build_boost, speed_squared
from relkin.numerics.proper_time import find_tau_for_lab_time
from relkin.symbolic.algebra import contains_variable
from relkin.types.core import NumericVector4
from relkin.types.kinematics import KinematicTriple, MCRFFrame

MIN_FRAME_TIME_COMPONENT = 1e-5
MAX_FRAME_SPEED_SQUARED = 0.99999


@dataclass(frozen=True)
class FrameSelection:
    """
    Frame chosen for one viewed lab time.

    Attributes
    ----------
    frame : MCRFFrame
        Affine map from lab coordinates into the reference frame
    playhead_time : float
        Time coordinate of "now" in the reference frame
    accelerating : bool
        True if the reference velocity depends on tau
    """

    frame: MCRFFrame
    playhead_time: float
    accelerating: bool


def lab_frame() -> MCRFFrame:
    """Identity frame: lab coordinates unchanged."""
    return MCRFFrame(boost=np.eye(4), origin=np.zeros(4), time_offset=0.0)


def is_inertial(triple: KinematicTriple) -> bool:
    """True if no velocity component mentions ``tau``."""
    return not any(contains_variable(component) for component in triple.velocity)


def _frame_velocity(U: NumericVector4):
    """3-velocity usable for a boost, or None when the boost would be singular."""
    if abs(U[0]) < MIN_FRAME_TIME_COMPONENT:
        return None
    v = (U[1] / U[0], U[2] / U[0], U[3] / U[0])
    if speed_squared(v) >= MAX_FRAME_SPEED_SQUARED:
        return None
    return v


def select_reference_frame(reference: KinematicTriple, lab_time: float) -> FrameSelection:
    """
    Build the MCRF of ``reference`` at lab time ``lab_time``.

    Args:
        reference: Kinematics of the reference particle
        lab_time: Lab coordinate time being viewed

    Returns:
        FrameSelection with frame, playhead time and inertial flag

    Example:
        >>> ref = solve_from_velocity(("5/4", "3/4", "0", "0"), (0, 0, 0, 0))
        >>> selection = select_reference_frame(ref, 0.0)
        >>> selection.accelerating
        False
        >>> np.isclose(selection.frame.boost[0, 0], 1.25)
        True
    """
    if is_inertial(reference):
        U = evaluate_vector_at_tau(reference.velocity, 0.0)
        v = _frame_velocity(U)
        if v is None:
            return FrameSelection(frame=lab_frame(), playhead_time=lab_time, accelerating=False)

        playhead = find_tau_for_lab_time(reference.position, lab_time)
        frame = MCRFFrame(boost=build_boost(v), origin=np.zeros(4), time_offset=0.0)
        return FrameSelection(frame=frame, playhead_time=playhead, accelerating=False)

    tau = find_tau_for_lab_time(reference.position, lab_time)
    origin = evaluate_vector_at_tau(reference.position, tau)
    U = evaluate_vector_at_tau(reference.velocity, tau)
    v = _frame_velocity(U)

    boost = np.eye(4) if v is None else build_boost(v)
    frame = MCRFFrame(boost=boost, origin=origin, time_offset=tau)
    return FrameSelection(frame=frame, playhead_time=tau, accelerating=True)


__all__ = [
    "FrameSelection",
    "lab_frame",
    "is_inertial",
    "select_reference_frame",
]
