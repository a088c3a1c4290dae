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
Unit Tests for Kinematic and Validation Types

Tests cover:
- PrimaryInput tagged variant and normalization of components
- KinematicTriple / InitialConditions immutability and defaults
- MCRFFrame defaults
- CausalityResult construction
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from relkin.types import (
    CausalityResult,
    InitialConditions,
    InputKind,
    KinematicTriple,
    MCRFFrame,
    PrimaryInput,
)


# ============================================================================
# Test Class 1: Primary Input
# ============================================================================


class TestPrimaryInput:
    """Test the user-authored input variant"""

    def test_constructors_set_kind(self):
        vector = ("tau", "0", "0", "0")

        assert PrimaryInput.position(vector).kind is InputKind.POSITION
        assert PrimaryInput.velocity(vector).kind is InputKind.VELOCITY
        assert PrimaryInput.acceleration(vector).kind is InputKind.ACCELERATION

    def test_components_become_string_tuple(self):
        primary = PrimaryInput.velocity([1, "4/3", 0, 0])
        assert primary.vector == ("1", "4/3", "0", "0")

    def test_numeric_components_stringified(self):
        primary = PrimaryInput(InputKind.VELOCITY, [5, "4/3", 0, 0])
        assert primary.vector == ("5", "4/3", "0", "0")

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="4 components"):
            PrimaryInput.position(("tau", "0"))

    def test_frozen(self):
        primary = PrimaryInput.position(("tau", "0", "0", "0"))
        with pytest.raises(FrozenInstanceError):
            primary.kind = InputKind.VELOCITY

    def test_equality(self):
        a = PrimaryInput.position(("tau", "0", "0", "0"))
        b = PrimaryInput(InputKind.POSITION, ["tau", "0", "0", "0"])
        assert a == b

    def test_kind_values(self):
        assert {kind.value for kind in InputKind} == {"position", "velocity", "acceleration"}


# ============================================================================
# Test Class 2: Triples and Initial Conditions
# ============================================================================


class TestKinematicRecords:
    """Test immutable kinematic records"""

    def test_triple_frozen(self):
        triple = KinematicTriple(("tau", "0", "0", "0"), ("1", "0", "0", "0"), ("0", "0", "0", "0"))
        with pytest.raises(FrozenInstanceError):
            triple.velocity = ("2", "0", "0", "0")

    def test_initial_conditions_default_at_rest(self):
        ic = InitialConditions()

        assert ic.position == (0.0, 0.0, 0.0, 0.0)
        assert ic.velocity == (1.0, 0.0, 0.0, 0.0)

    def test_initial_conditions_converted_to_floats(self):
        ic = InitialConditions(position=np.array([5, 4, 0, 0]))

        assert ic.position == (5.0, 4.0, 0.0, 0.0)
        assert all(isinstance(c, float) for c in ic.position)

    def test_initial_conditions_wrong_length(self):
        with pytest.raises(ValueError, match="velocity must have 4 components"):
            InitialConditions(velocity=(1.0, 0.0))


# ============================================================================
# Test Class 3: Frames and Results
# ============================================================================


class TestFrameAndResult:
    """Test MCRFFrame and CausalityResult"""

    def test_frame_defaults(self):
        frame = MCRFFrame()

        np.testing.assert_array_equal(frame.boost, np.eye(4))
        np.testing.assert_array_equal(frame.origin, np.zeros(4))
        assert frame.time_offset == 0.0

    def test_frame_defaults_not_shared(self):
        assert MCRFFrame().boost is not MCRFFrame().boost

    def test_causality_result_reason_optional(self):
        result = CausalityResult(is_valid=True, u_squared=-1.0, v_squared=0.0)
        assert result.reason is None
