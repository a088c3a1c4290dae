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
Validation Result Types

Physical invalidity is a first-class result, not an exception: rendering
code reads ``is_valid`` and suppresses display.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CausalityResult:
    """
    Container for 4-velocity causality validation results.

    Attributes
    ----------
    is_valid : bool
        True if the 4-velocity is future-pointing, normalized and sub-luminal
    reason : Optional[str]
        Human-readable description of the first failed check
    u_squared : float
        Measured invariant U·U (should be -1)
    v_squared : float
        Measured coordinate 3-speed squared (0 when not reached)

    Examples
    --------
    >>> result = validate_causality(np.array([0.5, 1.5, 0.0, 0.0]))
    >>> result.is_valid
    False
    >>> result.u_squared > 0
    True
    """

    is_valid: bool
    u_squared: float
    v_squared: float
    reason: Optional[str] = None


__all__ = ["CausalityResult"]
