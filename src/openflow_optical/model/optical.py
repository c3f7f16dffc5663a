"""Protocol-agnostic optical domain enumerations."""

from __future__ import annotations

from enum import Enum


class GridType(Enum):
    """Optical frequency grid scheme."""

    DWDM = "dwdm"
    CWDM = "cwdm"
    FLEX = "flex"


class ChannelSpacing(Enum):
    """Frequency separation between adjacent channels of a fixed grid.

    Attributes:
        frequency_ghz: Spacing in GHz (e.g. ``100.0``, ``12.5``).
    """

    CHL_100GHZ = 100.0
    CHL_50GHZ = 50.0
    CHL_25GHZ = 25.0
    CHL_12P5GHZ = 12.5
    CHL_6P25GHZ = 6.25

    @property
    def frequency_ghz(self) -> float:
        return float(self.value)


class OchSignalType(Enum):
    """Optical channel (OCh) signal classification."""

    FIXED_GRID = "fixed_grid"
    FLEX_GRID = "flex_grid"
