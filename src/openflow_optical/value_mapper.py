"""Conversion between optical domain enums and OpenFlow optical wire codes.

Each table is a :class:`~openflow_optical.utils.bimap.BiMap` built once at
import time.  Encoding (enum to byte) and decoding (byte to enum) are plain
dict lookups in the matching direction; a miss raises
:class:`~openflow_optical.errors.NoMappingFoundError` and is never replaced
by a default.

Values come from ONF "Optical Transport Protocol Extensions Version 1.0",
see :mod:`openflow_optical.vendor.onf.constants`.
"""

from __future__ import annotations

import logging

from openflow_optical.model.optical import ChannelSpacing, GridType, OchSignalType
from openflow_optical.utils.bimap import BiMap, lookup
from openflow_optical.vendor.onf import constants as onf

logger = logging.getLogger(__name__)

GRID_TYPES: BiMap[GridType, int] = BiMap(
    {
        GridType.DWDM: onf.OFPGRIDT_DWDM,
        GridType.CWDM: onf.OFPGRIDT_CWDM,
        GridType.FLEX: onf.OFPGRIDT_FLEX,
    }
)

CHANNEL_SPACING: BiMap[ChannelSpacing, int] = BiMap(
    {
        ChannelSpacing.CHL_100GHZ: onf.OFPCS_100GHZ,
        ChannelSpacing.CHL_50GHZ: onf.OFPCS_50GHZ,
        ChannelSpacing.CHL_25GHZ: onf.OFPCS_25GHZ,
        ChannelSpacing.CHL_12P5GHZ: onf.OFPCS_12P5GHZ,
        ChannelSpacing.CHL_6P25GHZ: onf.OFPCS_6P25GHZ,
    }
)

OCH_SIGNAL_TYPES: BiMap[OchSignalType, int] = BiMap(
    {
        OchSignalType.FIXED_GRID: onf.OFPOCHT_FIX_GRID,
        OchSignalType.FLEX_GRID: onf.OFPOCHT_FLEX_GRID,
    }
)

logger.debug(
    "Wire-code tables ready: %d grid types, %d channel spacings, %d OCh signal types",
    len(GRID_TYPES),
    len(CHANNEL_SPACING),
    len(OCH_SIGNAL_TYPES),
)


def lookup_grid_type(grid_type: GridType) -> int:
    """Return the wire code for *grid_type*.

    Raises:
        NoMappingFoundError: If *grid_type* is not a mapped :class:`GridType`.
    """
    return lookup(GRID_TYPES, grid_type, int)


def lookup_grid_type_code(code: int) -> GridType:
    """Return the :class:`GridType` for wire code *code*.

    Raises:
        NoMappingFoundError: If *code* is not a defined grid type code.
    """
    return lookup(GRID_TYPES.inverse(), code, GridType)


def lookup_channel_spacing(spacing: ChannelSpacing) -> int:
    """Return the wire code for *spacing*.

    Raises:
        NoMappingFoundError: If *spacing* is not a mapped :class:`ChannelSpacing`.
    """
    return lookup(CHANNEL_SPACING, spacing, int)


def lookup_channel_spacing_code(code: int) -> ChannelSpacing:
    """Return the :class:`ChannelSpacing` for wire code *code*.

    Raises:
        NoMappingFoundError: If *code* is not a defined channel spacing code.
    """
    return lookup(CHANNEL_SPACING.inverse(), code, ChannelSpacing)


def lookup_och_signal_type(signal_type: OchSignalType) -> int:
    """Return the wire code for *signal_type*.

    Raises:
        NoMappingFoundError: If *signal_type* is not a mapped :class:`OchSignalType`.
    """
    return lookup(OCH_SIGNAL_TYPES, signal_type, int)


def lookup_och_signal_type_code(code: int) -> OchSignalType:
    """Return the :class:`OchSignalType` for wire code *code*.

    Raises:
        NoMappingFoundError: If *code* is not a defined OCh signal type code.
    """
    return lookup(OCH_SIGNAL_TYPES.inverse(), code, OchSignalType)
