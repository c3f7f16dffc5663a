#!/usr/bin/env python3
"""Example: print the OpenFlow optical wire code of every domain value."""

from __future__ import annotations

import json

from openflow_optical.model.optical import ChannelSpacing, GridType, OchSignalType
from openflow_optical.value_mapper import (
    lookup_channel_spacing,
    lookup_grid_type,
    lookup_och_signal_type,
)

codes = {
    "grid_type": {g.name: lookup_grid_type(g) for g in GridType},
    "channel_spacing": {s.name: lookup_channel_spacing(s) for s in ChannelSpacing},
    "och_signal_type": {t.name: lookup_och_signal_type(t) for t in OchSignalType},
}

print(json.dumps(codes, indent=2))
