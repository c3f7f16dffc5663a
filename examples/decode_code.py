#!/usr/bin/env python3
"""Example: decode a channel spacing byte received from a peer."""

from __future__ import annotations

import sys

from openflow_optical.errors import NoMappingFoundError
from openflow_optical.value_mapper import lookup_channel_spacing_code

# Replace with the channel spacing byte of a received OCh signal match field
CODE = int(sys.argv[1]) if len(sys.argv) > 1 else 4

try:
    spacing = lookup_channel_spacing_code(CODE)
except NoMappingFoundError as exc:
    sys.exit(f"Rejecting message: {exc}")

print(f"{spacing.name}: {spacing.frequency_ghz} GHz")
