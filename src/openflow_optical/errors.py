"""Custom exceptions for openflow-optical."""

from __future__ import annotations

from dataclasses import dataclass


class OpticalMappingError(Exception):
    """Base exception for all openflow-optical errors."""


@dataclass
class NoMappingFoundError(OpticalMappingError, LookupError):
    """Raised when a value has no counterpart in a wire-code table.

    Attributes:
        input_value: The enum variant or byte code that was looked up.
        output_type: The type the lookup was converting to (``int`` for
            encoding, the enumeration class for decoding).
    """

    input_value: object
    output_type: type

    def __post_init__(self) -> None:
        super().__init__(
            f"No mapping found for {self.input_value!r} "
            f"when converting to {self.output_type.__name__}"
        )
