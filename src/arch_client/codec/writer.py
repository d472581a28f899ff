"""
Binary Writer

Collects the fixed-width primitives used by the Arch message layout:
single-byte counts and flags, little-endian u32 lengths and raw byte runs.
Values that do not fit their field raise EncodingError instead of being
masked.
"""

import builtins
import struct
from typing import List

from ..runtime.errors import EncodingError, ErrorCode

U8_MAX = 0xFF
U32_MAX = 0xFFFFFFFF


class BinaryWriter:
    """
    Append-only binary writer.

    Each method appends to an internal buffer; to_bytes() returns the result.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int, field: str = "u8") -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
            field: Field name used in error messages

        Raises:
            EncodingError: If the value does not fit in one byte
        """
        if not 0 <= v <= U8_MAX:
            raise EncodingError(
                f"{field} {v} does not fit in one byte",
                ErrorCode.LENGTH_OVERFLOW,
                details={"field": field, "value": v, "max": U8_MAX},
            )
        self._bb.append(v)

    def bool(self, v: bool) -> None:
        """Write a boolean flag as a single 0/1 byte."""
        self._bb.append(1 if v else 0)

    def u32le(self, v: int, field: str = "u32") -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Raises:
            EncodingError: If the value does not fit in 32 bits
        """
        if not 0 <= v <= U32_MAX:
            raise EncodingError(
                f"{field} {v} does not fit in a u32",
                ErrorCode.LENGTH_OVERFLOW,
                details={"field": field, "value": v, "max": U32_MAX},
            )
        self._bb.extend(struct.pack('<I', v))

    def bytes(self, v: builtins.bytes) -> None:
        """Write raw bytes without length prefix."""
        self._bb.extend(v)

    def u32_prefixed_bytes(self, v: builtins.bytes, field: str = "data length") -> None:
        """Write bytes preceded by their length as u32 little-endian."""
        self.u32le(len(v), field)
        self.bytes(v)

    def to_bytes(self) -> builtins.bytes:
        """Return accumulated bytes as immutable bytes object."""
        return builtins.bytes(self._bb)
