"""
Binary Reader

Decoding counterpart of BinaryWriter. Reading past the end of the buffer
raises EncodingError.
"""

import builtins
import struct

from ..runtime.errors import EncodingError, ErrorCode


class BinaryReader:
    """Sequential reader over an immutable byte buffer."""

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = builtins.bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True once every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._off

    def _need(self, n: int, what: str) -> None:
        if self._off + n > len(self._buf):
            raise EncodingError(
                f"Buffer truncated: need {n} bytes for {what} at offset {self._off}, "
                f"{self.remaining} left",
                ErrorCode.TRUNCATED_BUFFER,
                details={"offset": self._off, "needed": n, "remaining": self.remaining},
            )

    def u8(self, what: str = "u8") -> int:
        """Read unsigned 8-bit integer."""
        self._need(1, what)
        val = self._buf[self._off]
        self._off += 1
        return val

    def bool(self, what: str = "flag") -> builtins.bool:
        """Read a 0/1 flag byte."""
        offset = self._off
        val = self.u8(what)
        if val > 1:
            raise EncodingError(
                f"Invalid {what} byte {val} at offset {offset}",
                details={"offset": offset, "value": val},
            )
        return val == 1

    def u32le(self, what: str = "u32") -> int:
        """Read unsigned 32-bit integer in little-endian format."""
        self._need(4, what)
        val = struct.unpack("<I", self._buf[self._off : self._off + 4])[0]
        self._off += 4
        return val

    def bytes(self, n: int, what: str = "bytes") -> builtins.bytes:
        """Read n bytes from buffer."""
        self._need(n, what)
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u32_prefixed_bytes(self, what: str = "data") -> builtins.bytes:
        """Read bytes preceded by a u32 little-endian length."""
        n = self.u32le(f"{what} length")
        return self.bytes(n, what)
