"""32-bit FNV-1a hashing with a configurable starting offset."""

from __future__ import annotations

PTT_FNV32_INIT = 33554467
FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


class Fnv32a:
    """FNV-1a 32-bit hash whose initial state is ``offset``."""

    digest_size = 4
    block_size = 1
    name = "fnv32a"

    def __init__(self, offset: int = FNV32_OFFSET_BASIS) -> None:
        self._state = offset & _MASK32

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the hash."""
        state = self._state
        for byte in bytes(data):
            state = ((state ^ byte) * FNV32_PRIME) & _MASK32
        self._state = state

    def digest(self) -> bytes:
        """Return the hash as four big-endian bytes."""
        return self._state.to_bytes(4, "big")

    def intdigest(self) -> int:
        """Return the hash as an unsigned integer."""
        return self._state

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> Fnv32a:
        """Return an independent hash with the same state."""
        return Fnv32a(self._state)


def new32a_with(offset: int) -> Fnv32a:
    """Create an FNV-1a 32-bit hash starting from ``offset``."""
    return Fnv32a(offset)