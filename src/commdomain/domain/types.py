"""Communication domain codes.

Each message of the game protocol carries one of these 8-bit codes to say
which category it belongs to. The gap between ``CHAT`` and ``INFO`` is
intentional: ``0xfa`` sits in a range reserved for control/info traffic,
apart from the main sequence.

INVARIANT: The set is closed. Members are never added at runtime.
"""

from __future__ import annotations

from enum import IntEnum, unique

DOMAIN_CODE_BITS = 8


@unique
class Domain(IntEnum):
    """Message categories of the communication protocol."""

    CONNECTION = 0x01
    SERVER = 0x02
    GAME = 0x03
    CHAT = 0x04
    INFO = 0xFA

    @property
    def label(self) -> str:
        """Lowercase symbolic name (``"chat"``)."""
        return self.name.lower()

    @property
    def hex(self) -> str:
        """Two-digit lowercase hex form (``"0xfa"``)."""
        return f"0x{self.value:02x}"
