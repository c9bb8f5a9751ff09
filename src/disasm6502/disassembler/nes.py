"""
NES Register Annotations
========================

Names for the Nintendo Entertainment System's memory-mapped I/O registers,
used to annotate instructions whose absolute operand hits one of them.

The PPU registers live at $2000-$2007 (mirrored every 8 bytes up to $3FFF;
only the canonical addresses are annotated). The APU and I/O registers
live at $4000-$4017. $400D is unused on the hardware and has no entry.

Usage:
    >>> platform_comment(0x2002)
    'PPU status'
    >>> platform_comment(0x1234) is None
    True

Reference
---------
- https://www.nesdev.org/wiki/PPU_registers
- https://www.nesdev.org/wiki/APU_registers

Copyright (c) 2026 The disasm6502 Contributors
"""

from types import MappingProxyType
from typing import Mapping, Optional


NES_TAG = "[NES]"

NES_REGISTERS: Mapping[int, str] = MappingProxyType({
    # PPU
    0x2000: "PPU setup #1",
    0x2001: "PPU setup #2",
    0x2002: "PPU status",
    0x2003: "SPR-RAM address select",
    0x2004: "SPR-RAM data",
    0x2005: "PPU scroll",
    0x2006: "VRAM address select",
    0x2007: "VRAM data",

    # APU
    0x4000: "Audio -> Square 1",
    0x4001: "Audio -> Square 1",
    0x4002: "Audio -> Square 1",
    0x4003: "Audio -> Square 1",
    0x4004: "Audio -> Square 2",
    0x4005: "Audio -> Square 2",
    0x4006: "Audio -> Square 2",
    0x4007: "Audio -> Square 2",
    0x4008: "Audio -> Triangle",
    0x4009: "Audio -> Triangle",
    0x400A: "Audio -> Triangle",
    0x400B: "Audio -> Triangle",
    0x400C: "Audio -> Noise control reg",
    0x400E: "Audio -> Noise Frequency reg #1",
    0x400F: "Audio -> Noise Frequency reg #2",
    0x4010: "Audio -> DPCM control",
    0x4011: "Audio -> DPCM D/A data",
    0x4012: "Audio -> DPCM address",
    0x4013: "Audio -> DPCM data length",

    # DMA and I/O
    0x4014: "Sprite DMA trigger",
    0x4015: "IRQ status / Sound enable",
    0x4016: "Joypad & I/O port for port #1",
    0x4017: "Joypad & I/O port for port #2",
})


def platform_comment(address: int) -> Optional[str]:
    """
    Describe the NES register at an address.

    Args:
        address: 16-bit address

    Returns:
        Register description, or None if the address is not a register
    """
    return NES_REGISTERS.get(address)
