"""
disasm6502 Disassembler Module
==============================

This module provides the MOS 6502 decode-and-render engine:

- mos6502: decode_one(), iter_decode() and the MOS6502Disassembler front end
- cycles: cycle-count annotations
- nes: NES I/O register annotations
- listing: line layout and listing header

Usage:
    from disasm6502.disassembler import MOS6502Disassembler, decode_one

    disasm = MOS6502Disassembler()
    instructions = disasm.disassemble(code, start_address=0x8000)

Copyright (c) 2026 The disasm6502 Contributors
"""

from .mos6502 import (
    MOS6502Disassembler,
    DisassembledInstruction,
    DecodeResult,
    branch_target,
    decode_instruction,
    decode_one,
    iter_decode,
)
from .cycles import CycleCount, cycles_for
from .nes import NES_REGISTERS, platform_comment
from .listing import format_header

__all__ = [
    "MOS6502Disassembler",
    "DisassembledInstruction",
    "DecodeResult",
    "branch_target",
    "decode_instruction",
    "decode_one",
    "iter_decode",
    "CycleCount",
    "cycles_for",
    "NES_REGISTERS",
    "platform_comment",
    "format_header",
]
