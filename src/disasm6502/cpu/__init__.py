"""
disasm6502 CPU Package
======================

CPU architecture definitions for the MOS 6502.

Modules:
    mos6502: The 256-entry opcode table, addressing modes, cycle exception
             flags and lookup helpers.

The table is the single source of truth for the decoder: mnemonic,
operand width, base timing and validity of every opcode byte all come
from here.

Usage:
    from disasm6502.cpu import AddressingMode, lookup

    entry = lookup(0xA9)
    entry.mnemonic   # "LDA"
    entry.mode       # AddressingMode.IMMEDIATE

Copyright (c) 2026 The disasm6502 Contributors
"""

# =============================================================================
# Public API Exports
# =============================================================================

from disasm6502.cpu.mos6502 import (
    # Core types
    AddressingMode,
    CycleException,
    OpcodeEntry,
    # Master opcode table
    OPCODE_TABLE,
    INVALID_MNEMONIC,
    # Instruction set reference sets
    MNEMONICS,
    INVALID_OPCODES,
    BRANCH_INSTRUCTIONS,
    # Lookup functions
    lookup,
    is_valid_opcode,
    find_opcode,
)

__all__ = [
    # Core types
    "AddressingMode",
    "CycleException",
    "OpcodeEntry",
    # Master opcode table
    "OPCODE_TABLE",
    "INVALID_MNEMONIC",
    # Instruction set reference sets
    "MNEMONICS",
    "INVALID_OPCODES",
    "BRANCH_INSTRUCTIONS",
    # Lookup functions
    "lookup",
    "is_valid_opcode",
    "find_opcode",
]
