"""
disasm6502 - Disassembler and Cycle Counter for the MOS 6502
============================================================

This package turns raw 6502 machine code into an assembly listing, with
optional hex dump, cycle-count annotations and NES register comments.

Main Components
---------------
- **cpu**: the 256-entry opcode table and addressing modes
- **disassembler**: the decode/render engine (decode_one)
- **image**: loading input bytes into the 64KiB address space
- **config**: the DisassemblyOptions bundle
- **cli**: the dasm6502 command-line tool

Quick Start
-----------
Disassemble a buffer:
    >>> from disasm6502 import MOS6502Disassembler
    >>> disasm = MOS6502Disassembler()
    >>> print(disasm.disassemble_to_text(bytes([0x4C, 0x00, 0x80]), 0x8000))
    $8000   JMP $8000       ;

Decode one instruction at a time:
    >>> from disasm6502 import MemoryImage, decode_one
    >>> image = MemoryImage(bytes([0xA9, 0x10]), origin=0xC000)
    >>> decode_one(image, 0xC000).consumed
    2

Or use the command-line tool:
    $ dasm6502 -o 0xC000 -d -c game.prg

Copyright (c) 2026 The disasm6502 Contributors
"""

__version__ = "2.1.0"
__author__ = "disasm6502 contributors"
__url__ = "https://github.com/disasm6502/disasm6502"

# =============================================================================
# Public API Exports
# =============================================================================

from disasm6502.errors import (
    Disasm6502Error,
    ConfigError,
    ImageError,
    DisassemblerError,
    AddressRangeError,
    OperandOutOfRangeError,
)
from disasm6502.config import DisassemblyOptions
from disasm6502.cpu import AddressingMode, CycleException, OpcodeEntry, OPCODE_TABLE, lookup
from disasm6502.image import MemoryImage, LoadedImage, load_image, load_file
from disasm6502.disassembler import (
    MOS6502Disassembler,
    DisassembledInstruction,
    DecodeResult,
    CycleCount,
    decode_one,
    iter_decode,
    cycles_for,
    platform_comment,
    format_header,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "Disasm6502Error",
    "ConfigError",
    "ImageError",
    "DisassemblerError",
    "AddressRangeError",
    "OperandOutOfRangeError",
    # Configuration
    "DisassemblyOptions",
    # Opcode table
    "AddressingMode",
    "CycleException",
    "OpcodeEntry",
    "OPCODE_TABLE",
    "lookup",
    # Memory images
    "MemoryImage",
    "LoadedImage",
    "load_image",
    "load_file",
    # Disassembler
    "MOS6502Disassembler",
    "DisassembledInstruction",
    "DecodeResult",
    "CycleCount",
    "decode_one",
    "iter_decode",
    "cycles_for",
    "platform_comment",
    "format_header",
]
