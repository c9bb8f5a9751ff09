"""
disasm6502 Error Hierarchy
==========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from Disasm6502Error, allowing callers to catch
every package error with a single except clause if desired.

Exception Hierarchy
-------------------
Disasm6502Error (base)
├── ConfigError - invalid disassembly option values
├── ImageError - invalid memory image parameters (origin out of range)
└── DisassemblerError (decode-related)
    ├── AddressRangeError - pc outside the loaded image
    └── OperandOutOfRangeError - operand bytes past the end of the image

Invalid opcodes are deliberately absent from this list: an undefined
opcode byte is a normal, renderable decode result (".byte $XX").

OperandOutOfRangeError is raised by the memory image and handled inside
the decoder, which turns it into a truncated instruction. Callers only
ever see AddressRangeError from the decode path.

Copyright (c) 2026 The disasm6502 Contributors
"""


# =============================================================================
# Base Exception Class
# =============================================================================

class Disasm6502Error(Exception):
    """
    Base exception for all disasm6502 errors.

        try:
            image = load_file("game.nes", origin=0x8000)
        except Disasm6502Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Configuration and Image Exceptions
# =============================================================================

class ConfigError(Disasm6502Error):
    """
    Invalid value in a DisassemblyOptions bundle.

    Attributes:
        option: Name of the offending option
        value: The rejected value
    """

    def __init__(self, option: str, value: object, reason: str):
        self.option = option
        self.value = value
        super().__init__(f"invalid value for {option!r}: {value!r} ({reason})")


class ImageError(Disasm6502Error):
    """Memory image cannot be built from the given parameters."""
    pass


# =============================================================================
# Disassembler Exceptions
# =============================================================================

class DisassemblerError(Disasm6502Error):
    """Base exception for errors raised on the decode path."""
    pass


class AddressRangeError(DisassemblerError):
    """
    Decode requested at an address the image does not contain.

    This is a caller contract violation: the driver must only pass
    program counter values inside [start, end) of the image.

    Attributes:
        address: The requested program counter
        start: First valid address of the image
        end: One past the last valid address of the image
    """

    def __init__(self, address: int, start: int, end: int):
        self.address = address
        self.start = start
        self.end = end
        if start == end:
            message = f"address ${address:04X} requested from an empty image"
        else:
            message = (
                f"address ${address:04X} outside image range "
                f"${start:04X}-${end - 1:04X}"
            )
        super().__init__(message)


class OperandOutOfRangeError(DisassemblerError):
    """
    Operand fetch would read past the end of the image.

    Attributes:
        address: Address of the first operand byte requested
        count: Number of bytes requested
        available: Bytes actually present from address to the image end
    """

    def __init__(self, address: int, count: int, available: int):
        self.address = address
        self.count = count
        self.available = available
        message = (
            f"operand fetch of {count} byte(s) at ${address:04X} "
            f"exceeds image ({available} available)"
        )
        super().__init__(message)
