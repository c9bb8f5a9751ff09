"""
Listing Layout
==============

Column layout of disassembly lines and the listing header.

Every instruction line has the same shape:

    [hex field][mnemonic field];[cycle comment][NES comment]

The hex field is left-justified to 16 columns when the hex dump is on and
to 8 columns otherwise. The mnemonic field is always 16 columns. The
column widths and comment markers follow the classic dcc6502 layout, so
instruction lines line up with ones produced by that tool. The header text
and a few cycle counts differ.

Hex field templates (AAAA = address, OP = opcode, LO/HI = operand bytes):

=============  ===========  =================================================
style          no hex dump  hex dump (1 / 2 / 3 bytes)
=============  ===========  =================================================
default        $AAAA        $AAAA> OP:  /  $AAAA> OP LO:  /  $AAAA> OP LOHI:
apple          AAAA:        AAAA:OP     /  AAAA:OP LO     /  AAAA:OP LO HI
assembly only  (empty)      (empty)
=============  ===========  =================================================

Copyright (c) 2026 The disasm6502 Contributors
"""

from typing import Sequence

from disasm6502 import __version__, __url__
from disasm6502.config import DisassemblyOptions
from disasm6502.disassembler.cycles import CycleCount


HEX_FIELD_WIDTH = 16
ADDRESS_FIELD_WIDTH = 8
MNEMONIC_FIELD_WIDTH = 16

INVALID_MARKER = " INVALID OPCODE !!!"
INCOMPLETE_MARKER = " INCOMPLETE INSTRUCTION !!!"

HEADER_RULE = ";" + "-" * 75


def format_hex_field(address: int, raw_bytes: Sequence[int], options: DisassemblyOptions) -> str:
    """
    Build the address/bytes prefix of a line.

    Args:
        address: Address of the instruction's first byte
        raw_bytes: The bytes actually consumed (1-3)
        options: Rendering options

    Returns:
        The unpadded hex field text
    """
    if options.assembly_only:
        return ""

    if not options.hex_dump:
        if options.apple_style:
            return f"{address:04X}:"
        return f"${address:04X}"

    if options.apple_style:
        hex_bytes = " ".join(f"{b:02X}" for b in raw_bytes)
        return f"{address:04X}:{hex_bytes}"

    opcode, operand = raw_bytes[0], raw_bytes[1:]
    if operand:
        operand_hex = "".join(f"{b:02X}" for b in operand)
        return f"${address:04X}> {opcode:02X} {operand_hex}:"
    return f"${address:04X}> {opcode:02X}:"


def compose_line(hex_field: str, asm_text: str, options: DisassemblyOptions) -> str:
    """
    Pad the hex and mnemonic fields and add the comment separator.

    Comments are appended by the caller directly after the ";".
    """
    width = HEX_FIELD_WIDTH if options.hex_dump else ADDRESS_FIELD_WIDTH
    return f"{hex_field:<{width}}{asm_text:<{MNEMONIC_FIELD_WIDTH}};"


def format_cycle_comment(cycles: CycleCount) -> str:
    """Format a CycleCount as the " Cycles: N" comment."""
    return f" Cycles: {cycles}"


def format_platform_comment(description: str) -> str:
    """Format a NES register description as the " [NES] ..." comment."""
    return f" [NES] {description}"


# =============================================================================
# Header
# =============================================================================

def format_header(filename: str, size: int, options: DisassemblyOptions) -> list[str]:
    """
    Build the comment header printed before a listing.

    The last header line is an ORG directive laid out like an instruction
    line with an empty hex field, so assembly-only listings can be fed
    back to an assembler.

    Args:
        filename: Name shown in the FILENAME line
        size: Number of bytes being disassembled
        options: Rendering options (enabled features are listed)

    Returns:
        Header lines without trailing newlines
    """
    lines = [
        f"; Source generated by disasm6502 version {__version__}",
        f"; For more info, see {__url__}",
        f"; FILENAME: {filename}, File Size: ${size:04X} ({size})",
    ]
    if options.hex_dump:
        lines.append(";     -> Hex output enabled")
    if options.cycle_counting:
        lines.append(";     -> Cycle counting enabled")
    if options.nes_annotations:
        lines.append(";     -> NES mode enabled")
    if options.apple_style:
        lines.append(";     -> Apple II output enabled")
    lines.append(HEADER_RULE)
    lines.append(compose_line("", f"ORG ${options.origin:04X}", options))
    return lines
