"""
MOS 6502 Disassembler
=====================

Decodes 6502 machine code one instruction at a time and renders each
instruction as a listing line.

Decoding is a pure function of (image, pc, options): decode_one() reads
the opcode at pc, looks it up in the opcode table, fetches the operand
bytes the addressing mode calls for and returns a DecodeResult holding the
number of bytes consumed, the next pc and the rendered line. Nothing is
kept between calls, so a driver simply loops until pc reaches the end of
the image:

    pc = image.start
    while pc < image.end:
        result = decode_one(image, pc, options)
        print(result.line)
        pc = result.next_pc

Undefined opcodes are not errors. They consume one byte and render as a
".byte $XX" directive followed by an INVALID OPCODE marker.

An instruction whose operand runs past the end of the image consumes only
the bytes that are present. It renders as a ".byte" directive listing
those bytes followed by an INCOMPLETE INSTRUCTION marker, and carries
truncated=True. Missing bytes are never invented.

Usage:
    disasm = MOS6502Disassembler(DisassemblyOptions(hex_dump=True))

    # Decode a whole buffer
    instructions = disasm.disassemble(code, start_address=0x8000)

    # Decode a single instruction
    result = decode_one(MemoryImage(code, 0x8000), 0x8000)
    print(result.line)

Copyright (c) 2026 The disasm6502 Contributors
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from disasm6502.config import DisassemblyOptions
from disasm6502.cpu import AddressingMode, OpcodeEntry, lookup
from disasm6502.disassembler.cycles import CycleCount, cycles_for
from disasm6502.disassembler.listing import (
    INCOMPLETE_MARKER,
    INVALID_MARKER,
    compose_line,
    format_cycle_comment,
    format_hex_field,
    format_platform_comment,
)
from disasm6502.disassembler.nes import platform_comment
from disasm6502.errors import AddressRangeError, OperandOutOfRangeError
from disasm6502.image import MemoryImage, load_image

logger = logging.getLogger(__name__)


# Modes whose 16-bit operand is a plain data address at render time
ANNOTATED_MODES = frozenset({
    AddressingMode.ABSOLUTE,
    AddressingMode.ABSOLUTE_X,
    AddressingMode.ABSOLUTE_Y,
})


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single decoded 6502 instruction.

    Attributes:
        address: Memory address of the instruction
        opcode: The opcode byte
        mnemonic: The instruction mnemonic (e.g. "LDA"), "???" when invalid
        mode: The addressing mode
        operand_bytes: Raw operand bytes (may be empty)
        operand_str: Formatted operand (e.g. "#$10", "($20),Y")
        size: Bytes consumed by this instruction
        raw_bytes: All bytes consumed
        target: Operand address (branch target for relative mode), if any
        cycles: Cycle annotation, None for invalid or truncated instructions
        platform_note: NES register description for the operand address
        valid: False for undefined opcodes
        truncated: True when operand bytes ran past the end of the image
    """
    address: int
    opcode: int
    mnemonic: str
    mode: AddressingMode
    operand_bytes: bytes
    operand_str: str
    size: int
    raw_bytes: bytes
    target: Optional[int] = None
    cycles: Optional[CycleCount] = None
    platform_note: Optional[str] = None
    valid: bool = True
    truncated: bool = False

    @property
    def next_address(self) -> int:
        """Address following this instruction (may be $10000 at the top of memory)."""
        return self.address + self.size

    @property
    def asm_text(self) -> str:
        """Text of the mnemonic field, e.g. "JMP $8000" or ".byte $02"."""
        if not self.valid or self.truncated:
            return ".byte " + ",".join(f"${b:02X}" for b in self.raw_bytes)
        if self.operand_str:
            return f"{self.mnemonic} {self.operand_str}"
        return self.mnemonic

    def render(self, options: DisassemblyOptions) -> str:
        """
        Render the listing line for this instruction.

        Cycle and NES comments are included only when present on the
        instruction; decode_one() fills them according to the options.
        """
        hex_field = format_hex_field(self.address, self.raw_bytes, options)
        line = compose_line(hex_field, self.asm_text, options)

        if not self.valid:
            return line + INVALID_MARKER
        if self.truncated:
            return line + INCOMPLETE_MARKER

        if self.cycles is not None:
            line += format_cycle_comment(self.cycles)
        if self.platform_note is not None:
            line += format_platform_comment(self.platform_note)
        return line

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": f"${self.address:04X}",
            "address_int": self.address,
            "opcode": f"${self.opcode:02X}",
            "mnemonic": self.mnemonic,
            "mode": str(self.mode),
            "operand": self.operand_str,
            "text": self.asm_text,
            "size": self.size,
            "bytes": [f"${b:02X}" for b in self.raw_bytes],
            "target": f"${self.target:04X}" if self.target is not None else None,
            "cycles": str(self.cycles) if self.cycles is not None else None,
            "nes": self.platform_note,
            "valid": self.valid,
            "truncated": self.truncated,
        }


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of one decode_one() call.

    Attributes:
        consumed: Number of bytes consumed (1-3)
        next_pc: Address of the next instruction
        line: Rendered listing line
        instruction: The decoded instruction the line was rendered from
    """
    consumed: int
    next_pc: int
    line: str
    instruction: DisassembledInstruction


# =============================================================================
# Operand Decoding
# =============================================================================

def branch_target(pc: int, displacement: int) -> int:
    """
    Resolve a relative branch.

    The displacement is a two's-complement byte measured from the address
    after the 2-byte branch instruction.

    Args:
        pc: Address of the branch opcode
        displacement: Raw operand byte ($00-$FF)

    Returns:
        16-bit target address
    """
    target = pc + 2
    if displacement > 0x7F:
        target -= (~displacement & 0x7F) + 1
    else:
        target += displacement & 0x7F
    return target & 0xFFFF


def format_operand(entry: OpcodeEntry, operand: bytes, pc: int) -> tuple[str, Optional[int]]:
    """
    Format the operand of a valid instruction.

    Args:
        entry: Opcode table entry
        operand: Operand bytes (length matches the addressing mode)
        pc: Address of the opcode byte

    Returns:
        Tuple of (operand_string, operand_address_or_None)
    """
    mode = entry.mode

    if mode is AddressingMode.IMPLIED:
        return "", None
    if mode is AddressingMode.ACCUMULATOR:
        return "A", None

    if mode.operand_size == 1:
        value = operand[0]
        if mode is AddressingMode.IMMEDIATE:
            return f"#${value:02X}", None
        if mode is AddressingMode.ZERO_PAGE:
            return f"${value:02X}", value
        if mode is AddressingMode.ZERO_PAGE_X:
            return f"${value:02X},X", value
        if mode is AddressingMode.ZERO_PAGE_Y:
            return f"${value:02X},Y", value
        if mode is AddressingMode.INDEXED_INDIRECT_X:
            return f"(${value:02X},X)", value
        if mode is AddressingMode.INDIRECT_INDEXED_Y:
            return f"(${value:02X}),Y", value
        if mode is AddressingMode.RELATIVE:
            target = branch_target(pc, value)
            return f"${target:04X}", target

    # 16-bit operands are little-endian
    word = operand[0] | (operand[1] << 8)
    if mode is AddressingMode.ABSOLUTE:
        return f"${word:04X}", word
    if mode is AddressingMode.ABSOLUTE_X:
        return f"${word:04X},X", word
    if mode is AddressingMode.ABSOLUTE_Y:
        return f"${word:04X},Y", word
    if mode is AddressingMode.INDIRECT_ABSOLUTE:
        return f"(${word:04X})", word

    raise AssertionError(f"unhandled addressing mode {mode!r}")


# =============================================================================
# Decoding
# =============================================================================

def decode_instruction(
    image: MemoryImage,
    pc: int,
    options: Optional[DisassemblyOptions] = None,
) -> DisassembledInstruction:
    """
    Decode the instruction at pc without rendering it.

    Args:
        image: Memory to decode from
        pc: Address of the opcode byte
        options: Options deciding which annotations are computed

    Returns:
        DisassembledInstruction

    Raises:
        AddressRangeError: If pc is outside the image
    """
    if options is None:
        options = DisassemblyOptions()

    opcode = image.read(pc)
    entry = lookup(opcode)

    if not entry.valid:
        logger.debug(f"Invalid opcode ${opcode:02X} at ${pc:04X}")
        return DisassembledInstruction(
            address=pc,
            opcode=opcode,
            mnemonic=entry.mnemonic,
            mode=entry.mode,
            operand_bytes=b"",
            operand_str="",
            size=1,
            raw_bytes=bytes([opcode]),
            valid=False,
        )

    try:
        operand = image.fetch(pc + 1, entry.operand_size)
    except OperandOutOfRangeError as e:
        logger.debug(f"Incomplete {entry.mnemonic} at ${pc:04X}: {e}")
        partial = image.available(pc)
        return DisassembledInstruction(
            address=pc,
            opcode=opcode,
            mnemonic=entry.mnemonic,
            mode=entry.mode,
            operand_bytes=partial[1:],
            operand_str="???",
            size=len(partial),
            raw_bytes=partial,
            truncated=True,
        )

    operand_str, target = format_operand(entry, operand, pc)
    size = entry.size

    cycles = None
    if options.cycle_counting:
        cycles = cycles_for(entry, pc + size, target if target is not None else 0)

    note = None
    if options.nes_annotations and entry.mode in ANNOTATED_MODES:
        note = platform_comment(target)

    return DisassembledInstruction(
        address=pc,
        opcode=opcode,
        mnemonic=entry.mnemonic,
        mode=entry.mode,
        operand_bytes=operand,
        operand_str=operand_str,
        size=size,
        raw_bytes=bytes([opcode]) + operand,
        target=target,
        cycles=cycles,
        platform_note=note,
    )


def decode_one(
    image: MemoryImage,
    pc: int,
    options: Optional[DisassemblyOptions] = None,
) -> DecodeResult:
    """
    Decode and render the instruction at pc.

    Args:
        image: Memory to decode from
        pc: Address of the opcode byte; must lie inside the image
        options: Rendering options (defaults to DisassemblyOptions())

    Returns:
        DecodeResult with consumed byte count, next pc and rendered line

    Raises:
        AddressRangeError: If pc is outside the image
    """
    if options is None:
        options = DisassemblyOptions()

    instr = decode_instruction(image, pc, options)
    return DecodeResult(
        consumed=instr.size,
        next_pc=instr.next_address,
        line=instr.render(options),
        instruction=instr,
    )


def iter_decode(
    image: MemoryImage,
    options: Optional[DisassemblyOptions] = None,
    start: Optional[int] = None,
) -> Iterator[DecodeResult]:
    """
    Decode every instruction from start (default: image start) to the end.

    Raises:
        AddressRangeError: If start is outside a non-empty image
    """
    pc = image.start if start is None else start
    if start is not None and pc not in image:
        raise AddressRangeError(pc, image.start, image.end)
    while pc < image.end:
        result = decode_one(image, pc, options)
        yield result
        pc = result.next_pc


# =============================================================================
# MOS 6502 Disassembler
# =============================================================================

class MOS6502Disassembler:
    """
    Convenience front end over decode_one() for whole buffers.

    Attributes:
        options: Rendering options used for every decode
    """

    def __init__(self, options: Optional[DisassemblyOptions] = None):
        """
        Initialize the disassembler.

        Args:
            options: Rendering options. Defaults to DisassemblyOptions().
        """
        self.options = options or DisassemblyOptions()

    def decode_one(self, image: MemoryImage, pc: int) -> DecodeResult:
        """Decode the instruction at pc with this disassembler's options."""
        return decode_one(image, pc, self.options)

    def disassemble(
        self,
        data: bytes,
        start_address: Optional[int] = None,
        count: Optional[int] = None,
        max_bytes: Optional[int] = None,
    ) -> List[DisassembledInstruction]:
        """
        Disassemble multiple instructions from a byte buffer.

        Args:
            data: Machine code bytes
            start_address: Address of data[0] (default: options.origin)
            count: Maximum number of instructions (None = all)
            max_bytes: Maximum number of bytes to process (None = all)

        Returns:
            List of DisassembledInstruction objects
        """
        image = self._image_for(data, start_address, max_bytes)
        result = []
        for decoded in iter_decode(image, self.options):
            if count is not None and len(result) >= count:
                break
            result.append(decoded.instruction)
        return result

    def disassemble_lines(self, image: MemoryImage) -> Iterator[str]:
        """Yield the rendered line of every instruction in the image."""
        for result in iter_decode(image, self.options):
            yield result.line

    def disassemble_to_text(
        self,
        data: bytes,
        start_address: Optional[int] = None,
        count: Optional[int] = None,
    ) -> str:
        """
        Disassemble and return the listing as one string.

        Args:
            data: Machine code bytes
            start_address: Address of data[0] (default: options.origin)
            count: Maximum number of instructions

        Returns:
            Multi-line string, one instruction per line
        """
        instructions = self.disassemble(data, start_address, count)
        return "\n".join(instr.render(self.options) for instr in instructions)

    def _image_for(
        self,
        data: bytes,
        start_address: Optional[int],
        max_bytes: Optional[int],
    ) -> MemoryImage:
        origin = self.options.origin if start_address is None else start_address
        limit = self.options.max_bytes if max_bytes is None else max_bytes
        return load_image(data, origin=origin, max_bytes=limit).image
