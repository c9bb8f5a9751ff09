"""
MOS 6502 Instruction Set Definition
===================================

This module defines the complete NMOS 6502 instruction set as a flat,
opcode-indexed table: one immutable entry for each of the 256 possible
opcode bytes. The disassembler reads this table and nothing else to decide
what an opcode means, how many operand bytes follow it and how long it takes.

The 6502 is little-endian: 16-bit operands are stored low byte first.

Addressing Modes
----------------
The 6502 has thirteen addressing modes:

==================  =====  ==============  ==============================
Mode                Bytes  Syntax          Example
==================  =====  ==============  ==============================
IMPLIED             1      MNE             RTS        -> $60
ACCUMULATOR         1      MNE A           ASL A      -> $0A
IMMEDIATE           2      MNE #$XX        LDA #$10   -> $A9 $10
ZERO_PAGE           2      MNE $XX         LDA $10    -> $A5 $10
ZERO_PAGE_X         2      MNE $XX,X       LDA $10,X  -> $B5 $10
ZERO_PAGE_Y         2      MNE $XX,Y       LDX $10,Y  -> $B6 $10
INDEXED_INDIRECT_X  2      MNE ($XX,X)     LDA ($10,X) -> $A1 $10
INDIRECT_INDEXED_Y  2      MNE ($XX),Y     LDA ($10),Y -> $B1 $10
RELATIVE            2      MNE $XXXX       BNE $8010  -> $D0 $0E
ABSOLUTE            3      MNE $XXXX       JMP $8000  -> $4C $00 $80
ABSOLUTE_X          3      MNE $XXXX,X     LDA $2000,X -> $BD $00 $20
ABSOLUTE_Y          3      MNE $XXXX,Y     LDA $2000,Y -> $B9 $00 $20
INDIRECT_ABSOLUTE   3      MNE ($XXXX)     JMP ($FFFC) -> $6C $FC $FF
==================  =====  ==============  ==============================

Cycle Exceptions
----------------
Base cycle counts are for the common case. Two events add a cycle:

- PAGE_CROSS: an indexed effective address lands in another page, or a
  taken branch lands in another page.
- BRANCH_TAKEN: a conditional branch is taken.

Undefined Opcodes
-----------------
The 105 opcodes with no documented NMOS behaviour are present in the
table with ``valid=False`` and the mnemonic ``"???"``.

Reference
---------
- MOS MCS6500 Microcomputer Family Programming Manual, Appendix B
- http://www.6502.org/tutorials/6502opcodes.html

Copyright (c) 2026 The disasm6502 Contributors
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    The mode fixes the number of operand bytes and the textual template
    used when the instruction is rendered.
    """
    IMMEDIATE = auto()           # #$XX
    ABSOLUTE = auto()            # $XXXX
    ZERO_PAGE = auto()           # $XX
    IMPLIED = auto()             # no operand
    INDIRECT_ABSOLUTE = auto()   # ($XXXX), JMP only
    ABSOLUTE_X = auto()          # $XXXX,X
    ABSOLUTE_Y = auto()          # $XXXX,Y
    ZERO_PAGE_X = auto()         # $XX,X
    ZERO_PAGE_Y = auto()         # $XX,Y
    INDEXED_INDIRECT_X = auto()  # ($XX,X)
    INDIRECT_INDEXED_Y = auto()  # ($XX),Y
    RELATIVE = auto()            # signed 8-bit branch displacement
    ACCUMULATOR = auto()         # A

    @property
    def operand_size(self) -> int:
        """Number of operand bytes following the opcode (0, 1 or 2)."""
        return _OPERAND_SIZES[self]

    def __str__(self) -> str:
        """Return human-readable name for listings and JSON output."""
        return {
            AddressingMode.IMMEDIATE: "immediate",
            AddressingMode.ABSOLUTE: "absolute",
            AddressingMode.ZERO_PAGE: "zero page",
            AddressingMode.IMPLIED: "implied",
            AddressingMode.INDIRECT_ABSOLUTE: "indirect",
            AddressingMode.ABSOLUTE_X: "absolute,X",
            AddressingMode.ABSOLUTE_Y: "absolute,Y",
            AddressingMode.ZERO_PAGE_X: "zero page,X",
            AddressingMode.ZERO_PAGE_Y: "zero page,Y",
            AddressingMode.INDEXED_INDIRECT_X: "(indirect,X)",
            AddressingMode.INDIRECT_INDEXED_Y: "(indirect),Y",
            AddressingMode.RELATIVE: "relative",
            AddressingMode.ACCUMULATOR: "accumulator",
        }[self]


_OPERAND_SIZES = {
    AddressingMode.IMPLIED: 0,
    AddressingMode.ACCUMULATOR: 0,
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.INDEXED_INDIRECT_X: 1,
    AddressingMode.INDIRECT_INDEXED_Y: 1,
    AddressingMode.RELATIVE: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDIRECT_ABSOLUTE: 2,
}


class CycleException(Flag):
    """Conditions that may add a cycle to an instruction's base count."""
    NONE = 0
    PAGE_CROSS = auto()    # +1 when a page boundary is crossed
    BRANCH_TAKEN = auto()  # +1 when a conditional branch is taken


# =============================================================================
# Opcode Entry
# =============================================================================

@dataclass(frozen=True)
class OpcodeEntry:
    """
    Everything the disassembler knows about one opcode byte.

    Frozen so the table cannot be modified at runtime.

    Attributes:
        opcode: The opcode byte ($00-$FF)
        mnemonic: Three-letter mnemonic, or "???" for undefined opcodes
        mode: Addressing mode (IMPLIED placeholder for undefined opcodes)
        cycles: Base cycle count (0 for undefined opcodes)
        exceptions: Cycle exception flags
        valid: False for opcodes undefined on the NMOS 6502
    """
    opcode: int
    mnemonic: str
    mode: AddressingMode
    cycles: int
    exceptions: CycleException = CycleException.NONE
    valid: bool = True

    @property
    def operand_size(self) -> int:
        """Operand bytes following the opcode; 0 for undefined opcodes."""
        return self.mode.operand_size if self.valid else 0

    @property
    def size(self) -> int:
        """Total instruction size in bytes."""
        return 1 + self.operand_size

    def __repr__(self) -> str:
        if not self.valid:
            return f"OpcodeEntry(opcode=${self.opcode:02X}, invalid)"
        return (
            f"OpcodeEntry(opcode=${self.opcode:02X}, {self.mnemonic} {self.mode}, "
            f"cycles={self.cycles})"
        )


INVALID_MNEMONIC = "???"

_P = CycleException.PAGE_CROSS
_B = CycleException.PAGE_CROSS | CycleException.BRANCH_TAKEN
_0 = CycleException.NONE


# =============================================================================
# Documented Opcodes
# =============================================================================
# Key: opcode byte
# Value: (mnemonic, addressing mode, base cycles, cycle exceptions)
#
# Every opcode absent from this dict is undefined on the NMOS 6502.
# =============================================================================

_DOCUMENTED_OPCODES: dict[int, tuple[str, AddressingMode, int, CycleException]] = {
    # $0x
    0x00: ("BRK", AddressingMode.IMPLIED, 7, _0),
    0x01: ("ORA", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0x05: ("ORA", AddressingMode.ZERO_PAGE, 3, _0),
    0x06: ("ASL", AddressingMode.ZERO_PAGE, 5, _0),
    0x08: ("PHP", AddressingMode.IMPLIED, 3, _0),
    0x09: ("ORA", AddressingMode.IMMEDIATE, 2, _0),
    0x0A: ("ASL", AddressingMode.ACCUMULATOR, 2, _0),
    0x0D: ("ORA", AddressingMode.ABSOLUTE, 4, _0),
    0x0E: ("ASL", AddressingMode.ABSOLUTE, 6, _0),

    # $1x
    0x10: ("BPL", AddressingMode.RELATIVE, 2, _B),
    0x11: ("ORA", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0x15: ("ORA", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x16: ("ASL", AddressingMode.ZERO_PAGE_X, 6, _0),
    0x18: ("CLC", AddressingMode.IMPLIED, 2, _0),
    0x19: ("ORA", AddressingMode.ABSOLUTE_Y, 4, _P),
    0x1D: ("ORA", AddressingMode.ABSOLUTE_X, 4, _P),
    0x1E: ("ASL", AddressingMode.ABSOLUTE_X, 7, _0),

    # $2x
    0x20: ("JSR", AddressingMode.ABSOLUTE, 6, _0),
    0x21: ("AND", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0x24: ("BIT", AddressingMode.ZERO_PAGE, 3, _0),
    0x25: ("AND", AddressingMode.ZERO_PAGE, 3, _0),
    0x26: ("ROL", AddressingMode.ZERO_PAGE, 5, _0),
    0x28: ("PLP", AddressingMode.IMPLIED, 4, _0),
    0x29: ("AND", AddressingMode.IMMEDIATE, 2, _0),
    0x2A: ("ROL", AddressingMode.ACCUMULATOR, 2, _0),
    0x2C: ("BIT", AddressingMode.ABSOLUTE, 4, _0),
    0x2D: ("AND", AddressingMode.ABSOLUTE, 4, _0),
    0x2E: ("ROL", AddressingMode.ABSOLUTE, 6, _0),

    # $3x
    0x30: ("BMI", AddressingMode.RELATIVE, 2, _B),
    0x31: ("AND", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0x35: ("AND", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x36: ("ROL", AddressingMode.ZERO_PAGE_X, 6, _0),
    0x38: ("SEC", AddressingMode.IMPLIED, 2, _0),
    0x39: ("AND", AddressingMode.ABSOLUTE_Y, 4, _P),
    0x3D: ("AND", AddressingMode.ABSOLUTE_X, 4, _P),
    0x3E: ("ROL", AddressingMode.ABSOLUTE_X, 7, _0),

    # $4x
    0x40: ("RTI", AddressingMode.IMPLIED, 6, _0),
    0x41: ("EOR", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0x45: ("EOR", AddressingMode.ZERO_PAGE, 3, _0),
    0x46: ("LSR", AddressingMode.ZERO_PAGE, 5, _0),
    0x48: ("PHA", AddressingMode.IMPLIED, 3, _0),
    0x49: ("EOR", AddressingMode.IMMEDIATE, 2, _0),
    0x4A: ("LSR", AddressingMode.ACCUMULATOR, 2, _0),
    0x4C: ("JMP", AddressingMode.ABSOLUTE, 3, _0),
    0x4D: ("EOR", AddressingMode.ABSOLUTE, 4, _0),
    0x4E: ("LSR", AddressingMode.ABSOLUTE, 6, _0),

    # $5x
    0x50: ("BVC", AddressingMode.RELATIVE, 2, _B),
    0x51: ("EOR", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0x55: ("EOR", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x56: ("LSR", AddressingMode.ZERO_PAGE_X, 6, _0),
    0x58: ("CLI", AddressingMode.IMPLIED, 2, _0),
    0x59: ("EOR", AddressingMode.ABSOLUTE_Y, 4, _P),
    0x5D: ("EOR", AddressingMode.ABSOLUTE_X, 4, _P),
    0x5E: ("LSR", AddressingMode.ABSOLUTE_X, 7, _0),

    # $6x
    0x60: ("RTS", AddressingMode.IMPLIED, 6, _0),
    0x61: ("ADC", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0x65: ("ADC", AddressingMode.ZERO_PAGE, 3, _0),
    0x66: ("ROR", AddressingMode.ZERO_PAGE, 5, _0),
    0x68: ("PLA", AddressingMode.IMPLIED, 4, _0),
    0x69: ("ADC", AddressingMode.IMMEDIATE, 2, _0),
    0x6A: ("ROR", AddressingMode.ACCUMULATOR, 2, _0),
    0x6C: ("JMP", AddressingMode.INDIRECT_ABSOLUTE, 5, _0),
    0x6D: ("ADC", AddressingMode.ABSOLUTE, 4, _0),
    0x6E: ("ROR", AddressingMode.ABSOLUTE, 6, _0),

    # $7x
    0x70: ("BVS", AddressingMode.RELATIVE, 2, _B),
    0x71: ("ADC", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0x75: ("ADC", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x76: ("ROR", AddressingMode.ZERO_PAGE_X, 6, _0),
    0x78: ("SEI", AddressingMode.IMPLIED, 2, _0),
    0x79: ("ADC", AddressingMode.ABSOLUTE_Y, 4, _P),
    0x7D: ("ADC", AddressingMode.ABSOLUTE_X, 4, _P),
    0x7E: ("ROR", AddressingMode.ABSOLUTE_X, 7, _0),

    # $8x
    0x81: ("STA", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0x84: ("STY", AddressingMode.ZERO_PAGE, 3, _0),
    0x85: ("STA", AddressingMode.ZERO_PAGE, 3, _0),
    0x86: ("STX", AddressingMode.ZERO_PAGE, 3, _0),
    0x88: ("DEY", AddressingMode.IMPLIED, 2, _0),
    0x8A: ("TXA", AddressingMode.IMPLIED, 2, _0),
    0x8C: ("STY", AddressingMode.ABSOLUTE, 4, _0),
    0x8D: ("STA", AddressingMode.ABSOLUTE, 4, _0),
    0x8E: ("STX", AddressingMode.ABSOLUTE, 4, _0),

    # $9x - indexed stores always take the extra cycle, so no exception
    0x90: ("BCC", AddressingMode.RELATIVE, 2, _B),
    0x91: ("STA", AddressingMode.INDIRECT_INDEXED_Y, 6, _0),
    0x94: ("STY", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x95: ("STA", AddressingMode.ZERO_PAGE_X, 4, _0),
    0x96: ("STX", AddressingMode.ZERO_PAGE_Y, 4, _0),
    0x98: ("TYA", AddressingMode.IMPLIED, 2, _0),
    0x99: ("STA", AddressingMode.ABSOLUTE_Y, 5, _0),
    0x9A: ("TXS", AddressingMode.IMPLIED, 2, _0),
    0x9D: ("STA", AddressingMode.ABSOLUTE_X, 5, _0),

    # $Ax
    0xA0: ("LDY", AddressingMode.IMMEDIATE, 2, _0),
    0xA1: ("LDA", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0xA2: ("LDX", AddressingMode.IMMEDIATE, 2, _0),
    0xA4: ("LDY", AddressingMode.ZERO_PAGE, 3, _0),
    0xA5: ("LDA", AddressingMode.ZERO_PAGE, 3, _0),
    0xA6: ("LDX", AddressingMode.ZERO_PAGE, 3, _0),
    0xA8: ("TAY", AddressingMode.IMPLIED, 2, _0),
    0xA9: ("LDA", AddressingMode.IMMEDIATE, 2, _0),
    0xAA: ("TAX", AddressingMode.IMPLIED, 2, _0),
    0xAC: ("LDY", AddressingMode.ABSOLUTE, 4, _0),
    0xAD: ("LDA", AddressingMode.ABSOLUTE, 4, _0),
    0xAE: ("LDX", AddressingMode.ABSOLUTE, 4, _0),

    # $Bx
    0xB0: ("BCS", AddressingMode.RELATIVE, 2, _B),
    0xB1: ("LDA", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0xB4: ("LDY", AddressingMode.ZERO_PAGE_X, 4, _0),
    0xB5: ("LDA", AddressingMode.ZERO_PAGE_X, 4, _0),
    0xB6: ("LDX", AddressingMode.ZERO_PAGE_Y, 4, _0),
    0xB8: ("CLV", AddressingMode.IMPLIED, 2, _0),
    0xB9: ("LDA", AddressingMode.ABSOLUTE_Y, 4, _P),
    0xBA: ("TSX", AddressingMode.IMPLIED, 2, _0),
    0xBC: ("LDY", AddressingMode.ABSOLUTE_X, 4, _P),
    0xBD: ("LDA", AddressingMode.ABSOLUTE_X, 4, _P),
    0xBE: ("LDX", AddressingMode.ABSOLUTE_Y, 4, _P),

    # $Cx
    0xC0: ("CPY", AddressingMode.IMMEDIATE, 2, _0),
    0xC1: ("CMP", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0xC4: ("CPY", AddressingMode.ZERO_PAGE, 3, _0),
    0xC5: ("CMP", AddressingMode.ZERO_PAGE, 3, _0),
    0xC6: ("DEC", AddressingMode.ZERO_PAGE, 5, _0),
    0xC8: ("INY", AddressingMode.IMPLIED, 2, _0),
    0xC9: ("CMP", AddressingMode.IMMEDIATE, 2, _0),
    0xCA: ("DEX", AddressingMode.IMPLIED, 2, _0),
    0xCC: ("CPY", AddressingMode.ABSOLUTE, 4, _0),
    0xCD: ("CMP", AddressingMode.ABSOLUTE, 4, _0),
    0xCE: ("DEC", AddressingMode.ABSOLUTE, 6, _0),

    # $Dx
    0xD0: ("BNE", AddressingMode.RELATIVE, 2, _B),
    0xD1: ("CMP", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0xD5: ("CMP", AddressingMode.ZERO_PAGE_X, 4, _0),
    0xD6: ("DEC", AddressingMode.ZERO_PAGE_X, 6, _0),
    0xD8: ("CLD", AddressingMode.IMPLIED, 2, _0),
    0xD9: ("CMP", AddressingMode.ABSOLUTE_Y, 4, _P),
    0xDD: ("CMP", AddressingMode.ABSOLUTE_X, 4, _P),
    0xDE: ("DEC", AddressingMode.ABSOLUTE_X, 7, _0),

    # $Ex
    0xE0: ("CPX", AddressingMode.IMMEDIATE, 2, _0),
    0xE1: ("SBC", AddressingMode.INDEXED_INDIRECT_X, 6, _0),
    0xE4: ("CPX", AddressingMode.ZERO_PAGE, 3, _0),
    0xE5: ("SBC", AddressingMode.ZERO_PAGE, 3, _0),
    0xE6: ("INC", AddressingMode.ZERO_PAGE, 5, _0),
    0xE8: ("INX", AddressingMode.IMPLIED, 2, _0),
    0xE9: ("SBC", AddressingMode.IMMEDIATE, 2, _0),
    0xEA: ("NOP", AddressingMode.IMPLIED, 2, _0),
    0xEC: ("CPX", AddressingMode.ABSOLUTE, 4, _0),
    0xED: ("SBC", AddressingMode.ABSOLUTE, 4, _0),
    0xEE: ("INC", AddressingMode.ABSOLUTE, 6, _0),

    # $Fx
    0xF0: ("BEQ", AddressingMode.RELATIVE, 2, _B),
    0xF1: ("SBC", AddressingMode.INDIRECT_INDEXED_Y, 5, _P),
    0xF5: ("SBC", AddressingMode.ZERO_PAGE_X, 4, _0),
    0xF6: ("INC", AddressingMode.ZERO_PAGE_X, 6, _0),
    0xF8: ("SED", AddressingMode.IMPLIED, 2, _0),
    0xF9: ("SBC", AddressingMode.ABSOLUTE_Y, 4, _P),
    0xFD: ("SBC", AddressingMode.ABSOLUTE_X, 4, _P),
    0xFE: ("INC", AddressingMode.ABSOLUTE_X, 7, _0),
}


def _build_opcode_table() -> tuple[OpcodeEntry, ...]:
    """Expand the documented opcodes into a dense 256-entry tuple."""
    table = []
    for opcode in range(256):
        if opcode in _DOCUMENTED_OPCODES:
            mnemonic, mode, cycles, exceptions = _DOCUMENTED_OPCODES[opcode]
            table.append(OpcodeEntry(opcode, mnemonic, mode, cycles, exceptions))
        else:
            table.append(
                OpcodeEntry(opcode, INVALID_MNEMONIC, AddressingMode.IMPLIED, 0, valid=False)
            )
    return tuple(table)


# Indexed by opcode byte. A tuple so it cannot grow, shrink or be reassigned
# element-wise.
OPCODE_TABLE: tuple[OpcodeEntry, ...] = _build_opcode_table()

MNEMONICS: frozenset[str] = frozenset(
    entry.mnemonic for entry in OPCODE_TABLE if entry.valid
)

INVALID_OPCODES: frozenset[int] = frozenset(
    entry.opcode for entry in OPCODE_TABLE if not entry.valid
)

BRANCH_INSTRUCTIONS: frozenset[str] = frozenset(
    entry.mnemonic for entry in OPCODE_TABLE
    if entry.valid and entry.mode is AddressingMode.RELATIVE
)


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup(opcode: int) -> OpcodeEntry:
    """
    Get the table entry for an opcode byte.

    Total over $00-$FF: undefined opcodes return an entry with
    ``valid=False`` rather than raising.

    Args:
        opcode: Opcode byte value

    Returns:
        The OpcodeEntry for this byte

    Raises:
        ValueError: If opcode is not in the range 0-255
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode must be 0-255, got {opcode}")
    return OPCODE_TABLE[opcode]


def is_valid_opcode(opcode: int) -> bool:
    """Check whether an opcode byte is a documented 6502 instruction."""
    return lookup(opcode).valid


def find_opcode(mnemonic: str, mode: AddressingMode) -> int | None:
    """
    Find the opcode byte encoding a mnemonic in a given addressing mode.

    This is the reverse of lookup() and is mainly useful for building
    test programs.

    Args:
        mnemonic: Instruction mnemonic (case-insensitive)
        mode: Addressing mode

    Returns:
        The opcode byte, or None if the combination does not exist
    """
    mnemonic = mnemonic.upper()
    for entry in OPCODE_TABLE:
        if entry.valid and entry.mnemonic == mnemonic and entry.mode is mode:
            return entry.opcode
    return None
