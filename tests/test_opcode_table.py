"""
Unit Tests for the 6502 Opcode Table
====================================

Checks the 256-entry opcode table against the documented NMOS 6502
instruction set:
- Exactly 151 documented opcodes, the other 105 undefined
- Mnemonic, addressing mode and size of representative opcodes
- Base cycle counts and cycle exception flags
- Reference matrices for mnemonic, addressing mode and base cycles
- Decoding of every documented opcode
- Lookup helpers (lookup, is_valid_opcode, find_opcode)

Copyright (c) 2026 The disasm6502 Contributors
"""

import pytest

from disasm6502 import MemoryImage, decode_one
from disasm6502.cpu import (
    AddressingMode,
    BRANCH_INSTRUCTIONS,
    CycleException,
    INVALID_MNEMONIC,
    INVALID_OPCODES,
    MNEMONICS,
    OPCODE_TABLE,
    find_opcode,
    is_valid_opcode,
    lookup,
)


# Documented NMOS 6502 opcodes, one row per high nibble
DOCUMENTED = {
    0x00, 0x01, 0x05, 0x06, 0x08, 0x09, 0x0A, 0x0D, 0x0E,
    0x10, 0x11, 0x15, 0x16, 0x18, 0x19, 0x1D, 0x1E,
    0x20, 0x21, 0x24, 0x25, 0x26, 0x28, 0x29, 0x2A, 0x2C, 0x2D, 0x2E,
    0x30, 0x31, 0x35, 0x36, 0x38, 0x39, 0x3D, 0x3E,
    0x40, 0x41, 0x45, 0x46, 0x48, 0x49, 0x4A, 0x4C, 0x4D, 0x4E,
    0x50, 0x51, 0x55, 0x56, 0x58, 0x59, 0x5D, 0x5E,
    0x60, 0x61, 0x65, 0x66, 0x68, 0x69, 0x6A, 0x6C, 0x6D, 0x6E,
    0x70, 0x71, 0x75, 0x76, 0x78, 0x79, 0x7D, 0x7E,
    0x81, 0x84, 0x85, 0x86, 0x88, 0x8A, 0x8C, 0x8D, 0x8E,
    0x90, 0x91, 0x94, 0x95, 0x96, 0x98, 0x99, 0x9A, 0x9D,
    0xA0, 0xA1, 0xA2, 0xA4, 0xA5, 0xA6, 0xA8, 0xA9, 0xAA, 0xAC, 0xAD, 0xAE,
    0xB0, 0xB1, 0xB4, 0xB5, 0xB6, 0xB8, 0xB9, 0xBA, 0xBC, 0xBD, 0xBE,
    0xC0, 0xC1, 0xC4, 0xC5, 0xC6, 0xC8, 0xC9, 0xCA, 0xCC, 0xCD, 0xCE,
    0xD0, 0xD1, 0xD5, 0xD6, 0xD8, 0xD9, 0xDD, 0xDE,
    0xE0, 0xE1, 0xE4, 0xE5, 0xE6, 0xE8, 0xE9, 0xEA, 0xEC, 0xED, 0xEE,
    0xF0, 0xF1, 0xF5, 0xF6, 0xF8, 0xF9, 0xFD, 0xFE,
}

# Mnemonic matrix, row = high nibble, column = low nibble
MATRIX = """
BRK ORA ??? ??? ??? ORA ASL ??? PHP ORA ASL ??? ??? ORA ASL ???
BPL ORA ??? ??? ??? ORA ASL ??? CLC ORA ??? ??? ??? ORA ASL ???
JSR AND ??? ??? BIT AND ROL ??? PLP AND ROL ??? BIT AND ROL ???
BMI AND ??? ??? ??? AND ROL ??? SEC AND ??? ??? ??? AND ROL ???
RTI EOR ??? ??? ??? EOR LSR ??? PHA EOR LSR ??? JMP EOR LSR ???
BVC EOR ??? ??? ??? EOR LSR ??? CLI EOR ??? ??? ??? EOR LSR ???
RTS ADC ??? ??? ??? ADC ROR ??? PLA ADC ROR ??? JMP ADC ROR ???
BVS ADC ??? ??? ??? ADC ROR ??? SEI ADC ??? ??? ??? ADC ROR ???
??? STA ??? ??? STY STA STX ??? DEY ??? TXA ??? STY STA STX ???
BCC STA ??? ??? STY STA STX ??? TYA STA TXS ??? ??? STA ??? ???
LDY LDA LDX ??? LDY LDA LDX ??? TAY LDA TAX ??? LDY LDA LDX ???
BCS LDA ??? ??? LDY LDA LDX ??? CLV LDA TSX ??? LDY LDA LDX ???
CPY CMP ??? ??? CPY CMP DEC ??? INY CMP DEX ??? CPY CMP DEC ???
BNE CMP ??? ??? ??? CMP DEC ??? CLD CMP ??? ??? ??? CMP DEC ???
CPX SBC ??? ??? CPX SBC INC ??? INX SBC NOP ??? CPX SBC INC ???
BEQ SBC ??? ??? ??? SBC INC ??? SED SBC ??? ??? ??? SBC INC ???
""".split()

# Addressing mode matrix, same layout ("---" = undefined)
MODE_MATRIX = """
imp izx --- --- --- zp  zp  --- imp imm acc --- --- abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
abs izx --- --- zp  zp  zp  --- imp imm acc --- abs abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
imp izx --- --- --- zp  zp  --- imp imm acc --- abs abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
imp izx --- --- --- zp  zp  --- imp imm acc --- ind abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
--- izx --- --- zp  zp  zp  --- imp --- imp --- abs abs abs ---
rel izy --- --- zpx zpx zpy --- imp aby imp --- --- abx --- ---
imm izx imm --- zp  zp  zp  --- imp imm imp --- abs abs abs ---
rel izy --- --- zpx zpx zpy --- imp aby imp --- abx abx aby ---
imm izx --- --- zp  zp  zp  --- imp imm imp --- abs abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
imm izx --- --- zp  zp  zp  --- imp imm imp --- abs abs abs ---
rel izy --- --- --- zpx zpx --- imp aby --- --- --- abx abx ---
""".split()

# Base cycle matrix, same layout (0 = undefined)
CYCLE_MATRIX = [int(n) for n in """
7 6 0 0 0 3 5 0 3 2 2 0 0 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
6 6 0 0 3 3 5 0 4 2 2 0 4 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
6 6 0 0 0 3 5 0 3 2 2 0 3 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
6 6 0 0 0 3 5 0 4 2 2 0 5 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
0 6 0 0 3 3 3 0 2 0 2 0 4 4 4 0
2 6 0 0 4 4 4 0 2 5 2 0 0 5 0 0
2 6 2 0 3 3 3 0 2 2 2 0 4 4 4 0
2 5 0 0 4 4 4 0 2 4 2 0 4 4 4 0
2 6 0 0 3 3 5 0 2 2 2 0 4 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
2 6 0 0 3 3 5 0 2 2 2 0 4 4 6 0
2 5 0 0 0 4 6 0 2 4 0 0 0 4 7 0
""".split()]

MODE_NAMES = {
    "imp": AddressingMode.IMPLIED,
    "acc": AddressingMode.ACCUMULATOR,
    "imm": AddressingMode.IMMEDIATE,
    "zp": AddressingMode.ZERO_PAGE,
    "zpx": AddressingMode.ZERO_PAGE_X,
    "zpy": AddressingMode.ZERO_PAGE_Y,
    "izx": AddressingMode.INDEXED_INDIRECT_X,
    "izy": AddressingMode.INDIRECT_INDEXED_Y,
    "rel": AddressingMode.RELATIVE,
    "abs": AddressingMode.ABSOLUTE,
    "abx": AddressingMode.ABSOLUTE_X,
    "aby": AddressingMode.ABSOLUTE_Y,
    "ind": AddressingMode.INDIRECT_ABSOLUTE,
}

# Indexed reads that take an extra cycle when the index crosses a page
PAGE_CROSS_OPCODES = {
    0x11, 0x19, 0x1D, 0x31, 0x39, 0x3D, 0x51, 0x59, 0x5D, 0x71, 0x79, 0x7D,
    0xB1, 0xB9, 0xBC, 0xBD, 0xBE, 0xD1, 0xD9, 0xDD, 0xF1, 0xF9, 0xFD,
}

BRANCH_OPCODES = {0x10, 0x30, 0x50, 0x70, 0x90, 0xB0, 0xD0, 0xF0}

# Operand text for operand bytes $34 $12 with the opcode at $8000
OPERAND_TEXT = {
    "imp": "",
    "acc": "A",
    "imm": "#$34",
    "zp": "$34",
    "zpx": "$34,X",
    "zpy": "$34,Y",
    "izx": "($34,X)",
    "izy": "($34),Y",
    "rel": "$8036",
    "abs": "$1234",
    "abx": "$1234,X",
    "aby": "$1234,Y",
    "ind": "($1234)",
}


# =============================================================================
# Table Shape
# =============================================================================

class TestOpcodeTableShape:
    """Tests for the overall table contents."""

    def test_table_has_256_entries(self):
        """Every opcode byte has an entry, indexed by its own value."""
        assert len(OPCODE_TABLE) == 256
        for opcode, entry in enumerate(OPCODE_TABLE):
            assert entry.opcode == opcode

    def test_documented_count(self):
        """151 documented opcodes."""
        assert len(DOCUMENTED) == 151
        valid = {entry.opcode for entry in OPCODE_TABLE if entry.valid}
        assert valid == DOCUMENTED

    def test_invalid_set(self):
        """The remaining 105 opcodes are undefined."""
        assert len(INVALID_OPCODES) == 105
        assert INVALID_OPCODES == frozenset(range(256)) - DOCUMENTED

    def test_mnemonic_matrix(self):
        """Every entry's mnemonic matches the reference matrix."""
        assert len(MATRIX) == 256
        for opcode, mnemonic in enumerate(MATRIX):
            assert lookup(opcode).mnemonic == mnemonic, f"opcode ${opcode:02X}"
            assert (opcode in DOCUMENTED) == (mnemonic != "???")

    def test_mode_matrix(self):
        """Every documented entry's addressing mode matches the reference matrix."""
        assert len(MODE_MATRIX) == 256
        for opcode, name in enumerate(MODE_MATRIX):
            assert (name == "---") == (opcode not in DOCUMENTED)
            if name != "---":
                assert lookup(opcode).mode is MODE_NAMES[name], f"opcode ${opcode:02X}"

    def test_cycle_matrix(self):
        """Every entry's base cycle count matches the reference matrix."""
        assert len(CYCLE_MATRIX) == 256
        for opcode, cycles in enumerate(CYCLE_MATRIX):
            assert lookup(opcode).cycles == cycles, f"opcode ${opcode:02X}"

    def test_exception_sets(self):
        """Only indexed reads and branches carry cycle exceptions."""
        for opcode in range(256):
            exceptions = lookup(opcode).exceptions
            if opcode in BRANCH_OPCODES:
                expected = CycleException.PAGE_CROSS | CycleException.BRANCH_TAKEN
            elif opcode in PAGE_CROSS_OPCODES:
                expected = CycleException.PAGE_CROSS
            else:
                expected = CycleException.NONE
            assert exceptions == expected, f"opcode ${opcode:02X}"

    def test_invalid_entries(self):
        """Undefined opcodes carry the placeholder mnemonic and size 1."""
        for opcode in INVALID_OPCODES:
            entry = lookup(opcode)
            assert entry.mnemonic == INVALID_MNEMONIC
            assert entry.size == 1
            assert entry.cycles == 0
            assert not entry.valid

    def test_valid_entries_have_cycles(self):
        """Every documented opcode costs at least two cycles."""
        for opcode in DOCUMENTED:
            assert lookup(opcode).cycles >= 2

    def test_mnemonic_count(self):
        """The NMOS 6502 has 56 distinct mnemonics."""
        assert len(MNEMONICS) == 56
        assert INVALID_MNEMONIC not in MNEMONICS

    def test_branch_instructions(self):
        """All eight conditional branches use relative mode."""
        assert BRANCH_INSTRUCTIONS == {
            "BPL", "BMI", "BVC", "BVS", "BCC", "BCS", "BNE", "BEQ",
        }

    def test_table_is_immutable(self):
        """Entries are frozen."""
        with pytest.raises(Exception):
            OPCODE_TABLE[0xEA].mnemonic = "XXX"


# =============================================================================
# Individual Entries
# =============================================================================

class TestOpcodeEntries:
    """Spot checks of mnemonic, mode and size."""

    @pytest.mark.parametrize("opcode,mnemonic,mode,size", [
        (0x00, "BRK", AddressingMode.IMPLIED, 1),
        (0x0A, "ASL", AddressingMode.ACCUMULATOR, 1),
        (0xA9, "LDA", AddressingMode.IMMEDIATE, 2),
        (0xA5, "LDA", AddressingMode.ZERO_PAGE, 2),
        (0xB5, "LDA", AddressingMode.ZERO_PAGE_X, 2),
        (0xB6, "LDX", AddressingMode.ZERO_PAGE_Y, 2),
        (0xA1, "LDA", AddressingMode.INDEXED_INDIRECT_X, 2),
        (0xB1, "LDA", AddressingMode.INDIRECT_INDEXED_Y, 2),
        (0xD0, "BNE", AddressingMode.RELATIVE, 2),
        (0x4C, "JMP", AddressingMode.ABSOLUTE, 3),
        (0xBD, "LDA", AddressingMode.ABSOLUTE_X, 3),
        (0xB9, "LDA", AddressingMode.ABSOLUTE_Y, 3),
        (0x6C, "JMP", AddressingMode.INDIRECT_ABSOLUTE, 3),
        (0x20, "JSR", AddressingMode.ABSOLUTE, 3),
        (0x96, "STX", AddressingMode.ZERO_PAGE_Y, 2),
        (0xEA, "NOP", AddressingMode.IMPLIED, 1),
    ])
    def test_entry(self, opcode, mnemonic, mode, size):
        """Test mnemonic, addressing mode and size of one opcode."""
        entry = lookup(opcode)
        assert entry.valid
        assert entry.mnemonic == mnemonic
        assert entry.mode is mode
        assert entry.size == size

    def test_sizes_follow_mode(self):
        """Instruction size is always 1 + the mode's operand size."""
        for opcode in DOCUMENTED:
            entry = lookup(opcode)
            assert entry.size == 1 + entry.mode.operand_size

    @pytest.mark.parametrize("opcode,cycles,exceptions", [
        (0xA9, 2, CycleException.NONE),
        (0x00, 7, CycleException.NONE),
        (0x20, 6, CycleException.NONE),
        (0xBD, 4, CycleException.PAGE_CROSS),
        (0xB1, 5, CycleException.PAGE_CROSS),
        (0x9D, 5, CycleException.NONE),
        (0x91, 6, CycleException.NONE),
        (0x41, 6, CycleException.NONE),
        (0xFE, 7, CycleException.NONE),
        (0x90, 2, CycleException.PAGE_CROSS | CycleException.BRANCH_TAKEN),
    ])
    def test_timing(self, opcode, cycles, exceptions):
        """Test base cycles and cycle exception flags."""
        entry = lookup(opcode)
        assert entry.cycles == cycles
        assert entry.exceptions == exceptions

    def test_branches_flag_both_exceptions(self):
        """Every branch may take an extra cycle when taken and another on a page cross."""
        for entry in OPCODE_TABLE:
            if entry.valid and entry.mode is AddressingMode.RELATIVE:
                assert CycleException.BRANCH_TAKEN in entry.exceptions
                assert CycleException.PAGE_CROSS in entry.exceptions

    def test_only_branches_flag_branch_taken(self):
        """No other instruction carries BRANCH_TAKEN."""
        for entry in OPCODE_TABLE:
            if entry.mode is not AddressingMode.RELATIVE:
                assert CycleException.BRANCH_TAKEN not in entry.exceptions


# =============================================================================
# Lookup Helpers
# =============================================================================

class TestLookupHelpers:
    """Tests for lookup(), is_valid_opcode() and find_opcode()."""

    def test_lookup_out_of_range(self):
        """Values outside a byte are rejected."""
        with pytest.raises(ValueError):
            lookup(256)
        with pytest.raises(ValueError):
            lookup(-1)

    def test_is_valid_opcode(self):
        """Test validity check."""
        assert is_valid_opcode(0xEA)
        assert not is_valid_opcode(0x02)
        assert not is_valid_opcode(0xFF)

    def test_find_opcode(self):
        """Reverse lookup by mnemonic and mode."""
        assert find_opcode("LDA", AddressingMode.IMMEDIATE) == 0xA9
        assert find_opcode("jmp", AddressingMode.INDIRECT_ABSOLUTE) == 0x6C
        assert find_opcode("STA", AddressingMode.IMMEDIATE) is None

    def test_find_opcode_round_trips_every_entry(self):
        """Each documented (mnemonic, mode) pair maps back to its opcode."""
        for opcode in DOCUMENTED:
            entry = lookup(opcode)
            assert find_opcode(entry.mnemonic, entry.mode) == opcode

    def test_mode_names(self):
        """Addressing modes have readable names."""
        assert str(AddressingMode.INDIRECT_INDEXED_Y) == "(indirect),Y"
        assert str(AddressingMode.ZERO_PAGE) == "zero page"


# =============================================================================
# Decoding Every Opcode
# =============================================================================

class TestDecodeEveryOpcode:
    """Each documented opcode decodes to its matrix mnemonic, mode and operand."""

    @pytest.mark.parametrize("opcode", sorted(DOCUMENTED))
    def test_decode(self, opcode):
        """Decode opcode followed by $34 $12 at $8000."""
        image = MemoryImage(bytes([opcode, 0x34, 0x12]), 0x8000)
        instr = decode_one(image, 0x8000).instruction
        name = MODE_MATRIX[opcode]

        assert instr.valid
        assert instr.mnemonic == MATRIX[opcode]
        assert instr.mode is MODE_NAMES[name]
        assert instr.operand_str == OPERAND_TEXT[name]
        assert instr.size == 1 + MODE_NAMES[name].operand_size
