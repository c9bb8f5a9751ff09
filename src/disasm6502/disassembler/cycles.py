"""
6502 Cycle Counting
===================

Computes the cycle-count annotation for a decoded instruction.

The decoder has no register state, so it cannot always know how long an
instruction takes. It reports either a single count or a "best/worst"
pair:

- No exception flags: the base count is exact.
- Conditional branch (BRANCH_TAKEN and PAGE_CROSS): the target is known
  statically, so the page crossing is known too. A branch that stays in
  its page costs base (not taken) or base+1 (taken). A branch into
  another page is reported as base+1/base+2.
- Indexed read (PAGE_CROSS only): whether the index crosses a page depends
  on X or Y at runtime, so the pair is always base/base+1.

Only the high bytes are compared to detect a page crossing.

Reference:
    Nick Bensema's Guide to Cycle Counting on the Atari 2600
    http://www.alienbill.com/2600/cookbook/cycles/nickb.txt

Copyright (c) 2026 The disasm6502 Contributors
"""

from dataclasses import dataclass
from typing import Optional

from disasm6502.cpu import CycleException, OpcodeEntry


@dataclass(frozen=True)
class CycleCount:
    """
    Cycle annotation for one instruction.

    Attributes:
        minimum: Cycles in the fast case
        maximum: Cycles in the slow case, or None when the count is exact
    """
    minimum: int
    maximum: Optional[int] = None

    @property
    def is_exact(self) -> bool:
        return self.maximum is None

    def __str__(self) -> str:
        if self.maximum is None:
            return str(self.minimum)
        return f"{self.minimum}/{self.maximum}"


def crosses_page(first: int, second: int) -> bool:
    """True if two addresses lie in different 256-byte pages."""
    return (first & 0xFF00) != (second & 0xFF00)


def cycles_for(entry: OpcodeEntry, pc: int, target: int) -> CycleCount:
    """
    Compute the cycle annotation for an instruction.

    Args:
        entry: Opcode table entry of the instruction
        pc: Address of the byte following the instruction's operand
        target: Resolved branch target (only consulted for branches)

    Returns:
        CycleCount with an exact count or a min/max pair
    """
    cycles = entry.cycles
    exceptions = entry.exceptions

    if not exceptions:
        return CycleCount(cycles)

    if CycleException.BRANCH_TAKEN in exceptions and CycleException.PAGE_CROSS in exceptions:
        if crosses_page(pc, target):
            return CycleCount(cycles + 1, cycles + 2)
        return CycleCount(cycles, cycles + 1)

    # One exception: can't tell in advance whether it applies
    return CycleCount(cycles, cycles + 1)
