"""
disasm6502 - Disassembly Configuration
======================================

The option bundle handed to the decoder and the listing formatter.
Options can come from:
- Default values (defined here)
- Environment variables (DisassemblyOptions.from_env)
- Command-line flags (the dasm6502 CLI layers them over the environment)

The bundle is immutable. Use replace() to derive a modified copy.

Copyright (c) 2026 The disasm6502 Contributors
"""

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Optional

from disasm6502.errors import ConfigError

logger = logging.getLogger(__name__)


ADDRESS_SPACE_SIZE = 0x10000
DEFAULT_ORIGIN = 0x8000

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class DisassemblyOptions:
    """
    Options controlling how instructions are rendered.

    Attributes:
        hex_dump: Prefix each line with the address and raw instruction bytes
        cycle_counting: Append a " Cycles: N" or " Cycles: N/M" comment
        nes_annotations: Append NES I/O register names for absolute operands
        apple_style: Use the Apple II/Atari monitor hex-dump layout
        assembly_only: Leave the address/bytes field empty (mnemonics only)
        origin: Address the first loaded byte is mapped to
        max_bytes: Maximum number of bytes to load and disassemble
        skip: Number of leading input bytes to drop before loading
    """

    hex_dump: bool = False
    cycle_counting: bool = False
    nes_annotations: bool = False
    apple_style: bool = False
    assembly_only: bool = False
    origin: int = DEFAULT_ORIGIN
    max_bytes: int = ADDRESS_SPACE_SIZE
    skip: int = 0

    def __post_init__(self):
        if not 0 <= self.origin <= 0xFFFF:
            raise ConfigError("origin", self.origin, "must be $0000-$FFFF")
        if self.max_bytes < 0:
            raise ConfigError("max_bytes", self.max_bytes, "must not be negative")
        if self.skip < 0:
            raise ConfigError("skip", self.skip, "must not be negative")

    def replace(self, **changes) -> "DisassemblyOptions":
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)

    # ═══════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "DisassemblyOptions":
        """
        Create DisassemblyOptions from environment variables.

        Environment variables (all optional):
            DASM6502_ORIGIN: Origin address ("0x8000", "$C000", "49152")
            DASM6502_MAX_BYTES: Byte limit (integer, same formats)
            DASM6502_HEX: Enable hex dump ("1", "true", "yes", "on")
            DASM6502_CYCLES: Enable cycle counting
            DASM6502_NES: Enable NES register annotations
            DASM6502_APPLE: Enable Apple II/Atari output style

        Invalid values are ignored with a logged warning.

        Returns:
            DisassemblyOptions with values from environment variables
        """
        changes = {}

        for name, field_name in (
            ("DASM6502_ORIGIN", "origin"),
            ("DASM6502_MAX_BYTES", "max_bytes"),
        ):
            if raw := os.environ.get(name):
                value = parse_number(raw)
                if value is None:
                    logger.warning(f"Ignoring {name}={raw!r}: not a number")
                else:
                    changes[field_name] = value

        for name, field_name in (
            ("DASM6502_HEX", "hex_dump"),
            ("DASM6502_CYCLES", "cycle_counting"),
            ("DASM6502_NES", "nes_annotations"),
            ("DASM6502_APPLE", "apple_style"),
        ):
            raw = os.environ.get(name)
            if raw is None:
                continue
            flag = raw.strip().lower()
            if flag in _TRUE_VALUES:
                changes[field_name] = True
            elif flag in _FALSE_VALUES:
                changes[field_name] = False
            else:
                logger.warning(f"Ignoring {name}={raw!r}: not a boolean")

        if "origin" in changes:
            changes["origin"] &= 0xFFFF

        return cls(**changes)


def parse_number(text: str) -> Optional[int]:
    """
    Parse an unsigned number the way C's strtoul(..., 0) does, plus "$" hex.

    Accepts "0x1F"/"0X1F" and "$1F" (hex), "017" (octal) and "31" (decimal).

    Args:
        text: The string to parse

    Returns:
        The parsed value, or None if the text is not a valid number
    """
    text = text.strip()
    try:
        if text.startswith("$"):
            value = int(text[1:], 16)
        elif text.lower().startswith("0x"):
            value = int(text[2:], 16)
        elif len(text) > 1 and text.startswith("0"):
            value = int(text[1:], 8)
        else:
            value = int(text, 10)
    except ValueError:
        return None
    return value if value >= 0 else None
