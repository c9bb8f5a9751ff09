"""
disasm6502 Command-Line Interface
=================================

This package provides the command-line tools for disasm6502:

- **dasm6502**: 6502 disassembler and cycle counter

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.

Copyright (c) 2026 The disasm6502 Contributors
"""

__all__ = ["dasm6502"]
