"""
dasm6502 - 6502 Disassembler Command-Line Interface
===================================================

This module implements the command-line interface for the 6502
disassembler and cycle counter.

Usage Examples
--------------
Disassemble a binary loaded at $8000 (the default origin):
    $ dasm6502 game.prg

Set the origin and include a hex dump:
    $ dasm6502 -o 0xC000 -d rom.bin

Skip a 16-byte iNES header and annotate NES registers and cycles:
    $ dasm6502 -s 16 -n -c game.nes

Apple II monitor style:
    $ dasm6502 -a -d -o 0x0800 hello.bin

Only the first 256 bytes, written to a file:
    $ dasm6502 -m 256 -O listing.asm rom.bin

Instructions as JSON:
    $ dasm6502 --json rom.bin

Copyright (c) 2026 The disasm6502 Contributors
"""

import json
from pathlib import Path
from typing import Optional

import click

from disasm6502 import __version__
from disasm6502.cli.errors import handle_cli_exception
from disasm6502.config import DisassemblyOptions, parse_number
from disasm6502.disassembler import MOS6502Disassembler, format_header, iter_decode
from disasm6502.image import load_file


def _parse_number_option(value: Optional[str], option: str) -> Optional[int]:
    """Parse a numeric option value, raising BadParameter on bad input."""
    if value is None:
        return None
    number = parse_number(value)
    if number is None:
        raise click.BadParameter(f"invalid number {value!r}", param_hint=option)
    return number


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--origin",
    type=str,
    default=None,
    help="Origin (base address of disassembly): 0x/$ hex, 0 octal or decimal. "
         "Default: 0x8000",
)
@click.option(
    "-m", "--max-bytes",
    type=str,
    default=None,
    help="Only disassemble the first NUM_BYTES bytes",
)
@click.option(
    "-s", "--skip",
    type=str,
    default="0",
    help="Skip this many bytes at the start of the file (e.g. 16 for iNES)",
)
@click.option(
    "-d", "--hex",
    "hex_dump",
    is_flag=True,
    help="Enable hex dump within disassembly",
)
@click.option(
    "-c", "--cycles",
    "cycle_counting",
    is_flag=True,
    help="Enable cycle counting annotations",
)
@click.option(
    "-n", "--nes",
    "nes_annotations",
    is_flag=True,
    help="Enable NES register annotations",
)
@click.option(
    "-a", "--apple",
    "apple_style",
    is_flag=True,
    help="Apple II/Atari style output",
)
@click.option(
    "--asm-only",
    "assembly_only",
    is_flag=True,
    help="Omit addresses and raw bytes (output mnemonics only)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit decoded instructions as JSON instead of a listing",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="Do not print the comment header",
)
@click.option(
    "-O", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="dasm6502")
def main(
    input_file: Path,
    origin: Optional[str],
    max_bytes: Optional[str],
    skip: str,
    hex_dump: bool,
    cycle_counting: bool,
    nes_annotations: bool,
    apple_style: bool,
    assembly_only: bool,
    as_json: bool,
    no_header: bool,
    output: Optional[Path],
    verbose: bool,
) -> None:
    """
    Disassemble 6502 machine code, with optional cycle counting.

    INPUT_FILE is the raw binary to disassemble.

    Option defaults can also be set through the environment:
    DASM6502_ORIGIN, DASM6502_MAX_BYTES, DASM6502_HEX, DASM6502_CYCLES,
    DASM6502_NES and DASM6502_APPLE.

    \b
    Examples:
        dasm6502 game.prg                 # Origin $8000
        dasm6502 -o 0xC000 -d rom.bin     # Hex dump at $C000
        dasm6502 -s 16 -n -c game.nes     # NES ROM with cycles
    """
    try:
        defaults = DisassemblyOptions.from_env()

        base_address = _parse_number_option(origin, "-o/--origin")
        byte_limit = _parse_number_option(max_bytes, "-m/--max-bytes")
        skip_count = _parse_number_option(skip, "-s/--skip")

        options = defaults.replace(
            origin=defaults.origin if base_address is None else base_address & 0xFFFF,
            max_bytes=defaults.max_bytes if byte_limit is None else byte_limit,
            skip=skip_count,
            hex_dump=hex_dump or defaults.hex_dump,
            cycle_counting=cycle_counting or defaults.cycle_counting,
            nes_annotations=nes_annotations or defaults.nes_annotations,
            apple_style=apple_style or defaults.apple_style,
            assembly_only=assembly_only,
        )

        if verbose:
            click.echo(f"Input file: {input_file}", err=True)
            click.echo(f"Origin: ${options.origin:04X}", err=True)

        loaded = load_file(
            input_file,
            origin=options.origin,
            skip=options.skip,
            max_bytes=options.max_bytes,
        )
        for message in loaded.diagnostics:
            click.echo(f"Warning: {message}", err=True)

        image = loaded.image
        if verbose:
            click.echo(
                f"Loaded {loaded.file_size} of {loaded.source_size} bytes "
                f"(${image.start:04X}-${max(image.end - 1, image.start):04X})",
                err=True,
            )

        if as_json:
            instructions = [r.instruction for r in iter_decode(image, options)]
            document = {
                "file": input_file.name,
                "origin": f"${options.origin:04X}",
                "size": loaded.file_size,
                "instructions": [instr.to_dict() for instr in instructions],
            }
            result = json.dumps(document, indent=2) + "\n"
            instr_count = len(instructions)
        else:
            output_lines = []
            if not no_header:
                output_lines.extend(format_header(input_file.name, loaded.file_size, options))

            disasm = MOS6502Disassembler(options)
            instr_count = 0
            for line in disasm.disassemble_lines(image):
                output_lines.append(line)
                instr_count += 1

            result = "\n".join(output_lines) + "\n" if output_lines else ""

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        if verbose:
            click.echo(f"Instructions disassembled: {instr_count}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
