"""
Memory Image Loading
====================

Maps raw input bytes into the 6502's 64KiB address space.

A MemoryImage is the decoder's view of memory: a run of bytes starting at
an origin address. Its valid address range is [origin, origin + len(data))
and it never extends past $FFFF, so every address the decoder can reach
is a real 16-bit address.

Loading applies three adjustments, in this order:

1. skip: the first N input bytes are dropped (file headers, e.g. iNES)
2. max_bytes: the remaining bytes are cut to the requested length
3. address space: bytes that would land above $FFFF are cut

Each adjustment that actually removes bytes is reported as a non-fatal
diagnostic: it is logged and recorded on the LoadedImage so
a front end can show it to the user.

Usage:
    loaded = load_file("game.prg", origin=0xC000)
    for message in loaded.diagnostics:
        print(message)
    image = loaded.image

Copyright (c) 2026 The disasm6502 Contributors
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from disasm6502.config import ADDRESS_SPACE_SIZE, DEFAULT_ORIGIN
from disasm6502.errors import AddressRangeError, ImageError, OperandOutOfRangeError

logger = logging.getLogger(__name__)


# =============================================================================
# Memory Image
# =============================================================================

@dataclass(frozen=True)
class MemoryImage:
    """
    A contiguous block of 6502 memory.

    Attributes:
        data: The image bytes
        origin: Address of data[0]
    """
    data: bytes
    origin: int = DEFAULT_ORIGIN

    def __post_init__(self):
        if not 0 <= self.origin <= 0xFFFF:
            raise ImageError(f"origin ${self.origin:X} outside address space")
        if self.origin + len(self.data) > ADDRESS_SPACE_SIZE:
            raise ImageError(
                f"{len(self.data)} bytes at ${self.origin:04X} extend past $FFFF"
            )
        # Accept bytearray/memoryview but store an immutable copy
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def start(self) -> int:
        """First valid address."""
        return self.origin

    @property
    def end(self) -> int:
        """One past the last valid address (at most $10000)."""
        return self.origin + len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, address: int) -> bool:
        return self.start <= address < self.end

    def read(self, address: int) -> int:
        """
        Read one byte.

        Raises:
            AddressRangeError: If address is outside the image
        """
        if address not in self:
            raise AddressRangeError(address, self.start, self.end)
        return self.data[address - self.origin]

    def fetch(self, address: int, count: int) -> bytes:
        """
        Read count consecutive bytes starting at address.

        Args:
            address: First address to read
            count: Number of bytes

        Returns:
            Exactly count bytes

        Raises:
            AddressRangeError: If address itself is outside the image
            OperandOutOfRangeError: If the run extends past the image end
        """
        if count == 0:
            return b""
        if address not in self:
            if address == self.end:
                raise OperandOutOfRangeError(address, count, 0)
            raise AddressRangeError(address, self.start, self.end)
        offset = address - self.origin
        chunk = self.data[offset:offset + count]
        if len(chunk) < count:
            raise OperandOutOfRangeError(address, count, len(chunk))
        return chunk

    def available(self, address: int) -> bytes:
        """All bytes from address to the end of the image (may be empty)."""
        if address not in self:
            return b""
        return self.data[address - self.origin:]


# =============================================================================
# Loading
# =============================================================================

@dataclass
class LoadedImage:
    """
    Result of loading input bytes into the address space.

    Attributes:
        image: The memory image to disassemble
        diagnostics: Human-readable notes about clamping that occurred
        source_size: Size of the raw input before skip/clamping
    """
    image: MemoryImage
    diagnostics: List[str] = field(default_factory=list)
    source_size: int = 0

    @property
    def file_size(self) -> int:
        """Number of bytes retained in the image."""
        return len(self.image)

    @property
    def clamped(self) -> bool:
        return bool(self.diagnostics)


def load_image(
    data: bytes,
    origin: int = DEFAULT_ORIGIN,
    skip: int = 0,
    max_bytes: int = ADDRESS_SPACE_SIZE,
) -> LoadedImage:
    """
    Place input bytes at origin, applying skip and length limits.

    Args:
        data: Raw input bytes
        origin: Address for the first retained byte ($0000-$FFFF)
        skip: Leading bytes of data to drop
        max_bytes: Maximum number of bytes to keep

    Returns:
        LoadedImage with the image and any clamping diagnostics

    Raises:
        ImageError: If origin is outside the address space, or skip or
                    max_bytes is negative
    """
    if not 0 <= origin <= 0xFFFF:
        raise ImageError(f"origin must be $0000-$FFFF, got ${origin:X}")
    if skip < 0:
        raise ImageError(f"skip must not be negative, got {skip}")
    if max_bytes < 0:
        raise ImageError(f"max_bytes must not be negative, got {max_bytes}")

    diagnostics = []

    if skip > len(data):
        diagnostics.append(
            f"skip count {skip} exceeds input size {len(data)}; nothing to disassemble"
        )
        skip = len(data)
    payload = data[skip:]

    if len(payload) > max_bytes:
        diagnostics.append(
            f"input truncated to {max_bytes} bytes (was {len(payload)})"
        )
        payload = payload[:max_bytes]

    room = ADDRESS_SPACE_SIZE - origin
    if len(payload) > room:
        diagnostics.append(
            f"input truncated to {room} bytes to fit origin ${origin:04X} "
            f"below $10000 (was {len(payload)})"
        )
        payload = payload[:room]

    for message in diagnostics:
        logger.info(message)
    logger.debug(
        f"Loaded {len(payload)} of {len(data)} bytes at ${origin:04X} (skip {skip})"
    )

    return LoadedImage(
        image=MemoryImage(bytes(payload), origin),
        diagnostics=diagnostics,
        source_size=len(data),
    )


def load_file(
    path: Union[str, Path],
    origin: int = DEFAULT_ORIGIN,
    skip: int = 0,
    max_bytes: int = ADDRESS_SPACE_SIZE,
) -> LoadedImage:
    """
    Read a binary file and load it with load_image().

    Raises:
        FileNotFoundError, PermissionError: From reading the file
        ImageError: As for load_image()
    """
    data = Path(path).read_bytes()
    logger.debug(f"Read {len(data)} bytes from {path}")
    return load_image(data, origin=origin, skip=skip, max_bytes=max_bytes)
