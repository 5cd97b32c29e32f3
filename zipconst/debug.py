"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Debugging utilities for looking at raw ZIP bytes.

This module provides hex dumps and signature identification. It only
matches literal signatures; it does not walk or validate records.
"""

from typing import Optional

from .constants import SIGNATURES, GeneralBitFlags, compression_option, signature_names
from .utils import SIGNATURE_STRUCT, unpack_signature

_SIGNATURE_PREFIX = b"PK"


def hex_dump(data: bytes, offset: int = 0, length: Optional[int] = None) -> str:
    """Create a hex dump of binary data.

    Args:
        data: Binary data to dump.
        offset: Starting offset for display.
        length: Maximum length to dump (None for all).

    Returns:
        Formatted hex dump string.
    """
    if length is not None:
        data = data[:length]

    lines = []
    for i in range(0, len(data), 16):
        chunk = data[i : i + 16]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        ascii_part = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        lines.append(f"{offset + i:08X}  {hex_part:<48}  {ascii_part}")

    return "\n".join(lines)


def identify_signature(data: bytes, offset: int = 0) -> tuple[str, ...]:
    """Name the signature stored at ``offset``, if any.

    Returns:
        Every canonical name for the signature found; empty tuple when the
        bytes are not a ZIP signature.

    Raises:
        ZipFormatError: If fewer than four bytes are available at offset.
    """
    return signature_names(unpack_signature(data, offset))


def scan_signatures(data: bytes) -> list[tuple[int, tuple[str, ...]]]:
    """Find every literal signature occurrence in a buffer.

    Occurrences may be false positives inside compressed data; archive
    readers decide which ones are real records.

    Returns:
        List of (offset, names) in ascending offset order.
    """
    known = set(SIGNATURES.values())
    found = []
    pos = data.find(_SIGNATURE_PREFIX)
    while pos != -1 and pos + SIGNATURE_STRUCT.size <= len(data):
        sig = unpack_signature(data, pos)
        if sig in known:
            found.append((pos, signature_names(sig)))
        pos = data.find(_SIGNATURE_PREFIX, pos + 1)
    return found


def describe_flags(flags: int) -> str:
    """Render general purpose bit flags, naming unknown bits by value.

    The two-bit compression option is shown as ``METHOD=<n>``.
    """
    flags = int(flags)
    names = []
    known = 0
    for name, member in GeneralBitFlags.__members__.items():
        known |= int(member)
        if member is GeneralBitFlags.METHOD:
            option = compression_option(flags)
            if option:
                names.append(f"METHOD={option}")
        elif flags & member:
            names.append(name)

    unknown = flags & ~known
    if unknown:
        names.append(f"0x{unknown:04X}")
    return " | ".join(names) if names else "none"
