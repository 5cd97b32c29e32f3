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
Little-endian packing helpers for signatures.

Signatures are always stored little-endian, so ``LOCAL_HEADER_SIGNATURE``
is written as the bytes ``P K 03 04``.
"""

import struct

from .errors import ZipFormatError

SIGNATURE_STRUCT = struct.Struct("<I")


def pack_signature(signature: int) -> bytes:
    """Return the four on-disk bytes of a signature."""
    return SIGNATURE_STRUCT.pack(signature & 0xFFFFFFFF)


def unpack_signature(data: bytes, offset: int = 0) -> int:
    """Read a signature from ``data`` at ``offset``.

    Args:
        data: Buffer holding the signature.
        offset: Position of the first signature byte.

    Returns:
        Signature as an unsigned 32-bit integer.

    Raises:
        ZipFormatError: If fewer than four bytes are available at offset.
    """
    if offset < 0 or offset + SIGNATURE_STRUCT.size > len(data):
        raise ZipFormatError(
            f"Need {SIGNATURE_STRUCT.size} bytes at offset {offset}, "
            f"buffer holds {len(data)}"
        )
    return SIGNATURE_STRUCT.unpack_from(data, offset)[0]

