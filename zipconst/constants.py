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
ZIP format constants including signatures, header sizes, versions,
compression methods and general purpose bit flags.

Every value here is a literal fact about the wire format. Readers and writers
of archives share this module as their vocabulary.
"""

import enum
from typing import Union

from .errors import ZipUnsupportedFeature


def make_signature(b3: Union[int, str], b4: Union[int, str]) -> int:
    """Build a 32-bit header signature from its two role bytes.

    Signatures are the ASCII bytes ``P K b3 b4`` read as a little-endian
    32-bit unsigned integer.

    Args:
        b3: Third signature byte (int or one character string).
        b4: Fourth signature byte (int or one character string).

    Returns:
        Signature as an unsigned 32-bit integer.
    """
    if isinstance(b3, str):
        b3 = ord(b3)
    if isinstance(b4, str):
        b4 = ord(b4)
    return ord("P") | (ord("K") << 8) | ((b3 & 0xFF) << 16) | ((b4 & 0xFF) << 24)


# ZIP version constants
VERSION_MADE_BY = 45  # Version made by, also the highest version we can extract
VERSION_STRONG_ENCRYPTION = 50  # Minimum version for strong encryption
VERSION_ZIP64 = 45  # Minimum version for Zip64 extensions

# Local file header size (fixed part)
LOCAL_HEADER_BASE_SIZE = 30

# Central directory header size (fixed part, excluding filename/extra/comment)
CENTRAL_HEADER_BASE_SIZE = 46

# End of central directory size (fixed part, excluding comment)
END_OF_CENTRAL_RECORD_BASE_SIZE = 22

# Data descriptor size, signature included
DATA_DESCRIPTOR_SIZE = 16

# ZIP64 data descriptor size
ZIP64_DATA_DESCRIPTOR_SIZE = 20

# Classic (PKWARE) encryption header stored before entry data
CRYPTO_HEADER_SIZE = 12

# ZIP file signatures (magic numbers)
LOCAL_HEADER_SIGNATURE = 0x04034B50  # "PK\x03\x04"
CENTRAL_HEADER_SIGNATURE = 0x02014B50  # "PK\x01\x02"
END_OF_CENTRAL_DIRECTORY_SIGNATURE = 0x06054B50  # "PK\x05\x06"
DATA_DESCRIPTOR_SIGNATURE = 0x08074B50  # "PK\x07\x08"
SPANNING_SIGNATURE = 0x08074B50  # "PK\x07\x08", first bytes of a split archive
SPANNING_TEMP_SIGNATURE = 0x30304B50  # "PK00", split archive that fit on one disk
ZIP64_CENTRAL_FILE_HEADER_SIGNATURE = 0x06064B50  # "PK\x06\x06"
ZIP64_CENTRAL_DIR_LOCATOR_SIGNATURE = 0x07064B50  # "PK\x06\x07"
ARCHIVE_EXTRA_DATA_SIGNATURE = 0x07064B50  # "PK\x06\x07", central directory encrypted
CENTRAL_HEADER_DIGITAL_SIGNATURE = 0x05054B50  # "PK\x05\x05"

# Canonical name -> value. Shared bit patterns keep both role names.
SIGNATURES = {
    "LOCAL_HEADER_SIGNATURE": LOCAL_HEADER_SIGNATURE,
    "CENTRAL_HEADER_SIGNATURE": CENTRAL_HEADER_SIGNATURE,
    "END_OF_CENTRAL_DIRECTORY_SIGNATURE": END_OF_CENTRAL_DIRECTORY_SIGNATURE,
    "DATA_DESCRIPTOR_SIGNATURE": DATA_DESCRIPTOR_SIGNATURE,
    "SPANNING_SIGNATURE": SPANNING_SIGNATURE,
    "SPANNING_TEMP_SIGNATURE": SPANNING_TEMP_SIGNATURE,
    "ZIP64_CENTRAL_FILE_HEADER_SIGNATURE": ZIP64_CENTRAL_FILE_HEADER_SIGNATURE,
    "ZIP64_CENTRAL_DIR_LOCATOR_SIGNATURE": ZIP64_CENTRAL_DIR_LOCATOR_SIGNATURE,
    "ARCHIVE_EXTRA_DATA_SIGNATURE": ARCHIVE_EXTRA_DATA_SIGNATURE,
    "CENTRAL_HEADER_DIGITAL_SIGNATURE": CENTRAL_HEADER_DIGITAL_SIGNATURE,
}

HEADER_SIZES = {
    "LOCAL_HEADER_BASE_SIZE": LOCAL_HEADER_BASE_SIZE,
    "CENTRAL_HEADER_BASE_SIZE": CENTRAL_HEADER_BASE_SIZE,
    "END_OF_CENTRAL_RECORD_BASE_SIZE": END_OF_CENTRAL_RECORD_BASE_SIZE,
    "DATA_DESCRIPTOR_SIZE": DATA_DESCRIPTOR_SIZE,
    "ZIP64_DATA_DESCRIPTOR_SIZE": ZIP64_DATA_DESCRIPTOR_SIZE,
    "CRYPTO_HEADER_SIZE": CRYPTO_HEADER_SIZE,
}

VERSIONS = {
    "VERSION_MADE_BY": VERSION_MADE_BY,
    "VERSION_STRONG_ENCRYPTION": VERSION_STRONG_ENCRYPTION,
    "VERSION_ZIP64": VERSION_ZIP64,
}


def signature_names(value: int) -> tuple[str, ...]:
    """Return every canonical signature name carrying ``value``.

    Names come back in declaration order. A value that is not a ZIP
    signature yields an empty tuple.
    """
    return tuple(name for name, sig in SIGNATURES.items() if sig == value)


class CompressionMethod(enum.IntEnum):
    """Compression method identifiers stored in entry headers.

    All members can be represented so callers are able to detect and reject
    archives using them; only ``STORED`` and ``DEFLATED`` are supported.
    """

    STORED = 0  # Raw copy
    DEFLATED = 8  # 32 KiB sliding window with Huffman coding
    DEFLATE64 = 9  # Deflate with a 64 KiB window
    BZIP2 = 11
    WINZIP_AES = 99  # WinZip AES encryption marker

    @property
    def is_supported(self) -> bool:
        return self in _SUPPORTED_METHODS

    def require_supported(self) -> "CompressionMethod":
        """Return this method, or raise if nothing can act on it.

        Raises:
            ZipUnsupportedFeature: If the method is not supported.
        """
        if not self.is_supported:
            raise ZipUnsupportedFeature(
                f"Unsupported compression method: {METHOD_TO_NAME[self]} ({int(self)})"
            )
        return self


_SUPPORTED_METHODS = frozenset({CompressionMethod.STORED, CompressionMethod.DEFLATED})

# Compression method names (for API)
COMPRESSION_STORED = "stored"
COMPRESSION_DEFLATE = "deflate"
COMPRESSION_DEFLATE64 = "deflate64"
COMPRESSION_BZIP2 = "bzip2"
COMPRESSION_WINZIP_AES = "winzip-aes"

# Compression method mapping
COMPRESSION_METHODS = {
    COMPRESSION_STORED: CompressionMethod.STORED,
    COMPRESSION_DEFLATE: CompressionMethod.DEFLATED,
    COMPRESSION_DEFLATE64: CompressionMethod.DEFLATE64,
    COMPRESSION_BZIP2: CompressionMethod.BZIP2,
    COMPRESSION_WINZIP_AES: CompressionMethod.WINZIP_AES,
}

# Reverse mapping
METHOD_TO_NAME = {method: name for name, method in COMPRESSION_METHODS.items()}


def compression_method(value: int) -> CompressionMethod:
    """Convert a raw method identifier read from a header.

    Args:
        value: 16-bit compression method field.

    Returns:
        Matching CompressionMethod member.

    Raises:
        ZipUnsupportedFeature: If the identifier is not a known method.
    """
    try:
        return CompressionMethod(value)
    except ValueError:
        raise ZipUnsupportedFeature(f"Unsupported compression method: {value}") from None


class GeneralBitFlags(enum.IntFlag, boundary=enum.KEEP):
    """General purpose bit flags of a local or central header.

    Bits without a name here (UTF-8 names, vendor bits) are kept as-is.
    """

    ENCRYPTED = 0x0001  # File is encrypted
    METHOD = 0x0006  # Compression option, meaning depends on the method
    DESCRIPTOR = 0x0008  # Data descriptor follows file data
    RESERVED = 0x0010  # Reserved for enhanced deflating
    PATCHED = 0x0020  # Compressed patched data
    STRONG_ENCRYPTION = 0x0040  # Strong encryption used
    ENHANCED_COMPRESS = 0x1000  # Reserved by PKWARE for enhanced compression
    HEADER_MASKED = 0x2000  # Local header values masked, central directory encrypted


def compression_option(flags: int) -> int:
    """Return the two-bit compression option (0-3) held in bits 1 and 2."""
    return (int(flags) & int(GeneralBitFlags.METHOD)) >> 1


# Legacy short names, pure aliases of the canonical constants above
LOCSIG = LOCAL_HEADER_SIGNATURE
CENSIG = CENTRAL_HEADER_SIGNATURE
ENDSIG = END_OF_CENTRAL_DIRECTORY_SIGNATURE
EXTSIG = DATA_DESCRIPTOR_SIGNATURE
SPANNINGSIG = SPANNING_SIGNATURE
SPANTEMPSIG = SPANNING_TEMP_SIGNATURE
CENSIG64 = ZIP64_CENTRAL_FILE_HEADER_SIGNATURE
CENDIGITALSIG = CENTRAL_HEADER_DIGITAL_SIGNATURE
LOCHDR = LOCAL_HEADER_BASE_SIZE
CENHDR = CENTRAL_HEADER_BASE_SIZE
ENDHDR = END_OF_CENTRAL_RECORD_BASE_SIZE
EXTHDR = DATA_DESCRIPTOR_SIZE

LEGACY_ALIASES = {
    "LOCSIG": "LOCAL_HEADER_SIGNATURE",
    "CENSIG": "CENTRAL_HEADER_SIGNATURE",
    "ENDSIG": "END_OF_CENTRAL_DIRECTORY_SIGNATURE",
    "EXTSIG": "DATA_DESCRIPTOR_SIGNATURE",
    "SPANNINGSIG": "SPANNING_SIGNATURE",
    "SPANTEMPSIG": "SPANNING_TEMP_SIGNATURE",
    "CENSIG64": "ZIP64_CENTRAL_FILE_HEADER_SIGNATURE",
    "CENDIGITALSIG": "CENTRAL_HEADER_DIGITAL_SIGNATURE",
    "LOCHDR": "LOCAL_HEADER_BASE_SIZE",
    "CENHDR": "CENTRAL_HEADER_BASE_SIZE",
    "ENDHDR": "END_OF_CENTRAL_RECORD_BASE_SIZE",
    "EXTHDR": "DATA_DESCRIPTOR_SIZE",
}
