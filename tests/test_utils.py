"""Tests for signature packing helpers."""

import pytest

from zipconst.constants import CENTRAL_HEADER_SIGNATURE, LOCAL_HEADER_SIGNATURE
from zipconst.errors import ZipFormatError
from zipconst.utils import pack_signature, unpack_signature


def test_pack_and_unpack_signature() -> None:
    assert pack_signature(LOCAL_HEADER_SIGNATURE) == b"PK\x03\x04"
    assert unpack_signature(b"xxPK\x01\x02", 2) == CENTRAL_HEADER_SIGNATURE


def test_pack_signature_masks_to_32_bits() -> None:
    assert pack_signature(LOCAL_HEADER_SIGNATURE | (1 << 32)) == b"PK\x03\x04"


def test_unpack_signature_short_buffer() -> None:
    with pytest.raises(ZipFormatError):
        unpack_signature(b"PK\x03")
    with pytest.raises(ZipFormatError):
        unpack_signature(b"PK\x03\x04", 1)


def test_unpack_signature_negative_offset() -> None:
    with pytest.raises(ZipFormatError):
        unpack_signature(b"PK\x03\x04", -1)
