"""Tests for the legacy code page text codec."""

import pytest

from zipconst import codec
from zipconst.codec import (
    CodecConfig,
    bytes_to_text,
    codec_name,
    get_default_code_page,
    set_default_code_page,
    text_to_bytes,
)
from zipconst.errors import (
    ZipCodePageError,
    ZipError,
    ZipFormatError,
)


def test_round_trip_with_default_code_page() -> None:
    set_default_code_page(850)

    data = text_to_bytes("café")

    assert data == b"caf\x82"
    assert bytes_to_text(data) == "café"


def test_cross_code_page_decoding_can_differ() -> None:
    set_default_code_page(850)
    data = text_to_bytes("Øre")

    set_default_code_page(437)

    assert bytes_to_text(data) != "Øre"
    assert bytes_to_text(data) == "¥re"


def test_code_page_changes_byte_representation() -> None:
    set_default_code_page(850)
    dos = text_to_bytes("é")
    set_default_code_page(1252)
    windows = text_to_bytes("é")

    assert dos == b"\x82"
    assert windows == b"\xe9"


def test_none_inputs_give_empty_results() -> None:
    assert bytes_to_text(None) == ""
    assert bytes_to_text(None, 10) == ""
    assert text_to_bytes(None) == b""


def test_full_length_matches_default_length() -> None:
    data = b"folder/file.txt"

    assert bytes_to_text(data) == bytes_to_text(data, len(data))


def test_length_limits_decoded_prefix() -> None:
    assert bytes_to_text(b"name.txt\x00\x00", 8) == "name.txt"
    assert bytes_to_text(b"abc", 0) == ""


@pytest.mark.parametrize("length", [-1, 4, 100])
def test_out_of_range_length_is_rejected(length: int) -> None:
    with pytest.raises(ZipFormatError):
        bytes_to_text(b"abc", length)


def test_accepts_bytearray_and_memoryview() -> None:
    set_default_code_page(437)

    assert bytes_to_text(bytearray(b"abc")) == "abc"
    assert bytes_to_text(memoryview(b"abcdef"), 3) == "abc"


def test_invalid_code_page_fails_on_use_not_on_set() -> None:
    set_default_code_page(99999)

    assert get_default_code_page() == 99999
    with pytest.raises(ZipCodePageError) as excinfo:
        text_to_bytes("abc")
    assert excinfo.value.code_page == 99999
    with pytest.raises(LookupError):
        bytes_to_text(b"abc")

    set_default_code_page(437)
    assert bytes_to_text(b"abc") == "abc"


def test_unrepresentable_text_becomes_question_mark() -> None:
    set_default_code_page(437)

    assert text_to_bytes("€uro") == b"?uro"
    assert CodecConfig(20127).encode("naïve") == b"na?ve"


def test_invalid_bytes_decode_to_replacement_character() -> None:
    set_default_code_page(65001)

    assert bytes_to_text(b"name\xff.txt") == "name\ufffd.txt"


def test_length_splitting_multibyte_character_does_not_raise() -> None:
    assert CodecConfig(65001).decode("é".encode("utf-8"), 1) == "\ufffd"


def test_errors_share_base_class() -> None:
    with pytest.raises(ZipError):
        CodecConfig(99999).decode(b"x")


def test_explicit_config_ignores_default() -> None:
    set_default_code_page(437)
    config = CodecConfig(1252)

    assert text_to_bytes("é", config=config) == b"\xe9"
    assert bytes_to_text(b"\xe9", config=config) == "é"
    assert get_default_code_page() == 437


def test_default_config_snapshots_current_value() -> None:
    set_default_code_page(850)
    config = CodecConfig.default()
    set_default_code_page(437)

    assert config.code_page == 850


@pytest.mark.parametrize(
    ("code_page", "expected"),
    [
        (437, "cp437"),
        (850, "cp850"),
        (1252, "cp1252"),
        (65001, "utf-8"),
        (20127, "ascii"),
        (28591, "iso8859-1"),
    ],
)
def test_codec_name(code_page: int, expected: str) -> None:
    assert codec_name(code_page) == expected


def test_code_page_zero_uses_host_ansi_encoding() -> None:
    assert codec_name(0)
    assert CodecConfig(0).decode(b"abc") == "abc"


def test_initial_code_page_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(codec.CODE_PAGE_ENV_VAR, "850")

    assert codec._initial_code_page() == 850


def test_invalid_environment_value_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(codec.CODE_PAGE_ENV_VAR, "latin")
    monkeypatch.setattr(codec.sys, "platform", "linux")
    monkeypatch.setattr(codec.locale, "getlocale", lambda category=None: (None, None))

    assert codec._initial_code_page() == codec.IBM_PC_CODE_PAGE


def test_host_oem_code_page_without_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(codec.sys, "platform", "linux")
    monkeypatch.setattr(codec.locale, "getlocale", lambda category=None: (None, None))

    assert codec.host_oem_code_page() == 437


ROUND_TRIP_TEXT = {
    437: ["", "README.TXT", "café", "Ñandú/año.txt"],
    850: ["", "Øre", "Ærø/ÿ.dat"],
    1252: ["", "€uro", "naïve – résumé.doc"],
    932: ["", "日本語.txt", "ﾃｽﾄ/データ.csv"],
    1200: ["", "Ωmega", "目录/😀.png"],
    65001: ["", "日本語", "emoji/😀.txt"],
}


@pytest.mark.parametrize(
    ("code_page", "text"),
    [(cp, text) for cp, texts in ROUND_TRIP_TEXT.items() for text in texts],
)
def test_round_trip_in_code_page(code_page: int, text: str) -> None:
    set_default_code_page(code_page)

    assert bytes_to_text(text_to_bytes(text)) == text
    assert CodecConfig(code_page).decode(CodecConfig(code_page).encode(text)) == text


@pytest.mark.parametrize("code_page", [437, 932, 65001])
def test_length_matches_decoding_prefix(code_page: int) -> None:
    config = CodecConfig(code_page)
    data = config.encode("日本" if code_page != 437 else "café")

    for length in range(len(data) + 1):
        assert config.decode(data, length) == config.decode(data[:length])


def test_codec_config_requires_code_page() -> None:
    with pytest.raises(TypeError):
        CodecConfig()


@pytest.mark.parametrize(
    ("locale_name", "expected"),
    [
        (None, 437),
        ("C", 437),
        ("en_US", 437),
        ("en_GB", 850),
        ("de_DE", 850),
        ("fr_FR.UTF-8", 850),
        ("pl_PL", 852),
        ("ru_RU", 866),
        ("ja_JP", 932),
        ("zh_CN", 936),
        ("zh_TW", 950),
        ("xx_YY", 437),
    ],
)
def test_oem_code_page_for_locale(locale_name: str, expected: int) -> None:
    assert codec.oem_code_page_for_locale(locale_name) == expected


def test_host_oem_code_page_follows_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(codec.sys, "platform", "linux")
    monkeypatch.setattr(codec.locale, "getlocale", lambda category=None: ("de_DE", "UTF-8"))

    assert codec.host_oem_code_page() == 850
