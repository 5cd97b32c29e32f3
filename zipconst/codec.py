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
Legacy code page text conversion for entry names and comments.

Entry names written without the UTF-8 flag are stored in whatever code page
the producing tool used, so conversions go through a numeric code page
identifier. A process-wide default exists for convenience; callers that
decode archives from different locales, or from several threads, should pass
an explicit ``CodecConfig`` instead.

Example:
    config = CodecConfig(850)
    name = bytes_to_text(raw_name, config=config)
"""

import codecs
import locale
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ZipCodePageError, ZipFormatError

logger = logging.getLogger(__name__)

CODE_PAGE_ENV_VAR = "ZIPCONST_CODEPAGE"

# Code page used by the ZIP application note when no flag says otherwise
IBM_PC_CODE_PAGE = 437

# Host ANSI code page
CP_ACP = 0

# Code pages whose Python codec name is not simply "cp<N>"
_CODE_PAGE_NAMES = {
    1200: "utf-16-le",
    1201: "utf-16-be",
    20127: "ascii",
    28591: "iso8859-1",
    28592: "iso8859-2",
    28593: "iso8859-3",
    28594: "iso8859-4",
    28595: "iso8859-5",
    28596: "iso8859-6",
    28597: "iso8859-7",
    28598: "iso8859-8",
    28599: "iso8859-9",
    65001: "utf-8",
}

# Language (or full locale) -> OEM code page Windows assigns to it
_OEM_CODE_PAGES = {
    "en": 437,
    "en_GB": 850,
    "en_IE": 850,
    "de": 850,
    "fr": 850,
    "es": 850,
    "it": 850,
    "pt": 850,
    "pt_PT": 860,
    "nl": 850,
    "da": 850,
    "sv": 850,
    "fi": 850,
    "nb": 850,
    "nn": 850,
    "no": 850,
    "is": 850,
    "ca": 850,
    "cs": 852,
    "pl": 852,
    "hu": 852,
    "sk": 852,
    "sl": 852,
    "hr": 852,
    "ro": 852,
    "ru": 866,
    "uk": 866,
    "be": 866,
    "bg": 866,
    "el": 737,
    "tr": 857,
    "he": 862,
    "ar": 720,
    "lt": 775,
    "lv": 775,
    "et": 775,
    "th": 874,
    "ja": 932,
    "zh": 936,
    "zh_TW": 950,
    "zh_HK": 950,
    "ko": 949,
    "vi": 1258,
}

BytesLike = Union[bytes, bytearray, memoryview]


def codec_name(code_page: int) -> str:
    """Resolve a numeric code page to a Python codec name.

    Args:
        code_page: Code page identifier (0 selects the host ANSI code page).

    Returns:
        Canonical Python codec name.

    Raises:
        ZipCodePageError: If no codec exists for the code page.
    """
    if code_page == CP_ACP:
        name = locale.getpreferredencoding(False)
    else:
        name = _CODE_PAGE_NAMES.get(code_page, f"cp{code_page}")
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise ZipCodePageError(code_page) from None


def host_oem_code_page() -> int:
    """Return the OEM code page of the host.

    Windows reports it through ``GetOEMCP``. Elsewhere the code page is the
    one Windows would use for the language of the current ``LC_CTYPE``
    locale, falling back to the IBM PC code page for C/POSIX and unknown
    languages.
    """
    if sys.platform == "win32":
        import ctypes

        return ctypes.windll.kernel32.GetOEMCP()
    return oem_code_page_for_locale(locale.getlocale(locale.LC_CTYPE)[0])


def oem_code_page_for_locale(locale_name: Optional[str]) -> int:
    """Map a locale name such as ``de_DE`` to its DOS OEM code page."""
    if not locale_name:
        return IBM_PC_CODE_PAGE
    name = locale_name.split(".")[0].replace("-", "_")
    if name in _OEM_CODE_PAGES:
        return _OEM_CODE_PAGES[name]
    return _OEM_CODE_PAGES.get(name.split("_")[0].lower(), IBM_PC_CODE_PAGE)


def _initial_code_page() -> int:
    value = os.environ.get(CODE_PAGE_ENV_VAR)
    if value:
        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Ignoring %s=%r: code page must be an integer", CODE_PAGE_ENV_VAR, value
            )
    return host_oem_code_page()


_default_code_page: int = _initial_code_page()
logger.debug("Default code page initialised to %s", _default_code_page)


def get_default_code_page() -> int:
    """Return the process-wide default code page."""
    return _default_code_page


def set_default_code_page(value: int) -> None:
    """Replace the process-wide default code page.

    The value is not validated; an unknown code page raises
    ``ZipCodePageError`` on the next conversion that uses it.
    """
    global _default_code_page
    logger.debug("Default code page changed from %s to %s", _default_code_page, value)
    _default_code_page = value


@dataclass(frozen=True)
class CodecConfig:
    """Explicit code page selection passed to conversions.

    Conversions never fail on content: characters the code page cannot
    represent are written as ``?`` and invalid byte sequences decode to
    U+FFFD, as Windows code page conversions do.

    Attributes:
        code_page: Code page identifier used to encode and decode text.
    """

    code_page: int

    @classmethod
    def default(cls) -> "CodecConfig":
        """Snapshot the current process-wide default code page."""
        return cls(get_default_code_page())

    @property
    def encoding(self) -> str:
        return codec_name(self.code_page)

    def decode(self, data: Optional[BytesLike], length: Optional[int] = None) -> str:
        """Decode ``data[0:length]`` using this code page.

        Args:
            data: Raw bytes, or None.
            length: Number of leading bytes to convert (None for all).

        Returns:
            Decoded text; empty when ``data`` is None.

        Raises:
            ZipFormatError: If length is negative or exceeds the buffer.
            ZipCodePageError: If the code page is unknown.
        """
        if data is None:
            return ""
        if length is None:
            length = len(data)
        elif length < 0 or length > len(data):
            raise ZipFormatError(
                f"Invalid length: {length} (buffer holds {len(data)} bytes)"
            )

        return bytes(data[:length]).decode(self.encoding, errors="replace")

    def encode(self, text: Optional[str]) -> bytes:
        """Encode ``text`` using this code page.

        Args:
            text: Text to convert, or None.

        Returns:
            Encoded bytes; empty when ``text`` is None.

        Raises:
            ZipCodePageError: If the code page is unknown.
        """
        if text is None:
            return b""

        return text.encode(self.encoding, errors="replace")


def bytes_to_text(
    data: Optional[BytesLike],
    length: Optional[int] = None,
    *,
    config: Optional[CodecConfig] = None,
) -> str:
    """Convert raw entry name or comment bytes to text.

    Uses ``config`` when given, otherwise the process-wide default code page
    as it is at call time.
    """
    if config is None:
        config = CodecConfig.default()
    return config.decode(data, length)


def text_to_bytes(text: Optional[str], *, config: Optional[CodecConfig] = None) -> bytes:
    """Convert text to raw bytes for an entry name or comment."""
    if config is None:
        config = CodecConfig.default()
    return config.encode(text)
