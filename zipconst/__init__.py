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
ZIPCONST - the binary vocabulary of the ZIP archive format.

This library provides header signatures, fixed header sizes, version
thresholds, compression method identifiers and general purpose bit flags,
together with the legacy code page codec used for entry names and comments.
It uses only Python standard library modules.
"""

from .codec import (
    CodecConfig,
    bytes_to_text,
    get_default_code_page,
    set_default_code_page,
    text_to_bytes,
)
from .constants import CompressionMethod, GeneralBitFlags

__all__ = [
    "CodecConfig",
    "CompressionMethod",
    "GeneralBitFlags",
    "bytes_to_text",
    "get_default_code_page",
    "set_default_code_page",
    "text_to_bytes",
]

__version__ = "0.1.0"
